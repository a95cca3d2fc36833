"""Shared Pydantic models for MangaDex API payloads.

Nearly every entity the API returns has the same outer shape:

```json
{
    "result": "ok",
    "data": {"id": "<uuid>", "type": "manga", "attributes": {...}},
    "relationships": [{"id": "<uuid>", "type": "author"}]
}
```

`ApiObject` models the `data` member and `ApiData` models the payload of an
`"ok"` envelope (the `result` tag itself is consumed by the unwrapper).
Field names follow the API's camelCase spelling so that models round-trip
without aliases.
"""

from enum import Enum
from typing import Annotated, Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class ResourceType(str, Enum):
    """The `type` tag carried by API objects and relationships."""

    MANGA = "manga"
    CHAPTER = "chapter"
    COVER_ART = "cover_art"
    AUTHOR = "author"
    ARTIST = "artist"
    SCANLATION_GROUP = "scanlation_group"
    TAG = "tag"
    USER = "user"
    CUSTOM_LIST = "custom_list"
    MAPPING_ID = "mapping_id"
    REPORT = "report"


class OrderType(str, Enum):
    ASC = "asc"
    DESC = "desc"


LocalizedString = dict[str, str]
"""Text keyed by ISO language code, e.g. ``{"en": "Solo Leveling"}``."""


def _empty_list_as_dict(value: Any) -> Any:
    # The API serializes empty maps as [] in several places.
    if isinstance(value, list) and not value:
        return {}
    return value


LenientLocalizedString = Annotated[
    LocalizedString, BeforeValidator(_empty_list_as_dict)
]


class Relationship(BaseModel):
    """A reference from one API object to another."""

    id: UUID
    type: str

    model_config = ConfigDict(extra="allow")


AttributesType = TypeVar("AttributesType")
DataType = TypeVar("DataType")


class ApiObject(BaseModel, Generic[AttributesType]):
    """An identified, typed API entity.

    Attributes:
        id: The entity UUID.
        type: The resource type tag, comparable with `ResourceType` members.
        attributes: The entity-specific attribute model.
    """

    id: UUID
    type: str
    attributes: AttributesType

    model_config = ConfigDict(extra="allow")


class ApiData(BaseModel, Generic[DataType]):
    """Payload of an `"ok"` envelope carrying a single `data` member.

    Attributes:
        data: The entity (or list of ids for read markers).
        relationships: References to related entities. Defaults to empty.
    """

    data: DataType
    relationships: list[Relationship] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class PaginationQuery(BaseModel):
    """Offset pagination parameters accepted by list endpoints."""

    limit: int | None = None
    offset: int | None = None

    model_config = ConfigDict(extra="forbid")
