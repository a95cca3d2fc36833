"""Models for translating legacy numeric ids into current UUIDs."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .common import ApiData, ApiObject


class MappingType(str, Enum):
    GROUP = "group"
    MANGA = "manga"
    CHAPTER = "chapter"
    TAG = "tag"


class MappingIdAttributes(BaseModel):
    type: MappingType
    legacyId: int
    newId: UUID

    model_config = ConfigDict(extra="allow")


MappingId = ApiObject[MappingIdAttributes]
MappingIdData = ApiData[MappingId]


class LegacyMappingRequest(BaseModel):
    """Body of `POST /legacy/mapping`."""

    type: MappingType
    ids: list[int]

    model_config = ConfigDict(extra="forbid")
