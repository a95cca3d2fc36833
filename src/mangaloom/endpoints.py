"""Defines the MangaDex endpoint table and the per-call endpoint descriptor.

Every remote operation is one `EndpointDefinition` row in
`ENDPOINT_DEFINITIONS`: its HTTP method, path template, where its payload goes
(query string, JSON body or nowhere), whether it needs a session token, how its
response is shaped and which model the payload decodes into.

`EndpointDefinition.bind` substitutes path parameters and encodes the payload,
producing an immutable `Endpoint` that `MangaloomClient.dispatch` executes.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from string import Formatter
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .models.at_home import AtHomeQuery, AtHomeServer
from .models.auth import (
    CheckTokenResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    RefreshTokenResponse,
)
from .models.author import AuthorData, AuthorQuery, AuthorRequest
from .models.chapter import ChapterData, ChapterQuery, ChapterUpdate
from .models.common import PaginationQuery
from .models.cover import CoverData, CoverEdit, CoverQuery
from .models.custom_list import CustomListData, CustomListRequest
from .models.group import GroupQuery, GroupRequest, ScanlationGroupData
from .models.legacy import LegacyMappingRequest, MappingIdData
from .models.manga import (
    AggregateQuery,
    BatchReadMarkersQuery,
    FeedQuery,
    MangaAggregate,
    MangaData,
    MangaQuery,
    MangaReadingStatusBody,
    MangaReadingStatuses,
    MangaRequest,
    ReadingStatusQuery,
    ReadMarkersData,
    TagData,
)
from .models.report import CreateReport, ReportData, SolveCaptcha
from .models.user import (
    CompleteAccountRecover,
    CreateAccount,
    EmailRequest,
    UpdateEmail,
    UpdatePassword,
    UserData,
    UserQuery,
)

QUERY_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


class PayloadKind(str, Enum):
    NONE = "none"
    QUERY = "query"
    BODY = "body"


class ResponseShape(str, Enum):
    """How the dispatcher decodes a response body."""

    SINGLE = "single"
    """One envelope; an error envelope raises `ApiError`."""
    DISCARD = "discard"
    """One envelope whose payload is ignored; the call returns None."""
    PAGE = "page"
    """`{results, limit, offset, total}` decoded into a `Page`."""
    COLLECTION = "collection"
    """A bare JSON array of envelopes."""
    RAW = "raw"
    """A JSON document with no envelope, validated directly."""


QueryPairs = list[tuple[str, str]]


def _render_scalar(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return value.strftime(QUERY_DATETIME_FORMAT)
    return str(value)


def _encode_into(pairs: QueryPairs, key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_into(pairs, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, list | tuple | set | frozenset):
        for item in value:
            _encode_into(pairs, f"{key}[]", item)
    else:
        pairs.append((key, _render_scalar(value)))


def encode_query(query: BaseModel | Mapping[str, Any] | None) -> QueryPairs:
    """Encode a filter model or mapping as MangaDex query-string pairs.

    Lists become repeated `key[]` entries, nested mappings become `key[sub]`,
    enums render their value, booleans render `true`/`false`, datetimes render
    `YYYY-MM-DDTHH:MM:SS` (aware values are converted to UTC) and `None`
    fields are dropped.

    Examples:
        >>> encode_query({"ids": ["a", "b"], "order": {"createdAt": "asc"}})
        [('ids[]', 'a'), ('ids[]', 'b'), ('order[createdAt]', 'asc')]
    """
    if query is None:
        return []
    if isinstance(query, BaseModel):
        query = query.model_dump(exclude_none=True)
    pairs: QueryPairs = []
    for key, value in query.items():
        _encode_into(pairs, key, value)
    return pairs


def encode_body(body: BaseModel | Mapping[str, Any] | list[Any] | None) -> Any:
    """Serialize a request body.

    Optional fields left at a `None` default are omitted; every other field,
    including defaults such as `version=1`, is sent. A field explicitly set
    to `None` is sent as `null`.
    """
    if not isinstance(body, BaseModel):
        return body
    fields = type(body).model_fields
    return {
        key: value
        for key, value in body.model_dump(mode="json").items()
        if key in body.model_fields_set
        or key not in fields
        or fields[key].default is not None
    }


class Endpoint(BaseModel):
    """An immutable, fully resolved request description.

    Built by `EndpointDefinition.bind` (or by hand) and consumed once by
    `MangaloomClient.dispatch`.

    Attributes:
        name: Table key, used in log lines only.
        method: HTTP method.
        path: Path with parameters substituted, relative to the base URL.
        query: Encoded query-string pairs, or None.
        body: JSON-ready request body, or None.
        requires_auth: Whether a session token must be stored.
        shape: How the response is decoded.
        payload_type: Type the response payload validates into.
    """

    name: str = ""
    method: str
    path: str
    query: QueryPairs | None = None
    body: Any = None
    requires_auth: bool = False
    shape: ResponseShape = ResponseShape.SINGLE
    payload_type: Any = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class EndpointDefinition(BaseModel):
    """One row of the endpoint table.

    Attributes:
        method: HTTP method.
        path: Path template, e.g. `/manga/{id}/feed`.
        payload: Where a bound payload is sent.
        requires_auth: Whether a session token is required.
        shape: Response shape.
        payload_type: Response payload type handed to the unwrapper.
        request_model: Optional model that dict payloads are validated against.
    """

    method: str
    path: str
    payload: PayloadKind = PayloadKind.NONE
    requires_auth: bool = False
    shape: ResponseShape = ResponseShape.SINGLE
    payload_type: Any = None
    request_model: type[BaseModel] | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def path_params(self) -> list[str]:
        """Names of the placeholders in the path template."""
        return [name for _, name, _, _ in Formatter().parse(self.path) if name]

    def bind(
        self,
        *,
        name: str = "",
        query: BaseModel | Mapping[str, Any] | None = None,
        body: BaseModel | Mapping[str, Any] | list[Any] | None = None,
        **path_params: Any,
    ) -> Endpoint:
        """Resolve this row into an `Endpoint`.

        Path parameters are rendered like query scalars: UUIDs in their
        hyphenated lowercase form, enums by value.

        Raises:
            ValueError: On missing or unexpected path parameters, on a payload
                sent where this row takes none, or on a dict payload that
                fails `request_model` validation.
        """
        expected = set(self.path_params)
        missing = expected - path_params.keys()
        unexpected = path_params.keys() - expected
        if missing or unexpected:
            raise ValueError(
                f"Path parameters for {self.path!r} mismatch: "
                f"missing={sorted(missing)}, unexpected={sorted(unexpected)}"
            )
        path = self.path.format(
            **{k: _render_scalar(v) for k, v in path_params.items()}
        )

        if query is not None and self.payload is not PayloadKind.QUERY:
            raise ValueError(f"{self.method} {self.path} does not take a query payload")
        if body is not None and self.payload is not PayloadKind.BODY:
            raise ValueError(f"{self.method} {self.path} does not take a body payload")

        if self.payload is PayloadKind.QUERY:
            query = self._validated(query)
        elif self.payload is PayloadKind.BODY:
            body = self._validated(body)

        return Endpoint(
            name=name,
            method=self.method,
            path=path,
            query=encode_query(query) if query is not None else None,
            body=encode_body(body),
            requires_auth=self.requires_auth,
            shape=self.shape,
            payload_type=self.payload_type,
        )

    def _validated(self, payload: Any) -> Any:
        if (
            payload is None
            or self.request_model is None
            or isinstance(payload, BaseModel)
            or not isinstance(payload, Mapping)
        ):
            return payload
        try:
            return self.request_model.model_validate(payload)
        except ValidationError as e:
            raise ValueError(
                f"Invalid payload for {self.method} {self.path}: {e}"
            ) from e


GET, POST, PUT, DELETE = "GET", "POST", "PUT", "DELETE"
_NONE, _QUERY, _BODY = PayloadKind.NONE, PayloadKind.QUERY, PayloadKind.BODY
_SINGLE, _DISCARD, _PAGE, _COLLECTION, _RAW = (
    ResponseShape.SINGLE,
    ResponseShape.DISCARD,
    ResponseShape.PAGE,
    ResponseShape.COLLECTION,
    ResponseShape.RAW,
)


def _row(
    method: str,
    path: str,
    payload: PayloadKind = _NONE,
    shape: ResponseShape = _SINGLE,
    payload_type: Any = None,
    request_model: type[BaseModel] | None = None,
    *,
    auth: bool = False,
) -> EndpointDefinition:
    return EndpointDefinition(
        method=method,
        path=path,
        payload=payload,
        requires_auth=auth,
        shape=shape,
        payload_type=payload_type,
        request_model=request_model,
    )


ENDPOINT_DEFINITIONS: dict[str, EndpointDefinition] = {
    # --- Infrastructure ---
    "ping": _row(GET, "/ping", shape=_RAW, payload_type=str),
    # --- Auth ---
    "auth.login": _row(POST, "/auth/login", _BODY, _SINGLE, LoginResponse, LoginRequest),
    "auth.check": _row(GET, "/auth/check", shape=_SINGLE, payload_type=CheckTokenResponse, auth=True),
    "auth.logout": _row(POST, "/auth/logout", shape=_DISCARD, auth=True),
    "auth.refresh": _row(
        POST, "/auth/refresh", _BODY, _SINGLE, RefreshTokenResponse, RefreshTokenRequest
    ),
    # --- Account ---
    "account.create": _row(POST, "/account/create", _BODY, _SINGLE, UserData, CreateAccount),
    "account.activate": _row(GET, "/account/activate/{code}", shape=_DISCARD),
    "account.resend_activation": _row(
        POST, "/account/activate/resend", _BODY, _DISCARD, None, EmailRequest
    ),
    "account.recover": _row(POST, "/account/recover", _BODY, _DISCARD, None, EmailRequest),
    "account.complete_recover": _row(
        POST, "/account/recover/{code}", _BODY, _DISCARD, None, CompleteAccountRecover
    ),
    # --- Manga ---
    "manga.list": _row(GET, "/manga", _QUERY, _PAGE, MangaData, MangaQuery),
    "manga.create": _row(POST, "/manga", _BODY, _SINGLE, MangaData, MangaRequest, auth=True),
    "manga.get": _row(GET, "/manga/{id}", shape=_SINGLE, payload_type=MangaData),
    "manga.update": _row(PUT, "/manga/{id}", _BODY, _SINGLE, MangaData, MangaRequest, auth=True),
    "manga.delete": _row(DELETE, "/manga/{id}", shape=_DISCARD, auth=True),
    "manga.follow": _row(POST, "/manga/{id}/follow", shape=_DISCARD, auth=True),
    "manga.unfollow": _row(DELETE, "/manga/{id}/follow", shape=_DISCARD, auth=True),
    "manga.feed": _row(GET, "/manga/{id}/feed", _QUERY, _PAGE, ChapterData, FeedQuery),
    "manga.random": _row(GET, "/manga/random", shape=_SINGLE, payload_type=MangaData),
    "manga.tags": _row(GET, "/manga/tag", shape=_COLLECTION, payload_type=TagData),
    "manga.read_markers": _row(
        GET, "/manga/{id}/read", shape=_SINGLE, payload_type=ReadMarkersData, auth=True
    ),
    "manga.batch_read_markers": _row(
        GET, "/manga/read", _QUERY, _SINGLE, ReadMarkersData, BatchReadMarkersQuery, auth=True
    ),
    "manga.reading_statuses": _row(
        GET, "/manga/status", _QUERY, _SINGLE, MangaReadingStatuses, ReadingStatusQuery, auth=True
    ),
    "manga.reading_status": _row(
        GET, "/manga/{id}/status", shape=_SINGLE, payload_type=MangaReadingStatusBody, auth=True
    ),
    "manga.update_reading_status": _row(
        POST, "/manga/{id}/status", _BODY, _DISCARD, None, MangaReadingStatusBody, auth=True
    ),
    "manga.aggregate": _row(
        GET, "/manga/{id}/aggregate", _QUERY, _SINGLE, MangaAggregate, AggregateQuery
    ),
    "manga.followed": _row(
        GET, "/user/follows/manga", _QUERY, _PAGE, MangaData, PaginationQuery, auth=True
    ),
    "manga.followed_feed": _row(
        GET, "/user/follows/manga/feed", _QUERY, _PAGE, ChapterData, FeedQuery, auth=True
    ),
    # --- Chapter ---
    "chapter.list": _row(GET, "/chapter", _QUERY, _PAGE, ChapterData, ChapterQuery),
    "chapter.get": _row(GET, "/chapter/{id}", shape=_SINGLE, payload_type=ChapterData),
    "chapter.update": _row(
        PUT, "/chapter/{id}", _BODY, _SINGLE, ChapterData, ChapterUpdate, auth=True
    ),
    "chapter.delete": _row(DELETE, "/chapter/{id}", shape=_DISCARD, auth=True),
    "chapter.mark_read": _row(POST, "/chapter/{id}/read", shape=_DISCARD, auth=True),
    "chapter.mark_unread": _row(DELETE, "/chapter/{id}/read", shape=_DISCARD, auth=True),
    # --- Cover ---
    "cover.list": _row(GET, "/cover", _QUERY, _PAGE, CoverData, CoverQuery),
    "cover.get": _row(GET, "/cover/{id}", shape=_SINGLE, payload_type=CoverData),
    "cover.edit": _row(PUT, "/cover/{id}", _BODY, _SINGLE, CoverData, CoverEdit, auth=True),
    "cover.delete": _row(DELETE, "/cover/{id}", shape=_DISCARD, auth=True),
    # --- Author ---
    "author.list": _row(GET, "/author", _QUERY, _PAGE, AuthorData, AuthorQuery),
    "author.get": _row(GET, "/author/{id}", shape=_SINGLE, payload_type=AuthorData),
    "author.create": _row(POST, "/author", _BODY, _SINGLE, AuthorData, AuthorRequest, auth=True),
    "author.update": _row(
        PUT, "/author/{id}", _BODY, _SINGLE, AuthorData, AuthorRequest, auth=True
    ),
    "author.delete": _row(DELETE, "/author/{id}", shape=_DISCARD, auth=True),
    # --- Scanlation group ---
    "group.list": _row(GET, "/group", _QUERY, _PAGE, ScanlationGroupData, GroupQuery),
    "group.get": _row(GET, "/group/{id}", shape=_SINGLE, payload_type=ScanlationGroupData),
    "group.create": _row(
        POST, "/group", _BODY, _SINGLE, ScanlationGroupData, GroupRequest, auth=True
    ),
    "group.update": _row(
        PUT, "/group/{id}", _BODY, _SINGLE, ScanlationGroupData, GroupRequest, auth=True
    ),
    "group.delete": _row(DELETE, "/group/{id}", shape=_DISCARD, auth=True),
    "group.follow": _row(POST, "/group/{id}/follow", shape=_DISCARD, auth=True),
    "group.unfollow": _row(DELETE, "/group/{id}/follow", shape=_DISCARD, auth=True),
    "group.followed": _row(
        GET, "/user/follows/group", _QUERY, _PAGE, ScanlationGroupData, PaginationQuery, auth=True
    ),
    # --- Custom list ---
    "list.create": _row(
        POST, "/list", _BODY, _SINGLE, CustomListData, CustomListRequest, auth=True
    ),
    "list.get": _row(GET, "/list/{id}", shape=_SINGLE, payload_type=CustomListData),
    "list.update": _row(
        PUT, "/list/{id}", _BODY, _SINGLE, CustomListData, CustomListRequest, auth=True
    ),
    "list.delete": _row(DELETE, "/list/{id}", shape=_DISCARD, auth=True),
    "list.add_manga": _row(
        POST, "/manga/{manga_id}/list/{list_id}", shape=_DISCARD, auth=True
    ),
    "list.remove_manga": _row(
        DELETE, "/manga/{manga_id}/list/{list_id}", shape=_DISCARD, auth=True
    ),
    "list.mine": _row(
        GET, "/user/list", _QUERY, _PAGE, CustomListData, PaginationQuery, auth=True
    ),
    "list.of_user": _row(
        GET, "/user/{id}/list", _QUERY, _PAGE, CustomListData, PaginationQuery, auth=True
    ),
    "list.feed": _row(GET, "/list/{id}/feed", _QUERY, _PAGE, ChapterData, FeedQuery),
    # --- User ---
    "user.list": _row(GET, "/user", _QUERY, _PAGE, UserData, UserQuery, auth=True),
    "user.get": _row(GET, "/user/{id}", shape=_SINGLE, payload_type=UserData),
    "user.me": _row(GET, "/user/me", shape=_SINGLE, payload_type=UserData, auth=True),
    "user.delete": _row(DELETE, "/user/{id}", shape=_DISCARD, auth=True),
    "user.approve_deletion": _row(POST, "/user/delete/{code}", shape=_DISCARD, auth=True),
    "user.update_password": _row(
        POST, "/user/password", _BODY, _DISCARD, None, UpdatePassword, auth=True
    ),
    "user.update_email": _row(
        POST, "/user/email", _BODY, _DISCARD, None, UpdateEmail, auth=True
    ),
    "user.followed": _row(
        GET, "/user/follows/user", _QUERY, _PAGE, UserData, PaginationQuery, auth=True
    ),
    # --- Misc ---
    "at_home.server": _row(
        GET, "/at-home/server/{chapter_id}", _QUERY, _RAW, AtHomeServer, AtHomeQuery
    ),
    "legacy.mapping": _row(
        POST, "/legacy/mapping", _BODY, _COLLECTION, MappingIdData, LegacyMappingRequest
    ),
    "report.reasons": _row(
        GET, "/report/reasons/{category}", _QUERY, _PAGE, ReportData, PaginationQuery
    ),
    "report.create": _row(POST, "/report", _BODY, _DISCARD, None, CreateReport, auth=True),
    "captcha.solve": _row(POST, "/captcha/solve", _BODY, _DISCARD, None, SolveCaptcha),
}


def get_endpoint(name: str) -> EndpointDefinition:
    """Look up a table row by name.

    Raises:
        KeyError: If no endpoint with that name is defined.
    """
    try:
        return ENDPOINT_DEFINITIONS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {name!r}") from None


def bind(name: str, **kwargs: Any) -> Endpoint:
    """Shorthand for `get_endpoint(name).bind(name=name, **kwargs)`."""
    return get_endpoint(name).bind(name=name, **kwargs)


__all__ = [
    "ENDPOINT_DEFINITIONS",
    "Endpoint",
    "EndpointDefinition",
    "PayloadKind",
    "QueryPairs",
    "ResponseShape",
    "bind",
    "encode_body",
    "encode_query",
    "get_endpoint",
]
