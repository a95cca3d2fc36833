"""Pydantic models for MangaDex API entities, request bodies and filters."""

from .at_home import AtHomeQuery, AtHomeServer
from .auth import (
    AuthTokens,
    CheckTokenResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    RefreshTokenResponse,
)
from .author import Author, AuthorAttributes, AuthorData, AuthorOrder, AuthorQuery, AuthorRequest
from .chapter import (
    Chapter,
    ChapterAttributes,
    ChapterData,
    ChapterOrder,
    ChapterQuery,
    ChapterUpdate,
)
from .common import (
    ApiData,
    ApiObject,
    LenientLocalizedString,
    LocalizedString,
    OrderType,
    PaginationQuery,
    Relationship,
    ResourceType,
)
from .cover import Cover, CoverAttributes, CoverData, CoverEdit, CoverOrder, CoverQuery
from .custom_list import (
    CustomList,
    CustomListAttributes,
    CustomListData,
    CustomListRequest,
    CustomListVisibility,
)
from .errors import ApiErrorRecord
from .group import (
    GroupQuery,
    GroupRequest,
    ScanlationGroup,
    ScanlationGroupAttributes,
    ScanlationGroupData,
)
from .legacy import LegacyMappingRequest, MappingId, MappingIdAttributes, MappingIdData, MappingType
from .manga import (
    AggregateQuery,
    BatchReadMarkersQuery,
    ChapterAggregate,
    ContentRating,
    Demographic,
    FeedOrder,
    FeedQuery,
    Links,
    Manga,
    MangaAggregate,
    MangaAttributes,
    MangaData,
    MangaOrder,
    MangaQuery,
    MangaReadingStatus,
    MangaReadingStatusBody,
    MangaReadingStatuses,
    MangaRequest,
    MangaStatus,
    ReadingStatusQuery,
    ReadMarkersData,
    Tag,
    TagAttributes,
    TagData,
    TagMode,
    VolumeAggregate,
)
from .report import CreateReport, Report, ReportAttributes, ReportCategory, ReportData, SolveCaptcha
from .user import (
    CompleteAccountRecover,
    CreateAccount,
    EmailRequest,
    UpdateEmail,
    UpdatePassword,
    User,
    UserAttributes,
    UserData,
    UserOrder,
    UserQuery,
)

__all__ = [
    "AggregateQuery",
    "ApiData",
    "ApiErrorRecord",
    "ApiObject",
    "AtHomeQuery",
    "AtHomeServer",
    "AuthTokens",
    "Author",
    "AuthorAttributes",
    "AuthorData",
    "AuthorOrder",
    "AuthorQuery",
    "AuthorRequest",
    "BatchReadMarkersQuery",
    "Chapter",
    "ChapterAggregate",
    "ChapterAttributes",
    "ChapterData",
    "ChapterOrder",
    "ChapterQuery",
    "ChapterUpdate",
    "CheckTokenResponse",
    "CompleteAccountRecover",
    "ContentRating",
    "Cover",
    "CoverAttributes",
    "CoverData",
    "CoverEdit",
    "CoverOrder",
    "CoverQuery",
    "CreateAccount",
    "CreateReport",
    "CustomList",
    "CustomListAttributes",
    "CustomListData",
    "CustomListRequest",
    "CustomListVisibility",
    "Demographic",
    "EmailRequest",
    "FeedOrder",
    "FeedQuery",
    "GroupQuery",
    "GroupRequest",
    "LegacyMappingRequest",
    "LenientLocalizedString",
    "Links",
    "LocalizedString",
    "LoginRequest",
    "LoginResponse",
    "Manga",
    "MangaAggregate",
    "MangaAttributes",
    "MangaData",
    "MangaOrder",
    "MangaQuery",
    "MangaReadingStatus",
    "MangaReadingStatusBody",
    "MangaReadingStatuses",
    "MangaRequest",
    "MangaStatus",
    "MappingId",
    "MappingIdAttributes",
    "MappingIdData",
    "MappingType",
    "OrderType",
    "PaginationQuery",
    "ReadMarkersData",
    "ReadingStatusQuery",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "Relationship",
    "Report",
    "ReportAttributes",
    "ReportCategory",
    "ReportData",
    "ResourceType",
    "ScanlationGroup",
    "ScanlationGroupAttributes",
    "ScanlationGroupData",
    "SolveCaptcha",
    "Tag",
    "TagAttributes",
    "TagData",
    "TagMode",
    "UpdateEmail",
    "UpdatePassword",
    "User",
    "UserAttributes",
    "UserData",
    "UserOrder",
    "UserQuery",
    "VolumeAggregate",
]
