"""Resource clients grouping the MangaDex endpoints by API area."""

from .author_client import AuthorClient
from .base_client import BaseResourceClient
from .chapter_client import ChapterClient
from .cover_client import CoverClient
from .custom_list_client import CustomListClient
from .group_client import GroupClient
from .manga_client import MangaClient
from .misc_client import MiscClient
from .user_client import AccountClient, UserClient

__all__ = [
    "AccountClient",
    "AuthorClient",
    "BaseResourceClient",
    "ChapterClient",
    "CoverClient",
    "CustomListClient",
    "GroupClient",
    "MangaClient",
    "MiscClient",
    "UserClient",
]
