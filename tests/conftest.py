# tests/conftest.py
import pytest

from mangaloom.client import MangaloomClient
from mangaloom.config import ApiSettings
from mangaloom.models.auth import AuthTokens

BASE_URL = "https://api.mangadex.test"

MANGA_ID = "32d76d19-8a05-4db0-9fc2-e0b0648fe9d0"
CHAPTER_ID = "0e94efb5-6cb5-49fd-b522-51b4460c9821"

BURNING_ERROR_ENVELOPE = {
    "result": "error",
    "errors": [
        {
            "id": "5e50fc7b-e185-45b1-a692-58e8091b22d2",
            "title": "The service is unavailable",
            "status": 503,
            "detail": "Servers are burning",
        }
    ],
}


def manga_payload(manga_id: str = MANGA_ID, title: str = "Solo Leveling") -> dict:
    """Build the `data` member of a manga envelope."""
    return {
        "id": manga_id,
        "type": "manga",
        "attributes": {
            "title": {"en": title},
            "altTitles": [{"ko": "나 혼자만 레벨업"}],
            "description": [],
            "links": None,
            "originalLanguage": "ko",
            "lastVolume": None,
            "lastChapter": None,
            "publicationDemographic": "shounen",
            "status": "completed",
            "year": 2018,
            "contentRating": "safe",
            "tags": [],
            "version": 3,
            "createdAt": "2019-08-25T10:51:55+00:00",
            "updatedAt": "2021-11-02T17:33:08+00:00",
        },
    }


def manga_envelope(manga_id: str = MANGA_ID, title: str = "Solo Leveling") -> dict:
    return {
        "result": "ok",
        "data": manga_payload(manga_id, title),
        "relationships": [
            {"id": "4218b1ee-cde4-44dc-84c7-d9a794a7e56d", "type": "author"}
        ],
    }


@pytest.fixture
def settings() -> ApiSettings:
    """Settings isolated from any local .env file."""
    return ApiSettings(_env_file=None, base_url=BASE_URL)


@pytest.fixture
def tokens() -> AuthTokens:
    return AuthTokens(session="sessiontoken", refresh="refreshtoken")


@pytest.fixture
def client(settings: ApiSettings) -> MangaloomClient:
    """A client with no stored credentials."""
    return MangaloomClient(settings)


@pytest.fixture
def authed_client(settings: ApiSettings, tokens: AuthTokens) -> MangaloomClient:
    """A client that starts with a stored token pair."""
    return MangaloomClient(settings, tokens=tokens)
