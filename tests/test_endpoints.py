"""Tests for the endpoint table, binding and query encoding."""

from datetime import UTC, datetime, timedelta, timezone
from uuid import UUID

import pytest

from conftest import MANGA_ID
from mangaloom.endpoints import (
    ENDPOINT_DEFINITIONS,
    PayloadKind,
    ResponseShape,
    bind,
    encode_body,
    encode_query,
    get_endpoint,
)
from mangaloom.models.author import AuthorRequest
from mangaloom.models.common import OrderType
from mangaloom.models.cover import CoverEdit
from mangaloom.models.custom_list import CustomListRequest
from mangaloom.models.manga import (
    ContentRating,
    MangaOrder,
    MangaQuery,
    MangaStatus,
    TagMode,
)
from mangaloom.models.report import ReportCategory


def test_encode_query_arrays_use_bracket_keys():
    pairs = encode_query(
        MangaQuery(
            includedTags=[UUID(MANGA_ID)],
            status=[MangaStatus.ONGOING, MangaStatus.HIATUS],
        )
    )

    assert ("includedTags[]", MANGA_ID) in pairs
    assert [v for k, v in pairs if k == "status[]"] == ["ongoing", "hiatus"]


def test_encode_query_nested_mapping_and_enums():
    pairs = encode_query(
        MangaQuery(
            includedTagsMode=TagMode.OR,
            order=MangaOrder(createdAt=OrderType.DESC),
            contentRating=[ContentRating.SAFE],
        )
    )

    assert ("includedTagsMode", "OR") in pairs
    assert ("order[createdAt]", "desc") in pairs
    assert ("contentRating[]", "safe") in pairs
    assert not any(key.startswith("order[updatedAt]") for key, _ in pairs)


def test_encode_query_drops_none_and_empty_lists():
    assert encode_query(MangaQuery()) == []
    assert encode_query({"title": None, "limit": 5}) == [("limit", "5")]


def test_encode_query_booleans_and_datetimes():
    pairs = encode_query(
        {
            "forcePort443": True,
            "other": False,
            "createdAtSince": datetime(2021, 3, 4, 5, 6, 7, 891011),
            "updatedAtSince": datetime(2021, 3, 4, 12, 0, 0, tzinfo=timezone(timedelta(hours=2))),
        }
    )

    assert pairs == [
        ("forcePort443", "true"),
        ("other", "false"),
        ("createdAtSince", "2021-03-04T05:06:07"),
        ("updatedAtSince", "2021-03-04T10:00:00"),
    ]


def test_encode_body_keeps_explicit_none_and_omits_unset_optionals():
    body = encode_body(CoverEdit(volume=None, version=2))
    assert body == {"volume": None, "version": 2}


def test_encode_body_sends_non_none_defaults():
    body = encode_body(CustomListRequest(name="Favourites"))

    assert body == {
        "name": "Favourites",
        "visibility": "private",
        "manga": [],
        "version": 1,
    }
    assert encode_body(AuthorRequest(name="Oda")) == {"name": "Oda", "version": 1}


def test_bind_substitutes_path_parameters():
    endpoint = bind("list.add_manga", manga_id=UUID(MANGA_ID), list_id="abc")

    assert endpoint.path == f"/manga/{MANGA_ID}/list/abc"
    assert endpoint.method == "POST"
    assert endpoint.requires_auth is True
    assert endpoint.shape is ResponseShape.DISCARD


def test_bind_renders_enum_path_parameter_by_value():
    endpoint = bind("report.reasons", category=ReportCategory.SCANLATION_GROUP)
    assert endpoint.path == "/report/reasons/scanlation_group"


def test_bind_rejects_missing_and_unexpected_path_parameters():
    with pytest.raises(ValueError):
        bind("manga.get")
    with pytest.raises(ValueError):
        bind("manga.get", id=MANGA_ID, extra="x")


def test_bind_rejects_payload_in_wrong_place():
    with pytest.raises(ValueError):
        bind("manga.get", id=MANGA_ID, query={"limit": 1})
    with pytest.raises(ValueError):
        bind("manga.list", body={"title": "x"})


def test_bind_validates_dict_payload_against_request_model():
    endpoint = bind("manga.list", query={"title": "Berserk", "includedTags": [MANGA_ID]})
    assert endpoint.query == [("title", "Berserk"), ("includedTags[]", MANGA_ID)]

    with pytest.raises(ValueError):
        bind("manga.list", query={"notAFilter": 1})


def test_bound_endpoint_is_frozen():
    endpoint = bind("manga.random")
    with pytest.raises(Exception):
        endpoint.path = "/elsewhere"


def test_unknown_endpoint_name():
    with pytest.raises(KeyError):
        get_endpoint("manga.teleport")


def test_table_rows_are_consistent():
    for name, definition in ENDPOINT_DEFINITIONS.items():
        assert definition.path.startswith("/"), name
        if definition.request_model is not None:
            assert definition.payload is not PayloadKind.NONE, name
        if definition.shape in (ResponseShape.PAGE, ResponseShape.COLLECTION):
            assert definition.payload_type is not None, name


def test_auth_endpoints_are_described():
    assert get_endpoint("auth.login").requires_auth is False
    assert get_endpoint("auth.refresh").payload is PayloadKind.BODY
    assert get_endpoint("auth.logout").requires_auth is True
    assert get_endpoint("auth.check").requires_auth is True


def test_naive_and_aware_datetimes_share_format():
    aware = encode_query({"d": datetime(2020, 1, 1, tzinfo=UTC)})
    naive = encode_query({"d": datetime(2020, 1, 1)})
    assert aware == naive == [("d", "2020-01-01T00:00:00")]
