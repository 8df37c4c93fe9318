import json
from dataclasses import dataclass
from datetime import datetime, timezone

import pytest
import responses
from responses import matchers

from civoclient.base import (
    BaseClient,
    CivoError,
    MultipleMatchesError,
    SimpleResponse,
    ZeroMatchesError,
    _parse_time,
    find_match,
)

BASE = "https://api.example.com"


@dataclass
class Item:
    id: str
    name: str


@pytest.fixture
def client():
    return BaseClient(api_key="token", region="TEST", base_url=BASE)


@pytest.fixture
def api():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_simple_response_from_dict_success():
    got = SimpleResponse.from_dict({"result": "success", "id": "730c960f"})
    assert got == SimpleResponse(id="730c960f", result="success")
    assert got.result == "success"


def test_simple_response_missing_fields_default_empty():
    got = SimpleResponse.from_dict({})
    assert got.result == ""
    assert got.id == ""


def test_get_sends_auth_and_region(api, client):
    api.add(
        responses.GET,
        BASE + "/v2/things",
        body=b"[1]",
        match=[matchers.query_param_matcher({"region": "TEST"})],
    )
    assert client.get("/v2/things") == b"[1]"
    assert api.calls[0].request.headers["Authorization"] == "bearer token"


def test_get_keeps_existing_query(api, client):
    api.add(
        responses.GET,
        BASE + "/v2/snapshots",
        body=b"[]",
        match=[matchers.query_param_matcher({"region": "TEST", "resource_type": "volume"})],
    )
    assert client.get("/v2/snapshots?resource_type=volume") == b"[]"


def test_post_sends_json_body(api, client):
    api.add(responses.POST, BASE + "/v2/things", body=b'{"result":"success"}')
    body = client.post("/v2/things", {"name": "x"})
    assert json.loads(body) == {"result": "success"}
    assert json.loads(api.calls[0].request.body) == {"name": "x"}


def test_put_and_delete(api, client):
    api.add(responses.PUT, BASE + "/v2/things/1", body=b"{}")
    api.add(responses.DELETE, BASE + "/v2/things/1", body=b'{"result":"success"}')
    assert client.put("/v2/things/1", {"a": 1}) == b"{}"
    assert client.delete("/v2/things/1") == b'{"result":"success"}'
    assert api.calls[1].request.method == "DELETE"


def test_error_status_raises(api, client):
    api.add(responses.GET, BASE + "/v2/missing", status=404, body="not found")
    with pytest.raises(CivoError) as info:
        client.get("/v2/missing")
    assert info.value.status == 404
    assert "not found" in str(info.value)


def test_decode_invalid_json_raises():
    with pytest.raises(CivoError):
        BaseClient._decode(b"{code: 1}")


def test_parse_time_utc():
    assert _parse_time("2018-01-01T00:00:00Z") == datetime(2018, 1, 1, tzinfo=timezone.utc)
    assert _parse_time("") is None


def test_parse_time_invalid():
    with pytest.raises(CivoError):
        _parse_time("yesterday")


ITEMS = [Item("12345", "RSA Key"), Item("233567", "Test")]


def test_find_match_partial_single():
    assert find_match(ITEMS, "34", ["name", "id"]).id == "12345"


def test_find_match_exact_wins_over_partials():
    items = [Item("abc", "one"), Item("abcd", "abc"), Item("xabc", "two")]
    assert find_match(items, "abc", ["id"]).id == "abc"


def test_find_match_multiple():
    with pytest.raises(MultipleMatchesError) as info:
        find_match(ITEMS, "23", ["name", "id"])
    assert str(info.value) == "MultipleMatchesError: unable to find 23 because there were multiple matches"


def test_find_match_zero():
    with pytest.raises(ZeroMatchesError) as info:
        find_match(ITEMS, "missing", ["name", "id"])
    assert str(info.value) == "ZeroMatchesError: unable to find missing, zero matches"


def test_find_match_noun_in_message():
    with pytest.raises(ZeroMatchesError) as info:
        find_match(ITEMS, "missing", ["name"], noun="team")
    assert str(info.value) == "ZeroMatchesError: unable to find missing team, zero matches"


def test_find_match_callable_fields():
    got = find_match(ITEMS, "TEST", [lambda item: item.name.upper()])
    assert got.id == "233567"