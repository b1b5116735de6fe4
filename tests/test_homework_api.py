"""Tests for the homework data API."""
import json

import pytest
from fastapi import status

from tests.conftest import make_payload

API = "/agenda/data"


def form(payload):
    return {"newHW": json.dumps(payload)}


def test_list_returns_record_set(authed_client, seeded_store):
    resp = authed_client.get(API)
    assert resp.status_code == status.HTTP_200_OK
    assert resp.headers["content-type"].startswith("application/json")
    data = resp.json()
    assert list(data) == ["2021-09-08T15:59:00+00:00", "2021-09-06T15:59:00+00:00"]
    assert data["2021-09-08T15:59:00+00:00"]["priority"] == "High"
    assert data["2021-09-06T15:59:00+00:00"]["priority"] == "Medium"


def test_list_empty(authed_client):
    resp = authed_client.get(API)
    assert resp.status_code == status.HTTP_200_OK
    assert resp.json() == {}


@pytest.mark.parametrize("sub, expected", [
    ("2021-09-08T11:59:00-0400", "High"),
    ("2021-09-06T11:59:00-0400", "Medium"),
    ("2021-09-01T11:59:00-0400", "Low"),
])
def test_post_classifies_record(authed_client, store, sub, expected):
    resp = authed_client.post(API, data=form(make_payload(sub=sub, priority="High")))
    assert resp.status_code == status.HTTP_200_OK
    assert resp.headers["content-type"].startswith("text/plain")
    body = json.loads(resp.text)
    assert body["priority"] == expected
    assert body["name"] == "a3-persistence"
    assert len(store) == 1


def test_put_replaces_record(authed_client, seeded_store):
    payload = make_payload(name="Lab 1 (late start)", due="2021-09-30T11:59:00-0400",
                           sub="2021-09-08T11:59:00-0400")
    resp = authed_client.put(API, data=form(payload))
    assert resp.status_code == status.HTTP_200_OK
    assert json.loads(resp.text)["priority"] == "Low"

    data = authed_client.get(API).json()
    assert len(data) == 2
    assert data["2021-09-08T15:59:00+00:00"]["name"] == "Lab 1 (late start)"


def test_post_accepts_json_body(authed_client, store, homework_payload):
    resp = authed_client.post(API, json={"newHW": json.dumps(homework_payload)})
    assert resp.status_code == status.HTTP_200_OK

    resp = authed_client.post(API, json=make_payload(sub="2021-09-05T11:59:00-0400"))
    assert resp.status_code == status.HTTP_200_OK
    assert len(store) == 2


@pytest.mark.parametrize("data", [
    {},
    {"newHW": "not json"},
    {"newHW": "[1, 2]"},
    {"newHW": json.dumps({"name": "Lab 3"})},
    {"newHW": json.dumps(make_payload(sub="0"))},
    {"newHW": json.dumps(make_payload(due="2021-09-09T11:59:00"))},
])
def test_post_rejects_malformed_payload(authed_client, store, data):
    resp = authed_client.post(API, data=data)
    assert resp.status_code == status.HTTP_400_BAD_REQUEST
    assert resp.json()["detail"]
    assert len(store) == 0


def test_delete_by_form_field(authed_client, seeded_store):
    resp = authed_client.request(
        "DELETE", API, data=form({"subDate": "2021-09-08T11:59:00-0400"})
    )
    assert resp.status_code == status.HTTP_200_OK
    assert resp.content == b""
    assert "2021-09-08T15:59:00+00:00" not in authed_client.get(API).json()
    assert len(seeded_store) == 1


def test_delete_by_json_body(authed_client, seeded_store):
    resp = authed_client.request("DELETE", API, json={"subDate": "2021-09-06T11:59:00-04:00"})
    assert resp.status_code == status.HTTP_200_OK
    assert "2021-09-06T11:59:00-0400" not in seeded_store


def test_delete_absent_record_is_404(authed_client, seeded_store):
    resp = authed_client.request(
        "DELETE", API, data=form({"subDate": "2020-01-01T00:00:00-0500"})
    )
    assert resp.status_code == status.HTTP_404_NOT_FOUND
    assert len(seeded_store) == 2


def test_delete_without_key_is_400(authed_client, seeded_store):
    resp = authed_client.request("DELETE", API, data=form({"name": "Lab 1"}))
    assert resp.status_code == status.HTTP_400_BAD_REQUEST
    assert len(seeded_store) == 2
