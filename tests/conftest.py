"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from agenda.database import backing_store
from agenda.homework import RecordStore, get_record_store, parse_record


DUE = "2021-09-09T11:59:00-0400"


def make_payload(name="a3-persistence", course="Webware", due=DUE,
                 sub="2021-09-08T11:59:00-0400", **extra):
    payload = {"name": name, "course": course, "dueDate": due, "subDate": sub}
    payload.update(extra)
    return payload


@pytest.fixture
def homework_payload():
    return make_payload()


@pytest.fixture
def store():
    """Empty record store for each test."""
    return RecordStore()


@pytest.fixture
def seeded_store(store):
    store.upsert(parse_record(make_payload(name="Lab 1", sub="2021-09-08T11:59:00-0400")))
    store.upsert(parse_record(make_payload(name="Lab 2", sub="2021-09-06T11:59:00-0400")))
    return store


@pytest.fixture
def client(store):
    from agenda.main import app

    backing_store.ready = True
    app.dependency_overrides[get_record_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    backing_store.ready = False


@pytest.fixture
def authed_client(client):
    client.cookies.set("access_token", "gho_test-token")
    return client
