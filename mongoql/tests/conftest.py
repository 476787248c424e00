import mongomock
import pytest

from mongoql import string
from mongoql.testing import build_store


@pytest.fixture
def store():
    store = build_store(client=mongomock.MongoClient())
    yield store
    store.close()


@pytest.fixture
def user(store):
    return store.model(
        "user",
        {"name": string().refine(lambda it: {"create": it.required()})},
    )


@pytest.fixture
def users(store):
    return store.collection("users")
