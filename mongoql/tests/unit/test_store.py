"""
Tests for the document store handle and the process default store.
"""

import threading
import time
from unittest.mock import patch

import mongomock
import pytest
from django.test import override_settings

from mongoql import model, string
from mongoql.core.exceptions import PersistenceError, StoreConfigurationError
from mongoql.core.store import (
    DocumentStore,
    close_default_store,
    connect,
    get_default_store,
)


@pytest.fixture
def default_store():
    store = connect(client=mongomock.MongoClient(), database="mongoql_default")
    yield store
    close_default_store()


@pytest.mark.unit
class TestDocumentStore:
    def test_database_from_uri(self):
        store = DocumentStore("mongodb://localhost:27017/blog")
        assert store._resolve_database_name() == "blog"

    def test_explicit_database_wins(self):
        store = DocumentStore("mongodb://localhost:27017/blog", database="other")
        assert store._resolve_database_name() == "other"

    def test_default_database_name(self):
        assert DocumentStore("mongodb://localhost:27017")._resolve_database_name() == "mongoql"

    def test_invalid_uri(self):
        with pytest.raises(StoreConfigurationError):
            DocumentStore("http://localhost")._resolve_database_name()

    def test_open_without_uri_or_client(self):
        with pytest.raises(StoreConfigurationError):
            DocumentStore().open()

    def test_closed_store_has_no_collections(self):
        store = DocumentStore(client=mongomock.MongoClient(), database="closed")
        assert not store.is_open
        with pytest.raises(PersistenceError):
            store.collection("tweets")

    def test_context_manager(self):
        with DocumentStore(client=mongomock.MongoClient(), database="ctx") as store:
            assert store.is_open
            assert store.collection("tweets").name == "tweets"
        assert not store.is_open

    def test_borrowed_client_is_not_closed(self):
        client = mongomock.MongoClient()
        store = DocumentStore(client=client, database="borrowed").open()
        store.close()
        # still usable by its owner
        client["borrowed"]["tweets"].insert_one({"body": "hi"})
        assert client["borrowed"]["tweets"].count_documents({}) == 1

    def test_models_share_the_store(self):
        store = DocumentStore(client=mongomock.MongoClient(), database="shared").open()
        tweet = store.model("tweet", {"body": string()})
        assert tweet.store is store
        assert tweet.collection.database.name == "shared"


@pytest.mark.unit
class TestDefaultStore:
    def test_connect_sets_default(self, default_store):
        assert get_default_store() is default_store

    def test_models_without_store_use_default(self, default_store):
        tweet = model("tweet", {"body": string()})
        tweet.create({"body": "hello"})

        assert default_store.collection("tweets").count_documents({"body": "hello"}) == 1

    def test_connect_replaces_previous_default(self, default_store):
        replacement = connect(client=mongomock.MongoClient(), database="replacement")
        assert get_default_store() is replacement
        assert not default_store.is_open

    @override_settings(MONGOQL={"DATABASE": "from_settings"})
    def test_database_name_from_settings(self):
        store = connect(client=mongomock.MongoClient())
        try:
            assert store.database.name == "from_settings"
        finally:
            close_default_store()

    def test_concurrent_first_use_shares_one_store(self):
        close_default_store()
        original_open = DocumentStore.open

        def slow_open(self):
            time.sleep(0.1)
            return original_open(self)

        barrier = threading.Barrier(2)
        results = []

        def first_request():
            barrier.wait()
            results.append(get_default_store())

        with patch.object(DocumentStore, "open", slow_open), patch(
            "mongoql.core.store.MongoClient", mongomock.MongoClient
        ):
            threads = [threading.Thread(target=first_request) for _ in range(2)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        try:
            assert len(results) == 2
            assert results[0] is results[1]
            assert results[0].is_open
        finally:
            close_default_store()
