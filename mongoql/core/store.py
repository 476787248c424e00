"""
Document store handle.

A ``DocumentStore`` wraps one ``pymongo.MongoClient`` and one database. It is
opened once, shared by every model built from it, and closed explicitly (or
by leaving a ``with`` block). Each model maps to one collection named by its
plural.
"""

import logging
import threading
from typing import Any, Optional

from pymongo import MongoClient
from pymongo.errors import InvalidURI
from pymongo.uri_parser import parse_uri

from ..defaults import DEFAULT_DATABASE_NAME
from .exceptions import PersistenceError, StoreConfigurationError
from .settings import get_settings

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Explicit handle on a MongoDB database.

    Args:
        uri: MongoDB connection URI. Ignored when ``client`` is given.
        database: Database name. Falls back to the database named in the
            URI, then to ``mongoql``.
        client: An already constructed client (``pymongo.MongoClient`` or a
            compatible object such as ``mongomock.MongoClient``). The store
            does not close clients it did not create.
        **client_options: Extra keyword arguments for ``MongoClient``.

    Example:
        with DocumentStore("mongodb://localhost:27017/blog") as store:
            tweet = store.model("tweet", {"body": string()})
            tweet.create({"body": "hello"})
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        database: Optional[str] = None,
        client: Any = None,
        **client_options: Any,
    ):
        self.uri = uri
        self.database_name = database
        self.client_options = client_options
        self._client = client
        self._owns_client = client is None
        self._database = None

    def _resolve_database_name(self) -> str:
        if self.database_name:
            return self.database_name
        if self.uri:
            try:
                parsed = parse_uri(self.uri)
            except InvalidURI as exc:
                raise StoreConfigurationError(f"Invalid MongoDB URI: {exc}") from exc
            if parsed.get("database"):
                return parsed["database"]
        return DEFAULT_DATABASE_NAME

    def open(self) -> "DocumentStore":
        """Connect the client (if needed) and select the database."""
        if self._database is not None:
            return self
        if self._client is None:
            if not self.uri:
                raise StoreConfigurationError("No MongoDB URI configured")
            self._client = MongoClient(self.uri, **self.client_options)
            self._owns_client = True
        name = self._resolve_database_name()
        self._database = self._client[name]
        logger.info("Opened document store database '%s'", name)
        return self

    def close(self) -> None:
        """Release the database handle and close the client if owned."""
        if self._database is None:
            return
        name = self._database.name
        self._database = None
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None
        logger.info("Closed document store database '%s'", name)

    @property
    def is_open(self) -> bool:
        return self._database is not None

    @property
    def database(self):
        if self._database is None:
            raise PersistenceError("Document store is not open")
        return self._database

    def collection(self, name: str):
        """Return the collection backing a model."""
        return self.database[name]

    def model(self, singular: str, attributes: Optional[dict] = None):
        """Build a model whose documents live in this store."""
        from ..pipeline.model import Model

        return Model(singular, attributes or {}, store=self)

    def __enter__(self) -> "DocumentStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"<DocumentStore uri={self.uri!r} database={self.database_name!r} {state}>"


_default_store: Optional[DocumentStore] = None
_default_lock = threading.Lock()


def _open_store(
    uri: Optional[str] = None,
    database: Optional[str] = None,
    client: Any = None,
    **client_options: Any,
) -> DocumentStore:
    """Open a store, filling missing arguments from ``settings.MONGOQL``."""
    config = get_settings()
    if client is None:
        uri = uri or config.uri
        client_options.setdefault(
            "serverSelectionTimeoutMS", config.server_selection_timeout_ms
        )
    return DocumentStore(
        uri=uri,
        database=database or config.database,
        client=client,
        **client_options,
    ).open()


def connect(
    uri: Optional[str] = None,
    database: Optional[str] = None,
    client: Any = None,
    **client_options: Any,
) -> DocumentStore:
    """
    Open a store and make it the process default.

    Missing arguments are read from ``settings.MONGOQL``. Models created
    without an explicit store use the default one. A previous default store
    is closed.
    """
    global _default_store

    store = _open_store(uri, database, client, **client_options)

    with _default_lock:
        previous, _default_store = _default_store, store
    if previous is not None and previous is not store:
        previous.close()
    return store


def get_default_store() -> DocumentStore:
    """
    Return the default store, connecting from settings on first use.

    Concurrent first calls share one store.
    """
    global _default_store

    store = _default_store
    if store is not None:
        return store
    with _default_lock:
        if _default_store is None:
            _default_store = _open_store()
        return _default_store


def close_default_store() -> None:
    global _default_store

    with _default_lock:
        store, _default_store = _default_store, None
    if store is not None:
        store.close()
