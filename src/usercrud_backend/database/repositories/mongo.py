"""MongoDB-backed user store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from usercrud_backend.database.errors import (
    DuplicateEmailError,
    InvalidUserIdError,
    StoreError,
)
from usercrud_backend.database.records import REQUIRED_FIELDS, UserRecord

DEFAULT_DATABASE_NAME = "usercrud"
SERVER_SELECTION_TIMEOUT_MS = 5_000

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except DuplicateKeyError as exc:
        raise DuplicateEmailError(str(exc)) from exc
    except PyMongoError as exc:
        raise StoreError(str(exc)) from exc


class MongoUserRepository:
    """Stores users as documents in the ``users`` collection.

    Documents hold ``name``, ``email`` and ``password``; the ObjectId in
    ``_id`` is exposed to callers as a hex string.
    """

    collection_name = "users"

    def __init__(
        self,
        client: MongoClient[Dict[str, Any]],
        database_name: str = DEFAULT_DATABASE_NAME,
    ) -> None:
        self._client = client
        self._collection: Collection[Dict[str, Any]] = client[database_name][
            self.collection_name
        ]

    @classmethod
    def from_url(cls, url: str) -> MongoUserRepository:
        """Build a repository for the database named in ``url``.

        The client connects lazily; an unparsable URL, or an SRV record that
        does not resolve, raises :class:`StoreError` here.
        """

        try:
            client: MongoClient[Dict[str, Any]] = MongoClient(
                url, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS
            )
            database = client.get_default_database(default=DEFAULT_DATABASE_NAME)
        except (PyMongoError, ValueError) as exc:
            raise StoreError(str(exc)) from exc
        return cls(client, database.name)

    @property
    def collection(self) -> Collection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    def connect(self) -> None:
        with _translate_errors():
            self._client.admin.command("ping")
            self._collection.create_index([("email", ASCENDING)], unique=True)
        logger.info("MongoDB connected")

    def close(self) -> None:
        self._client.close()

    def list_users(self) -> list[UserRecord]:
        with _translate_errors():
            return [self._to_record(doc) for doc in self._collection.find()]

    def get_by_id(self, user_id: str) -> UserRecord | None:
        object_id = self._object_id(user_id)
        with _translate_errors():
            document = self._collection.find_one({"_id": object_id})
        if not document:
            return None
        return self._to_record(document)

    def add(self, user: UserRecord) -> UserRecord:
        user.validate()
        document = self._to_document(user)
        with _translate_errors():
            result = self._collection.insert_one(document)
        return UserRecord(
            id=str(result.inserted_id),
            name=user.name,
            email=user.email,
            password=user.password,
        )

    def save(self, user: UserRecord) -> UserRecord:
        user.validate()
        object_id = self._object_id(user.id or "")
        with _translate_errors():
            result = self._collection.update_one(
                {"_id": object_id}, {"$set": self._to_document(user)}
            )
        if result.matched_count == 0:
            msg = f"No document found for query {{ _id: {user.id} }}"
            raise StoreError(msg)
        return user

    def delete(self, user_id: str) -> bool:
        object_id = self._object_id(user_id)
        with _translate_errors():
            result = self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    @staticmethod
    def _object_id(user_id: str) -> ObjectId:
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError) as exc:
            raise InvalidUserIdError(str(exc)) from exc

    @staticmethod
    def _to_document(user: UserRecord) -> Dict[str, Any]:
        return {"name": user.name, "email": user.email, "password": user.password}

    @staticmethod
    def _to_record(document: Dict[str, Any]) -> UserRecord:
        missing = [field for field in REQUIRED_FIELDS if document.get(field) is None]
        if missing:
            msg = f"User document {document['_id']} is missing {', '.join(missing)}"
            raise StoreError(msg)
        return UserRecord(
            id=str(document["_id"]),
            name=document.get("name"),
            email=document.get("email"),
            password=document.get("password"),
        )
