"""Firestore client wrapper for the consultation message log."""

import logging
from typing import Any, Protocol

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore
from pydantic import ValidationError

from src.config import get_settings
from src.features.analytics.models import ConnectionStatus, Message

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The message log could not be read from the datastore."""


class MessageSource(Protocol):
    """Anything that can hand the analytics engine an ordered message log."""

    async def check_connection(self) -> ConnectionStatus: ...

    async def fetch_messages(self) -> list[Message]: ...


def _to_message(data: dict[str, Any]) -> Message:
    # created_at may be a Firestore timestamp or an ISO-8601 string
    return Message(
        id=str(data.get("id", "")),
        sender_id=str(data.get("sender_id", "")),
        receiver_id=str(data.get("receiver_id", "")),
        message_content=data.get("message_content"),
        created_at=data.get("created_at"),
    )


class FirestoreClient:
    """Wrapper for Firestore operations."""

    _instance: "FirestoreClient | None" = None
    _db: firestore.Client | None = None

    def __new__(cls) -> "FirestoreClient":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def db(self) -> firestore.Client:
        """Get or create Firestore client."""
        if self._db is None:
            settings = get_settings()
            # Use project from settings if provided, otherwise auto-detect
            project = settings.google_cloud_project if settings.google_cloud_project else None
            self._db = firestore.Client(project=project)
        return self._db

    @property
    def collection_name(self) -> str:
        return get_settings().messages_collection

    async def check_connection(self) -> ConnectionStatus:
        """Probe the message collection with a single-document query."""
        try:
            docs = list(self.db.collection(self.collection_name).limit(1).stream())
        except (GoogleAPIError, GoogleAuthError) as e:
            logger.error("Datastore health check failed: %s", e)
            return ConnectionStatus(ok=False, collection=self.collection_name, error=str(e))

        return ConnectionStatus(ok=True, collection=self.collection_name, sample_size=len(docs))

    async def fetch_messages(self) -> list[Message]:
        """Get the full message log, ascending by created_at."""
        try:
            docs = (
                self.db.collection(self.collection_name)
                .order_by("created_at", direction=firestore.Query.ASCENDING)
                .stream()
            )
            records = [{"id": doc.id, **doc.to_dict()} for doc in docs]
        except (GoogleAPIError, GoogleAuthError) as e:
            logger.error("Failed to fetch messages from %s: %s", self.collection_name, e)
            raise FetchError(str(e)) from e

        try:
            messages = [_to_message(record) for record in records]
        except ValidationError as e:
            raise FetchError(f"Malformed message record: {e}") from e

        logger.info("Fetched %d messages from %s", len(messages), self.collection_name)
        return messages


class InMemoryMessageSource:
    """Message source backed by a list, for local runs and tests."""

    def __init__(self, messages: list[Message] | None = None, error: str | None = None):
        self.messages = list(messages or [])
        self.error = error

    async def check_connection(self) -> ConnectionStatus:
        if self.error:
            return ConnectionStatus(ok=False, collection="memory", error=self.error)
        return ConnectionStatus(ok=True, collection="memory", sample_size=min(len(self.messages), 1))

    async def fetch_messages(self) -> list[Message]:
        if self.error:
            raise FetchError(self.error)
        return list(self.messages)


def get_firestore_client() -> FirestoreClient:
    """Get Firestore client instance (dependency injection)."""
    return FirestoreClient()
