"""Firestore message source tests."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import PermissionDenied, RetryError, ServiceUnavailable
from google.auth.exceptions import RefreshError

from src.core.firestore import FetchError, FirestoreClient


@pytest.fixture
def firestore_client():
    """Singleton client with a mocked Firestore handle."""
    FirestoreClient._instance = None
    client = FirestoreClient()
    client._db = MagicMock()
    yield client
    FirestoreClient._instance = None


def _doc(data: dict) -> MagicMock:
    doc = MagicMock()
    doc.to_dict.return_value = data
    return doc


def _ordered_query(client: FirestoreClient) -> MagicMock:
    return client._db.collection.return_value.order_by.return_value


@pytest.mark.asyncio
async def test_fetch_messages_maps_documents(firestore_client):
    _ordered_query(firestore_client).stream.return_value = [
        _doc({
            "id": "1",
            "sender_id": "ana",
            "receiver_id": "BOT",
            "message_content": "tengo tos",
            "created_at": datetime(2024, 3, 1, 9, 0),
        }),
        _doc({
            "id": "2",
            "sender_id": "BOT",
            "receiver_id": "ana",
            "message_content": None,
            "created_at": "2024-03-01T09:00:05Z",
        }),
    ]

    messages = await firestore_client.fetch_messages()

    firestore_client._db.collection.assert_called_with("conversation")
    assert [m.id for m in messages] == ["1", "2"]
    assert messages[0].created_at.tzinfo == timezone.utc
    assert (messages[1].created_at - messages[0].created_at).total_seconds() == 5
    assert messages[1].message_content is None


@pytest.mark.asyncio
async def test_fetch_messages_wraps_api_errors(firestore_client):
    _ordered_query(firestore_client).stream.side_effect = ServiceUnavailable("datastore down")

    with pytest.raises(FetchError, match="datastore down"):
        await firestore_client.fetch_messages()


@pytest.mark.asyncio
async def test_fetch_messages_rejects_malformed_records(firestore_client):
    _ordered_query(firestore_client).stream.return_value = [
        _doc({"id": "1", "sender_id": "ana", "receiver_id": "BOT", "created_at": None}),
    ]

    with pytest.raises(FetchError, match="Malformed message record"):
        await firestore_client.fetch_messages()


@pytest.mark.asyncio
async def test_check_connection_reports_failure(firestore_client):
    probe = firestore_client._db.collection.return_value.limit.return_value
    probe.stream.side_effect = PermissionDenied("no access")

    status = await firestore_client.check_connection()

    assert status.ok is False
    assert "no access" in status.error


@pytest.mark.asyncio
async def test_check_connection_ok(firestore_client):
    probe = firestore_client._db.collection.return_value.limit.return_value
    probe.stream.return_value = [_doc({"id": "1"})]

    status = await firestore_client.check_connection()

    assert status.ok is True
    assert status.sample_size == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [RefreshError("token expired"), RetryError("deadline exceeded", None)],
)
async def test_fetch_messages_wraps_auth_and_retry_errors(firestore_client, error):
    _ordered_query(firestore_client).stream.side_effect = error

    with pytest.raises(FetchError):
        await firestore_client.fetch_messages()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [RefreshError("token expired"), RetryError("deadline exceeded", None)],
)
async def test_check_connection_reports_auth_and_retry_errors(firestore_client, error):
    probe = firestore_client._db.collection.return_value.limit.return_value
    probe.stream.side_effect = error

    status = await firestore_client.check_connection()

    assert status.ok is False
    assert status.error
