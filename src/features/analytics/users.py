"""Active user counting."""

from collections.abc import Iterable

from .models import Message


def count_active_users(messages: Iterable[Message], responder_id: str) -> int:
    """Count distinct senders, never counting the responder."""
    return len({m.sender_id for m in messages if m.sender_id != responder_id})
