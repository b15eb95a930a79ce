"""Recent message feed and per-user activity summary."""

from collections.abc import Sequence

from .models import Message, UserActivity


class RecentActivityView:
    """Views over the tail of the log and per-sender activity."""

    def __init__(self, responder_id: str, limit: int = 5):
        self.responder_id = responder_id
        self.limit = max(limit, 0)

    def recent_messages(self, messages: Sequence[Message]) -> list[Message]:
        """Get the last ``limit`` messages, most recent first."""
        if self.limit == 0:
            return []
        return list(reversed(messages[-self.limit:]))

    def per_user_summary(self, messages: Sequence[Message]) -> dict[str, UserActivity]:
        """
        Summarize activity per end user.

        Returns:
            Mapping of sender_id to message count and last activity,
            ordered by last activity, most recent first. Ties keep the
            order in which users first appeared.
        """
        counts: dict[str, int] = {}
        last_seen: dict[str, Message] = {}
        for message in messages:
            if message.sender_id == self.responder_id:
                continue
            counts[message.sender_id] = counts.get(message.sender_id, 0) + 1
            last_seen[message.sender_id] = message

        # sorted() is stable, so equal timestamps keep first-appearance order
        ordered = sorted(
            counts,
            key=lambda sender: last_seen[sender].created_at,
            reverse=True,
        )
        return {
            sender: UserActivity(
                message_count=counts[sender],
                last_activity_timestamp=last_seen[sender].created_at,
            )
            for sender in ordered
        }
