"""Analytics service computing dashboard snapshots from the message log."""

import logging
from collections.abc import Sequence
from zoneinfo import ZoneInfo

from src.config import get_settings
from src.core.firestore import FetchError, MessageSource, get_firestore_client

from .aggregator import count_categories
from .categorizer import Categorizer
from .hourly import HourlyActivityBinner
from .latency import ResponseLatencyEstimator
from .models import AnalyticsSnapshot, ConnectionStatus, Message, RecentMessage
from .recent import RecentActivityView
from .users import count_active_users

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Service for analytics operations."""

    def __init__(
        self,
        source: MessageSource,
        responder_id: str = "BOT",
        timezone: str = "UTC",
        recent_limit: int = 5,
        categorizer: Categorizer | None = None,
    ):
        self.source = source
        self.responder_id = responder_id
        self.categorizer = categorizer or Categorizer()
        self.latency = ResponseLatencyEstimator(responder_id)
        self.hourly = HourlyActivityBinner(ZoneInfo(timezone))
        self.recent = RecentActivityView(responder_id, limit=recent_limit)

    async def check_connection(self) -> ConnectionStatus:
        """Run the data source health check."""
        return await self.source.check_connection()

    def compute_snapshot(self, messages: Sequence[Message]) -> AnalyticsSnapshot:
        """
        Compute every aggregate over one message log.

        Args:
            messages: Full log, ascending by created_at

        Returns:
            Fresh snapshot; an empty log gives an all-zero snapshot
        """
        consultations = [m for m in messages if m.sender_id != self.responder_id]
        latency = self.latency.estimate(messages)
        if latency.skipped_pairs:
            logger.warning(
                "Ignored %d out-of-order response pairs in latency estimate",
                latency.skipped_pairs,
            )

        snapshot = AnalyticsSnapshot(
            symptom_categories=count_categories(consultations, self.categorizer.categorize),
            response_time_seconds=latency.mean_seconds,
            total_consultations=len(consultations),
            total_messages=len(messages),
            active_users=count_active_users(messages, self.responder_id),
            hourly_activity=self.hourly.bin(consultations),
            recent_messages=[
                RecentMessage(**m.model_dump()) for m in self.recent.recent_messages(messages)
            ],
            per_user_summary=self.recent.per_user_summary(messages),
        )

        logger.info(
            "Computed analytics snapshot: %d messages, %d consultations, %d users",
            snapshot.total_messages,
            snapshot.total_consultations,
            snapshot.active_users,
        )
        return snapshot

    async def get_snapshot(self) -> AnalyticsSnapshot:
        """Fetch the message log and compute a new snapshot."""
        try:
            messages = await self.source.fetch_messages()
        except FetchError:
            logger.error("Message fetch failed, no snapshot computed")
            raise
        return self.compute_snapshot(messages)


def get_analytics_service() -> AnalyticsService:
    """Get analytics service instance."""
    settings = get_settings()
    return AnalyticsService(
        source=get_firestore_client(),
        responder_id=settings.responder_sender_id,
        timezone=settings.analytics_timezone,
        recent_limit=settings.recent_messages_limit,
    )
