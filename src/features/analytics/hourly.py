"""Hour-of-day activity histogram."""

from collections import defaultdict
from collections.abc import Iterable
from datetime import tzinfo

from .models import HourBucket, Message


class HourlyActivityBinner:
    """Bucket consultations by the hour they were sent in a fixed timezone."""

    def __init__(self, tz: tzinfo):
        self.tz = tz

    def bin(self, consultations: Iterable[Message]) -> list[HourBucket]:
        """Get non-empty hour buckets, ascending by hour."""
        counts: dict[int, int] = defaultdict(int)
        for message in consultations:
            counts[message.created_at.astimezone(self.tz).hour] += 1

        return [HourBucket(hour=hour, count=counts[hour]) for hour in sorted(counts)]
