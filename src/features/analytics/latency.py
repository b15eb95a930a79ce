"""Average responder latency over the message log."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .models import Message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponseLatency:
    """Latency estimate with the pairs it was computed from."""

    mean_seconds: float
    samples: int
    skipped_pairs: int = 0


class ResponseLatencyEstimator:
    """Measure time between a user message and the responder reply after it."""

    def __init__(self, responder_id: str):
        self.responder_id = responder_id

    def estimate(self, messages: Sequence[Message]) -> ResponseLatency:
        """
        Average the user -> responder gaps of adjacent messages.

        Args:
            messages: Full log, ascending by created_at, responder included

        Returns:
            Mean latency in seconds (0.0 when there are no response events)
        """
        total = 0.0
        samples = 0
        skipped = 0

        for previous, current in zip(messages, messages[1:]):
            if previous.sender_id == self.responder_id:
                continue
            if current.sender_id != self.responder_id:
                continue

            elapsed = (current.created_at - previous.created_at).total_seconds()
            if elapsed < 0:
                logger.warning(
                    "Skipping out-of-order response pair: %s at %s precedes %s at %s",
                    current.id,
                    current.created_at.isoformat(),
                    previous.id,
                    previous.created_at.isoformat(),
                )
                skipped += 1
                continue

            total += elapsed
            samples += 1

        mean = total / samples if samples else 0.0
        return ResponseLatency(mean_seconds=mean, samples=samples, skipped_pairs=skipped)
