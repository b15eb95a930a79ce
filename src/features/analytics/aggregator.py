"""Grouping of categorized consultations into per-category counts."""

from collections import Counter
from collections.abc import Callable, Iterable

from .categorizer import categorize
from .models import CategoryCount, Message, SymptomCategory


def count_categories(
    consultations: Iterable[Message],
    classify: Callable[[str | None], SymptomCategory | None] = categorize,
) -> list[CategoryCount]:
    """
    Count consultations per symptom category.

    Messages without content are skipped. Categories appear in the order
    they are first seen in the log; unmatched categories are omitted.
    """
    # Counter keeps insertion order, which is the first-occurrence order
    counts: Counter[SymptomCategory] = Counter()
    for message in consultations:
        category = classify(message.message_content)
        if category is None:
            continue
        counts[category] += 1

    return [
        CategoryCount(category=category, count=count)
        for category, count in counts.items()
    ]
