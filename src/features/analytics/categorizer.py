"""Keyword-based symptom categorization for consultation messages."""

from collections.abc import Sequence
from dataclasses import dataclass

from .models import SymptomCategory


@dataclass(frozen=True)
class KeywordRule:
    """Assigns ``category`` when ``keyword`` appears in the message."""

    keyword: str
    category: SymptomCategory


# Evaluated top to bottom, first match wins ("dolor y fiebre" -> Dolor)
DEFAULT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule("dolor", SymptomCategory.DOLOR),
    KeywordRule("fiebre", SymptomCategory.FIEBRE),
    KeywordRule("tos", SymptomCategory.TOS),
    KeywordRule("alergia", SymptomCategory.ALERGIAS),
)


class Categorizer:
    """Classify message text against an ordered keyword rule table."""

    def __init__(
        self,
        rules: Sequence[KeywordRule] = DEFAULT_RULES,
        fallback: SymptomCategory = SymptomCategory.OTROS,
    ):
        self.rules = tuple(
            KeywordRule(rule.keyword.lower(), rule.category) for rule in rules
        )
        self.fallback = fallback

    def categorize(self, content: str | None) -> SymptomCategory | None:
        """
        Get the category for a message body.

        Args:
            content: Raw message text, possibly missing

        Returns:
            Matching category, the fallback when nothing matches,
            or None when there is no content to classify
        """
        if not content:
            return None

        text = content.lower()
        for rule in self.rules:
            if rule.keyword in text:
                return rule.category
        return self.fallback


_default_categorizer = Categorizer()


def categorize(content: str | None) -> SymptomCategory | None:
    """Categorize text with the default rule table."""
    return _default_categorizer.categorize(content)
