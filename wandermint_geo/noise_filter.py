"""
Admission filter for external geocoder results.

The fallback provider happily returns streets, transit stops, malls and
businesses. Only results that look like a place a person travels *to* are
admitted. The rules are driven entirely by the keyword sets below so they can
be tested and extended without touching the predicate.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

# ── Keyword sets ──────────────────────────────────────────────────────

# Rejected when they appear in the title as a trailing or embedded word
STREET_SUFFIXES = frozenset({
    "st", "ave", "rd", "dr", "ln", "blvd", "street", "avenue", "road", "drive",
    "lane", "boulevard", "way", "place", "court", "circle",
})

# Rejected when contained anywhere in title or subtitle, case-insensitively.
# "little" catches enclave neighborhoods such as "Little Italy".
NON_DESTINATION_KEYWORDS = frozenset({
    "airport", "station", "terminal", "depot", "stop", "platform", "rail",
    "train", "metro", "subway", "bus", "mall", "plaza", "shopping", "center",
    "centre", "little",
})

BUSINESS_CHARACTERS = frozenset({"&", "/", "#"})
BUSINESS_TOKENS = frozenset({
    "llc", "inc", "corp", "ltd", "co.", "building", "tower", "complex",
})

# Marks the provider's own "search nearby" point-of-interest tier
NEARBY_MARKER = "nearby"

MIN_TITLE_LENGTH = 2
MAX_TITLE_LENGTH = 50

_WORD_RE = re.compile(r"[^\W\d_]+\.?", re.UNICODE)


def _words(text: str) -> list[str]:
    """Lower-cased alphabetic words; a trailing period is kept ("st.")."""
    return _WORD_RE.findall(text.lower())


def _bare(word: str) -> str:
    return word.rstrip(".")


class NoiseFilter:
    """
    Predicate deciding whether an external result is a real destination.

    Pure and total: fields that are missing or not strings, and anything
    unexpected while evaluating, lead to rejection rather than an exception.
    """

    def __init__(
        self,
        street_suffixes: Iterable[str] = STREET_SUFFIXES,
        non_destination_keywords: Iterable[str] = NON_DESTINATION_KEYWORDS,
        business_characters: Iterable[str] = BUSINESS_CHARACTERS,
        business_tokens: Iterable[str] = BUSINESS_TOKENS,
        min_title_length: int = MIN_TITLE_LENGTH,
        max_title_length: int = MAX_TITLE_LENGTH,
    ):
        self.street_suffixes = frozenset(s.lower() for s in street_suffixes)
        self.non_destination_keywords = frozenset(k.lower() for k in non_destination_keywords)
        self.business_characters = frozenset(business_characters)
        self.business_tokens = frozenset(t.lower() for t in business_tokens)
        self.min_title_length = min_title_length
        self.max_title_length = max_title_length

    # ── Individual checks ────────────────────────────────────────────

    def has_digit(self, title: str) -> bool:
        return any(ch.isdigit() for ch in title)

    def has_street_suffix(self, title: str) -> bool:
        """
        True for "Chicago Ave" or "Ocean Drive Beach", not for "St Petersburg"
        (a leading "St" is Saint) and never for words that merely contain a
        suffix ("Stanford", "Drake").
        """
        words = [_bare(w) for w in _words(title)]
        if not words:
            return False
        if len(words) == 1:
            return words[0] in self.street_suffixes
        return any(w in self.street_suffixes for w in words[1:])

    def has_non_destination_keyword(self, *texts: str) -> bool:
        """Case-insensitive substring test; "Littleton" is a hit for "little"."""
        return any(
            keyword in text.lower()
            for text in texts
            for keyword in self.non_destination_keywords
        )

    def is_nearby_tier(self, subtitle: str) -> bool:
        return NEARBY_MARKER in (_bare(w) for w in _words(subtitle))

    def has_business_indicator(self, *texts: str) -> bool:
        for text in texts:
            if any(ch in text for ch in self.business_characters):
                return True
            lowered = text.lower()
            if any(token in lowered for token in self.business_tokens):
                return True
        return False

    def has_valid_length(self, title: str) -> bool:
        return self.min_title_length <= len(title) <= self.max_title_length

    def has_region_context(self, title: str, subtitle: str) -> bool:
        return "," in title or bool(subtitle.strip())

    # ── Predicate ────────────────────────────────────────────────────

    def admits(self, candidate: Any) -> bool:
        try:
            return self._admits(candidate)
        except Exception as e:  # never let a bad provider row escape
            logger.debug("Noise filter rejected unreadable result %r: %s", candidate, e)
            return False

    def _admits(self, candidate: Any) -> bool:
        title: Optional[str] = getattr(candidate, "title", None)
        subtitle: Optional[str] = getattr(candidate, "subtitle", None)
        if not isinstance(title, str) or not isinstance(subtitle, str):
            return False

        if self.has_digit(title):
            return False
        if self.has_street_suffix(title):
            return False
        if self.has_non_destination_keyword(title, subtitle):
            return False
        if self.is_nearby_tier(subtitle):
            return False
        if self.has_business_indicator(title, subtitle):
            return False
        if not self.has_valid_length(title):
            return False
        return self.has_region_context(title, subtitle)

    def filter(self, candidates: Iterable[Any]) -> list[Any]:
        """Admitted candidates, in input order."""
        return [c for c in candidates if self.admits(c)]


_default_filter = NoiseFilter()


def is_destination(candidate: Any) -> bool:
    """Admission check with the default keyword sets."""
    return _default_filter.admits(candidate)


def filter_destinations(candidates: Iterable[Any]) -> list[Any]:
    return _default_filter.filter(candidates)
