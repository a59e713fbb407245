"""
Ranking for both resolution paths.

Curated matches are ordered by category class, then match strength, then
name length. External fallback results keep provider order except that
well-known destinations are lifted to the front.
"""

from __future__ import annotations

from typing import Callable, Iterable

from wandermint_geo.gazetteer import GazetteerEntry
from wandermint_geo.models import Candidate, DestinationCategory, MatchStrength

MAX_RESULTS = 6

# Countries and states/provinces outrank cities
_REGION_CATEGORIES = frozenset({
    DestinationCategory.COUNTRY,
    DestinationCategory.STATE_OR_PROVINCE,
})


def _curated_sort_key(item: tuple[GazetteerEntry, MatchStrength]) -> tuple[int, int, int]:
    entry, strength = item
    category_class = 0 if entry.category in _REGION_CATEGORIES else 1
    return (category_class, -int(strength), len(entry.name))


def dedupe(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Drop repeated (title, subtitle) identities, keeping the first."""
    seen: set[tuple[str, str]] = set()
    unique = []
    for c in candidates:
        key = (c.title, c.subtitle)
        if key in seen:
            continue
        seen.add(key)
        unique.append(c)
    return unique


def rank_curated(
    matches: Iterable[tuple[GazetteerEntry, MatchStrength]],
    limit: int = MAX_RESULTS,
) -> list[Candidate]:
    """
    Order matched gazetteer entries and cap the list.

    sorted() is stable, so entries that tie on every key keep store order.
    """
    ordered = sorted(matches, key=_curated_sort_key)
    candidates = dedupe(entry.to_candidate() for entry, _ in ordered)
    return candidates[:limit]


def rank_external(
    candidates: Iterable[Candidate],
    is_well_known: Callable[[str], bool],
    limit: int = MAX_RESULTS,
) -> list[Candidate]:
    """
    Well-known destinations first, everything else after.
    Provider order is authoritative inside each group.
    """
    unique = dedupe(candidates)
    boosted = [c for c in unique if is_well_known(c.title)]
    rest = [c for c in unique if not is_well_known(c.title)]
    return (boosted + rest)[:limit]
