"""
Query matching against gazetteer names.

A name matches when it contains the query; a name that starts with the query
is a stronger (prefix) match than one that only contains it.
"""

from __future__ import annotations

import re
from typing import Iterable

from wandermint_geo.gazetteer import GazetteerEntry
from wandermint_geo.models import MatchStrength


def normalize_query(text: str) -> str:
    """Trim, collapse inner whitespace and lower-case."""
    return re.sub(r"\s+", " ", text.strip()).lower()


def match(query: str, entry: GazetteerEntry) -> MatchStrength:
    """`query` must already be normalized."""
    if not query:
        return MatchStrength.NONE
    name = entry.name.lower()
    if name.startswith(query):
        return MatchStrength.PREFIX
    if query in name:
        return MatchStrength.SUBSTRING
    return MatchStrength.NONE


def find_matches(
    query: str, entries: Iterable[GazetteerEntry]
) -> list[tuple[GazetteerEntry, MatchStrength]]:
    """All matching entries with their strength, in store order."""
    results = []
    for entry in entries:
        strength = match(query, entry)
        if strength is not MatchStrength.NONE:
            results.append((entry, strength))
    return results
