"""
Curated gazetteer of canonical travel destinations.

A static table of countries, US states, Canadian provinces and well-known
cities that destination autocomplete prefers over anything an external
geocoder returns.

Design:
  - Every entry is a canonical display name, its parent region and a category.
  - Countries carry their continent as parent ("Greece" -> "Europe").
  - States/provinces carry their country ("Ohio" -> "United States").
  - Cities carry "Region, Country" or just "Country".
  - (name, parent_region) is unique; the same name may appear under different
    parents ("New York" the state and "New York" the city).
  - A built store is immutable and safe to share across concurrent lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Union

from wandermint_geo.models import Candidate, CandidateSource, DestinationCategory


@dataclass(frozen=True)
class GazetteerEntry:
    name: str                       # "Chicago"
    parent_region: str              # "Illinois, United States", "" for none
    category: DestinationCategory

    @property
    def identity(self) -> tuple[str, str]:
        return (self.name, self.parent_region)

    def to_candidate(self) -> Candidate:
        return Candidate(
            title=self.name,
            subtitle=self.parent_region,
            source=CandidateSource.CURATED,
        )


# ══════════════════════════════════════════════════════════════════════
# GAZETTEER DATA
# ══════════════════════════════════════════════════════════════════════

_RAW_GAZETTEER: list[GazetteerEntry] = []

_COUNTRY = DestinationCategory.COUNTRY
_STATE = DestinationCategory.STATE_OR_PROVINCE
_CITY = DestinationCategory.CITY


def _add(names: list[str], parent: str, category: DestinationCategory):
    for name in names:
        _RAW_GAZETTEER.append(GazetteerEntry(name, parent, category))


# ── Countries ─────────────────────────────────────────────────────────

_add(["United States", "Canada", "Mexico", "Costa Rica"], "North America", _COUNTRY)
_add([
    "United Kingdom", "France", "Italy", "Spain", "Germany", "Greece",
    "Netherlands", "Switzerland", "Austria", "Portugal", "Ireland", "Sweden",
    "Norway", "Denmark", "Finland", "Belgium", "Czech Republic", "Hungary",
    "Poland", "Iceland",
], "Europe", _COUNTRY)
_add(["Russia", "Turkey"], "Europe/Asia", _COUNTRY)
_add([
    "China", "Japan", "South Korea", "Thailand", "Singapore", "India",
    "Indonesia", "Malaysia", "Philippines", "Vietnam",
], "Asia", _COUNTRY)
_add(["Australia", "New Zealand"], "Oceania", _COUNTRY)
_add(["Brazil", "Argentina", "Chile", "Peru", "Colombia", "Ecuador"], "South America", _COUNTRY)
_add(["Egypt", "South Africa", "Morocco", "Kenya", "Tanzania"], "Africa", _COUNTRY)

# ── U.S. states ───────────────────────────────────────────────────────

_add([
    "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado",
    "Connecticut", "Delaware", "Florida", "Georgia", "Hawaii", "Idaho",
    "Illinois", "Indiana", "Iowa", "Kansas", "Kentucky", "Louisiana", "Maine",
    "Maryland", "Massachusetts", "Michigan", "Minnesota", "Mississippi",
    "Missouri", "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey",
    "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio",
    "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island", "South Carolina",
    "South Dakota", "Tennessee", "Texas", "Utah", "Vermont", "Virginia",
    "Washington", "West Virginia", "Wisconsin", "Wyoming",
], "United States", _STATE)

# ── Canadian provinces and territories ────────────────────────────────

_add([
    "Alberta", "British Columbia", "Manitoba", "New Brunswick",
    "Newfoundland and Labrador", "Northwest Territories", "Nova Scotia",
    "Nunavut", "Ontario", "Prince Edward Island", "Quebec", "Saskatchewan",
    "Yukon",
], "Canada", _STATE)

# ── Cities: North America ─────────────────────────────────────────────

_add(["Chicago"], "Illinois, United States", _CITY)
_add(["New York"], "New York, United States", _CITY)
_add(["Los Angeles", "San Francisco"], "California, United States", _CITY)
_add(["Boston"], "Massachusetts, United States", _CITY)
_add(["Miami", "Orlando"], "Florida, United States", _CITY)
_add(["Seattle"], "Washington, United States", _CITY)
_add(["Las Vegas"], "Nevada, United States", _CITY)
_add(["Washington"], "District of Columbia, United States", _CITY)
_add(["Toronto"], "Ontario, Canada", _CITY)
_add(["Vancouver"], "British Columbia, Canada", _CITY)
_add(["Montreal"], "Quebec, Canada", _CITY)
_add(["Mexico City", "Cancun"], "Mexico", _CITY)

# ── Cities: Europe ────────────────────────────────────────────────────

_add(["London"], "United Kingdom", _CITY)
_add(["Edinburgh"], "Scotland, United Kingdom", _CITY)
_add(["Paris"], "France", _CITY)
_add(["Rome", "Florence", "Venice", "Milan", "Naples"], "Italy", _CITY)
_add(["Barcelona", "Madrid"], "Spain", _CITY)
_add(["Amsterdam"], "Netherlands", _CITY)
_add(["Berlin"], "Germany", _CITY)
_add(["Vienna"], "Austria", _CITY)
_add(["Prague"], "Czech Republic", _CITY)
_add(["Budapest"], "Hungary", _CITY)
_add(["Athens", "Santorini"], "Greece", _CITY)
_add(["Lisbon"], "Portugal", _CITY)
_add(["Dublin"], "Ireland", _CITY)
_add(["Stockholm"], "Sweden", _CITY)
_add(["Copenhagen"], "Denmark", _CITY)
_add(["Oslo"], "Norway", _CITY)
_add(["Helsinki"], "Finland", _CITY)
_add(["Reykjavik"], "Iceland", _CITY)
_add(["Zurich", "Geneva"], "Switzerland", _CITY)
_add(["Brussels"], "Belgium", _CITY)
_add(["Warsaw", "Krakow"], "Poland", _CITY)
_add(["Moscow", "St Petersburg"], "Russia", _CITY)

# ── Cities: Asia ──────────────────────────────────────────────────────

_add(["Tokyo", "Kyoto", "Osaka"], "Japan", _CITY)
_add(["Hong Kong"], "Hong Kong", _CITY)
_add(["Shanghai", "Beijing"], "China", _CITY)
_add(["Seoul"], "South Korea", _CITY)
_add(["Bangkok"], "Thailand", _CITY)
_add(["Singapore"], "Singapore", _CITY)
_add(["Mumbai", "Delhi"], "India", _CITY)
_add(["Istanbul"], "Turkey", _CITY)
_add(["Dubai"], "United Arab Emirates", _CITY)
_add(["Bali"], "Indonesia", _CITY)
_add(["Kuala Lumpur"], "Malaysia", _CITY)
_add(["Manila"], "Philippines", _CITY)
_add(["Ho Chi Minh City", "Hanoi"], "Vietnam", _CITY)

# ── Cities: Oceania ───────────────────────────────────────────────────

_add(["Sydney", "Melbourne", "Brisbane", "Perth"], "Australia", _CITY)
_add(["Auckland", "Wellington"], "New Zealand", _CITY)

# ── Cities: South America ─────────────────────────────────────────────

_add(["Buenos Aires"], "Argentina", _CITY)
_add(["Rio de Janeiro", "São Paulo"], "Brazil", _CITY)
_add(["Lima", "Cusco"], "Peru", _CITY)
_add(["Santiago"], "Chile", _CITY)
_add(["Bogotá"], "Colombia", _CITY)
_add(["Quito"], "Ecuador", _CITY)

# ── Cities: Africa ────────────────────────────────────────────────────

_add(["Cairo"], "Egypt", _CITY)
_add(["Cape Town", "Johannesburg"], "South Africa", _CITY)
_add(["Marrakech", "Casablanca"], "Morocco", _CITY)
_add(["Nairobi"], "Kenya", _CITY)
_add(["Dar es Salaam"], "Tanzania", _CITY)


# ══════════════════════════════════════════════════════════════════════
# STORE
# ══════════════════════════════════════════════════════════════════════

Row = tuple[str, str, Union[DestinationCategory, str]]


class GazetteerStore:
    """
    Read-only collection of GazetteerEntry values.

    Iteration order is the order the entries were supplied in and never
    changes, so ranking ties resolve the same way on every call.
    """

    def __init__(self, entries: Iterable[GazetteerEntry]):
        entries = tuple(entries)
        seen: set[tuple[str, str]] = set()
        for entry in entries:
            if entry.identity in seen:
                raise ValueError(
                    f"Duplicate gazetteer entry: {entry.name!r} in {entry.parent_region!r}"
                )
            seen.add(entry.identity)
        self._entries = entries

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> "GazetteerStore":
        """Build a store from (name, parent_region, category) triples."""
        return cls(
            GazetteerEntry(name, parent, DestinationCategory(category))
            for name, parent, category in rows
        )

    def all_entries(self) -> tuple[GazetteerEntry, ...]:
        return self._entries

    def __iter__(self) -> Iterator[GazetteerEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache(maxsize=1)
def default_store() -> GazetteerStore:
    """The built-in curated table. Built once, shared read-only."""
    return GazetteerStore(_RAW_GAZETTEER)
