"""Allow-list of globally recognizable destinations used to re-rank fallback results."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

_DEFAULT_WELL_KNOWN = [
    # Europe
    "paris", "london", "rome", "barcelona", "amsterdam", "berlin", "vienna",
    "prague", "budapest", "florence", "venice", "athens", "santorini", "mykonos",
    "madrid", "lisbon", "dublin", "edinburgh", "stockholm", "copenhagen",
    "oslo", "helsinki", "reykjavik", "zurich", "geneva", "brussels", "warsaw",
    "krakow", "moscow", "st petersburg", "dubrovnik", "split", "zagreb",
    # Asia
    "tokyo", "kyoto", "osaka", "beijing", "shanghai", "hong kong", "singapore",
    "bangkok", "phuket", "seoul", "busan", "mumbai", "delhi", "goa", "kathmandu",
    "istanbul", "cappadocia", "dubai", "abu dhabi", "doha", "kuwait city",
    "tehran", "bali", "jakarta", "kuala lumpur", "manila", "ho chi minh city",
    "hanoi", "phnom penh", "vientiane", "yangon", "colombo", "male",
    # Americas
    "new york", "los angeles", "san francisco", "chicago", "boston", "miami",
    "las vegas", "washington", "orlando", "seattle", "vancouver", "toronto",
    "montreal", "mexico city", "cancun", "cabo", "guadalajara", "lima", "cusco",
    "quito", "buenos aires", "rio de janeiro", "sao paulo", "são paulo",
    "santiago", "bogota", "bogotá", "caracas", "havana",
    # Africa
    "cairo", "marrakech", "casablanca", "cape town", "johannesburg", "nairobi",
    "dar es salaam", "addis ababa", "lagos", "accra", "tunis", "algiers",
    # Oceania
    "sydney", "melbourne", "perth", "auckland", "wellington", "fiji", "tahiti",
    # Countries and regions
    "costa rica", "iceland", "norway", "sweden", "switzerland", "austria",
    "ireland", "scotland", "portugal", "morocco", "egypt", "south africa",
    "kenya", "tanzania", "india", "nepal", "tibet", "china", "japan",
    "south korea", "vietnam", "cambodia", "laos", "myanmar", "philippines",
    "indonesia", "australia", "new zealand", "brazil", "argentina", "chile",
    "peru", "colombia", "ecuador", "mexico", "canada", "maldives", "hawaii",
    "greece", "italy", "france", "spain", "germany", "netherlands", "thailand",
]


class WellKnownDestinations:
    """Static, case-insensitive set lookup on a result title."""

    def __init__(self, names: Iterable[str]):
        self._names = frozenset(n.strip().lower() for n in names if n.strip())

    def is_well_known(self, title: str) -> bool:
        if not isinstance(title, str):
            return False
        lowered = title.strip().lower()
        if lowered in self._names:
            return True
        # "Paris, France" -> "paris"
        head = lowered.split(",", 1)[0].strip()
        return head in self._names

    def __contains__(self, title: object) -> bool:
        return self.is_well_known(title)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._names)


@lru_cache(maxsize=1)
def default_well_known() -> WellKnownDestinations:
    return WellKnownDestinations(_DEFAULT_WELL_KNOWN)
