"""
External geocoding providers used when the curated gazetteer has no hit.

Strategy:
  1. ready() waits for the rate limiter (Nominatim wants <= 1 request/second)
  2. search() calls the provider's search/autocomplete endpoint
  3. Back off and retry on 429 and transport errors
  4. Map each raw result to a Candidate(source=external); skip malformed rows

Every failure (HTTP error, exhausted retries, garbled body) is logged and
reported as None. Callers await ready() first and bound only search() with
their timeout, so time spent queued behind the rate limiter is not counted.

Supports Nominatim (free, rate-limited) and Google Places Autocomplete.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Protocol

import httpx
from pydantic import ValidationError

from wandermint_geo.config import GeocodingConfig, Settings, get_settings
from wandermint_geo.models import Candidate, CandidateSource, Coordinate

logger = logging.getLogger(__name__)


class ExternalProvider(Protocol):
    async def ready(self) -> None:
        """Wait until a search may be sent. Not covered by the search timeout."""
        ...

    async def search(self, query: str, timeout: float) -> Optional[list[Candidate]]:
        ...

    async def close(self) -> None:
        ...


# ── Rate Limiter ───────────────────────────────────────────────────────

class RateLimiter:
    """Token bucket rate limiter for geocoding API calls."""

    def __init__(self, rate_per_second: float = 1.0):
        self._rate = rate_per_second
        self._interval = 1.0 / rate_per_second if rate_per_second > 0 else 0.0
        self._lock = asyncio.Lock()
        self._last_call: Optional[float] = None

    async def acquire(self):
        async with self._lock:
            loop = asyncio.get_running_loop()
            if self._last_call is not None:
                elapsed = loop.time() - self._last_call
                if elapsed < self._interval:
                    await asyncio.sleep(self._interval - elapsed)
            self._last_call = loop.time()


# ── Shared HTTP plumbing ──────────────────────────────────────────────

class _HTTPProvider:
    name = "http"

    def __init__(
        self,
        settings: Optional[GeocodingConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self.settings = settings or get_settings().geocoding
        self._client = client
        self._owns_client = client is None
        self.rate_limiter = rate_limiter or RateLimiter(self.settings.rate_limit_rps)

    def _http_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
            self._owns_client = True
        return self._client

    async def ready(self) -> None:
        await self.rate_limiter.acquire()

    async def _get(self, url: str, params: dict, headers: dict, timeout: float) -> httpx.Response:
        return await self._http_client().get(url, params=params, headers=headers, timeout=timeout)

    async def _fetch_json(self, url: str, params: dict, headers: dict, timeout: float) -> Optional[Any]:
        """
        GET `url` and decode JSON. Returns None on failure.
        Implements exponential backoff on 429 and transport errors.
        """
        attempts = max(1, self.settings.max_retries)
        for attempt in range(attempts):
            try:
                resp = await self._get(url, params, headers, timeout)
                resp.raise_for_status()
                return resp.json()

            except httpx.HTTPStatusError as e:
                if e.response.status_code == 429 and attempt + 1 < attempts:
                    wait = self.settings.backoff_base * (2 ** attempt)
                    logger.warning("%s rate limited, backing off %.2fs", self.name, wait)
                    await asyncio.sleep(wait)
                    continue
                logger.error("%s HTTP error: %s", self.name, e)
                return None

            except httpx.RequestError as e:
                if attempt + 1 < attempts:
                    wait = self.settings.backoff_base * (2 ** attempt)
                    logger.warning("%s request error (attempt %d/%d): %s, backing off %.2fs",
                                   self.name, attempt + 1, attempts, e, wait)
                    await asyncio.sleep(wait)
                    continue
                logger.warning("%s request error (attempt %d/%d): %s",
                               self.name, attempt + 1, attempts, e)

            except ValueError as e:
                logger.error("%s returned a body that is not JSON: %s", self.name, e)
                return None

        logger.error("%s: all %d attempts exhausted", self.name, attempts)
        return None

    async def close(self) -> None:
        """Close the client this provider opened. An injected client stays open."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


def _coordinate(lat: Any, lon: Any) -> Optional[Coordinate]:
    try:
        return Coordinate(latitude=float(lat), longitude=float(lon))
    except (TypeError, ValueError, ValidationError):
        return None


# ── Provider Implementations ──────────────────────────────────────────

class NominatimProvider(_HTTPProvider):
    """Search OpenStreetMap Nominatim (free, 1 req/sec limit)."""

    name = "nominatim"

    async def search(self, query: str, timeout: float) -> Optional[list[Candidate]]:
        data = await self._fetch_json(
            f"{self.settings.nominatim_url}/search",
            params={
                "q": query,
                "format": "jsonv2",
                "limit": self.settings.result_limit,
                "addressdetails": 1,
            },
            headers={"User-Agent": self.settings.nominatim_user_agent},
            timeout=timeout,
        )
        if data is None:
            return None
        if not isinstance(data, list):
            logger.error("Nominatim: unexpected payload type %s for '%s'", type(data).__name__, query)
            return None

        candidates = [c for c in (self.parse_result(item) for item in data) if c is not None]
        logger.debug("Nominatim: %d/%d usable results for '%s'", len(candidates), len(data), query)
        return candidates

    @staticmethod
    def parse_result(item: Any) -> Optional[Candidate]:
        """
        Map one Nominatim row to a Candidate.

        "Chicago, Cook County, Illinois, United States" with name "Chicago"
        becomes title "Chicago", subtitle "Cook County, Illinois, United States".
        """
        if not isinstance(item, dict):
            return None
        display = item.get("display_name")
        segments = [s.strip() for s in display.split(",")] if isinstance(display, str) else []
        segments = [s for s in segments if s]

        title = item.get("name")
        if not isinstance(title, str) or not title.strip():
            if not segments:
                return None
            title = segments[0]
        title = title.strip()

        rest = segments[1:] if segments else []
        try:
            return Candidate(
                title=title,
                subtitle=", ".join(rest),
                source=CandidateSource.EXTERNAL,
                coordinate=_coordinate(item.get("lat"), item.get("lon")),
            )
        except ValidationError as e:
            logger.debug("Nominatim: skipping malformed row %r: %s", item, e)
            return None


class GooglePlacesProvider(_HTTPProvider):
    """Google Places Autocomplete restricted to regions (paid, high rate limits)."""

    name = "google"

    def __init__(self, settings: Optional[GeocodingConfig] = None, client: Optional[httpx.AsyncClient] = None,
                 rate_limiter: Optional[RateLimiter] = None):
        settings = settings or get_settings().geocoding
        super().__init__(
            settings=settings,
            client=client,
            rate_limiter=rate_limiter or RateLimiter(max(settings.rate_limit_rps, 50.0)),
        )

    async def search(self, query: str, timeout: float) -> Optional[list[Candidate]]:
        if not self.settings.google_places_key:
            logger.error("Google Places API key not configured")
            return None

        data = await self._fetch_json(
            self.settings.google_places_url,
            params={
                "input": query,
                "types": "(regions)",
                "key": self.settings.google_places_key,
            },
            headers={},
            timeout=timeout,
        )
        if data is None:
            return None
        if not isinstance(data, dict):
            logger.error("Google Places: unexpected payload type %s", type(data).__name__)
            return None

        status = data.get("status")
        if status == "ZERO_RESULTS":
            return []
        if status != "OK":
            logger.error("Google Places: status=%s for '%s' (%s)",
                         status, query, data.get("error_message", ""))
            return None

        predictions = data.get("predictions")
        if not isinstance(predictions, list):
            return None
        return [c for c in (self.parse_prediction(p) for p in predictions) if c is not None]

    @staticmethod
    def parse_prediction(prediction: Any) -> Optional[Candidate]:
        if not isinstance(prediction, dict):
            return None
        formatting = prediction.get("structured_formatting") or {}
        title = formatting.get("main_text") if isinstance(formatting, dict) else None
        subtitle = formatting.get("secondary_text", "") if isinstance(formatting, dict) else ""

        if not isinstance(title, str) or not title.strip():
            description = prediction.get("description")
            if not isinstance(description, str) or not description.strip():
                return None
            title, _, subtitle = description.partition(",")
        if not isinstance(subtitle, str):
            subtitle = ""
        try:
            return Candidate(
                title=title.strip(),
                subtitle=subtitle.strip(),
                source=CandidateSource.EXTERNAL,
            )
        except ValidationError:
            return None


# ── Factory ───────────────────────────────────────────────────────────

def get_provider(settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
    """Factory: return the configured provider instance."""
    geocoding = (settings or get_settings()).geocoding
    if geocoding.provider == "google":
        return GooglePlacesProvider(settings=geocoding, client=client)
    return NominatimProvider(settings=geocoding, client=client)
