"""
Destination resolution orchestrator.

Turns what the user has typed so far into at most six ranked destinations:
  1. Normalize the query (trim, lower-case); empty -> []
  2. Match against the curated gazetteer; any hit -> ranked curated list
  3. Otherwise ask the external provider, bounded by a timeout
  4. Drop noise (streets, POIs, businesses), lift well-known places, cap

One DestinationResolver is one query session (one text field). Every new
resolve() cancels the previous session lookup, and a generation counter
discards anything that still arrives for a superseded query, so a slow
response for "Chi" can never replace the results for "Chica".
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from wandermint_geo.config import Settings, get_settings
from wandermint_geo.gazetteer import GazetteerStore, default_store
from wandermint_geo.geocode import ExternalProvider, get_provider
from wandermint_geo.matcher import find_matches, normalize_query
from wandermint_geo.models import Candidate, ResolutionState
from wandermint_geo.noise_filter import NoiseFilter
from wandermint_geo.ranking import rank_curated, rank_external
from wandermint_geo.well_known import WellKnownDestinations, default_well_known

logger = logging.getLogger(__name__)


class DestinationResolver:
    def __init__(
        self,
        store: Optional[GazetteerStore] = None,
        provider: Optional[ExternalProvider] = None,
        well_known: Optional[WellKnownDestinations] = None,
        noise_filter: Optional[NoiseFilter] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store if store is not None else default_store()
        self.provider = provider if provider is not None else get_provider(self.settings)
        self.well_known = well_known if well_known is not None else default_well_known()
        self.noise_filter = noise_filter if noise_filter is not None else NoiseFilter()

        self.state = ResolutionState.IDLE
        self._generation = 0
        self._inflight: Optional[asyncio.Task] = None

    # ── State ────────────────────────────────────────────────────────

    def _set_state(self, state: ResolutionState) -> None:
        logger.debug("Resolver state %s -> %s", self.state.value, state.value)
        self.state = state

    def _normalized(self, query: str) -> str:
        normalized = normalize_query(query) if isinstance(query, str) else ""
        if len(normalized) < max(1, self.settings.resolver.min_query_length):
            return ""
        return normalized

    # ── Curated path ─────────────────────────────────────────────────

    def resolve_curated(self, query: str) -> list[Candidate]:
        """Gazetteer-only resolution. Synchronous; never touches the provider."""
        normalized = self._normalized(query)
        if not normalized:
            return []
        matches = find_matches(normalized, self.store.all_entries())
        return rank_curated(matches, limit=self.settings.resolver.max_results)

    # ── Full resolution ──────────────────────────────────────────────

    async def resolve(self, query: str, timeout: Optional[float] = None) -> list[Candidate]:
        """
        Resolve `query` into a ranked list of at most `max_results` candidates.

        Never raises for provider problems or odd input; the worst outcome is
        an empty list. Returns [] as well when a newer resolve() started
        before this one's external lookup finished.
        """
        self._generation += 1
        generation = self._generation
        self.cancel()

        self._set_state(ResolutionState.GAZETTEER_LOOKUP)
        curated = self.resolve_curated(query)
        if curated or not self._normalized(query):
            self._set_state(ResolutionState.DONE)
            return curated

        if not self.settings.resolver.fallback_enabled:
            logger.debug("No curated match for '%s' and fallback disabled", query)
            self._set_state(ResolutionState.DONE)
            return []

        self._set_state(ResolutionState.EXTERNAL_LOOKUP)
        raw = await self._external_lookup(query.strip(), timeout, generation)

        if generation != self._generation:
            logger.debug("Discarding superseded external result for '%s'", query)
            return []

        admitted = self.noise_filter.filter(raw)
        results = rank_external(
            admitted,
            self.well_known.is_well_known,
            limit=self.settings.resolver.max_results,
        )
        logger.debug("External fallback for '%s': %d raw, %d admitted, %d returned",
                     query, len(raw), len(admitted), len(results))
        self._set_state(ResolutionState.DONE)
        return results

    async def _search(self, query: str, timeout: float):
        # The timeout starts once the provider is ready to send
        await self.provider.ready()
        return await asyncio.wait_for(self.provider.search(query, timeout), timeout)

    async def _external_lookup(self, query: str, timeout: Optional[float], generation: int) -> list[Candidate]:
        """Run the provider call as a cancellable task. Any failure -> []."""
        if timeout is None:
            timeout = self.settings.resolver.timeout

        task = asyncio.create_task(self._search(query, timeout))
        self._inflight = task
        try:
            await asyncio.wait({task})
        finally:
            if self._inflight is task:
                self._inflight = None
            if not task.done():
                task.cancel()

        if task.cancelled():
            logger.debug("External lookup for '%s' cancelled (generation %d)", query, generation)
            return []
        error = task.exception()
        if isinstance(error, asyncio.TimeoutError):
            logger.warning("External lookup for '%s' timed out after %.2fs", query, timeout)
            return []
        if error is not None:
            logger.warning("External lookup for '%s' failed: %s", query, error)
            return []

        result = task.result()
        if result is None:
            return []
        if not isinstance(result, (list, tuple)):
            logger.warning("External lookup for '%s' returned %s, expected a list",
                           query, type(result).__name__)
            return []
        return list(result)

    # ── Lifecycle ────────────────────────────────────────────────────

    def cancel(self) -> None:
        """Cancel the in-flight external lookup, if any."""
        task, self._inflight = self._inflight, None
        if task is not None and not task.done():
            logger.debug("Cancelling in-flight external lookup")
            task.cancel()

    async def aclose(self) -> None:
        self._generation += 1
        self.cancel()
        await self.provider.close()

    async def __aenter__(self) -> "DestinationResolver":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
