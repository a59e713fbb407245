"""
Shared fixtures and fake providers.
Nothing here touches the network.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import pytest

from wandermint_geo.config import GeocodingConfig, ResolverConfig, Settings
from wandermint_geo.models import Candidate


def ext(title: str, subtitle: str = "") -> Candidate:
    """Shorthand for an external provider result."""
    return Candidate(title=title, subtitle=subtitle)


class FakeProvider:
    """
    Scripted provider. `responses` maps query -> result (list, None, or an
    exception instance to raise); `gates` maps query -> asyncio.Event the
    call waits on before answering. `ready_delay` is how long ready() takes,
    standing in for a rate limiter queue.
    """

    def __init__(self, responses: Optional[dict] = None, gates: Optional[dict] = None,
                 ready_delay: float = 0.0):
        self.responses = responses or {}
        self.gates = gates or {}
        self.ready_delay = ready_delay
        self.ready_calls = 0
        self.calls: list[str] = []
        self.cancelled: list[str] = []
        self.closed = False

    async def ready(self) -> None:
        self.ready_calls += 1
        if self.ready_delay:
            await asyncio.sleep(self.ready_delay)

    async def search(self, query: str, timeout: float):
        self.calls.append(query)
        gate = self.gates.get(query)
        try:
            if gate is not None:
                await gate.wait()
        except asyncio.CancelledError:
            self.cancelled.append(query)
            raise
        response = self.responses.get(query, [])
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


async def wait_until(predicate, attempts: int = 100) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        geocoding=GeocodingConfig(max_retries=2, backoff_base=0.0, rate_limit_rps=0.0),
        resolver=ResolverConfig(max_results=6, min_query_length=1, timeout=1.0, fallback_enabled=True),
        log_level="DEBUG",
        env="test",
    )
