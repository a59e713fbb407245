"""
Pydantic models and enums shared by the resolution pipeline.
These are pure data objects with no provider or UI coupling.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, Field


# ── Enums ──────────────────────────────────────────────────────────────

class DestinationCategory(str, Enum):
    COUNTRY = "country"
    STATE_OR_PROVINCE = "state_or_province"
    CITY = "city"


class CandidateSource(str, Enum):
    CURATED = "curated"
    EXTERNAL = "external"
    TYPED = "typed"


class MatchStrength(IntEnum):
    """How strongly a query matches a gazetteer name. Larger is stronger."""
    NONE = 0
    SUBSTRING = 1
    PREFIX = 2


class ResolutionState(str, Enum):
    IDLE = "idle"
    GAZETTEER_LOOKUP = "gazetteer_lookup"
    EXTERNAL_LOOKUP = "external_lookup"
    DONE = "done"


# ── Candidates ────────────────────────────────────────────────────────

class Coordinate(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    model_config = {"frozen": True}


class Candidate(BaseModel):
    """A single destination suggestion shown to the user."""
    title: str
    subtitle: str = ""
    source: CandidateSource = CandidateSource.EXTERNAL
    # Passed through from the provider, never interpreted by ranking
    coordinate: Optional[Coordinate] = None

    model_config = {"frozen": True}

    @property
    def identity(self) -> tuple[str, str]:
        return (self.title, self.subtitle)

    @property
    def display_name(self) -> str:
        if not self.subtitle:
            return self.title
        return f"{self.title}, {self.subtitle}"

    @classmethod
    def from_typed(cls, text: str) -> "Candidate":
        """Keep what the user typed when no suggestion fits."""
        return cls(title=text.strip(), subtitle="", source=CandidateSource.TYPED)
