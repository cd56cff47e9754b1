"""Core data types for livematch.

All data structures are dataclasses with attribute access.
Names coming from the schedule feed are kept as sourced for display;
normalization only happens inside matching.
"""

from dataclasses import dataclass, field
from enum import Enum


class MatchStatus(str, Enum):
    """Three-state fixture status, derived per request from wall-clock time."""

    UPCOMING = "upcoming"
    LIVE = "live"
    FINISHED = "finished"


class StreamTier(str, Enum):
    """Stream quality tier."""

    SD = "480p"
    HD = "1080p"


@dataclass(frozen=True)
class ResultRow:
    """One scraped score line from the results table.

    league/home/away are alias-normalized when the row is created.
    """

    league: str
    home: str
    away: str
    full_time: str | None = None
    half_time: str | None = None


@dataclass(frozen=True)
class ScheduleEntry:
    """One fixture from the structured schedule feed."""

    kickoff: int  # epoch seconds
    league: str
    home_name: str
    home_logo: str
    away_name: str
    away_logo: str
    live_home_score: int | None = None
    live_away_score: int | None = None
    room_ids: tuple[int, ...] = ()

    @property
    def native_score(self) -> str | None:
        """Score carried by the schedule feed itself, if both sides are present."""
        if self.live_home_score is None or self.live_away_score is None:
            return None
        return f"{self.live_home_score} - {self.live_away_score}"


@dataclass(frozen=True)
class StreamLink:
    """A playable stream URL at one quality tier."""

    tier: StreamTier
    url: str


@dataclass(frozen=True)
class MatchDebugInfo:
    """Diagnostic copy of the pre-normalization names. Not used by any logic."""

    original_league: str
    original_home: str
    original_away: str
    results_match: str  # "FOUND" | "NOT_FOUND"


@dataclass
class MatchRecord:
    """A schedule entry merged with its matched result row and streams."""

    kickoff: int
    match_time: str
    status: MatchStatus
    league: str
    home_name: str
    home_logo: str
    away_name: str
    away_logo: str
    score: str | None = None
    half_time_score: str | None = None
    streams: list[StreamLink] = field(default_factory=list)
    debug: MatchDebugInfo | None = None
