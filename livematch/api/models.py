"""Pydantic models for API responses."""

from typing import Literal

from pydantic import BaseModel

from livematch.core import MatchRecord

# =============================================================================
# Live matches
# =============================================================================


class ServerStream(BaseModel):
    """One playable stream for a live match."""

    name: Literal["480p", "1080p"]
    stream_url: str


class MatchDebug(BaseModel):
    """Pre-normalization names and whether a results row was matched."""

    original_league: str
    original_home: str
    original_away: str
    ibet_match: Literal["FOUND", "NOT_FOUND"]


class MatchResponse(BaseModel):
    """Response body for one fixture in the live feed."""

    match_time: str
    kickoff: int
    match_status: Literal["upcoming", "live", "finished"]
    home_team_name: str
    home_team_logo: str
    away_team_name: str
    away_team_logo: str
    league_name: str
    match_score: str | None = None
    ht_score: str | None = None
    servers: list[ServerStream] = []
    debug: MatchDebug | None = None

    @classmethod
    def from_record(cls, record: MatchRecord) -> "MatchResponse":
        return cls(
            match_time=record.match_time,
            kickoff=record.kickoff,
            match_status=record.status.value,
            home_team_name=record.home_name,
            home_team_logo=record.home_logo,
            away_team_name=record.away_name,
            away_team_logo=record.away_logo,
            league_name=record.league,
            match_score=record.score,
            ht_score=record.half_time_score,
            servers=[
                ServerStream(name=link.tier.value, stream_url=link.url)
                for link in record.streams
            ],
            debug=(
                MatchDebug(
                    original_league=record.debug.original_league,
                    original_home=record.debug.original_home,
                    original_away=record.debug.original_away,
                    ibet_match=record.debug.results_match,
                )
                if record.debug
                else None
            ),
        )


class ErrorResponse(BaseModel):
    """Body returned when the live feed can't be built at all."""

    error: str
    message: str


# =============================================================================
# Health
# =============================================================================


class HealthResponse(BaseModel):
    status: str
    version: str
    caches: dict[str, dict]
