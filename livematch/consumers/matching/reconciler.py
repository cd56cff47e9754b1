"""Match a schedule entry onto the scraped results rows.

The results page has no ids shared with the schedule feed, so rows are
matched by name: league + home + away, each scored with token similarity.

Scoring:
    score = sim(league) + sim(home) + sim(away)      range [0, 3]

The single best row wins (first seen on ties) and is accepted only when
its score reaches the threshold.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from livematch.consumers.matching.normalizer import (
    DEFAULT_TEAM_CUTOFF,
    apply_aliases,
    find_league_match,
    find_team_match,
)
from livematch.consumers.matching.similarity import similarity
from livematch.core import ResultRow, ScheduleEntry
from livematch.utilities.constants import SCORE_PLACEHOLDER

logger = logging.getLogger(__name__)

# Empirical acceptance threshold on the summed [0, 3] score
DEFAULT_MATCH_THRESHOLD = 0.6


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of matching one schedule entry against the results rows."""

    full_time: str | None = None
    half_time: str | None = None
    matched: bool = False
    score: float = 0.0

    @property
    def debug_flag(self) -> str:
        """FOUND whenever a row was accepted, even if its score cells were empty."""
        return "FOUND" if self.matched else "NOT_FOUND"


NO_MATCH = ReconcileResult()


def _score_value(value: str | None) -> str | None:
    """Treat the results-page placeholder as a missing score."""
    if not value or value == SCORE_PLACEHOLDER:
        return None
    return value


def reconcile(
    entry: ScheduleEntry,
    results: Sequence[ResultRow],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
    team_cutoff: float = DEFAULT_TEAM_CUTOFF,
) -> ReconcileResult:
    """Find the results row describing the same fixture as a schedule entry.

    Args:
        entry: Fixture from the schedule feed (names as sourced)
        results: Alias-normalized rows from the results page
        threshold: Minimum summed similarity to accept the best row
        team_cutoff: rapidfuzz cutoff for canonical team lookup

    Returns:
        ReconcileResult with the accepted scores, or NO_MATCH
    """
    if not results:
        return NO_MATCH

    league = apply_aliases(find_league_match(entry.league))
    home = apply_aliases(find_team_match(entry.home_name, cutoff=team_cutoff))
    away = apply_aliases(find_team_match(entry.away_name, cutoff=team_cutoff))

    best: ResultRow | None = None
    best_score = 0.0

    for row in results:
        score = (
            similarity(league, row.league)
            + similarity(home, row.home)
            + similarity(away, row.away)
        )
        # Strict > keeps the first row seen on ties
        if score > best_score:
            best_score = score
            best = row

    if best is None or best_score < threshold:
        logger.debug(
            "[RECONCILE] No row for '%s' vs '%s' (best=%.2f)",
            entry.home_name,
            entry.away_name,
            best_score,
        )
        return NO_MATCH

    logger.debug(
        "[RECONCILE] '%s' vs '%s' -> '%s' vs '%s' (%.2f)",
        entry.home_name,
        entry.away_name,
        best.home,
        best.away,
        best_score,
    )
    return ReconcileResult(
        full_time=_score_value(best.full_time),
        half_time=_score_value(best.half_time),
        matched=True,
        score=best_score,
    )


def merge_scores(entry: ScheduleEntry, result: ReconcileResult) -> tuple[str | None, str | None]:
    """Pick the displayed (score, half-time score) for an entry.

    Matched full-time score first, then the schedule feed's own score.
    """
    score = result.full_time or entry.native_score
    return score, result.half_time
