"""Name matching between the schedule feed and the results page.

Pipeline:
    normalizer  - normalize_name / apply_aliases / canonical lookups
    similarity  - Jaccard over word sets
    reconciler  - best-row search with acceptance threshold
"""

from livematch.consumers.matching.normalizer import (
    apply_aliases,
    find_league_match,
    find_team_match,
    normalize_name,
)
from livematch.consumers.matching.reconciler import (
    DEFAULT_MATCH_THRESHOLD,
    NO_MATCH,
    ReconcileResult,
    merge_scores,
    reconcile,
)
from livematch.consumers.matching.similarity import similarity

__all__ = [
    "DEFAULT_MATCH_THRESHOLD",
    "NO_MATCH",
    "ReconcileResult",
    "apply_aliases",
    "find_league_match",
    "find_team_match",
    "merge_scores",
    "normalize_name",
    "reconcile",
    "similarity",
]
