"""Team and league name normalization for matching.

Two feeds spell the same fixture differently:
- the results page ("Man Utd", "UEFA CL")
- the schedule feed ("Manchester United", "UEFA Champions League")

Everything that is compared goes through normalize_name() first.
apply_aliases() then rewrites known abbreviations token by token, and the
find_*_match() helpers resolve whole names to a canonical spelling.

Accented letters are transliterated (unidecode: "München" -> "munchen")
rather than dropped, so "München" and "Munchen" compare equal.
"""

import logging
import re

from rapidfuzz import fuzz, process
from unidecode import unidecode

from livematch.utilities.constants import LEAGUE_MAPPINGS, TEAM_ALIASES, TOKEN_ALIASES

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9 ]")

# Default fuzzy cutoff for canonical team lookup (0-100, rapidfuzz ratio)
DEFAULT_TEAM_CUTOFF = 92.0


def normalize_name(raw: str | None) -> str:
    """Normalize a name for comparison.

    Applies: unidecode, lowercase, whitespace -> single space,
    drop everything outside [a-z0-9 ], collapse whitespace, trim.

    Returns "" for None or empty input.
    """
    if not raw:
        return ""

    text = unidecode(raw).lower()
    text = _WHITESPACE.sub(" ", text)
    text = _DISALLOWED.sub("", text)
    return " ".join(text.split())


def apply_aliases(raw: str | None) -> str:
    """Normalize, then replace known abbreviation tokens.

    E.g., "Man Utd" -> "manchester united"
    """
    normalized = normalize_name(raw)
    if not normalized:
        return ""
    return " ".join(TOKEN_ALIASES.get(token, token) for token in normalized.split(" "))


def _build_index(table: dict[str, tuple[str, ...]]) -> dict[str, str]:
    """Map every normalized spelling (primary included) to its primary name."""
    index: dict[str, str] = {}
    for primary, aliases in table.items():
        for spelling in (primary, *aliases):
            key = normalize_name(spelling)
            if key and key not in index:
                index[key] = primary
    return index


_TEAM_INDEX = _build_index(TEAM_ALIASES)
_TEAM_KEYS = list(_TEAM_INDEX)
_LEAGUE_INDEX: dict[str, str] = {}
for _league, _spellings in LEAGUE_MAPPINGS.items():
    for _spelling in _spellings:
        _LEAGUE_INDEX.setdefault(normalize_name(_spelling), _league)


def find_team_match(team_name: str, cutoff: float = DEFAULT_TEAM_CUTOFF) -> str:
    """Resolve a team name to its canonical spelling.

    Exact lookup on the normalized name first, then a rapidfuzz near-miss
    lookup (e.g., "Bayern Muenchen" -> "FC Bayern Munich").

    Args:
        team_name: Team name as sourced
        cutoff: Minimum rapidfuzz ratio for a near-miss hit (0-100)

    Returns:
        Canonical team name, or the input unchanged if nothing is close enough
    """
    normalized = normalize_name(team_name)
    if not normalized:
        return team_name

    primary = _TEAM_INDEX.get(normalized)
    if primary:
        return primary

    hit = process.extractOne(
        normalized,
        _TEAM_KEYS,
        scorer=fuzz.ratio,
        score_cutoff=cutoff,
    )
    if hit is None:
        return team_name

    matched_key, score, _ = hit
    logger.debug("[NORMALIZE] Team '%s' ~ '%s' (%.1f)", team_name, matched_key, score)
    return _TEAM_INDEX[matched_key]


def find_league_match(league_name: str) -> str:
    """Resolve a league name to the label the results page uses.

    Exact normalized match only - league labels are too short for fuzzy lookup.
    """
    return _LEAGUE_INDEX.get(normalize_name(league_name), league_name)
