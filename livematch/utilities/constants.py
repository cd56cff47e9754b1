"""Matching constants for fixture-to-result matching.

Contains hardcoded aliases that the token similarity can't solve on its own.
Keep this minimal - the similarity score tolerates most spelling drift.
"""

# =============================================================================
# TOKEN ALIASES
# Word-level substitutions applied to normalized text before comparison.
# Both sides of a comparison go through the same table.
#
# Format: token -> replacement (may expand to several words)
# All keys should be lowercase, already normalized
# =============================================================================

TOKEN_ALIASES: dict[str, str] = {
    "utd": "united",
    "man": "manchester",
    "mun": "manchester united",
    "sg": "super giant",
    "acl2": "afc champions league 2",
    "spurs": "tottenham hotspur",
    "wolves": "wolverhampton wanderers",
    "psg": "paris saint germain",
    "st": "saint",
}


# =============================================================================
# CANONICAL TEAM NAMES
# The schedule feed and the results page spell some clubs differently.
# Schedule-side names are resolved to the primary name before matching.
#
# Format: primary_name -> known alternate spellings
# =============================================================================

TEAM_ALIASES: dict[str, tuple[str, ...]] = {
    # AFC Champions League
    "Gangwon FC": ("gangwon",),
    "Vissel Kobe": ("vissel kobe",),
    "Shanghai Shenhua FC": ("shanghai shenhua",),
    "FC Seoul": ("fc seoul", "seoul"),
    "Gamba Osaka": ("gamba osaka",),
    "Thep Xanh Nam Dinh FC": ("nam dinh fc", "thep xanh nam dinh"),
    "Ratchaburi FC": ("ratchaburi",),
    "Eastern": ("eastern",),
    # UEFA Champions League
    "Athletic Club": ("athletic bilbao", "bilbao"),
    "Qarabag": ("qarabag fk", "fk qarabag"),
    "Galatasaray": ("galatasaray",),
    "Bodo Glimt": ("bodo glimt", "bodo/glimt"),
    "Chelsea": ("chelsea",),
    "AFC Ajax": ("ajax", "afc ajax"),
    "Eintracht Frankfurt": ("eintracht frankfurt",),
    "Liverpool": ("liverpool",),
    "AS Monaco": ("as monaco", "monaco"),
    "Tottenham Hotspur": ("tottenham", "tottenham hotspur"),
    "Atalanta": ("atalanta",),
    "Slavia Praha": ("slavia praha", "slavia prague"),
    "Real Madrid": ("real madrid",),
    "Juventus": ("juventus",),
    "FC Bayern Munich": ("bayern munchen", "bayern munich", "fc bayern munich"),
    "Club Brugge": ("club brugge",),
    "Sporting CP": ("sporting lisbon", "sporting cp"),
    "Marseille": ("marseille", "olympique marseille"),
    # Asia - other
    "Al Nassr FC": ("al nassr riyadh", "al nassr"),
    "FC Goa": ("fc goa",),
    "Esteghlal Tehran": ("esteghlal",),
    "Al Wehdat": ("al wehdat amman",),
    "Al-Ahli Doha": ("al ahli doha",),
    "Arkadag FK": ("fk arkadag",),
    "Persib Bandung": ("persib bandung",),
    "Selangor FC": ("selangor",),
    "BG Pathum United": ("bg pathum united",),
    "Beijing Guoan FC": ("beijing guoan fc",),
    "Pohang Steelers": ("pohang steelers",),
    # Indonesia
    "PSIM Yogyakarta": ("psim yogyakarta",),
    "Dewa United FC": ("dewa united fc",),
}


# =============================================================================
# CANONICAL LEAGUE NAMES
# Format: results-page league label -> schedule-feed spellings
# =============================================================================

LEAGUE_MAPPINGS: dict[str, tuple[str, ...]] = {
    "ACL Elite": ("afc champions league elite", "acl elite"),
    "ACL2": ("afc champions league two", "acl2"),
    "UEFA CL": ("uefa champions league", "champions league"),
    "UEFA YL": ("uefa youth league",),
    "IDN D1": ("indonesia super league", "indonesia liga 1"),
    "TUR D1": ("turkey super league", "super lig"),
    "EGY D1": ("egypt premier league",),
    "FIN D1": ("finland veikkausliiga",),
    "RUS Cup": ("russia cup",),
    "NBA": ("nba",),
    "NBL": ("nbl",),
    "KBL": ("kbl",),
    "MPBL": ("mpbl",),
}


# Results-page cells use this literal when no score is available yet
SCORE_PLACEHOLDER = "-"
