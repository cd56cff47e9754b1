"""Timezone utilities.

The schedule feed buckets fixtures by calendar day in its own region
(Config.FEED_TIMEZONE), so date keys and displayed kickoff times are
computed there rather than in UTC.
"""

from datetime import UTC, datetime, timedelta, tzinfo

from livematch.config import get_feed_timezone

__all__ = [
    "date_key",
    "feed_date_keys",
    "format_kickoff",
    "now_utc",
]


def now_utc() -> datetime:
    """Get current time in UTC."""
    return datetime.now(UTC)


def date_key(at: datetime, tz: tzinfo | None = None) -> str:
    """Format the feed-local calendar day of a moment as YYYYMMDD.

    Args:
        at: Moment to bucket (must be timezone-aware)
        tz: Bucketing timezone (defaults to the feed timezone)
    """
    if at.tzinfo is None:
        raise ValueError("Cannot bucket naive datetime - must be timezone-aware")
    return at.astimezone(tz or get_feed_timezone()).strftime("%Y%m%d")


def feed_date_keys(
    at: datetime,
    lookahead_hours: int,
    tz: tzinfo | None = None,
) -> list[str]:
    """Date keys for "now" and "now + lookahead", de-duplicated in order.

    Early in the feed day both moments fall on the same date; that date is
    fetched only once.
    """
    keys: list[str] = []
    for moment in (at, at + timedelta(hours=lookahead_hours)):
        key = date_key(moment, tz)
        if key not in keys:
            keys.append(key)
    return keys


def format_kickoff(epoch_seconds: int, tz: tzinfo | None = None) -> str:
    """Format a kickoff time as 'hh:mm AM/PM' in the feed timezone.

    E.g., 1735732800 -> '06:30 PM' (Asia/Yangon)
    """
    local_dt = datetime.fromtimestamp(epoch_seconds, tz or get_feed_timezone())
    return local_dt.strftime("%I:%M %p")
