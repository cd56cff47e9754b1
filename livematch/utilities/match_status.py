"""Match status utilities.

Single source of truth for deriving a fixture's status from the clock.
The schedule feed has no reliable status field, so status is computed
per request from the kickoff time.
"""

from livematch.core import MatchStatus

# A fixture counts as live from kickoff until two hours after it (inclusive)
LIVE_WINDOW_SECONDS = 2 * 60 * 60


def classify_status(
    kickoff: int,
    now: int,
    live_window: int = LIVE_WINDOW_SECONDS,
) -> MatchStatus:
    """Classify a fixture as upcoming, live or finished.

    Args:
        kickoff: Kickoff time (epoch seconds)
        now: Current time (epoch seconds)
        live_window: Seconds after kickoff the fixture is still live

    Returns:
        MatchStatus
    """
    if kickoff <= now <= kickoff + live_window:
        return MatchStatus.LIVE
    if now > kickoff + live_window:
        return MatchStatus.FINISHED
    return MatchStatus.UPCOMING
