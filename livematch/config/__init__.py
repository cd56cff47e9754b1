"""Application configuration.

Single source of truth for all configuration values.
Loads from environment variables with .env file support.
"""

import os
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

# =============================================================================
# VERSION - Read from pyproject.toml (single source of truth)
# =============================================================================


def _get_version() -> str:
    """Read version - prefer pyproject.toml, fall back to installed metadata."""
    try:
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
                return data.get("project", {}).get("version", "0.0.0")
    except (OSError, KeyError, ValueError):
        pass

    try:
        from importlib.metadata import PackageNotFoundError, version

        try:
            return version("livematch")
        except PackageNotFoundError:
            pass
    except ImportError:
        pass

    return "0.0.0"


VERSION = _get_version()

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Config:
    """Application configuration singleton.

    All configuration values should be accessed through this class.
    Values are loaded from environment variables with sensible defaults.
    """

    # Upstream sources
    RESULTS_URL: str = os.getenv("RESULTS_URL", "https://proxy-ibet.aunghein-mm.workers.dev")
    SCHEDULE_BASE_URL: str = os.getenv("SCHEDULE_BASE_URL", "https://json.vnres.co")
    SCHEDULE_REFERER: str = os.getenv("SCHEDULE_REFERER", "https://socolivev.co/")

    # The schedule feed buckets matches by day in this region, not UTC
    FEED_TIMEZONE: str = os.getenv("FEED_TIMEZONE", "Asia/Yangon")

    # Second feed day is "now + N hours" in the feed timezone
    LOOKAHEAD_HOURS: int = _env_int("LOOKAHEAD_HOURS", 20)

    # Cache TTLs (seconds) - kept separate, the sources change at different rates
    RESULTS_CACHE_TTL: int = _env_int("RESULTS_CACHE_TTL", 3 * 60)
    SCHEDULE_CACHE_TTL: int = _env_int("SCHEDULE_CACHE_TTL", 2 * 60)

    # Per-source HTTP timeouts (seconds)
    RESULTS_TIMEOUT: float = _env_float("RESULTS_TIMEOUT", 10.0)
    SCHEDULE_TIMEOUT: float = _env_float("SCHEDULE_TIMEOUT", 15.0)
    ROOM_TIMEOUT: float = _env_float("ROOM_TIMEOUT", 10.0)

    # Matching
    MATCH_THRESHOLD: float = _env_float("MATCH_THRESHOLD", 0.6)
    TEAM_FUZZY_CUTOFF: float = _env_float("TEAM_FUZZY_CUTOFF", 92.0)

    # Thread pool size for fan-out fetches
    MAX_WORKERS: int = _env_int("MAX_WORKERS", 8)

    # API
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = _env_int("API_PORT", 8000)
    LIVE_CACHE_CONTROL: str = os.getenv(
        "LIVE_CACHE_CONTROL",
        "public, s-maxage=30, stale-while-revalidate=60",
    )

    # Logging (LOG_DIR empty = logs/ under the project root)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "text")

    @classmethod
    def get_feed_timezone(cls) -> ZoneInfo:
        """Get the feed timezone as a ZoneInfo object.

        Falls back to UTC if the configured name is not a valid zone.
        """
        try:
            return ZoneInfo(cls.FEED_TIMEZONE)
        except (KeyError, ValueError):
            return ZoneInfo("UTC")


def get_feed_timezone() -> ZoneInfo:
    """Get the timezone the schedule feed buckets its days in."""
    return Config.get_feed_timezone()
