"""Logging setup for livematch.

Console output plus one rotating file. Level, directory and format come
from Config (LOG_LEVEL, LOG_DIR, LOG_FORMAT).

Modules log through logging.getLogger(__name__) and prefix messages with
the source they concern:

    logger.warning("[VNRES] Schedule %s returned code %s", key, code)

The JSON format lifts that prefix into its own "tag" field, so a log
shipper can filter per upstream (IBET, VNRES, STREAMS, CACHE, LIVE).
"""

import json
import logging
import re
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from livematch.config import VERSION, Config

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_FILE = "livematch.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

# Per-request chatter from the HTTP stack drowns the feed's own messages
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

_TAG = re.compile(r"^\[([A-Z_]+)\]\s*")
_configured = False


def split_tag(message: str) -> tuple[str | None, str]:
    """Split "[TAG] text" into ("TAG", "text"); untagged -> (None, message)."""
    match = _TAG.match(message)
    if not match:
        return None, message
    return match.group(1), message[match.end():]


class TaggedJSONFormatter(logging.Formatter):
    """One JSON object per line, with the source tag as its own field."""

    def format(self, record: logging.LogRecord) -> str:
        tag, message = split_tag(record.getMessage())
        entry = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "tag": tag,
            "message": message,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def resolve_log_dir(log_dir: str | Path | None = None) -> Path:
    """Explicit argument, then Config.LOG_DIR, then logs/ under the project root."""
    if log_dir:
        return Path(log_dir)
    if Config.LOG_DIR:
        return Path(Config.LOG_DIR)
    return Path(__file__).resolve().parents[2] / "logs"


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: str | None = None,
    log_dir: str | Path | None = None,
    use_json: bool | None = None,
) -> None:
    """Install console and file handlers on the root logger.

    Arguments override the matching Config values. Only the first call
    has an effect.
    """
    global _configured
    if _configured:
        return

    level = _level(log_level or Config.LOG_LEVEL)
    if use_json is None:
        use_json = Config.LOG_FORMAT.lower() == "json"
    formatter = (
        TaggedJSONFormatter() if use_json else logging.Formatter(TEXT_FORMAT, TEXT_DATEFMT)
    )

    path = resolve_log_dir(log_dir)
    path.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(
            path / LOG_FILE,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        ),
    ]

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger("livematch").info(
        "[STARTUP] livematch %s (level=%s, format=%s, dir=%s)",
        VERSION,
        logging.getLevelName(level),
        "json" if use_json else "text",
        path,
    )
