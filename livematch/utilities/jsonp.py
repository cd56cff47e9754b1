"""JSONP envelope decoding.

The schedule and room endpoints answer with `callback(<json>)` bodies.
"""

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)


def decode_jsonp(body: str | None, callback: str) -> Any | None:
    """Extract and parse the JSON argument of a JSONP response.

    Args:
        body: Raw response text
        callback: Callback name as a regex fragment (e.g., r"matches_\\d+", "detail")

    Returns:
        Parsed JSON, or None if the envelope doesn't match or the JSON is invalid
    """
    if not body:
        return None

    match = re.search(rf"{callback}\((.*)\)", body, re.DOTALL)
    if not match:
        logger.debug("[JSONP] No %s(...) envelope in response", callback)
        return None

    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as e:
        logger.warning("[JSONP] Invalid JSON in %s(...) envelope: %s", callback, e)
        return None
