"""Core types shared by providers, consumers and the API."""

from livematch.core.interfaces import ResultsSource, ScheduleSource, StreamSource
from livematch.core.types import (
    MatchDebugInfo,
    MatchRecord,
    MatchStatus,
    ResultRow,
    ScheduleEntry,
    StreamLink,
    StreamTier,
)

__all__ = [
    "ResultsSource",
    "ScheduleSource",
    "StreamSource",
    "MatchDebugInfo",
    "MatchRecord",
    "MatchStatus",
    "ResultRow",
    "ScheduleEntry",
    "StreamLink",
    "StreamTier",
]
