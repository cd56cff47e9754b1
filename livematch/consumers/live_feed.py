"""Live feed - builds the merged fixture list served by /api/live.

Per request:
1. Results rows (cached) and each feed day's fixtures (cached per date)
   are fetched concurrently and joined.
2. Every fixture is matched against the results rows for a score.
3. Fixtures that are live right now get their stream links resolved,
   all concurrently.

No background refresh - caches only refresh when a request finds them
expired. Any source failure degrades to "no data from this source".
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from datetime import datetime, tzinfo

from livematch.consumers.matching import (
    DEFAULT_MATCH_THRESHOLD,
    merge_scores,
    reconcile,
)
from livematch.consumers.matching.normalizer import DEFAULT_TEAM_CUTOFF
from livematch.core import (
    MatchDebugInfo,
    MatchRecord,
    MatchStatus,
    ResultRow,
    ResultsSource,
    ScheduleEntry,
    ScheduleSource,
    StreamLink,
    StreamSource,
)
from livematch.utilities.cache import CACHE_TTL_RESULTS, CACHE_TTL_SCHEDULE, StaleCache
from livematch.utilities.match_status import LIVE_WINDOW_SECONDS, classify_status
from livematch.utilities.tz import feed_date_keys, format_kickoff, now_utc

logger = logging.getLogger(__name__)

RESULTS_CACHE_KEY = "results"


@dataclass
class LiveFeedOptions:
    """Tunables for building the live feed."""

    lookahead_hours: int = 20
    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    team_cutoff: float = DEFAULT_TEAM_CUTOFF
    live_window: int = LIVE_WINDOW_SECONDS
    max_workers: int = 8
    timezone: tzinfo | None = None  # None = Config.FEED_TIMEZONE


class LiveFeed:
    """Coordinates sources, caches, matching and stream resolution.

    Caches are owned by the instance (not module globals), so separate
    instances never share state.
    """

    def __init__(
        self,
        results_source: ResultsSource,
        schedule_source: ScheduleSource,
        stream_source: StreamSource,
        results_cache: StaleCache | None = None,
        schedule_cache: StaleCache | None = None,
        options: LiveFeedOptions | None = None,
    ):
        self._results_source = results_source
        self._schedule_source = schedule_source
        self._stream_source = stream_source
        self._results_cache = results_cache or StaleCache(CACHE_TTL_RESULTS, name="results")
        self._schedule_cache = schedule_cache or StaleCache(CACHE_TTL_SCHEDULE, name="schedule")
        self._options = options or LiveFeedOptions()

    @property
    def results_cache(self) -> StaleCache:
        return self._results_cache

    @property
    def schedule_cache(self) -> StaleCache:
        return self._schedule_cache

    def close(self) -> None:
        """Close every source; one failing close does not skip the others."""
        for source in (self._results_source, self._schedule_source, self._stream_source):
            try:
                source.close()
            except Exception as e:
                logger.warning("[LIVE] Closing %s failed: %s", type(source).__name__, e)

    # =========================================================================
    # Cached sources
    # =========================================================================

    def get_results(self) -> list[ResultRow]:
        """Results rows, from cache when fresh."""
        return self._results_cache.get(RESULTS_CACHE_KEY, self._results_source.fetch_results)

    def get_schedule(self, date_key: str) -> list[ScheduleEntry]:
        """Fixtures for one feed day, from cache when fresh."""
        return self._schedule_cache.get(
            date_key,
            lambda: self._schedule_source.fetch_schedule(date_key),
        )

    # =========================================================================
    # Assembly
    # =========================================================================

    def get_matches(self, now: datetime | None = None) -> list[MatchRecord]:
        """Build the merged fixture list.

        Args:
            now: Reference time (timezone-aware, defaults to current UTC time)

        Returns:
            MatchRecords in feed order, earliest feed day first
        """
        now = now or now_utc()
        now_ts = int(now.timestamp())
        date_keys = feed_date_keys(now, self._options.lookahead_hours, self._options.timezone)

        results, schedules = self._fetch_sources(date_keys)

        pairs: list[tuple[MatchRecord, ScheduleEntry]] = []
        for key in date_keys:
            for entry in schedules.get(key, []):
                pairs.append((self._build_record(entry, results, now_ts), entry))

        self._attach_streams(pairs)
        records = [record for record, _ in pairs]

        found = sum(1 for r in records if r.debug and r.debug.results_match == "FOUND")
        logger.info(
            "[LIVE] %d fixtures for %s (%d result rows, %d matched)",
            len(records),
            ",".join(date_keys),
            len(results),
            found,
        )
        return records

    def _fetch_sources(
        self, date_keys: list[str]
    ) -> tuple[list[ResultRow], dict[str, list[ScheduleEntry]]]:
        """Fetch results and every feed day concurrently, joining all of them."""
        schedules: dict[str, list[ScheduleEntry]] = {}

        with ThreadPoolExecutor(max_workers=1 + len(date_keys)) as executor:
            results_future = executor.submit(self.get_results)
            schedule_futures = {executor.submit(self.get_schedule, key): key for key in date_keys}

            for future in as_completed(schedule_futures):
                key = schedule_futures[future]
                schedules[key] = future.result()

            results = results_future.result()

        return results, schedules

    def _build_record(
        self,
        entry: ScheduleEntry,
        results: list[ResultRow],
        now_ts: int,
    ) -> MatchRecord:
        status = classify_status(entry.kickoff, now_ts, self._options.live_window)
        matched = reconcile(
            entry,
            results,
            threshold=self._options.match_threshold,
            team_cutoff=self._options.team_cutoff,
        )
        score, half_time = merge_scores(entry, matched)

        return MatchRecord(
            kickoff=entry.kickoff,
            match_time=format_kickoff(entry.kickoff, self._options.timezone),
            status=status,
            league=entry.league,
            home_name=entry.home_name,
            home_logo=entry.home_logo,
            away_name=entry.away_name,
            away_logo=entry.away_logo,
            score=score,
            half_time_score=half_time,
            debug=MatchDebugInfo(
                original_league=entry.league,
                original_home=entry.home_name,
                original_away=entry.away_name,
                results_match=matched.debug_flag,
            ),
        )

    def _attach_streams(self, pairs: list[tuple[MatchRecord, ScheduleEntry]]) -> None:
        """Resolve streams for live records in place, all fixtures concurrently."""
        live = [
            (record, entry.room_ids)
            for record, entry in pairs
            if record.status == MatchStatus.LIVE and entry.room_ids
        ]
        if not live:
            return

        workers = min(self._options.max_workers, len(live))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self._stream_source.resolve_streams, rooms): record
                for record, rooms in live
            }
            for future in as_completed(futures):
                record = futures[future]
                try:
                    streams: list[StreamLink] = future.result()
                except Exception as e:
                    logger.warning(
                        "[LIVE] Stream lookup failed for %s vs %s: %s",
                        record.home_name,
                        record.away_name,
                        e,
                    )
                    streams = []
                record.streams = streams
