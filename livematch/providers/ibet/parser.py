"""Results page HTML parser.

The page carries one results table (id="g1") laid out as:

    <tr class="Event">  league header, applies to following rows
    <tr class="Normal"> data row: [unused, home, fulltime, away, halftime]

Any other row is ignored.
"""

import logging

from bs4 import BeautifulSoup, Tag

from livematch.consumers.matching.normalizer import apply_aliases
from livematch.core import ResultRow

logger = logging.getLogger(__name__)

RESULTS_TABLE_ID = "g1"
HEADER_MARKER = "event"
DATA_MARKER = "normal"

# Column positions in a data row
COL_HOME = 1
COL_FULL_TIME = 2
COL_AWAY = 3
COL_HALF_TIME = 4


def _classes(tag: Tag) -> set[str]:
    return {c.lower() for c in (tag.get("class") or [])}


def _carries(tag: Tag, marker: str) -> bool:
    return any(c.startswith(marker) for c in _classes(tag))


def _has_marker(row: Tag, marker: str) -> bool:
    """True if the row or any element inside it has a class starting with the marker.

    Prefix match: the page also emits variants such as "EventTitle".
    """
    if _carries(row, marker):
        return True
    return row.find(lambda t: _carries(t, marker)) is not None


def _cell_text(cells: list[Tag], index: int) -> str:
    if index >= len(cells):
        return ""
    return cells[index].get_text(" ", strip=True)


def parse_results_html(html: str | None) -> list[ResultRow] | None:
    """Extract result rows from the results page.

    Args:
        html: Raw page HTML

    Returns:
        List of ResultRow (league/home/away alias-normalized), or None if
        the results table is missing
    """
    if not html:
        return None

    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table", id=RESULTS_TABLE_ID)
    if table is None:
        logger.warning("[IBET] Results table #%s not found in page", RESULTS_TABLE_ID)
        return None

    rows: list[ResultRow] = []
    current_league = ""

    for tr in table.find_all("tr"):
        if _has_marker(tr, HEADER_MARKER):
            league = tr.get_text(" ", strip=True)
            if league:
                current_league = league
            continue

        if not _has_marker(tr, DATA_MARKER):
            continue

        cells = tr.find_all(["td", "th"])
        home = _cell_text(cells, COL_HOME)
        away = _cell_text(cells, COL_AWAY)
        if not home or not away:
            continue

        rows.append(
            ResultRow(
                league=apply_aliases(current_league),
                home=apply_aliases(home),
                away=apply_aliases(away),
                full_time=_cell_text(cells, COL_FULL_TIME) or None,
                half_time=_cell_text(cells, COL_HALF_TIME) or None,
            )
        )

    logger.debug("[IBET] Parsed %d result rows", len(rows))
    return rows
