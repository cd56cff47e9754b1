"""Results page provider (HTML scrape)."""

from livematch.providers.ibet.client import IbetClient
from livematch.providers.ibet.parser import parse_results_html
from livematch.providers.ibet.provider import IbetProvider

__all__ = ["IbetClient", "IbetProvider", "parse_results_html"]
