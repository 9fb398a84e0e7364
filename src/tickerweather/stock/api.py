"""Finance data client for the stock quote API."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any, Final

import requests

from tickerweather.errors import NetworkError, ParseError, ProxyError
from tickerweather.settings import StockServiceSettings
from tickerweather.utils.http import error_message

logger: Final = logging.getLogger(__name__)


class StockClient:
    """Yahoo Finance client for chart data and symbol search.

    Chart payloads are passed through untouched; only the symbol search
    and the latest market price are picked out.
    """

    def __init__(self, settings: StockServiceSettings | None = None) -> None:
        """Initialize the stock client.

        Args:
            settings: Stock service settings with endpoints and timeout
        """
        self.settings = settings or StockServiceSettings()

    def fetch_chart(self, symbol: str) -> dict[str, Any]:
        """Retrieve the raw chart payload for a ticker symbol.

        Raises:
            NetworkError: When the provider cannot be reached
            NotFoundError: When the provider does not know the symbol
            ProviderError: For other non-2xx answers
            ParseError: When the response is not a JSON object
        """
        url = f"{self.settings.chart_url.rstrip('/')}/{urllib.parse.quote(symbol, safe='')}"
        return self._get_json(url, None, what=f"chart for {symbol!r}")

    def search_symbol(self, company_name: str) -> str | None:
        """Return the best-match ticker symbol for a company name, or None."""
        params = {"q": company_name, "quotesCount": 1, "newsCount": 0}
        data = self._get_json(
            self.settings.search_url, params, what=f"search for {company_name!r}"
        )
        quotes = data.get("quotes") or []
        for quote in quotes:
            if isinstance(quote, dict) and quote.get("symbol"):
                return str(quote["symbol"])
        logger.info("No symbol match for %r", company_name)
        return None

    def fetch_price(self, symbol: str) -> float | None:
        """Return the latest regular market price, or None without chart data."""
        data = self.fetch_chart(symbol)
        chart = data.get("chart") or {}
        if not isinstance(chart, dict):
            raise ParseError(f"Malformed chart payload for {symbol!r}")
        results = chart.get("result") or []
        if not results:
            logger.info("No chart result for %r", symbol)
            return None

        first = results[0] if isinstance(results, list) else None
        if not isinstance(first, dict):
            raise ParseError(f"Malformed chart result for {symbol!r}")
        meta = first.get("meta") or {}
        if not isinstance(meta, dict):
            raise ParseError(f"Malformed chart result for {symbol!r}")
        price = meta.get("regularMarketPrice")
        if price is None:
            return None
        try:
            return float(price)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"Malformed price for {symbol!r}: {price!r}", exc) from exc

    def _get_json(
        self, url: str, params: dict[str, Any] | None, what: str
    ) -> dict[str, Any]:
        headers = {"User-Agent": self.settings.user_agent}
        try:
            resp = requests.get(
                url, params=params, headers=headers, timeout=self.settings.timeout
            )
        except requests.RequestException as exc:
            logger.warning("Stock API network error (%s): %s", what, exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            msg = error_message(resp)
            logger.error("Stock API error (%s): %s - %s", what, resp.status_code, msg)
            raise ProxyError.from_status(resp.status_code, msg)

        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseError(f"Stock API returned invalid JSON ({what})", exc) from exc
        if not isinstance(data, dict):
            raise ParseError(f"Stock API returned unexpected payload ({what})")
        return data
