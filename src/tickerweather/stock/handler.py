"""Request handling for the stock quote endpoints."""

from __future__ import annotations

from typing import Any

from tickerweather.errors import NotFoundError, ProviderError, ValidationError
from tickerweather.stock.api import StockClient


class StockRequestHandler:
    """Validate stock query parameters and shape the response bodies."""

    def __init__(self, client: StockClient | None = None) -> None:
        self.client = client or StockClient()

    def details(self, symbol: str | None) -> dict[str, Any]:
        """Body for ``GET /api/stock``: the provider chart, passed through."""
        symbol = _require(symbol, "Stock symbol is required")
        try:
            data = self.client.fetch_chart(symbol)
        except NotFoundError as err:
            # an unknown symbol is reported as a failed fetch on this route
            raise ProviderError(err.code, err.message, err.response) from err
        return {"message": "Stock details fetched successfully", "data": data}

    def symbol(self, company_name: str | None) -> dict[str, Any]:
        """Body for ``GET /api/stock/symbol``."""
        company_name = _require(company_name, "Company name is required")
        found = self.client.search_symbol(company_name)
        if found is None:
            raise NotFoundError("No matching stock symbol found")
        return {"message": "Stock symbol fetched successfully", "symbol": found}

    def price(self, symbol: str | None) -> dict[str, Any]:
        """Body for ``GET /api/stock/price``."""
        symbol = _require(symbol, "Stock symbol is required")
        try:
            price = self.client.fetch_price(symbol)
        except NotFoundError:
            price = None
        if price is None:
            raise NotFoundError("No price data found for symbol")
        return {"message": "Stock price fetched successfully", "price": price}


def _require(value: str | None, message: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(message)
    return value
