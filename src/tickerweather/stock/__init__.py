"""Stock package - finance provider client and request handler."""

from .api import StockClient
from .handler import StockRequestHandler

__all__ = ["StockClient", "StockRequestHandler"]
