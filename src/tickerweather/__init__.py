"""Proxy APIs for stock quotes and current weather."""

__version__ = "0.1.0"
