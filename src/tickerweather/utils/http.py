"""Helpers for reading provider HTTP responses."""

from __future__ import annotations

from typing import Final

import requests

# Human-readable explanations for common provider HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check parameters",
    401: "Provider rejected the request (unauthorized)",
    403: "Provider refused the request",
    404: "Provider returned no data",
    429: "Rate limit exceeded",
    500: "Provider internal error",
    502: "Bad gateway at provider",
    503: "Provider unavailable",
    504: "Gateway timeout",
}


def error_message(resp: requests.Response) -> str:
    """Extract a readable error message from a failed provider response.

    Open-Meteo reports failures as ``{"error": true, "reason": ...}``; the
    finance provider nests them under ``chart.error.description`` or
    ``finance.error.description``. Anything else falls back to
    HTTP_ERROR_MAP and finally the raw body.
    """
    fallback = HTTP_ERROR_MAP.get(resp.status_code, resp.text)
    try:
        body = resp.json()
    except ValueError:
        return fallback
    if not isinstance(body, dict):
        return fallback

    for key in ("reason", "message"):
        if body.get(key):
            return str(body[key])
    for section in ("chart", "finance"):
        error = (body.get(section) or {}).get("error") or {}
        if isinstance(error, dict) and error.get("description"):
            return str(error["description"])
    return fallback
