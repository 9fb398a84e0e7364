import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from tickerweather.weather.models import Location, ObservationBundle

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    return json.loads((DATA_DIR / "forecast_sample.json").read_text(encoding="utf-8"))


@pytest.fixture
def geocoding_payload() -> dict[str, Any]:
    return json.loads((DATA_DIR / "geocoding_sample.json").read_text(encoding="utf-8"))


@pytest.fixture
def bundle(forecast_payload: dict[str, Any]) -> ObservationBundle:
    return ObservationBundle.from_provider(forecast_payload)


@pytest.fixture
def location() -> Location:
    return Location(
        name="Atlanta",
        latitude=33.749,
        longitude=-84.38798,
        country="United States",
        timezone="America/New_York",
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 5, 3, 14, 30, tzinfo=UTC)
