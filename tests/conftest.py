import pytest
from loguru import logger

from geocoords import Coordinates


@pytest.fixture
def new_york() -> Coordinates:
    """Creates coordinates without an altitude."""
    return Coordinates.create(40.7128, -74.0060)


@pytest.fixture
def new_york_with_altitude() -> Coordinates:
    """Creates coordinates with an altitude."""
    return Coordinates.create(40.7128, -74.0060, 10.5)


@pytest.fixture
def caplog(caplog):
    """Enable logging for the package"""
    logger.remove()
    logger.enable("geocoords")
    handler_id = logger.add(caplog.handler)
    yield caplog
    logger.remove(handler_id)
