"""Defines the model for a geographic point location."""

import math
import re
from typing import Any

from loguru import logger
from pydantic import Field, model_validator
from rich import print as _pprint
from typing_extensions import Annotated

from geocoords.exceptions import GCInvalidArgument
from geocoords.models import GeoCoordsBaseModel, make_model_config

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# Every component needs digits on both sides of the decimal point.
_DECIMAL = r"-?[0-9]+\.[0-9]+"
COORDINATES_PATTERN = re.compile(rf"{_DECIMAL} {_DECIMAL}(?: {_DECIMAL})?")
# Plain decimal or scientific literal, ASCII digits only.
NUMERIC_LITERAL_PATTERN = re.compile(
    r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*"
)


class Coordinates(GeoCoordsBaseModel):
    """Represents a geographic point location.

    Instances are immutable and compare by value. The textual form follows the
    ISO 6709 layout ``"<latitude> <longitude> [<altitude>]"``.

    Examples
    --------
    >>> coordinates = Coordinates.create(40.7128, -74.006)
    >>> str(coordinates)
    '40.712800 -74.006000'
    >>> Coordinates.parse("40.712800 -74.006000 10.500000").altitude
    10.5
    """

    model_config = make_model_config(frozen=True)

    latitude: Annotated[
        float, Field(description="The latitude in decimal degrees, ranging from -90 to 90.")
    ]
    longitude: Annotated[
        float, Field(description="The longitude in decimal degrees, ranging from -180 to 180.")
    ]
    altitude: Annotated[float | None, Field(description="The altitude in meters.")] = None

    @model_validator(mode="before")
    @classmethod
    def check_coordinates(cls, data: Any) -> Any:
        """Coerce the values to floats and check that they are in range.

        Raises
        ------
        GCInvalidArgument
            Raised if the latitude, longitude or altitude is not a number or if the
            latitude or longitude is out of range.
        """
        if not isinstance(data, dict):
            return data

        latitude = data.get("latitude")
        value = _to_float(latitude)
        if value is None or not LATITUDE_RANGE[0] <= value <= LATITUDE_RANGE[1]:
            msg = f"The latitude must be a number ranging from -90 to 90, {latitude!r} given."
            raise GCInvalidArgument(msg)
        checked = {"latitude": value}

        longitude = data.get("longitude")
        value = _to_float(longitude)
        if value is None or not LONGITUDE_RANGE[0] <= value <= LONGITUDE_RANGE[1]:
            msg = (
                f"The longitude must be a number ranging from -180 to 180, {longitude!r} given."
            )
            raise GCInvalidArgument(msg)
        checked["longitude"] = value

        altitude = data.get("altitude")
        if altitude is not None:
            value = _to_float(altitude)
            if value is None or not math.isfinite(value):
                msg = f"The altitude must be a number, {altitude!r} given."
                raise GCInvalidArgument(msg)
            altitude = value
        checked["altitude"] = altitude

        return {**data, **checked}

    @classmethod
    def create(cls, latitude: Any, longitude: Any, altitude: Any = None) -> "Coordinates":
        """Construct coordinates from positional values.

        Parameters
        ----------
        latitude
            The latitude in decimal degrees, must range from -90 to 90.
        longitude
            The longitude in decimal degrees, must range from -180 to 180.
        altitude
            The altitude in meters, if known.

        Raises
        ------
        GCInvalidArgument
            Raised if a value is not a number or is out of range.
        """
        return cls(latitude=latitude, longitude=longitude, altitude=altitude)

    @classmethod
    def parse(cls, text: str) -> "Coordinates":
        """Parse the ISO 6709 representation of a geographic point location.

        Parameters
        ----------
        text : str
            Two or three space-separated decimal numbers, e.g. ``"40.712800 -74.006000"``.

        Raises
        ------
        GCInvalidArgument
            Raised if the string is malformed or holds out-of-range values.
        """
        if not isinstance(text, str) or COORDINATES_PATTERN.fullmatch(text) is None:
            msg = "Malformed coordinates string."
            raise GCInvalidArgument(msg)

        coordinates = cls.create(*text.split(" "))
        logger.debug("Parsed {} from {!r}", coordinates.to_string(), text)
        return coordinates

    @classmethod
    def example(cls) -> "Coordinates":
        return cls(latitude=39.7392, longitude=-104.9903, altitude=1609.3)

    @property
    def has_altitude(self) -> bool:
        """Return True if the altitude is available."""
        return self.altitude is not None

    def to_string(self) -> str:
        """Return the ISO 6709 representation of the geographic point location."""
        if not self.has_altitude:
            return f"{self.latitude:f} {self.longitude:f}"
        return f"{self.latitude:f} {self.longitude:f} {self.altitude:f}"

    def __str__(self) -> str:
        return self.to_string()

    def pprint(self):
        return _pprint(self)


def _to_float(value: Any) -> float | None:
    if isinstance(value, (bool, bytes, bytearray, memoryview)):
        return None
    if isinstance(value, str) and NUMERIC_LITERAL_PATTERN.fullmatch(value) is None:
        return None
    try:
        return float(value)
    except (OverflowError, TypeError, ValueError):
        return None
