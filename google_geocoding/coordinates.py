"""
WGS84 coordinates for the Google Geocoding API.

Coordinates are immutable and can only exist inside the legal WGS84 domain:
latitude in [-90, 90] and longitude in [-180, 180] degrees. Altitude (metres)
is carried along but not restricted.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from .constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE, SET_SEPARATOR
from .exceptions import ValidationError


def _checkRange(latitude: float, longitude: float) -> None:
    # bool is an int subclass, but never a coordinate
    if isinstance(latitude, bool) or isinstance(longitude, bool) or not (
        isinstance(latitude, (int, float)) and isinstance(longitude, (int, float))
    ):
        raise ValidationError(f"Coordinates must be numbers, got ({latitude!r}, {longitude!r})")
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise ValidationError(f"Coordinates ({latitude}, {longitude}) are not finite")
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        raise ValidationError(f"Latitude {latitude} is outside [{MIN_LATITUDE}, {MAX_LATITUDE}]")
    if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        raise ValidationError(f"Longitude {longitude} is outside [{MIN_LONGITUDE}, {MAX_LONGITUDE}]")


@dataclass(frozen=True, slots=True)
class Coordinates:
    """
    WGS84 latitude/longitude/altitude, dood!

    The constructor validates, so an out-of-range instance never exists.
    """

    latitude: float
    """Latitude in degrees, [-90, 90]"""
    longitude: float
    """Longitude in degrees, [-180, 180]"""
    altitude: float = 0.0
    """Altitude in metres"""

    def __post_init__(self) -> None:
        _checkRange(self.latitude, self.longitude)

    @classmethod
    def tryNew(cls, latitude: float, longitude: float, altitude: float = 0.0) -> "Coordinates":
        """Create coordinates, raising ValidationError if they are outside WGS84.

        This is the constructor to use for any value coming from outside.

        Raises:
            ValidationError: If latitude or longitude is out of range
        """
        return cls(latitude, longitude, altitude)

    @classmethod
    def new(cls, latitude: float, longitude: float, altitude: float = 0.0) -> "Coordinates":
        """Create coordinates the caller already knows to be valid.

        Same check as ``tryNew``, but a violation is a programmer error and
        raises AssertionError instead of ValidationError. Prefer ``tryNew``.
        """
        try:
            return cls(latitude, longitude, altitude)
        except ValidationError as e:
            raise AssertionError(f"Invalid WGS84 coordinates: {e.message}") from e

    @classmethod
    def fromString(cls, value: str) -> "Coordinates":
        """Parse the ``"lat,lng"`` text form used in queries."""
        parts = value.split(",")
        if len(parts) != 2:
            raise ValidationError(f"Expected 'lat,lng', got {value!r}")
        try:
            latitude, longitude = float(parts[0]), float(parts[1])
        except ValueError as e:
            raise ValidationError(f"Expected 'lat,lng', got {value!r}") from e
        return cls(latitude, longitude)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinates":
        """Create Coordinates from a reply's ``{"lat": ..., "lng": ...}`` object."""
        if not isinstance(data, dict) or "lat" not in data or "lng" not in data:
            raise ValidationError(f"Expected an object with 'lat' and 'lng', got {data!r}")
        return cls(data["lat"], data["lng"])

    def toQueryString(self) -> str:
        """Render as ``"lat,lng"``; repr of a float round-trips exactly."""
        return f"{float(self.latitude)!r},{float(self.longitude)!r}"

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}

    def __str__(self) -> str:
        return self.toQueryString()


@dataclass(frozen=True, slots=True)
class Viewport:
    """
    Bounding box defined by its northeast and southwest corners
    """

    northeast: Coordinates
    southwest: Coordinates

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Viewport":
        if not isinstance(data, dict) or "northeast" not in data or "southwest" not in data:
            raise ValidationError(f"Expected an object with 'northeast' and 'southwest', got {data!r}")
        return cls(
            northeast=Coordinates.from_dict(data["northeast"]),
            southwest=Coordinates.from_dict(data["southwest"]),
        )

    def toQueryString(self) -> str:
        """Render in the ``bounds`` parameter format: ``"sw_lat,sw_lng|ne_lat,ne_lng"``."""
        return f"{self.southwest.toQueryString()}{SET_SEPARATOR}{self.northeast.toQueryString()}"

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {"northeast": self.northeast.to_dict(), "southwest": self.southwest.to_dict()}
