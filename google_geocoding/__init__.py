"""
Google Geocoding API Client Library

A strongly typed async Python client for the Google Geocoding API, with a
blocking convenience layer on top, dood!

Blocking API (basic):
    >>> from google_geocoding import Coordinates, degeocode, geocode
    >>>
    >>> for coordinates in geocode("1600 Amphitheater Parkway, Mountain View, CA"):
    ...     print(coordinates)
    >>>
    >>> for address in degeocode(Coordinates.tryNew(37.42241, -122.08561)):
    ...     print(address)

Prefer Coordinates.tryNew(), which raises ValidationError, over
Coordinates.new(), which treats bad input as a programmer error.

Blocking API (advanced):
    >>> from google_geocoding import GeocodeQuery, Language, Region, geocode
    >>>
    >>> query = (
    ...     GeocodeQuery("1600 Amphitheater Parkway, Mountain View, CA")
    ...     .withLanguage(Language.ENGLISH)
    ...     .withRegion(Region.UNITED_STATES)
    ... )
    >>> for coordinates in geocode(query):
    ...     print(coordinates)

Async API, returning the full reply:
    >>> from google_geocoding import Connection
    >>>
    >>> async with Connection(apiKey="your_api_key") as connection:
    ...     reply = await connection.geocode("1600 Amphitheater Parkway, Mountain View, CA")
    ...     for candidate in reply:
    ...         print(f"{candidate.formatted_address}: {candidate.geometry.location}")

The API key is taken from the GOOGLE_GEOCODING_API_KEY environment variable
unless passed explicitly. This is an unofficial library; see
https://developers.google.com/maps/documentation/geocoding/overview
"""

from .api import degeocode, geocode
from .client import Connection
from .constants import VERSION
from .coordinates import Coordinates, Viewport
from .enums import AddressType, ComponentFilterKind, Language, LocationType, Region, StatusCode
from .exceptions import (
    ConfigurationError,
    DecodeError,
    GeocodingError,
    InvalidRequestError,
    OverQueryLimitError,
    RequestDeniedError,
    ServiceStatusError,
    TransportError,
    UnknownServiceError,
    ValidationError,
)
from .models import AddressComponent, Candidate, Geometry, PlusCode, Reply
from .query import ComponentFilterRule, DegeocodeQuery, GeocodeQuery, toDegeocodeQuery, toGeocodeQuery

# WGS84 is the name of the datum the coordinates live on
WGS84 = Coordinates

__version__ = VERSION

__all__ = [
    # Convenience API
    "geocode",
    "degeocode",
    # Connection
    "Connection",
    # Coordinates
    "Coordinates",
    "WGS84",
    "Viewport",
    # Queries
    "GeocodeQuery",
    "DegeocodeQuery",
    "ComponentFilterRule",
    "toGeocodeQuery",
    "toDegeocodeQuery",
    # Reply
    "Reply",
    "Candidate",
    "Geometry",
    "AddressComponent",
    "PlusCode",
    # Enums
    "Language",
    "Region",
    "LocationType",
    "AddressType",
    "StatusCode",
    "ComponentFilterKind",
    # Exceptions
    "GeocodingError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "ServiceStatusError",
    "OverQueryLimitError",
    "RequestDeniedError",
    "InvalidRequestError",
    "UnknownServiceError",
    "ConfigurationError",
]
