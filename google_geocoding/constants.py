"""
Google Geocoding API Constants

This module contains endpoint, parameter and default values shared by the
query builders and the connection.
"""

from typing import Final

VERSION: Final[str] = "0.1.0"

# API Configuration
API_BASE_URL: Final[str] = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_TIMEOUT: Final[int] = 30
API_KEY_ENV_VAR: Final[str] = "GOOGLE_GEOCODING_API_KEY"
CONTENT_TYPE_JSON: Final[str] = "application/json"

# Request parameters
PARAM_ADDRESS: Final[str] = "address"
PARAM_LATLNG: Final[str] = "latlng"
PARAM_COMPONENTS: Final[str] = "components"
PARAM_BOUNDS: Final[str] = "bounds"
PARAM_LANGUAGE: Final[str] = "language"
PARAM_REGION: Final[str] = "region"
PARAM_RESULT_TYPE: Final[str] = "result_type"
PARAM_LOCATION_TYPE: Final[str] = "location_type"
PARAM_KEY: Final[str] = "key"

# Separators used by the service for multi-valued parameters
SET_SEPARATOR: Final[str] = "|"
COMPONENT_SEPARATOR: Final[str] = ":"

# WGS84 legal ranges (degrees)
MIN_LATITUDE: Final[float] = -90.0
MAX_LATITUDE: Final[float] = 90.0
MIN_LONGITUDE: Final[float] = -180.0
MAX_LONGITUDE: Final[float] = 180.0
