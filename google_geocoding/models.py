"""
Google Geocoding API reply models.

This module contains the dataclasses a reply is decoded into. Every model has
a ``from_dict`` class method working on the decoded JSON; keys a model does not
know about are kept in ``api_kwargs``. Shape errors raise DecodeError.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from .coordinates import Coordinates, Viewport
from .enums import AddressType, LocationType, StatusCode
from .exceptions import DecodeError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Known types decode to AddressType, unknown ones stay plain strings
TypeTag = Union[AddressType, str]


def _get(data: Dict[str, Any], key: str, expected: Type[T], where: str) -> T:
    """Fetch a mandatory key of the given JSON type."""
    if key not in data:
        raise DecodeError(f"Missing '{key}' in {where}")
    value = data[key]
    if not isinstance(value, expected):
        raise DecodeError(f"'{key}' in {where} must be {expected.__name__}, got {type(value).__name__}")
    return value


def _getOptional(data: Dict[str, Any], key: str, expected: Type[T], where: str) -> Optional[T]:
    if data.get(key) is None:
        return None
    return _get(data, key, expected, where)


def _asObject(data: Any, where: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"{where} must be an object, got {type(data).__name__}")
    return data


def _extraKwargs(data: Dict[str, Any], known: Tuple[str, ...]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in known}


def _parseTypes(values: List[Any], where: str) -> Tuple[TypeTag, ...]:
    types: List[TypeTag] = []
    for value in values:
        if not isinstance(value, str):
            raise DecodeError(f"Type tags in {where} must be strings, got {value!r}")
        try:
            types.append(AddressType(value))
        except ValueError:
            logger.debug(f"Unknown type '{value}' in {where}, keeping as string")
            types.append(value)
    return tuple(types)


def _parseStrings(values: List[Any], where: str) -> Tuple[str, ...]:
    if not all(isinstance(v, str) for v in values):
        raise DecodeError(f"{where} must be a list of strings")
    return tuple(values)


@dataclass(frozen=True, slots=True)
class AddressComponent:
    """
    One component of a separated address
    """

    long_name: str
    """Full text description or name of the component"""
    short_name: str
    """Abbreviated name if available, e.g. "AK" for Alaska"""
    types: Tuple[TypeTag, ...] = ()
    """Types of this component"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    _KNOWN = ("long_name", "short_name", "types")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddressComponent":
        data = _asObject(data, "address component")
        where = "address component"
        return cls(
            long_name=_get(data, "long_name", str, where),
            short_name=_get(data, "short_name", str, where),
            types=_parseTypes(_getOptional(data, "types", list, where) or [], where),
            api_kwargs=_extraKwargs(data, cls._KNOWN),
        )


@dataclass(frozen=True, slots=True)
class PlusCode:
    """
    Open Location Code of a result
    """

    global_code: str
    """4 character area code and 6 character or longer local code, such as "849VCWC8+R9" """
    compound_code: Optional[str] = None
    """Local code with a locality reference, such as "CWC8+R9 Mountain View, CA, USA" """

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlusCode":
        data = _asObject(data, "plus code")
        return cls(
            global_code=_get(data, "global_code", str, "plus code"),
            compound_code=_getOptional(data, "compound_code", str, "plus code"),
        )


@dataclass(frozen=True, slots=True)
class Geometry:
    """
    Position information of a result
    """

    location: Coordinates
    """Geocoded latitude/longitude; for address lookups the most important field"""
    location_type: LocationType
    """What the location refers to"""
    viewport: Viewport
    """Recommended viewport for displaying the result"""
    bounds: Optional[Viewport] = None
    """Bounding box which can fully contain the result; may differ from the viewport"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Geometry":
        data = _asObject(data, "geometry")
        locationType = _get(data, "location_type", str, "geometry")
        try:
            location = Coordinates.from_dict(_get(data, "location", dict, "geometry"))
            viewport = Viewport.from_dict(_get(data, "viewport", dict, "geometry"))
            boundsData = _getOptional(data, "bounds", dict, "geometry")
            bounds = Viewport.from_dict(boundsData) if boundsData is not None else None
        except ValidationError as e:
            raise DecodeError(f"Invalid coordinates in geometry: {e.message}") from e
        try:
            return cls(
                location=location,
                location_type=LocationType(locationType),
                viewport=viewport,
                bounds=bounds,
            )
        except ValueError as e:
            raise DecodeError(f"Unknown location_type '{locationType}'") from e


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    One plausible match within a reply
    """

    formatted_address: str
    """Human-readable address. Do not parse it, use address_components instead"""
    geometry: Geometry
    """Position information"""
    place_id: str
    """Unique identifier usable with other Google APIs"""
    address_components: Tuple[AddressComponent, ...] = ()
    """Separate components of the address, in service order"""
    types: Tuple[TypeTag, ...] = ()
    """Feature types of the result, e.g. locality and political for Chicago"""
    postcode_localities: Tuple[str, ...] = ()
    """Localities contained in a postal code result"""
    partial_match: bool = False
    """The geocoder did not return an exact match for the request"""
    plus_code: Optional[PlusCode] = None
    """Open Location Code of the location"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    _KNOWN = (
        "formatted_address",
        "geometry",
        "place_id",
        "address_components",
        "types",
        "postcode_localities",
        "partial_match",
        "plus_code",
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Candidate":
        data = _asObject(data, "result")
        where = "result"
        components = _getOptional(data, "address_components", list, where) or []
        plusCode = _getOptional(data, "plus_code", dict, where)
        return cls(
            formatted_address=_get(data, "formatted_address", str, where),
            geometry=Geometry.from_dict(_get(data, "geometry", dict, where)),
            place_id=_get(data, "place_id", str, where),
            address_components=tuple(AddressComponent.from_dict(c) for c in components),
            types=_parseTypes(_getOptional(data, "types", list, where) or [], where),
            postcode_localities=_parseStrings(_getOptional(data, "postcode_localities", list, where) or [], where),
            partial_match=bool(_getOptional(data, "partial_match", bool, where)),
            plus_code=PlusCode.from_dict(plusCode) if plusCode is not None else None,
            api_kwargs=_extraKwargs(data, cls._KNOWN),
        )


@dataclass(frozen=True, slots=True)
class Reply:
    """
    A successful reply of the geocoding API, dood!

    Iterating yields the candidates in the order the service returned them
    (most relevant first); it is never re-sorted.
    """

    status: StatusCode
    """OK, or ZERO_RESULTS for an empty reply"""
    candidates: Tuple[Candidate, ...] = ()
    """Results in service order"""
    error_message: Optional[str] = None
    """Additional information the service may attach"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reply":
        data = _asObject(data, "reply")
        status = _get(data, "status", str, "reply")
        try:
            statusCode = StatusCode(status)
        except ValueError as e:
            raise DecodeError(f"Unknown reply status '{status}'") from e
        results = _getOptional(data, "results", list, "reply") or []
        return cls(
            status=statusCode,
            candidates=tuple(Candidate.from_dict(r) for r in results),
            error_message=_getOptional(data, "error_message", str, "reply"),
        )

    def coordinates(self) -> List[Coordinates]:
        """Primary location of every candidate, in order."""
        return [candidate.geometry.location for candidate in self.candidates]

    def addresses(self) -> List[str]:
        """Formatted address of every candidate, in order."""
        return [candidate.formatted_address for candidate in self.candidates]

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self.candidates[index]
