"""
Geocoding and reverse geocoding queries.

Queries are immutable: every ``with*`` method returns a new query with one
field changed, so a query handed to a Connection can never change under it.
``toParams()`` renders the query-string parameters in a fixed order and
leaves absent modifiers out entirely.
"""

import dataclasses
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, TypeVar, Union

from .constants import (
    COMPONENT_SEPARATOR,
    PARAM_ADDRESS,
    PARAM_BOUNDS,
    PARAM_COMPONENTS,
    PARAM_LANGUAGE,
    PARAM_LATLNG,
    PARAM_LOCATION_TYPE,
    PARAM_REGION,
    PARAM_RESULT_TYPE,
    SET_SEPARATOR,
)
from .coordinates import Coordinates, Viewport
from .enums import AddressType, ComponentFilterKind, Language, LocationType, Region
from .exceptions import ValidationError

QueryParams = List[Tuple[str, str]]

T = TypeVar("T")


def _uniq(values: Iterable[T]) -> Tuple[T, ...]:
    """De-duplicate keeping first-seen order."""
    return tuple(dict.fromkeys(values))


def _joinSet(values: Iterable[str]) -> str:
    return SET_SEPARATOR.join(str(v) for v in values)


@dataclass(frozen=True, slots=True)
class ComponentFilterRule:
    """
    One ``component:value`` restriction of a geocode query

    Component filters fully restrict the results, unlike bounds and region
    which only bias them.
    """

    kind: ComponentFilterKind
    value: str

    @classmethod
    def postalCode(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.POSTAL_CODE, value)

    @classmethod
    def country(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.COUNTRY, value)

    @classmethod
    def route(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.ROUTE, value)

    @classmethod
    def locality(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.LOCALITY, value)

    @classmethod
    def administrativeArea(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.ADMINISTRATIVE_AREA, value)

    def __str__(self) -> str:
        return f"{self.kind}{COMPONENT_SEPARATOR}{self.value}"


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """
    A query for coordinates, dood!

    Example:
        >>> query = (
        ...     GeocodeQuery("1600 Amphitheater Parkway, Mountain View, CA")
        ...     .withLanguage(Language.ENGLISH)
        ...     .withRegion(Region.UNITED_STATES)
        ... )
    """

    address: Optional[str] = None
    """Street address in the format used by the national postal service"""
    components: Tuple[ComponentFilterRule, ...] = ()
    """Component filters; required when there is no address"""
    bounds: Optional[Viewport] = None
    """Viewport within which to bias results (influences, does not restrict)"""
    language: Optional[Language] = None
    """Language in which to return results"""
    region: Optional[Region] = None
    """Region bias (influences, does not restrict)"""

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", _uniq(self.components))
        if self.address is None and not self.components:
            raise ValidationError("Geocode query needs an address or at least one component filter")

    @classmethod
    def fromComponents(cls, *rules: ComponentFilterRule) -> "GeocodeQuery":
        """Create an address-less query restricted by component filters only."""
        return cls(components=rules)

    def withLanguage(self, language: Language) -> "GeocodeQuery":
        return dataclasses.replace(self, language=language)

    def withRegion(self, region: Region) -> "GeocodeQuery":
        return dataclasses.replace(self, region=region)

    def withBounds(self, bounds: Viewport) -> "GeocodeQuery":
        return dataclasses.replace(self, bounds=bounds)

    def withComponents(self, *rules: ComponentFilterRule) -> "GeocodeQuery":
        """Add component filters to the ones already present."""
        return dataclasses.replace(self, components=self.components + rules)

    def toParams(self) -> QueryParams:
        """Render query-string parameters: input first, then present modifiers."""
        params: QueryParams = []
        if self.address is not None:
            params.append((PARAM_ADDRESS, self.address))
        if self.components:
            params.append((PARAM_COMPONENTS, _joinSet(self.components)))
        if self.bounds is not None:
            params.append((PARAM_BOUNDS, self.bounds.toQueryString()))
        if self.language is not None:
            params.append((PARAM_LANGUAGE, str(self.language)))
        if self.region is not None:
            params.append((PARAM_REGION, str(self.region)))
        return params


@dataclass(frozen=True, slots=True)
class DegeocodeQuery:
    """
    A query for the addresses at some coordinates
    """

    coordinates: Coordinates
    """Location for which to obtain the closest human-readable addresses"""
    language: Optional[Language] = None
    """Language in which to return results"""
    resultTypes: Tuple[AddressType, ...] = ()
    """Post-search filter: keep only results of any of these address types"""
    locationTypes: Tuple[LocationType, ...] = ()
    """Post-search filter: keep only results of any of these location types"""

    def __post_init__(self) -> None:
        if not isinstance(self.coordinates, Coordinates):
            raise TypeError(f"Cannot degeocode {type(self.coordinates).__name__}, expected Coordinates")
        object.__setattr__(self, "resultTypes", _uniq(self.resultTypes))
        object.__setattr__(self, "locationTypes", _uniq(self.locationTypes))

    def withLanguage(self, language: Language) -> "DegeocodeQuery":
        return dataclasses.replace(self, language=language)

    def withResultTypes(self, *resultTypes: AddressType) -> "DegeocodeQuery":
        """Replace the result type filter.

        The filter does not restrict the search itself: the service fetches
        every result for the location, then drops the ones not matching.
        """
        return dataclasses.replace(self, resultTypes=resultTypes)

    def withLocationTypes(self, *locationTypes: LocationType) -> "DegeocodeQuery":
        """Replace the location type filter (a post-search filter as well)."""
        return dataclasses.replace(self, locationTypes=locationTypes)

    def toParams(self) -> QueryParams:
        params: QueryParams = [(PARAM_LATLNG, self.coordinates.toQueryString())]
        if self.language is not None:
            params.append((PARAM_LANGUAGE, str(self.language)))
        if self.resultTypes:
            params.append((PARAM_RESULT_TYPE, _joinSet(self.resultTypes)))
        if self.locationTypes:
            params.append((PARAM_LOCATION_TYPE, _joinSet(self.locationTypes)))
        return params


def toGeocodeQuery(value: Union[str, GeocodeQuery]) -> GeocodeQuery:
    """Promote a bare address to the minimal geocode query."""
    if isinstance(value, GeocodeQuery):
        return value
    if isinstance(value, str):
        return GeocodeQuery(address=value)
    raise TypeError(f"Cannot geocode {type(value).__name__}, expected str or GeocodeQuery")


def toDegeocodeQuery(value: Union[Coordinates, DegeocodeQuery]) -> DegeocodeQuery:
    """Promote bare coordinates to the minimal reverse geocode query."""
    if isinstance(value, DegeocodeQuery):
        return value
    if isinstance(value, Coordinates):
        return DegeocodeQuery(coordinates=value)
    raise TypeError(f"Cannot degeocode {type(value).__name__}, expected Coordinates or DegeocodeQuery")
