"""
Tests for geocode and reverse geocode queries
"""

import dataclasses

import pytest

from .coordinates import Coordinates, Viewport
from .enums import AddressType, ComponentFilterKind, Language, LocationType, Region
from .exceptions import ValidationError
from .query import ComponentFilterRule, DegeocodeQuery, GeocodeQuery, toDegeocodeQuery, toGeocodeQuery
from .test_helpers import ADDRESS

GOOGLEPLEX = Coordinates.tryNew(37.42241, -122.08561)


class TestGeocodeQuery:
    """Test GeocodeQuery construction and rendering, dood!"""

    def test_address_only(self):
        assert GeocodeQuery(ADDRESS).toParams() == [("address", ADDRESS)]

    def test_language_adds_exactly_one_parameter(self):
        query = GeocodeQuery(ADDRESS).withLanguage(Language.ENGLISH)
        assert query.toParams() == [("address", ADDRESS), ("language", "en")]

    def test_all_modifiers_in_order(self):
        bounds = Viewport(
            northeast=Coordinates.tryNew(34.236144, -118.500938),
            southwest=Coordinates.tryNew(34.172684, -118.604794),
        )
        query = (
            GeocodeQuery(ADDRESS)
            .withRegion(Region.UNITED_STATES)
            .withLanguage(Language.ENGLISH_GREAT_BRITAIN)
            .withBounds(bounds)
            .withComponents(ComponentFilterRule.country("US"))
        )

        assert query.toParams() == [
            ("address", ADDRESS),
            ("components", "country:US"),
            ("bounds", "34.172684,-118.604794|34.236144,-118.500938"),
            ("language", "en-GB"),
            ("region", "us"),
        ]

    def test_with_returns_new_query(self):
        query = GeocodeQuery(ADDRESS)
        withLanguage = query.withLanguage(Language.FRENCH)

        assert query.language is None
        assert withLanguage.language == Language.FRENCH
        assert withLanguage.address == ADDRESS
        with pytest.raises(dataclasses.FrozenInstanceError):
            query.language = Language.GERMAN  # type: ignore[misc]

    def test_last_language_wins(self):
        query = GeocodeQuery(ADDRESS).withLanguage(Language.FRENCH).withLanguage(Language.GERMAN)
        assert query.toParams() == [("address", ADDRESS), ("language", "de")]

    def test_components_only(self):
        query = GeocodeQuery.fromComponents(
            ComponentFilterRule.route("Annankatu"),
            ComponentFilterRule.administrativeArea("Helsinki"),
            ComponentFilterRule.country("Finland"),
        )
        assert query.address is None
        assert query.toParams() == [
            ("components", "route:Annankatu|administrative_area:Helsinki|country:Finland"),
        ]

    def test_components_are_deduplicated_and_accumulate(self):
        query = (
            GeocodeQuery(ADDRESS)
            .withComponents(ComponentFilterRule.postalCode("94043"), ComponentFilterRule.locality("Mountain View"))
            .withComponents(ComponentFilterRule.postalCode("94043"))
        )
        assert query.components == (
            ComponentFilterRule.postalCode("94043"),
            ComponentFilterRule.locality("Mountain View"),
        )

    def test_needs_address_or_components(self):
        with pytest.raises(ValidationError):
            GeocodeQuery()
        with pytest.raises(ValidationError):
            GeocodeQuery.fromComponents()

    def test_empty_address_is_sent_as_is(self):
        assert GeocodeQuery("").toParams() == [("address", "")]


class TestComponentFilterRule:
    def test_render(self):
        assert str(ComponentFilterRule(ComponentFilterKind.POSTAL_CODE, "75001")) == "postal_code:75001"
        assert ComponentFilterRule.locality("Paris").kind == ComponentFilterKind.LOCALITY


class TestDegeocodeQuery:
    """Test DegeocodeQuery construction and rendering, dood!"""

    def test_coordinates_only(self):
        assert DegeocodeQuery(GOOGLEPLEX).toParams() == [("latlng", "37.42241,-122.08561")]

    def test_all_modifiers_in_order(self):
        query = (
            DegeocodeQuery(GOOGLEPLEX)
            .withLocationTypes(LocationType.ROOFTOP, LocationType.RANGE_INTERPOLATED)
            .withResultTypes(AddressType.STREET_ADDRESS, AddressType.ROUTE)
            .withLanguage(Language.ENGLISH)
        )
        assert query.toParams() == [
            ("latlng", "37.42241,-122.08561"),
            ("language", "en"),
            ("result_type", "street_address|route"),
            ("location_type", "ROOFTOP|RANGE_INTERPOLATED"),
        ]

    def test_filters_are_deduplicated(self):
        query = DegeocodeQuery(GOOGLEPLEX).withResultTypes(
            AddressType.POSTAL_CODE, AddressType.ROUTE, AddressType.POSTAL_CODE
        )
        assert query.resultTypes == (AddressType.POSTAL_CODE, AddressType.ROUTE)
        assert query.toParams()[-1] == ("result_type", "postal_code|route")

    def test_filters_are_replaced(self):
        query = (
            DegeocodeQuery(GOOGLEPLEX)
            .withLocationTypes(LocationType.ROOFTOP)
            .withLocationTypes(LocationType.APPROXIMATE)
        )
        assert query.locationTypes == (LocationType.APPROXIMATE,)

    @pytest.mark.parametrize("value", ["37.4,-122.0", (37.4, -122.0), None])
    def test_rejects_non_coordinates(self, value):
        with pytest.raises(TypeError):
            DegeocodeQuery(value)  # type: ignore[arg-type]

    def test_empty_filter_is_omitted(self):
        query = DegeocodeQuery(GOOGLEPLEX).withResultTypes(AddressType.ROUTE).withResultTypes()
        assert query.toParams() == [("latlng", "37.42241,-122.08561")]


class TestPromotion:
    def test_address_promotes_to_minimal_query(self):
        assert toGeocodeQuery(ADDRESS) == GeocodeQuery(ADDRESS)

    def test_query_passes_through(self):
        query = GeocodeQuery(ADDRESS).withRegion(Region.CANADA)
        assert toGeocodeQuery(query) is query

    def test_coordinates_promote_to_minimal_query(self):
        assert toDegeocodeQuery(GOOGLEPLEX) == DegeocodeQuery(GOOGLEPLEX)

    @pytest.mark.parametrize("value", [42, None, GOOGLEPLEX])
    def test_geocode_rejects_other_types(self, value):
        with pytest.raises(TypeError):
            toGeocodeQuery(value)

    @pytest.mark.parametrize("value", ["37.4,-122.0", (37.4, -122.0), GeocodeQuery(ADDRESS)])
    def test_degeocode_rejects_other_types(self, value):
        with pytest.raises(TypeError):
            toDegeocodeQuery(value)
