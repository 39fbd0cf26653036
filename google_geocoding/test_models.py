"""
Tests for decoding replies into models
"""

import copy

import pytest

from .coordinates import Coordinates
from .enums import AddressType, LocationType, StatusCode
from .exceptions import DecodeError
from .models import AddressComponent, Candidate, Geometry, Reply
from .test_helpers import DEGEOCODE_REPLY, GEOCODE_REPLY, ZERO_RESULTS_REPLY, makeResult


def test_reply_from_dict():
    """Test a full reply decodes with candidates in service order, dood!"""
    reply = Reply.from_dict(GEOCODE_REPLY)

    assert reply.status == StatusCode.OK
    assert len(reply) == 2
    assert reply.coordinates() == [
        Coordinates.tryNew(37.4224764, -122.0842499),
        Coordinates.tryNew(37.4238253, -122.0829009),
    ]

    first = reply[0]
    assert first.formatted_address == "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA"
    assert first.place_id == "ChIJ2eUgeAK6j4ARbn5u_wAGqWA"
    assert first.types == (AddressType.STREET_ADDRESS,)
    assert first.geometry.location_type == LocationType.ROOFTOP
    assert first.geometry.bounds is None
    assert first.partial_match is False
    assert first.plus_code is not None
    assert first.plus_code.global_code == "849VCWC8+W5"
    assert [c.short_name for c in first.address_components] == ["1600", "Amphitheatre Pkwy", "Mountain View", "US"]
    assert first.address_components[2].types == (AddressType.LOCALITY, AddressType.POLITICAL)

    assert reply[1].geometry.location_type == LocationType.GEOMETRIC_CENTER


def test_reply_addresses_keep_order():
    assert Reply.from_dict(DEGEOCODE_REPLY).addresses() == [
        "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
        "Mountain View, CA 94043, USA",
        "Santa Clara County, CA, USA",
    ]


def test_zero_results_is_empty():
    reply = Reply.from_dict(ZERO_RESULTS_REPLY)
    assert reply.status == StatusCode.ZERO_RESULTS
    assert list(reply) == []
    assert reply.coordinates() == []


def test_unknown_status_is_decode_error():
    with pytest.raises(DecodeError):
        Reply.from_dict({"status": "SOMETHING_NEW", "results": []})


def test_unknown_type_is_kept_as_string():
    result = makeResult("Somewhere", 1.0, 2.0, "id", types=["brand_new_type", "political"])
    candidate = Candidate.from_dict(result)
    assert candidate.types == ("brand_new_type", AddressType.POLITICAL)


def test_unknown_keys_land_in_api_kwargs():
    result = makeResult("Somewhere", 1.0, 2.0, "id")
    result["navigation_points"] = [{"location": {"latitude": 1.0, "longitude": 2.0}}]
    candidate = Candidate.from_dict(result)
    assert candidate.api_kwargs == {"navigation_points": result["navigation_points"]}

    component = AddressComponent.from_dict({"long_name": "Paris", "short_name": "Paris", "foo": 1})
    assert component.types == ()
    assert component.api_kwargs == {"foo": 1}


def test_optional_fields():
    result = makeResult("75001 Paris, France", 48.8626, 2.3363, "id", types=["postal_code"])
    result["postcode_localities"] = ["Paris", "Louvre"]
    result["partial_match"] = True
    result["geometry"]["bounds"] = {"northeast": {"lat": 48.87, "lng": 2.35}, "southwest": {"lat": 48.85, "lng": 2.32}}
    del result["plus_code"]

    candidate = Candidate.from_dict(result)
    assert candidate.postcode_localities == ("Paris", "Louvre")
    assert candidate.partial_match is True
    assert candidate.plus_code is None
    assert candidate.geometry.bounds is not None
    assert candidate.geometry.bounds.southwest == Coordinates.tryNew(48.85, 2.32)


def test_unknown_location_type_is_decode_error():
    geometry = copy.deepcopy(GEOCODE_REPLY["results"][0]["geometry"])
    geometry["location_type"] = "SOMEWHERE_AROUND"
    with pytest.raises(DecodeError):
        Geometry.from_dict(geometry)


def test_out_of_range_location_is_decode_error():
    geometry = copy.deepcopy(GEOCODE_REPLY["results"][0]["geometry"])
    geometry["location"] = {"lat": 123.0, "lng": 0.0}
    with pytest.raises(DecodeError):
        Geometry.from_dict(geometry)


@pytest.mark.parametrize("missing", ["formatted_address", "geometry", "place_id"])
def test_missing_mandatory_key_is_decode_error(missing):
    result = makeResult("Somewhere", 1.0, 2.0, "id")
    del result[missing]
    with pytest.raises(DecodeError):
        Candidate.from_dict(result)


def test_wrong_types_are_decode_errors():
    with pytest.raises(DecodeError):
        Reply.from_dict({"status": "OK", "results": {"not": "a list"}})
    with pytest.raises(DecodeError):
        Reply.from_dict({"status": "OK", "results": ["not an object"]})
    with pytest.raises(DecodeError):
        Candidate.from_dict(makeResult("Somewhere", 1.0, 2.0, "id", types=[42]))  # type: ignore[list-item]


def test_to_dict():
    data = Reply.from_dict(GEOCODE_REPLY).to_dict()
    assert data["status"] == "OK"
    assert data["candidates"][0]["geometry"]["location"] == {
        "latitude": 37.4224764,
        "longitude": -122.0842499,
        "altitude": 0.0,
    }
