"""Tests for GeoPoint value object."""

import pytest

from civicdesk.domain.value_objects.geo_point import GeoPoint


@pytest.mark.parametrize(
    "lat, lon",
    [(0.0, 0.0), (90.0, 180.0), (-90.0, -180.0), (40.7128, -74.0060)],
)
def test_valid_ranges(lat, lon):
    assert GeoPoint(lat, lon).is_valid()


@pytest.mark.parametrize("lat, lon", [(90.1, 0.0), (0.0, -180.5), (123.0, 10.0)])
def test_out_of_range(lat, lon):
    assert not GeoPoint(lat, lon).is_valid()


def test_from_optional_needs_both():
    assert GeoPoint.from_optional(None, 10.0) is None
    assert GeoPoint.from_optional(10.0, None) is None
    assert GeoPoint.from_optional(1, 2) == GeoPoint(1.0, 2.0)


def test_geo_point_is_frozen():
    """GeoPoint should be immutable."""
    p = GeoPoint(latitude=43.0, longitude=76.0)
    with pytest.raises(AttributeError):
        p.latitude = 50.0
