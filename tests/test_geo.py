"""Tests for hospitalfinder.utils.geo."""

import pytest

from hospitalfinder.utils.geo import (
    distance_km,
    google_maps_link,
    haversine_km,
    is_valid_coordinate,
    tel_link,
)


class TestDistance:
    def test_identical_points_are_zero(self):
        assert distance_km(28.6, 77.2, 28.6, 77.2) == 0.0
        assert distance_km(-33.86, 151.21, -33.86, 151.21) == 0.0

    def test_symmetric(self):
        a = (51.5074, -0.1278)
        b = (48.8566, 2.3522)
        assert distance_km(*a, *b) == distance_km(*b, *a)

    def test_one_degree_of_latitude(self):
        assert distance_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.2, abs=0.1)

    def test_small_offset_in_delhi(self):
        assert distance_km(28.6, 77.21, 28.6, 77.2) == pytest.approx(0.98, abs=0.1)

    def test_rounded_to_one_decimal(self):
        d = distance_km(51.5074, -0.1278, 48.8566, 2.3522)
        assert d == round(d, 1)
        assert d == pytest.approx(343.5, abs=1.0)

    def test_unrounded_haversine(self):
        assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(20015.1, abs=0.1)


class TestCoordinateValidation:
    @pytest.mark.parametrize("lat,lon", [(0, 0), (90, 180), (-90, -180), ("28.6", "77.2")])
    def test_valid(self, lat, lon):
        assert is_valid_coordinate(lat, lon)

    @pytest.mark.parametrize("lat,lon", [(None, 77.2), (28.6, None), (91, 0), (0, 181), ("north", 0)])
    def test_invalid(self, lat, lon):
        assert not is_valid_coordinate(lat, lon)


class TestLinks:
    def test_google_maps_link(self):
        assert google_maps_link(28.6, 77.2) == "https://www.google.com/maps?q=28.6,77.2"

    def test_tel_link(self):
        assert tel_link("+91 11 2658 8500") == "tel:+91%2011%202658%208500"
        assert tel_link(" 011-23365525 ") == "tel:011-23365525"
