"""Tests for distance and location parsing."""

from __future__ import annotations

import pytest

from crew_ping_engine.geo.distance import haversine_miles
from crew_ping_engine.geo.locations import extract_state, lookup_coords
from tests.mocks.mock_factories import HOUSTON, KATY

DALLAS = (32.7767, -96.7970)


@pytest.mark.unit
class TestHaversine:
    """Test great-circle distance."""

    def test_same_point_is_zero(self) -> None:
        """Identical coordinates are zero miles apart."""
        assert haversine_miles(*HOUSTON, *HOUSTON) == pytest.approx(0.0, abs=1e-9)

    def test_houston_to_dallas(self) -> None:
        """Houston to Dallas is roughly 225 miles."""
        assert 215 < haversine_miles(*HOUSTON, *DALLAS) < 235

    def test_houston_to_katy(self) -> None:
        """Katy is a little over 25 miles from downtown Houston."""
        assert 26 < haversine_miles(*HOUSTON, *KATY) < 29

    def test_symmetric(self) -> None:
        """Distance does not depend on argument order."""
        assert haversine_miles(*HOUSTON, *DALLAS) == pytest.approx(
            haversine_miles(*DALLAS, *HOUSTON)
        )

    def test_antipodal_points_do_not_raise(self) -> None:
        """Rounding near the antipode stays within the math domain."""
        assert haversine_miles(0.0, 0.0, 0.0, 180.0) == pytest.approx(12437, rel=0.01)


@pytest.mark.unit
class TestExtractState:
    """Test US state inference from location labels."""

    @pytest.mark.parametrize(
        ("location", "expected"),
        [
            ("Katy, TX", "TX"),
            ("Reno NV", "NV"),
            ("Columbus, Ohio", "OH"),
            ("New Albany, OH 43054", "OH"),
            ("Ashburn, Virginia", "VA"),
            ("Hillsboro, West Virginia", "WV"),
            ("Little Rock, Arkansas", "AR"),
        ],
    )
    def test_known_states(self, location: str, expected: str) -> None:
        """Trailing codes and full state names both resolve."""
        assert extract_state(location) == expected

    @pytest.mark.parametrize("location", ["", None, "Chicago", "Somewhere remote"])
    def test_unknown(self, location: str | None) -> None:
        """Labels without a recognizable state return None."""
        assert extract_state(location) is None


@pytest.mark.unit
class TestLookupCoords:
    """Test known-city coordinate lookup."""

    def test_known_city(self) -> None:
        """A known market city resolves to its coordinates."""
        assert lookup_coords("Katy, TX") == KATY

    def test_case_insensitive(self) -> None:
        """Lookup ignores case."""
        assert lookup_coords("HOUSTON") == HOUSTON

    def test_unknown_city(self) -> None:
        """Unknown or missing labels resolve to (None, None)."""
        assert lookup_coords("Boise, ID") == (None, None)
        assert lookup_coords(None) == (None, None)
