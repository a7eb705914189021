"""Tests for the solar ephemeris and terminator."""
from datetime import datetime, timezone

import pytest
from scene_core.ephemeris.sun import (
    day_of_year, declination, julian_day, solar_position, subsolar_point,
    sun_direction_eci, sun_direction_scene, sun_light_position, sun_light_state,
    SunPosition,
)
from scene_core.ephemeris.terminator import (
    day_night_blend, is_daylight, sun_incidence, terminator_points,
)
from scene_core.utils.geo_utils import lat_lon_to_vec3, vec3_length


class TestJulianDay:
    """Tests for julian_day."""

    def test_j2000(self):
        """Test the J2000.0 epoch."""
        assert julian_day(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)) == 2451545.0

    def test_unix_epoch(self):
        """Test the Unix epoch, given as a naive UTC value."""
        assert julian_day(datetime(1970, 1, 1)) == 2440587.5


class TestSubsolarPoint:
    """Tests for the subsolar point and sun direction."""

    def test_june_solstice(self, june_solstice):
        """Test the sun is over the Tropic of Cancer."""
        assert declination(june_solstice) == pytest.approx(23.44, abs=0.05)

    def test_december_solstice(self, december_solstice):
        """Test the sun is over the Tropic of Capricorn."""
        lat, _ = subsolar_point(december_solstice)
        assert lat == pytest.approx(-23.44, abs=0.05)

    def test_march_equinox(self, march_equinox):
        """Test the sun crosses the equator."""
        lat, _ = subsolar_point(march_equinox)
        assert lat == pytest.approx(0.0, abs=0.1)

    def test_noon_utc_near_greenwich(self):
        """Test the subsolar longitude is within the equation of time of 0."""
        _, lon = subsolar_point(datetime(2024, 6, 21, 12, tzinfo=timezone.utc))
        assert abs(lon) < 5

    def test_midnight_utc_near_antimeridian(self):
        """Test the subsolar point is on the far side at midnight."""
        _, lon = subsolar_point(datetime(2024, 6, 21, 0, tzinfo=timezone.utc))
        assert abs(lon) > 175

    @pytest.mark.parametrize("month", [1, 4, 7, 10])
    def test_unit_vectors(self, month):
        """Test both direction frames are unit length."""
        instant = datetime(2023, month, 5, 7, 30, tzinfo=timezone.utc)
        assert vec3_length(sun_direction_eci(instant)) == pytest.approx(1.0)
        assert vec3_length(sun_direction_scene(instant)) == pytest.approx(1.0)

    def test_scene_direction_points_at_subsolar(self, june_solstice):
        """Test the scene vector is the subsolar point on the unit sphere."""
        lat, lon = subsolar_point(june_solstice)
        assert sun_direction_scene(june_solstice) == pytest.approx(lat_lon_to_vec3(lat, lon))


class TestTerminator:
    """Tests for terminator geometry and shading."""

    def test_point_count(self, june_solstice):
        """Test both ends of the longitude range are included."""
        points = terminator_points(june_solstice, 1.0)
        assert len(points) == 361
        assert points[0][1] == -180.0
        assert points[-1][1] == 180.0

    def test_uneven_step(self, june_solstice):
        """Test the last step is clipped at 180."""
        points = terminator_points(june_solstice, 7.0)
        assert points[-1][1] == 180.0
        assert len(points) == 53

    def test_points_on_horizon(self, june_solstice):
        """Test every traced point has zero sun incidence."""
        for lat, lon in terminator_points(june_solstice, 15.0):
            assert sun_incidence(lat, lon, june_solstice) == pytest.approx(0.0, abs=1e-9)

    def test_invalid_step(self, june_solstice):
        """Test non-positive steps are rejected."""
        with pytest.raises(ValueError):
            terminator_points(june_solstice, 0)

    def test_daylight(self, june_solstice):
        """Test day at the subsolar point and night at its antipode."""
        lat, lon = subsolar_point(june_solstice)
        assert is_daylight(lat, lon, june_solstice) is True
        assert is_daylight(-lat, lon + 180, june_solstice) is False

    def test_blend(self, june_solstice):
        """Test the blend saturates away from the terminator."""
        lat, lon = subsolar_point(june_solstice)
        assert day_night_blend(lat, lon, june_solstice) == 1.0
        assert day_night_blend(-lat, lon + 180, june_solstice) == 0.0

    def test_polar_day(self, june_solstice):
        """Test the north pole is lit in June."""
        assert is_daylight(89.9, 0, june_solstice) is True


class TestSunStudy:
    """Tests for the local sun study model."""

    def test_day_of_year(self):
        """Test month/day to day of year."""
        assert day_of_year(1, 1) == 1
        assert day_of_year(6, 21) == 172
        assert day_of_year(12, 31) == 365

    def test_day_of_year_invalid(self):
        """Test out-of-range months and days."""
        with pytest.raises(ValueError):
            day_of_year(13, 1)
        with pytest.raises(ValueError):
            day_of_year(1, 0)

    @pytest.mark.parametrize("month,day", [(2, 30), (2, 31), (4, 31), (6, 31), (9, 31), (11, 31)])
    def test_day_past_month_end(self, month, day):
        """Test days beyond the month's length are rejected."""
        with pytest.raises(ValueError, match=f'for month {month}'):
            day_of_year(month, day)

    def test_leap_day(self):
        """Test February 29 is accepted."""
        assert day_of_year(2, 28) == 59
        assert day_of_year(2, 29) == 60
        assert day_of_year(4, 30) == 120

    def test_equator_noon_june(self):
        """Test the noon sun stands north of the zenith."""
        pos = solar_position(12, 6, 21, 0)
        assert pos.altitude == pytest.approx(66.55, abs=0.05)
        assert pos.azimuth == pytest.approx(0.0, abs=0.01)

    def test_afternoon_mirrors_morning(self):
        """Test azimuths are symmetric about noon."""
        morning = solar_position(9, 3, 1, 40)
        afternoon = solar_position(15, 3, 1, 40)
        assert afternoon.altitude == pytest.approx(morning.altitude)
        assert afternoon.azimuth == pytest.approx(360 - morning.azimuth)

    def test_midnight_below_horizon(self):
        """Test the sun is down at midnight in mid latitudes."""
        assert solar_position(0, 6, 21, 40).altitude < 0

    @pytest.mark.parametrize("altitude,intensity,ambient,color", [
        (-5, 0.0, 0.1, 0xfff5e6),
        (5, 0.75, 0.15, 0xff8844),
        (45, 2.0, 0.2, 0xfff5e6),
    ])
    def test_light_state(self, altitude, intensity, ambient, color):
        """Test night, golden hour and day lighting."""
        light = sun_light_state(altitude)
        assert light.intensity == pytest.approx(intensity)
        assert light.ambient == ambient
        assert light.color == color

    def test_light_position_clamped(self):
        """Test a set sun stays on the horizon."""
        x, y, z = sun_light_position(SunPosition(azimuth=90, altitude=-20), 100)
        assert y == pytest.approx(0.0)
        assert x == pytest.approx(100.0)
        assert z == pytest.approx(0.0, abs=1e-9)
