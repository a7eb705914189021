"""Tests for tower, floor and body models."""
import base64
import colorsys
import math

import pytest
from scene_core.models.bodies import (
    PLANETS, SCALE, SUN, Body, format_quantity, get_body, placeholder_image_uri,
    resolve_image,
)
from scene_core.models.floors import FLOORS, FloorInfo, floor_title, get_floor
from scene_core.models.tower import TowerLayout, TowerParams


def _lightness(color):
    r, g, b = (c / 255 for c in color)
    return colorsys.rgb_to_hls(r, g, b)[1]


class TestTowerParams:
    """Tests for TowerParams."""

    def test_defaults(self):
        """Test the default tower is 128 floors of 3.9 m."""
        params = TowerParams()
        assert params.layer_count == 128
        assert params.floor_height == pytest.approx(3.9)
        assert params.total_height == pytest.approx(499.2)

    def test_unit_scale(self):
        """Test scene units follow the unit scale."""
        params = TowerParams(unit_scale=2.0)
        assert params.floor_height == pytest.approx(7.8)


class TestTowerLayout:
    """Tests for TowerLayout floor mapping."""

    def test_too_few_layers(self):
        """Test single-layer towers are rejected."""
        with pytest.raises(ValueError):
            TowerLayout(TowerParams(layer_count=1))

    def test_floor_y(self):
        """Test floor 1 sits on the ground."""
        layout = TowerLayout()
        assert layout.floor_y(1) == 0
        assert layout.floor_y(0) == 0
        assert layout.floor_y(2) == pytest.approx(3.9)

    @pytest.mark.parametrize("y,floor", [
        (0, 1), (1.94, 1), (1.96, 2), (3.9, 2), (-50, 1), (10000, 128),
    ])
    def test_floor_index_from_y(self, y, floor):
        """Test nearest-floor lookup with clamping."""
        assert TowerLayout().floor_index_from_y(y) == floor

    def test_floor_round_trip(self):
        """Test every floor maps back to itself."""
        layout = TowerLayout()
        for floor in range(1, 129):
            assert layout.floor_index_from_y(layout.floor_y(floor)) == floor

    def test_height_meters(self):
        """Test whole-meter heights."""
        layout = TowerLayout()
        assert layout.height_meters(1) == 0
        assert layout.height_meters(2) == 4
        assert layout.height_meters(128) == 495


class TestLayerTransforms:
    """Tests for per-layer transforms and colors."""

    def test_bottom_layer(self):
        """Test the bottom plate is untwisted and full size."""
        t = TowerLayout().layer_transform(0)
        assert (t.y, t.twist, t.radius_x, t.radius_z) == (0, 0, 40, 40)

    def test_top_layer(self):
        """Test the top plate carries the full twist and taper."""
        t = TowerLayout().layer_transform(127)
        assert t.twist == pytest.approx(2.2)
        assert t.radius_x == pytest.approx(18.0)
        assert t.y == pytest.approx(127 * 3.9)

    def test_out_of_range(self):
        """Test indexes outside the tower raise IndexError."""
        with pytest.raises(IndexError):
            TowerLayout().layer_transform(128)
        with pytest.raises(IndexError):
            TowerLayout().layer_transform(-1)

    def test_layers(self):
        """Test iteration yields every layer."""
        assert [t.index for t in TowerLayout().layers()] == list(range(128))

    def test_gradient_brightens_upwards(self):
        """Test the top layer is lighter than the bottom."""
        layout = TowerLayout()
        assert _lightness(layout.gradient_color(127)) > _lightness(layout.gradient_color(0))

    def test_highlight(self):
        """Test highlight replaces and restores a layer color."""
        layout = TowerLayout()
        base = layout.layer_color(5)
        layout.highlight(5)
        assert layout.layer_color(5) == (255, 184, 77)
        assert layout.layer_transform(5).color == (255, 184, 77)
        layout.highlight(-1)
        assert layout.layer_color(5) == base

    def test_highlight_out_of_range_clears(self):
        """Test out-of-range highlights clear instead of failing."""
        layout = TowerLayout()
        layout.highlight(3)
        layout.highlight(999)
        assert layout.highlighted == -1


class TestFloors:
    """Tests for floor descriptions."""

    def test_described_floor(self):
        """Test a described floor."""
        info = get_floor(66)
        assert info.name == 'Observation Floor'
        assert info.type == 'Observation'

    def test_placeholder(self):
        """Test undescribed floors get a placeholder."""
        info = get_floor(3)
        assert (info.name, info.type, info.description) == ('3F', 'Unknown', 'To be added')

    @pytest.mark.parametrize("number", [0, 129, -4])
    def test_out_of_range(self, number):
        """Test floors outside the tower are rejected."""
        with pytest.raises(ValueError):
            get_floor(number)

    def test_custom_total(self):
        """Test the bound follows the tower size."""
        assert get_floor(200, total_floors=200).name == '200F'

    def test_table(self):
        """Test the described floor table."""
        assert sorted(FLOORS) == [1, 2, 5, 33, 52, 66, 90, 101, 120, 128]

    def test_title(self):
        """Test card titles fall back to the type."""
        assert floor_title(66, get_floor(66)) == '66F · Observation Floor'
        assert floor_title(7, FloorInfo('', 'Office', '')) == '7F · Office'


class TestBodies:
    """Tests for solar system body data."""

    def test_planet_order(self):
        """Test planets are listed from the sun outwards."""
        assert [p.name for p in PLANETS] == [
            'Mercury', 'Venus', 'Earth', 'Mars', 'Jupiter', 'Saturn', 'Uranus', 'Neptune',
        ]
        distances = [p.distance_km for p in PLANETS]
        assert distances == sorted(distances)

    def test_earth(self):
        """Test Earth's table values."""
        earth = get_body('Earth')
        assert (earth.radius_km, earth.distance_km, earth.period_days) == (6371.0, 149598262, 365.256)

    def test_sun(self):
        """Test the sun is the only star."""
        assert SUN.is_star
        assert not any(p.is_star for p in PLANETS)
        assert SUN.radius_km == 696340

    def test_get_body_case_insensitive(self):
        """Test lookups ignore case and whitespace."""
        assert get_body(' mars ').name == 'Mars'
        assert get_body('SUN') is SUN

    def test_get_body_unknown(self):
        """Test unknown bodies raise KeyError."""
        with pytest.raises(KeyError):
            get_body('Pluto')

    def test_scale(self):
        """Test default scale factors."""
        assert (SCALE.distance, SCALE.radius, SCALE.sun_radius_multiplier) == (1e-6, 1e-3, 0.25)

    def test_to_dict(self):
        """Test dict conversion keeps every field."""
        d = get_body('Venus').to_dict()
        assert d['name'] == 'Venus'
        assert d['image_url'] == 'auto'


class TestFormatQuantity:
    """Tests for format_quantity."""

    @pytest.mark.parametrize("value,expected", [
        (0, '0'), (1.5e6, '1.50 M'), (57909227, '57.91 M'), (6371, '6.4 K'),
        (999, '999'), (87.969, '87.969'), (math.inf, '-'), (math.nan, '-'),
    ])
    def test_format(self, value, expected):
        """Test abbreviations."""
        assert format_quantity(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (-2000000, '-2000000'), (-2e6, '-2000000'), (-1500.5, '-1500.5'),
        (1e-06, '0.000001'), (1e-07, '0.0000001'), (12.0, '12'), (0.25, '0.25'),
    ])
    def test_plain_digits(self, value, expected):
        """Test values outside the abbreviated ranges never use exponent notation."""
        assert format_quantity(value) == expected


class TestPlaceholderImage:
    """Tests for generated info card images."""

    def _svg(self, body):
        uri = placeholder_image_uri(body)
        assert uri.startswith('data:image/svg+xml;base64,')
        return base64.b64decode(uri.split(',', 1)[1]).decode('utf-8')

    def test_contains_name_and_color(self):
        """Test the SVG shows the body name in its color."""
        svg = self._svg(get_body('Mars'))
        assert '>Mars</text>' in svg
        assert "fill='#ef4444'" in svg
        assert "r='67.79'" in svg

    def test_disc_radius_clamped(self):
        """Test very large and very small bodies are clamped."""
        assert "r='120'" in self._svg(SUN)
        assert "r='24'" in self._svg(Body('Dot', 100, 1, 1, '#ffffff'))

    def test_resolve_image(self):
        """Test 'auto' generates a placeholder and explicit URLs pass through."""
        assert resolve_image(get_body('Earth')).startswith('data:image/svg+xml')
        custom = Body('X', 1, 1, 1, '#000000', image_url='https://example.org/x.png')
        assert resolve_image(custom) == 'https://example.org/x.png'
