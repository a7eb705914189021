"""Tests for the clouds, noise, tower and planets CLI commands."""
import csv
import json
from argparse import Namespace

import pytest

from scene_core.cli.commands import clouds, noise, planets, tower


def clouds_args(output, **overrides):
    values = dict(output=output, low=False, size=8, octaves=2, camera_y=None,
                  layers=5, seed=1, quiet=True)
    values.update(overrides)
    return Namespace(**values)


def tower_args(**overrides):
    values = dict(floor=None, height=None, layers=False, jump=None, frames=120,
                  layer_count=128, format='json')
    values.update(overrides)
    return Namespace(**values)


def planets_args(**overrides):
    values = dict(output=None, days=0.0, seconds=None, speed=1.0, focus=None,
                  format='json', quiet=False)
    values.update(overrides)
    return Namespace(**values)


class TestCloudsCommand:
    """Tests for clouds command."""

    def test_writes_png(self, tmp_path, capsys):
        """Test the texture is written as PNG."""
        out = tmp_path / "clouds.png"
        assert clouds.run(clouds_args(str(out), quiet=False)) == 0
        assert out.read_bytes().startswith(b'\x89PNG')
        assert 'Saved 8x8 cloud texture (2 octaves)' in capsys.readouterr().out

    def test_camera_frames(self, tmp_path, capsys):
        """Test layer state for a camera height."""
        out = tmp_path / "clouds.png"
        assert clouds.run(clouds_args(str(out), camera_y=-500.0)) == 0
        frames = json.loads(capsys.readouterr().out)
        assert len(frames) == 5
        assert all(f['opacity'] == 0.75 for f in frames)

    def test_low_quality_layers(self, tmp_path, capsys):
        """Test the low preset reduces the layer count."""
        out = tmp_path / "clouds.png"
        assert clouds.run(clouds_args(str(out), low=True, camera_y=0.0)) == 0
        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_resolve_quality(self):
        """Test preset selection and overrides."""
        quality = clouds.resolve_quality(clouds_args('x.png', low=True, size=None, octaves=None))
        assert (quality.texture_size, quality.octaves, quality.reduced) == (256, 4, True)
        quality = clouds.resolve_quality(clouds_args('x.png', size=64, octaves=None))
        assert (quality.texture_size, quality.octaves) == (64, 6)

    def test_invalid_size(self, tmp_path, capsys):
        """Test non-positive sizes are rejected."""
        assert clouds.run(clouds_args(str(tmp_path / "c.png"), size=0)) == 1
        assert 'must be positive' in capsys.readouterr().err
        assert not (tmp_path / "c.png").exists()


class TestNoiseCommand:
    """Tests for noise command."""

    def test_json(self, capsys):
        """Test all samples are reported."""
        args = Namespace(x=1.5, y=2.25, octaves=4, lacunarity=2.0, gain=0.5, format='json')
        assert noise.run(args) == 0
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {'x', 'y', 'hash', 'value', 'fbm', 'octaves'}
        assert 0 <= data['fbm'] <= 1

    def test_text(self, capsys):
        """Test the text layout."""
        args = Namespace(x=0.0, y=0.0, octaves=5, lacunarity=2.0, gain=0.5, format='text')
        assert noise.run(args) == 0
        assert '(5 octaves)' in capsys.readouterr().out

    def test_invalid_octaves(self, capsys):
        """Test zero octaves are rejected."""
        args = Namespace(x=0.0, y=0.0, octaves=0, lacunarity=2.0, gain=0.5, format='text')
        assert noise.run(args) == 1
        assert 'octaves' in capsys.readouterr().err


class TestTowerCommand:
    """Tests for tower command."""

    def test_floor(self, capsys):
        """Test a described floor."""
        assert tower.run(tower_args(floor=66)) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['title'] == '66F · Observation Floor'
        assert data['height_m'] == 254
        assert data['scene_y'] == pytest.approx(253.5)

    def test_floor_text(self, capsys):
        """Test the floor card text."""
        assert tower.run(tower_args(floor=7, format='text')) == 0
        out = capsys.readouterr().out
        assert out.startswith('7F · 7F')
        assert 'To be added' in out

    def test_floor_out_of_range(self, capsys):
        """Test floors outside the tower."""
        assert tower.run(tower_args(floor=0)) == 1
        assert 'outside 1..128' in capsys.readouterr().err

    def test_height(self, capsys):
        """Test the floor at a height."""
        assert tower.run(tower_args(height=3.9)) == 0
        assert json.loads(capsys.readouterr().out)['floor'] == 2

    def test_layers(self, capsys):
        """Test the layer table."""
        assert tower.run(tower_args(layers=True, layer_count=16)) == 0
        rows = json.loads(capsys.readouterr().out)
        assert len(rows) == 16
        assert rows[0]['twist'] == 0
        assert rows[-1]['twist'] == pytest.approx(2.2)
        assert rows[0]['color'].startswith('#')

    def test_jump(self, capsys):
        """Test simulated scrolling reaches the floor's progress."""
        assert tower.run(tower_args(jump=65, frames=400)) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['target'] == pytest.approx(0.5)
        assert data['progress'] == pytest.approx(0.5, abs=1e-3)

    def test_summary(self, capsys):
        """Test the summary without a mode."""
        assert tower.run(tower_args(layer_count=100)) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['layer_count'] == 100
        assert data['described_floors'] == [1, 2, 5, 33, 52, 66, 90]

    def test_invalid_layer_count(self, capsys):
        """Test degenerate towers are rejected."""
        assert tower.run(tower_args(layer_count=1)) == 1


class TestPlanetsCommand:
    """Tests for planets command."""

    def test_json(self, capsys):
        """Test the planet table."""
        assert planets.run(planets_args()) == 0
        data = json.loads(capsys.readouterr().out)
        assert [p['name'] for p in data][:3] == ['Mercury', 'Venus', 'Earth']
        assert data[2]['x'] == pytest.approx(149.598262)

    def test_text(self, capsys):
        """Test the text table."""
        assert planets.run(planets_args(days=100.0, format='text')) == 0
        out = capsys.readouterr().out
        assert out.startswith('Day 100.00')
        assert 'Neptune' in out

    def test_csv_stdout(self, capsys):
        """Test CSV to stdout."""
        assert planets.run(planets_args(format='csv')) == 0
        rows = list(csv.DictReader(capsys.readouterr().out.splitlines()))
        assert len(rows) == 8
        assert rows[0]['name'] == 'Mercury'

    def test_seconds(self, capsys):
        """Test playing the clock for real seconds."""
        assert planets.run(planets_args(seconds=1.0, speed=2.0, format='text')) == 0
        assert capsys.readouterr().out.startswith('Day 10.00')

    def test_focus(self, capsys):
        """Test the focus camera position."""
        assert planets.run(planets_args(focus='earth')) == 0
        out = capsys.readouterr().out
        first, rest = out.split('\n', 1)
        assert first.startswith('Focus earth: camera')
        assert 'looking at (149.598, 0.000, 0.000)' in first
        assert json.loads(rest)[0]['name'] == 'Mercury'

    def test_unknown_focus(self, capsys):
        """Test unknown bodies are reported."""
        assert planets.run(planets_args(focus='Pluto')) == 1
        assert 'Unknown body: Pluto' in capsys.readouterr().err

    def test_output_csv(self, tmp_path, capsys):
        """Test CSV file output chosen by extension."""
        out = tmp_path / "planets.csv"
        assert planets.run(planets_args(output=str(out), format='text')) == 0
        with open(out, newline='') as f:
            rows = list(csv.DictReader(f))
        assert [r['id'] for r in rows][-1] == 'neptune'
        assert 'Saved 8 planets' in capsys.readouterr().out

    def test_output_json(self, tmp_path):
        """Test JSON file output."""
        out = tmp_path / "planets.json"
        assert planets.run(planets_args(output=str(out), days=50.0)) == 0
        data = json.loads(out.read_text())
        assert len(data['records']) == 8
        assert data['metadata']['source'] == 'planets day 50'
