"""Twisting tapered tower layout."""
import math
from dataclasses import dataclass
from typing import Tuple

from scene_core.utils.math_utils import Color, clamp, hex_to_rgb, hsl_to_rgb, lerp


@dataclass
class TowerParams:
    """Tower geometry parameters.

    One layer per floor; the floor plate shrinks linearly by `taper` and
    rotates by `twist_radians` in total from bottom to top.
    """
    layer_count: int = 128
    layer_height_m: float = 3.9
    unit_scale: float = 1.0
    base_size: Tuple[float, float] = (80.0, 80.0)
    taper: float = 0.45
    color: int = 0xbfd8ff
    highlight_color: int = 0xffb84d
    twist_radians: float = 2.2

    @property
    def floor_height(self) -> float:
        """Scene units between consecutive floors."""
        return self.layer_height_m * self.unit_scale

    @property
    def total_height(self) -> float:
        """Scene height of the full tower."""
        return self.layer_count * self.floor_height


@dataclass
class LayerTransform:
    """Placement of one floor plate (0-based index)."""
    index: int
    y: float
    twist: float
    radius_x: float
    radius_z: float
    color: Color


class TowerLayout:
    """Floor/height mapping and per-layer transforms for a tower."""

    def __init__(self, params: TowerParams = None):
        self.params = params or TowerParams()
        if self.params.layer_count < 2:
            raise ValueError("A tower needs at least 2 layers")
        self.highlighted = -1

    def floor_y(self, floor: int) -> float:
        """Scene height of a 1-based floor; floors below 1 map to ground."""
        return max(0, floor - 1) * self.params.floor_height

    def floor_index_from_y(self, y: float) -> int:
        """Nearest 1-based floor for a scene height, clamped to the tower."""
        idx = math.floor(y / self.params.floor_height + 0.5)
        return int(clamp(idx + 1, 1, self.params.layer_count))

    def height_meters(self, floor: int) -> int:
        """Height above ground of a floor in whole meters."""
        return math.floor((floor - 1) * self.params.layer_height_m + 0.5)

    def gradient_color(self, index: int) -> Color:
        """Base color of a layer: slightly brighter and bluer towards the top."""
        ratio = index / (self.params.layer_count - 1)
        return hsl_to_rgb(0.58 - ratio * 0.06, 0.35, 0.72 + ratio * 0.06)

    def layer_transform(self, index: int) -> LayerTransform:
        """Transform of a 0-based layer.

        Raises:
            IndexError: If index is outside the tower
        """
        p = self.params
        if not 0 <= index < p.layer_count:
            raise IndexError(f"Layer {index} outside 0..{p.layer_count - 1}")
        ratio = index / (p.layer_count - 1)
        half_x = p.base_size[0] * 0.5
        half_z = p.base_size[1] * 0.5
        return LayerTransform(
            index=index,
            y=index * p.floor_height,
            twist=p.twist_radians * ratio,
            radius_x=lerp(half_x, half_x * p.taper, ratio),
            radius_z=lerp(half_z, half_z * p.taper, ratio),
            color=self.layer_color(index),
        )

    def layers(self):
        """Iterate over all layer transforms bottom to top."""
        for i in range(self.params.layer_count):
            yield self.layer_transform(i)

    def highlight(self, index: int):
        """Highlight a 0-based layer; -1 (or any out-of-range index) clears."""
        if 0 <= index < self.params.layer_count:
            self.highlighted = index
        else:
            self.highlighted = -1

    def layer_color(self, index: int) -> Color:
        """Current color of a layer, honoring the highlight."""
        if index == self.highlighted:
            return hex_to_rgb(self.params.highlight_color)
        return self.gradient_color(index)
