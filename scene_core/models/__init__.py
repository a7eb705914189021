"""Static scene data: tower geometry, floor descriptions, solar system bodies."""

from scene_core.models.tower import TowerParams, TowerLayout, LayerTransform
from scene_core.models.floors import FloorInfo, FLOORS, get_floor
from scene_core.models.bodies import Body, ScaleConfig, SCALE, SUN, PLANETS, get_body

__all__ = [
    'TowerParams', 'TowerLayout', 'LayerTransform',
    'FloorInfo', 'FLOORS', 'get_floor',
    'Body', 'ScaleConfig', 'SCALE', 'SUN', 'PLANETS', 'get_body',
]
