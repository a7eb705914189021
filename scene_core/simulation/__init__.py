"""Per-frame state models for the tower, solar system and globe views."""

from scene_core.simulation.orbits import (
    SolarSystemModel, SimulationClock, CameraTween, focus_tween, orbit_segments,
)
from scene_core.simulation.scroll import ScrollController, ScrollFrame
from scene_core.simulation.globe import GlobeParams, GlobeState, HoverReport, hover_report

__all__ = [
    'SolarSystemModel', 'SimulationClock', 'CameraTween', 'focus_tween', 'orbit_segments',
    'ScrollController', 'ScrollFrame',
    'GlobeParams', 'GlobeState', 'HoverReport', 'hover_report',
]
