"""Virtual scroll position driving the tower camera.

User input moves a target value in [0, 1]; every frame the current value
eases towards it and the camera height follows the eased value.
"""
from dataclasses import dataclass

from scene_core.models.tower import TowerLayout
from scene_core.utils.math_utils import clamp01, lerp, smoothstep

WHEEL_SENSITIVITY = 0.0005
TOUCH_SENSITIVITY = 0.0015
KEY_STEP = 0.02

# Per-frame smoothing for both the scroll value and the camera height
SMOOTHING = 0.08

# Camera height range beyond the tower: below ground and above the crown
BOTTOM_MARGIN = -80.0
TOP_MARGIN = 120.0

# How far below the camera the orbit target sits
LOOK_DOWN = 60.0


@dataclass
class ScrollFrame:
    """Camera state for one frame."""
    progress: float
    camera_y: float
    target_y: float
    look_at_y: float
    floor: int


class ScrollController:
    """Maps wheel, touch and key input to a camera height on the tower."""

    def __init__(self, layout: TowerLayout = None, camera_y: float = 160.0):
        self.layout = layout or TowerLayout()
        self.target = 0.0
        self.current = 0.0
        self.camera_y = camera_y

    @property
    def tower_height(self) -> float:
        return self.layout.params.total_height

    def wheel(self, delta_y: float, ctrl: bool = False):
        """Mouse wheel; scrolling up raises the camera. Ctrl+wheel is zoom, not scroll."""
        if ctrl:
            return
        self.target = clamp01(self.target - delta_y * WHEEL_SENSITIVITY)

    def touch_move(self, dy: float):
        """Finger drag by dy pixels; swiping up raises the camera."""
        self.target = clamp01(self.target - dy * TOUCH_SENSITIVITY)

    def key(self, name: str) -> bool:
        """Arrow keys nudge the target.

        Returns:
            True if the key was handled
        """
        if name == 'ArrowUp':
            self.target = clamp01(self.target + KEY_STEP)
            return True
        if name == 'ArrowDown':
            self.target = clamp01(self.target - KEY_STEP)
            return True
        return False

    def jump_to_floor(self, floor: int):
        """Aim the scroll target at a 1-based floor."""
        self.target = clamp01(self.layout.floor_y(floor) / self.tower_height)

    def camera_target_y(self, progress: float) -> float:
        """Camera height the scroll value maps to (smoothstep eased)."""
        return lerp(BOTTOM_MARGIN, self.tower_height + TOP_MARGIN, smoothstep(progress))

    def update(self) -> ScrollFrame:
        """Advance one frame of smoothing."""
        self.current = lerp(self.current, self.target, SMOOTHING)
        target_y = self.camera_target_y(self.current)
        self.camera_y = lerp(self.camera_y, target_y, SMOOTHING)
        return ScrollFrame(
            progress=self.current,
            camera_y=self.camera_y,
            target_y=target_y,
            look_at_y=self.camera_y - LOOK_DOWN,
            floor=self.layout.floor_index_from_y(target_y),
        )
