"""
Layered cloud system for the tower explorer.

Each layer is a horizontal sheet of FBM-textured puffs. When the camera
passes through a layer's altitude the layer thins out and spreads a little,
and every layer scrolls its texture at its own rate.
"""

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .noise import fbm_alpha_map
from .png_writer import PNGImage
from ..utils.math_utils import clamp, lerp

# Base opacity of a cloud sheet
BASE_OPACITY = 0.75

# Vertical distance over which a layer reacts to the camera
PENETRATION_RANGE = 140.0

# Puffs per layer
PUFFS_PER_LAYER = 5


@dataclass
class CloudQuality:
    """Texture resolution preset."""

    texture_size: int
    octaves: int
    reduced: bool = False

    def layer_count(self, requested: int) -> int:
        """Number of layers to build for a requested count."""
        if self.reduced:
            return max(3, int(math.floor(requested * 0.6)))
        return requested


HIGH_QUALITY = CloudQuality(texture_size=512, octaves=6)
LOW_QUALITY = CloudQuality(texture_size=256, octaves=4, reduced=True)


@dataclass
class CloudPuff:
    """One textured plane within a layer."""

    x: float
    z: float
    rotation: float


@dataclass
class CloudLayer:
    """A horizontal cloud sheet."""

    height: float
    radius: float
    offset: Tuple[float, float]
    scroll_factor: float
    puffs: List[CloudPuff] = field(default_factory=list)


@dataclass
class CloudLayerFrame:
    """Per-frame material state of a layer."""

    height: float
    opacity: float
    scale: float
    offset_u: float
    offset_v: float
    repeat: float


def make_cloud_texture(quality: CloudQuality = HIGH_QUALITY) -> PNGImage:
    """
    Render the white FBM cloud texture.

    Args:
        quality: Resolution/octave preset

    Returns:
        RGBA PNGImage, white with noise-driven alpha
    """
    size = quality.texture_size
    alpha = fbm_alpha_map(size, quality.octaves)
    image = PNGImage(size, size, channels=4)
    for y, row in enumerate(alpha):
        image.pixels[y] = [(255, 255, 255, a) for a in row]
    return image


class CloudSystem:
    """
    Stack of cloud layers spread evenly up a tower.
    """

    def __init__(self, count: int = 5, radius: float = 260, tower_height: float = 500,
                 noise_speed: float = 0.015, quality: CloudQuality = HIGH_QUALITY,
                 seed: Optional[int] = None):
        """
        Build the layers.

        Args:
            count: Requested number of layers
            radius: Half-size of each sheet
            tower_height: Height the layers are spread over
            noise_speed: Texture scroll speed
            quality: Quality preset (LOW reduces the layer count)
            seed: Seed for puff placement and scroll rates
        """
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        self.noise_speed = noise_speed
        self.quality = quality
        self.time = 0.0
        self.layers: List[CloudLayer] = []

        rng = random.Random(seed)
        count = quality.layer_count(count)

        for i in range(count):
            height = (i + 1) / (count + 1) * tower_height
            puffs = []
            for k in range(PUFFS_PER_LAYER):
                sx = -1 if k % 2 == 0 else 1
                sz = -1 if k < 2 else 1
                puffs.append(CloudPuff(
                    x=sx * (radius * 0.22 + rng.random() * radius * 0.3),
                    z=sz * (radius * 0.22 + rng.random() * radius * 0.3),
                    rotation=rng.random() * math.pi * 2,
                ))
            self.layers.append(CloudLayer(
                height=height,
                radius=radius,
                offset=(rng.random(), rng.random()),
                scroll_factor=0.2 + rng.random() * 0.3,
                puffs=puffs,
            ))

    def update(self, dt: float, camera_y: float) -> List[CloudLayerFrame]:
        """
        Advance time and compute each layer's material state.

        Args:
            dt: Seconds since the previous frame
            camera_y: Camera altitude

        Returns:
            One CloudLayerFrame per layer, bottom to top
        """
        self.time += dt
        frames = []
        for layer in self.layers:
            dy = abs(camera_y - layer.height)
            t = clamp(1 - dy / PENETRATION_RANGE, 0.0, 1.0)
            alpha_mul = lerp(1.0, 0.35, t)
            scale = lerp(1.0, 1.1, t)

            drift = self.time * self.noise_speed * layer.scroll_factor
            frames.append(CloudLayerFrame(
                height=layer.height,
                opacity=BASE_OPACITY * alpha_mul,
                scale=scale,
                offset_u=(drift + layer.offset[0]) % 1,
                offset_v=(drift * 0.65 + layer.offset[1]) % 1,
                repeat=1.6 + math.sin(self.time * 0.05 + layer.offset[0] * 6.283) * 0.15,
            ))
        return frames
