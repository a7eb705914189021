"""
Procedural texture submodule.

- noise: value noise and FBM
- png_writer: stdlib PNG encoder
- clouds: cloud texture and layered cloud dynamics
"""

from .noise import hash2d, value_noise_2d, fbm_2d, fbm_alpha_map
from .png_writer import PNGImage
from .clouds import (
    CloudQuality,
    HIGH_QUALITY,
    LOW_QUALITY,
    CloudSystem,
    CloudLayerFrame,
    make_cloud_texture,
)

__all__ = [
    'hash2d',
    'value_noise_2d',
    'fbm_2d',
    'fbm_alpha_map',
    'PNGImage',
    'CloudQuality',
    'HIGH_QUALITY',
    'LOW_QUALITY',
    'CloudSystem',
    'CloudLayerFrame',
    'make_cloud_texture',
]
