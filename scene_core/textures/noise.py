"""
Value noise and fractal Brownian motion (FBM).

Deterministic, seedless 2D noise for procedural cloud textures. All
outputs are in [0, 1].
"""

import math
from typing import List

from ..utils.math_utils import smoothstep

DEFAULT_SEED = 43758.5453


def hash2d(x: float, y: float, seed: float = DEFAULT_SEED) -> float:
    """Repeatable pseudo-random value in [0, 1] for a lattice point."""
    s = math.sin(x * 127.1 + y * 311.7 + seed) * 43758.5453123
    return s - math.floor(s)


def value_noise_2d(x: float, y: float) -> float:
    """
    2D value noise with smoothstep-faded bilinear interpolation.

    Args:
        x: Sample x coordinate
        y: Sample y coordinate

    Returns:
        Noise value in [0, 1]
    """
    xi = math.floor(x)
    yi = math.floor(y)
    u = smoothstep(x - xi)
    v = smoothstep(y - yi)

    n00 = hash2d(xi, yi)
    n10 = hash2d(xi + 1, yi)
    n01 = hash2d(xi, yi + 1)
    n11 = hash2d(xi + 1, yi + 1)

    nx0 = n00 * (1 - u) + n10 * u
    nx1 = n01 * (1 - u) + n11 * u
    return nx0 * (1 - v) + nx1 * v


def fbm_2d(x: float, y: float, octaves: int = 5,
           lacunarity: float = 2.0, gain: float = 0.5) -> float:
    """
    Fractal sum of value noise octaves.

    Frequency multiplies by lacunarity and amplitude by gain per octave;
    the sum is normalized by the total amplitude.

    Args:
        x: Sample x coordinate
        y: Sample y coordinate
        octaves: Number of octaves (>= 1)
        lacunarity: Frequency multiplier per octave
        gain: Amplitude multiplier per octave

    Returns:
        FBM value in [0, 1]

    Raises:
        ValueError: If octaves < 1
    """
    if octaves < 1:
        raise ValueError(f"octaves must be >= 1, got {octaves}")

    amp = 0.5
    freq = 1.0
    total = 0.0
    total_amp = 0.0
    for _ in range(octaves):
        total += value_noise_2d(x * freq, y * freq) * amp
        total_amp += amp
        freq *= lacunarity
        amp *= gain
    return total / total_amp


def fbm_alpha_map(size: int, octaves: int = 5, scale: float = 2.2,
                  gain: float = 0.55, exponent: float = 1.4) -> List[List[int]]:
    """
    Build a square alpha map of soft cloud shapes.

    Args:
        size: Width and height in pixels
        octaves: FBM octaves
        scale: Noise frequency across the map; larger means denser clouds
        gain: FBM gain
        exponent: Contrast curve applied to the noise

    Returns:
        Row-major list of rows of alpha bytes (0-255)

    Raises:
        ValueError: If size < 1
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    rows = []
    for y in range(size):
        fy = (y / size) * scale
        row = []
        for x in range(size):
            fx = (x / size) * scale
            n = fbm_2d(fx, fy, octaves, 2.0, gain) ** exponent
            row.append(min(255, max(0, int(math.floor(n * 255)))))
        rows.append(row)
    return rows
