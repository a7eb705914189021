"""Solar system body data and scaling.

Physical values are real (approximate) figures. Rendering uses separate
scale factors for distances and radii so that planets stay visible next to
their orbits.
"""
import base64
import math
from decimal import Decimal
from dataclasses import dataclass, asdict
from typing import Any, Dict, List


@dataclass
class ScaleConfig:
    """Scene scale factors.

    distance: scene units per km of orbital distance (1,000,000:1)
    radius: scene units per km of body radius (1,000:1)
    sun_radius_multiplier: extra shrink for the sun so it does not swallow
        the inner orbits
    """
    distance: float = 1e-6
    radius: float = 1e-3
    sun_radius_multiplier: float = 0.25


@dataclass
class Body:
    """A star or planet.

    distance_km is the semi-major axis, radius_km the equatorial radius and
    period_days the sidereal orbital period in Earth days.
    """
    name: str
    radius_km: float
    distance_km: float
    period_days: float
    color: str
    info_text: str = ''
    image_url: str = 'auto'
    wiki_url: str = ''

    @property
    def is_star(self) -> bool:
        return self.period_days == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SCALE = ScaleConfig()

SUN = Body(
    name='Sun',
    radius_km=696340,
    distance_km=0,
    period_days=0,
    color='#FDB813',
    info_text='The star at the centre of the solar system, holding 99.86% of its mass.',
    wiki_url='https://en.wikipedia.org/wiki/Sun',
)

PLANETS: List[Body] = [
    Body('Mercury', 2439.7, 57909227, 87.969, '#b1b1b1',
         'The innermost and smallest planet, its surface covered in craters.',
         wiki_url='https://en.wikipedia.org/wiki/Mercury_(planet)'),
    Body('Venus', 6051.8, 108209475, 224.701, '#e1c16e',
         'Similar in size to Earth; its thick atmosphere drives a runaway greenhouse effect.',
         wiki_url='https://en.wikipedia.org/wiki/Venus'),
    Body('Earth', 6371.0, 149598262, 365.256, '#3b82f6',
         'Home of humanity; oceans cover 71% of its surface.',
         wiki_url='https://en.wikipedia.org/wiki/Earth'),
    Body('Mars', 3389.5, 227943824, 686.980, '#ef4444',
         'The red planet, with traces of ancient liquid water.',
         wiki_url='https://en.wikipedia.org/wiki/Mars'),
    Body('Jupiter', 69911, 778340821, 4332.59, '#d1b185',
         'The most massive planet, home of the Great Red Spot.',
         wiki_url='https://en.wikipedia.org/wiki/Jupiter'),
    Body('Saturn', 58232, 1426666422, 10759.22, '#f1d8a7',
         'Famous for its spectacular ring system.',
         wiki_url='https://en.wikipedia.org/wiki/Saturn'),
    Body('Uranus', 25362, 2870658186, 30688.5, '#60a5fa',
         'Its axis is tilted by almost 98 degrees, so it orbits lying on its side.',
         wiki_url='https://en.wikipedia.org/wiki/Uranus'),
    Body('Neptune', 24622, 4498396441, 60182, '#3b82f6',
         'Outer ice giant with the fastest winds in the solar system.',
         wiki_url='https://en.wikipedia.org/wiki/Neptune'),
]


def get_body(name: str) -> Body:
    """Find the sun or a planet by name (case-insensitive).

    Raises:
        KeyError: If no body has that name
    """
    wanted = name.strip().lower()
    for body in [SUN] + PLANETS:
        if body.name.lower() == wanted:
            return body
    raise KeyError(f"Unknown body: {name}")


def format_quantity(n: float) -> str:
    """Abbreviate a large number: '1.50 M', '6.4 K', or the plain value."""
    if n == 0:
        return '0'
    if not math.isfinite(n):
        return '-'
    if n >= 1e6:
        return f"{n / 1e6:.2f} M"
    if n >= 1e3:
        return f"{n / 1e3:.1f} K"
    if n == int(n):
        return str(int(n))
    # Shortest round-trip digits, never in exponent form
    return format(Decimal(repr(n)), 'f')


def placeholder_image_uri(body: Body, width: int = 600, height: int = 400) -> str:
    """Generate an SVG placeholder image as a base64 data URI.

    Draws a gradient in the body's color, a disc sized by its radius and
    its name.
    """
    disc_r = max(24, min(120, body.radius_km / 50))
    svg = (
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{width}' height='{height}'>"
        f"<defs><linearGradient id='g' x1='0' y1='0' x2='0' y2='1'>"
        f"<stop offset='0%' stop-color='{body.color}' stop-opacity='0.9'/>"
        f"<stop offset='100%' stop-color='#111827' stop-opacity='1'/></linearGradient></defs>"
        f"<rect width='100%' height='100%' fill='url(#g)'/>"
        f"<circle cx='{width * 0.26:g}' cy='{height * 0.52:g}' r='{disc_r:g}' "
        f"fill='{body.color}' fill-opacity='0.85'/>"
        f"<text x='{width * 0.6:g}' y='{height * 0.55:g}' text-anchor='middle' "
        f"font-family='Arial, sans-serif' font-size='44' fill='#e5e7eb'>{body.name}</text>"
        f"</svg>"
    )
    encoded = base64.b64encode(svg.encode('utf-8')).decode('ascii')
    return 'data:image/svg+xml;base64,' + encoded


def resolve_image(body: Body) -> str:
    """Image URL for an info card; 'auto' means a generated placeholder."""
    if not body.image_url or body.image_url == 'auto':
        return placeholder_image_uri(body)
    return body.image_url
