"""Geographic utility functions for globe rendering and country picking."""
import math
from typing import Any, Dict, List, Sequence, Tuple

# Earth radius in meters (WGS84 mean radius)
EARTH_RADIUS_M = 6371008.8

# Empty bbox sentinel: [min_lon, min_lat, max_lon, max_lat]
EMPTY_BBOX = [180.0, 90.0, -180.0, -90.0]

Vec3 = Tuple[float, float, float]


def lat_lon_to_vec3(lat: float, lon: float, r: float = 1.0) -> Vec3:
    """Convert geographic coordinates to a Cartesian point on a sphere.

    The frame matches equirectangular texture mapping on a y-up sphere:
    the north pole is +y and (lat=0, lon=0) maps to (r, 0, 0).

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees
        r: Sphere radius

    Returns:
        Tuple of (x, y, z)

    Examples:
        >>> x, y, z = lat_lon_to_vec3(90, 0, 2.0)
        >>> round(y, 9)
        2.0
    """
    phi = math.radians(90 - lat)
    theta = math.radians(lon + 180)
    return (
        -r * math.sin(phi) * math.cos(theta),
        r * math.cos(phi),
        r * math.sin(phi) * math.sin(theta),
    )


def vec3_to_lat_lon(x: float, y: float, z: float) -> Tuple[float, float]:
    """Convert a point in the globe's local frame back to latitude/longitude.

    Inverse of lat_lon_to_vec3 for any radius.

    Args:
        x: X coordinate
        y: Y coordinate (polar axis)
        z: Z coordinate

    Returns:
        Tuple of (lat, lon) in degrees, lon in [-180, 180)

    Raises:
        ValueError: If the point is the origin
    """
    r = math.sqrt(x * x + y * y + z * z)
    if r == 0:
        raise ValueError("Cannot convert the zero vector to latitude/longitude")
    lat = 90 - math.degrees(math.acos(max(-1.0, min(1.0, y / r))))
    theta_deg = math.degrees(math.atan2(z, -x))
    lon = ((theta_deg + 360) % 360) - 180
    return lat, lon


def normalize_longitude(lon: float) -> float:
    """Wrap longitude into [-180, 180)."""
    return ((lon + 180) % 360) - 180


def vec3_length(v: Sequence[float]) -> float:
    """Euclidean length of a 3-vector."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def vec3_normalize(v: Sequence[float]) -> Vec3:
    """Return v scaled to unit length.

    Raises:
        ValueError: If v has zero length
    """
    length = vec3_length(v)
    if length == 0:
        raise ValueError("Cannot normalize the zero vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def vec3_dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 3-vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def feature_bbox(geometry: Dict[str, Any]) -> List[float]:
    """Calculate the lon/lat bounding box of a GeoJSON polygon geometry.

    Args:
        geometry: GeoJSON geometry dict (Polygon or MultiPolygon)

    Returns:
        [min_lon, min_lat, max_lon, max_lat]; the empty sentinel
        [180, 90, -180, -90] for other geometry types
    """
    bbox = list(EMPTY_BBOX)
    if not geometry or geometry.get("type") not in ("Polygon", "MultiPolygon"):
        return bbox

    def visit(coords):
        for c in coords:
            if isinstance(c[0], (int, float)):
                lon, lat = c[0], c[1]
                bbox[0] = min(bbox[0], lon)
                bbox[2] = max(bbox[2], lon)
                bbox[1] = min(bbox[1], lat)
                bbox[3] = max(bbox[3], lat)
            else:
                visit(c)

    visit(geometry.get("coordinates", []))
    return bbox


def bbox_contains(bbox: Sequence[float], lat: float, lon: float) -> bool:
    """Check if a point lies inside a [min_lon, min_lat, max_lon, max_lat] box."""
    return bbox[0] <= lon <= bbox[2] and bbox[1] <= lat <= bbox[3]


def point_in_ring(point: Sequence[float], ring: Sequence[Sequence[float]]) -> bool:
    """Test if a point is inside a polygon ring using ray casting.

    Args:
        point: [lon, lat] coordinate
        ring: Ring coordinates as [[lon, lat], ...]

    Returns:
        True if point is inside ring
    """
    x, y = point[0], point[1]
    n = len(ring)
    inside = False

    j = n - 1
    for i in range(n):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def point_in_polygon(point: Sequence[float], rings: Sequence[Sequence[Sequence[float]]]) -> bool:
    """Test a point against a polygon given as [outer, hole, hole, ...]."""
    if not rings or not point_in_ring(point, rings[0]):
        return False
    return not any(point_in_ring(point, hole) for hole in rings[1:])


def geometry_contains(geometry: Dict[str, Any], lon: float, lat: float) -> bool:
    """Test if a GeoJSON Polygon or MultiPolygon contains a point.

    Args:
        geometry: GeoJSON geometry dict
        lon: Point longitude
        lat: Point latitude

    Returns:
        True if the point is inside; False for unsupported geometry types
    """
    if not geometry:
        return False
    gtype = geometry.get("type")
    coords = geometry.get("coordinates", [])
    point = (lon, lat)
    if gtype == "Polygon":
        return point_in_polygon(point, coords)
    if gtype == "MultiPolygon":
        return any(point_in_polygon(point, polygon) for polygon in coords)
    return False


def guess_timezone_offset(lon: float) -> int:
    """Estimate a UTC offset in whole hours from longitude.

    Solar time only: 15 degrees per hour, clamped to the civil range.
    """
    off = math.floor(lon / 15 + 0.5)
    return max(-12, min(14, off))


def format_offset(hours: float) -> str:
    """Format a UTC offset as '+8', '-5' or '+0'."""
    if hours == int(hours):
        hours = int(hours)
    return f"+{hours}" if hours >= 0 else str(hours)


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in meters."""
    lat1_rad, lat2_rad = math.radians(lat1), math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)
    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2)
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
