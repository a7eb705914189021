"""TopoJSON to GeoJSON conversion for polygon layers.

Only what country boundary files use is supported: quantized or plain
arcs, Polygon, MultiPolygon and GeometryCollection objects. Other geometry
types become features with a null geometry.
"""
from typing import Any, Dict, List, Optional

Position = List[float]

# Object names used by common world boundary topologies, in lookup order
COUNTRY_OBJECT_NAMES = ('countries', 'ne_admin_0_countries')


def decode_arcs(topology: Dict[str, Any]) -> List[List[Position]]:
    """Decode all arcs to absolute [lon, lat] positions.

    Quantized topologies store delta-encoded integer arcs plus a transform;
    plain ones store positions directly.
    """
    transform = topology.get('transform')
    arcs = topology.get('arcs', [])
    if not transform:
        return [[list(p[:2]) for p in arc] for arc in arcs]

    sx, sy = transform['scale']
    tx, ty = transform['translate']
    decoded = []
    for arc in arcs:
        x = y = 0
        points = []
        for p in arc:
            x += p[0]
            y += p[1]
            points.append([x * sx + tx, y * sy + ty])
        decoded.append(points)
    return decoded


def _arc(arcs: List[List[Position]], index: int) -> List[Position]:
    # Negative indices refer to the one's complement arc, reversed
    if index < 0:
        return list(reversed(arcs[~index]))
    return arcs[index]


def _ring(arcs: List[List[Position]], indices: List[int]) -> List[Position]:
    ring: List[Position] = []
    for k, index in enumerate(indices):
        points = _arc(arcs, index)
        # Consecutive arcs share their joining point
        ring.extend(points if k == 0 else points[1:])
    return ring


def _geometry(arcs, obj: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    gtype = obj.get('type')
    if gtype == 'Polygon':
        return {'type': 'Polygon',
                'coordinates': [_ring(arcs, r) for r in obj.get('arcs', [])]}
    if gtype == 'MultiPolygon':
        return {'type': 'MultiPolygon',
                'coordinates': [[_ring(arcs, r) for r in polygon]
                                for polygon in obj.get('arcs', [])]}
    return None


def _feature(arcs, obj: Dict[str, Any]) -> Dict[str, Any]:
    feature = {
        'type': 'Feature',
        'properties': dict(obj.get('properties') or {}),
        'geometry': _geometry(arcs, obj),
    }
    if 'id' in obj:
        feature['id'] = obj['id']
    return feature


def select_object(topology: Dict[str, Any], name: Optional[str] = None) -> Dict[str, Any]:
    """Pick the object to convert.

    Args:
        topology: Parsed TopoJSON document
        name: Explicit object name; otherwise the usual country layer names
            are tried, then the first object

    Raises:
        KeyError: If the topology has no (or no such) object
    """
    objects = topology.get('objects') or {}
    if name is not None:
        return objects[name]
    for candidate in COUNTRY_OBJECT_NAMES:
        if candidate in objects:
            return objects[candidate]
    if not objects:
        raise KeyError("Topology has no objects")
    return next(iter(objects.values()))


def topology_to_geojson(topology: Dict[str, Any], name: Optional[str] = None) -> Dict[str, Any]:
    """Convert one TopoJSON object to a GeoJSON FeatureCollection.

    Raises:
        ValueError: If the document is not a Topology or its arcs are broken
        KeyError: If the requested object is missing
    """
    if topology.get('type') != 'Topology':
        raise ValueError(f"Expected a TopoJSON Topology, got type {topology.get('type')!r}")
    obj = select_object(topology, name)
    try:
        arcs = decode_arcs(topology)
        if obj.get('type') == 'GeometryCollection':
            features = [_feature(arcs, g) for g in obj.get('geometries', [])]
        else:
            features = [_feature(arcs, obj)]
    except (IndexError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed topology: {e}") from e
    return {'type': 'FeatureCollection', 'features': features}


def as_feature_collection(document: Dict[str, Any]) -> Dict[str, Any]:
    """Accept GeoJSON or TopoJSON and return a GeoJSON FeatureCollection.

    Raises:
        ValueError: If the document is neither
    """
    if not isinstance(document, dict):
        raise ValueError(f"Boundary document must be a JSON object, got {type(document).__name__}")
    dtype = document.get('type')
    if dtype == 'Topology':
        return topology_to_geojson(document)
    if dtype == 'FeatureCollection':
        return document
    if dtype == 'Feature':
        return {'type': 'FeatureCollection', 'features': [document]}
    raise ValueError(f"Unsupported boundary document type: {dtype!r}")
