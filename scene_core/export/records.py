"""Builders turning computed scene data into exportable records."""
import math
from datetime import datetime
from typing import List

from scene_core.ephemeris.sun import declination, subsolar_point
from scene_core.ephemeris.terminator import terminator_points
from scene_core.export.base import GeoRecord, LINE, NO_GEOMETRY, POINT
from scene_core.models.bodies import format_quantity
from scene_core.simulation.orbits import SolarSystemModel


def terminator_records(instant: datetime, step_deg: float = 1.0,
                       include_subsolar: bool = True) -> List[GeoRecord]:
    """Terminator line (and optionally the subsolar point) at an instant."""
    stamp = instant.isoformat()
    points = terminator_points(instant, step_deg)
    records = [GeoRecord(
        id='terminator',
        geometry_type=LINE,
        coordinates=[[lon, lat] for lat, lon in points],
        properties={'kind': 'terminator', 'time': stamp, 'step_deg': step_deg},
    )]
    if include_subsolar:
        lat, lon = subsolar_point(instant)
        records.append(GeoRecord(
            id='subsolar',
            geometry_type=POINT,
            coordinates=[lon, lat],
            properties={'kind': 'subsolar', 'time': stamp,
                        'declination': round(declination(instant), 6)},
        ))
    return records


def line_vertex_records(records: List[GeoRecord]) -> List[GeoRecord]:
    """Expand line records into one point record per vertex, for row-based formats.

    Each vertex keeps its line's id and properties plus its position in the
    line as `seq`. Other records pass through unchanged.
    """
    expanded = []
    for record in records:
        if record.geometry_type != LINE:
            expanded.append(record)
            continue
        for seq, position in enumerate(record.coordinates):
            expanded.append(GeoRecord(
                id=record.id,
                geometry_type=POINT,
                coordinates=list(position),
                properties={**record.properties, 'seq': seq},
            ))
    return expanded


def planet_records(model: SolarSystemModel, days: float) -> List[GeoRecord]:
    """One record per planet with its scene position after `days` days."""
    records = []
    for name, (x, y, z) in model.positions(days).items():
        body = model.body(name)
        records.append(GeoRecord(
            id=name.lower(),
            geometry_type=NO_GEOMETRY,
            properties={
                'name': name,
                'radius_km': body.radius_km,
                'distance_km': body.distance_km,
                'distance': format_quantity(body.distance_km),
                'period_days': body.period_days,
                'angle_deg': round(math.degrees(model.orbit_angle(name, days)) % 360, 6),
                'x': round(x, 6),
                'y': round(y, 6),
                'z': round(z, 6),
                'color': body.color,
            },
        ))
    return records
