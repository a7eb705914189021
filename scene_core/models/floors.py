"""Floor descriptions for the tower explorer."""
from dataclasses import dataclass, asdict
from typing import Any, Dict

TOTAL_FLOORS = 128


@dataclass
class FloorInfo:
    """Description of one floor."""
    name: str
    type: str
    description: str
    image: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Described floors keyed by 1-based floor number; others get a placeholder
FLOORS: Dict[int, FloorInfo] = {
    1: FloorInfo('Lobby & Retail', 'Commercial',
                 'Double-height lobby with visitor reception, guided tours, dining and retail.'),
    2: FloorInfo('Conference Center', 'Conference',
                 'Multi-purpose meeting rooms and auditorium for corporate events and exhibitions.'),
    5: FloorInfo('Podium Retail', 'Commercial',
                 'Boutique shops and food court connecting the metro and public plaza.'),
    33: FloorInfo('Offices', 'Office',
                  'Grade-A office floors with smart building systems and energy-efficient design.'),
    52: FloorInfo('Sky Lobby', 'Transfer',
                  'Vertical transport transfer and lounge space overlooking the skyline.'),
    66: FloorInfo('Observation Floor', 'Observation',
                  'Popular sightseeing floor with interactive installations and a city exhibition.'),
    90: FloorInfo('Hotel Lobby', 'Hotel',
                  'High-altitude hotel lobby with dining and guest services.'),
    101: FloorInfo('Hotel Rooms', 'Hotel',
                   'View rooms looking out over both banks of the river.'),
    120: FloorInfo('Observation Deck', 'Observation',
                   'Upper observation deck for city views, seas of cloud and sunsets.'),
    128: FloorInfo('Mechanical Floor', 'Equipment',
                   'Crown equipment and maintenance level, closed to the public.'),
}


def get_floor(number: int, total_floors: int = TOTAL_FLOORS) -> FloorInfo:
    """Look up a floor, returning a placeholder for undescribed floors.

    Args:
        number: 1-based floor number
        total_floors: Number of floors in the tower

    Returns:
        FloorInfo for the floor

    Raises:
        ValueError: If the floor is outside 1..total_floors
    """
    if not 1 <= number <= total_floors:
        raise ValueError(f"Floor {number} outside 1..{total_floors}")
    info = FLOORS.get(number)
    if info is not None:
        return info
    return FloorInfo(name=f'{number}F', type='Unknown', description='To be added')


def floor_title(number: int, info: FloorInfo) -> str:
    """Heading for a floor card, e.g. '66F · Observation Floor'."""
    return f"{number}F · {info.name or info.type or ''}"
