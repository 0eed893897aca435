"""
Lantern catalog for Bloodborne.

Zone ids are the compact `[area, block]` map codes (m21_00 is `15 00`,
m24_01 is `18 01`, ...). They are expanded to the on-disk layout by
`lantern.save.encode_zone_id`.

Only the Hunter's Dream coordinates are confirmed. Every other entry carries
placeholder coordinates (flagged `verified=False`) that still have to be
checked in game; teleporting to one logs a warning.
"""

from __future__ import annotations

from collections.abc import Iterable

from lantern.errors import AmbiguousLocation, LocationNotFound
from lantern.model.location import Location, RegionGroup

HUNTERS_DREAM = "Hunter's Dream"
YHARNAM = 'Yharnam Headstone'
FRONTIER = 'Frontier Headstone'
UNSEEN = 'Unseen Headstone'
NIGHTMARE = 'Nightmare Headstone'
HUNTERS_NIGHTMARE = "Hunter's Nightmare Headstone"

# Map codes
M21_00 = b'\x15\x00'  # Hunter's Dream
M21_01 = b'\x15\x01'  # Abandoned Old Workshop
M22_00 = b'\x16\x00'  # Hemwick
M23_00 = b'\x17\x00'  # Old Yharnam
M24_00 = b'\x18\x00'  # Cathedral Ward
M24_01 = b'\x18\x01'  # Central Yharnam
M24_02 = b'\x18\x02'  # Upper Cathedral Ward
M25_00 = b'\x19\x00'  # Cainhurst
M26_00 = b'\x1a\x00'  # Nightmare of Mensis
M27_00 = b'\x1b\x00'  # Forbidden Woods
M28_00 = b'\x1c\x00'  # Yahar'gul
M32_00 = b'\x20\x00'  # Byrgenwerth
M32_02 = b'\x20\x02'  # Lecture Building
M33_00 = b'\x21\x00'  # Nightmare Frontier
M34_00 = b'\x22\x00'  # Hunter's Nightmare
M35_00 = b'\x23\x00'  # Research Hall
M36_00 = b'\x24\x00'  # Fishing Hamlet


def _placeholder(name: str, region: str, x: float, y: float, z: float, zone_id: bytes) -> Location:
    return Location(name, region, x, y, z, zone_id, verified=False)


# The first entry is the default destination.
LOCATIONS: tuple[Location, ...] = (
    Location(HUNTERS_DREAM, HUNTERS_DREAM, -8.0, -6.0, -18.0, M21_00),
    # Yharnam Headstone
    _placeholder('1st Floor Sickroom', YHARNAM, -141.39, -12.53, 172.88, M24_01),
    _placeholder('Central Yharnam', YHARNAM, -122.61, -27.16, 79.42, M24_01),
    _placeholder('Great Bridge', YHARNAM, -54.27, -14.83, 12.61, M24_01),
    _placeholder('Tomb of Oedon', YHARNAM, 23.74, 8.49, -72.38, M24_00),
    _placeholder('Cathedral Ward', YHARNAM, 79.16, 17.92, -128.05, M24_00),
    _placeholder('Grand Cathedral', YHARNAM, 141.83, 66.21, -248.57, M24_00),
    _placeholder('Upper Cathedral Ward', YHARNAM, 216.48, 92.37, -301.14, M24_02),
    _placeholder('Lumenflower Gardens', YHARNAM, 255.09, 101.55, -342.86, M24_02),
    _placeholder('Altar of Despair', YHARNAM, 287.63, 74.18, -395.27, M24_02),
    _placeholder('Old Yharnam', YHARNAM, -215.52, -48.36, -61.79, M23_00),
    _placeholder('Church of the Good Chalice', YHARNAM, -268.04, -71.25, -118.33, M23_00),
    _placeholder('Graveyard of the Darkbeast', YHARNAM, -312.47, -96.61, -170.92, M23_00),
    # Frontier Headstone
    _placeholder('Hemwick Charnel Lane', FRONTIER, 402.15, -31.88, 211.64, M22_00),
    _placeholder("Witch's Abode", FRONTIER, 455.73, -44.02, 298.19, M22_00),
    _placeholder('Forbidden Woods', FRONTIER, -388.61, -104.77, 266.35, M27_00),
    _placeholder('Forbidden Grave', FRONTIER, -471.26, -133.49, 348.58, M27_00),
    _placeholder('Byrgenwerth', FRONTIER, -602.84, -142.13, 455.71, M32_00),
    _placeholder('Moonside Lake', FRONTIER, -655.37, -189.62, 512.06, M32_00),
    # Unseen Headstone
    _placeholder("Yahar'gul, Unseen Village", UNSEEN, 318.92, -5.64, -88.27, M28_00),
    _placeholder("Yahar'gul Chapel", UNSEEN, 352.41, 11.83, -131.69, M28_00),
    _placeholder('Advent Plaza', UNSEEN, 389.07, 23.46, -172.53, M28_00),
    _placeholder('Hypogean Gaol', UNSEEN, 290.58, -22.91, -46.12, M28_00),
    _placeholder('Forsaken Castle Cainhurst', UNSEEN, -98.36, 31.72, 612.44, M25_00),
    _placeholder("Logarius' Seat", UNSEEN, -141.65, 88.09, 693.81, M25_00),
    _placeholder("Vileblood Queen's Chamber", UNSEEN, -118.24, 104.37, 731.58, M25_00),
    _placeholder('Abandoned Old Workshop', UNSEEN, -2.46, -1.08, 4.97, M21_01),
    # Nightmare Headstone
    _placeholder('Lecture Building', NIGHTMARE, 12.81, 3.26, -9.74, M32_02),
    _placeholder('Lecture Building 2nd Floor', NIGHTMARE, 14.35, 9.58, -21.06, M32_02),
    _placeholder('Nightmare Frontier', NIGHTMARE, -84.19, -58.43, 141.27, M33_00),
    _placeholder('Nightmare of Mensis', NIGHTMARE, 61.72, -12.95, -214.38, M26_00),
    _placeholder("Mergo's Loft: Base", NIGHTMARE, 118.56, 42.17, -309.81, M26_00),
    _placeholder("Mergo's Loft: Middle", NIGHTMARE, 126.03, 97.64, -331.25, M26_00),
    _placeholder("Wet Nurse's Lunarium", NIGHTMARE, 131.88, 158.21, -352.47, M26_00),
    # Hunter's Nightmare Headstone
    _placeholder("Hunter's Nightmare", HUNTERS_NIGHTMARE, -31.64, -19.27, 58.83, M34_00),
    _placeholder('Nightmare Church', HUNTERS_NIGHTMARE, -76.12, 6.58, 104.46, M34_00),
    _placeholder('Nightmare Grand Cathedral', HUNTERS_NIGHTMARE, -18.93, 41.05, 173.62, M34_00),
    _placeholder('Underground Corpse Pile', HUNTERS_NIGHTMARE, -123.47, -44.81, 66.19, M34_00),
    _placeholder('Research Hall', HUNTERS_NIGHTMARE, 92.35, -8.66, -41.73, M35_00),
    _placeholder('Lumenwood Garden', HUNTERS_NIGHTMARE, 101.28, 27.94, -63.05, M35_00),
    _placeholder('Astral Clocktower', HUNTERS_NIGHTMARE, 146.71, 61.39, -88.52, M35_00),
    _placeholder('Fishing Hamlet', HUNTERS_NIGHTMARE, 238.44, -63.18, 27.86, M36_00),
    _placeholder('Lighthouse Hut', HUNTERS_NIGHTMARE, 271.95, -70.42, 59.31, M36_00),
    _placeholder('Coast', HUNTERS_NIGHTMARE, 309.67, -88.75, 96.08, M36_00),
)


def all_locations() -> tuple[Location, ...]:
    """All lanterns in catalog order."""
    return LOCATIONS


def search(query: str, locations: Iterable[Location] = LOCATIONS) -> list[Location]:
    """Case-insensitive substring search on location names.

    An empty query matches everything.
    """
    needle = query.lower()
    return [loc for loc in locations if needle in loc.name.lower()]


def group_by_region(locations: Iterable[Location]) -> list[RegionGroup]:
    """Group locations by region, keeping first-seen region order."""
    grouped: dict[str, list[Location]] = {}
    for loc in locations:
        grouped.setdefault(loc.region, []).append(loc)
    return [RegionGroup(region=region, locations=tuple(locs)) for region, locs in grouped.items()]


def find_location(query: str) -> Location:
    """Resolve a CLI location query to exactly one lantern.

    An exact (case-insensitive) name wins over substring matches, so
    'Lecture Building' does not collide with 'Lecture Building 2nd Floor'.

    Raises:
        LocationNotFound: If the query is empty or matches nothing.
        AmbiguousLocation: If several names contain the query.
    """
    if not query:
        raise LocationNotFound(query)

    lowered = query.lower()
    for loc in LOCATIONS:
        if loc.name.lower() == lowered:
            return loc

    matches = search(query)
    if not matches:
        raise LocationNotFound(query)
    if len(matches) > 1:
        raise AmbiguousLocation(query, matches)
    return matches[0]
