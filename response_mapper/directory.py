"""Lookup of internal entity names by the key found in external records."""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol


class EntityDirectory(Protocol):
    def lookup(self, key: str) -> Optional[str]:
        ...


# Demo property codes and the internal names they join to.
DEMO_ENTITIES: Dict[str, str] = {
    'HNLMC': 'Waikiki Beach Marriott',
    'RENEW': 'Hotel Renew',
    'ABQMC': 'Albuquerque Marriott',
    'ATLBC': 'Atlanta Marriott Buckhead',
    'BDRSF': 'DoubleTree Stamford',
    'BWGWT': 'Holiday Inn Bowling Green',
    'CAEGS': 'Embassy Suites Columbia',
    'CHSEM': 'Embassy Suites Charleston',
    'CIDMC': 'Cedar Rapids Marriott',
    'CLTBR': 'Charlotte Airport Hilton',
    'CRWEM': 'Embassy Suites Charleston WV',
    'CVGEM': 'Holiday Inn Cincinnati',
    'DALEM': 'Embassy Suites DFW',
    'DALHS': 'Hampton Suites Mesquite',
    'DENAU': 'Crowne Plaza Denver',
    'DSMDN': 'Embassy Suites Des Moines',
    'DSMSI': 'Sheraton West Des Moines',
    'DTWWI': 'Westin Southfield',
    'DVPTR': 'Radisson Quad City',
    'FLLMC': 'Marriott Coral Springs',
    'FNLCO': 'Hilton Fort Collins',
    'FYVSP': 'Hampton Inn Springdale',
    'GSOGB': 'Embassy Suites Greensboro',
    'GSOHW': 'Homewood Suites Greensboro',
    'GSPES': 'Embassy Suites Greenville',
}


class StaticEntityDirectory:
    """Directory backed by a fixed mapping."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries = dict(DEMO_ENTITIES if entries is None else entries)

    def lookup(self, key: str) -> Optional[str]:
        return self._entries.get(str(key))


def placeholder_name(key) -> str:
    return f"Property {key}"


def display_name_for(directory: Optional[EntityDirectory], key) -> str:
    """Directory name for `key`, falling back to a name built from the key."""
    key = str(key)
    name = directory.lookup(key) if directory is not None else None
    return name if name else placeholder_name(key)
