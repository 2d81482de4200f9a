"""
Finished model of a sector (.sct) file.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .collection import QueryableCollection
from .colour import Colour
from .errors import LineError
from .line import LabelGroup, LineGroup, RegionGroup
from .waypoint import Airport, Fix, Ndb, Vor


@dataclass
class SectorInfo:
    """The nine positional fields of the [INFO] section."""

    name: Optional[str] = None
    default_callsign: Optional[str] = None
    default_airport: Optional[str] = None
    centre_lat: Optional[float] = None
    centre_lon: Optional[float] = None
    nm_per_deg_lat: Optional[float] = None
    nm_per_deg_lon: Optional[float] = None
    magnetic_variation: Optional[float] = None
    sector_scale: Optional[float] = None


@dataclass
class Sector:
    """Everything read from one sector file, plus the lines that failed."""

    colours: Dict[str, Colour] = field(default_factory=dict)
    sector_info: SectorInfo = field(default_factory=SectorInfo)
    airports: List[Airport] = field(default_factory=list)
    vors: List[Vor] = field(default_factory=list)
    ndbs: List[Ndb] = field(default_factory=list)
    fixes: List[Fix] = field(default_factory=list)
    artcc_entries: List[LineGroup] = field(default_factory=list)
    artcc_high_entries: List[LineGroup] = field(default_factory=list)
    artcc_low_entries: List[LineGroup] = field(default_factory=list)
    low_airways: List[LineGroup] = field(default_factory=list)
    high_airways: List[LineGroup] = field(default_factory=list)
    sid_entries: List[LineGroup] = field(default_factory=list)
    star_entries: List[LineGroup] = field(default_factory=list)
    geo_entries: List[LineGroup] = field(default_factory=list)
    region_groups: List[RegionGroup] = field(default_factory=list)
    label_groups: List[LabelGroup] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    @property
    def airport_collection(self) -> QueryableCollection[Airport]:
        return QueryableCollection(self.airports)

    @property
    def fix_collection(self) -> QueryableCollection[Fix]:
        return QueryableCollection(self.fixes)

    def get_airport(self, identifier: str) -> Optional[Airport]:
        """Find an airport by identifier."""
        return self.airport_collection.where(identifier=identifier).first()

    def line_groups(self) -> Dict[str, List[LineGroup]]:
        """All line group collections keyed by kind."""
        return {
            'artcc': self.artcc_entries,
            'artcc_high': self.artcc_high_entries,
            'artcc_low': self.artcc_low_entries,
            'low_airway': self.low_airways,
            'high_airway': self.high_airways,
            'sid': self.sid_entries,
            'star': self.star_entries,
            'geo': self.geo_entries,
        }

    def summary(self) -> Dict[str, int]:
        """Count of entities per kind."""
        counts = {
            'colours': len(self.colours),
            'airports': len(self.airports),
            'runways': sum(len(airport.runways) for airport in self.airports),
            'vors': len(self.vors),
            'ndbs': len(self.ndbs),
            'fixes': len(self.fixes),
        }
        for kind, groups in self.line_groups().items():
            counts[kind] = len(groups)
        counts['regions'] = sum(len(group.regions) for group in self.region_groups)
        counts['labels'] = sum(len(group.labels) for group in self.label_groups)
        counts['errors'] = len(self.errors)
        return counts

    def __repr__(self):
        return f"Sector(name={self.sector_info.name!r}, errors={len(self.errors)})"
