"""
Finished model of a supplementary (.ese) file.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .colour import Colour
from .errors import LineError
from .position import Position
from .waypoint import RunwayIdentifier


@dataclass
class FreeText:
    position: Position
    text: str


@dataclass
class FreeTextGroup:
    """Free text entries sharing a group name."""

    name: str
    entries: List[FreeText] = field(default_factory=list)


class ProcedureType(Enum):
    SID = "SID"
    STAR = "STAR"


@dataclass
class Procedure:
    """A SID or STAR route for one runway."""

    proc_type: ProcedureType
    identifier: str  # e.g. "BPK7F"
    route: List[str] = field(default_factory=list)  # waypoint identifiers in order

    def is_departure(self) -> bool:
        return self.proc_type == ProcedureType.SID

    def is_arrival(self) -> bool:
        return self.proc_type == ProcedureType.STAR


@dataclass
class EseAirport:
    """Procedures of one airport keyed by runway."""

    identifier: str
    runways: Dict[RunwayIdentifier, List[Procedure]] = field(default_factory=dict)

    def add_procedure(self, runway: RunwayIdentifier, procedure: Procedure) -> None:
        self.runways.setdefault(runway, []).append(procedure)

    def procedures(self, proc_type: Optional[ProcedureType] = None) -> List[Procedure]:
        """All procedures in runway order, optionally only one type."""
        result = []
        for runway in sorted(self.runways):
            result.extend(p for p in self.runways[runway]
                          if proc_type is None or p.proc_type == proc_type)
        return result


@dataclass
class AtcPosition:
    """Controller position of the [POSITIONS] section."""

    name: str
    callsign: str
    frequency: str
    short_identifier: str
    full_identifier: str
    start_squawk: Optional[int] = None
    end_squawk: Optional[int] = None
    visibility_centres: List[Position] = field(default_factory=list)  # at most 4

    def to_dict(self) -> dict:
        """Convert to dictionary for tabular export."""
        return {
            'name': self.name,
            'callsign': self.callsign,
            'frequency': self.frequency,
            'short_identifier': self.short_identifier,
            'full_identifier': self.full_identifier,
            'start_squawk': self.start_squawk,
            'end_squawk': self.end_squawk,
            'visibility_centres': len(self.visibility_centres),
        }


@dataclass
class Ese:
    """Everything read from one ESE file, plus the lines that failed."""

    colours: Dict[str, Colour] = field(default_factory=dict)
    free_text: List[FreeTextGroup] = field(default_factory=list)
    sids_stars: List[EseAirport] = field(default_factory=list)
    atc_positions: List[AtcPosition] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    def get_airport(self, identifier: str) -> Optional[EseAirport]:
        for airport in self.sids_stars:
            if airport.identifier == identifier:
                return airport
        return None

    def summary(self) -> Dict[str, int]:
        procedures = [p for airport in self.sids_stars for p in airport.procedures()]
        return {
            'colours': len(self.colours),
            'free_text_groups': len(self.free_text),
            'free_text': sum(len(group.entries) for group in self.free_text),
            'airports': len(self.sids_stars),
            'procedures': len(procedures),
            'sids': sum(1 for p in procedures if p.is_departure()),
            'stars': sum(1 for p in procedures if p.is_arrival()),
            'atc_positions': len(self.atc_positions),
            'errors': len(self.errors),
        }
