from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import ErrorKind, SectorError
from .position import Heading, Position


class AirspaceClass(Enum):
    """ICAO airspace classes, A being the most restrictive."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @classmethod
    def from_str(cls, value: str) -> 'AirspaceClass':
        try:
            return cls(value)
        except ValueError:
            raise SectorError(ErrorKind.INVALID_AIRSPACE_CLASS, value) from None

    @property
    def rank(self) -> int:
        """0 for class A up to 6 for class G."""
        return ord(self.value) - ord('A')

    def __lt__(self, other: 'AirspaceClass') -> bool:
        if not isinstance(other, AirspaceClass):
            return NotImplemented
        return self.rank < other.rank


class RunwayModifier(Enum):
    """Parallel runway designator letter."""
    LEFT = "L"
    CENTRE = "C"
    RIGHT = "R"
    GRASS = "G"
    NONE = ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RunwayIdentifier:
    """Runway designator such as 09L, number 1 to 36."""

    number: int
    modifier: RunwayModifier = RunwayModifier.NONE

    def __lt__(self, other: 'RunwayIdentifier') -> bool:
        if not isinstance(other, RunwayIdentifier):
            return NotImplemented
        return (self.number, self.modifier.value) < (other.number, other.modifier.value)

    @classmethod
    def parse(cls, value: str) -> 'RunwayIdentifier':
        """
        Parse a runway designator.

        A trailing L, C, R or G gives the modifier. A number of 0 is read
        as 36.

        Raises:
            SectorError: INVALID_RUNWAY for a malformed or out of range number
        """
        text = value.strip().upper()
        modifier = RunwayModifier.NONE
        if text and text[-1] in 'LCRG':
            modifier = RunwayModifier(text[-1])
        digits = text.rstrip('LCRG')
        if not (digits.isascii() and digits.isdigit()):
            raise SectorError(ErrorKind.INVALID_RUNWAY, value)
        number = int(digits)
        if number > 36:
            raise SectorError(ErrorKind.INVALID_RUNWAY, value)
        if number == 0:
            number = 36
        return cls(number, modifier)

    def __str__(self) -> str:
        return f"{self.number:02d}{self.modifier}"


@dataclass
class RunwayEnd:
    """One end of a runway strip."""

    number: int
    modifier: RunwayModifier
    threshold: Position  # touchdown threshold of this end
    opposite_threshold: Position  # threshold of the other end
    magnetic_heading: Heading

    @property
    def identifier(self) -> RunwayIdentifier:
        return RunwayIdentifier(self.number, self.modifier)


@dataclass
class RunwayStrip:
    """A runway with both of its ends, lower runway number first."""

    end_a: RunwayEnd
    end_b: RunwayEnd

    def __str__(self) -> str:
        return f"Runway {self.end_a.identifier}/{self.end_b.identifier}"


@dataclass
class Airport:
    """Airport entry of the [AIRPORT] section."""

    identifier: str
    position: Position
    tower_frequency: str
    airspace_class: AirspaceClass
    runways: List[RunwayStrip] = field(default_factory=list)

    def get_runway(self, identifier: RunwayIdentifier) -> Optional[RunwayStrip]:
        """Find the strip having an end matching the identifier."""
        for strip in self.runways:
            for end in (strip.end_a, strip.end_b):
                if end.identifier == identifier:
                    return strip
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for tabular export."""
        return {
            'identifier': self.identifier,
            'lat': self.position.lat,
            'lon': self.position.lon,
            'tower_frequency': self.tower_frequency,
            'airspace_class': self.airspace_class.value,
            'runways': ' '.join(str(strip.end_a.identifier) + '/' + str(strip.end_b.identifier)
                                for strip in self.runways),
        }

    def __repr__(self):
        return f"Airport(identifier='{self.identifier}', runways={len(self.runways)})"


@dataclass
class Fix:
    """Named fix of the [FIXES] section."""

    identifier: str
    position: Position

    def to_dict(self) -> dict:
        return {
            'identifier': self.identifier,
            'lat': self.position.lat,
            'lon': self.position.lon,
        }


@dataclass
class Vor:
    """VOR beacon."""

    identifier: str
    frequency: str
    position: Position

    def to_dict(self) -> dict:
        return {
            'identifier': self.identifier,
            'frequency': self.frequency,
            'lat': self.position.lat,
            'lon': self.position.lon,
        }


@dataclass
class Ndb:
    """NDB beacon."""

    identifier: str
    frequency: str
    position: Position

    def to_dict(self) -> dict:
        return {
            'identifier': self.identifier,
            'frequency': self.frequency,
            'lat': self.position.lat,
            'lon': self.position.lon,
        }
