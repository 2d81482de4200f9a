from dataclasses import dataclass, field
from typing import List, Optional

from .colour import Colour
from .position import Position


@dataclass
class ColouredLine:
    """A line segment with an optional colour."""

    start: Position
    end: Position
    colour: Optional[Colour] = None


@dataclass
class LineGroup:
    """
    Named sequence of line segments.

    Used for ARTCC boundaries, airways, SID/STAR diagrams and GEO features.
    The name is the group identity and is case sensitive.
    """

    name: str
    lines: List[ColouredLine] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.lines

    def __repr__(self):
        return f"LineGroup(name='{self.name}', lines={len(self.lines)})"


@dataclass
class Region:
    """Filled polygon."""

    colour: Colour
    vertices: List[Position] = field(default_factory=list)


@dataclass
class RegionGroup:
    """Regions sharing a REGIONNAME."""

    name: str
    regions: List[Region] = field(default_factory=list)

    def __repr__(self):
        return f"RegionGroup(name='{self.name}', regions={len(self.regions)})"


@dataclass
class Label:
    """Text placed at a position."""

    name: str
    position: Position
    colour: Colour


@dataclass
class LabelGroup:
    name: str
    labels: List[Label] = field(default_factory=list)
