"""
Data models for the sct_reader library.

Records produced by parsing sector (.sct) and supplementary (.ese) files:
positions, colours, navaids, airports and runways, line/region/label groups,
controller positions and procedures, and the error records collected while
reading.
"""

from .errors import ErrorKind, SectorError, LineError
from .position import Position, RawPosition, Heading, coord_from_es, coord_to_es
from .colour import Colour
from .waypoint import (
    AirspaceClass,
    RunwayModifier,
    RunwayIdentifier,
    RunwayEnd,
    RunwayStrip,
    Airport,
    Fix,
    Vor,
    Ndb,
)
from .line import ColouredLine, LineGroup, Region, RegionGroup, Label, LabelGroup
from .collection import QueryableCollection
from .sector import Sector, SectorInfo
from .ese import (
    Ese,
    EseAirport,
    FreeText,
    FreeTextGroup,
    Procedure,
    ProcedureType,
    AtcPosition,
)

__all__ = [
    # Errors
    'ErrorKind',
    'SectorError',
    'LineError',
    # Geometry
    'Position',
    'RawPosition',
    'Heading',
    'coord_from_es',
    'coord_to_es',
    'Colour',
    'ColouredLine',
    'LineGroup',
    'Region',
    'RegionGroup',
    'Label',
    'LabelGroup',
    # Waypoints
    'AirspaceClass',
    'RunwayModifier',
    'RunwayIdentifier',
    'RunwayEnd',
    'RunwayStrip',
    'Airport',
    'Fix',
    'Vor',
    'Ndb',
    # Files
    'Sector',
    'SectorInfo',
    'Ese',
    'EseAirport',
    'FreeText',
    'FreeTextGroup',
    'Procedure',
    'ProcedureType',
    'AtcPosition',
    'QueryableCollection',
]
