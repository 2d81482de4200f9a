"""
State shared by every line parser during one read.

A session owns the colour table, the coordinate offset and the entities
already parsed, so that later lines can refer to earlier ones. Each read
creates its own session; nothing here is module level state.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..models.colour import Colour
from ..models.errors import ErrorKind, SectorError, reraise_as
from ..models.position import RawPosition
from ..models.waypoint import Airport, Fix, Ndb, Vor

logger = logging.getLogger(__name__)


class ParseSession:
    """Colour table, offset and entity lookup for one file."""

    def __init__(self):
        self.colours: Dict[str, Colour] = {}
        self.fixes: List[Fix] = []
        self.vors: List[Vor] = []
        self.ndbs: List[Ndb] = []
        self.airports: List[Airport] = []
        self._x_offset = 0.0
        self._y_offset = 0.0

    # Offset

    @property
    def offset(self) -> Tuple[float, float]:
        """The active (x, y) offset: longitude and latitude deltas."""
        return self._x_offset, self._y_offset

    def set_offset(self, x_offset: float, y_offset: float) -> None:
        self._x_offset = x_offset
        self._y_offset = y_offset

    def position(self, lat: str, lon: str) -> RawPosition:
        """
        Parse a coordinate pair and apply the active offset.

        Raises:
            SectorError: INVALID_COORDINATE if either token is malformed
        """
        return RawPosition.from_es(lat, lon).offset_by(self._x_offset, self._y_offset)

    def parse_offset(self, line: str) -> None:
        """
        Handle an ``OFFSET`` directive.

        ``OFFSET <dy> <dx>`` sets the deltas directly, ``OFFSET <lat1> <lon1>
        <lat2> <lon2>`` sets them to the vector from the first point to the
        second.
        """
        sections = line.split()
        if len(sections) == 3:
            try:
                y_offset = float(sections[1])
                x_offset = float(sections[2])
            except ValueError:
                raise SectorError(ErrorKind.INVALID_OFFSET, line) from None
        elif len(sections) == 5:
            with reraise_as(ErrorKind.INVALID_OFFSET):
                pos_1 = self.position(sections[1], sections[2])
                pos_2 = self.position(sections[3], sections[4])
            x_offset = pos_2.lon - pos_1.lon
            y_offset = pos_2.lat - pos_1.lat
        else:
            raise SectorError(ErrorKind.INVALID_OFFSET, line)

        self.set_offset(x_offset, y_offset)
        logger.debug(f"Offset set to x={x_offset} y={y_offset}")

    # Colours

    def define_colour(self, line: str) -> None:
        """
        Handle a ``#define <name> <value>`` directive.

        Raises:
            SectorError: INVALID_COLOUR_DEFINITION for a missing name or a bad value
        """
        sections = line.split()
        if len(sections) < 3:
            raise SectorError(ErrorKind.INVALID_COLOUR_DEFINITION, line)
        self.colours[sections[1].lower()] = Colour.parse(sections[2])

    def resolve_colour(self, token: str) -> Optional[Colour]:
        """
        Decode a literal colour, or look up a defined colour name.

        A token that parses as a literal is never looked up in the table.
        """
        try:
            return Colour.parse(token)
        except SectorError:
            return self.colours.get(token.lower())

    # Entities

    def find_entity_position(self, identifier: str) -> Optional[RawPosition]:
        """
        Position of an already parsed fix, VOR, NDB or airport.

        Searched in that order; the identifier match is case sensitive.
        """
        for entities in (self.fixes, self.vors, self.ndbs, self.airports):
            entity = next((e for e in entities if e.identifier == identifier), None)
            if entity is not None:
                return RawPosition(entity.position.lat, entity.position.lon)
        return None

    def resolve_endpoint(self, lat_or_identifier: str, lon_or_identifier: str) -> Optional[RawPosition]:
        """
        Turn a pair of tokens into a position.

        The pair is first parsed as coordinates (offset applied). Failing
        that, the first token is looked up as an entity identifier; named
        entities are returned without applying the offset again.

        Returns:
            The position, or None when neither way works
        """
        try:
            return self.position(lat_or_identifier, lon_or_identifier)
        except SectorError:
            pass
        return self.find_entity_position(lat_or_identifier)
