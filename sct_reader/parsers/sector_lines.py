"""
Line parsers for the sections of a sector (.sct) file.

``PartialSector`` accumulates the records of one file. Each ``parse_*``
method takes one comment-stripped line and either stores a complete record or
raises ``SectorError``; a failing line never leaves a partial record behind.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..config import ReaderConfig
from ..models.errors import ErrorKind, SectorError, reraise_as
from ..models.line import Label, LabelGroup, LineGroup, Region, RegionGroup
from ..models.position import Heading, Position
from ..models.sector import Sector
from ..models.waypoint import (
    AirspaceClass,
    Airport,
    Fix,
    Ndb,
    RunwayEnd,
    RunwayIdentifier,
    RunwayStrip,
    Vor,
)
from .grouping import GroupCollection
from .sector_info import SectorInfoParser
from .session import ParseSession

logger = logging.getLogger(__name__)


class BeaconType(Enum):
    VOR = "vor"
    NDB = "ndb"


class LineGroupType(Enum):
    """Kinds of whitespace separated segment sections."""
    ARTCC = "artcc"
    ARTCC_HIGH = "artcc_high"
    ARTCC_LOW = "artcc_low"
    LOW_AIRWAY = "low_airway"
    HIGH_AIRWAY = "high_airway"
    SID = "sid"
    STAR = "star"
    GEO = "geo"


class PartialSector:
    """Records of a sector file being read."""

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.session = ParseSession()
        self.sector_info = SectorInfoParser(self.session)
        self.region_groups: List[RegionGroup] = []
        self.label_groups: List[LabelGroup] = [LabelGroup(self.config.default_label_group)]
        self.current_region_name = self.config.default_region_name

        self.line_groups = {
            LineGroupType.ARTCC: GroupCollection([], ErrorKind.INVALID_ARTCC_ENTRY),
            LineGroupType.ARTCC_HIGH: GroupCollection([], ErrorKind.INVALID_ARTCC_ENTRY),
            LineGroupType.ARTCC_LOW: GroupCollection([], ErrorKind.INVALID_ARTCC_ENTRY),
            LineGroupType.LOW_AIRWAY: GroupCollection([], ErrorKind.INVALID_ARTCC_ENTRY),
            LineGroupType.HIGH_AIRWAY: GroupCollection([], ErrorKind.INVALID_ARTCC_ENTRY),
            LineGroupType.SID: GroupCollection([], ErrorKind.INVALID_SID_STAR_ENTRY),
            LineGroupType.STAR: GroupCollection([], ErrorKind.INVALID_SID_STAR_ENTRY),
            LineGroupType.GEO: GroupCollection([], ErrorKind.INVALID_GEO_ENTRY),
        }

    def groups(self, group_type: LineGroupType) -> List[LineGroup]:
        return self.line_groups[group_type].groups

    # [INFO]

    def parse_sector_info_line(self, value: str) -> None:
        self.sector_info.parse_line(value)

    # [AIRPORT]

    def parse_airport_line(self, value: str) -> None:
        """``<id> <tower freq> <lat> <lon> <airspace class>``"""
        sections = value.split()
        if len(sections) < 5:
            raise SectorError(ErrorKind.INVALID_WAYPOINT, value)
        identifier, tower_frequency, lat, lon, airspace = sections[:5]
        with reraise_as(ErrorKind.INVALID_WAYPOINT):
            position = self.session.position(lat, lon).validate()
        airspace_class = AirspaceClass.from_str(airspace)

        self.session.airports.append(Airport(
            identifier=identifier,
            position=position,
            tower_frequency=tower_frequency,
            airspace_class=airspace_class,
        ))

    # [RUNWAY]

    def parse_runway_line(self, value: str) -> None:
        """``<rwy a> <rwy b> <hdg a> <hdg b> <lat a> <lon a> <lat b> <lon b> <airport>``"""
        sections = value.split()
        if len(sections) < 9:
            raise SectorError(ErrorKind.INVALID_RUNWAY, value)

        with reraise_as(ErrorKind.INVALID_RUNWAY):
            ident_a = RunwayIdentifier.parse(sections[0])
            ident_b = RunwayIdentifier.parse(sections[1])
            heading_a = Heading.new(self._float(sections[2], ErrorKind.INVALID_RUNWAY))
            heading_b = Heading.new(self._float(sections[3], ErrorKind.INVALID_RUNWAY))
            pos_a = self.session.position(sections[4], sections[5]).validate()
            pos_b = self.session.position(sections[6], sections[7]).validate()

        airport_id = sections[8]
        airport = next((a for a in self.session.airports if a.identifier == airport_id), None)
        if airport is None:
            raise SectorError(ErrorKind.INVALID_RUNWAY, f"unknown airport {airport_id}")

        end_a = RunwayEnd(
            number=ident_a.number,
            modifier=ident_a.modifier,
            threshold=pos_a,
            opposite_threshold=pos_b,
            magnetic_heading=heading_a,
        )
        end_b = RunwayEnd(
            number=ident_b.number,
            modifier=ident_b.modifier,
            threshold=pos_b,
            opposite_threshold=pos_a,
            magnetic_heading=heading_b,
        )
        if end_a.number > end_b.number:
            end_a, end_b = end_b, end_a

        airport.runways.append(RunwayStrip(end_a, end_b))

    # [VOR] / [NDB]

    def parse_vor_or_ndb_line(self, value: str, beacon_type: BeaconType) -> None:
        """``<id> <frequency> <lat> <lon>``"""
        sections = value.split()
        if len(sections) < 4:
            raise SectorError(ErrorKind.INVALID_VOR_OR_NDB, value)
        identifier, frequency, lat, lon = sections[:4]
        with reraise_as(ErrorKind.INVALID_VOR_OR_NDB):
            position = self.session.position(lat, lon).validate()

        if beacon_type == BeaconType.NDB:
            self.session.ndbs.append(Ndb(identifier, frequency, position))
        else:
            self.session.vors.append(Vor(identifier, frequency, position))

    # [FIXES]

    def parse_fixes_line(self, value: str) -> None:
        """``<id> <lat> <lon>``"""
        sections = value.split()
        if len(sections) < 3:
            raise SectorError(ErrorKind.INVALID_FIX, value)
        identifier, lat, lon = sections[:3]
        with reraise_as(ErrorKind.INVALID_FIX):
            position = self.session.position(lat, lon).validate()
        self.session.fixes.append(Fix(identifier, position))

    # [ARTCC], [ARTCC HIGH], [ARTCC LOW], [LOW AIRWAY], [HIGH AIRWAY], [GEO]

    def parse_line_group_line(self, value: str, group_type: LineGroupType) -> None:
        """
        ``[name...] <lat a> <lon a> <lat b> <lon b> [colour]``

        The last token is taken as a colour when it resolves to one.
        Anything before the four endpoint tokens is the group name.
        """
        collection = self.line_groups[group_type]
        sections = value.split()

        colour = self.session.resolve_colour(sections[-1]) if sections else None
        if colour is not None:
            sections.pop()

        if len(sections) < 4:
            raise SectorError(collection.error_kind, value)
        name = ' '.join(sections[:-4]) if len(sections) > 4 else None

        collection.add_line(self.session, name, sections[-4:], colour)

    # [SID] / [STAR]

    def parse_sid_star_line(self, value: str, group_type: LineGroupType) -> None:
        """
        ``[name...] <lat a> <lon a> <lat b> <lon b> [colour]``

        Unlike the other segment sections a colour is only looked for when
        the line has more than four tokens, so a line is a continuation only
        when exactly four tokens remain.
        """
        collection = self.line_groups[group_type]
        sections = value.split()
        if len(sections) < 4:
            raise SectorError(ErrorKind.INVALID_SID_STAR_ENTRY, value)

        colour = None
        first_coord = 0
        if len(sections) > 4:
            colour = self.session.resolve_colour(sections[-1])
            first_coord = len(sections) - (5 if colour is not None else 4)

        name = ' '.join(sections[:first_coord]) if first_coord > 0 else None
        collection.add_line(self.session, name, sections[first_coord:first_coord + 4], colour)

    # [REGIONS]

    def parse_region_line(self, value: str) -> None:
        """
        ``REGIONNAME <name...>`` sets the name used by following lines,
        ``<colour> <lat> <lon>`` starts a region, and any other line adds its
        last two tokens as a vertex of the last region.
        """
        sections = value.split()
        if len(sections) < 2:
            raise SectorError(ErrorKind.INVALID_REGION, value)

        if sections[0] == 'REGIONNAME':
            self.current_region_name = ' '.join(sections[1:])
            return

        if len(sections) == 3:
            colour = self.session.resolve_colour(sections[0])
            if colour is None:
                raise SectorError(ErrorKind.INVALID_REGION, f"unknown colour {sections[0]}")
            vertex = self._region_vertex(sections[1], sections[2])
            group = self._find_region_group(self.current_region_name)
            if group is None:
                group = RegionGroup(self.current_region_name)
                self.region_groups.append(group)
            group.regions.append(Region(colour, [vertex]))
            return

        vertex = self._region_vertex(sections[-2], sections[-1])
        group = self._find_region_group(self.current_region_name)
        if group is None or not group.regions:
            raise SectorError(ErrorKind.INVALID_REGION, f"no region started for '{self.current_region_name}'")
        group.regions[-1].vertices.append(vertex)

    def _find_region_group(self, name: str) -> Optional[RegionGroup]:
        for group in self.region_groups:
            if group.name == name:
                return group
        return None

    def _region_vertex(self, lat: str, lon: str) -> Position:
        position = self.session.resolve_endpoint(lat, lon)
        if position is None:
            raise SectorError(ErrorKind.INVALID_REGION, f"{lat} {lon}")
        with reraise_as(ErrorKind.INVALID_REGION):
            return position.validate()

    # [LABELS]

    def parse_label_line(self, value: str) -> None:
        """``"<text...>" <lat> <lon> <colour>``"""
        sections = value.split()
        if len(sections) < 4:
            raise SectorError(ErrorKind.INVALID_LABEL, value)
        colour = self.session.resolve_colour(sections[-1])
        if colour is None:
            raise SectorError(ErrorKind.INVALID_LABEL, f"unknown colour {sections[-1]}")
        with reraise_as(ErrorKind.INVALID_LABEL):
            position = self.session.position(sections[-3], sections[-2]).validate()
        name = ' '.join(sections[:-3]).strip('"')
        self.label_groups[-1].labels.append(Label(name, position, colour))

    @staticmethod
    def _float(value: str, kind: ErrorKind) -> float:
        try:
            return float(value)
        except ValueError:
            raise SectorError(kind, value) from None

    def finish(self) -> Sector:
        """Hand the accumulated records over to a Sector."""
        return Sector(
            colours=self.session.colours,
            sector_info=self.sector_info.info,
            airports=self.session.airports,
            vors=self.session.vors,
            ndbs=self.session.ndbs,
            fixes=self.session.fixes,
            artcc_entries=self.groups(LineGroupType.ARTCC),
            artcc_high_entries=self.groups(LineGroupType.ARTCC_HIGH),
            artcc_low_entries=self.groups(LineGroupType.ARTCC_LOW),
            low_airways=self.groups(LineGroupType.LOW_AIRWAY),
            high_airways=self.groups(LineGroupType.HIGH_AIRWAY),
            sid_entries=self.groups(LineGroupType.SID),
            star_entries=self.groups(LineGroupType.STAR),
            geo_entries=self.groups(LineGroupType.GEO),
            region_groups=self.region_groups,
            label_groups=self.label_groups,
        )
