"""
Line parsers for the colon separated records of an ESE file.
"""

import logging
import re
from typing import List, Optional

from ..config import MAX_VISIBILITY_CENTRES, ReaderConfig
from ..models.errors import ErrorKind, SectorError, reraise_as
from ..models.ese import (
    AtcPosition,
    Ese,
    EseAirport,
    FreeText,
    FreeTextGroup,
    Procedure,
    ProcedureType,
)
from ..models.position import Position
from ..models.waypoint import RunwayIdentifier
from .session import ParseSession

logger = logging.getLogger(__name__)

ROUTE_SEPARATOR = re.compile(r'[\s:]+')

# [POSITIONS] field indexes
POS_NAME = 0
POS_CALLSIGN = 1
POS_FREQUENCY = 2
POS_SHORT_ID = 3
POS_MIDDLE = 4
POS_PREFIX = 5
POS_SUFFIX = 6
POS_START_SQUAWK = 9
POS_END_SQUAWK = 10
POS_FIRST_VIS_CENTRE = 11


class PartialEse:
    """Records of an ESE file being read."""

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.session = ParseSession()
        self.free_text: List[FreeTextGroup] = []
        self.sids_stars: List[EseAirport] = []
        self.atc_positions: List[AtcPosition] = []

    # [FREETEXT]

    def parse_freetext_line(self, value: str) -> None:
        """``<lat>:<lon>:<group>:<text>``, an empty group goes to the default group."""
        sections = value.split(':', 3)
        if len(sections) < 4:
            raise SectorError(ErrorKind.INVALID_FREETEXT, value)
        lat, lon, group_name, text = sections
        with reraise_as(ErrorKind.INVALID_FREETEXT):
            position = self.session.position(lat, lon).validate()
        if not group_name:
            group_name = self.config.default_freetext_group

        group = next((g for g in self.free_text if g.name == group_name), None)
        if group is None:
            group = FreeTextGroup(group_name)
            self.free_text.append(group)
        group.entries.append(FreeText(position, text))

    # [SIDSSTARS]

    def parse_procedure_line(self, value: str) -> None:
        """``SID|STAR:<airport>:<runway>:<name>:<route...>``"""
        sections = value.split(':')
        if len(sections) < 4:
            raise SectorError(ErrorKind.INVALID_SID_STAR_ENTRY, value)

        try:
            proc_type = ProcedureType(sections[0].strip().upper())
        except ValueError:
            raise SectorError(ErrorKind.INVALID_SID_STAR_ENTRY, f"unknown procedure type {sections[0]}") from None

        airport_id = sections[1].strip()
        if len(airport_id) < 2:
            raise SectorError(ErrorKind.INVALID_SID_STAR_ENTRY, f"airport '{airport_id}'")

        with reraise_as(ErrorKind.INVALID_SID_STAR_ENTRY):
            runway = RunwayIdentifier.parse(sections[2])

        identifier = sections[3].strip()
        if not identifier:
            raise SectorError(ErrorKind.INVALID_SID_STAR_ENTRY, "missing procedure name")

        route = [wpt for wpt in ROUTE_SEPARATOR.split(':'.join(sections[4:])) if wpt]

        airport = next((a for a in self.sids_stars if a.identifier == airport_id), None)
        if airport is None:
            airport = EseAirport(airport_id)
            self.sids_stars.append(airport)
        airport.add_procedure(runway, Procedure(proc_type, identifier, route))

    # [POSITIONS]

    def parse_position_line(self, value: str) -> None:
        """
        ``<name>:<callsign>:<freq>:<id>:<middle>:<prefix>:<suffix>:-:-:<start sq>:<end sq>:<lat>:<lon>...``

        The full identifier joins prefix, middle and suffix with ``_``,
        leaving out empty parts. Squawks and visibility centres are optional.
        """
        sections = [section.strip() for section in value.split(':')]
        if len(sections) <= POS_SUFFIX:
            raise SectorError(ErrorKind.INVALID_ATC_POSITION, value)

        name = sections[POS_NAME]
        callsign = sections[POS_CALLSIGN]
        frequency = sections[POS_FREQUENCY]
        short_identifier = sections[POS_SHORT_ID]
        if not (name and callsign and frequency and short_identifier):
            raise SectorError(ErrorKind.INVALID_ATC_POSITION, "missing required field")
        if '.' not in frequency:
            raise SectorError(ErrorKind.INVALID_ATC_POSITION, f"frequency {frequency}")

        parts = [sections[POS_PREFIX], sections[POS_MIDDLE], sections[POS_SUFFIX]]
        full_identifier = '_'.join(part for part in parts if part and part != '-')

        self.atc_positions.append(AtcPosition(
            name=name,
            callsign=callsign,
            frequency=frequency,
            short_identifier=short_identifier,
            full_identifier=full_identifier,
            start_squawk=self._squawk(sections, POS_START_SQUAWK),
            end_squawk=self._squawk(sections, POS_END_SQUAWK),
            visibility_centres=self._visibility_centres(sections[POS_FIRST_VIS_CENTRE:]),
        ))

    @staticmethod
    def _squawk(sections: List[str], index: int) -> Optional[int]:
        if index >= len(sections):
            return None
        try:
            return int(sections[index])
        except ValueError:
            return None

    def _visibility_centres(self, sections: List[str]) -> List[Position]:
        centres = []
        for index in range(0, len(sections) - 1, 2):
            if len(centres) == MAX_VISIBILITY_CENTRES:
                break
            try:
                centres.append(self.session.position(sections[index], sections[index + 1]).validate())
            except SectorError as e:
                logger.debug(f"Stopping visibility centres at '{sections[index]}:{sections[index + 1]}': {e}")
                break
        return centres

    def finish(self) -> Ese:
        return Ese(
            colours=self.session.colours,
            free_text=self.free_text,
            sids_stars=self.sids_stars,
            atc_positions=self.atc_positions,
        )
