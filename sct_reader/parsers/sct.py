from enum import Enum
from functools import partial
from typing import Dict

from ..models.sector import Sector
from .base import LineHandler, SectionReader
from .sector_lines import BeaconType, LineGroupType, PartialSector


class SctSection(Enum):
    INFO = "[INFO]"
    VOR = "[VOR]"
    NDB = "[NDB]"
    FIXES = "[FIXES]"
    AIRPORT = "[AIRPORT]"
    RUNWAY = "[RUNWAY]"
    SID = "[SID]"
    STAR = "[STAR]"
    ARTCC = "[ARTCC]"
    ARTCC_HIGH = "[ARTCC HIGH]"
    ARTCC_LOW = "[ARTCC LOW]"
    LOW_AIRWAY = "[LOW AIRWAY]"
    HIGH_AIRWAY = "[HIGH AIRWAY]"
    GEO = "[GEO]"
    REGIONS = "[REGIONS]"
    LABELS = "[LABELS]"


class SctReader(SectionReader[SctSection, Sector]):
    """
    Reader for sector (.sct / .sct2) files.

    Example:
        sector = SctReader().read_path('EGTT.sct')
        for group in sector.artcc_entries:
            print(group.name, len(group.lines))
        for error in sector.errors:
            print(error)
    """

    section_type = SctSection

    def _create_builder(self) -> PartialSector:
        return PartialSector(self.config)

    def _handlers(self, builder: PartialSector) -> Dict[SctSection, LineHandler]:
        return {
            SctSection.INFO: builder.parse_sector_info_line,
            SctSection.VOR: partial(builder.parse_vor_or_ndb_line, beacon_type=BeaconType.VOR),
            SctSection.NDB: partial(builder.parse_vor_or_ndb_line, beacon_type=BeaconType.NDB),
            SctSection.FIXES: builder.parse_fixes_line,
            SctSection.AIRPORT: builder.parse_airport_line,
            SctSection.RUNWAY: builder.parse_runway_line,
            SctSection.SID: partial(builder.parse_sid_star_line, group_type=LineGroupType.SID),
            SctSection.STAR: partial(builder.parse_sid_star_line, group_type=LineGroupType.STAR),
            SctSection.ARTCC: partial(builder.parse_line_group_line, group_type=LineGroupType.ARTCC),
            SctSection.ARTCC_HIGH: partial(builder.parse_line_group_line, group_type=LineGroupType.ARTCC_HIGH),
            SctSection.ARTCC_LOW: partial(builder.parse_line_group_line, group_type=LineGroupType.ARTCC_LOW),
            SctSection.LOW_AIRWAY: partial(builder.parse_line_group_line, group_type=LineGroupType.LOW_AIRWAY),
            SctSection.HIGH_AIRWAY: partial(builder.parse_line_group_line, group_type=LineGroupType.HIGH_AIRWAY),
            SctSection.GEO: partial(builder.parse_line_group_line, group_type=LineGroupType.GEO),
            SctSection.REGIONS: builder.parse_region_line,
            SctSection.LABELS: builder.parse_label_line,
        }
