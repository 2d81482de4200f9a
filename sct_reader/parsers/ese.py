from enum import Enum
from typing import Dict

from ..models.ese import Ese
from .base import LineHandler, SectionReader
from .ese_lines import PartialEse


class EseSection(Enum):
    FREETEXT = "[FREETEXT]"
    SIDSSTARS = "[SIDSSTARS]"
    POSITIONS = "[POSITIONS]"
    AIRSPACE = "[AIRSPACE]"
    RADAR = "[RADAR]"
    GROUND = "[GROUND]"


class EseReader(SectionReader[EseSection, Ese]):
    """
    Reader for supplementary (.ese) files.

    [AIRSPACE], [RADAR] and [GROUND] are recognised but their content is
    skipped. Lines before the first header are read as [FREETEXT].
    """

    section_type = EseSection
    default_section = EseSection.FREETEXT

    def _create_builder(self) -> PartialEse:
        return PartialEse(self.config)

    def _handlers(self, builder: PartialEse) -> Dict[EseSection, LineHandler]:
        return {
            EseSection.FREETEXT: builder.parse_freetext_line,
            EseSection.SIDSSTARS: builder.parse_procedure_line,
            EseSection.POSITIONS: builder.parse_position_line,
        }
