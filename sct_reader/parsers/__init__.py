from .base import SectionReader, LineKind, classify, strip_comment
from .session import ParseSession
from .grouping import GroupCollection
from .sector_info import SectorInfoParser
from .sector_lines import PartialSector, BeaconType, LineGroupType
from .ese_lines import PartialEse
from .sct import SctReader, SctSection
from .ese import EseReader, EseSection

__all__ = [
    'SectionReader',
    'LineKind',
    'classify',
    'strip_comment',
    'ParseSession',
    'GroupCollection',
    'SectorInfoParser',
    'PartialSector',
    'BeaconType',
    'LineGroupType',
    'PartialEse',
    'SctReader',
    'SctSection',
    'EseReader',
    'EseSection',
]
