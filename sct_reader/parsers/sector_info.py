from typing import Callable, Optional

from ..config import SECTOR_INFO_LINES
from ..models.errors import ErrorKind, SectorError
from ..models.position import coord_from_es
from ..models.sector import SectorInfo
from .session import ParseSession


class SectorInfoParser:
    """
    Reads the [INFO] section, one field per line in a fixed order:

    1. sector name
    2. default callsign
    3. default airport
    4. centre latitude
    5. centre longitude
    6. nautical miles per degree of latitude
    7. nautical miles per degree of longitude
    8. magnetic variation
    9. sector scale
    """

    def __init__(self, session: ParseSession):
        self.session = session
        self.info = SectorInfo()
        self.current_line = 0

    def parse_line(self, value: str) -> None:
        self.current_line += 1
        x_offset, y_offset = self.session.offset

        if self.current_line == 1:
            self.info.name = value
        elif self.current_line == 2:
            self.info.default_callsign = value
        elif self.current_line == 3:
            self.info.default_airport = value
        elif self.current_line == 4:
            self.info.centre_lat = self._number(value, coord_from_es) + y_offset
        elif self.current_line == 5:
            self.info.centre_lon = self._number(value, coord_from_es) + x_offset
        elif self.current_line == 6:
            self.info.nm_per_deg_lat = self._number(value)
        elif self.current_line == 7:
            self.info.nm_per_deg_lon = self._number(value)
        elif self.current_line == 8:
            self.info.magnetic_variation = self._number(value)
        elif self.current_line == 9:
            self.info.sector_scale = self._number(value)
        else:
            raise SectorError(
                ErrorKind.SECTOR_INFO_ERROR,
                f"more than {SECTOR_INFO_LINES} lines in [INFO]"
            )

    @staticmethod
    def _number(value: str, convert: Optional[Callable[[str], float]] = None) -> float:
        try:
            if convert is not None:
                return convert(value)
            return float(value)
        except (SectorError, ValueError):
            raise SectorError(ErrorKind.SECTOR_INFO_ERROR, value) from None
