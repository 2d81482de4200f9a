"""
Positions and headings as found in sector files.

Coordinates are written either in the EuroScope degree-minute-second form
(``N051.28.39.000`` / ``W000.27.41.000``) or as plain decimal degrees.
Parsing produces a ``RawPosition`` which may be out of range; only
``RawPosition.validate`` produces the ``Position`` stored in records.
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple

from .errors import ErrorKind, SectorError

DMS_PATTERN = re.compile(
    r'^([NSEW])'                # Hemisphere
    r'(\d{1,3})\.'              # Degrees
    r'(\d{1,2})\.'              # Minutes
    r'(\d{1,2}(?:\.\d+)?)$',    # Seconds with optional fraction
    re.IGNORECASE
)
DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


def coord_from_es(value: str) -> float:
    """
    Parse a single coordinate token into signed decimal degrees.

    Args:
        value: Token such as ``N043.34.13.000`` or ``43.5702``

    Returns:
        Decimal degrees, negative for S and W

    Raises:
        SectorError: INVALID_COORDINATE if the token is malformed
    """
    token = value.strip()
    match = DMS_PATTERN.match(token)
    if match:
        hemisphere, degrees, minutes, seconds = match.groups()
        minutes = int(minutes)
        seconds = float(seconds)
        if minutes >= 60 or seconds >= 60:
            raise SectorError(ErrorKind.INVALID_COORDINATE, value)
        decimal = int(degrees) + minutes / 60 + seconds / 3600
        if hemisphere.upper() in ('S', 'W'):
            decimal = -decimal
        return decimal
    if DECIMAL_PATTERN.match(token):
        return float(token)
    raise SectorError(ErrorKind.INVALID_COORDINATE, value)


def coord_to_es(value: float, is_longitude: bool) -> str:
    """Format decimal degrees as a EuroScope ``HDDD.MM.SS.sss`` token."""
    if is_longitude:
        hemisphere = 'E' if value >= 0 else 'W'
    else:
        hemisphere = 'N' if value >= 0 else 'S'
    total_ms = int(round(abs(value) * 3600 * 1000))
    degrees, rest = divmod(total_ms, 3600 * 1000)
    minutes, rest = divmod(rest, 60 * 1000)
    seconds, millis = divmod(rest, 1000)
    return f"{hemisphere}{degrees:03d}.{minutes:02d}.{seconds:02d}.{millis:03d}"


@dataclass(frozen=True)
class Position:
    """
    A validated position.

    - Latitude: -90 to +90 degrees (negative for South)
    - Longitude: -180 to +180 degrees (negative for West)
    """

    lat: float
    lon: float

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise SectorError(ErrorKind.INVALID_POSITION, f"({self.lat}, {self.lon})")
        if not -90 <= self.lat <= 90:
            raise SectorError(ErrorKind.INVALID_POSITION, f"latitude {self.lat}")
        if not -180 <= self.lon <= 180:
            raise SectorError(ErrorKind.INVALID_POSITION, f"longitude {self.lon}")

    def to_es(self) -> Tuple[str, str]:
        """Return the (latitude, longitude) tokens in EuroScope notation."""
        return coord_to_es(self.lat, False), coord_to_es(self.lon, True)

    def __str__(self) -> str:
        return f"({self.lat:.6f}, {self.lon:.6f})"


@dataclass(frozen=True)
class RawPosition:
    """A parsed position that has not been range checked yet."""

    lat: float
    lon: float

    @classmethod
    def from_es(cls, lat: str, lon: str) -> 'RawPosition':
        """Parse a latitude and a longitude token."""
        return cls(coord_from_es(lat), coord_from_es(lon))

    def offset_by(self, x_offset: float, y_offset: float) -> 'RawPosition':
        """Shift by a longitude (x) and latitude (y) delta."""
        return RawPosition(self.lat + y_offset, self.lon + x_offset)

    def validate(self) -> Position:
        """
        Range check this position.

        Raises:
            SectorError: INVALID_POSITION when out of range or not finite
        """
        return Position(self.lat, self.lon)


@dataclass(frozen=True)
class Heading:
    """A magnetic heading in degrees, normalised into [0, 360)."""

    degrees: float

    @classmethod
    def new(cls, value: float) -> 'Heading':
        """
        Create a heading, wrapping values outside [0, 360).

        Raises:
            SectorError: INVALID_HEADING for non-finite input
        """
        if not math.isfinite(value):
            raise SectorError(ErrorKind.INVALID_HEADING, str(value))
        return cls(value % 360)

    def __float__(self) -> float:
        return self.degrees
