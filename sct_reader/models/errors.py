"""
Error kinds and error records for sector file parsing.

Parsing errors come in two tiers:
- per-line errors, raised by a line parser as ``SectorError`` and collected by
  the reader as ``LineError`` records without stopping the read
- file-level errors (I/O, missing metadata) which propagate to the caller
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class ErrorKind(Enum):
    """Closed set of parse failures. Values are human readable messages."""

    MISSING_METADATA = "Missing metadata"
    IO_ERROR = "Unable to read the source"
    INVALID_COLOUR_DEFINITION = "Invalid colour definition"
    INVALID_FILE_SECTION = "Invalid file section"
    INVALID_COORDINATE = "Invalid coordinate"
    SECTOR_INFO_ERROR = "Sector information error"
    INVALID_AIRSPACE_CLASS = "Invalid airspace class"
    INVALID_WAYPOINT = "Invalid waypoint"
    INVALID_POSITION = "Invalid position"
    INVALID_RUNWAY = "Invalid runway"
    INVALID_HEADING = "Invalid heading"
    INVALID_VOR_OR_NDB = "Invalid VOR or NDB"
    INVALID_FIX = "Invalid fix"
    INVALID_ARTCC_ENTRY = "Invalid ARTCC entry"
    INVALID_SID_STAR_ENTRY = "Invalid SID / STAR entry"
    INVALID_GEO_ENTRY = "Invalid geo entry"
    INVALID_REGION = "Invalid region"
    INVALID_LABEL = "Invalid label"
    INVALID_OFFSET = "Invalid offset"
    INVALID_FREETEXT = "Invalid freetext"
    INVALID_ATC_POSITION = "Invalid ATC position"

    def __str__(self) -> str:
        return self.value


class SectorError(Exception):
    """Exception raised when a line, a value or a file cannot be parsed."""

    def __init__(self, kind: ErrorKind, details: Optional[str] = None):
        """
        Initialize the error.

        Args:
            kind: What failed
            details: Optional description of the offending value
        """
        super().__init__(str(kind))
        self.kind = kind
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.kind.value}: {self.details}"
        return self.kind.value


@contextmanager
def reraise_as(kind: ErrorKind) -> Iterator[None]:
    """Re-raise any SectorError raised in the block as ``kind``, keeping the cause."""
    try:
        yield
    except SectorError as e:
        if e.kind is kind:
            raise
        raise SectorError(kind, str(e)) from e


@dataclass(frozen=True)
class LineError:
    """A line that could not be parsed."""

    line_number: int  # 1-based
    line: str
    kind: ErrorKind

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'line_number': self.line_number,
            'line': self.line,
            'kind': self.kind.name,
            'message': self.kind.value,
        }

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.kind.value} ({self.line!r})"
