"""
EuroScope sector file reading library.

This package parses the sector (.sct) and supplementary (.ese) files used by
ATC radar clients into typed records, collecting the lines that fail to parse
instead of stopping at the first one.

The main public API includes:
- SctReader / EseReader: line oriented readers for both file formats
- Sector / Ese: the resulting models
- EuroScopeSource: loads a sector file and its ESE companion, directly or
  through a EuroScope profile
"""

from pathlib import Path
from typing import Union

from .config import ReaderConfig
from .models import Ese, ErrorKind, LineError, Sector, SectorError
from .parsers import EseReader, SctReader
from .sources import EuroScopeResult, EuroScopeSource


__version__ = '0.1.0'
__all__ = [
    'ReaderConfig',
    'SctReader',
    'EseReader',
    'Sector',
    'Ese',
    'ErrorKind',
    'SectorError',
    'LineError',
    'EuroScopeSource',
    'EuroScopeResult',
    'read_sector',
    'read_ese',
]


def read_sector(path: Union[str, Path]) -> Sector:
    """Read a sector file with the default configuration."""
    return SctReader().read_path(path)


def read_ese(path: Union[str, Path]) -> Ese:
    """Read an ESE file with the default configuration."""
    return EseReader().read_path(path)
