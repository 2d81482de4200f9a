"""
Section based reading shared by the sector and ESE readers.

Both formats are line oriented: ``;`` starts a comment, ``[NAME]`` switches
section, ``OFFSET`` and ``#define`` directives apply anywhere, and every
other line belongs to the current section.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

from ..config import ReaderConfig
from ..models.errors import ErrorKind, LineError, SectorError

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=Enum)
M = TypeVar('M')

LineHandler = Callable[[str], None]


class LineKind(Enum):
    """Classification of a comment-stripped, non-blank line."""
    HEADER = "header"
    OFFSET = "offset"
    DEFINE = "define"
    CONTENT = "content"


def strip_comment(line: str) -> str:
    """
    Remove a ``;`` comment, ignoring semicolons inside double quotes.

    A quote without a closing quote after it does not open a quoted part.
    """
    in_quotes = False
    for index, char in enumerate(line):
        if char == '"':
            if in_quotes or '"' in line[index + 1:]:
                in_quotes = not in_quotes
        elif char == ';' and not in_quotes:
            return line[:index]
    return line


def classify(line: str) -> LineKind:
    if line.startswith('['):
        return LineKind.HEADER
    keyword = line.split(None, 1)[0]
    if keyword == 'OFFSET':
        return LineKind.OFFSET
    if keyword.lower() == '#define':
        return LineKind.DEFINE
    return LineKind.CONTENT


class SectionReader(ABC, Generic[S, M]):
    """
    Base class for the file readers.

    Subclasses provide the section headers they know, a fresh builder per
    read and the handler of each section. ``read`` never fails because of a
    line: failing lines are collected as ``LineError`` records on the result.
    """

    section_type: Type[S]
    # Section active before the first header, None to ignore such lines
    default_section: Optional[S] = None

    def __init__(self, config: Optional[ReaderConfig] = None):
        """
        Args:
            config: Reader options, defaults from the environment
        """
        self.config = config or ReaderConfig()

    @abstractmethod
    def _create_builder(self) -> Any:
        """Return the object accumulating the records of one read."""
        pass

    @abstractmethod
    def _handlers(self, builder: Any) -> Dict[S, LineHandler]:
        """Map each section with content to the handler of its lines."""
        pass

    def parse_header(self, line: str) -> S:
        """
        Match a ``[HEADER]`` line against the known sections.

        Raises:
            SectorError: INVALID_FILE_SECTION for an unknown header
        """
        header = ' '.join(line.upper().split())
        try:
            return self.section_type(header)
        except ValueError:
            raise SectorError(ErrorKind.INVALID_FILE_SECTION, line) from None

    def read(self, lines: Iterable[str]) -> M:
        """
        Parse the given lines.

        Args:
            lines: Text lines, with or without line endings

        Returns:
            The finished model, its ``errors`` holding the failed lines
        """
        builder = self._create_builder()
        handlers = self._handlers(builder)
        session = builder.session
        errors: List[LineError] = []
        section: Optional[S] = self.default_section

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip('\r\n')
            if line.lstrip().startswith(';'):
                continue
            line = strip_comment(line).strip()
            if not line:
                continue

            try:
                kind = classify(line)
                if kind == LineKind.HEADER:
                    section = self.parse_header(line)
                    logger.debug(f"Line {line_number}: entering section {section.value}")
                elif kind == LineKind.OFFSET:
                    session.parse_offset(line)
                elif kind == LineKind.DEFINE:
                    session.define_colour(line)
                elif section is None:
                    logger.debug(f"Line {line_number}: ignoring content before any section")
                else:
                    handler = handlers.get(section)
                    if handler is not None:
                        handler(line)
            except SectorError as e:
                logger.debug(f"Line {line_number}: {e}")
                errors.append(LineError(line_number, line, e.kind))

        model = builder.finish()
        model.errors = errors
        logger.info(f"Read {self.__class__.__name__}: {len(errors)} line errors")
        return model

    def read_path(self, path: Union[str, Path]) -> M:
        """
        Parse a file.

        Raises:
            SectorError: IO_ERROR if the file cannot be opened or read
        """
        path = Path(path)
        logger.info(f"Reading {path}")
        try:
            with open(path, 'r', encoding=self.config.encoding, errors='replace') as f:
                return self.read(f)
        except OSError as e:
            raise SectorError(ErrorKind.IO_ERROR, str(e)) from e

    def read_text(self, text: str) -> M:
        """Parse the content of a file held in memory."""
        return self.read(text.splitlines())
