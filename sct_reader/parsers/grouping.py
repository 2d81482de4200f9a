"""
Continuation grouping for line based sections.

A named line starts (or extends) the group with that name; an unnamed line
extends the group of the same kind that was started last.
"""

import logging
from typing import List, Optional, Sequence

from ..models.colour import Colour
from ..models.errors import ErrorKind, SectorError, reraise_as
from ..models.line import ColouredLine, LineGroup
from .session import ParseSession

logger = logging.getLogger(__name__)


class GroupCollection:
    """
    Ordered line groups of one kind.

    Groups are addressed by position in the list, the last one being the
    target of continuation lines.
    """

    def __init__(self, groups: List[LineGroup], error_kind: ErrorKind):
        """
        Args:
            groups: List the groups are stored in, extended in place
            error_kind: Error raised for an invalid line of this kind
        """
        self.groups = groups
        self.error_kind = error_kind

    def target(self, name: Optional[str]) -> LineGroup:
        """
        Group a line belongs to.

        Args:
            name: Group name for a named line, None for a continuation line

        Raises:
            SectorError: the collection's error kind for a continuation line
                when no group exists yet
        """
        if name is None:
            if not self.groups:
                raise SectorError(self.error_kind, "continuation line without a group")
            return self.groups[-1]

        for group in self.groups:
            if group.name == name:
                return group
        self.groups.append(LineGroup(name))
        return self.groups[-1]

    def build_line(
        self,
        session: ParseSession,
        endpoints: Sequence[str],
        colour: Optional[Colour],
    ) -> ColouredLine:
        """
        Resolve and validate the two endpoints of a segment.

        Args:
            endpoints: Four tokens, each pair a coordinate or an identifier
        """
        start = session.resolve_endpoint(endpoints[0], endpoints[1])
        end = session.resolve_endpoint(endpoints[2], endpoints[3])
        if start is None or end is None:
            raise SectorError(self.error_kind, "unresolved endpoint")
        with reraise_as(self.error_kind):
            return ColouredLine(start.validate(), end.validate(), colour)

    def add_line(
        self,
        session: ParseSession,
        name: Optional[str],
        endpoints: Sequence[str],
        colour: Optional[Colour] = None,
    ) -> LineGroup:
        """
        Add one segment, creating the named group if needed.

        A named line whose geometry fails still registers its group. A
        continuation line whose geometry fails raises.

        Returns:
            The group the line was added to
        """
        group = self.target(name)
        try:
            line = self.build_line(session, endpoints, colour)
        except SectorError:
            if name is None:
                raise
            logger.debug(f"Keeping group '{name}' without the segment {' '.join(endpoints)}")
            return group
        group.lines.append(line)
        return group
