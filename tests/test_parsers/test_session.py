"""
Tests for the per-read parse session: offsets, colours and entity lookup.
"""

import pytest
from sct_reader.models.colour import Colour
from sct_reader.models.errors import ErrorKind, SectorError
from sct_reader.models.position import Position
from sct_reader.models.waypoint import AirspaceClass, Airport, Fix, Ndb, Vor
from sct_reader.parsers.session import ParseSession


@pytest.fixture
def session():
    return ParseSession()


class TestOffset:
    """Test the OFFSET directive."""

    def test_direct_form(self, session):
        """Test that the direct form takes dy first, then dx."""
        session.parse_offset('OFFSET 0.25 0.75')
        assert session.offset == (0.75, 0.25)

    def test_two_point_form_matches_direct_form(self, session):
        """Test that the vector between two points gives the same offset as the direct form."""
        session.parse_offset('OFFSET 10.0 20.0 10.5 20.5')
        two_point = session.offset

        direct = ParseSession()
        direct.parse_offset('OFFSET 0.5 0.5')

        assert two_point == (0.5, 0.5)
        assert two_point == direct.offset

    def test_offset_applies_to_positions(self, session):
        session.parse_offset('OFFSET 1 2')
        raw = session.position('10', '20')
        assert raw.lat == 11.0
        assert raw.lon == 22.0

    @pytest.mark.parametrize('line', ['OFFSET', 'OFFSET 1', 'OFFSET a b', 'OFFSET 1 2 3 4 5 6'])
    def test_invalid_offset(self, session, line):
        with pytest.raises(SectorError) as exc_info:
            session.parse_offset(line)
        assert exc_info.value.kind == ErrorKind.INVALID_OFFSET
        assert session.offset == (0.0, 0.0)


class TestColours:
    """Test colour definitions and resolution."""

    def test_define_and_resolve(self, session):
        session.define_colour('#define FOO 16711680')
        assert session.resolve_colour('FOO') == Colour(255, 0, 0)

    def test_lookup_is_case_insensitive(self, session):
        session.define_colour('#define Coast 255')
        assert session.resolve_colour('COAST') == Colour(0, 0, 255)
        assert session.resolve_colour('coast') == Colour(0, 0, 255)

    def test_literal_wins_over_table(self, session):
        """Test that a numeric token is decoded without a table lookup."""
        session.colours['255'] = Colour(1, 2, 3)
        assert session.resolve_colour('255') == Colour(0, 0, 255)

    def test_unknown_name(self, session):
        assert session.resolve_colour('NOPE') is None

    def test_lookup_before_definition(self, session):
        assert session.resolve_colour('FOO') is None
        session.define_colour('#define FOO 1')
        assert session.resolve_colour('FOO') == Colour(0, 0, 1)

    @pytest.mark.parametrize('line', ['#define FOO', '#define FOO red', '#define FOO 99999999'])
    def test_invalid_definition(self, session, line):
        with pytest.raises(SectorError) as exc_info:
            session.define_colour(line)
        assert exc_info.value.kind == ErrorKind.INVALID_COLOUR_DEFINITION
        assert 'foo' not in session.colours


class TestEntityResolution:
    """Test resolving endpoint tokens."""

    def test_coordinates_first(self, session):
        raw = session.resolve_endpoint('N051.00.00.000', 'E001.00.00.000')
        assert raw.lat == pytest.approx(51.0)
        assert raw.lon == pytest.approx(1.0)

    def test_identifier_lookup(self, session):
        session.vors.append(Vor('BIG', '115.100', Position(51.33, 0.03)))
        raw = session.resolve_endpoint('BIG', 'BIG')
        assert (raw.lat, raw.lon) == (51.33, 0.03)

    def test_identifier_lookup_ignores_offset(self, session):
        """Test that a named entity keeps the position it was stored with."""
        session.fixes.append(Fix('LAM', Position(51.6, 0.1)))
        session.set_offset(1.0, 1.0)
        raw = session.resolve_endpoint('LAM', 'LAM')
        assert (raw.lat, raw.lon) == (51.6, 0.1)

    def test_priority_order(self, session):
        """Test that fixes win over VORs, VORs over NDBs, NDBs over airports."""
        session.airports.append(Airport('DUP', Position(4.0, 4.0), '118.0', AirspaceClass.D))
        assert session.find_entity_position('DUP').lat == 4.0
        session.ndbs.append(Ndb('DUP', '300', Position(3.0, 3.0)))
        assert session.find_entity_position('DUP').lat == 3.0
        session.vors.append(Vor('DUP', '110.0', Position(2.0, 2.0)))
        assert session.find_entity_position('DUP').lat == 2.0
        session.fixes.append(Fix('DUP', Position(1.0, 1.0)))
        assert session.find_entity_position('DUP').lat == 1.0

    def test_first_definition_wins(self, session):
        session.fixes.append(Fix('DUP', Position(1.0, 1.0)))
        session.fixes.append(Fix('DUP', Position(2.0, 2.0)))
        session.vors.append(Vor('OTHER', '110.0', Position(3.0, 3.0)))
        assert session.find_entity_position('DUP').lat == 1.0
        assert session.find_entity_position('OTHER').lat == 3.0

    def test_identifier_is_case_sensitive(self, session):
        session.fixes.append(Fix('LAM', Position(51.6, 0.1)))
        assert session.resolve_endpoint('lam', 'lam') is None

    def test_unresolved(self, session):
        assert session.resolve_endpoint('NOPE', 'NOPE') is None
