"""
Tests for the [INFO] section.
"""

import pytest
from sct_reader.models.errors import ErrorKind, SectorError
from sct_reader.parsers.sector_info import SectorInfoParser
from sct_reader.parsers.session import ParseSession

INFO_LINES = [
    'London Sector',
    'LON_CTR',
    'EGLL',
    'N051.28.39.000',
    'W000.27.41.000',
    '60',
    '38.5',
    '-0.5',
    '1',
]


@pytest.fixture
def parser():
    return SectorInfoParser(ParseSession())


class TestSectorInfo:

    def test_nine_lines(self, parser):
        for line in INFO_LINES:
            parser.parse_line(line)

        info = parser.info
        assert info.name == 'London Sector'
        assert info.default_callsign == 'LON_CTR'
        assert info.default_airport == 'EGLL'
        assert info.centre_lat == pytest.approx(51.4775)
        assert info.centre_lon == pytest.approx(-0.461389, abs=1e-6)
        assert info.nm_per_deg_lat == 60
        assert info.nm_per_deg_lon == 38.5
        assert info.magnetic_variation == -0.5
        assert info.sector_scale == 1

    def test_tenth_line_fails(self, parser):
        """Test that a tenth line fails and leaves the first nine intact."""
        for line in INFO_LINES:
            parser.parse_line(line)

        with pytest.raises(SectorError) as exc_info:
            parser.parse_line('extra')
        assert exc_info.value.kind == ErrorKind.SECTOR_INFO_ERROR
        assert parser.info.name == 'London Sector'
        assert parser.info.sector_scale == 1

    @pytest.mark.parametrize('position', [3, 4, 5, 6, 7, 8])
    def test_bad_number(self, parser, position):
        for line in INFO_LINES[:position]:
            parser.parse_line(line)
        with pytest.raises(SectorError) as exc_info:
            parser.parse_line('bogus')
        assert exc_info.value.kind == ErrorKind.SECTOR_INFO_ERROR

    def test_bad_line_still_counts(self, parser):
        """Test that a failing line keeps its position, so later fields stay aligned."""
        for line in INFO_LINES[:5]:
            parser.parse_line(line)
        with pytest.raises(SectorError):
            parser.parse_line('bogus')
        parser.parse_line('38.5')
        assert parser.info.nm_per_deg_lat is None
        assert parser.info.nm_per_deg_lon == 38.5

    def test_missing_section(self):
        assert SectorInfoParser(ParseSession()).info.name is None
