"""
Tests for reading complete sector files.
"""

import pytest
from sct_reader.models.colour import Colour
from sct_reader.models.errors import ErrorKind, SectorError
from sct_reader.models.waypoint import AirspaceClass, RunwayIdentifier, RunwayModifier
from sct_reader.parsers import SctReader, SctSection


@pytest.fixture
def reader(reader_config):
    return SctReader(reader_config)


class TestSampleSector:
    """Test the content of the sample sector file."""

    def test_errors(self, sector):
        """Test that each bad line is reported once with its line number and kind."""
        assert [(e.line_number, e.kind) for e in sector.errors] == [
            (4, ErrorKind.INVALID_COLOUR_DEFINITION),
            (19, ErrorKind.INVALID_VOR_OR_NDB),
            (31, ErrorKind.INVALID_AIRSPACE_CLASS),
            (36, ErrorKind.INVALID_RUNWAY),
        ]
        assert sector.errors[0].line == '#define BadColour'

    def test_colours(self, sector):
        assert sector.colours == {
            'coast': Colour.from_packed(8421504),
            'red': Colour(255, 0, 0),
        }

    def test_sector_info(self, sector):
        info = sector.sector_info
        assert info.name == 'Sample Sector'
        assert info.default_callsign == 'SAMPLE_CTR'
        assert info.default_airport == 'EGLL'
        assert info.centre_lat == pytest.approx(51 + 28 / 60 + 39 / 3600)
        assert info.centre_lon == pytest.approx(-(27 / 60 + 41 / 3600))
        assert info.nm_per_deg_lat == 60
        assert info.nm_per_deg_lon == 39
        assert info.magnetic_variation == -1
        assert info.sector_scale == 1

    def test_navaids(self, sector):
        assert [v.identifier for v in sector.vors] == ['BIG', 'LAM']
        assert [n.identifier for n in sector.ndbs] == ['EPM']
        assert sector.ndbs[0].frequency == '316.000'
        assert [f.identifier for f in sector.fixes] == ['ABSAV', 'BRAIN']

    def test_airports(self, sector):
        assert [a.identifier for a in sector.airports] == ['EGLL', 'EGKK']
        heathrow = sector.get_airport('EGLL')
        assert heathrow.tower_frequency == '118.500'
        assert heathrow.airspace_class == AirspaceClass.D
        assert sector.get_airport('EGXX') is None

    def test_runways_ordered_by_number(self, sector):
        """Test that the lower numbered end comes first whatever the line order."""
        heathrow = sector.get_airport('EGLL')
        assert len(heathrow.runways) == 2
        strip = heathrow.runways[0]
        assert strip.end_a.identifier == RunwayIdentifier(9, RunwayModifier.LEFT)
        assert strip.end_b.identifier == RunwayIdentifier(27, RunwayModifier.RIGHT)
        assert strip.end_a.magnetic_heading.degrees == 91
        assert strip.end_a.threshold == strip.end_b.opposite_threshold
        assert heathrow.get_runway(RunwayIdentifier.parse('27L')) is heathrow.runways[1]

    def test_sid_groups(self, sector):
        """Test a named SID line followed by a continuation using a fix."""
        assert len(sector.sid_entries) == 1
        group = sector.sid_entries[0]
        assert group.name == 'EGLL BPK7F'
        assert len(group.lines) == 2
        assert group.lines[0].colour == Colour(255, 0, 0)
        assert group.lines[1].colour is None
        assert group.lines[1].end == sector.fixes[1].position
        assert sector.star_entries == []

    def test_artcc_continuation(self, sector):
        assert len(sector.artcc_entries) == 1
        group = sector.artcc_entries[0]
        assert group.name == 'AoR Milano ACC'
        assert len(group.lines) == 2
        assert group.lines[0].end == group.lines[1].start

    def test_artcc_high_named_entities(self, sector):
        """Test endpoints given as VOR identifiers with a defined colour."""
        group = sector.artcc_high_entries[0]
        assert group.name == 'LON_UIR'
        assert group.lines[0].start == sector.vors[0].position
        assert group.lines[0].end == sector.vors[1].position
        assert group.lines[0].colour == sector.colours['coast']

    def test_geo(self, sector):
        group = sector.geo_entries[0]
        assert group.name == 'Thames'
        assert [line.colour for line in group.lines] == [sector.colours['coast'], None]

    def test_regions(self, sector):
        assert len(sector.region_groups) == 1
        group = sector.region_groups[0]
        assert group.name == 'Heathrow Apron'
        assert len(group.regions) == 1
        assert len(group.regions[0].vertices) == 3
        assert group.regions[0].colour == sector.colours['coast']

    def test_labels(self, sector):
        """Test that a quoted label keeps a semicolon in its text."""
        assert len(sector.label_groups) == 1
        group = sector.label_groups[0]
        assert group.name == 'SCT2'
        assert group.labels[0].name == 'Heathrow; Main'
        assert group.labels[0].colour == Colour(255, 0, 0)

    def test_summary(self, sector):
        summary = sector.summary()
        assert summary['airports'] == 2
        assert summary['runways'] == 2
        assert summary['artcc'] == 1
        assert summary['errors'] == 4


class TestReader:
    """Test dispatching and error collection."""

    def test_malformed_define_does_not_stop_the_read(self, reader):
        content = "\n".join([
            "[FIXES]",
            "ABSAV N051.05.11.000 E001.11.14.000",
            "#define BAD notacolour",
            "BRAIN N051.48.40.000 E000.39.02.000",
            "LAM N051.38.46.000 E000.09.06.000",
        ])
        sector = reader.read_text(content)
        assert [f.identifier for f in sector.fixes] == ['ABSAV', 'BRAIN', 'LAM']
        assert len(sector.errors) == 1
        assert sector.errors[0].line_number == 3
        assert sector.errors[0].kind == ErrorKind.INVALID_COLOUR_DEFINITION

    def test_colour_defined_later_in_file(self, reader):
        """Test that a name used before its definition does not resolve."""
        sector = reader.read_text("\n".join([
            "[LABELS]",
            '"Before" N051.00.00.000 E000.00.00.000 FOO',
            "#define FOO 16711680",
            '"After" N051.00.00.000 E000.00.00.000 FOO',
        ]))
        assert [(e.line_number, e.kind) for e in sector.errors] == [(2, ErrorKind.INVALID_LABEL)]
        labels = sector.label_groups[0].labels
        assert [label.name for label in labels] == ['After']
        assert labels[0].colour == Colour(255, 0, 0)

    def test_header_is_case_insensitive(self, reader):
        sector = reader.read_text("[fixes]\nABSAV N051.05.11.000 E001.11.14.000")
        assert len(sector.fixes) == 1
        assert sector.errors == []

    def test_header_whitespace(self, reader):
        assert reader.parse_header('[ARTCC   high]') == SctSection.ARTCC_HIGH

    def test_unknown_header(self, reader):
        sector = reader.read_text("[FIXES]\n[BOGUS]\nABSAV N051.05.11.000 E001.11.14.000")
        assert [(e.line_number, e.kind) for e in sector.errors] == [(2, ErrorKind.INVALID_FILE_SECTION)]
        assert len(sector.fixes) == 1

    def test_content_before_any_section_is_ignored(self, reader):
        sector = reader.read_text("ABSAV N051.05.11.000 E001.11.14.000\n[FIXES]")
        assert sector.fixes == []
        assert sector.errors == []

    def test_comment_after_unmatched_quote(self, reader):
        sector = reader.read_text('[LABELS]\n"Heathrow N051.00.00.000 E000.00.00.000 255 ; note')
        assert sector.errors == []
        assert sector.label_groups[0].labels[0].name == 'Heathrow'

    def test_comments(self, reader):
        sector = reader.read_text("\n".join([
            "; header comment",
            "[FIXES] ; trailing",
            "   ; indented comment",
            "ABSAV N051.05.11.000 E001.11.14.000 ; comment",
        ]))
        assert len(sector.fixes) == 1
        assert sector.errors == []

    def test_offset_applies_to_following_lines(self, reader):
        sector = reader.read_text("\n".join([
            "[FIXES]",
            "A 10 20",
            "OFFSET 1 2",
            "B 10 20",
        ]))
        assert sector.fixes[0].position.lat == 10
        assert sector.fixes[1].position.lat == 11
        assert sector.fixes[1].position.lon == 22

    def test_offset_before_info(self, reader):
        """Test that the centre point is shifted by the active offset."""
        sector = reader.read_text("\n".join([
            "OFFSET 1 2",
            "[INFO]",
            "Name", "CALLSIGN", "EGLL", "10", "20",
        ]))
        assert sector.sector_info.centre_lat == 11
        assert sector.sector_info.centre_lon == 22

    def test_missing_file(self, reader, tmp_path):
        with pytest.raises(SectorError) as exc_info:
            reader.read_path(tmp_path / 'missing.sct')
        assert exc_info.value.kind == ErrorKind.IO_ERROR

    def test_latin1_file(self, reader, tmp_path):
        path = tmp_path / 'latin1.sct'
        path.write_bytes('[LABELS]\n"Zürich" N047.27.00.000 E008.33.00.000 255\n'.encode('latin-1'))
        sector = reader.read_path(path)
        assert sector.label_groups[0].labels[0].name == 'Zürich'

    def test_independent_reads(self, reader):
        """Test that colours and offsets do not leak from one read to the next."""
        reader.read_text("#define FOO 255\nOFFSET 1 1")
        sector = reader.read_text("[FIXES]\nA 10 20")
        assert sector.colours == {}
        assert sector.fixes[0].position.lat == 10
