import pytest

from occupation_browser.config import settings
from occupation_browser.services.loader_service import load_occupations, parse_occupations, read_occupations_csv

OCCUPATIONS_CSV = """Key ID,CODE,PREFERRED LABEL,Example Alternate Designation,Core Description,OCCUPATION TYPE,Status,User Link
k-2512,2512.1,Software developer,"programmer
coder",Researches and writes computer programs.,ESCO occupation,released,http://example.org/2512.1
k-2511,2511,Systems analyst,,Analyses business systems.,ESCO occupation,released,http://example.org/2511

k-1330,1330.2,ICT service manager,,Plans ICT services.,Local occupation,released,http://example.org/1330.2,unexpected
"""


class TestReadOccupationsCsv:
    def test_maps_columns_to_fields(self):
        occupations = read_occupations_csv(OCCUPATIONS_CSV)
        first = occupations[0]
        assert first.key_id == "k-2512"
        assert first.code == "2512.1"
        assert first.preferred_label == "Software developer"
        assert first.description == "Researches and writes computer programs."
        assert first.occupation_type == "ESCO occupation"
        assert first.status == "released"
        assert first.user_link == "http://example.org/2512.1"

    def test_blank_lines_are_skipped(self):
        assert [o.key_id for o in read_occupations_csv(OCCUPATIONS_CSV)] == ["k-2512", "k-2511", "k-1330"]

    def test_missing_columns_and_cells_default_to_empty(self):
        analyst = read_occupations_csv(OCCUPATIONS_CSV)[1]
        assert analyst.definition == ""
        assert analyst.scope_note == ""
        assert analyst.alternate_designations == ""

    def test_multiline_alternate_designations(self):
        developer = read_occupations_csv(OCCUPATIONS_CSV)[0]
        assert developer.alternate_labels == ["programmer", "coder"]

    def test_extra_cells_are_ignored(self):
        manager = read_occupations_csv(OCCUPATIONS_CSV)[2]
        assert manager.user_link == "http://example.org/1330.2"

    def test_byte_order_mark_is_tolerated(self):
        assert read_occupations_csv("\ufeff" + OCCUPATIONS_CSV)[0].key_id == "k-2512"

    def test_header_only(self):
        assert read_occupations_csv("Key ID,CODE\n") == []


class TestParseOccupations:
    def test_none_cells_become_empty(self):
        [occupation] = parse_occupations([{"CODE": None, "PREFERRED LABEL": "Cook"}])
        assert occupation.code == ""
        assert occupation.preferred_label == "Cook"


class TestLoadOccupations:
    def test_loads_file(self, tmp_path):
        path = tmp_path / "occupations.csv"
        path.write_text(OCCUPATIONS_CSV, encoding="utf-8-sig")
        occupations = load_occupations(path)
        assert len(occupations) == 3
        assert occupations[0].key_id == "k-2512"

    def test_defaults_to_configured_path(self, tmp_path, monkeypatch):
        path = tmp_path / "configured.csv"
        path.write_text(OCCUPATIONS_CSV, encoding="utf-8")
        monkeypatch.setattr(settings, "data_path", path)
        assert len(load_occupations()) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_occupations(tmp_path / "absent.csv")
