"""Tests for shared utilities."""

import pytest
from pathlib import Path
import pandas as pd
import tempfile

from countryidentity.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    load_json_file,
    format_not_found_error,
)
from countryidentity.utils.build_utils import load_yaml_file, write_json_file
from countryidentity.utils.normalize import remove_diacritics, simplify_name


class TestFindDataFile:
    """Test data file finding utility"""

    def test_find_module_local_data(self):
        """Test finding data in module-local directory"""
        # Code table is in codes/data/
        from countryidentity.codes import codetable
        path = find_data_file(
            module_file=codetable.__file__,
            subdirectory="codes",
            filenames=["codes.parquet", "codes.csv"],
        )
        assert path is not None
        assert path.exists()
        assert path.name == "codes.csv"

    def test_find_nonexistent_file(self):
        """Test that None is returned when file not found"""
        from countryidentity.codes import codetable
        path = find_data_file(
            module_file=codetable.__file__,
            subdirectory="nonexistent",
            filenames=["missing.parquet"],
        )
        assert path is None

    def test_find_dev_tables(self, tmp_path):
        """Test falling back to tables/{subdirectory}/"""
        module_file = tmp_path / "pkg" / "codes" / "codeapi.py"
        tables = tmp_path / "tables" / "codes"
        tables.mkdir(parents=True)
        (tables / "codes.csv").write_text("alpha2,alpha3,numeric\n")

        path = find_data_file(str(module_file), "codes", ["codes.csv"])
        assert path == tables / "codes.csv"

        assert find_data_file(str(module_file), "codes", ["codes.csv"], search_dev_tables=False) is None

    def test_search_order(self, tmp_path):
        """Test that only module-local data and tables/ are searched"""
        module_file = tmp_path / "pkg" / "codes" / "codetable.py"
        stray = tmp_path / "pkg" / "data" / "codes"
        stray.mkdir(parents=True)
        (stray / "codes.csv").write_text("alpha2,alpha3,numeric\n")

        assert find_data_file(str(module_file), "codes", ["codes.csv"]) is None

        local = tmp_path / "pkg" / "codes" / "data"
        local.mkdir(parents=True)
        (local / "codes.csv").write_text("alpha2,alpha3,numeric\n")
        tables = tmp_path / "tables" / "codes"
        tables.mkdir(parents=True)
        (tables / "codes.csv").write_text("alpha2,alpha3,numeric\n")

        assert find_data_file(str(module_file), "codes", ["codes.csv"]) == local / "codes.csv"


class TestLoadParquetOrCsv:
    """Test data loading utility"""

    def test_load_parquet(self):
        """Test loading parquet file as strings"""
        with tempfile.NamedTemporaryFile(suffix=".parquet", delete=False) as f:
            df = pd.DataFrame({"alpha2": ["US"], "numeric": [840]})
            df.to_parquet(f.name)
            temp_path = Path(f.name)

        try:
            loaded_df = load_parquet_or_csv(temp_path)
            assert isinstance(loaded_df, pd.DataFrame)
            assert list(loaded_df.columns) == ["alpha2", "numeric"]
            assert loaded_df.loc[0, "numeric"] == "840"
        finally:
            temp_path.unlink()

    def test_load_csv_keeps_codes(self):
        """Test that CSV values are not converted to numbers or NaN"""
        with tempfile.NamedTemporaryFile(mode='w', suffix=".csv", delete=False) as f:
            f.write("alpha2,alpha3,numeric\nNA,NAM,516\nAF,AFG,004\n")
            temp_path = Path(f.name)

        try:
            loaded_df = load_parquet_or_csv(temp_path)
            assert len(loaded_df) == 2
            assert loaded_df.loc[0, "alpha2"] == "NA"
            assert loaded_df.loc[1, "numeric"] == "004"
        finally:
            temp_path.unlink()

    def test_unsupported_format(self):
        """Test that unsupported formats raise ValueError"""
        temp_path = Path("/tmp/test.txt")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_parquet_or_csv(temp_path)


class TestFileHelpers:
    """Test JSON and YAML helpers"""

    def test_json_round_trip_keeps_unicode(self, tmp_path):
        path = tmp_path / "out" / "es.json"
        write_json_file(path, {"locale": "es", "countries": {"ES": "España"}})

        assert "España" in path.read_text(encoding="utf-8")
        assert load_json_file(path)["countries"]["ES"] == "España"

    def test_json_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json_file(tmp_path / "missing.json")

    def test_yaml(self, tmp_path):
        path = tmp_path / "locales.yaml"
        path.write_text("locales:\n  - en\n  - es\n")
        assert load_yaml_file(path) == {"locales": ["en", "es"]}

    def test_yaml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_file(tmp_path / "missing.yaml")


class TestFormatNotFoundError:
    """Test error message formatting utility"""

    def test_format_basic_error(self):
        """Test basic error message formatting"""
        msg = format_not_found_error(
            subdirectory="test",
            searched_locations=[
                ("Location 1", Path("/path/1")),
                ("Location 2", Path("/path/2")),
            ],
            fix_instructions=[
                "Run command A",
                "Run command B",
            ],
        )

        assert "No test data found" in msg
        assert "Searched:" in msg
        assert "Location 1" in msg
        assert "/path/1" in msg
        assert "To fix:" in msg
        assert "Run command B" in msg


class TestRemoveDiacritics:
    """Test accent stripping"""

    @pytest.mark.parametrize("raw, expected", [
        ("España", "Espana"),
        ("Côte d'Ivoire", "Cote d'Ivoire"),
        ("Österreich", "Osterreich"),
        ("Curaçao", "Curacao"),
        ("São Tomé", "Sao Tome"),
        ("Großbritannien", "Grossbritannien"),
        ("Færøerne", "Faeroerne"),
        ("Łódź", "Lodz"),
        ("Åland", "Aland"),
    ])
    def test_latin(self, raw, expected):
        assert remove_diacritics(raw) == expected

    def test_plain_text_unchanged(self):
        assert remove_diacritics("Argentina") == "Argentina"

    def test_non_latin_scripts_kept(self):
        assert remove_diacritics("Россия") == "Россия"
        assert remove_diacritics("日本") == "日本"

    @pytest.mark.parametrize("raw", ["Йемен", "ガーナ", "Ελλάδα"])
    def test_non_latin_marks_kept(self, raw):
        """Marks belonging to other scripts are part of the letter"""
        assert remove_diacritics(raw) == raw

    def test_mixed_scripts(self):
        assert remove_diacritics("Việt Nam / Йемен") == "Viet Nam / Йемен"

    def test_empty(self):
        assert remove_diacritics("") == ""

    def test_simplify_lowercases_first(self):
        assert simplify_name("ÉGYPTE") == "egypte"
