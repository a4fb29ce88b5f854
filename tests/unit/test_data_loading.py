"""Unit tests for data loading functionality."""

import pytest
import pandas as pd

from itra_race_trends.data_processing.loaders import load_race_data, resolve_data_path
from itra_race_trends.data_processing.preprocessors import DataValidationError


class TestDataLoaders:
    """Test suite for data loading functions."""

    def test_load_race_data_columns(self, race_data):
        """Loaded data uses record field names."""
        assert list(race_data.columns) == [
            "race_group_id", "event_name", "race_name", "year", "time_seconds",
        ]
        assert len(race_data) == 6

    def test_numeric_types(self, race_data):
        """Year is integer and time is float."""
        assert pd.api.types.is_integer_dtype(race_data["year"])
        assert pd.api.types.is_float_dtype(race_data["time_seconds"])

    def test_file_order_preserved(self, race_data):
        """Rows keep the order they have in the file."""
        assert race_data["year"].tolist() == [2019, 2017, 2018, 2018, 2019, 2017]

    def test_text_columns_are_strings(self, two_point_data):
        """Numeric-looking race names stay text."""
        assert two_point_data["race_name"].tolist() == ["100", "100"]

    def test_text_cells_kept_verbatim(self, tmp_path):
        """Zero padding and NA-like names survive loading."""
        path = tmp_path / "na.csv"
        path.write_text("event_race,event,race,year,time_in_seconds\nNA_050,NA,050,2018,3600\n")
        result = load_race_data(path)
        assert result["race_group_id"].iloc[0] == "NA_050"
        assert result["event_name"].iloc[0] == "NA"
        assert result["race_name"].iloc[0] == "050"
        assert result["year"].iloc[0] == 2018
        assert result["time_seconds"].iloc[0] == 3600.0

    def test_column_names_are_stripped(self, tmp_path):
        """Whitespace around header names is ignored."""
        path = tmp_path / "spaced.csv"
        path.write_text(" event_race , event,race ,year, time_in_seconds\nA_B,A,B,2020,100\n")
        result = load_race_data(path)
        assert result["time_seconds"].tolist() == [100.0]

    def test_missing_file(self, tmp_path):
        """A missing file aborts loading."""
        with pytest.raises(FileNotFoundError):
            load_race_data(tmp_path / "nope.csv")

    def test_missing_column(self, tmp_path):
        """A missing required column is reported by name."""
        path = tmp_path / "no_time.csv"
        path.write_text("event_race,event,race,year\nA_B,A,B,2020\n")
        with pytest.raises(DataValidationError, match="time_in_seconds"):
            load_race_data(path)

    @pytest.mark.parametrize("year,time", [
        ("twenty", "100"),
        ("2020", "fast"),
        ("2020", ""),
        ("2020.5", "100"),
        ("inf", "100"),
        ("2020", "inf"),
        ("2020", "-inf"),
    ])
    def test_bad_numeric_values(self, tmp_path, year, time):
        """Non-numeric, missing, infinite or fractional values abort loading."""
        path = tmp_path / "bad.csv"
        path.write_text(f"event_race,event,race,year,time_in_seconds\nA_B,A,B,{year},{time}\n")
        with pytest.raises(DataValidationError):
            load_race_data(path)

    def test_header_only(self, tmp_path):
        """A table with no rows is rejected."""
        path = tmp_path / "header.csv"
        path.write_text("event_race,event,race,year,time_in_seconds\n")
        with pytest.raises(DataValidationError):
            load_race_data(path)

    def test_empty_file(self, tmp_path):
        """A completely empty file is rejected."""
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(DataValidationError):
            load_race_data(path)

    def test_validation_error_is_value_error(self):
        """Callers can catch validation failures as ValueError."""
        assert issubclass(DataValidationError, ValueError)


class TestResolveDataPath:
    """Test suite for data path lookup."""

    def test_explicit_path(self, tmp_path):
        assert resolve_data_path(tmp_path / "x.csv") == tmp_path / "x.csv"

    def test_default_from_working_directory(self, tmp_path, monkeypatch):
        """The dataset directory is found from the working directory."""
        (tmp_path / "dataset").mkdir()
        (tmp_path / "dataset" / "week_44_data.csv").write_text("")
        monkeypatch.chdir(tmp_path)
        assert resolve_data_path().resolve() == (tmp_path / "dataset" / "week_44_data.csv").resolve()

    def test_default_from_parent_directory(self, tmp_path, monkeypatch):
        (tmp_path / "dataset").mkdir()
        (tmp_path / "dataset" / "week_44_data.csv").write_text("")
        (tmp_path / "notebooks").mkdir()
        monkeypatch.chdir(tmp_path / "notebooks")
        assert resolve_data_path().resolve() == (tmp_path / "dataset" / "week_44_data.csv").resolve()
