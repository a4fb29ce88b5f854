"""Unit tests for the command-line interface."""

import sys

import pytest
from click.testing import CliRunner
from loguru import logger

from itra_race_trends.cli import main


@pytest.fixture
def runner():
    yield CliRunner()
    # The CLI points loguru at the runner's captured stderr
    logger.remove()
    logger.add(sys.stderr)


class TestLoadDataCommand:
    """Test suite for load-data."""

    def test_lists_race_groups(self, runner, race_csv):
        result = runner.invoke(main, ["load-data", str(race_csv)])
        assert result.exit_code == 0
        assert "Loaded 6 records in 3 race groups" in result.output
        assert "UTMB_UTMB: 3 years" in result.output
        assert "Western States_100M: 1 years" in result.output

    def test_validate(self, runner, race_csv):
        result = runner.invoke(main, ["load-data", str(race_csv), "--validate"])
        assert result.exit_code == 0
        assert "All race groups can be charted!" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["load-data", str(tmp_path / "missing.csv")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_file(self, runner, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("event_race,event,year\nA_B,A,2020\n")
        result = runner.invoke(main, ["load-data", str(path)])
        assert result.exit_code == 1
        assert "missing required columns" in result.output


class TestRenderCommand:
    """Test suite for render."""

    def test_render_html(self, runner, race_csv, tmp_path):
        output = tmp_path / "out" / "chart.html"
        result = runner.invoke(main, ["render", str(race_csv), "--output", str(output)])
        assert result.exit_code == 0
        assert output.exists()
        assert "plotly" in output.read_text().lower()
        assert "UTMB - UTMB saved to" in result.output

    def test_render_svg_with_race_index(self, runner, race_csv, tmp_path):
        output = tmp_path / "chart.svg"
        result = runner.invoke(main, [
            "render", str(race_csv), "--race-index", "4", "--output", str(output),
        ])
        assert result.exit_code == 0
        assert output.exists()
        assert "Lavaredo - Ultra Trail" in result.output

    def test_render_uses_environment_data_path(self, runner, race_csv, tmp_path):
        output = tmp_path / "chart.html"
        result = runner.invoke(
            main,
            ["render", "--output", str(output)],
            env={"ITRA_RACE_TRENDS_DATA": str(race_csv)},
        )
        assert result.exit_code == 0
        assert output.exists()
