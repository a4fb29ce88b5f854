"""Unit tests for static race time plots."""

import matplotlib.pyplot as plt
import pytest

from itra_race_trends.analysis.selection import RaceSelection
from itra_race_trends.visualization.plots import plot_race_times


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotRaceTimes:
    """Test suite for the matplotlib rendition."""

    def test_returns_figure_with_scale_limits(self, race_data):
        selection = RaceSelection(race_data)
        fig = plot_race_times(selection)
        ax = fig.axes[0]
        assert ax.get_xlim() == pytest.approx(selection.x_scale.domain)
        assert ax.get_ylim() == pytest.approx(tuple(sorted(selection.y_scale.domain)))

    def test_tick_labels(self, two_point_data):
        fig = plot_race_times(RaceSelection(two_point_data))
        ax = fig.axes[0]
        y_labels = [label.get_text() for label in ax.get_yticklabels()]
        assert y_labels[0] == "10H 00M"
        assert y_labels[-1] == "11H 07M"
        x_labels = [label.get_text() for label in ax.get_xticklabels()]
        assert "2018" in x_labels
        assert "2020" in x_labels

    def test_figure_size_matches_dimensions(self, race_data):
        fig = plot_race_times(RaceSelection(race_data))
        width, height = fig.get_size_inches() * fig.dpi
        assert (width, height) == pytest.approx((1200, 400))

    @pytest.mark.parametrize("suffix", [".svg", ".png"])
    def test_save(self, race_data, tmp_path, suffix):
        path = tmp_path / f"race{suffix}"
        plot_race_times(RaceSelection(race_data), save_path=path)
        assert path.exists()
        assert path.stat().st_size > 0

    def test_svg_is_vector(self, two_point_data, tmp_path):
        path = tmp_path / "race.svg"
        plot_race_times(RaceSelection(two_point_data), save_path=path)
        assert "<svg" in path.read_text()
