"""Shared fixtures for race trends tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from itra_race_trends.data_processing.loaders import load_race_data

RACE_CSV = """event_race,event,race,year,time_in_seconds
UTMB_UTMB,UTMB,UTMB,2019,72000
UTMB_UTMB,UTMB,UTMB,2017,73800
Lavaredo_Ultra Trail,Lavaredo,Ultra Trail,2018,45000
UTMB_UTMB,UTMB,UTMB,2018,71000
Lavaredo_Ultra Trail,Lavaredo,Ultra Trail,2019,44000
Western States_100M,Western States,100M,2017,56000
"""

TWO_POINT_CSV = """event_race,event,race,year,time_in_seconds
Hardrock_100,Hardrock,100,2018,36000
Hardrock_100,Hardrock,100,2020,39600
"""


@pytest.fixture
def race_csv(tmp_path):
    """CSV with three race groups in interleaved order."""
    path = tmp_path / "week_44_data.csv"
    path.write_text(RACE_CSV)
    return path


@pytest.fixture
def race_data(race_csv):
    return load_race_data(race_csv)


@pytest.fixture
def two_point_data(tmp_path):
    """Single race group with two records."""
    path = tmp_path / "two_points.csv"
    path.write_text(TWO_POINT_CSV)
    return load_race_data(path)
