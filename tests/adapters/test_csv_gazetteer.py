import logging

import pytest

from georoute.adapters.gazetteer import CSVGazetteer
from georoute.config import GraphConfig
from georoute.domain.errors import GazetteerError
from georoute.domain.models import Coordinate


@pytest.fixture
def gazetteer(cities_path):
    return CSVGazetteer(path=cities_path)


def test_lookup_by_city_and_state(gazetteer):
    location = gazetteer.lookup("Beta XX")
    assert location is not None
    assert location.name == "Beta XX"
    assert location.coordinate == Coordinate(0.0, 0.9)


def test_first_occurrence_wins(gazetteer):
    assert gazetteer.lookup("Alpha XX").coordinate == Coordinate(0.0, 0.1)


def test_lookup_is_forgiving_about_case_and_spacing(gazetteer):
    assert gazetteer.lookup("gamma xx").coordinate == Coordinate(0.0, 2.05)
    assert gazetteer.lookup("  Beta   XX ").name == "Beta XX"


def test_unknown_and_empty_names(gazetteer):
    assert gazetteer.lookup("Nowhere XX") is None
    assert gazetteer.lookup("   ") is None


def test_malformed_rows_are_skipped_and_logged(gazetteer, caplog):
    with caplog.at_level(logging.WARNING, logger="georoute.adapters.gazetteer.csv_gazetteer"):
        names = gazetteer.names()

    assert sorted(names) == ["Alpha XX", "Beta XX", "Gamma XX"]
    assert gazetteer.lookup("Broken XX") is None
    assert "Skipped malformed city rows" in caplog.text


def test_missing_file_raises(tmp_path):
    gazetteer = CSVGazetteer(path=tmp_path / "missing.csv")
    with pytest.raises(GazetteerError) as excinfo:
        gazetteer.lookup("Alpha XX")
    assert excinfo.value.file_path == str(tmp_path / "missing.csv")


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "cities.csv"
    path.write_bytes(b"city,state_id,lat,lon\nBad\xff,XX,0,0\n")

    gazetteer = CSVGazetteer(path=path)
    with pytest.raises(GazetteerError) as excinfo:
        gazetteer.lookup("Alpha XX")
    assert excinfo.value.file_path == str(path)
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)


def test_default_path_comes_from_config(cities_path):
    config = GraphConfig(data_dir=cities_path.parent, cities_file=cities_path.name)
    gazetteer = CSVGazetteer(config)
    assert gazetteer.source_path == cities_path
    assert gazetteer.lookup("Alpha XX") is not None


def test_bundled_cities_file():
    durham = CSVGazetteer(GraphConfig()).lookup("Durham NC")
    assert durham is not None
    assert durham.coordinate == Coordinate(35.9940, -78.8986)
