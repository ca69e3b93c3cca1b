import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from georoute.config import reset_config
from georoute.graph.store import GeoGraph, parse_graph

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def line_graph_path() -> Path:
    return DATA_DIR / "line.graph"


@pytest.fixture
def cities_path() -> Path:
    return DATA_DIR / "cities.csv"


@pytest.fixture
def line_graph(line_graph_path) -> GeoGraph:
    """A(0,0) - B(0,1) - C(0,2), no direct A-C edge."""
    with line_graph_path.open(encoding="utf-8") as f:
        return parse_graph(f)
