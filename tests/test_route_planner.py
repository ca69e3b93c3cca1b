"""Tests for the route planner service with lightweight fakes."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import pytest

from georoute.adapters.gazetteer import CSVGazetteer
from georoute.adapters.graph import DijkstraRouteSolver
from georoute.domain.errors import (
    EmptyGraphError,
    LocationNotFoundError,
    NoRouteError,
    RenderingError,
)
from georoute.domain.models import Coordinate, Location
from georoute.graph.distance import distance
from georoute.graph.store import GeoGraph, parse_graph
from georoute.services import RoutePlannerService, parse_latlon

A = Coordinate(0.0, 0.0)
B = Coordinate(0.0, 1.0)
C = Coordinate(0.0, 2.0)


@dataclass
class FakeRepository:
    graph: GeoGraph

    def load(self) -> GeoGraph:
        return self.graph


@dataclass
class FakeGeocoder:
    known: dict
    queries: List[str] = field(default_factory=list)

    def geocode(self, query: str) -> Optional[Location]:
        self.queries.append(query)
        point = self.known.get(query)
        return None if point is None else Location(query, point)


@dataclass
class FakeRenderer:
    calls: list = field(default_factory=list)

    def render(self, route, output_path, markers=()):
        self.calls.append((tuple(route), Path(output_path), tuple(markers)))
        return Path(output_path)


@pytest.fixture
def planner(line_graph, cities_path):
    return RoutePlannerService(
        graph_repository=FakeRepository(line_graph),
        route_solver=DijkstraRouteSolver(),
        gazetteer=CSVGazetteer(path=cities_path),
    )


def test_plan_between_named_places(planner):
    plan = planner.plan("Alpha XX", "Gamma XX")

    assert plan.origin.coordinate == Coordinate(0.0, 0.1)
    assert plan.start == A
    assert plan.end == C
    assert plan.route.path == (A, B, C)
    assert plan.route.total_distance_miles == pytest.approx(distance(A, B) + distance(B, C))
    assert plan.elapsed_ms >= 0.0
    assert plan.map_path is None


def test_plan_with_coordinate_literals(planner):
    plan = planner.plan("0.1, 0.9", "-0.2,0.1")
    assert plan.route.path == (B, A)
    assert plan.origin.name == "0.1, 0.9"


def test_plan_unknown_place_raises(planner):
    with pytest.raises(LocationNotFoundError) as excinfo:
        planner.plan("Alpha XX", "Nowhere XX")
    assert excinfo.value.query == "Nowhere XX"


def test_plan_endpoints_snapping_to_same_vertex_raises(planner):
    with pytest.raises(NoRouteError):
        planner.plan("Alpha XX", "0,0.2")


def test_plan_on_empty_graph_raises(cities_path):
    planner = RoutePlannerService(
        graph_repository=FakeRepository(parse_graph(["0 0"])),
        route_solver=DijkstraRouteSolver(),
        gazetteer=CSVGazetteer(path=cities_path),
    )
    with pytest.raises(EmptyGraphError):
        planner.plan("Alpha XX", "Beta XX")


def test_geocoder_is_used_for_unknown_names(line_graph, cities_path):
    geocoder = FakeGeocoder(known={"Far East": Coordinate(0.0, 3.0)})
    planner = RoutePlannerService(
        graph_repository=FakeRepository(line_graph),
        route_solver=DijkstraRouteSolver(),
        gazetteer=CSVGazetteer(path=cities_path),
        geocoder=geocoder,
    )

    plan = planner.plan("Alpha XX", "Far East")

    assert plan.end == C
    assert geocoder.queries == ["Far East"]


def test_resolve_without_any_source(line_graph):
    planner = RoutePlannerService(
        graph_repository=FakeRepository(line_graph),
        route_solver=DijkstraRouteSolver(),
    )
    assert planner.resolve("1,2").coordinate == Coordinate(1.0, 2.0)
    with pytest.raises(LocationNotFoundError):
        planner.resolve("Alpha XX")


def test_plan_renders_map_with_snapped_endpoints(line_graph, cities_path, tmp_path):
    renderer = FakeRenderer()
    planner = RoutePlannerService(
        graph_repository=FakeRepository(line_graph),
        route_solver=DijkstraRouteSolver(),
        gazetteer=CSVGazetteer(path=cities_path),
        map_renderer=renderer,
    )

    plan = planner.plan("Alpha XX", "Gamma XX", render_map=True, map_output_path=tmp_path / "m.html")

    assert plan.map_path == tmp_path / "m.html"
    assert renderer.calls == [((A, B, C), tmp_path / "m.html", (A, C))]


def test_render_map_requires_output_path(line_graph, cities_path):
    planner = RoutePlannerService(
        graph_repository=FakeRepository(line_graph),
        route_solver=DijkstraRouteSolver(),
        gazetteer=CSVGazetteer(path=cities_path),
        map_renderer=FakeRenderer(),
    )
    with pytest.raises(ValueError):
        planner.plan("Alpha XX", "Gamma XX", render_map=True)


def test_render_map_without_renderer_raises(planner, tmp_path):
    with pytest.raises(RenderingError):
        planner.plan("Alpha XX", "Gamma XX", render_map=True, map_output_path=tmp_path / "m.html")
    assert not (tmp_path / "m.html").exists()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("35.5,-78.25", Coordinate(35.5, -78.25)),
        (" 35.5 , -78.25 ", Coordinate(35.5, -78.25)),
        ("-.5,+2", Coordinate(-0.5, 2.0)),
        ("10,20", Coordinate(10.0, 20.0)),
    ],
)
def test_parse_latlon_accepts_literals(text, expected):
    assert parse_latlon(text) == expected


@pytest.mark.parametrize("text", ["Durham NC", "1,2,3", "1;2", "", "north,south"])
def test_parse_latlon_rejects_other_text(text):
    assert parse_latlon(text) is None
