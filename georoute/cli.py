"""Command-line front-end.

Run example:
    georoute "Durham NC" "Raleigh NC" --map route.html
Or, to be prompted for both places:
    python -m georoute
Places may also be given as coordinates: georoute "35.99,-78.90" "35.78,-78.64"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import GraphConfig, get_config
from .container import Container
from .domain.errors import GeoRouteError
from .logging_config import configure_logging
from .services import RoutePlannerService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="georoute",
        description="Find the shortest route between two places on a coordinate graph.",
    )
    parser.add_argument("origin", nargs="?", help="Place name or 'lat,lon' to start from")
    parser.add_argument("destination", nargs="?", help="Place name or 'lat,lon' to go to")
    parser.add_argument("--graph", type=Path, help="Graph description file (.graph)")
    parser.add_argument("--cities", type=Path, help="Cities CSV used to resolve place names")
    parser.add_argument(
        "--map",
        dest="map_path",
        nargs="?",
        const="",
        help="Write an HTML map of the route (default file: GEOROUTE_MAP_DEFAULT_OUTPUT)",
    )
    parser.add_argument(
        "--geocode",
        action="store_true",
        help="Fall back to Nominatim for names missing from the cities file",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    return parser


def _build_container(args: argparse.Namespace) -> Container:
    from .adapters.gazetteer import CSVGazetteer
    from .adapters.graph import GraphFileRepository
    from .ports.graph import GraphRepositoryPort
    from .ports.places import GazetteerPort, GeocoderPort

    config = get_config()
    container = Container.create_default(config)

    if args.graph is not None:
        graph_config = GraphConfig(data_dir=args.graph.parent, graph_file=args.graph.name)
        container.register(GraphRepositoryPort, lambda: GraphFileRepository(graph_config))
    if args.cities is not None:
        cities = args.cities
        container.register(GazetteerPort, lambda: CSVGazetteer(config.graph, path=cities))
    if args.geocode and not container.is_registered(GeocoderPort):
        from .adapters.geocoding import NominatimGeocoderAdapter

        container.register(GeocoderPort, lambda: NominatimGeocoderAdapter(config.geocoding))

    return container


def _ask(prompt: str) -> str:
    print(prompt)
    return input().strip()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = {0: None, 1: "INFO"}.get(args.verbose, "DEBUG")
    configure_logging(level=level)

    try:
        origin = args.origin or _ask("Where are you starting from?")
        destination = args.destination or _ask("Where are you going?")
    except EOFError:
        print("Error: no place given", file=sys.stderr)
        return 1

    container = _build_container(args)
    planner: RoutePlannerService = container.resolve(RoutePlannerService)

    map_path: Optional[Path] = None
    if args.map_path is not None:
        config = container.config
        map_path = Path(args.map_path or config.output_dir / config.rendering.default_output)

    try:
        plan = planner.plan(
            origin,
            destination,
            render_map=map_path is not None,
            map_output_path=map_path,
        )
    except GeoRouteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Nearest point to {origin} is {plan.start}")
    print(f"Nearest point to {destination} is {plan.end}")
    print(
        f"Route between {plan.start} and {plan.end} is "
        f"{plan.route.total_distance_miles:f} total miles"
    )
    print(
        "Total time to get nearest points, route, and get distance: "
        f"{plan.elapsed_ms:f} ms"
    )
    if plan.map_path is not None:
        print(f"Map saved to: {plan.map_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
