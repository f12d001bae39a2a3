"""Command-line launcher for the road trip shell.

Usage: python start.py <bordersFile> <distancesFile> <codesFile>

Loads the three feeds, then asks for pairs of countries until the user
types ``exit``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from roadtrip.config import AppConfig, GraphConfig
from roadtrip.container import Container
from roadtrip.domain.errors import RoadTripError
from roadtrip.logging_setup import configure_logging
from roadtrip.services import RoadTripService
from roadtrip.shell import RoadTripShell


def usage() -> None:
    print("Usage: python start.py <bordersFile> <distancesFile> <codesFile>")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 3:
        usage()
        return 1

    borders_file, distances_file, codes_file = args[:3]
    config = AppConfig(
        graph=GraphConfig(
            data_dir=Path.cwd(),
            borders_file=borders_file,
            distances_file=distances_file,
            codes_file=codes_file,
        )
    )

    try:
        configure_logging(config.observability)
        service: RoadTripService = Container.create_default(config).resolve(
            RoadTripService
        )
        # Load eagerly so feed errors surface before the first prompt.
        service.graph_repository.load()
    except RoadTripError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    RoadTripShell(service).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
