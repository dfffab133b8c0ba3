"""Command-line entry point.

Loads flights and clients from XML files, plans a ticket for every
client and prints it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import get_config
from .container import Container
from .domain.errors import ConfigurationError, ScheduleLoadError
from .logging_config import setup_logging
from .ports.rendering import TicketRendererPort
from .services import ItineraryPlannerService

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="routeplanner",
        description="Find the cheapest or fastest itinerary for each client",
    )
    p.add_argument("--flights", type=Path, help="Flights XML file")
    p.add_argument("--clients", type=Path, help="Clients XML file")
    p.add_argument("--max-legs", type=int, help="Maximum connections per itinerary")
    p.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    config = get_config()
    try:
        setup_logging(args.log_level, config.observability)
    except ConfigurationError as e:
        parser.error(str(e))

    data = config.data
    # absolute file names take precedence over the data directory
    if args.flights is not None:
        data = data.model_copy(update={"flights_file": str(args.flights.resolve())})
    if args.clients is not None:
        data = data.model_copy(update={"clients_file": str(args.clients.resolve())})

    search = config.search
    if args.max_legs is not None:
        if args.max_legs < 1:
            parser.error(f"--max-legs must be a positive integer, got {args.max_legs}")
        search = search.model_copy(update={"max_legs": args.max_legs})

    container = Container.create_default(
        config.model_copy(update={"data": data, "search": search})
    )
    planner = container.resolve(ItineraryPlannerService)
    renderer = container.resolve(TicketRendererPort)

    try:
        tickets = planner.plan_all()
    except ScheduleLoadError as e:
        logger.error("Could not load schedule: %s", e)
        return 1

    for ticket in tickets:
        print(renderer.render(ticket))
    return 0


if __name__ == "__main__":
    sys.exit(main())
