"""
CarWorks demonstration scenario.

Builds two cars, picks the hatchback from the catalog, hands it to its
new owner, drives it, and repairs whatever the diagnosis finds.

Usage:
    python -m carworks
    python -m carworks --log-level DEBUG
    carworks-demo --log-file demo.log
"""

import argparse
import logging
import sys
from typing import List, Optional

from carworks.car.car import BodyStyle, Fiat, Ford
from carworks.catalog.catalog import CarCatalog
from carworks.config import DemoConfig, LOG_LEVELS
from carworks.output import ConsoleSink, OutputSink
from carworks.parts import Part


logger = logging.getLogger(__name__)


def run_demo(sink: OutputSink | None = None) -> List[Part]:
    """Run the fixed demonstration scenario.

    Args:
        sink: Destination for action log lines. Console if None.

    Returns:
        Parts that were diagnosed and repaired
    """
    sink = sink or ConsoleSink()

    ford = Ford("Ford Fusion", BodyStyle.SEDAN, sink)
    fiat = Fiat("Fiat Stilo 2.4", BodyStyle.HATCHBACK, sink)
    catalog = CarCatalog([ford, fiat])

    cars_to_buy = catalog.filter_by_body_style(BodyStyle.HATCHBACK)
    my_car = cars_to_buy[0]
    catalog.transfer_ownership(my_car, "Dimon")
    logger.info(f"{my_car.owner_name} bought the {my_car.model}")

    my_car.facade.accelerate()
    my_car.facade.brake()

    parts_for_repair = my_car.facade.diagnose()
    my_car.facade.repair(parts_for_repair)

    logger.info(f"Final state: {my_car.get_state()}")
    return parts_for_repair


def setup_logging(config: DemoConfig) -> None:
    """Configure logging."""
    log_format = "%(asctime)s [%(levelname)s] %(message)s"
    handlers = [logging.StreamHandler(sys.stdout)]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=config.level,
        format=log_format,
        handlers=handlers,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="CarWorks facade and observer demonstration",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = DemoConfig(log_level=args.log_level, log_file=args.log_file)
    setup_logging(config)

    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
