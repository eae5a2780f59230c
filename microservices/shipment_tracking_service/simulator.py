#!/usr/bin/env python3
"""
Tracking Simulator

Replays a file of update records through the tracking service, one record at
a time with an optional pause between records. Malformed lines are logged
and skipped; the replay never aborts on a bad line.

Usage:
    python -m microservices.shipment_tracking_service.simulator updates.txt --delay 0.5
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .models import SimulationSummary
from .protocols import ShipmentTrackingError
from .tracking_service import ShipmentTrackingService
from .update_parser import parse_lines

logger = logging.getLogger(__name__)


class TrackingSimulator:
    """Batch replay of update records"""

    def __init__(self, service: ShipmentTrackingService, delay_seconds: float = 0.0):
        self.service = service
        self.delay_seconds = delay_seconds

    async def run_lines(self, lines: Iterable[str]) -> SimulationSummary:
        """Replay records in order"""
        lines = list(lines)
        summary = SimulationSummary(total_lines=len(lines))

        for number, parsed in parse_lines(lines):
            if isinstance(parsed, ShipmentTrackingError):
                logger.warning(f"Skipping malformed update line {number}: {parsed}")
                summary.skipped += 1
                summary.messages.append(f"Line {number}: {parsed}")
                continue

            result = self.service.apply_update(parsed)
            if result.success:
                summary.processed += 1
            else:
                summary.failed += 1
                summary.messages.append(f"Line {number}: {result.message}")

            if self.delay_seconds > 0:
                await asyncio.sleep(self.delay_seconds)

        logger.info(
            f"Simulation finished: {summary.processed} processed, "
            f"{summary.failed} failed, {summary.skipped} skipped"
        )
        return summary

    async def run_file(self, path: Union[str, Path]) -> SimulationSummary:
        """Replay every record in a UTF-8 text file"""
        file_path = Path(path)
        logger.info(f"Loading updates from: {file_path.resolve()}")

        if not file_path.is_file():
            logger.error(f"Update file not found at path: {file_path.resolve()}")
            return SimulationSummary()

        try:
            lines = file_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read update file {file_path}: {e}")
            return SimulationSummary()

        return await self.run_lines(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replay shipment update records")
    parser.add_argument("path", help="File with one update record per line")
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait between updates (default: SIMULATION_DELAY_SECONDS)",
    )
    parser.add_argument("--log-level", default=None, help="Log level override")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    from core.config import get_settings
    from core.logger import setup_service_logger

    from .factory import create_tracking_service

    args = _build_parser().parse_args(argv)
    config = get_settings()
    setup_service_logger(
        "microservices.shipment_tracking_service",
        level=args.log_level or config.log_level,
        config=config.logging,
    )

    service = create_tracking_service(config)
    delay = config.simulation_delay_seconds if args.delay is None else args.delay
    simulator = TrackingSimulator(service, delay_seconds=delay)
    summary = asyncio.run(simulator.run_file(args.path))

    for shipment in service.list_shipments():
        print(f"{shipment.id} ({shipment.shipment_type.value})")
        print(f"    Status: {shipment.status}")
        print(f"    Location: {shipment.current_location or 'N/A'}")
        print(f"    Expected Delivery: {shipment.expected_delivery_timestamp or 'N/A'}")
        print(f"    Notes: {len(shipment.notes)}  Updates: {len(shipment.update_history)}")
        for violation in shipment.rule_violations:
            print(f"    Violation: {violation}")

    print(
        f"Processed {summary.processed}, failed {summary.failed}, "
        f"skipped {summary.skipped} of {summary.total_lines} lines"
    )
    return 0 if summary.total_lines else 1


if __name__ == "__main__":
    sys.exit(main())
