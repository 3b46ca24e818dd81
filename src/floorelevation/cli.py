"""
floorelevation CLI - Main entry point.

Orders boundary points and writes spot parameters into JSON floor models.

Usage:
    floorelevation order points.json
    floorelevation mark model.json --floor F1
    floorelevation mark model.json --all --output updated.json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from floorelevation.config import DEFAULT_SHARED_PARAMETER_FILE, DEFAULT_TOLERANCE, get_writable_resource_path
from floorelevation.controller.commands import CommandStatus, mark_all_floors, mark_floor
from floorelevation.logging_config import setup_logging
from floorelevation.model.io import IOManager
from floorelevation.ordering import InsufficientPointsError, order_points

logger = logging.getLogger(__name__)


def cmd_order(args: argparse.Namespace) -> int:
    points = IOManager.load_points(args.points)
    try:
        result = order_points(points, epsilon=args.tolerance)
    except InsufficientPointsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = {
        "method": str(result.method),
        "unique_count": result.unique_count,
        "points": [p.to_list() for p in result.points],
    }
    print(json.dumps(output, indent=2))
    return 0


def cmd_mark(args: argparse.Namespace) -> int:
    model = IOManager.load_model(args.model)
    shared_parameters = args.shared_parameters or get_writable_resource_path(DEFAULT_SHARED_PARAMETER_FILE)

    if args.all:
        result = mark_all_floors(
            model,
            tolerance=args.tolerance,
            shared_parameter_path=shared_parameters
        )
    else:
        if args.floor is not None:
            model.selected_floor = args.floor
        result = mark_floor(
            model,
            tolerance=args.tolerance,
            shared_parameter_path=shared_parameters
        )

    if result.status == CommandStatus.SUCCEEDED:
        IOManager.save_model(model, args.output or args.model)
        print(result.message)
        if result.skipped:
            print(f"   Skipped floors: {', '.join(str(s) for s in result.skipped)}")
        return 0

    print(f"Error: {result.message}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floorelevation",
        description="Copy floor corner elevations into spot parameters",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-level", default="warning", help="Logging level name (default: warning)")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    order_parser = subparsers.add_parser("order", help="Order a point list and print the corners")
    order_parser.add_argument("points", help="JSON file with [[x, y, z], ...]")
    order_parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    order_parser.set_defaults(func=cmd_order)

    mark_parser = subparsers.add_parser("mark", help="Write spot parameters into a JSON floor model")
    mark_parser.add_argument("model", help="JSON floor model")
    target = mark_parser.add_mutually_exclusive_group()
    target.add_argument("--floor", default=None, help="Floor id (default: the model's selected floor)")
    target.add_argument("--all", action="store_true", help="Process every floor (elevations only)")
    mark_parser.add_argument(
        "--shared-parameters",
        default=None,
        help="Shared parameter file (default: the bundled file; a per-user copy in frozen builds)"
    )
    mark_parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    mark_parser.add_argument("--output", default=None, help="Write the updated model here instead of in place")
    mark_parser.set_defaults(func=cmd_mark)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(level=logging.DEBUG if args.verbose else args.log_level, log_file=args.log_file)
        return args.func(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
