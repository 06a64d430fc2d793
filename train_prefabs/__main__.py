"""
train_prefabs command line.

Usage:
    python -m train_prefabs describe              # dump example car to the log
    python -m train_prefabs json --channels 4     # example car as JSON
    python -m train_prefabs describe --strict --wheels 0   # -> error, exit 2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from train_prefabs.config import Config
from train_prefabs.debug import print_prefab
from train_prefabs.example import example_train_car
from train_prefabs.primitives import vec3

log = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr and install an excepthook.

    print_prefab traces at DEBUG; describe re-emits at INFO so it shows
    without --verbose.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    if getattr(sys.excepthook, "__name__", "") == "_logging_excepthook":
        return  # already installed by an earlier main() call

    _original_excepthook = sys.excepthook

    def _logging_excepthook(exc_type, exc_value, exc_tb):
        if not issubclass(exc_type, KeyboardInterrupt):
            logging.critical(
                "Unhandled exception", exc_info=(exc_type, exc_value, exc_tb)
            )
        _original_excepthook(exc_type, exc_value, exc_tb)

    sys.excepthook = _logging_excepthook


def _add_car_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--model", type=str, default=None, help="Car model name")
    p.add_argument("--channels", type=int, default=None, help="Flexi colour channels (default: 3)")
    p.add_argument("--mass", type=float, default=None, help="Car mass in kg (default: 1000)")
    p.add_argument("--wheels", type=int, default=None, help="Wheels per assembly (default: 4)")
    p.add_argument("--radius", type=float, default=None, help="Wheel radius (default: prefab's own)")
    p.add_argument("--camera-position", type=float, nargs=3, default=None, metavar=("X", "Y", "Z"), help="Onboard camera position")
    p.add_argument("--camera-rotation", type=float, nargs=3, default=None, metavar=("X", "Y", "Z"), help="Onboard camera rotation in radians")
    p.add_argument("--strict", action="store_true", help="Reject bad counts instead of passing them through")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="train_prefabs",
        description="Build and inspect example train car prefabs",
    )
    sub = parser.add_subparsers(dest="command")

    p_describe = sub.add_parser("describe", help="Log the example car tree")
    _add_car_args(p_describe)

    p_json = sub.add_parser("json", help="Print the example car tree as JSON")
    _add_car_args(p_json)
    p_json.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")

    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Apply CLI overrides on top of the default Config."""
    cfg = Config(strict=args.strict)
    if args.model is not None:
        cfg.car.model_name = args.model
        cfg.car.packages = (args.model,)
    if args.channels is not None:
        cfg.car.flexi_channels = args.channels
    if args.mass is not None:
        cfg.car.mass = args.mass
    if args.wheels is not None:
        cfg.bogie.wheel_count = args.wheels
    if args.radius is not None:
        cfg.bogie.wheel_radius = args.radius
    if args.camera_position is not None:
        cfg.car.camera_position = vec3(args.camera_position)
    if args.camera_rotation is not None:
        cfg.car.camera_rotation = vec3(args.camera_rotation)
    return cfg


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    _setup_logging(args.verbose)
    cfg = config_from_args(args)

    try:
        tree = example_train_car(cfg)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.command == "describe":
        print_prefab(tree, level=logging.INFO)
    elif args.command == "json":
        print(json.dumps(tree, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
