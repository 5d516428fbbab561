"""Command-line interface."""
import argparse
import logging
import sys

from forcegraph.config import DEFAULT_TICKS
from forcegraph.logging_config import setup_logging
from forcegraph.main import run_headless, run_viewer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forcegraph",
        description="3D node-link diagram relaxed by a force-directed layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m forcegraph                          # Open the viewer
  python -m forcegraph --headless --ticks 1000  # Relax without a window
""",
    )
    parser.add_argument(
        '--headless',
        action='store_true',
        help='Run the simulation without opening a window'
    )
    parser.add_argument(
        '--ticks', '-t',
        type=int,
        default=DEFAULT_TICKS,
        help='Number of ticks to run in headless mode'
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity'
    )
    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write the log to this file'
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.ticks < 0:
        build_parser().error("--ticks must not be negative")

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    if args.headless:
        run_headless(args.ticks)
        return 0
    return run_viewer()


if __name__ == "__main__":
    sys.exit(main())
