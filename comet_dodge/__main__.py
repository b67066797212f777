"""
__main__.py
-----------
Command-line entry point.

Usage:
    python -m comet_dodge                       # Play with default settings
    python -m comet_dodge --best-file best.json # Store best score elsewhere
    python -m comet_dodge --seed 42 --log-level VERBOSE
"""

import argparse
import sys

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.services.config_manager import load_settings


def build_parser():
    parser = argparse.ArgumentParser(description="Comet Dodge - survive the comet storm")
    parser.add_argument("--config", default=None,
                        help="JSON settings file merged over the defaults")
    parser.add_argument("--best-file", default=None,
                        help="File that stores the best score")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for comet and star placement")
    parser.add_argument("--fps", type=int, default=None,
                        help="Frame rate cap")
    parser.add_argument("--log-level", default=None,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    return parser


def resolve_settings(args):
    """Merge command-line overrides onto loaded settings."""
    settings = load_settings(args.config)
    if args.best_file:
        settings["persistence"]["path"] = args.best_file
    if args.fps:
        settings["display"]["fps"] = args.fps
    if args.log_level:
        settings["logging"]["level"] = args.log_level
    return settings


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    DebugLogger.set_level(settings["logging"]["level"])

    # Deferred so --help does not import pygame
    from comet_dodge.core.runtime.main_loop import MainLoop

    MainLoop(settings, seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
