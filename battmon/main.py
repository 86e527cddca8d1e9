"""Main entry point for battmon battery monitor."""
import argparse
import logging
import sys
from dataclasses import replace

import yaml
from textual.logging import TextualHandler

from . import __version__
from .config.config_manager import ConfigManager
from .core.scheduler import RefreshScheduler
from .ui.display_manager import DisplayManager

logger = logging.getLogger(__name__)


def setup_logging(log_file=None, debug=False):
    """Send log records to a file, or to the Textual dev console."""
    handler = logging.FileHandler(log_file) if log_file else TextualHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger("battmon")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Live battery monitor for macOS")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--refresh-rate", type=float, default=None,
                        help="Display repaint interval in seconds")
    parser.add_argument("--interval", type=float, default=None,
                        help="Battery refresh interval in seconds, 0 for manual only")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--mode", choices=["1", "2"], default=None,
                        help="Start in details (1) or history (2) view")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--version", action="version", version=f"battmon {__version__}")
    return parser


def load_config(args):
    """Load configuration and apply command line overrides."""
    config = ConfigManager.load_config(args.config)

    # replace() re-runs the dataclass value fixups
    if args.refresh_rate is not None:
        config = replace(config, refresh_rate=args.refresh_rate)
    if args.interval is not None:
        config.collection_intervals = replace(config.collection_intervals, battery=args.interval)
    if args.no_color or args.mode:
        config.display = replace(
            config.display,
            show_colors=config.display.show_colors and not args.no_color,
            default_mode=args.mode or config.display.default_mode,
        )
    return config


def main(argv=None):
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.debug)

    try:
        config = load_config(args)
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        print(f"battmon: invalid configuration: {e}", file=sys.stderr)
        return 2

    logger.info("Starting battmon %s (interval %ss)", __version__,
                config.collection_intervals.battery)

    # Takes the first reading before the UI appears
    scheduler = RefreshScheduler(config)
    display_manager = DisplayManager(config)

    scheduler.start_collection()
    try:
        display_manager.run_display(scheduler)
    except KeyboardInterrupt:
        pass
    finally:
        scheduler.stop_collection()
    return 0


if __name__ == "__main__":
    sys.exit(main())
