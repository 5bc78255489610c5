"""
Main entry point for the learning progress tracker.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVELS, load_config
from .console import ProgressTracker
from .core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(description="Learning Progress Tracker")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level")
    parser.add_argument("--prompt", type=str, help="Text printed before each input line")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, log_level=args.log_level, prompt=args.prompt)
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tracker = ProgressTracker(config=config)
    try:
        tracker.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
