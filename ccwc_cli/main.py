"""Main entry point for the ccwc CLI."""

import os
import sys
from typing import List

from loguru import logger

from .analyzer import Analyzer
from .cli import parse_cli_args
from .errors import CcwcError

LOG_LEVEL_ENV = "CCWC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def _log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if level not in VALID_LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def configure_logging() -> None:
    """Send loguru output to stderr at the level named by CCWC_LOG_LEVEL."""
    logger.remove()
    logger.add(sys.stderr, level=_log_level())


def main(args: List[str] = None) -> int:
    """Main entry point for the ccwc CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=runtime error). Argument errors exit
        with 2 through argparse.
    """
    if args is None:
        args = sys.argv[1:]

    configure_logging()
    options = parse_cli_args(args)
    logger.debug(f"Resolved options: {options}")

    try:
        result = Analyzer().analyze(options)
    except CcwcError as e:
        logger.debug(f"Analysis of {options.source.display_name} failed: {e}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.opt(exception=e).debug("Unexpected failure during analysis")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

    print(result.output)
    return 0


def cli_entry_point() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry_point()
