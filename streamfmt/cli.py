"""
streamfmt command line entry point.

Usage:
    claude -p "..." --output-format stream-json --verbose | streamfmt

Takes no arguments. Diagnostics go to stderr at the level named by
STREAMFMT_LOG_LEVEL (default WARNING); stdout carries only formatted lines.
"""

import logging
import os
import sys

from .driver import run

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level() -> int:
    """Parse the log level from the environment with a safe default."""
    name = os.getenv("STREAMFMT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return getattr(logging, DEFAULT_LOG_LEVEL)
    return level


def _reconfigure_streams() -> None:
    # A stray undecodable byte must not end the stream, and emoji must not
    # fail on a non-UTF-8 locale.
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def main() -> int:
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("streamfmt")

    _reconfigure_streams()
    try:
        return run(sys.stdin, sys.stdout)
    except BrokenPipeError:
        # Downstream closed early (e.g. `| head`). Point stdout at devnull so
        # the interpreter's final flush does not raise again.
        logger.debug("Output pipe closed, stopping")
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
