"""
Stream Driver
=============

Pumps newline-delimited stream-json from an input stream through the
Event Formatter to an output stream, one line at a time.

Output is flushed after every write so it shows up while the upstream
process is still running.
"""

import json
import logging
from typing import Optional, TextIO

from .formatter import format_event

logger = logging.getLogger(__name__)


def process_line(line: str) -> Optional[str]:
    """Parse and format one raw input line.

    Returns None for blank lines, lines that are not JSON, and events
    with nothing to display.
    """
    line = line.strip()
    if not line:
        return None
    try:
        value = json.loads(line)
    except (ValueError, RecursionError):
        # JSONDecodeError, over-long integers and runaway nesting alike
        logger.debug("Skipping unparseable line: %.80r", line)
        return None
    return format_event(value)


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Format every line of stdin to stdout until end of stream.

    Returns the process exit status (always 0).
    """
    for line in stdin:
        output = process_line(line)
        if output is not None:
            stdout.write(output + "\n")
            stdout.flush()
    return 0
