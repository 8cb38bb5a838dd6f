"""A short demonstration of the logger."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from jyggalog.logger import Level, Logger, Style

_GOODBYE = "Bye bye!\n"


def bye() -> int:
    """Fatal hook that says goodbye on standard output.

    Returns the number of characters written.
    """
    stream = sys.stdout
    written = stream.write(_GOODBYE)
    stream.flush()
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Log a few messages at each level, ending with a fatal one."""
    logger = Logger()
    logger.set_style(Style.COLORS | Style.FILE_NAME | Style.LINE_NUMBER)
    logger.set_fatal_hook(bye)
    logger.log(Level.DEBUG, "It's debugin' time")
    logger.log(Level.INFO, "I'm info")

    logger.log(Level.WARN, "I'm a warn")

    logger.set_level(Level.WARN)
    logger.log(Level.INFO, "I'm other info")

    logger.logf(Level.ERROR, "it's broke%dd man", 3)

    logger.log(Level.FATAL, "It's dead chat")
    return 0


if __name__ == "__main__":
    main()