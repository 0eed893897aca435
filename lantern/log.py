#!/usr/bin/env python3
import logging
from pathlib import Path


FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

log = logging.getLogger('lantern')


def setup_logging(level: int = logging.INFO, filename: Path | None = None) -> None:
    """Configure the root handler; logs go to stderr unless a file is given."""
    if filename is not None:
        logging.basicConfig(level=level, format=FORMAT, filename=filename, force=True)
    else:
        logging.basicConfig(level=level, format=FORMAT, force=True)


def silence_logging() -> None:
    """Drop every record of the lantern logger; nothing may reach the terminal."""
    log.addHandler(logging.NullHandler())
    log.propagate = False
