"""Console construction and logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

from rich.console import Console

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def make_console(file: IO[str] | None = None, **kwargs) -> Console:
    """Create the output sink used by the dispatcher and handlers.

    Soft wrapping, highlighting and emoji replacement are off so that a
    handler printing ``Result: 7`` produces exactly that line.
    """
    options = {"soft_wrap": True, "highlight": False, "emoji": False, **kwargs}
    return Console(file=file, **options)


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure the root logger: warnings to stderr, DEBUG with *verbose*."""
    level = logging.DEBUG if verbose else logging.WARNING

    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=logging.DEBUG if log_file else level, handlers=handlers)
