from __future__ import annotations

import logging
from pathlib import Path

LOG_FILE_NAME = "lazytodo.log"


def setup_logging(log_dir: str | Path, *, level: int = logging.DEBUG) -> Path:
    """
    Send diagnostic logs to ``<log_dir>/lazytodo.log``.

    There is no console handler: the full-screen session owns the terminal, so
    anything written to stderr would corrupt the display.

    Call this once, before the app starts.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Textual and asyncio are chatty at DEBUG.
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("textual").setLevel(logging.WARNING)

    logging.captureWarnings(True)
    return log_file
