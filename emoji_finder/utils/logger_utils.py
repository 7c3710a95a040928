# logger_utils.py - logging setup, timestamps and timing metrics

import logging
import sys
import time
from pathlib import Path
from typing import Optional, Union

from colorama import Fore, Style, just_fix_windows_console

from emoji_finder.core.errors import ConfigurationError

# Directory where log files go by default
LOG_DIR = Path("logs")
DEFAULT_LOG_PATH = LOG_DIR / "emoji_finder.log"

LINE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

metrics_logger = logging.getLogger("emoji_finder.metrics")


class ColorFormatter(logging.Formatter):
    """Formatter that colours the level name for console output."""
    COLORS = {
        "DEBUG": Style.DIM,
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not color:
            return super().format(record)
        # copy, other handlers share the record
        record = logging.makeLogRecord(record.__dict__)
        # pad before colouring so the %(levelname)-7s column stays aligned
        record.levelname = f"{color}{record.levelname:<7}{Style.RESET_ALL}"
        return super().format(record)


def setup_logging(level: Union[str, int] = "INFO",
                  log_file: Optional[Union[str, Path]] = None,
                  use_color: bool = True) -> logging.Logger:
    """
    Configure the `emoji_finder` logger tree.
    With a log_file everything goes to that file (the TUI owns the terminal),
    otherwise to stderr, coloured when use_color is set.
    """
    root = logging.getLogger("emoji_finder")
    if isinstance(level, str):
        level = level.upper()
        if level not in LEVELS:
            raise ConfigurationError(f"unknown log level {level!r} (choose from: {', '.join(LEVELS)})")
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LINE_FORMAT, DATE_FORMAT))
    else:
        if use_color:
            just_fix_windows_console()
        handler = logging.StreamHandler(sys.stderr)
        fmt_cls = ColorFormatter if use_color else logging.Formatter
        handler.setFormatter(fmt_cls(LINE_FORMAT, DATE_FORMAT))

    root.addHandler(handler)
    root.propagate = False
    return root


def metric(tag: str, value, unit: str = "") -> None:
    """
    Record a metric (timing, counts, ...) on the metrics logger.
    Example line: [12:45:02] search done: 0.0004s
    """
    metrics_logger.info("%s: %s%s", tag, value, unit)


def time_block(label: str) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
        with time_block("index build"):
            build(catalog)
    """
    return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label: str):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        metric(f"{self.label} done", round(self.elapsed, 4), "s")
