# logger_utils.py - for logging messages and performance metrics, timestamps etc

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

# Directory where log files go when file logging is switched on
LOG_DIR = "logs"

# Path used by the CLI when config does not override it
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocompleter.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

# env override for the shared library logger
ENV_LEVEL = "PREFIX_AUTOCOMPLETE_LOG_LEVEL"


def norm_level(level: str) -> str:
    lvl = str(level).upper()
    if lvl == "WARN":
        lvl = "WARNING"
    if lvl not in LEVELS:
        raise ValueError(f"unknown log level: {level!r}")
    return lvl


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        level: str = "INFO",
        use_color: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.path = path
        self.level = norm_level(level)
        self.use_color = use_color
        self.stream = stream

    def configure(self, path=None, level=None, use_color=None) -> "Log":
        """Update settings in place (the shared LOG instance is imported by reference)."""
        if path is not None:
            self.path = path or None
        if level is not None:
            self.level = norm_level(level)
        if use_color is not None:
            self.use_color = bool(use_color)
        return self

    def enabled_for(self, level: str) -> bool:
        return LEVELS[norm_level(level)] >= LEVELS[self.level]

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file (if any) and echo it to the console.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        level = norm_level(level)
        if not self.enabled_for(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        # console goes to stderr so it never mixes with query output
        out = self.stream or sys.stderr
        if self.use_color:
            out.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            out.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timing, counts etc) at INFO.
        Example: [2026-01-01 12:45:02] INFO    | top_matches: 0.123ms
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with LOG.time_block("build"):
                do_some_work()
        It logs how long the block took, and the timer keeps `.elapsed`.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label):
        self.log = log
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed * 1000.0, 3), "ms")


# shared logger for library code; the CLI reconfigures it from config
LOG = Log(level=os.environ.get(ENV_LEVEL, "WARNING"))
