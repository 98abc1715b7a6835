"""Console logging utilities for the disassembler.

Diagnostics go to stderr by default so the listing on stdout can be piped
or diffed without noise.
"""

import sys
from typing import Optional, TextIO

LEVEL_ORDER = {
    "DEBUG": 0,
    "INFO": 1,
    "WARNING": 2,
    "ERROR": 3,
}

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}


class ConsoleLogger:
    """Minimal leveled console logger, colored only on a terminal."""

    def __init__(
        self,
        name: str = "c8dis",
        log_level: str = "WARNING",
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.name = name
        self.log_level = log_level.upper()
        self.stream = stream if stream is not None else sys.stderr
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )

    def _should_log(self, level: str) -> bool:
        return LEVEL_ORDER.get(level, 1) >= LEVEL_ORDER.get(self.log_level, 1)

    def _format_message(self, level: str, message: str) -> str:
        level_str = f"[{level:>8s}]"
        if self.use_colors:
            level_str = f"{LEVEL_COLORS.get(level, '')}{level_str}\033[0m"
        return f"{level_str}[{self.name}] {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        level = level.upper()
        if self._should_log(level):
            print(self._format_message(level, message), file=self.stream, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def error(self, message: str):
        self.log("ERROR", message)
