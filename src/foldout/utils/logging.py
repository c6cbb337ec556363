"""Log output for the foldout CLI.

Messages go to stderr so a rendered document or a --json report on stdout
stays clean. The mode is chosen from the global CLI flags: plain lines for
people (with timestamps under --verbose) or JSON lines under --ci.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TextIO

LOGGER_NAME = "foldout"


class LogMode(Enum):
    HUMAN = "human"
    VERBOSE = "verbose"
    JSON = "json"


_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31m",
}


def _is_tty(stream: TextIO | None) -> bool:
    target = stream if stream is not None else sys.stderr
    return bool(getattr(target, "isatty", None) and target.isatty())


class HumanFormatter(logging.Formatter):
    """Renders "[LEVEL] message", optionally colored and time-stamped."""

    def __init__(self, use_colors: bool = True, show_time: bool = False) -> None:
        super().__init__()
        self.use_colors = use_colors
        self.show_time = show_time

    def format(self, record: logging.LogRecord) -> str:
        tag = f"[{record.levelname}]"
        if self.use_colors:
            tag = f"{LEVEL_COLORS.get(record.levelno, _RESET)}{tag}{_RESET}"
        if self.show_time:
            tag += datetime.now().strftime("[%H:%M:%S]")
        return f"{tag} {record.getMessage()}"


class JSONFormatter(logging.Formatter):
    """One JSON object per record: level, ts, msg and any structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "ts": datetime.now(UTC).isoformat(),
            "msg": record.getMessage(),
        }
        entry.update(getattr(record, "extra_data", {}))
        return json.dumps(entry)


class FoldoutLogger(logging.Logger):
    def structured(self, level: int, msg: str, **fields: Any) -> None:
        """Log msg with extra fields that appear as keys in JSON output.

        Used by `validate` to attach the section index and source line.
        """
        if not self.isEnabledFor(level):
            return
        record = self.makeRecord(self.name, level, "(unknown)", 0, msg, (), None)
        if fields:
            record.extra_data = fields  # type: ignore[attr-defined]
        self.handle(record)


logging.setLoggerClass(FoldoutLogger)


def get_logger(name: str = LOGGER_NAME) -> FoldoutLogger:
    return logging.getLogger(name)  # type: ignore[return-value]


def setup_logging(
    mode: LogMode = LogMode.HUMAN,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Replace the foldout logger's handlers with one for the given mode.

    Args:
        mode: Line format to use
        level: Minimum level to emit
        stream: Destination (stderr when omitted)
    """
    if mode is LogMode.JSON:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = HumanFormatter(
            use_colors=_is_tty(stream),
            show_time=mode is LogMode.VERBOSE,
        )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)


def configure_from_cli(verbose: bool = False, quiet: bool = False, ci: bool = False) -> None:
    """Apply the --verbose, --quiet and --ci flags. --quiet wins over --verbose for the level."""
    if ci:
        mode = LogMode.JSON
    elif verbose:
        mode = LogMode.VERBOSE
    else:
        mode = LogMode.HUMAN

    level = logging.WARNING if quiet else logging.DEBUG if verbose else logging.INFO
    setup_logging(mode=mode, level=level)
