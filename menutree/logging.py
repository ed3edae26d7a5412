from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "MENUTREE_LOG_DIR",
        Path.home() / ".local" / "state" / "menutree" / "logs",
    )
)

# Menus are libraries first: stay silent until an application opts in.
logger.disable("menutree")


def _should_log_render(record) -> bool:
    """Filter per-item render logs - only show in TRACE mode."""
    tags = record["extra"].get("tags", [])

    if "render" in tags:
        return record["level"].no <= logger.level("TRACE").no

    return True


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
) -> Logger:
    """
    Setup logging sinks for a menu application.

    Log Files:
    - menu.log: INFO+ events, DEBUG+ with debug, TRACE+ with trace (3 day retention)
    - structured.jsonl: Structured JSON logs for analysis (7 day retention)

    The console sink writes to stderr so it never interleaves with the menu
    itself on stdout.

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (very verbose)
        log_dir: Custom log directory (defaults to ~/.local/state/menutree/logs)
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})
    logger.enable("menutree")

    if trace:
        level = "TRACE"
    elif debug:
        level = "DEBUG"
    else:
        level = "INFO"

    # SINK 1: Console (stderr)
    logger.add(
        sys.stderr,
        level=level,
        backtrace=False,
        diagnose=False,
        filter=_should_log_render,
        colorize=True,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]: <10}</cyan> | "
            "{message}"
        ),
    )

    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # SINK 2: Menu log
    logger.add(
        log_dir / "menu.log",
        level=level,
        rotation="5 MB",
        retention="3 days",
        compression="zip",
        backtrace=debug or trace,
        diagnose=debug or trace,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{extra[source]: <10} | "
            "{extra[tags]} | "
            "{message}"
        ),
    )

    # SINK 3: Structured JSON Log (INFO+)
    logger.add(
        log_dir / "structured.jsonl",
        level="INFO",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
        serialize=True,
        format="{message}",
    )

    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["menu", "render"])
        source: Source component (e.g., "menu", "console")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating domain-specific loggers with automatic context.
    """

    @staticmethod
    def for_menu() -> Logger:
        """Logger for the menu loop and navigation."""
        return logger.bind(source="menu", tags=["menu"])

    @staticmethod
    def for_ui() -> Logger:
        """Logger for presenters and console rendering."""
        return logger.bind(source="ui", tags=["ui"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for startup, shutdown and settings."""
        return logger.bind(source="system", tags=["system"])
