"""itemparser - auto-fill title/body items from a few example highlights.

Paste a block of text, mark one or two titles and bodies, and the parser
learns the separators between them and splits the rest of the text the
same way.
"""

import logging
from logging.handlers import RotatingFileHandler

from itemparser.errors import (
    AmbiguousWrapError,
    AutoFillError,
    DegenerateParseError,
    ItemParserError,
)
from itemparser.models import Category, Highlight, ItemRecord, Role, Span
from itemparser.parsing import (
    AutoFillResult,
    add_highlight,
    build_pattern,
    classify,
    find_delimiter_match,
    reduce_to_items,
    run_autofill,
)
from itemparser.session import EditSession

__version__ = "0.1.0"

# Handlers attached by setup_logging(), replaced on the next call.
_log_handlers: list[logging.Handler] = []

__all__ = [
    "AmbiguousWrapError",
    "AutoFillError",
    "AutoFillResult",
    "Category",
    "DegenerateParseError",
    "EditSession",
    "Highlight",
    "ItemParserError",
    "ItemRecord",
    "Role",
    "Span",
    "add_highlight",
    "build_pattern",
    "classify",
    "find_delimiter_match",
    "reduce_to_items",
    "run_autofill",
    "setup_logging",
]


def setup_logging(level: str | None = None) -> None:
    """Configure logging to the console and, if configured, a rotating file.

    Safe to call more than once: handlers from an earlier call are replaced.

    Args:
        level: Console level name; defaults to ``app.log_level``.
    """
    from itemparser.config import get_settings

    app = get_settings().app
    console_level = (level or app.log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _log_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _log_handlers.clear()

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)
    _log_handlers.append(console_handler)

    if app.log_dir is None:
        return

    app.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = app.log_dir / "itemparser.log"

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)
    _log_handlers.append(file_handler)

    logging.info("Logging configured. Log file: %s", log_file.absolute())
