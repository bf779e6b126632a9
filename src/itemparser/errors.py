"""Exceptions raised by the auto-fill parser.

Only failures the caller must act on are raised. Empty separators,
unmatched delimiters and out-of-bounds extraction are recovered where they
happen.
"""

from __future__ import annotations


class ItemParserError(Exception):
    """Base class for itemparser errors."""


class AutoFillError(ItemParserError, ValueError):
    """Auto-fill is not applicable to the given text and highlights.

    Callers must not apply any state change when this is raised.
    """


class DegenerateParseError(AutoFillError):
    """Auto-fill started from, or produced, no highlights of either role."""


class AmbiguousWrapError(AutoFillError):
    """No example pair has the last-to-first role transition.

    Only raised when the wrap fallback strategy is ``"fail"``.
    """
