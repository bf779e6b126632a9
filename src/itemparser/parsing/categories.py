"""Character classification for delimiter patterns.

Membership is fixed: ASCII letters and digits, a small whitespace set, ASCII
punctuation, a handful of currency and typographic symbols, and newline.
Everything else is ``Category.OTHER``.
"""

from __future__ import annotations

from itemparser.models import Category

LETTERS_AND_DIGITS = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)
WHITESPACE = " \t\r"
PUNCTUATION = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
SYMBOLS = "€£¥©®™§¶±÷×°"
NEWLINE = "\n"


def _build_table() -> dict[str, Category]:
    table: dict[str, Category] = {}
    for chars, category in (
        (LETTERS_AND_DIGITS, Category.LETTER_OR_DIGIT),
        (WHITESPACE, Category.WHITESPACE),
        (PUNCTUATION, Category.PUNCTUATION),
        (SYMBOLS, Category.SYMBOL),
        (NEWLINE, Category.NEWLINE),
    ):
        for char in chars:
            table[char] = category
    return table


_CATEGORY_TABLE: dict[str, Category] = _build_table()


def classify(char: str) -> Category:
    """Return the category of a single character.

    Total over all strings: anything outside the fixed tables is ``OTHER``.
    """
    return _CATEGORY_TABLE.get(char, Category.OTHER)


def classify_text(text: str) -> list[Category]:
    """Classify every character of *text*, in order."""
    return [_CATEGORY_TABLE.get(char, Category.OTHER) for char in text]


def absorbs(previous: Category, current: Category) -> bool:
    """Whether *current* folds into a run of *previous*.

    Whitespace and punctuation after a letter run stay in that run, and
    whitespace after punctuation stays in the punctuation run.
    """
    if previous is Category.LETTER_OR_DIGIT:
        return current in (Category.WHITESPACE, Category.PUNCTUATION)
    if previous is Category.PUNCTUATION:
        return current is Category.WHITESPACE
    return False
