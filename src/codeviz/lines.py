# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line splitting and first-match-wins line classification."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Literal

COMMENT_MARKER = "#"
BYTE_ORDER_MARK = "\ufeff"

LineCategory = Literal[
    "import", "function", "assignment", "conditional", "loop", "print", "other"
]


@dataclass(frozen=True)
class SourceLine:
    """Represent one recognized (non-blank, non-comment) source line.

    Attributes:
        index: 0-based position in the raw input.
        text: Line content with surrounding whitespace removed.
    """

    index: int
    text: str

    @property
    def number(self) -> int:
        """Return the 1-based line number."""
        return self.index + 1


def _is_import(text: str) -> bool:
    return text.startswith("import ") or text.startswith("from ")


def _is_function(text: str) -> bool:
    return text.startswith("def ")


def _is_assignment(text: str) -> bool:
    return "=" in text and "==" not in text


def _is_conditional(text: str) -> bool:
    return text.startswith("if ")


def _is_loop(text: str) -> bool:
    return text.startswith("for ") or text.startswith("while ")


def _is_print(text: str) -> bool:
    return "print(" in text


# Order is the tie-break policy: the first predicate that accepts a line wins.
CATEGORY_MATCHERS: tuple[tuple[LineCategory, Callable[[str], bool]], ...] = (
    ("import", _is_import),
    ("function", _is_function),
    ("assignment", _is_assignment),
    ("conditional", _is_conditional),
    ("loop", _is_loop),
    ("print", _is_print),
)


def is_recognized_line(raw_line: str) -> bool:
    """Return whether a raw line carries code (not blank, not a comment)."""
    stripped = raw_line.strip()
    return bool(stripped) and not stripped.startswith(COMMENT_MARKER)


def strip_byte_order_mark(source: str) -> str:
    """Drop a leading U+FEFF left by editors that save UTF-8 with a BOM."""
    return source.removeprefix(BYTE_ORDER_MARK)


def iter_source_lines(source: str) -> Iterator[SourceLine]:
    """Yield recognized lines with their original positions.

    Args:
        source: Raw snippet text.

    Yields:
        Trimmed recognized lines in source order.
    """
    for index, raw_line in enumerate(strip_byte_order_mark(source).split("\n")):
        if not is_recognized_line(raw_line):
            continue
        yield SourceLine(index=index, text=raw_line.strip())


def count_code_lines(source: str) -> int:
    """Count non-blank, non-comment lines."""
    return sum(1 for _ in iter_source_lines(source))


def classify_line(text: str) -> LineCategory:
    """Classify a trimmed line.

    Args:
        text: Trimmed recognized line.

    Returns:
        The first matching category, ``other`` when nothing matches.
    """
    for category, predicate in CATEGORY_MATCHERS:
        if predicate(text):
            return category
    return "other"
