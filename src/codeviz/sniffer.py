# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Heuristic gate deciding whether a snippet looks like Python source."""

import logging
import re
from dataclasses import dataclass

from codeviz.lines import strip_byte_order_mark

logger = logging.getLogger(__name__)

# Foreign syntax; any hit rejects the snippet even if Python markers exist.
DISQUALIFYING_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("braced_block", re.compile(r"\{[^{}]*\n[^{}]*\}")),
    ("semicolon_terminator", re.compile(r";\s*$", re.MULTILINE)),
    ("var_declaration", re.compile(r"\bvar\s+\w+\s*=")),
    ("let_declaration", re.compile(r"\blet\s+\w+\s*=")),
    ("const_declaration", re.compile(r"\bconst\s+\w+\s*=")),
    ("function_keyword", re.compile(r"function\s+\w+\s*\(")),
    ("public_modifier", re.compile(r"\bpublic\s+(class|static)")),
    ("private_modifier", re.compile(r"\bprivate\s+(class|static)")),
    ("preprocessor_include", re.compile(r"#include\s*<")),
    ("c_main", re.compile(r"\bint\s+main\s*\(")),
)

CONFIRMING_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("def_header", re.compile(r"^\s*def\s+\w+\s*\(", re.MULTILINE)),
    ("class_header", re.compile(r"^\s*class\s+\w+", re.MULTILINE)),
    ("if_header", re.compile(r"^\s*if\s+.*:", re.MULTILINE)),
    ("for_header", re.compile(r"^\s*for\s+\w+\s+in\s+.*:", re.MULTILINE)),
    ("while_header", re.compile(r"^\s*while\s+.*:", re.MULTILINE)),
    ("try_header", re.compile(r"^\s*try\s*:", re.MULTILINE)),
    ("import_statement", re.compile(r"^\s*import\s+\w+", re.MULTILINE)),
    ("from_import_statement", re.compile(r"^\s*from\s+\w+\s+import", re.MULTILINE)),
    ("print_call", re.compile(r"print\s*\(")),
    ("hash_comment", re.compile(r"^\s*#", re.MULTILINE)),
    ("colon_terminator", re.compile(r":\s*$", re.MULTILINE)),
)

_INDENTED_LINE = re.compile(r"^\s{4,}|^\s*\t")


class UnrecognizedSourceError(RuntimeError):
    """Represent input that does not look like Python source."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Input does not look like Python code (reason={reason})")
        self.reason = reason


@dataclass(frozen=True)
class SniffResult:
    """Represent the sniffer verdict and the rule that produced it.

    Attributes:
        recognized: Whether the snippet is plausible Python.
        reason: Name of the deciding rule, e.g. ``c_main`` or ``def_header``.
    """

    recognized: bool
    reason: str


def sniff(text: str) -> SniffResult:
    """Classify a snippet and report the deciding rule.

    Args:
        text: Candidate source snippet.

    Returns:
        Verdict with the name of the rule that decided it.
    """
    text = strip_byte_order_mark(text)
    if not text.strip():
        return SniffResult(recognized=False, reason="empty")

    for name, pattern in DISQUALIFYING_PATTERNS:
        if pattern.search(text):
            logger.debug(f"Snippet rejected by disqualifier (rule={name})")
            return SniffResult(recognized=False, reason=name)

    for name, pattern in CONFIRMING_PATTERNS:
        if pattern.search(text):
            return SniffResult(recognized=True, reason=name)

    lines = [line for line in text.split("\n") if line.strip()]
    has_indentation = any(_INDENTED_LINE.search(line) for line in lines)
    if has_indentation and len(lines) > 1:
        return SniffResult(recognized=True, reason="indentation")
    return SniffResult(recognized=False, reason="no_python_markers")


def is_recognized(text: str) -> bool:
    """Return whether ``text`` is plausible input for the analyzer."""
    return sniff(text).recognized


def ensure_recognized(text: str) -> None:
    """Raise when ``text`` does not look like Python.

    Raises:
        UnrecognizedSourceError: If the sniffer rejects the snippet.
    """
    result = sniff(text)
    if not result.recognized:
        raise UnrecognizedSourceError(result.reason)
