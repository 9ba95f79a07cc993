# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Coarse complexity rating from line and function counts."""

from codeviz.model import Complexity

HIGH_LINE_THRESHOLD = 20
HIGH_FUNCTION_THRESHOLD = 3
MEDIUM_LINE_THRESHOLD = 10
MEDIUM_FUNCTION_THRESHOLD = 1


def rate_complexity(total_lines: int, function_count: int) -> Complexity:
    """Rate a snippet.

    Args:
        total_lines: Number of non-blank, non-comment lines.
        function_count: Number of function definitions (duplicates included).

    Returns:
        ``high``, ``medium`` or ``low``; thresholds are exclusive.
    """
    if total_lines > HIGH_LINE_THRESHOLD or function_count > HIGH_FUNCTION_THRESHOLD:
        return "high"
    if total_lines > MEDIUM_LINE_THRESHOLD or function_count > MEDIUM_FUNCTION_THRESHOLD:
        return "medium"
    return "low"
