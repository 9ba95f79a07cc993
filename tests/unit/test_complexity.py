# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for complexity rating."""

import pytest

from codeviz.analyzer import analyze_code
from codeviz.complexity import rate_complexity


def _snippet(function_count: int, total_lines: int) -> str:
    lines = [f"def f{index}():" for index in range(function_count)]
    lines.extend(f"v{index} = {index}" for index in range(total_lines - function_count))
    return "\n".join(lines)


@pytest.mark.parametrize(
    ("function_count", "total_lines", "expected"),
    [
        (1, 10, "low"),
        (1, 11, "medium"),
        (0, 20, "medium"),
        (0, 21, "high"),
        (4, 5, "high"),
        (2, 3, "medium"),
        (3, 3, "medium"),
        (0, 0, "low"),
    ],
)
def test_ph1_cpx_001_analyzer_complexity_boundaries(
    function_count: int, total_lines: int, expected: str
) -> None:
    result = analyze_code(_snippet(function_count=function_count, total_lines=total_lines))

    assert len(result.functions) == function_count
    assert result.complexity == expected


def test_ph1_cpx_002_comments_and_blank_lines_do_not_count() -> None:
    source = "\n".join(["# note", "", *(f"v{i} = {i}" for i in range(10)), "   # tail"])

    assert analyze_code(source).complexity == "low"


def test_ph1_cpx_003_skipped_lines_still_count_toward_total() -> None:
    source = "\n".join(["total += 1"] * 11)

    result = analyze_code(source)

    assert result.explanation == []
    assert result.complexity == "medium"


def test_ph1_cpx_004_rate_complexity_thresholds_are_exclusive() -> None:
    assert rate_complexity(total_lines=10, function_count=1) == "low"
    assert rate_complexity(total_lines=20, function_count=3) == "medium"
    assert rate_complexity(total_lines=21, function_count=0) == "high"
    assert rate_complexity(total_lines=0, function_count=4) == "high"
