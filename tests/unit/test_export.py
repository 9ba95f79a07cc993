# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for Markdown export."""

from pathlib import Path

from codeviz.analyzer import analyze_code
from codeviz.export import render_markdown, write_markdown


def test_ph2_exp_001_render_includes_all_populated_sections() -> None:
    result = analyze_code("import math\ndef f():\n    return 1\nx = 5")

    document = render_markdown(result)

    assert document.startswith("# Code Explanation\n")
    assert "- Imports: 1" in document
    assert "- Functions: 1" in document
    assert "- Variables: 1" in document
    assert "- Complexity: low" in document
    assert "- `import math`" in document
    assert "- `f()`" in document
    assert "1. Line 1: This brings in a tool called 'math'" in document
    assert "4. Line 4: This creates a container called 'x'" in document
    assert "| `x` | `5` |" in document
    assert "## Source" not in document


def test_ph2_exp_002_render_omits_empty_sections() -> None:
    document = render_markdown(analyze_code("print('hi')"), title="Greeting")

    assert document.startswith("# Greeting\n")
    assert "## Imports & Dependencies" not in document
    assert "## Functions Defined" not in document
    assert "## Variables" not in document
    assert "## Step-by-Step Explanation" in document


def test_ph2_exp_003_render_appends_fenced_source() -> None:
    source = "x = 5\nprint(x)\n"

    document = render_markdown(analyze_code(source), source=source)

    assert "## Source\n\n```python\nx = 5\nprint(x)\n```" in document


def test_ph2_exp_004_render_marks_empty_explanation() -> None:
    document = render_markdown(analyze_code(""))

    assert "_No code lines to explain._" in document


def test_ph2_exp_005_pipe_characters_are_escaped_in_variable_table() -> None:
    document = render_markdown(analyze_code("flags = a | b"))

    assert "| `flags` | `a \\| b` |" in document


def test_ph2_exp_006_write_markdown_creates_parent_directories(tmp_path: Path) -> None:
    output_path = tmp_path / "exports" / "nested" / "explanation.md"
    result = analyze_code("x = 5")

    write_markdown(output_path=output_path, result=result)

    assert output_path.read_text(encoding="utf-8") == render_markdown(result)
