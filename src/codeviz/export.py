# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Markdown export of an analysis result."""

import logging
from pathlib import Path

from codeviz.model import AnalysisResult

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Code Explanation"


def render_markdown(
    result: AnalysisResult,
    source: str | None = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """Render the explanation view as a Markdown document.

    Sections without content (no imports, no functions, no variables) are
    left out.

    Args:
        result: Analysis to export.
        source: Optional source snippet appended as a fenced block.
        title: Document heading.

    Returns:
        Markdown text ending with a newline.
    """
    lines: list[str] = [f"# {title}", "", "## Overview", ""]
    lines.append(f"- Imports: {len(result.imports)}")
    lines.append(f"- Functions: {len(result.functions)}")
    lines.append(f"- Variables: {len(result.variables)}")
    lines.append(f"- Complexity: {result.complexity}")
    lines.append("")

    if result.imports:
        lines.extend(["## Imports & Dependencies", ""])
        lines.extend(f"- `{statement}`" for statement in result.imports)
        lines.append("")

    if result.functions:
        lines.extend(["## Functions Defined", ""])
        lines.extend(f"- `{name}()`" for name in result.functions)
        lines.append("")

    lines.extend(["## Step-by-Step Explanation", ""])
    if result.explanation:
        lines.extend(
            f"{position}. {sentence}"
            for position, sentence in enumerate(result.explanation, start=1)
        )
    else:
        lines.append("_No code lines to explain._")
    lines.append("")

    if result.variables:
        lines.extend(["## Variables", "", "| Name | Value |", "| --- | --- |"])
        lines.extend(
            f"| `{name}` | `{_escape_cell(value)}` |"
            for name, value in result.variables.items()
        )
        lines.append("")

    if source is not None and source.strip():
        lines.extend(["## Source", "", "```python", source.rstrip("\n"), "```", ""])

    return "\n".join(lines)


def write_markdown(
    output_path: Path,
    result: AnalysisResult,
    source: str | None = None,
    title: str = DEFAULT_TITLE,
) -> None:
    """Write the Markdown export to a file.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    document = render_markdown(result=result, source=source, title=title)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")
    logger.info(f"Markdown export written (output_path={output_path})")


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|")
