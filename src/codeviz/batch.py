# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Best-effort analysis of every Python snippet below a directory."""

import logging
from dataclasses import dataclass
from pathlib import Path

import pathspec

from codeviz.analyzer import LineAnalyzer
from codeviz.lines import count_code_lines
from codeviz.model import Complexity
from codeviz.sniffer import sniff

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"


@dataclass(frozen=True)
class SnippetReport:
    """Summarize the analysis of one snippet file.

    Attributes:
        file_path: Root-relative POSIX path.
        code_lines: Non-blank, non-comment line count.
        complexity: Derived complexity label.
        functions: Number of function definitions.
        imports: Number of import statements.
        variables: Number of distinct assigned names.
        steps: Number of animation steps.
        nodes: Number of flowchart nodes including start and end.
    """

    file_path: str
    code_lines: int
    complexity: Complexity
    functions: int
    imports: int
    variables: int
    steps: int
    nodes: int


@dataclass(frozen=True)
class SnippetError:
    """Represent a snippet that could not be analyzed."""

    file_path: str
    message: str


class IgnoreMatcher:
    """Match root-relative paths against .gitignore patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        self._spec = spec

    @classmethod
    def from_root(cls, root: Path) -> "IgnoreMatcher":
        """Build a matcher from the root and nested .gitignore files.

        Args:
            root: Directory being scanned.

        Returns:
            Configured matcher; matches nothing when no .gitignore exists.

        Raises:
            OSError: If a .gitignore file cannot be read.
            UnicodeDecodeError: If a .gitignore file is not valid UTF-8.
        """
        patterns: list[str] = []
        for ignore_path in sorted(root.rglob(".gitignore")):
            base = ignore_path.parent.relative_to(root).as_posix()
            if base == ".":
                base = ""
            for line in ignore_path.read_text(encoding="utf-8").splitlines():
                patterns.append(_rebase_gitignore_line(line=line, base=base))
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(patterns))

    def excludes(self, relative_file: Path) -> bool:
        """Return whether a file or any of its parent directories is ignored."""
        for parent in reversed(relative_file.parents[:-1]):
            if self._spec.match_file(f"{parent.as_posix()}/"):
                return True
        return self._spec.match_file(relative_file.as_posix())


class BatchAnalyzer:
    """Analyze every ``*.py`` file below a root directory."""

    def __init__(self, analyzer: LineAnalyzer | None = None) -> None:
        self._analyzer = analyzer or LineAnalyzer()

    def analyze(self, root: Path) -> tuple[list[SnippetReport], list[SnippetError]]:
        """Analyze snippets beneath ``root``.

        Args:
            root: Directory to scan.

        Returns:
            Reports for analyzed snippets and recoverable per-file errors.

        Raises:
            OSError: If .gitignore files cannot be read.
            UnicodeDecodeError: If .gitignore files are not valid UTF-8.
        """
        matcher = IgnoreMatcher.from_root(root)
        reports: list[SnippetReport] = []
        errors: list[SnippetError] = []

        for file_path in sorted(root.rglob("*.py")):
            relative = file_path.relative_to(root)
            if GIT_DIR_NAME in relative.parts or matcher.excludes(relative):
                logger.debug(f"Skipping ignored snippet (file_path={relative.as_posix()})")
                continue
            try:
                source = file_path.read_text(encoding="utf-8-sig")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(
                    f"Skipping snippet due to read failure (file_path={relative.as_posix()} error={exc})"
                )
                errors.append(SnippetError(file_path=relative.as_posix(), message=str(exc)))
                continue

            verdict = sniff(source)
            if not verdict.recognized:
                logger.warning(
                    f"Skipping snippet not recognized as Python (file_path={relative.as_posix()} reason={verdict.reason})"
                )
                errors.append(
                    SnippetError(
                        file_path=relative.as_posix(),
                        message=f"not recognized as Python ({verdict.reason})",
                    )
                )
                continue

            result = self._analyzer.analyze(source)
            reports.append(
                SnippetReport(
                    file_path=relative.as_posix(),
                    code_lines=count_code_lines(source),
                    complexity=result.complexity,
                    functions=len(result.functions),
                    imports=len(result.imports),
                    variables=len(result.variables),
                    steps=len(result.animation),
                    nodes=len(result.flowchart),
                )
            )
        logger.info(
            f"Batch analysis completed (path={root} reports={len(reports)} errors={len(errors)})"
        )
        return reports, errors


def _rebase_gitignore_line(line: str, base: str) -> str:
    """Translate one nested .gitignore line to a root-relative pattern.

    Args:
        line: Original .gitignore line.
        base: Directory holding the .gitignore, relative to the root.

    Returns:
        Root-relative pattern line.
    """
    if not base or not line or line.lstrip().startswith("#"):
        return line
    if line.startswith(r"\!") or line.startswith(r"\#"):
        return line
    is_negation = line.startswith("!")
    pattern = line[1:] if is_negation else line
    anchored = pattern.startswith("/")
    pattern = pattern[1:] if anchored else pattern
    rebased = f"{base}/{pattern}" if pattern else base
    if anchored:
        rebased = f"/{rebased}"
    return f"!{rebased}" if is_negation else rebased
