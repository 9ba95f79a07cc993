# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Terminal front end for the beginner code visualizer."""

import argparse
import json
import logging
import sys
import time
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.style import Style
from rich.table import Table
from rich.text import Text

from codeviz.analyzer import analyze_code
from codeviz.batch import BatchAnalyzer, SnippetError, SnippetReport
from codeviz.export import DEFAULT_TITLE, render_markdown, write_markdown
from codeviz.model import AnalysisResult, AnimationStep
from codeviz.playback import DEFAULT_INTERVAL_SECONDS, Playback
from codeviz.samples import SAMPLES, get_sample
from codeviz.sniffer import UnrecognizedSourceError, ensure_recognized, sniff

logger = logging.getLogger(__name__)

COMPLEXITY_STYLES: dict[str, str] = {
    "low": "green",
    "medium": "yellow",
    "high": "red",
}


class ValidationError(RuntimeError):
    """Represent user input validation failure."""


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="codeviz")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check")
    _add_source_arguments(check_parser)

    analyze_parser = subparsers.add_parser("analyze")
    _add_source_arguments(analyze_parser)
    analyze_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    analyze_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )

    play_parser = subparsers.add_parser("play")
    _add_source_arguments(play_parser)
    play_parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL_SECONDS,
        help="Seconds between steps; 0 replays without waiting.",
    )
    play_parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Stop after showing N steps.",
    )

    export_parser = subparsers.add_parser("export")
    _add_source_arguments(export_parser)
    export_parser.add_argument(
        "--output",
        required=False,
        help="Markdown file path; the document is printed when omitted.",
    )
    export_parser.add_argument("--title", default=DEFAULT_TITLE, help="Document title.")
    export_parser.add_argument(
        "--include-source",
        action="store_true",
        help="Append the analyzed source as a fenced block.",
    )

    batch_parser = subparsers.add_parser("batch")
    batch_parser.add_argument("--path", required=True, help="Root path to analyze.")
    batch_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    batch_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )

    subparsers.add_parser("samples")
    return parser


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--file", help="Path of a snippet file.")
    group.add_argument("--code", help="Snippet text.")
    group.add_argument("--sample", help="Key of a built-in sample.")


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "samples":
        _write_samples(stdout=stdout)
        return 0
    if args.command == "batch":
        return _run_batch(args=args, stdout=stdout, stderr=stderr)

    try:
        source = load_source(args)
    except ValidationError as exc:
        logger.warning(f"Validation failed (error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    if args.command == "check":
        return _run_check(source=source, stdout=stdout)

    try:
        ensure_recognized(source)
    except UnrecognizedSourceError as exc:
        logger.warning(f"Validation failed (reason={exc.reason})")
        stderr.write(f"{exc}\n")
        return 2

    if args.command == "analyze":
        return _run_analyze(args=args, source=source, stdout=stdout, stderr=stderr)
    if args.command == "play":
        return _run_play(args=args, source=source, stdout=stdout, stderr=stderr)
    if args.command == "export":
        return _run_export(args=args, source=source, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def load_source(args: argparse.Namespace) -> str:
    """Resolve the snippet selected by ``--file``, ``--code`` or ``--sample``.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Snippet text.

    Raises:
        ValidationError: If the file cannot be read or the sample is unknown.
    """
    if args.code is not None:
        return args.code
    if args.sample is not None:
        try:
            return get_sample(args.sample).code
        except KeyError as exc:
            known = ", ".join(sample.key for sample in SAMPLES)
            raise ValidationError(
                f"Unknown sample: {args.sample} (known: {known})"
            ) from exc
    file_path = Path(args.file)
    if not file_path.is_file():
        raise ValidationError(f"File does not exist: {file_path}")
    try:
        return file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Failed to read file: {file_path} ({exc})") from exc


def _run_check(source: str, stdout: TextIO) -> int:
    verdict = sniff(source)
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        f"recognized={str(verdict.recognized).lower()} reason={verdict.reason}",
        markup=False,
        highlight=False,
    )
    return 0 if verdict.recognized else 1


def _run_analyze(
    args: argparse.Namespace, source: str, stdout: TextIO, stderr: TextIO
) -> int:
    """Run analyze command.

    Args:
        args: Parsed CLI arguments.
        source: Recognized snippet text.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    if args.output and args.format != "json":
        logger.warning(f"Output path requires JSON format (format={args.format})")
        stderr.write("--output requires --format json\n")
        return 2

    result = analyze_code(source)
    if args.format == "table":
        _write_analysis_tables(result=result, stdout=stdout)
        return 0

    payload = result.to_dict()
    if args.output:
        try:
            _write_json_file(payload=payload, output_path=Path(args.output))
        except OSError as exc:
            logger.warning(
                f"Failed to write JSON output file (output_path={args.output} error={exc})"
            )
            stderr.write(f"Failed to write JSON output file: {args.output}\n")
            return 2
    else:
        _write_json(payload=payload, stdout=stdout)
    return 0


def _run_play(
    args: argparse.Namespace, source: str, stdout: TextIO, stderr: TextIO
) -> int:
    """Replay animation steps on the console.

    Args:
        args: Parsed CLI arguments.
        source: Recognized snippet text.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    if args.interval < 0:
        logger.warning(f"Invalid interval (interval={args.interval})")
        stderr.write("interval must be >= 0\n")
        return 2
    if args.max_steps is not None and args.max_steps <= 0:
        logger.warning(f"Invalid max steps (max_steps={args.max_steps})")
        stderr.write("max-steps must be > 0\n")
        return 2

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    playback = Playback(analyze_code(source).animation)
    if not playback.steps:
        console.print("No animation data available")
        return 0

    limit = args.max_steps or len(playback.steps)
    playback.toggle()
    shown = 0
    while True:
        _write_step(console=console, playback=playback)
        shown += 1
        if shown >= limit:
            break
        if args.interval > 0:
            time.sleep(args.interval)
        if not playback.tick():
            break
    if playback.state == "playing":
        if playback.current_index + 1 == len(playback.steps):
            playback.tick()
        else:
            playback.toggle()
    console.print(f"status={playback.state} steps_shown={shown}")
    return 0


def _run_export(
    args: argparse.Namespace, source: str, stdout: TextIO, stderr: TextIO
) -> int:
    """Run export command.

    Args:
        args: Parsed CLI arguments.
        source: Recognized snippet text.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    result = analyze_code(source)
    included_source = source if args.include_source else None
    if args.output:
        try:
            write_markdown(
                output_path=Path(args.output),
                result=result,
                source=included_source,
                title=args.title,
            )
        except OSError as exc:
            logger.warning(
                f"Failed to write Markdown file (output_path={args.output} error={exc})"
            )
            stderr.write(f"Failed to write Markdown file: {args.output}\n")
            return 2
        return 0

    document = render_markdown(result=result, source=included_source, title=args.title)
    stdout.write(document)
    return 0


def _run_batch(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run batch command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    root_path = Path(args.path)
    if not root_path.is_dir():
        logger.warning(f"Path is not a directory (path={root_path})")
        stderr.write(f"Path is not a directory: {root_path}\n")
        return 2
    if args.output and args.format != "json":
        logger.warning(f"Output path requires JSON format (format={args.format})")
        stderr.write("--output requires --format json\n")
        return 2

    try:
        reports, errors = BatchAnalyzer().analyze(root_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read .gitignore files (error={exc})")
        stderr.write(f"Failed to read .gitignore files: {exc}\n")
        return 2

    _write_errors(errors=errors, stderr=stderr)
    if args.format == "table":
        _write_batch_table(reports=reports, root_path=root_path, stdout=stdout)
        return 0

    payload = {
        "reports": [asdict(report) for report in reports],
        "errors": [asdict(error) for error in errors],
    }
    if args.output:
        try:
            _write_json_file(payload=payload, output_path=Path(args.output))
        except OSError as exc:
            logger.warning(
                f"Failed to write JSON output file (output_path={args.output} error={exc})"
            )
            stderr.write(f"Failed to write JSON output file: {args.output}\n")
            return 2
    else:
        _write_json(payload=payload, stdout=stdout)
    return 0


def _write_errors(errors: list[SnippetError], stderr: TextIO) -> None:
    for error in errors:
        stderr.write(f"snippet_error: {error.file_path}: {error.message}\n")


def _write_json(payload: dict, stdout: TextIO) -> None:
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(payload, indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def _write_json_file(payload: dict, output_path: Path) -> None:
    """Write raw JSON payload to an output file.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8"
    )


def _write_analysis_tables(result: AnalysisResult, stdout: TextIO) -> None:
    """Render overview, explanation, flowchart and animation tables."""
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    rule_style = Style(color="cyan")

    console.rule("Overview", style=rule_style, characters="-")
    complexity_style = COMPLEXITY_STYLES.get(result.complexity, "white")
    console.print(
        f"imports={len(result.imports)} functions={len(result.functions)} "
        f"variables={len(result.variables)} "
        f"complexity=[{complexity_style}]{result.complexity}[/{complexity_style}]",
        highlight=False,
    )

    console.rule("Explanation", style=rule_style, characters="-")
    explanation_table = Table(show_header=True, expand=True)
    explanation_table.add_column("#", justify="right", ratio=1)
    explanation_table.add_column("explanation", ratio=12, overflow="fold")
    for position, sentence in enumerate(result.explanation, start=1):
        explanation_table.add_row(str(position), Text(sentence))
    console.print(explanation_table)

    console.rule("Flowchart", style=rule_style, characters="-")
    flow_table = Table(show_header=True, expand=True)
    flow_table.add_column("id", ratio=2)
    flow_table.add_column("type", ratio=2)
    flow_table.add_column("text", ratio=4, overflow="fold")
    flow_table.add_column("y", justify="right", ratio=1)
    flow_table.add_column("next", ratio=2)
    for node in result.flowchart:
        flow_table.add_row(
            node.id,
            node.type,
            Text(node.display_text),
            str(node.y),
            ", ".join(node.connections) or "-",
        )
    console.print(flow_table)

    console.rule("Animation", style=rule_style, characters="-")
    step_table = Table(show_header=True, expand=True)
    step_table.add_column("line", justify="right", ratio=1)
    step_table.add_column("description", ratio=5, overflow="fold")
    step_table.add_column("variables", ratio=4, overflow="fold")
    step_table.add_column("output", ratio=3, overflow="fold")
    for step in result.animation:
        step_table.add_row(
            str(step.line_number),
            Text(step.description),
            Text(_format_variables(step)),
            Text(step.output if step.output is not None else ""),
        )
    console.print(step_table)


def _write_step(console: Console, playback: Playback) -> None:
    step = playback.current
    if step is None:
        return
    console.rule(
        f"Step {playback.current_index + 1} of {len(playback.steps)}",
        style=Style(color="cyan"),
        characters="-",
    )
    console.print(
        f"line={step.line_number} {step.description}", markup=False, highlight=False
    )
    if step.variables:
        console.print(f"variables: {_format_variables(step)}", markup=False, highlight=False)
    for line in playback.output:
        console.print(f"> {line}", markup=False, highlight=False)


def _format_variables(step: AnimationStep) -> str:
    return ", ".join(f"{name}={value}" for name, value in step.variables.items())


def _write_batch_table(
    reports: list[SnippetReport], root_path: Path, stdout: TextIO
) -> None:
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.rule(str(root_path.resolve()), style=Style(color="cyan"), characters="-")
    table = Table(show_header=True, show_lines=True, expand=True)
    table.add_column("file_path", ratio=4, overflow="fold")
    for column in ("code_lines", "functions", "imports", "variables", "steps", "nodes"):
        table.add_column(column, justify="right", ratio=1)
    table.add_column("complexity", ratio=1)
    for report in reports:
        table.add_row(
            Text(report.file_path),
            str(report.code_lines),
            str(report.functions),
            str(report.imports),
            str(report.variables),
            str(report.steps),
            str(report.nodes),
            report.complexity,
        )
    console.print(table)


def _write_samples(stdout: TextIO) -> None:
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for sample in SAMPLES:
        console.rule(f"{sample.key}: {sample.title}", style=Style(color="cyan"), characters="-")
        console.print(sample.description, markup=False, highlight=False)
        console.print(Markdown(f"```python\n{sample.code}\n```"))


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
