# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for the codeviz CLI."""

import io
import json
import re
from pathlib import Path

from cli.codeviz_cli import run


def _strip_ansi(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def _run(argv: list[str]) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    exit_code = run(argv, stdout=stdout, stderr=stderr)
    return exit_code, _strip_ansi(stdout.getvalue()), stderr.getvalue()


def test_ph3_cli_001_requires_a_command() -> None:
    exit_code, _, _ = _run([])

    assert exit_code == 2


def test_ph3_cli_002_source_options_are_mutually_exclusive() -> None:
    exit_code, _, _ = _run(["analyze", "--code", "x = 1", "--sample", "loops"])

    assert exit_code == 2


def test_ph3_cli_003_check_reports_recognized_snippet() -> None:
    exit_code, stdout, _ = _run(["check", "--code", "x = 5\nprint(x)"])

    assert exit_code == 0
    assert "recognized=true reason=print_call" in stdout


def test_ph3_cli_004_check_reports_foreign_snippet() -> None:
    exit_code, stdout, _ = _run(["check", "--code", "int main() {"])

    assert exit_code == 1
    assert "recognized=false reason=c_main" in stdout


def test_ph3_cli_005_analyze_rejects_unrecognized_source() -> None:
    exit_code, stdout, stderr = _run(["analyze", "--code", "const x = 1"])

    assert exit_code == 2
    assert stdout == ""
    assert "does not look like Python" in stderr


def test_ph3_cli_006_analyze_json_prints_full_result() -> None:
    exit_code, stdout, _ = _run(["analyze", "--code", "x = 5\nprint(x)", "--format", "json"])

    assert exit_code == 0
    payload = json.loads(stdout)
    assert payload["variables"] == {"x": "5"}
    assert payload["complexity"] == "low"
    assert [node["id"] for node in payload["flowchart"]] == ["start", "node_1", "node_2", "end"]
    assert payload["animation"][1]["output"] == "x"


def test_ph3_cli_007_analyze_json_writes_to_output_file(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "analysis.json"

    exit_code, stdout, _ = _run(
        ["analyze", "--sample", "function", "--format", "json", "--output", str(output_path)]
    )

    assert exit_code == 0
    assert stdout == ""
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["functions"] == ["greet"]


def test_ph3_cli_008_analyze_output_requires_json_format(tmp_path: Path) -> None:
    exit_code, _, stderr = _run(
        ["analyze", "--code", "print(1)", "--output", str(tmp_path / "a.json")]
    )

    assert exit_code == 2
    assert "--output requires --format json" in stderr


def test_ph3_cli_009_analyze_table_renders_sections() -> None:
    exit_code, stdout, _ = _run(["analyze", "--sample", "decisions"])

    assert exit_code == 0
    for heading in ("Overview", "Explanation", "Flowchart", "Animation"):
        assert heading in stdout
    assert "complexity=low" in stdout
    assert "decision" in stdout


def test_ph3_cli_010_analyze_reads_file_source(tmp_path: Path, write_file) -> None:
    source_path = write_file(tmp_path / "snippet.py", "import math\nprint(math.pi)")

    exit_code, stdout, _ = _run(["analyze", "--file", str(source_path), "--format", "json"])

    assert exit_code == 0
    assert json.loads(stdout)["imports"] == ["import math"]


def test_ph3_cli_011_missing_file_and_unknown_sample_fail_validation(tmp_path: Path) -> None:
    exit_code, _, stderr = _run(["analyze", "--file", str(tmp_path / "missing.py")])
    assert exit_code == 2
    assert "File does not exist" in stderr

    exit_code, _, stderr = _run(["analyze", "--sample", "nope"])
    assert exit_code == 2
    assert "Unknown sample: nope" in stderr


def test_ph3_cli_012_play_replays_all_steps_without_waiting() -> None:
    exit_code, stdout, _ = _run(["play", "--sample", "hello-world", "--interval", "0"])

    assert exit_code == 0
    assert "Step 1 of 2" in stdout
    assert "Step 2 of 2" in stdout
    assert "> Hello, World!" in stdout
    assert "> Welcome to Python!" in stdout
    assert "status=completed steps_shown=2" in stdout


def test_ph3_cli_013_play_stops_after_max_steps() -> None:
    exit_code, stdout, _ = _run(
        ["play", "--sample", "variables", "--interval", "0", "--max-steps", "1"]
    )

    assert exit_code == 0
    assert "status=paused steps_shown=1" in stdout


def test_ph3_cli_014_play_rejects_negative_interval() -> None:
    exit_code, _, stderr = _run(["play", "--code", "x = 1\nprint(x)", "--interval", "-1"])

    assert exit_code == 2
    assert "interval must be >= 0" in stderr


def test_ph3_cli_015_play_without_steps_reports_empty_timeline() -> None:
    exit_code, stdout, _ = _run(["play", "--code", "def f():", "--interval", "0"])

    assert exit_code == 0
    assert "No animation data available" in stdout


def test_ph3_cli_016_export_prints_markdown() -> None:
    exit_code, stdout, _ = _run(["export", "--sample", "loops", "--include-source"])

    assert exit_code == 0
    assert stdout.startswith("# Code Explanation")
    assert "```python" in stdout


def test_ph3_cli_017_export_writes_markdown_file(tmp_path: Path) -> None:
    output_path = tmp_path / "docs" / "loops.md"

    exit_code, _, _ = _run(
        ["export", "--sample", "loops", "--output", str(output_path), "--title", "Loops"]
    )

    assert exit_code == 0
    document = output_path.read_text(encoding="utf-8")
    assert document.startswith("# Loops")
    assert "## Step-by-Step Explanation" in document


def test_ph3_cli_018_batch_json_lists_reports_and_errors(tmp_path: Path, write_file) -> None:
    write_file(tmp_path / "ok.py", "x = 1\nprint(x)")
    write_file(tmp_path / "bad.py", "let y = 2")

    exit_code, stdout, stderr = _run(["batch", "--path", str(tmp_path), "--format", "json"])

    assert exit_code == 0
    payload = json.loads(stdout)
    assert [report["file_path"] for report in payload["reports"]] == ["ok.py"]
    assert [error["file_path"] for error in payload["errors"]] == ["bad.py"]
    assert "snippet_error: bad.py" in stderr


def test_ph3_cli_019_batch_table_and_missing_path(tmp_path: Path, write_file) -> None:
    write_file(tmp_path / "ok.py", "x = 1\nprint(x)")

    exit_code, stdout, _ = _run(["batch", "--path", str(tmp_path)])
    assert exit_code == 0
    assert "ok.py" in stdout

    exit_code, _, stderr = _run(["batch", "--path", str(tmp_path / "missing")])
    assert exit_code == 2
    assert "Path is not a directory" in stderr


def test_ph3_cli_020_samples_lists_catalogue() -> None:
    exit_code, stdout, _ = _run(["samples"])

    assert exit_code == 0
    for key in ("hello-world", "variables", "decisions", "loops", "function"):
        assert key in stdout


def test_ph3_cli_021_analyze_file_saved_with_byte_order_mark(tmp_path: Path) -> None:
    source_path = tmp_path / "bom.py"
    source_path.write_bytes(b"\xef\xbb\xbfimport math\n")

    exit_code, stdout, _ = _run(["analyze", "--file", str(source_path), "--format", "json"])

    assert exit_code == 0
    assert json.loads(stdout)["imports"] == ["import math"]
