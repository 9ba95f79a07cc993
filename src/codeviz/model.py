# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for analysis artifacts."""

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

NodeType = Literal["start", "process", "decision", "end", "input", "output"]
Complexity = Literal["low", "medium", "high"]

DISPLAY_TEXT_LIMIT = 20


@dataclass(frozen=True)
class FlowNode:
    """Represent one element of the linear flow diagram.

    Attributes:
        id: ``start``, ``end`` or a generated ``node_<n>`` identifier.
        type: Node category used for rendering.
        text: Node label as produced by the analyzer.
        x: Horizontal position (constant for every node).
        y: Vertical position; grows by a fixed step per emitted node.
        connections: Outgoing node ids; at most the next node in emission order.
    """

    id: str
    type: NodeType
    text: str
    x: int
    y: int
    connections: list[str] = field(default_factory=list)

    @property
    def display_text(self) -> str:
        """Return the label shortened for diagram boxes."""
        return truncate(self.text, DISPLAY_TEXT_LIMIT)


@dataclass(frozen=True)
class AnimationStep:
    """Represent one replayable step of the animation timeline.

    Attributes:
        id: ``step_<index>`` where index is the 0-based source line index.
        line_number: Source line (1-based).
        description: Human readable action text.
        variables: Snapshot of every variable known up to this line.
        highlight: Whether the line is highlighted during playback.
        output: Printed text for print lines, ``None`` otherwise.
    """

    id: str
    line_number: int
    description: str
    variables: dict[str, str]
    highlight: bool = True
    output: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Represent the complete output of one analysis pass."""

    explanation: list[str]
    flowchart: list[FlowNode]
    animation: list[AnimationStep]
    variables: dict[str, str]
    functions: list[str]
    imports: list[str]
    complexity: Complexity

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the result."""
        return asdict(self)


def truncate(text: str, limit: int) -> str:
    """Shorten ``text`` to ``limit`` characters followed by an ellipsis."""
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text
