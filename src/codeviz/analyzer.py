# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Single-pass line analyzer producing explanation, flowchart and animation."""

import logging
import re
from dataclasses import dataclass, field

from codeviz import explanations
from codeviz.complexity import rate_complexity
from codeviz.flowchart import FlowchartBuilder
from codeviz.lines import LineCategory, SourceLine, classify_line, iter_source_lines
from codeviz.model import AnalysisResult, AnimationStep, NodeType, truncate

logger = logging.getLogger(__name__)

OTHER_NODE_TEXT_LIMIT = 30

_FROM_IMPORT = re.compile(r"from\s+(\w+)\s+import\s+(.+)")
_FUNCTION_HEADER = re.compile(r"def\s+(\w+)\s*\(")
_ASSIGNMENT = re.compile(r"(\w+)\s*=\s*(.+)")
_FOR_EACH = re.compile(r"for\s+(\w+)\s+in\s+(.+):")
# Greedy single capture; nested parentheses are not balanced.
_PRINT_ARGUMENT = re.compile(r"print\s*\(\s*(.+)\s*\)")
_QUOTES = re.compile(r"['\"]")


@dataclass(frozen=True)
class _LineOutcome:
    explanation: str
    node_type: NodeType
    node_text: str
    step_description: str | None
    step_output: str | None = None


@dataclass
class _AnalysisState:
    explanation: list[str] = field(default_factory=list)
    flowchart: FlowchartBuilder = field(default_factory=FlowchartBuilder)
    animation: list[AnimationStep] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)
    functions: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    total_lines: int = 0


class LineAnalyzer:
    """Classify beginner Python line by line and derive the three views."""

    def analyze(self, source: str) -> AnalysisResult:
        """Analyze a snippet.

        Never raises for string input: unrecognized constructs fall through to
        the generic category and lines whose captures fail are skipped.

        Args:
            source: Raw snippet text.

        Returns:
            The explanation, flowchart, animation and tallies for ``source``.
        """
        state = _AnalysisState()
        for line in iter_source_lines(source):
            state.total_lines += 1
            category = classify_line(line.text)
            outcome = self._handle(category=category, line=line, state=state)
            if outcome is None:
                logger.debug(
                    f"Skipping line with unmatched capture (line={line.number} category={category})"
                )
                continue
            self._record(line=line, outcome=outcome, state=state)

        complexity = rate_complexity(
            total_lines=state.total_lines, function_count=len(state.functions)
        )
        flowchart = state.flowchart.build()
        logger.info(
            f"Analysis completed (lines={state.total_lines} nodes={len(flowchart)} "
            f"steps={len(state.animation)} complexity={complexity})"
        )
        return AnalysisResult(
            explanation=state.explanation,
            flowchart=flowchart,
            animation=state.animation,
            variables=dict(state.variables),
            functions=state.functions,
            imports=state.imports,
            complexity=complexity,
        )

    def _handle(
        self, category: LineCategory, line: SourceLine, state: _AnalysisState
    ) -> _LineOutcome | None:
        if category == "import":
            return self._handle_import(line.text, state)
        if category == "function":
            return self._handle_function(line.text, state)
        if category == "assignment":
            return self._handle_assignment(line.text, state)
        if category == "conditional":
            return self._handle_conditional(line.text)
        if category == "loop":
            return self._handle_loop(line.text)
        if category == "print":
            return self._handle_print(line.text)
        return self._handle_other(line.text)

    def _record(
        self, line: SourceLine, outcome: _LineOutcome, state: _AnalysisState
    ) -> None:
        state.explanation.append(
            explanations.with_line_number(line.number, outcome.explanation)
        )
        state.flowchart.add(outcome.node_type, outcome.node_text)
        if outcome.step_description is None:
            return
        state.animation.append(
            AnimationStep(
                id=f"step_{line.index}",
                line_number=line.number,
                description=outcome.step_description,
                variables=dict(state.variables),
                highlight=True,
                output=outcome.step_output,
            )
        )

    def _handle_import(self, text: str, state: _AnalysisState) -> _LineOutcome:
        state.imports.append(text)
        if text.startswith("import "):
            module_name = text.replace("import ", "", 1).strip()
            sentence = explanations.explain_module_import(module_name)
        else:
            match = _FROM_IMPORT.search(text)
            if match:
                sentence = explanations.explain_from_import(match.group(1), match.group(2))
            else:
                sentence = explanations.explain_generic_import()
        return _LineOutcome(
            explanation=sentence,
            node_type="process",
            node_text=f"Import: {text}",
            step_description=f"Importing: {text}",
        )

    def _handle_function(self, text: str, state: _AnalysisState) -> _LineOutcome | None:
        match = _FUNCTION_HEADER.search(text)
        if not match:
            return None
        name = match.group(1)
        state.functions.append(name)
        return _LineOutcome(
            explanation=explanations.explain_function(name),
            node_type="process",
            node_text=f"Function: {name}",
            step_description=None,
        )

    def _handle_assignment(self, text: str, state: _AnalysisState) -> _LineOutcome | None:
        match = _ASSIGNMENT.search(text)
        if not match:
            return None
        name, value = match.group(1), match.group(2)
        state.variables[name] = value
        return _LineOutcome(
            explanation=explanations.explain_assignment(name, value),
            node_type="process",
            node_text=f"{name} = {value}",
            step_description=f"Assigning {value} to {name}",
        )

    def _handle_conditional(self, text: str) -> _LineOutcome:
        condition = text.removeprefix("if ").removesuffix(":")
        return _LineOutcome(
            explanation=explanations.explain_condition(condition),
            node_type="decision",
            node_text=condition,
            step_description=f"Evaluating condition: {condition}",
        )

    def _handle_loop(self, text: str) -> _LineOutcome:
        loop_type = "for" if text.startswith("for") else "while"
        if loop_type == "for":
            match = _FOR_EACH.search(text)
            if match:
                sentence = explanations.explain_for_each(match.group(1), match.group(2))
            else:
                sentence = explanations.explain_generic_for()
        else:
            sentence = explanations.explain_while()
        return _LineOutcome(
            explanation=sentence,
            node_type="process",
            node_text=f"{loop_type.upper()} Loop",
            step_description=f"Starting {loop_type} loop",
        )

    def _handle_print(self, text: str) -> _LineOutcome | None:
        match = _PRINT_ARGUMENT.search(text)
        if not match:
            return None
        argument = match.group(1)
        return _LineOutcome(
            explanation=explanations.explain_print(argument),
            node_type="output",
            node_text=f"Print: {argument}",
            step_description=f"Printing: {argument}",
            step_output=_QUOTES.sub("", argument),
        )

    def _handle_other(self, text: str) -> _LineOutcome:
        return _LineOutcome(
            explanation=explanations.explain_other(text),
            node_type="process",
            node_text=truncate(text, OTHER_NODE_TEXT_LIMIT),
            step_description=f"Executing: {text}",
        )


def analyze_code(source: str) -> AnalysisResult:
    """Analyze a snippet with a fresh :class:`LineAnalyzer`."""
    return LineAnalyzer().analyze(source)
