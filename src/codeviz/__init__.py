# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for the beginner code visualizer."""

from codeviz.analyzer import LineAnalyzer, analyze_code
from codeviz.model import AnalysisResult, AnimationStep, FlowNode
from codeviz.sniffer import (
    SniffResult,
    UnrecognizedSourceError,
    ensure_recognized,
    is_recognized,
    sniff,
)

__all__ = [
    "AnalysisResult",
    "AnimationStep",
    "FlowNode",
    "LineAnalyzer",
    "SniffResult",
    "UnrecognizedSourceError",
    "analyze_code",
    "ensure_recognized",
    "is_recognized",
    "sniff",
]
