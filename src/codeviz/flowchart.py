# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Vertical ladder layout for flow diagram nodes."""

from dataclasses import dataclass

from codeviz.model import FlowNode, NodeType

NODE_X = 200
START_Y = 100
Y_STEP = 80


@dataclass(frozen=True)
class _PendingNode:
    id: str
    type: NodeType
    text: str
    y: int


class FlowchartBuilder:
    """Collect nodes in emission order and link them into a single chain."""

    def __init__(self) -> None:
        self._nodes: list[_PendingNode] = []
        self._next_id = 1
        self._y = START_Y

    def add(self, node_type: NodeType, text: str) -> str:
        """Append a node one step below the previous one.

        Args:
            node_type: Node category.
            text: Node label.

        Returns:
            The generated node id.
        """
        self._y += Y_STEP
        node_id = f"node_{self._next_id}"
        self._next_id += 1
        self._nodes.append(_PendingNode(id=node_id, type=node_type, text=text, y=self._y))
        return node_id

    def build(self) -> list[FlowNode]:
        """Wrap the collected nodes with start/end markers and connect them.

        Returns:
            Nodes from ``start`` to ``end``; each links only to its successor.
        """
        pending = [
            _PendingNode(id="start", type="start", text="Start", y=START_Y),
            *self._nodes,
            _PendingNode(id="end", type="end", text="End", y=self._y + Y_STEP),
        ]
        nodes: list[FlowNode] = []
        for position, node in enumerate(pending):
            connections = [pending[position + 1].id] if position + 1 < len(pending) else []
            nodes.append(
                FlowNode(
                    id=node.id,
                    type=node.type,
                    text=node.text,
                    x=NODE_X,
                    y=node.y,
                    connections=connections,
                )
            )
        return nodes
