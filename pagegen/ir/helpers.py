"""Traversal and classification helpers shared by preprocessors and plugins."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

from .spec import Action, Node


def is_action_list(value: Any) -> bool:
    """Return True for a non-empty list whose items are all :class:`Action`."""
    return isinstance(value, list) and bool(value) and all(isinstance(item, Action) for item in value)


def is_slot_list(value: Any) -> bool:
    """Return True for a non-empty list whose items are all :class:`Node`."""
    return isinstance(value, list) and bool(value) and all(isinstance(item, Node) for item in value)


def actions_of(value: Any) -> List[Action]:
    """Normalise an ``Action`` / ``Action[]`` prop value into a list."""
    if isinstance(value, Action):
        return [value]
    if is_action_list(value):
        return list(value)
    return []


def iter_slot_nodes(node: Node) -> Iterator[Node]:
    """Yield the nodes carried by slot props of ``node`` in prop order."""
    for value in node.props.values():
        if isinstance(value, Node):
            yield value
        elif is_slot_list(value):
            yield from value


def walk(node: Node) -> Iterator[Node]:
    """Depth-first pre-order walk over children, then slot nodes."""
    yield node
    for child in node.children or []:
        yield from walk(child)
    for slot in iter_slot_nodes(node):
        yield from walk(slot)


def build_node_map(root: Node) -> Dict[str, Node]:
    """Index every node reachable from ``root`` by its id."""
    return {node.id: node for node in walk(root)}


__all__ = [
    "is_action_list",
    "is_slot_list",
    "actions_of",
    "iter_slot_nodes",
    "walk",
    "build_node_map",
]
