"""Consistency checks for a Node tree.

``find_violations`` walks a tree and reports every place where the
parent/child edge is not bidirectional, a child is registered under a key
other than its own name, or a node is reachable twice.  It reads private
state directly and never mutates the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resource_tree.node import Node

__all__ = ["Violation", "ViolationKind", "find_violations"]


class ViolationKind(StrEnum):
    """What kind of inconsistency was found.

    - PARENT_MISMATCH -> "parent_mismatch" : a listed child points at another parent
    - NAME_MISMATCH   -> "name_mismatch"   : a child is keyed under a foreign name
    - CYCLE           -> "cycle"           : a node was reached more than once
    """

    PARENT_MISMATCH = auto()
    NAME_MISMATCH = auto()
    CYCLE = auto()


@dataclass(frozen=True, slots=True)
class Violation:
    """One inconsistency found in a tree.

    Attributes:
        kind:    The category of the problem.
        node:    The offending child node.
        message: Human-readable description.
    """

    kind: ViolationKind
    node: Node
    message: str


def find_violations(root: Node) -> list[Violation]:
    """Return every structural inconsistency reachable from ``root``.

    The walk is iterative, so deep trees do not hit the recursion limit.
    A node reached twice is reported once as a CYCLE and not descended into
    again.
    """
    violations: list[Violation] = []
    seen: set[int] = {id(root)}
    stack: list[Node] = [root]

    while stack:
        node = stack.pop()
        for key, child in node._registry.items():
            if child.parent is not node:
                violations.append(
                    Violation(
                        ViolationKind.PARENT_MISMATCH,
                        child,
                        f"{child.name!r} is listed under {node.name!r} "
                        f"but its parent is {_name_of(child.parent)!r}",
                    )
                )
            if key != child.name:
                violations.append(
                    Violation(
                        ViolationKind.NAME_MISMATCH,
                        child,
                        f"{child.name!r} is registered as {key!r} in {node.name!r}",
                    )
                )
            if id(child) in seen:
                violations.append(
                    Violation(
                        ViolationKind.CYCLE,
                        child,
                        f"{child.name!r} is reachable more than once",
                    )
                )
                continue
            seen.add(id(child))
            stack.append(child)

    return violations


def _name_of(node: Node | None) -> str | None:
    return node.name if node is not None else None
