"""Public convenience functions for resource-tree.

Each call uses a fresh ``TreeBuilder`` (or the node's own lookups), so no
state is shared between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resource_tree.builder import Entries, TreeBuilder
from resource_tree.path import as_parsed

if TYPE_CHECKING:
    from resource_tree.config import TreeConfig
    from resource_tree.node import Node
    from resource_tree.protocols import ParsedPath

__all__ = ["build_tree", "request_paths", "resolve"]


def build_tree(entries: Entries, config: TreeConfig | None = None) -> Node:
    """Build a tree from ``(request_path, payload)`` entries.

    Args:
        entries: Mapping of request path to payload, or iterable of pairs.
        config:  Tree defaults.  Defaults to ``TreeConfig()`` when None.

    Returns:
        The root ``Node``.
    """
    return TreeBuilder(config=config).build(entries)


def resolve(root: Node, path: str | ParsedPath) -> Node | None:
    """Return the node ``path`` points at, or None.  Never creates nodes."""
    parsed = as_parsed(path)
    return root.dig(*parsed.node_names)


def request_paths(root: Node) -> list[str]:
    """Request paths of every resource under ``root``, depth-first pre-order."""
    return [resource.request_path for resource in root.flatten()]
