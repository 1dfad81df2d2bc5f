"""Node: one path segment in a tree of request paths.

Given the request path ``/foo/bar/biz/buz.html`` a tree of nodes named
``foo``, ``bar``, ``biz`` and ``buz`` is built beneath an unnamed root, and the
``html`` resource is stored on ``buz``.  Reasoning over these parent, sibling
and child relationships is what powers things like navigation menus and
breadcrumbs.

Ownership runs from parent to children; the parent link is a plain
back-reference.  A resource keeps its whole ancestor chain reachable, so its
request path stays stable for as long as the resource is held.

Example::

    root = Node()
    guide = root.add_child("docs").add_child("guide")
    guide.resources.add_data("<h1>Guide</h1>")

    root.dig("docs", "guide") is guide      # True
    root.get("/docs/guide.html").data       # "<h1>Guide</h1>"
    root.get("/docs/missing.html")          # None, and nothing was created
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from resource_tree.config import DEFAULT_FORMAT, DEFAULT_NAME
from resource_tree.errors import (
    CyclicReparentError,
    DuplicateNameError,
    TreeStructureError,
)
from resource_tree.path import as_parsed
from resource_tree.protocols import ParsedPath, ResourceCollection
from resource_tree.resources import Resources

__all__ = ["Node"]

logger = logging.getLogger(__name__)

Setup = Callable[["Node"], Any]


class Node:
    """A vertex in the request-path tree.

    Attributes:
        name:           Segment name; None only for the root.
        default_format: Format assumed for paths without an extension.
        default_name:   Segment name that refers to the node itself.
        resources:      The payload collection owned by this node.
    """

    __slots__ = (
        "_name",
        "_parent",
        "_registry",
        "_resources_factory",
        "default_format",
        "default_name",
        "resources",
    )

    def __init__(
        self,
        parent: Node | None = None,
        name: str | None = None,
        default_format: str = DEFAULT_FORMAT,
        default_name: str = DEFAULT_NAME,
        resources_factory: Callable[[Node], ResourceCollection] = Resources,
        setup: Setup | None = None,
    ) -> None:
        """Initialise the node.

        Passing ``parent`` only stores the back-reference; use
        ``parent.add_child(name)`` or ``node.parent = parent`` to register
        the node as a child.

        Args:
            parent:            Parent node, or None for a root.
            name:              Segment name.
            default_format:    Inherited by every child created through ``add_child``.
            default_name:      Inherited likewise.
            resources_factory: Called with this node to build ``resources``.
                Defaults to ``Resources``.
            setup:             Called with the fully constructed node.
        """
        self._parent = parent
        self._name = name
        self._registry: dict[str, Node] = {}
        self._resources_factory = resources_factory
        self.default_format = default_format
        self.default_name = default_name
        self.resources = resources_factory(self)
        if setup is not None:
            setup(self)

    @property
    def name(self) -> str | None:
        return self._name

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Node | None:
        return self._parent

    @parent.setter
    def parent(self, parent: Node | None) -> None:
        """Move this node under ``parent`` as a single all-or-nothing step.

        Raises:
            CyclicReparentError: ``parent`` is this node or one of its descendants.
            DuplicateNameError: ``parent`` has a different child with this name.
            TreeStructureError: This node has no name to register under.
        """
        current = self.parent
        if parent is current:
            return

        if parent is None:
            self.remove()
            return

        self._check_reparent(parent)

        if current is not None:
            current._unregister(self)
        self._parent = parent
        parent._registry[self._name] = self  # type: ignore[index]
        logger.debug("Moved node %r under %r", self._name, parent._name)

    @property
    def children(self) -> list[Node]:
        """Materialized children, in creation order."""
        return list(self._registry.values())

    @property
    def siblings(self) -> list[Node]:
        """The parent's children, this node included; empty for a root."""
        parent = self.parent
        return parent.children if parent is not None else []

    @property
    def parents(self) -> list[Node]:
        """Ancestors from the immediate parent up to the root."""
        ancestors: list[Node] = []
        node = self.parent
        while node is not None:
            ancestors.append(node)
            node = node.parent
        return ancestors

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self._registry

    # ------------------------------------------------------------------
    # Building and lookup
    # ------------------------------------------------------------------

    def add_child(self, name: str, setup: Setup | None = None) -> Node:
        """Return the child named ``name``, creating it if needed.

        ``default_name`` refers to this node itself, so it returns ``self``
        without calling ``setup``.  Otherwise ``setup`` is called with the
        returned child, whether it was just created or already existed.
        """
        if name == self.default_name:
            return self

        child = self._registry.get(name)
        if child is None:
            child = self._build_child(name)
            self._registry[name] = child
        if setup is not None:
            setup(child)
        return child

    def dig(self, *names: str | None) -> Node | None:
        """Resolve ``names`` one segment at a time without creating nodes.

        An empty, None or ``default_name`` final segment resolves to the node
        reached so far.  Returns None when any segment has no matching child.
        """
        node = self
        remaining = list(names)
        while True:
            if not remaining:
                return node
            head, *remaining = remaining
            if not remaining and (not head or head == node.default_name):
                return node
            child = node._registry.get(head) if head is not None else None
            if child is None:
                return None
            node = child

    def get(self, path: str | ParsedPath) -> Any:
        """Return the resource at ``path``, or None.

        A string is parsed into node names and a format; any other object is
        used as an already-parsed path.  A missing format asks for the
        node's ``default_format``.
        """
        parsed = as_parsed(path)
        node = self.dig(*parsed.node_names)
        if node is None:
            return None
        return node.resources.get(parsed.format)

    def flatten(self) -> list[Any]:
        """Return every resource in this subtree, depth-first pre-order."""
        flat: list[Any] = []
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            flat.extend(node.resources)
            stack.extend(reversed(node.children))
        return flat

    def remove(self) -> None:
        """Detach this node from its parent; its own children stay with it."""
        parent = self.parent
        if parent is not None:
            parent._unregister(self)
            logger.debug("Removed node %r from %r", self._name, parent._name)
        self._parent = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _build_child(self, name: str) -> Node:
        return Node(
            parent=self,
            name=name,
            default_format=self.default_format,
            default_name=self.default_name,
            resources_factory=self._resources_factory,
        )

    def _unregister(self, child: Node) -> None:
        if self._registry.get(child._name) is child:  # type: ignore[arg-type]
            del self._registry[child._name]  # type: ignore[arg-type]

    def _check_reparent(self, parent: Node) -> None:
        ancestor: Node | None = parent
        while ancestor is not None:
            if ancestor is self:
                msg = (
                    f"Node {self._name!r} can't be moved under itself "
                    "or one of its descendants"
                )
                logger.debug(msg)
                raise CyclicReparentError(msg)
            ancestor = ancestor.parent

        existing = parent._registry.get(self._name)  # type: ignore[arg-type]
        if existing is not None and existing is not self:
            msg = (
                f"Node exists with the name {self._name!r} in {parent!r}. "
                "Remove existing node."
            )
            logger.debug(msg)
            raise DuplicateNameError(msg)

        if self._name is None:
            msg = "An unnamed node can't be registered as a child"
            logger.debug(msg)
            raise TreeStructureError(msg)

    def __repr__(self) -> str:
        formats = list(getattr(self.resources, "formats", []))
        request_paths = [getattr(r, "request_path", repr(r)) for r in self.resources]
        return (
            f"<{type(self).__name__}: name={self._name!r}, formats={formats!r}, "
            f"children={[c._name for c in self.children]!r}, "
            f"resource_request_paths={request_paths!r}>"
        )
