"""Resource and Resources: the format-keyed payloads stored on a node.

A node holds at most one ``Resource`` per format.  ``/docs/guide.html`` and
``/docs/guide.txt`` are two resources on the same ``guide`` node, keyed by
"html" and "txt".

The ``data`` carried by a resource is opaque to this library: it is never
read, rendered or copied.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from resource_tree.errors import DuplicateFormatError

if TYPE_CHECKING:
    from resource_tree.node import Node

__all__ = ["Resource", "Resources"]


class Resource:
    """One payload attached to a node under a format.

    Attributes:
        node:   The node this resource belongs to.
        format: Format token, e.g. "html".
        data:   Opaque payload supplied by the caller.
    """

    __slots__ = ("data", "format", "node")

    def __init__(self, node: Node, format: str, data: Any = None) -> None:
        self.node = node
        self.format = format
        self.data = data

    @property
    def request_path(self) -> str:
        """The request path this resource answers to.

        Built from the node names top down.  The node's default format is
        implied and left off; any other format is appended as an extension.
        A root with a non-default format answers to "/<default_name>.<format>".
        """
        node = self.node
        names = [n.name for n in reversed(node.parents) if n.name is not None]
        if node.name is not None:
            names.append(node.name)

        if self.format == node.default_format:
            return "/" + "/".join(names)
        if not names:
            names.append(node.default_name)
        return "/" + "/".join(names) + f".{self.format}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: request_path={self.request_path!r}>"


class Resources:
    """Format-keyed collection of ``Resource`` objects owned by one node.

    Iterates in insertion order.  Satisfies the ``ResourceCollection``
    protocol structurally.

    Example::

        root = Node()
        root.resources.add_data("<h1>Home</h1>")
        root.resources.get()           # Resource with format "html"
        root.resources.get("txt")      # None
    """

    def __init__(self, node: Node) -> None:
        self._node = node
        self._registry: dict[str, Resource] = {}

    # ------------------------------------------------------------------
    # Collection protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Resource]:
        return iter(list(self._registry.values()))

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, format: object) -> bool:
        return format in self._registry

    @property
    def formats(self) -> list[str]:
        """Formats currently registered, in insertion order."""
        return list(self._registry)

    def get(self, format: str | None = None) -> Resource | None:
        """Return the resource for ``format``, or None.

        A ``None`` format means the owning node's ``default_format``.
        """
        return self._registry.get(self._format_or_default(format))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, resource: Resource) -> Resource:
        """Register ``resource`` under its format.

        Raises:
            DuplicateFormatError: If a resource with the same format exists.
        """
        if resource.format in self._registry:
            existing = self._registry[resource.format]
            msg = (
                f"Resource at {existing.request_path!r} already set with "
                f"format {resource.format!r}"
            )
            raise DuplicateFormatError(msg)
        self._registry[resource.format] = resource
        return resource

    def add_data(self, data: Any, format: str | None = None) -> Resource:
        """Attach ``data`` under ``format``, replacing the payload if one exists.

        Returns:
            The created or updated ``Resource``.
        """
        key = self._format_or_default(format)
        resource = self._registry.get(key)
        if resource is None:
            resource = Resource(node=self._node, format=key, data=data)
            self._registry[key] = resource
        else:
            resource.data = data
        return resource

    def remove(self, format: str | None = None) -> Resource | None:
        """Detach and return the resource for ``format``, or None."""
        return self._registry.pop(self._format_or_default(format), None)

    def clear(self) -> None:
        self._registry.clear()

    def _format_or_default(self, format: str | None) -> str:
        return format if format is not None else self._node.default_format
