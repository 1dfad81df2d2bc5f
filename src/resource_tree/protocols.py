"""Structural protocols for the collaborators a ``Node`` consumes.

``Node.get`` accepts any ``ParsedPath`` in place of a path string, and
``Node(resources_factory=...)`` accepts any factory producing a
``ResourceCollection``.  ``Resources`` is only the default factory.  Any object
with the right attributes passes ``isinstance`` checks, no inheritance required.

Example::

    from resource_tree.protocols import ResourceCollection

    class Payloads:
        def __init__(self, node):
            self._items = {}

        def __iter__(self):
            return iter(self._items.values())

        def get(self, format=None):
            return self._items.get(format)

        @property
        def formats(self):
            return list(self._items)

    assert isinstance(Payloads(None), ResourceCollection)  # True
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Protocol, runtime_checkable

__all__ = ["ParsedPath", "ResourceCollection"]


@runtime_checkable
class ParsedPath(Protocol):
    """A request path split into node-name segments plus a format token."""

    @property
    def node_names(self) -> Sequence[str]: ...

    @property
    def format(self) -> str | None: ...


@runtime_checkable
class ResourceCollection(Protocol):
    """The per-node payload collection.

    Must support:
    - Iteration over its entries (used by ``Node.flatten``).
    - ``get(format)`` returning the matching entry or ``None`` (used by ``Node.get``).
    - ``formats`` listing the known format tokens (used for display).
    """

    def __iter__(self) -> Iterator[Any]: ...

    def get(self, format: str | None = None) -> Any: ...

    @property
    def formats(self) -> list[str]: ...
