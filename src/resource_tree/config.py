"""TreeConfig: immutable defaults shared by every node of a tree.

``default_format`` is the format assumed when a request path carries no
extension.  ``default_name`` is the segment that refers to the containing
node itself (``/docs/index.html`` lives on ``docs``, not on a child named
``index``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from resource_tree.node import Node

__all__ = ["DEFAULT_FORMAT", "DEFAULT_NAME", "TreeConfig"]

DEFAULT_FORMAT = "html"
DEFAULT_NAME = "index"


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable configuration for a resource tree.

    Attributes:
        default_format: Format used when a path has no extension.  Default "html".
        default_name: Segment name that collapses onto its parent node.
            Default "index".
    """

    default_format: str = DEFAULT_FORMAT
    default_name: str = DEFAULT_NAME

    def __post_init__(self) -> None:
        for field_name in ("default_format", "default_name"):
            value = getattr(self, field_name)
            if not value:
                msg = f"{field_name} must be a non-empty string, got {value!r}"
                raise ValueError(msg)
            if "/" in value or "." in value:
                msg = f"{field_name} must not contain '/' or '.', got {value!r}"
                raise ValueError(msg)

    def new_root(self, **kwargs: Any) -> Node:
        """Return a fresh root ``Node`` carrying this config's defaults.

        Extra keyword arguments (``resources_factory``, ``setup``) are
        forwarded to the ``Node`` constructor.
        """
        from resource_tree.node import Node

        return Node(
            default_format=self.default_format,
            default_name=self.default_name,
            **kwargs,
        )
