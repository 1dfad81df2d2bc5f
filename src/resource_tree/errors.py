"""Exception hierarchy for resource-tree.

Every exception the library raises derives from ``TreeError`` so callers can
catch the whole family with a single ``except`` clause.  Structural errors are
programmer-error signals: they are raised before any mutation takes place, so
the tree is left exactly as it was.

Lookups (``Node.dig``, ``Node.get``) never raise for a missing path; absence
is reported as ``None``.
"""

from __future__ import annotations

__all__ = [
    "CyclicReparentError",
    "DuplicateFormatError",
    "DuplicateNameError",
    "TreeError",
    "TreeStructureError",
]


class TreeError(Exception):
    """Base class for all resource-tree errors."""


class TreeStructureError(TreeError):
    """A parent/child edge change would break the tree's structure."""


class CyclicReparentError(TreeStructureError):
    """Raised when a node would become its own ancestor."""


class DuplicateNameError(TreeStructureError):
    """Raised when the target parent already has a different child with the same name."""


class DuplicateFormatError(TreeError):
    """Raised when a node already holds a resource for the given format."""
