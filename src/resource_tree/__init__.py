"""resource-tree - a path-indexed tree of format-keyed resources."""

from __future__ import annotations

import logging

from resource_tree.api import build_tree, request_paths, resolve
from resource_tree.builder import TreeBuilder
from resource_tree.config import TreeConfig
from resource_tree.errors import (
    CyclicReparentError,
    DuplicateFormatError,
    DuplicateNameError,
    TreeError,
    TreeStructureError,
)
from resource_tree.node import Node
from resource_tree.path import Path, PathParser
from resource_tree.resources import Resource, Resources

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "CyclicReparentError",
    "DuplicateFormatError",
    "DuplicateNameError",
    "Node",
    "Path",
    "PathParser",
    "Resource",
    "Resources",
    "TreeBuilder",
    "TreeConfig",
    "TreeError",
    "TreeStructureError",
    "build_tree",
    "request_paths",
    "resolve",
]
