"""pytest plugin for resource-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from resource_tree.node import Node
from resource_tree.validation import find_violations


@pytest.fixture(scope="session")
def assert_tree_consistent() -> Any:
    """Fixture that returns a callable tree consistency asserter.

    Usage in tests::

        def test_move(assert_tree_consistent):
            root = Node()
            a = root.add_child("a")
            root.add_child("b").parent = a
            assert_tree_consistent(root)

    Returns:
        A callable ``_assert(root) -> None`` that raises ``AssertionError``
        listing every violation found beneath ``root``.
    """

    def _assert(root: Node) -> None:
        violations = find_violations(root)
        if violations:
            details = "\n".join(f"  [{v.kind}] {v.message}" for v in violations)
            raise AssertionError(
                f"Tree rooted at {root.name!r} is inconsistent "
                f"({len(violations)} violation(s)):\n{details}"
            )

    return _assert
