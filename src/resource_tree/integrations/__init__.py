"""Integrations subpackage for resource-tree.

Contains the pytest plugin, auto-discovered via the pytest11 entry point.
It is not imported here so that importing resource_tree never requires pytest.
"""

from __future__ import annotations

__all__: list[str] = []
