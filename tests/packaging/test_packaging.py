"""Packaging correctness verification for resource-tree.

Tests validate:
- Base install imports without pytest-only modules
- Pytest plugin entry point is registered
- Package metadata and public exports are correct

These tests inspect the current installation rather than building a wheel.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    def test_import_resource_tree(self) -> None:
        """Top-level import succeeds and exposes the core types."""
        import resource_tree

        assert hasattr(resource_tree, "Node")
        assert hasattr(resource_tree, "build_tree")

    def test_import_does_not_load_plugin(self) -> None:
        """Importing the package must not pull in pytest."""
        code = (
            "import sys, resource_tree; "
            "sys.exit(1 if 'resource_tree.integrations._pytest_plugin' in sys.modules else 0)"
        )
        result = subprocess.run([sys.executable, "-c", code], capture_output=True)
        assert result.returncode == 0, result.stderr

    def test_py_typed_marker_present(self) -> None:
        assert (PROJECT_ROOT / "src" / "resource_tree" / "py.typed").exists()


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self) -> None:
        """pytest11 entry point must be registered for resource-tree."""
        from importlib.metadata import entry_points

        eps = [
            ep
            for ep in entry_points(group="pytest11")
            if "resource_tree" in str(ep.value)
        ]
        assert eps, "No pytest11 entry point found for resource-tree"

    def test_fixture_available(self) -> None:
        import importlib

        mod = importlib.import_module("resource_tree.integrations._pytest_plugin")
        assert hasattr(mod, "assert_tree_consistent")
        assert callable(mod.assert_tree_consistent)


class TestPackageMetadata:
    def test_version(self) -> None:
        import resource_tree

        assert resource_tree.__version__ == "0.1.0"

    def test_distribution_version(self) -> None:
        from importlib.metadata import version

        assert version("resource-tree") == "0.1.0"

    def test_all_exports(self) -> None:
        import resource_tree

        expected = {
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
        }
        assert set(resource_tree.__all__) == expected
        for name in expected:
            assert hasattr(resource_tree, name)
