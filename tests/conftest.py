"""Pytest fixtures."""

import stat

import pytest

from relay_tools.chain_registry import ToolChainRegistry
from relay_tools.local import LocalTool
from relay_tools.registry import ToolRegistry


@pytest.fixture
def tool_registry():
    """Empty tool registry."""
    return ToolRegistry()


@pytest.fixture
def chain_registry():
    """Empty tool chain registry storing exact strings."""
    return ToolChainRegistry()


@pytest.fixture
def local_tool():
    """Local tool recognizing a1 and a2."""
    return LocalTool("/bin/a", ["a1", "a2"])


@pytest.fixture
def make_script(tmp_path):
    """Write an executable shell script and return its path."""

    def _make(body: str, name: str = "tool.sh") -> str:
        script = tmp_path / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)

    return _make
