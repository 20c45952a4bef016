"""Relay Tool System.

Tools, tool chains and the registries that track them.

Usage:
    from relay_tools import Catalog, LocalTool, ToolChain, ToolChainEntry

    catalog = Catalog()
    tool = LocalTool("/usr/bin/grep", ["-e", "-i"])
    catalog.tools.insert("grep", tool)

    entry = ToolChainEntry.from_key(catalog.tools, "grep", {"-e": "TODO"})
    catalog.chains.insert_tool_chain(ToolChain(entries=[entry], description="find todos"))
"""

from relay_tools.base import Tool, ToolKind, ToolRunResult
from relay_tools.catalog import Catalog, get_catalog
from relay_tools.chain_registry import ToolChainRegistry
from relay_tools.chains import (
    EDIT_BUFFER_CAPACITY,
    ToolChain,
    ToolChainEntry,
    pad_value,
    trim_padding,
)
from relay_tools.exceptions import (
    RelayError,
    ToolBusyError,
    ToolExecutionError,
    ToolLaunchError,
    ToolNotRegisteredError,
    ToolTimeoutError,
)
from relay_tools.local import LocalTool
from relay_tools.registry import ToolRegistry

__all__ = [
    # Tools
    "Tool",
    "ToolKind",
    "ToolRunResult",
    "LocalTool",
    # Registries
    "ToolRegistry",
    "ToolChainRegistry",
    "Catalog",
    "get_catalog",
    # Chains
    "ToolChain",
    "ToolChainEntry",
    "EDIT_BUFFER_CAPACITY",
    "pad_value",
    "trim_padding",
    # Exceptions
    "RelayError",
    "ToolNotRegisteredError",
    "ToolExecutionError",
    "ToolLaunchError",
    "ToolTimeoutError",
    "ToolBusyError",
]
