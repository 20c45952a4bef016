"""Tool Registry.

Maps short unique keys to shared Tool instances.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from relay_obs.logging import get_logger

from .base import Tool
from .exceptions import ToolNotRegisteredError

logger = get_logger(__name__)


class ToolRegistry:
    """Tool registry with unique keys and reverse lookup.

    The registry owns the Tool instances; chain entries hold references to
    the same objects.
    """

    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def insert(self, key: str, tool: Tool) -> bool:
        """Register a tool under ``key``.

        Returns:
            True on success, False (registry unchanged) if the key is in use
        """
        if key in self._tools:
            logger.warning("tool_key_in_use", key=key, tool=repr(tool))
            return False
        self._tools[key] = tool
        logger.debug("tool_registered", key=key, tool=repr(tool))
        return True

    def contains(self, key: str) -> bool:
        """Check if the key is registered."""
        return key in self._tools

    def get_tool(self, key: str) -> Tool:
        """Get the tool registered under ``key``.

        Raises:
            ToolNotRegisteredError: If the key is not registered
        """
        try:
            return self._tools[key]
        except KeyError:
            raise ToolNotRegisteredError(f"key is not registered: {key!r}") from None

    def get_key(self, tool: Tool) -> str:
        """Get the key of this exact tool instance.

        Lookup is by identity: an equal but distinct tool is not found.

        Raises:
            ToolNotRegisteredError: If the instance is not registered
        """
        for key, registered in self._tools.items():
            if registered is tool:
                return key
        raise ToolNotRegisteredError(f"tool not registered: {tool!r}")

    def get_entries(self) -> Mapping[str, Tool]:
        """Read-only view of all registered tools by key."""
        return MappingProxyType(self._tools)

    def __getitem__(self, key: str) -> Tool:
        return self.get_tool(key)

    def __contains__(self, key: object) -> bool:
        return key in self._tools

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)
