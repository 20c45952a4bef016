"""Tool Chain value types.

A chain is an ordered list of steps; each step names a registered tool and
the argument values it is launched with.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .base import Tool
from .registry import ToolRegistry

# Width of the editor buffers the stored strings are bound to
EDIT_BUFFER_CAPACITY = 256
PAD_CHAR = "\0"


def pad_value(value: str, width: int) -> str:
    """Pad ``value`` with NUL characters up to ``width``. Longer values are kept whole."""
    return value.ljust(width, PAD_CHAR)


def trim_padding(value: str) -> str:
    """Strip trailing NUL padding added by ``pad_value``."""
    return value.rstrip(PAD_CHAR)


class ToolChainEntry(BaseModel):
    """One step in a tool chain."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    tool: Tool
    launch_args: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_key(
        cls,
        registry: ToolRegistry,
        key: str,
        launch_args: dict[str, str] | None = None,
    ) -> "ToolChainEntry":
        """Build an entry for the tool registered under ``key``.

        Raises:
            ToolNotRegisteredError: If the key is not registered
        """
        return cls(tool=registry.get_tool(key), launch_args=dict(launch_args or {}))


class ToolChain(BaseModel):
    """Complete tool chain."""

    entries: list[ToolChainEntry] = Field(default_factory=list)
    description: str = ""

    def snapshot(self, pad_width: int = 0) -> "ToolChain":
        """Copy the chain so later edits to this one do not leak into the copy.

        Tool references are shared, not copied. With ``pad_width`` > 0 the
        description and every launch value are padded to that width.
        """
        return ToolChain(
            entries=[
                ToolChainEntry(
                    tool=entry.tool,
                    launch_args={
                        arg: pad_value(value, pad_width)
                        for arg, value in entry.launch_args.items()
                    },
                )
                for entry in self.entries
            ],
            description=pad_value(self.description, pad_width),
        )

    def trimmed(self) -> dict[str, Any]:
        """Description and launch values with padding removed, for display."""
        return {
            "description": trim_padding(self.description),
            "entries": [
                {arg: trim_padding(value) for arg, value in entry.launch_args.items()}
                for entry in self.entries
            ],
        }
