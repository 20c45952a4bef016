"""Tool Catalog.

One tool registry and one chain registry, created together and handed to
whoever needs them.
"""

from functools import lru_cache

from relay_config.settings import Settings

from .chain_registry import ToolChainRegistry
from .registry import ToolRegistry


class Catalog:
    """Process catalog of tools and tool chains."""

    def __init__(
        self,
        tools: ToolRegistry | None = None,
        chains: ToolChainRegistry | None = None,
    ):
        self.tools = tools if tools is not None else ToolRegistry()
        self.chains = chains if chains is not None else ToolChainRegistry()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Catalog":
        return cls(chains=ToolChainRegistry(pad_width=settings.CHAIN_VALUE_PAD_WIDTH))


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Process-wide catalog, created from Settings on first use."""
    return Catalog.from_settings(Settings())
