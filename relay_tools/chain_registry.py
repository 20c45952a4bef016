"""Tool Chain Registry.

Stores registered chains in insertion order and teaches each tool the
values it has been launched with.
"""

from relay_obs.logging import get_logger
from relay_obs.metrics import launch_values_recorded_total, tool_chains_registered_total

from .chains import ToolChain

logger = get_logger(__name__)


class ToolChainRegistry:
    """Append-only registry of tool chains.

    Stored chains are snapshots: editing a chain after inserting it does not
    change the stored copy.
    """

    def __init__(self, pad_width: int = 0):
        """Initialize tool chain registry.

        Args:
            pad_width: Pad stored strings to this width (0 = store exact values)
        """
        if pad_width < 0:
            raise ValueError(f"pad_width must be >= 0, got {pad_width}")
        self.pad_width = pad_width
        self._chains: list[ToolChain] = []

    def insert_tool_chain(self, chain: ToolChain) -> ToolChain:
        """Register a chain.

        Every launch value of every entry is added to the entry tool's
        argument history. Values for arguments the tool does not recognize
        are skipped.

        Returns:
            The stored copy
        """
        for entry in chain.entries:
            for arg, value in entry.launch_args.items():
                if entry.tool.add_arg_val(arg, value):
                    launch_values_recorded_total.labels(outcome="recorded").inc()
                else:
                    launch_values_recorded_total.labels(outcome="unrecognized").inc()
                    logger.debug("launch_arg_unrecognized", tool=repr(entry.tool), arg=arg)

        stored = chain.snapshot(pad_width=self.pad_width)
        self._chains.append(stored)

        tool_chains_registered_total.inc()
        logger.info(
            "tool_chain_registered",
            index=len(self._chains) - 1,
            description=chain.description,
            entries=len(chain.entries),
        )
        return stored

    def get_entries(self) -> tuple[ToolChain, ...]:
        """All stored chains in insertion order."""
        return tuple(self._chains)

    def __len__(self) -> int:
        return len(self._chains)
