"""Relay tool exceptions.

Custom exception hierarchy for registry lookups and tool runs.
"""


class RelayError(Exception):
    """Base exception for relay tools."""

    pass


class ToolNotRegisteredError(RelayError, KeyError):
    """Key or tool instance is not in the tool registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0]) if self.args else ""


class ToolExecutionError(RelayError):
    """Base exception for failures while running a tool."""

    pass


class ToolLaunchError(ToolExecutionError):
    """The tool's program could not be started."""

    pass


class ToolTimeoutError(ToolExecutionError):
    """The tool's program did not finish within its timeout and was killed."""

    pass


class ToolBusyError(ToolExecutionError):
    """run() was called while the same tool instance is still running."""

    pass
