"""Tool Interface & Argument History.

A Tool is one externally launchable program. It knows which arguments it
recognizes and, for each, the values it has been launched with before.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import ClassVar

from pydantic import BaseModel

from relay_obs.logging import get_logger
from relay_obs.metrics import tool_run_duration, tool_runs_total

from .exceptions import ToolBusyError

logger = get_logger(__name__)


class ToolKind(str, Enum):
    """Closed set of tool variants."""

    LOCAL = "local"


class ToolRunResult(BaseModel):
    """Outcome of a single tool run."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""
    duration_seconds: float = 0.0

    @property
    def success(self) -> bool:
        return self.returncode == 0


class Tool(ABC):
    """Tool interface.

    Variants implement the three lifecycle hooks, ``is_local`` and equality.
    Equality is variant specific and never looks at argument history.
    """

    kind: ClassVar[ToolKind]

    def __init__(self, args: Iterable[str] | None = None) -> None:
        """Initialize tool.

        Args:
            args: Names of all arguments the tool recognizes, each starting
                with an empty history
        """
        self._args: dict[str, list[str]] = {}
        self._running = False
        for arg in args or ():
            self._args.setdefault(arg, [])

    # ========================================================================
    # EXECUTION LIFECYCLE
    # ========================================================================

    @abstractmethod
    async def setup_return_channel(self) -> None:
        """Set up the channel that receives the program's output."""

    @abstractmethod
    async def setup_send_channel(self, payload: bytes) -> None:
        """Set up the channel that sends ``payload`` to the program."""

    @abstractmethod
    async def execute(self, args: list[str]) -> ToolRunResult:
        """Run the program with the prepared channels."""

    async def run(self, args: Sequence[str] = (), payload: bytes = b"") -> ToolRunResult:
        """Run the tool.

        Calls ``setup_return_channel``, ``setup_send_channel`` and ``execute``
        in that order. The payload size is ``len(payload)``.

        Args:
            args: Command line arguments passed to the program
            payload: Data sent to the program's input channel

        Returns:
            Result collected by the variant's ``execute`` hook

        Raises:
            ToolBusyError: If this instance is already running
            ToolExecutionError: If the variant fails to launch or finish
        """
        if self._running:
            raise ToolBusyError(f"{self!r} is already running")

        self._running = True
        status = "failure"
        start = time.perf_counter()
        try:
            await self.setup_return_channel()
            await self.setup_send_channel(payload)
            result = await self.execute(list(args))
            status = "success" if result.success else "failure"
        finally:
            self._running = False
            elapsed = time.perf_counter() - start
            tool_runs_total.labels(kind=self.kind.value, status=status).inc()
            tool_run_duration.labels(kind=self.kind.value).observe(elapsed)
            logger.info(
                "tool_run_finished",
                tool=repr(self),
                status=status,
                duration_seconds=round(elapsed, 4),
            )
        return result.model_copy(update={"duration_seconds": elapsed})

    # ========================================================================
    # CAPABILITIES
    # ========================================================================

    def is_local(self) -> bool:
        """Check whether this tool runs on the local machine."""
        return self.kind is ToolKind.LOCAL

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        ...

    # ========================================================================
    # ARGUMENT HISTORY
    # ========================================================================

    def add_arg(self, name: str) -> bool:
        """Recognize a new argument. Returns False if it already exists."""
        if name in self._args:
            return False
        self._args[name] = []
        return True

    def add_arg_val(self, name: str, value: str) -> bool:
        """Append a used value. Returns False if the argument is unknown."""
        history = self._args.get(name)
        if history is None:
            return False
        history.append(value)
        return True

    def add_arg_vals(self, name: str, values: Iterable[str]) -> int:
        """Append each value in order; returns how many were recorded."""
        return sum(1 for value in values if self.add_arg_val(name, value))

    def erase_arg(self, name: str) -> None:
        """Forget the argument together with its history."""
        self._args.pop(name, None)

    def erase_arg_val(self, name: str, value: str) -> None:
        """Remove the first occurrence of ``value`` from the argument's history."""
        history = self._args.get(name)
        if history is not None and value in history:
            history.remove(value)

    def has_arg(self, name: str) -> bool:
        return name in self._args

    def get_arg_map_entries(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only snapshot of argument name -> value history."""
        return MappingProxyType({name: tuple(history) for name, history in self._args.items()})
