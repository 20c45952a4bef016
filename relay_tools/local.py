"""Local Tool.

Tool variant backed by an executable on the local machine, launched with
asyncio subprocesses.
"""

import asyncio
from collections.abc import Iterable

from relay_config.settings import Settings
from relay_obs.logging import get_logger

from .base import Tool, ToolKind, ToolRunResult
from .exceptions import ToolLaunchError, ToolTimeoutError

logger = get_logger(__name__)


class LocalTool(Tool):
    """Tool for a program on the local filesystem.

    Two local tools are equal when their paths are equal, whatever their
    argument history. The hash follows the path, so a tool moved with
    set_path while stored in a set or dict key must be re-inserted.
    """

    kind = ToolKind.LOCAL

    def __init__(
        self,
        path: str,
        args: Iterable[str] | None = None,
        timeout_seconds: float | None = None,
    ):
        """Initialize local tool.

        Args:
            path: Path to the program
            args: Names of all arguments the program recognizes
            timeout_seconds: Kill the process after this long (None = wait forever)
        """
        super().__init__(args)
        self._path = path
        self.timeout_seconds = timeout_seconds
        self._stdin: int | None = None
        self._stdout: int | None = None
        self._stderr: int | None = None
        self._payload = b""

    @classmethod
    def from_settings(
        cls, path: str, args: Iterable[str] | None = None, settings: Settings | None = None
    ) -> "LocalTool":
        settings = settings or Settings()
        return cls(path, args, timeout_seconds=settings.LOCAL_TOOL_TIMEOUT_SECONDS)

    def get_path(self) -> str:
        return self._path

    def set_path(self, path: str) -> None:
        self._path = path

    path = property(get_path, set_path)

    async def setup_return_channel(self) -> None:
        self._stdout = asyncio.subprocess.PIPE
        self._stderr = asyncio.subprocess.PIPE

    async def setup_send_channel(self, payload: bytes) -> None:
        self._payload = payload
        self._stdin = asyncio.subprocess.PIPE if payload else asyncio.subprocess.DEVNULL

    async def execute(self, args: list[str]) -> ToolRunResult:
        try:
            process = await asyncio.create_subprocess_exec(
                self._path,
                *args,
                stdin=self._stdin,
                stdout=self._stdout,
                stderr=self._stderr,
            )
        except OSError as e:
            raise ToolLaunchError(f"Could not launch {self._path}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(self._payload or None),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            logger.warning("tool_run_timed_out", path=self._path, timeout=self.timeout_seconds)
            raise ToolTimeoutError(
                f"{self._path} did not finish within {self.timeout_seconds} seconds"
            ) from e

        return ToolRunResult(
            returncode=process.returncode,
            stdout=stdout or b"",
            stderr=stderr or b"",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tool):
            return NotImplemented
        return isinstance(other, LocalTool) and self._path == other._path

    def __hash__(self) -> int:
        return hash((self.kind, self._path))

    def __repr__(self) -> str:
        return f"LocalTool(path={self._path!r})"
