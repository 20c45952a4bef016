"""Tool Argument History Tests."""

import pytest

from relay_tools.base import Tool, ToolKind, ToolRunResult
from relay_tools.local import LocalTool


def test_initial_args_start_with_empty_history(local_tool):
    """Test constructor arguments are recognized with no values."""
    assert dict(local_tool.get_arg_map_entries()) == {"a1": (), "a2": ()}


def test_add_arg_twice_fails_without_change(local_tool):
    """Test a second add_arg of the same name is rejected."""
    assert local_tool.add_arg("x") is True
    local_tool.add_arg_val("x", "v")
    before = dict(local_tool.get_arg_map_entries())

    assert local_tool.add_arg("x") is False
    assert dict(local_tool.get_arg_map_entries()) == before


def test_add_arg_val_appends_history(local_tool):
    """Test values are appended in order, duplicates included."""
    assert local_tool.add_arg_val("a1", "one")
    assert local_tool.add_arg_val("a1", "two")
    assert local_tool.add_arg_val("a1", "one")

    assert local_tool.get_arg_map_entries()["a1"] == ("one", "two", "one")


def test_add_arg_val_unknown_arg_fails(local_tool):
    """Test values for unrecognized arguments are rejected."""
    assert local_tool.add_arg_val("help", "yeet") is False
    assert not local_tool.has_arg("help")


def test_add_arg_vals_applies_each_value(local_tool):
    """Test batch form records every value and reports the count."""
    assert local_tool.add_arg_vals("a2", ["x", "y", "z"]) == 3
    assert local_tool.get_arg_map_entries()["a2"] == ("x", "y", "z")
    assert local_tool.add_arg_vals("missing", ["x"]) == 0


def test_erase_arg_removes_history(local_tool):
    """Test erase_arg drops the argument and its values."""
    local_tool.add_arg_val("a1", "v")
    local_tool.erase_arg("a1")
    local_tool.erase_arg("never-there")

    assert "a1" not in local_tool.get_arg_map_entries()
    assert "a2" in local_tool.get_arg_map_entries()


def test_erase_arg_val_removes_first_match_only(local_tool):
    """Test erase_arg_val removes only the first occurrence."""
    local_tool.add_arg_vals("a1", ["v", "w", "v"])

    local_tool.erase_arg_val("a1", "v")
    assert local_tool.get_arg_map_entries()["a1"] == ("w", "v")

    local_tool.erase_arg_val("a1", "absent")
    local_tool.erase_arg_val("unknown", "v")
    assert local_tool.get_arg_map_entries()["a1"] == ("w", "v")


def test_arg_map_view_is_read_only(local_tool):
    """Test the argument map cannot be mutated through the view."""
    view = local_tool.get_arg_map_entries()

    with pytest.raises(TypeError):
        view["new"] = ()
    assert not local_tool.has_arg("new")


def test_local_tool_equality_uses_path_only():
    """Test local tools with equal paths compare equal despite history."""
    first = LocalTool("/bin/a", ["a1"])
    second = LocalTool("/bin/a", ["other"])
    second.add_arg_val("other", "v")

    assert first == second
    assert first != LocalTool("/bin/b", ["a1"])
    assert first != "/bin/a"


def test_local_tool_path_accessors():
    """Test get_path/set_path and the path property."""
    tool = LocalTool("/bin/a")
    tool.set_path("/bin/b")

    assert tool.get_path() == "/bin/b"
    assert tool.path == "/bin/b"
    assert tool.is_local()
    assert tool.kind is ToolKind.LOCAL


def test_local_tools_deduplicate_by_path():
    """Test equal-path local tools collapse in sets and dict keys."""
    first = LocalTool("/bin/a", ["a1"])
    second = LocalTool("/bin/a")
    second.add_arg("other")

    assert len({first, second, LocalTool("/bin/b")}) == 2
    assert {first: "kept"}[second] == "kept"
    assert hash(first) == hash(second)


class RecordingTool(Tool):
    """Tool that records hook calls instead of launching anything."""

    kind = ToolKind.LOCAL

    def __init__(self, fail_in: str | None = None):
        super().__init__()
        self.calls = []
        self.fail_in = fail_in

    def _record(self, hook: str) -> None:
        self.calls.append(hook)
        if hook == self.fail_in:
            raise RuntimeError(f"{hook} failed")

    async def setup_return_channel(self) -> None:
        self._record("setup_return_channel")

    async def setup_send_channel(self, payload: bytes) -> None:
        self._record("setup_send_channel")
        self.payload = payload

    async def execute(self, args: list[str]) -> ToolRunResult:
        self._record("execute")
        return ToolRunResult(returncode=0, stdout=" ".join(args).encode())

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__


@pytest.mark.asyncio
async def test_run_calls_hooks_in_order():
    """Test run prepares both channels before executing."""
    tool = RecordingTool()

    result = await tool.run(["-v"], payload=b"data")

    assert tool.calls == ["setup_return_channel", "setup_send_channel", "execute"]
    assert tool.payload == b"data"
    assert result.stdout == b"-v"


@pytest.mark.asyncio
async def test_run_releases_tool_when_hook_raises():
    """Test a failing hook stops the run and leaves the tool runnable."""
    tool = RecordingTool(fail_in="setup_send_channel")

    with pytest.raises(RuntimeError):
        await tool.run()

    assert tool.calls == ["setup_return_channel", "setup_send_channel"]
    assert tool._running is False

    tool.fail_in = None
    assert (await tool.run()).success
