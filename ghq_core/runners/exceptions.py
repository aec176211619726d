from __future__ import annotations

from datasalad.runners import CommandError


class ToolInvocationError(RuntimeError):
    """An external tool could not be started

    Typically, the tool is not installed, or not on the search path.
    """

    def __init__(self, tool: str, cmd: list[str], msg: str | None = None):
        super().__init__(msg or f'cannot execute {tool!r}, is it installed?')
        self.tool = tool
        self.cmd = cmd


class ToolExecutionError(CommandError):
    """An external tool was started, but exited with a non-zero status

    The tool's stderr content is not inspected. All failure causes (network
    errors, an already existing target, etc.) are reported alike.
    """
