"""Run the external compiler-driver and capture its result."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path

from icie.models.result import ToolError, ToolInvocation, ToolOutput

log = logging.getLogger(__name__)

ToolRunner = Callable[[Path, Sequence[str]], Awaitable[ToolOutput | ToolError]]


async def run_tool(tool_path: Path, args: Sequence[str]) -> ToolOutput | ToolError:
    """Run the tool once and wait for it to exit.

    Output is captured in full and passed through without interpretation.

    Args:
        tool_path: Path to the executable
        args: Arguments passed after the executable

    Returns:
        The captured output on a zero exit status, otherwise a ToolError.

    """
    invocation = ToolInvocation(tool_path=tool_path, args=tuple(args))
    log.info("Running %s", " ".join(invocation.argv))

    try:
        process = await asyncio.create_subprocess_exec(
            *invocation.argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        log.error("Failed to launch %s: %s", tool_path, e)
        return ToolError(kind="launch-failed", message=str(e))

    stdout, stderr = await process.communicate()
    exit_code = process.returncode
    log.debug("stdout: %s", stdout.decode(errors="replace"))
    log.debug("stderr: %s", stderr.decode(errors="replace"))

    if exit_code == 0:
        return ToolOutput(exit_code=exit_code, stdout=stdout, stderr=stderr)

    message = (
        f"Terminated by signal {-exit_code}"
        if exit_code is not None and exit_code < 0
        else f"Exited with status {exit_code}"
    )
    return ToolError(
        kind="non-zero-exit",
        message=message,
        exit_code=exit_code,
        stdout=stdout,
        stderr=stderr,
    )
