"""Running shell commands and collecting their output."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass


@dataclass(frozen=True)
class Output:
    """Decoded standard output and standard error of a finished command."""

    stdout: str
    stderr: str


async def execute(cmd: str, stdin_data: str = "") -> tuple[bool, Output]:
    """Run ``cmd`` with ``sh -c`` and return whether it succeeded and its output.

    ``stdin_data`` is fed to the command's standard input; when empty, the
    command gets no input. Output that is not valid UTF-8 raises
    UnicodeDecodeError.
    """
    stdin = asyncio.subprocess.PIPE if stdin_data else asyncio.subprocess.DEVNULL
    process = await asyncio.create_subprocess_exec(
        "sh",
        "-c",
        cmd,
        stdin=stdin,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate(
        stdin_data.encode("utf-8") if stdin_data else None
    )
    output = Output(stdout=stdout.decode("utf-8"), stderr=stderr.decode("utf-8"))
    return process.returncode == 0, output