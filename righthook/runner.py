"""Running the jobs of a hook, one after another or all at once."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any

from termcolor import colored

from righthook.config import Hook, Job
from righthook.execute import Output, execute
from righthook.logger import LOGGER_NAME, TRACE

STAGED_FILES = "{staged_files}"
PUSH_FILES = "{push_files}"
_PROMPT = "❯"

_log = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class JobStatus:
    """The outcome of one job."""

    job: Job
    ok: bool
    output: Output


class JobsFailed(Exception):
    """One or more jobs of a hook finished unsuccessfully."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(f"jobs failed: {', '.join(names)}")
        self.names = list(names)


def _join_paths(paths: Any) -> str:
    return " ".join(str(path) for path in paths)


def expand_command(git: Any, command: str) -> str:
    """Substitute the file-list placeholders in ``command``."""
    if STAGED_FILES in command:
        command = command.replace(STAGED_FILES, _join_paths(git.staged_files()))
    if PUSH_FILES in command:
        command = command.replace(PUSH_FILES, _join_paths(git.push_files()))
    return command


async def run_job(git: Any, job: Job) -> JobStatus:
    """Expand and run one job's command."""
    command = await asyncio.to_thread(expand_command, git, job.run)
    _log.log(TRACE, "running %s", command)
    ok, output = await execute(command, "")
    return JobStatus(job=job, ok=ok, output=output)


def handle_result(job_status: JobStatus) -> str | None:
    """Report a finished job; return its name if it failed."""
    name = job_status.job.label()
    if job_status.ok:
        _log.info("%s %s\n%s", _PROMPT, colored(name, "green"), job_status.output.stdout)
        return None
    _log.info(
        "%s %s\n%s%s",
        _PROMPT,
        colored(name, "red"),
        job_status.output.stdout,
        colored(job_status.output.stderr, "red"),
    )
    return name


class Runner:
    """Runs every job of a hook against a repository."""

    def __init__(self, hook: Hook, git: Any) -> None:
        self._hook = hook
        self._git = git

    async def run(self) -> None:
        """Run the hook's jobs; raise JobsFailed if any of them failed."""
        if self._hook.parallel is True:
            failed = await self._run_parallel()
        else:
            failed = await self._run_sequential()
        if failed:
            raise JobsFailed(failed)

    @staticmethod
    async def _settle(pending: Awaitable[JobStatus]) -> str | None:
        try:
            status = await pending
        except Exception as err:
            _log.error("Error running job: %s", err)
            return None
        return handle_result(status)

    async def _run_sequential(self) -> list[str]:
        failed = []
        for job in self._hook.jobs:
            name = await self._settle(run_job(self._git, job))
            if name is not None:
                failed.append(name)
        return failed

    async def _run_parallel(self) -> list[str]:
        tasks = [asyncio.ensure_future(run_job(self._git, job)) for job in self._hook.jobs]
        failed = []
        for pending in asyncio.as_completed(tasks):
            name = await self._settle(pending)
            if name is not None:
                failed.append(name)
        return failed