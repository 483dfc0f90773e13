import logging
from pathlib import Path

import pytest

from righthook.config import Hook, Job
from righthook.execute import Output
from righthook.logger import LOGGER_NAME
from righthook.runner import (
    JobStatus,
    JobsFailed,
    Runner,
    expand_command,
    handle_result,
    run_job,
)


class FakeGit:
    def __init__(self, staged=(), pushed=(), fail=False):
        self.staged = [Path(p) for p in staged]
        self.pushed = [Path(p) for p in pushed]
        self.fail = fail
        self.calls = []

    def staged_files(self):
        self.calls.append("staged")
        if self.fail:
            raise RuntimeError("boom")
        return list(self.staged)

    def push_files(self):
        self.calls.append("push")
        if self.fail:
            raise RuntimeError("boom")
        return list(self.pushed)


@pytest.fixture
def captured(caplog):
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(caplog.handler)
    old_level = logger.level
    logger.setLevel(logging.DEBUG)
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.setLevel(old_level)


def test_expand_command_staged_files():
    git = FakeGit(staged=["a.py", "b.py"])
    assert expand_command(git, "lint {staged_files}") == "lint a.py b.py"
    assert git.calls == ["staged"]


def test_expand_command_push_files():
    git = FakeGit(pushed=["x.rs"])
    assert expand_command(git, "check {push_files} {push_files}") == "check x.rs x.rs"
    assert git.calls == ["push"]


def test_expand_command_without_placeholders_does_not_touch_git():
    git = FakeGit(fail=True)
    assert expand_command(git, "echo plain") == "echo plain"
    assert git.calls == []


def test_expand_command_propagates_git_errors():
    with pytest.raises(RuntimeError):
        expand_command(FakeGit(fail=True), "lint {staged_files}")


@pytest.mark.asyncio
async def test_run_job_success():
    job = Job(run="echo {staged_files}")
    status = await run_job(FakeGit(staged=["one", "two"]), job)
    assert status.ok is True
    assert status.job == job
    assert status.output.stdout == "one two\n"


@pytest.mark.asyncio
async def test_run_job_failure_captures_stderr():
    status = await run_job(FakeGit(), Job(run="echo oops >&2; exit 2"))
    assert status.ok is False
    assert status.output.stderr == "oops\n"


def test_handle_result_success_returns_none(captured):
    status = JobStatus(job=Job(run="true", name="check"), ok=True, output=Output("done", ""))
    assert handle_result(status) is None
    assert any("done" in record.getMessage() for record in captured.records)


def test_handle_result_failure_returns_label():
    status = JobStatus(job=Job(run="false"), ok=False, output=Output("", "bad"))
    assert handle_result(status) == "false"


@pytest.mark.asyncio
async def test_runner_sequential_all_ok():
    hook = Hook(jobs=[Job(run="true"), Job(run="exit 0")])
    assert await Runner(hook, FakeGit()).run() is None


@pytest.mark.asyncio
async def test_runner_sequential_reports_failures_in_order():
    hook = Hook(jobs=[Job(run="exit 1", name="first"), Job(run="true"), Job(run="exit 3", name="second")])
    with pytest.raises(JobsFailed) as info:
        await Runner(hook, FakeGit()).run()
    assert info.value.names == ["first", "second"]
    assert str(info.value) == "jobs failed: first, second"


@pytest.mark.asyncio
async def test_runner_parallel_reports_all_failures():
    hook = Hook(
        jobs=[Job(run="exit 1", name="a"), Job(run="true", name="b"), Job(run="exit 1", name="c")],
        parallel=True,
    )
    with pytest.raises(JobsFailed) as info:
        await Runner(hook, FakeGit()).run()
    assert sorted(info.value.names) == ["a", "c"]


@pytest.mark.asyncio
async def test_runner_errors_are_logged_not_failed(captured):
    hook = Hook(jobs=[Job(run="lint {staged_files}", name="lint")])
    assert await Runner(hook, FakeGit(fail=True)).run() is None
    assert any("Error running job: boom" in r.getMessage() for r in captured.records)