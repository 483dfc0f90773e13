"""Access to the Git repository: its location, hooks directory and changed files."""

from __future__ import annotations

import enum
import os
import subprocess
import threading
from pathlib import Path

GIT_HOOKS = frozenset(
    {
        "applypatch-msg",
        "pre-applypatch",
        "post-applypatch",
        "pre-commit",
        "pre-merge-commit",
        "prepare-commit-msg",
        "commit-msg",
        "post-commit",
        "pre-rebase",
        "post-checkout",
        "post-merge",
        "pre-push",
        "pre-receive",
        "update",
        "proc-receive",
        "post-receive",
        "post-update",
        "reference-transaction",
        "push-to-checkout",
        "pre-auto-gc",
        "post-rewrite",
        "sendemail-validate",
        "fsmonitor-watchman",
        "p4-changelist",
        "p4-prepare-changelist",
        "p4-post-changelist",
        "p4-pre-submit",
        "post-index-change",
    }
)

_PUSH_REF = "refs/remotes/origin/HEAD"
_PUSH_REF_HINT = "Please setup the push ref, e.g.: git remote set-head origin main"


class GitError(Exception):
    """A Git operation failed."""


class _FilesTemplate(enum.Enum):
    STAGED_FILES = enum.auto()
    PUSH_FILES = enum.auto()


def is_git_hook(hook_name: str) -> bool:
    """Whether ``hook_name`` is a hook Git knows how to call."""
    return hook_name in GIT_HOOKS


def _run_git(cwd: str | Path, *args: str) -> subprocess.CompletedProcess[bytes]:
    try:
        return subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=False)
    except OSError as err:
        raise GitError(f"failed to run git: {err}") from err


def _split_paths(output: bytes) -> list[Path]:
    return [Path(os.fsdecode(item)) for item in output.split(b"\0") if item]


class Git:
    """A discovered repository, with a per-instance cache of file lists."""

    def __init__(self, path: str | Path = ".") -> None:
        result = _run_git(path, "rev-parse", "--absolute-git-dir")
        if result.returncode != 0:
            raise GitError(
                f"could not find repository at '{path}': "
                f"{os.fsdecode(result.stderr).strip()}"
            )
        git_dir = Path(os.fsdecode(result.stdout).rstrip("\n"))
        self.root = git_dir.parent

        hooks_path = _run_git(self.root, "config", "--get", "core.hooksPath")
        if hooks_path.returncode == 0:
            self.hooks = Path(os.fsdecode(hooks_path.stdout).rstrip("\n"))
        else:
            self.hooks = git_dir / "hooks"

        self._cache: dict[_FilesTemplate, list[Path]] = {}
        self._lock = threading.Lock()

    def is_git_hook(self, hook_name: str) -> bool:
        return is_git_hook(hook_name)

    def _git(self, *args: str, error: str) -> bytes:
        result = _run_git(self.root, *args)
        if result.returncode != 0:
            raise GitError(f"{error}: {os.fsdecode(result.stderr).strip()}")
        return result.stdout

    def _commit(self, rev: str) -> str | None:
        result = _run_git(self.root, "rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}")
        if result.returncode != 0:
            return None
        return os.fsdecode(result.stdout).strip()

    def staged_files(self) -> list[Path]:
        """Paths staged in the index that still exist, relative to the root."""
        with self._lock:
            files = self._cache.get(_FilesTemplate.STAGED_FILES)
            if files is None:
                output = self._git(
                    "diff", "--cached", "--name-only", "--no-renames", "-z",
                    error="failed to get statuses",
                )
                files = [path for path in _split_paths(output) if path.exists()]
                self._cache[_FilesTemplate.STAGED_FILES] = files
            return list(files)

    def push_files(self) -> list[Path]:
        """Paths that differ between HEAD and the remote's default branch."""
        with self._lock:
            files = self._cache.get(_FilesTemplate.PUSH_FILES)
            if files is None:
                head = self._commit("HEAD")
                if head is None:
                    raise GitError("HEAD was not found")
                push = self._commit(_PUSH_REF)
                if push is None:
                    raise GitError(_PUSH_REF_HINT)
                output = self._git(
                    "diff", "--name-only", "--no-renames", "-z", head, push,
                    error="failed to diff trees",
                )
                files = _split_paths(output)
                self._cache[_FilesTemplate.PUSH_FILES] = files
            return list(files)