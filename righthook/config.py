"""The ``.righthook.yml`` configuration: hooks and the jobs they run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_NAME = ".righthook.yml"

_CONFIG_TEMPLATE = """\
# righthook configuration
#
# Each top-level key names a Git hook. A hook lists the jobs it runs and may
# run them in parallel. In a job's command, {staged_files} expands to the
# files staged for commit and {push_files} to the files about to be pushed.
#
# pre-commit:
#   parallel: true
#   jobs:
#     - name: lint
#       run: echo {staged_files}
"""


def render_config() -> str:
    """Return the text of a fresh configuration file."""
    return _CONFIG_TEMPLATE


def _require_mapping(data: Any, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a mapping, got {type(data).__name__}")
    return data


def _optional_str(data: Mapping, key: str, what: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{what}: '{key}' must be a string")
    return value


def _optional_str_list(data: Mapping, key: str, what: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{what}: '{key}' must be a list of strings")
    return list(value)


@dataclass(frozen=True)
class Job:
    """A single command run by a hook."""

    run: str
    name: str | None = None
    glob: list[str] | None = None
    exclude: list[str] | None = None

    def label(self) -> str:
        """The job's display name, falling back to its command."""
        return self.name if self.name is not None else self.run

    @classmethod
    def from_mapping(cls, data: Any) -> Job:
        data = _require_mapping(data, "job")
        run = data.get("run")
        if run is None:
            raise ValueError("job: missing field 'run'")
        if not isinstance(run, str):
            raise ValueError("job: 'run' must be a string")
        return cls(
            run=run,
            name=_optional_str(data, "name", "job"),
            glob=_optional_str_list(data, "glob", "job"),
            exclude=_optional_str_list(data, "exclude", "job"),
        )


@dataclass(frozen=True)
class Hook:
    """A Git hook and the jobs it runs."""

    jobs: list[Job]
    parallel: bool | None = None

    @classmethod
    def from_mapping(cls, data: Any) -> Hook:
        data = _require_mapping(data, "hook")
        parallel = data.get("parallel")
        if parallel is not None and not isinstance(parallel, bool):
            raise ValueError("hook: 'parallel' must be a boolean")
        jobs = data.get("jobs")
        if jobs is None:
            raise ValueError("hook: missing field 'jobs'")
        if not isinstance(jobs, list):
            raise ValueError("hook: 'jobs' must be a list")
        return cls(jobs=[Job.from_mapping(job) for job in jobs], parallel=parallel)


@dataclass(frozen=True)
class Config:
    """All hooks defined in the configuration file, by name."""

    hooks: dict[str, Hook] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, text: str) -> Config:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise ValueError(f"invalid configuration: {err}") from err
        if data is None:
            return cls()
        data = _require_mapping(data, "configuration")
        hooks: dict[str, Hook] = {}
        for name, hook in data.items():
            if not isinstance(name, str):
                raise ValueError(f"configuration: hook name {name!r} must be a string")
            try:
                hooks[name] = Hook.from_mapping(hook)
            except ValueError as err:
                raise ValueError(f"{name}: {err}") from err
        return cls(hooks=hooks)

    @classmethod
    def load(cls, root: str | Path) -> Config:
        """Read the configuration file in ``root``; FileNotFoundError if absent."""
        text = (Path(root) / CONFIG_NAME).read_text(encoding="utf-8")
        return cls.from_yaml(text)

    @classmethod
    def create(cls, root: str | Path) -> Config:
        """Write a fresh configuration file in ``root`` and load it."""
        (Path(root) / CONFIG_NAME).write_text(render_config(), encoding="utf-8")
        return cls.load(root)