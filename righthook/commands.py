"""The install, run and uninstall commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from righthook.config import Config
from righthook.git import Git
from righthook.logger import LOGGER_NAME
from righthook.runner import Runner

VERSION = "0.1.0"
MARKER = "call_righthook"

_HOOK_TEMPLATE = """\
#!/bin/sh

call_righthook()
{
  if command -v righthook >/dev/null 2>&1; then
    righthook "$@"
  else
    echo "righthook: command not found in PATH" >&2
    exit 1
  fi
}

call_righthook run "{{hook_name}}"
"""

_log = logging.getLogger(LOGGER_NAME)


class HookNotFound(Exception):
    """The requested hook is not defined in the configuration."""

    def __init__(self, hook_name: str) -> None:
        super().__init__(f"Hook '{hook_name}' not found")
        self.hook_name = hook_name


def render_hook(hook_name: str) -> str:
    """Return the script installed as the Git hook ``hook_name``."""
    return _HOOK_TEMPLATE.replace("{{hook_name}}", hook_name)


def install(force: bool = False) -> list[str]:
    """Install a script for each configured Git hook; return those installed.

    A missing configuration file is created from the template first.
    """
    git = Git(".")
    try:
        config = Config.load(git.root)
    except FileNotFoundError:
        config = Config.create(git.root)

    installed = []
    for hook_name in config.hooks:
        if not git.is_git_hook(hook_name):
            _log.debug("skip: %s - not a git hook", hook_name)
            continue
        hook_path = Path(git.hooks) / hook_name
        if hook_path.exists() and not force:
            print(f"Hook {hook_name} already exists. Use --force to overwrite.")
            continue
        hook_path.write_text(render_hook(hook_name), encoding="utf-8")
        hook_path.chmod(0o755)
        installed.append(hook_name)

    if installed:
        print(f"installed hooks: {', '.join(installed)}")
    return installed


async def run(hook_name: str) -> None:
    """Run the jobs of the configured hook ``hook_name``."""
    git = Git(".")
    config = Config.load(git.root)
    print(f"righthook {VERSION} | hook: {hook_name} ")
    hook = config.hooks.get(hook_name)
    if hook is None:
        raise HookNotFound(hook_name)
    await Runner(hook, git).run()


def is_righthook_file(path: str | Path) -> bool:
    """Whether the file at ``path`` is a hook script installed by righthook."""
    with open(path, encoding="utf-8") as handle:
        return any(MARKER in line for line in handle)


def _is_ours(path: Path) -> bool:
    try:
        return is_righthook_file(path)
    except (OSError, ValueError):
        return False


def uninstall() -> list[Path]:
    """Remove every hook script installed by righthook; return those removed."""
    git = Git(".")
    removed = []
    for path in sorted(Path(git.hooks).iterdir()):
        if not path.is_file() or path.suffix == ".sample" or not _is_ours(path):
            continue
        try:
            path.unlink()
        except OSError as err:
            print(f"Failed to remove file {path}: {err}", file=sys.stderr)
        else:
            print(f"Removed hook: {path}")
            removed.append(path)
    return removed