import os
import subprocess

import pytest

from righthook.cli import build_parser, main
from righthook.commands import VERSION
from righthook.config import CONFIG_NAME


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def repo(isolated):
    subprocess.run(["git", "init", "-q", str(isolated)], check=True)
    (isolated / ".git" / "hooks").mkdir(exist_ok=True)
    return isolated


def test_parser_run():
    args = build_parser().parse_args(["run", "pre-commit"])
    assert (args.command, args.hook) == ("run", "pre-commit")


def test_parser_install_force():
    assert build_parser().parse_args(["install", "-f"]).force is True
    assert build_parser().parse_args(["install"]).force is False


def test_parser_run_requires_hook():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["run"])
    assert info.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert VERSION in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 0
    assert "No command provided" in capsys.readouterr().out


def test_run_outside_repository_fails(isolated):
    assert main(["run", "pre-commit"]) == 1


def test_install_then_run_and_uninstall(repo):
    (repo / CONFIG_NAME).write_text("pre-commit:\n  jobs:\n    - run: \"true\"\n")
    assert main(["install"]) == 0
    assert (repo / ".git" / "hooks" / "pre-commit").is_file()
    assert main(["run", "pre-commit"]) == 0
    assert main(["run", "missing"]) == 1
    assert main(["uninstall"]) == 0
    assert not (repo / ".git" / "hooks" / "pre-commit").exists()