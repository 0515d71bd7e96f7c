"""Tests for the hook runner installer."""

import subprocess

import pytest

from husky_conf.core.models import HookRunnerConfig
from husky_conf.hooks.install import (
    DependencyInstallError,
    HookRunnerInstaller,
    has_hook_runner,
)


def test_has_hook_runner():
    assert has_hook_runner({"devDependencies": {"husky": "^4.0.0"}})
    assert has_hook_runner({"dependencies": {"husky": "^4.0.0"}})
    assert not has_hook_runner({"dependencies": {"jest": "^29.0.0"}})
    assert not has_hook_runner({})


def test_install_command(tmp_path):
    installer = HookRunnerInstaller(tmp_path)

    assert installer.command == ["npm", "install", "--save-dev", "husky@next"]


def test_install_runs_in_project_dir(tmp_path, monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs["cwd"]))
        return subprocess.CompletedProcess(cmd, 0, stdout="added 1 package", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    output = HookRunnerInstaller(tmp_path, HookRunnerConfig(version=None)).install()

    assert output == "added 1 package"
    assert calls == [(["npm", "install", "--save-dev", "husky"], tmp_path)]


def test_install_failure(tmp_path, monkeypatch):
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, stdout="", stderr="npm ERR! 404")
    )

    with pytest.raises(DependencyInstallError, match="npm ERR! 404"):
        HookRunnerInstaller(tmp_path).install()


def test_install_without_npm(tmp_path, monkeypatch):
    def missing(cmd, **kwargs):
        raise FileNotFoundError("npm")

    monkeypatch.setattr(subprocess, "run", missing)

    with pytest.raises(DependencyInstallError):
        HookRunnerInstaller(tmp_path).install()
