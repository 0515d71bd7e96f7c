"""Pytest configuration and fixtures."""

import json

import pytest

from husky_conf.hooks.install import DependencyInstallError, HookRunnerInstaller


@pytest.fixture
def make_project(tmp_path):
    """Cria projeto temporário com package.json."""

    def _make(manifest=None, indent=2):
        project_dir = tmp_path / "project"
        project_dir.mkdir(exist_ok=True)
        data = {"name": "demo", "version": "0.1.0"} if manifest is None else manifest
        (project_dir / "package.json").write_text(
            json.dumps(data, indent=indent) + "\n",
            encoding="utf-8"
        )
        return project_dir

    return _make


@pytest.fixture
def read_package():
    """Lê o package.json de um projeto."""

    def _read(project_dir):
        return json.loads((project_dir / "package.json").read_text(encoding="utf-8"))

    return _read


class FakeInstaller(HookRunnerInstaller):
    """Instalador sem npm: registra chamadas e simula o package.json atualizado."""

    def __init__(self, project_dir, fail=False):
        super().__init__(project_dir)
        self.fail = fail
        self.calls = 0

    def install(self):
        self.calls += 1
        if self.fail:
            raise DependencyInstallError("Failed to install husky@next: npm ERR!")

        path = self.project_dir / "package.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        data.setdefault("devDependencies", {})["husky"] = "^1.0.0"
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        return ""


@pytest.fixture
def fake_installer():
    """Factory de FakeInstaller."""
    return FakeInstaller
