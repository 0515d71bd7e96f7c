"""Tests for the read-modify-write cycle on a project."""

from husky_conf.core.models import DEFAULT_TEST_SCRIPT, HookRunnerConfig, HuskyConfConfig
from husky_conf.hooks import HookConfigurator, add_hook, init_hooks, remove_hook


def test_init_installs_runner_and_configures(make_project, read_package, fake_installer):
    project_dir = make_project({"name": "demo"})
    installer = fake_installer(project_dir)

    result = init_hooks(project_dir, installer=installer, spinner=False)

    assert result["success"]
    assert result["action"] == "configured"
    assert installer.calls == 1

    data = read_package(project_dir)
    assert data["devDependencies"] == {"husky": "^1.0.0"}
    assert data["scripts"] == {"test": DEFAULT_TEST_SCRIPT, "precommit": "run test"}
    assert data["husky"] == {"hooks": {"pre-commit": "run precommit"}}


def test_init_skips_install_when_runner_present(make_project, fake_installer):
    project_dir = make_project({"devDependencies": {"husky": "^1.0.0"}})
    installer = fake_installer(project_dir)

    init_hooks(project_dir, installer=installer, spinner=False)

    assert installer.calls == 0


def test_init_when_already_configured(make_project, fake_installer):
    project_dir = make_project({"husky": {"hooks": {"pre-push": "run prepush"}}})
    before = (project_dir / "package.json").read_bytes()

    result = init_hooks(project_dir, install=False)

    assert result == {"success": True, "message": "Husky already exists", "action": "skipped"}
    assert (project_dir / "package.json").read_bytes() == before


def test_install_failure_aborts_without_mutation(make_project, fake_installer):
    project_dir = make_project({"name": "demo"})
    before = (project_dir / "package.json").read_bytes()
    installer = fake_installer(project_dir, fail=True)

    result = add_hook(project_dir, "pre-push", installer=installer, spinner=False)

    assert not result["success"]
    assert "npm ERR!" in result["message"]
    assert (project_dir / "package.json").read_bytes() == before


def test_install_disabled_by_config(make_project, fake_installer):
    project_dir = make_project({"name": "demo"})
    installer = fake_installer(project_dir)
    config = HuskyConfConfig(hook_runner=HookRunnerConfig(auto_install=False))

    result = init_hooks(project_dir, config, installer=installer, spinner=False)

    assert not result["success"]
    assert installer.calls == 0


def test_add_invalid_hook_leaves_manifest_unchanged(make_project, fake_installer):
    project_dir = make_project({"scripts": {"test": "jest"}})
    before = (project_dir / "package.json").read_bytes()
    installer = fake_installer(project_dir)

    result = add_hook(project_dir, "not-a-hook", installer=installer, spinner=False)

    assert result == {"success": False, "message": "Invalid hook", "action": "error"}
    assert installer.calls == 0
    assert (project_dir / "package.json").read_bytes() == before


def test_add_then_remove(make_project, read_package):
    project_dir = make_project({
        "name": "demo",
        "scripts": {"test": "jest"},
        "husky": {"hooks": {"pre-commit": "run precommit"}},
    })

    added = add_hook(project_dir, "pre-push", install=False)
    assert added["message"] == "pre-push added into husky hooks as well as npm script"
    assert read_package(project_dir)["husky"]["hooks"]["pre-push"] == "run prepush"

    removed = remove_hook(project_dir, "pre-push")
    assert removed["message"] == "pre-push removed from husky hooks as well as npm script"

    data = read_package(project_dir)
    assert data["scripts"] == {"test": "jest"}
    assert data["husky"] == {"hooks": {"pre-commit": "run precommit"}}


def test_remove_invalid_hook(make_project):
    project_dir = make_project({"scripts": {"test": "jest"}})
    before = (project_dir / "package.json").read_bytes()

    result = remove_hook(project_dir, "not-a-hook")

    assert result["message"] == "Invalid hook"
    assert (project_dir / "package.json").read_bytes() == before


def test_missing_manifest_is_reported(tmp_path):
    result = HookConfigurator(tmp_path).add("pre-commit")

    assert not result["success"]
    assert "Manifest not found" in result["message"]


def test_custom_manifest_name(tmp_path, read_package):
    (tmp_path / "app.json").write_text("{}", encoding="utf-8")

    result = HookConfigurator(tmp_path, HuskyConfConfig(manifest="app.json")).init()

    assert result["success"]
    assert "husky" in (tmp_path / "app.json").read_text(encoding="utf-8")


def test_invalid_hook_is_checked_before_reading_manifest(tmp_path):
    assert remove_hook(tmp_path, "not-a-hook")["message"] == "Invalid hook"
    assert HookConfigurator(tmp_path).add("not-a-hook")["message"] == "Invalid hook"
    assert HookConfigurator(tmp_path).remove("not-a-hook")["message"] == "Invalid hook"
