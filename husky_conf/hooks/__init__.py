"""Husky hook configuration and hook runner installation."""

from .configure import (
    HookConfigurator,
    add_hook,
    init_hooks,
    remove_hook,
)
from .install import (
    DependencyInstallError,
    HookRunnerInstaller,
    has_hook_runner,
)

__all__ = [
    "DependencyInstallError",
    "HookConfigurator",
    "HookRunnerInstaller",
    "add_hook",
    "has_hook_runner",
    "init_hooks",
    "remove_hook",
]
