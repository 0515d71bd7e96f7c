"""
husky-conf - Core Data Models
Estruturas de dados fundamentais: hooks conhecidos, comandos e configuração.
"""

from dataclasses import dataclass, field
from typing import List, Optional, FrozenSet
from enum import Enum


# =============================================================================
# Exceptions
# =============================================================================

class HuskyConfError(Exception):
    """Erro base do husky-conf."""
    pass


# =============================================================================
# Constants
# =============================================================================

# Seção de scripts e seção de hooks dentro do manifest
SCRIPTS_KEY = "scripts"
HUSKY_KEY = "husky"
HOOKS_KEY = "hooks"

DEFAULT_TEST_SCRIPT = "echo 'Error: no test specified' && exit 1"

KNOWN_HOOKS: FrozenSet[str] = frozenset({
    "applypatch-msg",
    "commit-msg",
    "post-applypatch",
    "post-checkout",
    "post-commit",
    "post-merge",
    "post-receive",
    "post-rewrite",
    "post-update",
    "pre-applypatch",
    "pre-auto-gc",
    "pre-commit",
    "pre-push",
    "pre-rebase",
    "pre-receive",
    "prepare-commit-msg",
    "push-to-checkout",
    "update",
})


def is_known_hook(value: Optional[str]) -> bool:
    """Retorna True se o valor é um hook git suportado."""
    return value in KNOWN_HOOKS


def script_key(hook_name: str) -> str:
    """Deriva o nome do script npm a partir do hook (pre-commit -> precommit)."""
    return hook_name.replace("-", "")


# =============================================================================
# Commands
# =============================================================================

class CommandKind(str, Enum):
    """Comandos aceitos pela CLI."""
    INIT = "init"
    ADD = "add"
    REMOVE = "remove"
    VERSION = "version"

    @property
    def alias(self) -> str:
        """Alias de uma letra (i, a, r, v)."""
        return self.value[0]


@dataclass(frozen=True)
class Command:
    """Comando já validado, pronto para dispatch."""
    kind: CommandKind
    hook_value: Optional[str] = None

    @property
    def requires_hook_runner(self) -> bool:
        """init e add dependem do husky instalado no projeto."""
        return self.kind in (CommandKind.INIT, CommandKind.ADD)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class HookRunnerConfig:
    """Configuração da dependência externa que executa os hooks."""
    package: str = "husky"
    version: Optional[str] = "next"
    auto_install: bool = True
    install_command: List[str] = field(default_factory=lambda: [
        "npm",
        "install",
        "--save-dev",
    ])

    @property
    def spec(self) -> str:
        """Especificador instalável (ex: husky@next)."""
        if self.version:
            return f"{self.package}@{self.version}"
        return self.package


@dataclass
class HuskyConfConfig:
    """Configuração global do husky-conf."""
    manifest: str = "package.json"
    runner: Optional[str] = None
    default_test_script: str = DEFAULT_TEST_SCRIPT
    hook_runner: HookRunnerConfig = field(default_factory=HookRunnerConfig)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Errors
    "HuskyConfError",

    # Constants
    "SCRIPTS_KEY",
    "HUSKY_KEY",
    "HOOKS_KEY",
    "DEFAULT_TEST_SCRIPT",
    "KNOWN_HOOKS",

    # Helpers
    "is_known_hook",
    "script_key",

    # Commands
    "CommandKind",
    "Command",

    # Configuration
    "HookRunnerConfig",
    "HuskyConfConfig",
]
