"""
husky-conf - Manifest Hook Editor
Aplica init/add/remove sobre as seções "scripts" e "husky.hooks" do manifest.

As operações recebem um manifest já carregado e devolvem uma cópia alterada;
o manifest de entrada nunca é modificado.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .models import (
    HOOKS_KEY,
    HUSKY_KEY,
    SCRIPTS_KEY,
    HuskyConfConfig,
    HuskyConfError,
    is_known_hook,
    script_key,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class InvalidHookError(HuskyConfError):
    """Hook fora da lista de hooks git conhecidos."""

    def __init__(self, hook_name: Optional[str]):
        self.hook_name = hook_name
        super().__init__("Invalid hook")


class InvalidManifestError(HuskyConfError):
    """Seção do manifest com estrutura inesperada (não é um objeto)."""
    pass


# =============================================================================
# Helpers
# =============================================================================

def resolve_hook_command(hook_name: str, runner: Optional[str] = None) -> str:
    """
    Comando associado a um hook: "run " + nome do hook sem traços.

    Args:
        hook_name: Nome do hook (ex: pre-commit)
        runner: Prefixo opcional (ex: "npm" -> "npm run precommit")
    """
    command = f"run {script_key(hook_name)}"
    if runner:
        return f"{runner} {command}"
    return command


def _section(manifest: Dict[str, Any], key: str, label: str) -> Optional[Dict[str, Any]]:
    """Retorna a seção se existir, validando que é um objeto."""
    if key not in manifest:
        return None

    section = manifest[key]
    if not isinstance(section, dict):
        raise InvalidManifestError(f"'{label}' must be an object")
    return section


# =============================================================================
# Editor
# =============================================================================

@dataclass
class EditResult:
    """Resultado de uma edição: novo manifest e se algo mudou."""
    manifest: Dict[str, Any]
    changed: bool = True


class ManifestHookEditor:
    """
    Editor das seções de hooks e scripts.

    Regras:
    - Apenas hooks conhecidos são aceitos (InvalidHookError antes de qualquer mudança)
    - Campos não relacionados e a ordem das chaves são preservados
    - O script "test" padrão só é criado quando a seção "scripts" não existe
    """

    def __init__(self, config: Optional[HuskyConfConfig] = None):
        """
        Args:
            config: Configuração global (opcional)
        """
        self.config = config or HuskyConfConfig()

    def _run(self, name: str) -> str:
        """Comando "run <script>" com o runner configurado."""
        if self.config.runner:
            return f"{self.config.runner} run {name}"
        return f"run {name}"

    def resolve_hook_command(self, hook_name: str) -> str:
        """Comando registrado em husky.hooks para o hook."""
        return resolve_hook_command(hook_name, self.config.runner)

    def _ensure_scripts(self, manifest: Dict[str, Any]) -> Dict[str, Any]:
        """Retorna a seção scripts, criando-a com o "test" padrão se ausente."""
        scripts = _section(manifest, SCRIPTS_KEY, SCRIPTS_KEY)
        if scripts is None:
            scripts = {"test": self.config.default_test_script}
            manifest[SCRIPTS_KEY] = scripts
        return scripts

    def _ensure_hooks(self, manifest: Dict[str, Any]) -> Dict[str, Any]:
        """Retorna husky.hooks, criando os objetos intermediários se ausentes."""
        husky = _section(manifest, HUSKY_KEY, HUSKY_KEY)
        if husky is None:
            husky = {}
            manifest[HUSKY_KEY] = husky

        hooks = _section(husky, HOOKS_KEY, f"{HUSKY_KEY}.{HOOKS_KEY}")
        if hooks is None:
            hooks = {}
            husky[HOOKS_KEY] = hooks
        return hooks

    def init(self, manifest: Dict[str, Any]) -> EditResult:
        """
        Configura o husky no manifest.

        No-op (changed=False) se a chave "husky" já existe.
        """
        if HUSKY_KEY in manifest:
            logger.debug("'%s' already present, init skipped", HUSKY_KEY)
            return EditResult(manifest=manifest, changed=False)

        updated = copy.deepcopy(manifest)
        scripts = self._ensure_scripts(updated)
        scripts.setdefault("precommit", self._run("test"))

        updated[HUSKY_KEY] = {
            HOOKS_KEY: {
                "pre-commit": self.resolve_hook_command("pre-commit"),
            }
        }
        return EditResult(manifest=updated)

    def add(self, manifest: Dict[str, Any], hook_name: Optional[str]) -> EditResult:
        """
        Adiciona um hook e o script correspondente.

        Raises:
            InvalidHookError: Se o hook não é conhecido
            InvalidManifestError: Se alguma seção não é um objeto
        """
        if not is_known_hook(hook_name):
            raise InvalidHookError(hook_name)

        updated = copy.deepcopy(manifest)
        key = script_key(hook_name)

        self._ensure_scripts(updated)[key] = self._run("test")
        self._ensure_hooks(updated)[hook_name] = self.resolve_hook_command(hook_name)

        logger.debug("Hook %s bound to script %s", hook_name, key)
        return EditResult(manifest=updated)

    def remove(self, manifest: Dict[str, Any], hook_name: Optional[str]) -> EditResult:
        """
        Remove um hook e o script correspondente (ausência não é erro).

        Raises:
            InvalidHookError: Se o hook não é conhecido
            InvalidManifestError: Se alguma seção não é um objeto
        """
        if not is_known_hook(hook_name):
            raise InvalidHookError(hook_name)

        updated = copy.deepcopy(manifest)
        changed = False

        husky = _section(updated, HUSKY_KEY, HUSKY_KEY)
        hooks = _section(husky, HOOKS_KEY, f"{HUSKY_KEY}.{HOOKS_KEY}") if husky is not None else None
        if hooks is not None and hook_name in hooks:
            del hooks[hook_name]
            changed = True

        scripts = _section(updated, SCRIPTS_KEY, SCRIPTS_KEY)
        key = script_key(hook_name)
        if scripts is not None and key in scripts:
            del scripts[key]
            changed = True

        if not changed:
            logger.debug("Hook %s not configured, nothing to remove", hook_name)
        return EditResult(manifest=updated, changed=changed)
