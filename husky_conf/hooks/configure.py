"""
husky-conf - Hook Configurator
Executa o ciclo ler -> editar -> gravar do package.json para cada comando.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from ..core.editor import EditResult, InvalidHookError, ManifestHookEditor
from ..core.manifest import read_manifest, write_manifest
from ..core.models import HuskyConfConfig, HuskyConfError, is_known_hook
from .install import HookRunnerInstaller, has_hook_runner


logger = logging.getLogger(__name__)


# =============================================================================
# Configurator Class
# =============================================================================

class HookConfigurator:
    """Gerencia a configuração de hooks no manifest de um projeto."""

    def __init__(
        self,
        project_dir: Path,
        config: Optional[HuskyConfConfig] = None,
        installer: Optional[HookRunnerInstaller] = None,
        spinner: bool = True
    ):
        """
        Inicializa o configurador.

        Args:
            project_dir: Diretório do projeto
            config: Configuração global (opcional)
            installer: Instalador do hook runner (default: npm)
            spinner: Exibe spinner durante a instalação
        """
        self.project_dir = Path(project_dir)
        self.config = config or HuskyConfConfig()
        self.manifest_path = self.project_dir / self.config.manifest
        self.editor = ManifestHookEditor(self.config)
        self.installer = installer or HookRunnerInstaller(self.project_dir, self.config.hook_runner)
        self.spinner = spinner

    def ensure_hook_runner(self) -> Dict[str, Any]:
        """
        Instala o hook runner se ele não estiver nas dependências.

        Returns:
            Dict com resultado
        """
        try:
            manifest = read_manifest(self.manifest_path)
        except HuskyConfError as e:
            return _error(e)

        package = self.config.hook_runner.package
        if has_hook_runner(manifest, package):
            return {"success": True, "message": f"{package} already installed", "action": "skipped"}

        if not self.config.hook_runner.auto_install:
            return {
                "success": False,
                "message": f"{package} is not a dependency of this project",
                "action": "error"
            }

        try:
            if self.spinner:
                self.installer.install_with_spinner()
            else:
                self.installer.install()
        except HuskyConfError as e:
            return _error(e)

        return {"success": True, "message": f"{package} installed", "action": "installed"}

    def _apply(self, edit: Callable[[Dict[str, Any]], EditResult]) -> EditResult:
        """Lê o manifest, aplica a edição e grava se houve mudança."""
        manifest = read_manifest(self.manifest_path)
        result = edit(manifest)

        if result.changed:
            write_manifest(self.manifest_path, result.manifest)
        return result

    def init(self) -> Dict[str, Any]:
        """Configura o husky no manifest (no-op se já existir)."""
        try:
            result = self._apply(self.editor.init)
        except HuskyConfError as e:
            return _error(e)

        if not result.changed:
            return {"success": True, "message": "Husky already exists", "action": "skipped"}

        return {"success": True, "message": "Husky setup completed", "action": "configured"}

    def add(self, hook_name: Optional[str]) -> Dict[str, Any]:
        """Adiciona hook e script correspondente."""
        if not is_known_hook(hook_name):
            return _error(InvalidHookError(hook_name))

        try:
            self._apply(lambda manifest: self.editor.add(manifest, hook_name))
        except HuskyConfError as e:
            return _error(e)

        return {
            "success": True,
            "message": f"{hook_name} added into husky hooks as well as npm script",
            "action": "added"
        }

    def remove(self, hook_name: Optional[str]) -> Dict[str, Any]:
        """Remove hook e script correspondente."""
        if not is_known_hook(hook_name):
            return _error(InvalidHookError(hook_name))

        try:
            self._apply(lambda manifest: self.editor.remove(manifest, hook_name))
        except HuskyConfError as e:
            return _error(e)

        return {
            "success": True,
            "message": f"{hook_name} removed from husky hooks as well as npm script",
            "action": "removed"
        }


def _error(error: Exception) -> Dict[str, Any]:
    logger.debug("Operation failed: %r", error)
    return {"success": False, "message": str(error), "action": "error"}


# =============================================================================
# Helper Functions
# =============================================================================

def _run(
    project_dir: Path,
    operation: Callable[[HookConfigurator], Dict[str, Any]],
    config: Optional[HuskyConfConfig] = None,
    install: bool = True,
    **kwargs: Any
) -> Dict[str, Any]:
    """Instala o hook runner (se pedido) e executa a operação."""
    configurator = HookConfigurator(project_dir, config, **kwargs)

    if install:
        installed = configurator.ensure_hook_runner()
        if not installed["success"]:
            return installed

    return operation(configurator)


def init_hooks(
    project_dir: Path,
    config: Optional[HuskyConfConfig] = None,
    install: bool = True,
    **kwargs: Any
) -> Dict[str, Any]:
    """
    Inicializa o husky no projeto.

    Args:
        project_dir: Diretório do projeto
        config: Configuração global
        install: Instala o hook runner antes, se ausente

    Returns:
        Dict com resultado
    """
    return _run(project_dir, lambda c: c.init(), config, install, **kwargs)


def add_hook(
    project_dir: Path,
    hook_name: Optional[str],
    config: Optional[HuskyConfConfig] = None,
    install: bool = True,
    **kwargs: Any
) -> Dict[str, Any]:
    """Adiciona um hook; hooks inválidos falham antes de qualquer instalação."""
    if not is_known_hook(hook_name):
        return _error(InvalidHookError(hook_name))

    return _run(project_dir, lambda c: c.add(hook_name), config, install, **kwargs)


def remove_hook(
    project_dir: Path,
    hook_name: Optional[str],
    config: Optional[HuskyConfConfig] = None,
    **kwargs: Any
) -> Dict[str, Any]:
    """Remove um hook (nunca instala dependências)."""
    return _run(project_dir, lambda c: c.remove(hook_name), config, False, **kwargs)


def print_result(result: Dict[str, Any]) -> None:
    """Printa o resultado de uma operação (helper para CLI)."""
    from rich.console import Console

    console = Console()

    if result["success"]:
        console.print(f"✅ {result['message']}", style="green")
    else:
        console.print(f"❌ {result['message']}", style="red")
