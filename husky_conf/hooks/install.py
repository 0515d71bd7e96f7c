"""
husky-conf - Hook Runner Installer
Verifica e instala a dependência que executa os hooks (husky) via npm.
"""

import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.models import HookRunnerConfig, HuskyConfError


logger = logging.getLogger(__name__)

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


# =============================================================================
# Exceptions
# =============================================================================

class DependencyInstallError(HuskyConfError):
    """Exception raised when the hook runner installation fails."""
    pass


# =============================================================================
# Helper Functions
# =============================================================================

def has_hook_runner(manifest: Dict[str, Any], package: str = "husky") -> bool:
    """Retorna True se o pacote está em dependencies ou devDependencies."""
    for section in DEPENDENCY_SECTIONS:
        deps = manifest.get(section)
        if isinstance(deps, dict) and package in deps:
            return True
    return False


# =============================================================================
# Installer Class
# =============================================================================

class HookRunnerInstaller:
    """Instala o hook runner no projeto usando o gerenciador de pacotes."""

    def __init__(self, project_dir: Path, config: Optional[HookRunnerConfig] = None):
        """
        Inicializa o instalador.

        Args:
            project_dir: Diretório do projeto (onde está o package.json)
            config: Pacote, versão e comando de instalação
        """
        self.project_dir = Path(project_dir)
        self.config = config or HookRunnerConfig()

    @property
    def command(self) -> List[str]:
        """Comando completo (ex: npm install --save-dev husky@next)."""
        return list(self.config.install_command) + [self.config.spec]

    def install(self) -> str:
        """
        Executa a instalação e aguarda o término.

        Returns:
            Stdout do comando

        Raises:
            DependencyInstallError: Se o comando não existir ou falhar
        """
        cmd = self.command
        logger.debug("Running %s in %s", " ".join(cmd), self.project_dir)

        try:
            result = subprocess.run(
                cmd,
                cwd=self.project_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise DependencyInstallError(
                f"Failed to install {self.config.spec}: {e}"
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise DependencyInstallError(
                f"Failed to install {self.config.spec}: {stderr or f'exit code {result.returncode}'}"
            )

        return result.stdout

    def install_with_spinner(self) -> str:
        """Instala exibindo um spinner (helper para CLI)."""
        from rich.console import Console

        console = Console()
        with console.status(f"{self.config.package.capitalize()} installing ..."):
            try:
                output = self.install()
            except DependencyInstallError:
                console.print("❌ Failed to install", style="red")
                raise

        console.print(f"✅ {self.config.package.capitalize()} successfully installed", style="green")
        return output
