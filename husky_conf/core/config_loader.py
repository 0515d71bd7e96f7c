"""
husky-conf - Config Loader
Carrega a configuração padrão e o .huskyconf.yaml do projeto.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

from ..config import DEFAULT_CONFIG_FILE
from .models import HookRunnerConfig, HuskyConfConfig, HuskyConfError


logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = ".huskyconf.yaml"


# =============================================================================
# Exceções Customizadas
# =============================================================================

class ConfigLoadError(HuskyConfError):
    """Erro ao carregar arquivo de configuração."""
    pass


# =============================================================================
# Loader Principal
# =============================================================================

class ConfigLoader:
    """
    Carrega e valida a configuração YAML.

    Responsabilidades:
    - Ler o arquivo padrão empacotado
    - Sobrepor valores do arquivo do projeto
    - Converter para objetos tipados (HuskyConfConfig, HookRunnerConfig)
    """

    TOP_LEVEL_FIELDS = {"manifest", "runner", "default_test_script", "hook_runner"}
    HOOK_RUNNER_FIELDS = {"package", "version", "auto_install", "install_command"}

    def load_file(self, filepath: Union[str, Path]) -> Dict[str, Any]:
        """
        Lê um arquivo YAML e retorna o dicionário bruto.

        Raises:
            ConfigLoadError: Se não conseguir ler ou parsear o arquivo
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            raise ConfigLoadError(f"Config file not found: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Invalid YAML in {filepath}: {e}") from e
        except OSError as e:
            raise ConfigLoadError(f"Cannot read {filepath}: {e}") from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigLoadError(f"{filepath}: root must be a mapping")

        return data

    def load_from_dict(self, data: Dict[str, Any], base: Optional[HuskyConfConfig] = None) -> HuskyConfConfig:
        """
        Aplica um dicionário sobre uma configuração base.

        Args:
            data: Dicionário parseado do YAML
            base: Configuração de partida (default: valores do dataclass)
        """
        config = base or HuskyConfConfig()

        unknown = set(data) - self.TOP_LEVEL_FIELDS
        if unknown:
            raise ConfigLoadError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        if 'manifest' in data:
            config.manifest = self._expect_str(data, 'manifest')

        if 'runner' in data:
            runner = data['runner']
            if runner is not None and not isinstance(runner, str):
                raise ConfigLoadError("'runner' must be a string or null")
            config.runner = runner or None

        if 'default_test_script' in data:
            config.default_test_script = self._expect_str(data, 'default_test_script')

        if 'hook_runner' in data:
            config.hook_runner = self._load_hook_runner(data['hook_runner'], config.hook_runner)

        return config

    def _load_hook_runner(self, data: Any, base: HookRunnerConfig) -> HookRunnerConfig:
        """Valida a seção hook_runner."""
        if not isinstance(data, dict):
            raise ConfigLoadError("'hook_runner' must be a mapping")

        unknown = set(data) - self.HOOK_RUNNER_FIELDS
        if unknown:
            raise ConfigLoadError(f"Unknown hook_runner keys: {', '.join(sorted(unknown))}")

        runner = HookRunnerConfig(
            package=base.package,
            version=base.version,
            auto_install=base.auto_install,
            install_command=list(base.install_command),
        )

        if 'package' in data:
            runner.package = self._expect_str(data, 'package')

        if 'version' in data:
            version = data['version']
            if version is not None and not isinstance(version, (str, int, float)):
                raise ConfigLoadError("'version' must be a string or null")
            runner.version = str(version) if version is not None else None

        if 'auto_install' in data:
            if not isinstance(data['auto_install'], bool):
                raise ConfigLoadError("'auto_install' must be a boolean")
            runner.auto_install = data['auto_install']

        if 'install_command' in data:
            command = data['install_command']
            if (not isinstance(command, list) or not command
                    or not all(isinstance(part, str) for part in command)):
                raise ConfigLoadError("'install_command' must be a non-empty list of strings")
            runner.install_command = command

        return runner

    @staticmethod
    def _expect_str(data: Dict[str, Any], key: str) -> str:
        value = data[key]
        if not isinstance(value, str) or not value:
            raise ConfigLoadError(f"'{key}' must be a non-empty string")
        return value


# =============================================================================
# Funções Helper
# =============================================================================

def load_default_config() -> HuskyConfConfig:
    """
    Carrega a configuração padrão empacotada (config/default_config.yaml).
    """
    config_file = DEFAULT_CONFIG_FILE

    if not config_file.exists():
        raise ConfigLoadError(f"Default config not found: {config_file}")

    loader = ConfigLoader()
    return loader.load_from_dict(loader.load_file(config_file))


def load_config(
    project_dir: Union[str, Path],
    config_file: Optional[Union[str, Path]] = None
) -> HuskyConfConfig:
    """
    Carrega a configuração efetiva de um projeto.

    Args:
        project_dir: Diretório do projeto
        config_file: Arquivo explícito (senão usa .huskyconf.yaml se existir)

    Returns:
        HuskyConfConfig com defaults sobrepostos pelo projeto
    """
    loader = ConfigLoader()
    config = load_default_config()

    if config_file is None:
        candidate = Path(project_dir) / PROJECT_CONFIG_FILE
        if not candidate.is_file():
            return config
        config_file = candidate

    logger.debug("Loading project config from %s", config_file)
    return loader.load_from_dict(loader.load_file(config_file), base=config)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'ConfigLoader',
    'ConfigLoadError',
    'PROJECT_CONFIG_FILE',
    'load_config',
    'load_default_config',
]
