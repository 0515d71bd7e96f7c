"""Core modules for husky-conf."""

from .commands import InvalidCommandError, UsageError, parse_command
from .config_loader import ConfigLoadError, load_config, load_default_config
from .editor import (
    EditResult,
    InvalidHookError,
    InvalidManifestError,
    ManifestHookEditor,
    resolve_hook_command,
)
from .manifest import (
    ManifestReadError,
    ManifestWriteError,
    read_manifest,
    write_manifest,
)
from .models import (
    Command,
    CommandKind,
    HookRunnerConfig,
    HuskyConfConfig,
    HuskyConfError,
    KNOWN_HOOKS,
    script_key,
)

__all__ = [
    # Editor
    "EditResult",
    "ManifestHookEditor",
    "resolve_hook_command",
    # Manifest I/O
    "read_manifest",
    "write_manifest",
    # Commands
    "parse_command",
    # Config
    "load_config",
    "load_default_config",
    # Models
    "Command",
    "CommandKind",
    "HookRunnerConfig",
    "HuskyConfConfig",
    "KNOWN_HOOKS",
    "script_key",
    # Errors
    "ConfigLoadError",
    "HuskyConfError",
    "InvalidCommandError",
    "InvalidHookError",
    "InvalidManifestError",
    "ManifestReadError",
    "ManifestWriteError",
    "UsageError",
]
