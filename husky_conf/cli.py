"""
husky-conf - Command Line Interface
Entry point: husky-conf <command> [<hook>]
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from husky_conf import __version__
from husky_conf.core.commands import InvalidCommandError, UsageError, parse_command
from husky_conf.core.config_loader import ConfigLoadError, load_config
from husky_conf.core.models import Command, CommandKind
from husky_conf.hooks.configure import (
    add_hook,
    init_hooks,
    print_result,
    remove_hook,
)


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="husky-conf",
    help="🪝 husky-conf - Configure husky hooks in package.json",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configura logging via rich (stderr)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# =============================================================================
# Dispatch
# =============================================================================

def dispatch(
    command: Command,
    project_dir: Path,
    config_file: Optional[Path] = None,
    install: bool = True,
    **kwargs: Any
) -> Dict[str, Any]:
    """
    Executa um comando já validado.

    Args:
        command: Comando tipado (ver parse_command)
        project_dir: Diretório onde está o package.json
        config_file: Arquivo de configuração explícito
        install: Instala o hook runner antes de init/add, se ausente

    Returns:
        Dict com resultado ({"success", "message", "action"})
    """
    if command.kind == CommandKind.VERSION:
        return {"success": True, "message": f"husky-conf v{__version__}", "action": "version"}

    try:
        config = load_config(project_dir, config_file)
    except ConfigLoadError as e:
        return {"success": False, "message": str(e), "action": "error"}

    if command.kind == CommandKind.INIT:
        return init_hooks(project_dir, config, install=install, **kwargs)

    if command.kind == CommandKind.ADD:
        return add_hook(project_dir, command.hook_value, config, install=install, **kwargs)

    return remove_hook(project_dir, command.hook_value, config, **kwargs)


# =============================================================================
# Command: husky-conf
# =============================================================================

@app.command()
def run(
    command: Optional[str] = typer.Argument(
        None,
        help="init (i), add (a), remove (r), version (v)"
    ),
    hook: Optional[str] = typer.Argument(
        None,
        help="Hook git para add/remove (ex: pre-commit, commit-msg)"
    ),
    cwd: Optional[Path] = typer.Option(
        None,
        "--cwd",
        help="Diretório do projeto (default: diretório atual)"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Arquivo de configuração (default: .huskyconf.yaml)"
    ),
    no_install: bool = typer.Option(
        False,
        "--no-install",
        help="Não instala o husky automaticamente"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Modo verbose (logs de debug)"
    ),
) -> None:
    """
    🪝 Configura hooks do husky no package.json

    Exemplos:

    \b
    husky-conf version
    husky-conf init
    husky-conf add commit-msg
    husky-conf remove commit-msg
    """
    setup_logging(verbose)

    try:
        parsed = parse_command([command, hook])
    except UsageError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)
    except InvalidCommandError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(0)

    result = dispatch(
        parsed,
        project_dir=cwd or Path.cwd(),
        config_file=config_file,
        install=not no_install,
    )

    if result["action"] == "version":
        console.print(f"ℹ️  {result['message']}", style="bold cyan")
    else:
        print_result(result)


# =============================================================================
# Main Entry Point
# =============================================================================

def main() -> None:
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
