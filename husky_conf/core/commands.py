"""
husky-conf - Command Parsing
Converte os argumentos posicionais em um Command tipado.
"""

from typing import Dict, Optional, Sequence

from .models import Command, CommandKind, HuskyConfError


# =============================================================================
# Exceptions
# =============================================================================

class UsageError(HuskyConfError):
    """Nenhum comando informado."""
    pass


class InvalidCommandError(HuskyConfError):
    """Comando ou alias desconhecido."""

    def __init__(self, command: str):
        self.command = command
        super().__init__("Command not valid")


# =============================================================================
# Parsing
# =============================================================================

COMMANDS: Dict[str, CommandKind] = {
    name: kind
    for kind in CommandKind
    for name in (kind.value, kind.alias)
}


def parse_command(tokens: Sequence[Optional[str]]) -> Command:
    """
    Valida "<command> [<hookValue>]".

    O hook não é validado aqui; isso é feito pelo editor.

    Raises:
        UsageError: Nenhum token informado
        InvalidCommandError: Comando desconhecido
    """
    tokens = [t for t in tokens if t is not None]

    if not tokens:
        raise UsageError("Specify at least one command")

    name = tokens[0]
    kind = COMMANDS.get(name)
    if kind is None:
        raise InvalidCommandError(name)

    hook_value = tokens[1] if len(tokens) > 1 else None
    return Command(kind=kind, hook_value=hook_value)
