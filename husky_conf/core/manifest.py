"""
husky-conf - Manifest I/O
Leitura e escrita atômica do package.json.
"""

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .models import HuskyConfError


logger = logging.getLogger(__name__)

DEFAULT_INDENT = "  "

# Campo adicionado por leitores de package.json; nunca é persistido
INTERNAL_ID_KEY = "_id"


# =============================================================================
# Exceptions
# =============================================================================

class ManifestReadError(HuskyConfError):
    """Erro ao ler ou parsear o manifest."""
    pass


class ManifestWriteError(HuskyConfError):
    """Erro ao gravar o manifest."""
    pass


# =============================================================================
# Helpers
# =============================================================================

_INDENT_RE = re.compile(r"^([ \t]+)\S", re.MULTILINE)


def detect_indent(text: str) -> str:
    """Retorna a indentação usada no JSON (default: 2 espaços)."""
    match = _INDENT_RE.search(text)
    if not match:
        return DEFAULT_INDENT
    return match.group(1)


def _detect_existing_indent(path: Path) -> str:
    """Indentação do arquivo atual, se existir e for legível."""
    try:
        return detect_indent(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        return DEFAULT_INDENT


def serialize_manifest(manifest: Dict[str, Any], indent: str = DEFAULT_INDENT) -> str:
    """
    Serializa o manifest como JSON.

    Remove "_id" do nível raiz e termina com quebra de linha.
    """
    data = {k: v for k, v in manifest.items() if k != INTERNAL_ID_KEY}
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


# =============================================================================
# Read / Write
# =============================================================================

def read_manifest(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega o manifest.

    Raises:
        ManifestReadError: Arquivo ausente, ilegível ou sem objeto na raiz
    """
    path = Path(path)

    if not path.is_file():
        raise ManifestReadError(f"Manifest not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ManifestReadError(f"Invalid JSON in {path.name}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestReadError(f"{path.name} must contain a JSON object")

    logger.debug("Manifest loaded from %s (%d keys)", path, len(data))
    return data


def write_manifest(
    path: Union[str, Path],
    manifest: Dict[str, Any],
    indent: Optional[str] = None
) -> Path:
    """
    Grava o manifest substituindo o arquivo inteiro (tmp + os.replace).

    Args:
        path: Caminho do package.json
        manifest: Conteúdo a gravar
        indent: Indentação; se None, reaproveita a do arquivo existente

    Raises:
        ManifestWriteError: Se a gravação falhar (arquivo anterior intacto)
    """
    path = Path(path)

    if indent is None:
        indent = _detect_existing_indent(path)

    try:
        # Surrogates isolados ("\ud800") falham aqui, antes de criar o tmp
        content = serialize_manifest(manifest, indent).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ManifestWriteError(f"Cannot serialize manifest: {e}") from e

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=str(path.parent),
        )
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o777)
        os.replace(tmp_name, path)
    except (OSError, ValueError) as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ManifestWriteError(f"Cannot write {path}: {e}") from e

    logger.debug("Manifest written to %s", path)
    return path
