"""
husky-conf - Husky hooks configuration for package.json

Inicializa o husky, adiciona e remove hooks git e os scripts npm
correspondentes direto no manifest do projeto.
"""

from .__version__ import __version__

__all__ = ["__version__"]
