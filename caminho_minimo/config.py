"""
Configuração do pacote: constantes, variáveis de ambiente e logging.

O .env da raiz do projeto é carregado em caminho_minimo/__init__.py antes deste módulo.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

# Nível de log (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("CAMINHO_MINIMO_LOG_LEVEL", "WARNING")

LOG_FORMAT = os.environ.get(
    "CAMINHO_MINIMO_LOG_FORMAT",
    "%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Início e objetivo padrão no grafo de referência (linha de comando)
DEFAULT_START_LABEL = "a"
DEFAULT_GOAL_LABEL = "e"

# Formato dos rótulos de custo (g_score e custo de aresta)
COST_LABEL_FORMAT = "%.0f"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configura o logging raiz. Nível: argumento, senão CAMINHO_MINIMO_LOG_LEVEL."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
