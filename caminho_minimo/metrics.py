"""
Métricas e relatório de uma busca:

- Latência: tempo de execução da busca em milissegundos (média de repetições).
- Relatório: uma linha por nó do caminho (label, posição, g_score), no formato dos rótulos de custo.
"""

import math
import time
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .config import COST_LABEL_FORMAT
from .graph import Graph


def measure_latency_ms(
    fn: Callable[[], Any],
    repetitions: int = 1,
) -> Tuple[float, Any]:
    """
    Mede o tempo de execução de fn() em milissegundos.
    Retorna (tempo_medio_ms, resultado da última chamada).
    """
    if repetitions < 1:
        raise ValueError("repetitions deve ser >= 1")
    start = time.perf_counter()
    result = None
    for _ in range(repetitions):
        result = fn()
    elapsed = (time.perf_counter() - start) / repetitions * 1000
    return elapsed, result


def format_cost(value: Optional[float]) -> str:
    """Texto do rótulo de custo: "%.0f", "inf" para infinito, "-" se não definido."""
    if value is None:
        return "-"
    if math.isinf(value):
        return "inf"
    return COST_LABEL_FORMAT % value


def describe_path(graph: Graph, path: Sequence[int]) -> List[str]:
    """Uma linha por nó do caminho: nome, posição e g_score atual do nó."""
    lines: List[str] = []
    for h in path:
        node = graph.node(h)
        name = node.label if node.label is not None else f"#{h}"
        x, y = node.position
        lines.append(f"{name} ({x:g}, {y:g}) g={format_cost(node.g_score)}")
    return lines
