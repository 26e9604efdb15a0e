"""
Executa a busca no grafo de referência e imprime o g_score de cada nó do caminho.

Uso (na raiz do projeto):
  python -m caminho_minimo            # de 'a' até 'e'
  python -m caminho_minimo b f
"""

import logging
import sys
from typing import List, Optional

from .algorithms import dijkstra_search
from .config import DEFAULT_GOAL_LABEL, DEFAULT_START_LABEL, configure_logging
from .examples import build_reference_example
from .graph_operations import GraphOperations
from .metrics import describe_path, format_cost, measure_latency_ms

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (0, 2):
        print("Uso: python -m caminho_minimo [INICIO OBJETIVO]", file=sys.stderr)
        return 1
    start_label, goal_label = args if args else (DEFAULT_START_LABEL, DEFAULT_GOAL_LABEL)

    G = build_reference_example()
    start, goal = G.find(start_label), G.find(goal_label)
    missing = [lbl for lbl, h in ((start_label, start), (goal_label, goal)) if h is None]
    if missing:
        print(f"Nó(s) {missing} não existem no grafo de referência.", file=sys.stderr)
        return 1

    elapsed_ms, path = measure_latency_ms(lambda: dijkstra_search(G, start, goal))
    logger.info("busca %s -> %s em %.3f ms", start_label, goal_label, elapsed_ms)

    for h in path:
        print(format_cost(G.node(h).g_score))
    for line in describe_path(G, path):
        print(line)
    if G.node(goal).previous is None and start != goal:
        print(f"{goal_label} inalcançável a partir de {start_label}")
    else:
        print(f"custo total: {format_cost(GraphOperations.path_cost(G, path))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
