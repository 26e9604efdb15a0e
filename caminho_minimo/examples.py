"""
Grafo de referência (6 nós, a..f) para demonstração e testes.

Posições em pixels da tela original; arestas na mesma ordem de inserção,
o que importa para o desempate entre custos iguais.
Caminho mínimo a -> e: a, b, c, d, e (custo 2 + 3 + 1 + 4 = 10), melhor que a, f, e (5 + 6 = 11).
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .graph import Graph, Position

# Mapeamento: label -> posição (x, y)
REFERENCE_NODES: List[Tuple[str, Position]] = [
    ("a", (250.0, 150.0)),
    ("b", (500.0, 150.0)),
    ("c", (500.0, 300.0)),
    ("d", (500.0, 450.0)),
    ("e", (375.0, 600.0)),
    ("f", (250.0, 450.0)),
]

# (origem, destino, custo); c -> a fecha um ciclo
REFERENCE_EDGES: List[Tuple[str, str, float]] = [
    ("a", "b", 2),
    ("a", "f", 5),
    ("b", "c", 3),
    ("c", "a", 3),
    ("c", "d", 1),
    ("d", "e", 4),
    ("d", "f", 4),
    ("f", "e", 6),
]


def build_reference_example() -> Graph:
    """Gera o grafo de referência; nós recebem handles 0..5 na ordem a..f."""
    G = Graph()
    handles: Dict[str, int] = {}
    for label, pos in REFERENCE_NODES:
        handles[label] = G.add_node(position=pos, label=label)
    for u, v, cost in REFERENCE_EDGES:
        G.add_edge(handles[u], handles[v], cost)
    return G
