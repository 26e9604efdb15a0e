"""
Configuração do pytest e fixtures compartilhadas.
"""

from typing import Callable, List

import pytest

from caminho_minimo import Graph, build_reference_example


@pytest.fixture
def reference_graph() -> Graph:
    """Grafo de referência a..f (handles 0..5)."""
    return build_reference_example()


@pytest.fixture
def labels_of(reference_graph: Graph) -> Callable[[List[int]], List[str]]:
    """Converte uma lista de handles do grafo de referência em labels."""

    def _labels(path: List[int]) -> List[str]:
        return [reference_graph.node(h).label for h in path]

    return _labels


@pytest.fixture
def resort_graph() -> Graph:
    """
    s -> a (1), s -> c (3), s -> b (10), a -> b (1), b -> c (0.5), mais um nó isolado z.
    Melhorar b (10 -> 2) com a lista aberta reordenada finaliza b antes de c.
    """
    G = Graph()
    s, a, b, c = (G.add_node(label=n) for n in "sabc")
    G.add_node(label="z")
    G.add_edge(s, a, 1)
    G.add_edge(s, c, 3)
    G.add_edge(s, b, 10)
    G.add_edge(a, b, 1)
    G.add_edge(b, c, 0.5)
    return G
