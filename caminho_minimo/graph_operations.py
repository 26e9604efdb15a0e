"""
Operações sobre o grafo: custo de aresta, custo e validação de caminho, alcançabilidade e conversão NetworkX.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Hashable, List, Sequence, Tuple

import networkx as nx

from .graph import Graph, UnknownNodeError

logger = logging.getLogger(__name__)

# Atributos usados na conversão de/para NetworkX
KEY_WEIGHT = "weight"
KEY_POS = "pos"
KEY_LABEL = "label"
KEY_G_SCORE = "g_score"


class GraphOperations:
    """Responsável pelas consultas estruturais e conversões do grafo (sem busca)."""

    @staticmethod
    def edge_cost(graph: Graph, u: int, v: int) -> float:
        """Custo da aresta u -> v (a mais barata, se houver paralelas); inf se não existir."""
        costs = [e.cost for e in graph.connections(u) if e.target == v]
        return min(costs) if costs else float("inf")

    @staticmethod
    def path_cost(graph: Graph, path: Sequence[int]) -> float:
        """Custo total de um caminho (lista de handles)."""
        if len(path) < 2:
            return 0.0
        total = 0.0
        for i in range(len(path) - 1):
            w = GraphOperations.edge_cost(graph, path[i], path[i + 1])
            if w == float("inf"):
                return float("inf")
            total += w
        return total

    @staticmethod
    def is_contiguous(graph: Graph, path: Sequence[int]) -> bool:
        """True se cada par consecutivo do caminho tem uma aresta no grafo."""
        return not math.isinf(GraphOperations.path_cost(graph, path))

    @staticmethod
    def reachable_nodes(graph: Graph, root: int) -> List[int]:
        """
        Nós alcançáveis a partir de root, em ordem de descoberta em profundidade
        (a mesma ordem em que o grafo é percorrido para desenho).
        """
        visited: List[int] = []
        seen = set()
        stack = [root]
        graph.node(root)
        while stack:
            u = stack.pop()
            if u in seen:
                continue
            seen.add(u)
            visited.append(u)
            # Empilha ao contrário para visitar as conexões na ordem original
            for edge in reversed(graph.connections(u)):
                if edge.target not in seen:
                    stack.append(edge.target)
        return visited

    @staticmethod
    def validate_path_nodes(graph: Graph, start: Any, goal: Any) -> None:
        """
        Levanta UnknownNodeError se start ou goal não existirem no grafo.
        """
        missing = [n for n in (start, goal) if n not in graph]
        if not missing:
            return
        raise UnknownNodeError(
            f"Nó(s) {missing} não existem no grafo. Handles válidos: 0..{len(graph) - 1}."
        )

    @staticmethod
    def from_networkx(
        G: nx.DiGraph,
        weight: str = KEY_WEIGHT,
        pos: str = KEY_POS,
    ) -> Tuple[Graph, Dict[Hashable, int]]:
        """
        Converte um grafo NetworkX (DiGraph ou MultiDiGraph) para Graph.
        Retorna (grafo, mapeamento id NetworkX -> handle). Custo ausente vale 1.
        Grafos não direcionados viram arestas nos dois sentidos.
        """
        graph = Graph()
        handles: Dict[Hashable, int] = {}
        for n, data in G.nodes(data=True):
            label = data.get(KEY_LABEL, n if isinstance(n, str) else str(n))
            handles[n] = graph.add_node(position=data.get(pos, (0.0, 0.0)), label=label)
        for u, v, data in G.edges(data=True):
            cost = data.get(weight, 1.0)
            graph.add_edge(handles[u], handles[v], cost)
            if not G.is_directed() and u != v:
                graph.add_edge(handles[v], handles[u], cost)
        logger.debug(
            "from_networkx: %d nós, %d arestas convertidas", len(graph), G.number_of_edges()
        )
        return graph, handles

    @staticmethod
    def to_networkx(graph: Graph) -> nx.MultiDiGraph:
        """Converte Graph para MultiDiGraph (preserva arestas paralelas)."""
        G = nx.MultiDiGraph()
        for h in graph.nodes():
            node = graph.node(h)
            G.add_node(h, **{KEY_POS: node.position, KEY_LABEL: node.label, KEY_G_SCORE: node.g_score})
        for u, edge in graph.edges():
            G.add_edge(u, edge.target, **{KEY_WEIGHT: edge.cost})
        return G
