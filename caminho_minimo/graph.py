"""
Modelo do grafo para busca de caminho mínimo.

Vértices: nós endereçados por handles inteiros (índice na arena do Graph), com 'position' e 'label'.
Arestas: conexões direcionadas com custo não negativo (atributos: target, cost).
Estado de busca (g_score, previous) fica no nó, mas só o motor de busca escreve nele.

Ciclos, laços (self-loops) e arestas paralelas são entradas válidas.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import networkx as nx

Position = Tuple[float, float]


class GraphError(nx.NetworkXError):
    """Erro estrutural ao montar ou consultar o grafo."""


class NegativeCostError(GraphError):
    """Custo de aresta negativo (ou NaN): Dijkstra assume pesos não negativos."""


class UnknownNodeError(GraphError):
    """Handle de nó que não pertence ao grafo."""


@dataclass(frozen=True)
class Edge:
    """Aresta direcionada: leva ao nó 'target' com custo 'cost'."""

    target: int
    cost: float


@dataclass
class Node:
    """
    Vértice do grafo.
    g_score: custo acumulado do início até este nó na última busca (None se não alcançado).
    previous: handle do predecessor no melhor caminho conhecido (None no início e em nós não alcançados).
    """

    handle: int
    position: Position = (0.0, 0.0)
    label: Optional[str] = None
    g_score: Optional[float] = None
    previous: Optional[int] = None
    connections: List[Edge] = field(default_factory=list)

    def __repr__(self) -> str:
        name = self.label if self.label is not None else f"#{self.handle}"
        return f"Node({name}, g={self.g_score})"


class Graph:
    """Arena de nós; cada nó é dono das suas arestas de saída."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, handle: object) -> bool:
        index = _as_index(handle)
        return index is not None and 0 <= index < len(self._nodes)

    def add_node(self, position: Position = (0.0, 0.0), label: Optional[str] = None) -> int:
        """Adiciona um nó e retorna seu handle."""
        handle = len(self._nodes)
        x, y = position
        self._nodes.append(Node(handle=handle, position=(float(x), float(y)), label=label))
        return handle

    def add_edge(self, source: int, target: int, cost: float) -> Edge:
        """
        Adiciona a aresta source -> target ao fim das conexões de source.
        Levanta NegativeCostError para custo negativo ou NaN.
        """
        source = self._check(source)
        target = self._check(target)
        cost = float(cost)
        if math.isnan(cost) or cost < 0:
            raise NegativeCostError(
                f"Custo inválido {cost!r} na aresta {source} -> {target}: custos devem ser não negativos."
            )
        edge = Edge(target=target, cost=cost)
        self._nodes[source].connections.append(edge)
        return edge

    def node(self, handle: int) -> Node:
        return self._nodes[self._check(handle)]

    def connections(self, handle: int) -> Sequence[Edge]:
        """Arestas de saída do nó, na ordem em que foram adicionadas."""
        return self._nodes[self._check(handle)].connections

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._nodes)))

    def edges(self) -> Iterator[Tuple[int, Edge]]:
        """Todas as arestas como (origem, Edge), agrupadas por origem."""
        for node in self._nodes:
            for edge in node.connections:
                yield node.handle, edge

    def find(self, label: str) -> Optional[int]:
        """Handle do primeiro nó com este label, ou None."""
        for node in self._nodes:
            if node.label == label:
                return node.handle
        return None

    def reset_search_state(self) -> None:
        """Limpa g_score e previous de todos os nós."""
        for node in self._nodes:
            node.g_score = None
            node.previous = None

    def _check(self, handle: int) -> int:
        if handle not in self:
            raise UnknownNodeError(
                f"Nó {handle!r} não existe no grafo ({len(self._nodes)} nós)."
            )
        return operator.index(handle)


def _as_index(handle: object) -> Optional[int]:
    """Converte handles inteiros (int, numpy.int64, ...) para int; None para o resto (inclusive bool)."""
    if isinstance(handle, bool):
        return None
    try:
        return operator.index(handle)
    except TypeError:
        return None
