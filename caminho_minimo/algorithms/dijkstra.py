"""
Algoritmo de Dijkstra: implementação manual com lista aberta mantida ordenada.
Caminho de custo mínimo em grafo com pesos não negativos.

Lista aberta: inserção por varredura linear na primeira posição com g estritamente maior
(empates entram depois dos já existentes, preservando a ordem de descoberta).
Lista fechada: nós finalizados; nunca são relaxados de novo (é o que garante término em grafos com ciclos).

Um nó já na lista aberta cujo g melhora não é reposicionado (ordem da implementação de referência);
resort_on_improve=True reposiciona e restaura a ordem estrita do Dijkstra.

Três interfaces:
- dijkstra_search: interface fiel; grava g_score/previous nos nós e devolve a lista de handles.
- find_path: interface robusta; resultado com status (FOUND / UNREACHABLE / INVALID_ENDPOINTS),
  sem alterar o grafo, com a lista aberta reordenada por padrão.
- shortest_path: mesma busca sobre um nx.DiGraph, retorna (caminho, custo) como os demais algoritmos.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Set, Tuple

import networkx as nx

from ..graph import Graph
from ..graph_operations import GraphOperations

logger = logging.getLogger(__name__)


class _OpenList:
    """Fronteira ordenada por g_score crescente; pertinência via set."""

    def __init__(self, g_score: Dict[int, float]) -> None:
        self._g = g_score
        self._items: List[int] = []
        self._members: Set[int] = set()

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, node: int) -> bool:
        return node in self._members

    def push(self, node: int) -> None:
        g = self._g[node]
        pos = len(self._items)
        for i, other in enumerate(self._items):
            if g < self._g[other]:
                pos = i
                break
        self._items.insert(pos, node)
        self._members.add(node)

    def pop(self) -> int:
        node = self._items.pop(0)
        self._members.discard(node)
        return node

    def reposition(self, node: int) -> None:
        self._items.remove(node)
        self._members.discard(node)
        self.push(node)


class SearchState:
    """
    Estado de uma execução (g_score, previous, nós fechados), separado dos nós do grafo.
    Permite buscas concorrentes sobre o mesmo grafo desde que ele não seja alterado.
    """

    def __init__(self, start: int, goal: int) -> None:
        self.start = start
        self.goal = goal
        self.g_score: Dict[int, float] = {}
        self.previous: Dict[int, Optional[int]] = {}
        self.expanded: List[int] = []
        self.closed: Set[int] = set()
        self.relaxations = 0

    def reached(self, node: Optional[int] = None) -> bool:
        """True se o nó (padrão: goal) foi finalizado nesta execução."""
        return (self.goal if node is None else node) in self.closed

    def path_to(self, node: Optional[int] = None) -> List[int]:
        """
        Reconstrói o caminho seguindo previous de trás para frente.
        Nó nunca alcançado: retorna só [node].
        """
        cur: Optional[int] = self.goal if node is None else node
        path: List[int] = []
        while cur is not None:
            path.append(cur)
            cur = self.previous.get(cur)
        path.reverse()
        return path

    def apply_to(self, graph: Graph) -> None:
        """Limpa o estado de todos os nós e grava nele os valores desta execução."""
        graph.reset_search_state()
        for h, g in self.g_score.items():
            node = graph.node(h)
            node.g_score = g
            node.previous = self.previous.get(h)


def run_search(
    graph: Graph,
    start: int,
    goal: int,
    *,
    resort_on_improve: bool = False,
) -> SearchState:
    """
    Executa a busca de start até goal sem alterar o grafo.

    Por padrão um nó melhorado fica na posição antiga da lista aberta (ordem da
    implementação de referência, que pode finalizar nós fora de ordem de custo).
    resort_on_improve=True move o nó para a posição ordenada (Dijkstra estrito).
    """
    GraphOperations.validate_path_nodes(graph, start, goal)
    state = SearchState(start, goal)
    state.g_score[start] = 0.0
    state.previous[start] = None

    open_list = _OpenList(state.g_score)
    open_list.push(start)

    while open_list:
        current = open_list.pop()
        state.closed.add(current)
        state.expanded.append(current)

        if current == goal:
            break

        g_current = state.g_score[current]
        for edge in graph.connections(current):
            target = edge.target
            if target in state.closed:
                continue
            tentative_g = g_current + edge.cost
            if target not in open_list:
                state.g_score[target] = tentative_g
                state.previous[target] = current
                state.relaxations += 1
                open_list.push(target)
            elif tentative_g < state.g_score[target]:
                state.g_score[target] = tentative_g
                state.previous[target] = current
                state.relaxations += 1
                if resort_on_improve:
                    open_list.reposition(target)

    return state


def dijkstra_search(
    graph: Graph,
    start: Optional[int],
    goal: Optional[int],
    *,
    resort_on_improve: bool = False,
) -> List[int]:
    """
    Retorna o caminho de start a goal como lista de handles e grava g_score/previous nos nós.

    - start ou goal None: [] (grafo intocado).
    - start == goal: [start], com g_score 0.
    - goal inalcançável: [goal] sozinho (distinguir pelo previous/g_score do nó).
    """
    if start is None or goal is None:
        return []
    GraphOperations.validate_path_nodes(graph, start, goal)

    if start == goal:
        graph.reset_search_state()
        graph.node(start).g_score = 0.0
        return [start]

    state = run_search(graph, start, goal, resort_on_improve=resort_on_improve)
    state.apply_to(graph)

    # Caminho reverso, do goal ao start, pelos previous gravados nos nós
    path: List[int] = []
    cur: Optional[int] = goal
    while cur is not None:
        path.append(cur)
        cur = graph.node(cur).previous
    path.reverse()
    return path


class PathStatus(enum.Enum):
    FOUND = "found"
    UNREACHABLE = "unreachable"
    INVALID_ENDPOINTS = "invalid_endpoints"


@dataclass(frozen=True)
class PathResult:
    """Resultado da busca robusta: status, caminho (vazio se não encontrado) e custo total."""

    status: PathStatus
    path: List[int] = field(default_factory=list)
    cost: float = math.inf
    state: Optional[SearchState] = None

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND


def find_path(
    graph: Graph,
    start: Optional[int],
    goal: Optional[int],
    *,
    resort_on_improve: bool = True,
) -> PathResult:
    """
    Busca sem efeitos colaterais; nunca levanta exceção por causa das extremidades.
    Usa a lista aberta reordenada (resort_on_improve=True), garantindo custo mínimo.
    """
    if start is None or goal is None or start not in graph or goal not in graph:
        logger.debug("find_path: extremidades inválidas start=%r goal=%r", start, goal)
        return PathResult(PathStatus.INVALID_ENDPOINTS)

    state = run_search(graph, start, goal, resort_on_improve=resort_on_improve)
    if not state.reached(goal):
        logger.debug(
            "find_path: %r inalcançável a partir de %r (%d nós expandidos)",
            goal, start, len(state.expanded),
        )
        return PathResult(PathStatus.UNREACHABLE, state=state)

    path = state.path_to(goal)
    logger.debug(
        "find_path: %d nós no caminho, custo %s, %d expandidos, %d relaxações",
        len(path), state.g_score[goal], len(state.expanded), state.relaxations,
    )
    return PathResult(PathStatus.FOUND, path, state.g_score[goal], state)


def shortest_path(
    G: nx.DiGraph,
    start: Hashable,
    goal: Hashable,
    weight: str = "weight",
) -> Tuple[List[Hashable], float]:
    """
    Retorna (caminho do start ao goal como lista de ids, custo total)
    ou ([], inf) se não houver caminho. Levanta NetworkXError se start/goal não existirem em G.
    """
    missing = [n for n in (start, goal) if n not in G]
    if missing:
        raise nx.NetworkXError(f"Nó(s) {missing} não existem no grafo.")
    graph, handles = GraphOperations.from_networkx(G, weight=weight)
    ids = {h: n for n, h in handles.items()}
    result = find_path(graph, handles[start], handles[goal], resort_on_improve=True)
    if not result.found:
        return [], float("inf")
    return [ids[h] for h in result.path], result.cost
