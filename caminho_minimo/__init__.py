# Busca de caminho mínimo (Dijkstra com lista aberta ordenada) em grafo direcionado ponderado

from pathlib import Path

from dotenv import load_dotenv

# Carrega .env da raiz do projeto (sobe do diretório do pacote até encontrar .env)
_package_dir = Path(__file__).resolve().parent
_root = _package_dir.parent
for _candidate in [_root, _root.parent]:
    _env_file = _candidate / ".env"
    if _env_file.is_file():
        load_dotenv(_env_file)
        break

from .graph import (
    Edge,
    Graph,
    GraphError,
    NegativeCostError,
    Node,
    UnknownNodeError,
)
from .graph_operations import GraphOperations
from .algorithms import (
    PathResult,
    PathStatus,
    SearchState,
    dijkstra_search,
    find_path,
    run_search,
    shortest_path,
)
from .examples import build_reference_example

__all__ = [
    "Edge",
    "Graph",
    "GraphError",
    "GraphOperations",
    "NegativeCostError",
    "Node",
    "PathResult",
    "PathStatus",
    "SearchState",
    "UnknownNodeError",
    "build_reference_example",
    "dijkstra_search",
    "find_path",
    "run_search",
    "shortest_path",
]
