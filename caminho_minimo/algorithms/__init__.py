from .dijkstra import (
    PathResult,
    PathStatus,
    SearchState,
    dijkstra_search,
    find_path,
    run_search,
    shortest_path,
)

__all__ = [
    "PathResult",
    "PathStatus",
    "SearchState",
    "dijkstra_search",
    "find_path",
    "run_search",
    "shortest_path",
]
