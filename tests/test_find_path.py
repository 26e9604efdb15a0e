import math

import pytest

from caminho_minimo import Graph, PathStatus, find_path


def test_found_reports_path_and_cost(reference_graph, labels_of):
    result = find_path(reference_graph, 0, 4)
    assert result.status is PathStatus.FOUND
    assert result.found
    assert labels_of(result.path) == ["a", "b", "c", "d", "e"]
    assert result.cost == 10
    assert result.state.relaxations > 0


def test_does_not_touch_node_state(reference_graph):
    find_path(reference_graph, 0, 4)
    assert all(reference_graph.node(h).g_score is None for h in reference_graph.nodes())


def test_start_equals_goal_is_found_with_zero_cost(reference_graph):
    result = find_path(reference_graph, 2, 2)
    assert result.status is PathStatus.FOUND
    assert result.path == [2]
    assert result.cost == 0


def test_unreachable_is_distinct_from_singleton_path():
    G = Graph()
    a, b = G.add_node(), G.add_node()
    G.add_edge(b, a, 1)
    result = find_path(G, a, b)
    assert result.status is PathStatus.UNREACHABLE
    assert result.path == []
    assert math.isinf(result.cost)
    assert not result.found


@pytest.mark.parametrize("start, goal", [(None, 1), (0, None), (0, 99), (-1, 0)])
def test_invalid_endpoints(reference_graph, start, goal):
    result = find_path(reference_graph, start, goal)
    assert result.status is PathStatus.INVALID_ENDPOINTS
    assert result.path == []
    assert result.state is None
