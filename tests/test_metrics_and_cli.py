import pytest

from caminho_minimo import dijkstra_search
from caminho_minimo.__main__ import main
from caminho_minimo.metrics import describe_path, format_cost, measure_latency_ms


@pytest.mark.parametrize(
    "value, text", [(None, "-"), (0.0, "0"), (10.0, "10"), (2.4, "2"), (float("inf"), "inf")]
)
def test_format_cost(value, text):
    assert format_cost(value) == text


def test_describe_path(reference_graph):
    path = dijkstra_search(reference_graph, 0, 2)
    assert describe_path(reference_graph, path) == [
        "a (250, 150) g=0",
        "b (500, 150) g=2",
        "c (500, 300) g=5",
    ]


def test_measure_latency_returns_last_result():
    calls = []
    elapsed, result = measure_latency_ms(lambda: calls.append(1) or len(calls), repetitions=3)
    assert result == 3
    assert elapsed >= 0
    with pytest.raises(ValueError):
        measure_latency_ms(lambda: None, repetitions=0)


def test_cli_prints_g_scores_of_reference_path(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:5] == ["0", "2", "5", "6", "10"]
    assert out[-1] == "custo total: 10"


def test_cli_reports_unreachable_goal(capsys):
    assert main(["e", "a"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "-"
    assert out[-1] == "a inalcançável a partir de e"


def test_cli_rejects_unknown_labels(capsys):
    assert main(["a", "x"]) == 1
    assert "['x']" in capsys.readouterr().err
    assert main(["a"]) == 1
