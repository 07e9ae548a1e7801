import math

import pytest

from wordgraph.graph_build import GraphStore
from wordgraph.pagerank import PageRankEngine, compute_pagerank


def test_scores_sum_to_one(easy_store, cat_store):
    for store in (easy_store, cat_store):
        table = compute_pagerank(store)
        assert set(table) == set(store.nodes())
        assert math.isclose(sum(table.values()), 1.0, abs_tol=1e-9)
        assert all(0.0 <= v <= 1.0 for v in table.values())


def test_repeated_cooccurrence_does_not_inflate_mass():
    store = GraphStore.from_text("a b a b a b a c")
    table = compute_pagerank(store, convergence_threshold=1e-12, max_iterations=500)
    assert math.isclose(sum(table.values()), 1.0, abs_tol=1e-9)


def test_single_isolated_word_gets_everything():
    table = compute_pagerank(GraphStore.from_text("alone"))
    assert table == {"alone": pytest.approx(1.0)}


def test_two_word_chain_closed_form():
    store = GraphStore.from_text("x y")
    table = compute_pagerank(store, convergence_threshold=1e-12, max_iterations=1000)
    # closed form for x -> y with y a sink
    d = 0.85
    x = (1 - d) / 2 + d * table["y"] / 2
    assert table["x"] == pytest.approx(x, abs=1e-9)
    assert table["y"] > table["x"]


def test_empty_graph_and_unknown_words():
    engine = PageRankEngine(GraphStore.from_text(""))
    assert engine.table() == {}
    assert engine.score("anything") == 0.0


def test_unknown_word_scores_zero(easy_store):
    engine = PageRankEngine(easy_store)
    assert engine.score("zebra") == 0.0
    assert engine.score("the") > engine.score("again") > 0.0


def test_max_iterations_bounds_work(easy_store):
    one = compute_pagerank(easy_store, max_iterations=1)
    n = len(easy_store)
    # after one step every score is at least the teleport share
    assert all(v >= (1 - 0.85) / n - 1e-12 for v in one.values())
    assert math.isclose(sum(one.values()), 1.0, abs_tol=1e-9)


def test_engine_caches_table(easy_store):
    engine = PageRankEngine(easy_store)
    first = engine.table()
    first["the"] = 99.0
    assert engine.table()["the"] != 99.0


@pytest.mark.parametrize("kwargs", [
    {"damping_factor": 1.5},
    {"max_iterations": 0},
    {"convergence_threshold": 0.0},
])
def test_invalid_parameters(easy_store, kwargs):
    with pytest.raises(ValueError):
        compute_pagerank(easy_store, **kwargs)


def test_matches_networkx_pagerank(easy_store):
    pytest.importorskip("scipy")
    import networkx as nx

    ours = compute_pagerank(easy_store, convergence_threshold=1e-12, max_iterations=1000)
    ref = nx.pagerank(easy_store.to_networkx(), alpha=0.85, weight=None, tol=1e-12, max_iter=1000)
    for word, score in ref.items():
        assert ours[word] == pytest.approx(score, abs=1e-8)
