import random

import networkx as nx
import pytest

from wordgraph.graph_build import GraphStore, UnknownWordError
from wordgraph.shortest_path import PathFinder, format_path


def _path_weight(store, path):
    return sum(store.weight(u, v) for u, v in zip(path, path[1:]))


def test_easy_corpus_paths(easy_store):
    finder = PathFinder(easy_store)
    assert format_path(finder.shortest_path("report", "the")) == "Path: report → with → the (Length: 2)"
    assert format_path(finder.shortest_path("more", "data")) == "Path: more → data (Length: 1)"
    result = finder.shortest_path("the", "detailed")
    assert result.path == ["the", "data", "wrote", "a", "detailed"]
    assert result.length == 4


def test_no_path_is_none(easy_store):
    finder = PathFinder(easy_store)
    assert finder.shortest_path("again", "analyzed") is None
    assert finder.shortest_path("it", "analyzed") is None
    assert finder.shortest_path("it", "shared") is None


def test_unknown_endpoint_raises(easy_store):
    with pytest.raises(UnknownWordError):
        PathFinder(easy_store).shortest_path("and", "world")


def test_cat_scenario_uses_direct_edge(cat_store):
    result = PathFinder(cat_store).shortest_path("the", "mat")
    assert result.path == ["the", "mat"]
    assert result.length == 1


def test_heavier_direct_edge_loses_to_lighter_detour():
    # a->b occurs three times, a->c->b once each
    store = GraphStore.from_text("a b a b a b a c b")
    result = PathFinder(store).shortest_path("a", "b")
    assert result.path == ["a", "c", "b"]
    assert result.length == 2


def test_path_to_self_is_trivial(cat_store):
    result = PathFinder(cat_store).shortest_path("cat", "cat")
    assert result.path == ["cat"]
    assert result.length == 0


def test_matches_networkx_on_random_graphs():
    rng = random.Random(1234)
    vocab = [chr(ord("a") + i) for i in range(7)]
    for _ in range(30):
        tokens = [rng.choice(vocab) for _ in range(rng.randint(2, 40))]
        store = GraphStore.from_tokens(tokens)
        finder = PathFinder(store)
        G = store.to_networkx()
        for s in store.nodes():
            for t in store.nodes():
                result = finder.shortest_path(s, t)
                if nx.has_path(G, s, t):
                    expected = nx.dijkstra_path_length(G, s, t, weight="weight")
                    assert result is not None
                    assert result.length == expected
                    assert result.path[0] == s and result.path[-1] == t
                    assert _path_weight(store, result.path) == result.length
                else:
                    assert result is None


def test_deterministic_within_a_run():
    store = GraphStore.from_text("s x t s y t")
    finder = PathFinder(store)
    first = finder.shortest_path("s", "t")
    for _ in range(5):
        assert finder.shortest_path("s", "t") == first
    assert first.length == 2
