import math
import random

import pytest

from wordgraph import AnalyzerConfig, TextGraphAnalyzer, UnknownWordError

from conftest import CAT_TEXT


@pytest.fixture
def analyzer(easy_file, tmp_path):
    config = AnalyzerConfig(walk_trace_path=str(tmp_path / "random_walk.txt"), seed=11)
    return TextGraphAnalyzer.from_file(easy_file, config=config)


def test_bridge_word_messages(analyzer):
    assert analyzer.query_bridge_words("the", "carefully") == \
        "The bridge words from the to carefully are: scientist."
    assert analyzer.query_bridge_words("with", "shared") == "No bridge words from with to shared!"
    assert analyzer.query_bridge_words("of", "report") == "No of or report in the graph!"
    assert analyzer.query_bridge_words("@", "!") == "No @ or ! in the graph!"


def test_bridge_words_sorted_in_message():
    a = TextGraphAnalyzer.from_text("x b y x a y x c y", config=AnalyzerConfig(walk_trace_path=None))
    assert a.query_bridge_words("x", "y") == "The bridge words from x to y are: a, b and c."


def test_query_words_are_normalized(analyzer):
    assert analyzer.bridge_words(" The ", "CAREFULLY") == {"scientist"}
    assert analyzer.shortest_path("More", "DATA").length == 1


def test_structured_unknown_word(analyzer):
    with pytest.raises(UnknownWordError):
        analyzer.bridge_words("the", "zebra")
    with pytest.raises(UnknownWordError):
        analyzer.shortest_path("zebra", "the")


def test_path_messages(analyzer):
    assert analyzer.calc_shortest_path("the", "detailed") == \
        "Path: the → data → wrote → a → detailed (Length: 4)"
    assert analyzer.calc_shortest_path("again", "analyzed") == "No path from again to analyzed."
    assert analyzer.calc_shortest_path("and", "world") == "No and or world in the graph!"


def test_page_rank(analyzer):
    table = analyzer.page_rank_table()
    assert math.isclose(sum(table.values()), 1.0, abs_tol=1e-9)
    assert analyzer.page_rank("THE") == table["the"]
    assert analyzer.page_rank("zebra") == 0.0
    assert analyzer.describe_page_rank("zebra") == "PageRank of 'zebra': 0.0000"


def test_config_controls_pagerank(easy_file):
    loose = TextGraphAnalyzer.from_file(
        easy_file, config=AnalyzerConfig(walk_trace_path=None, damping_factor=0.0)
    )
    n = len(loose.store)
    for score in loose.page_rank_table().values():
        assert score == pytest.approx(1.0 / n)


def test_random_walk_writes_trace(analyzer, tmp_path):
    text = analyzer.random_walk()
    assert text
    assert (tmp_path / "random_walk.txt").read_text(encoding="utf-8") == text


def test_rewrite_uses_graph(analyzer):
    assert analyzer.rewrite("the carefully") == "the scientist carefully"


def test_seeded_analyzers_agree(easy_file):
    config = AnalyzerConfig(walk_trace_path=None, seed=99)
    a = TextGraphAnalyzer.from_file(easy_file, config=config)
    b = TextGraphAnalyzer.from_file(easy_file, config=config)
    assert a.walk() == b.walk()


def test_injected_rng_wins_over_seed():
    rng = random.Random(1)
    a = TextGraphAnalyzer.from_text(CAT_TEXT, config=AnalyzerConfig(walk_trace_path=None, seed=5), rng=rng)
    assert a.rng is rng
    assert a.walker.rng is rng and a.generator.rng is rng


def test_empty_graph_is_well_defined(tmp_path):
    a = TextGraphAnalyzer.from_text("1234 !!!", config=AnalyzerConfig(walk_trace_path=None))
    assert a.describe_graph() == "Graph is empty."
    assert a.walk() == []
    assert a.random_walk() == ""
    assert a.page_rank("x") == 0.0
    assert a.rewrite("hello world") == "hello world"
    assert a.export_graph(tmp_path / "out") == {}


def test_export_graph_writes_requested_formats(analyzer, tmp_path):
    written = analyzer.export_graph(tmp_path / "out", formats=("graphml", "json"))
    assert set(written) == {"graphml", "json"}
    assert (tmp_path / "out" / "graph.json").exists()


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        TextGraphAnalyzer.from_file(tmp_path / "missing.txt")
