# wordgraph/analyzer.py
"""
Session object that owns one built graph and answers the query surface.

Structured results come from bridge_words / shortest_path / page_rank / walk;
the query_* / calc_* methods return the user-facing sentences the CLI prints.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Sequence, Union

from .bridge_words import BridgeWordEngine, format_word_list
from .config import AnalyzerConfig
from .graph_build import (
    GraphStore,
    UnknownWordError,
    describe_graph,
    export_all,
)
from .pagerank import PageRankEngine
from .random_walk import RandomWalker
from .schemas import PathResult
from .shortest_path import PathFinder, format_path
from .text_generator import TextGenerator

_LOG = logging.getLogger(__name__)


def _norm(word: str) -> str:
    return word.strip().lower()


class TextGraphAnalyzer:
    def __init__(
        self,
        store: GraphStore,
        config: Optional[AnalyzerConfig] = None,
        rng: Optional[random.Random] = None,
        source_name: str = "unknown",
    ):
        self.store = store
        self.config = config or AnalyzerConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.source_name = source_name

        self.bridges = BridgeWordEngine(store)
        self.generator = TextGenerator(self.bridges, rng=self.rng)
        self.paths = PathFinder(store)
        self.ranks = PageRankEngine(
            store,
            damping_factor=self.config.damping_factor,
            max_iterations=self.config.max_iterations,
            convergence_threshold=self.config.convergence_threshold,
        )
        self.walker = RandomWalker(store, rng=self.rng, trace_path=self.config.walk_trace_path)
        # computed once per loaded text
        self.ranks.table()

    @classmethod
    def from_text(cls, text: str, config: Optional[AnalyzerConfig] = None, **kwargs) -> "TextGraphAnalyzer":
        return cls(GraphStore.from_text(text), config=config, **kwargs)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], config: Optional[AnalyzerConfig] = None, **kwargs
    ) -> "TextGraphAnalyzer":
        kwargs.setdefault("source_name", Path(path).name)
        return cls(GraphStore.from_file(path), config=config, **kwargs)

    # --- Structured queries ---

    def bridge_words(self, a: str, b: str) -> FrozenSet[str]:
        return self.bridges.bridge_words(_norm(a), _norm(b))

    def rewrite(self, text: str) -> str:
        return self.generator.rewrite(text)

    def shortest_path(self, a: str, b: str) -> Optional[PathResult]:
        return self.paths.shortest_path(_norm(a), _norm(b))

    def page_rank(self, word: str) -> float:
        return self.ranks.score(_norm(word))

    def page_rank_table(self) -> Dict[str, float]:
        return self.ranks.table()

    def walk(self) -> List[str]:
        return self.walker.walk()

    # --- Messages ---

    def query_bridge_words(self, a: str, b: str) -> str:
        a, b = _norm(a), _norm(b)
        try:
            found = self.bridges.bridge_words(a, b)
        except UnknownWordError as e:
            return str(e)
        if not found:
            return f"No bridge words from {a} to {b}!"
        return f"The bridge words from {a} to {b} are: {format_word_list(found)}."

    def calc_shortest_path(self, a: str, b: str) -> str:
        a, b = _norm(a), _norm(b)
        try:
            result = self.paths.shortest_path(a, b)
        except UnknownWordError as e:
            return str(e)
        if result is None:
            return f"No path from {a} to {b}."
        return format_path(result)

    def describe_page_rank(self, word: str) -> str:
        word = _norm(word)
        return f"PageRank of '{word}': {self.page_rank(word):.4f}"

    def random_walk(self) -> str:
        return " ".join(self.walk())

    def describe_graph(self) -> str:
        return describe_graph(self.store)

    def export_graph(
        self,
        out_dir: Optional[Union[str, Path]] = None,
        formats: Sequence[str] = ("graphml", "json", "html", "png"),
    ) -> Dict[str, str]:
        return export_all(
            self.store,
            out_dir or self.config.export_dir,
            pagerank=self.ranks.table(),
            formats=formats,
            source_name=self.source_name,
        )
