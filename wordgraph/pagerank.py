"""
PageRank over the word graph.

Power iteration with damping ``d``. For every word ``v``:

    score(v) = (1 - d) / N
             + d * sum(score(u) / out_degree(u) for u in in_neighbours(v))
             + d * sink_mass / N

``sink_mass`` is the total score held by words with no out-edges; spreading
it uniformly keeps the scores summing to 1. In-neighbours come from the
store's reverse index with repeated co-occurrences collapsed, and
``out_degree`` counts distinct successors, so each edge passes on
``score(u) / out_degree(u)`` exactly once.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from ._perf import timed
from .graph_build import GraphStore

_LOG = logging.getLogger(__name__)


def compute_pagerank(
    store: GraphStore,
    damping_factor: float = 0.85,
    max_iterations: int = 100,
    convergence_threshold: float = 1e-4,
) -> Dict[str, float]:
    """Return {word: score}. An empty graph yields an empty table."""
    if not (0.0 <= damping_factor <= 1.0):
        raise ValueError(f"damping_factor must be in [0,1], got {damping_factor}")
    if max_iterations < 1:
        raise ValueError("max_iterations must be >= 1")
    if convergence_threshold <= 0.0:
        raise ValueError("convergence_threshold must be > 0")

    words = store.nodes()
    n = len(words)
    if n == 0:
        return {}

    idx = {w: i for i, w in enumerate(words)}
    out_deg = np.array([store.out_degree(w) for w in words], dtype=float)
    is_sink = out_deg == 0

    src_list, dst_list = [], []
    for v in words:
        for u in dict.fromkeys(store.predecessors(v)):
            src_list.append(idx[u])
            dst_list.append(idx[v])
    src = np.asarray(src_list, dtype=np.intp)
    dst = np.asarray(dst_list, dtype=np.intp)

    d = float(damping_factor)
    scores = np.full(n, 1.0 / n)
    iterations = 0
    delta = 0.0
    with timed(_LOG, "pagerank", nodes=n, edges=len(src_list)):
        for iterations in range(1, max_iterations + 1):
            sink_mass = scores[is_sink].sum()
            # sources in src always have out_deg >= 1
            flow = np.bincount(dst, weights=scores[src] / out_deg[src], minlength=n)
            new = (1.0 - d) / n + d * flow + d * sink_mass / n
            delta = float(np.abs(new - scores).max())
            scores = new
            if delta < convergence_threshold:
                break
    _LOG.info("PageRank finished after %d iterations (max delta %.3g)", iterations, delta)
    return {w: float(scores[i]) for i, w in enumerate(words)}


class PageRankEngine:
    """Computes the table once and serves read-only lookups."""

    def __init__(
        self,
        store: GraphStore,
        damping_factor: float = 0.85,
        max_iterations: int = 100,
        convergence_threshold: float = 1e-4,
    ):
        self.store = store
        self._table: Optional[Dict[str, float]] = None
        self.damping_factor = damping_factor
        self.max_iterations = max_iterations
        self.convergence_threshold = convergence_threshold

    def table(self) -> Dict[str, float]:
        if self._table is None:
            self._table = compute_pagerank(
                self.store,
                damping_factor=self.damping_factor,
                max_iterations=self.max_iterations,
                convergence_threshold=self.convergence_threshold,
            )
        return dict(self._table)

    def score(self, word: str) -> float:
        if self._table is None:
            self.table()
        return self._table.get(word, 0.0)
