"""Weighted random walk that stops on the first repeated edge."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Set, Tuple, Union

from .graph_build import GraphStore

_LOG = logging.getLogger(__name__)


class RandomWalker:
    def __init__(
        self,
        store: GraphStore,
        rng: Optional[random.Random] = None,
        trace_path: Optional[Union[str, Path]] = None,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.trace_path = trace_path

    def walk(self) -> List[str]:
        """
        Start at a uniformly random word and follow out-edges, choosing each
        next word with probability proportional to edge weight.

        Ends at a word with no out-edges, or just before an edge would be
        traversed a second time. Returns [] for an empty graph.
        """
        nodes = self.store.nodes()
        if not nodes:
            return []

        current = self.rng.choice(nodes)
        path = [current]
        traversed: Set[Tuple[str, str]] = set()
        while True:
            outs = self.store.successors(current)
            if not outs:
                break
            targets = list(outs)
            nxt = self.rng.choices(targets, weights=[outs[t] for t in targets], k=1)[0]
            if (current, nxt) in traversed:
                break
            traversed.add((current, nxt))
            path.append(nxt)
            current = nxt

        self._write_trace(path)
        return path

    def _write_trace(self, path: List[str]) -> None:
        if self.trace_path is None:
            return
        try:
            Path(self.trace_path).write_text(" ".join(path), encoding="utf-8")
        except OSError as e:
            _LOG.warning("Could not write random-walk trace to %s: %s", self.trace_path, e)
