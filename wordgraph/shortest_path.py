"""Minimum-total-weight directed path between two words (Dijkstra)."""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Dict, List, Optional, Tuple

from .graph_build import GraphStore, UnknownWordError
from .schemas import PathResult


class PathFinder:
    def __init__(self, store: GraphStore):
        self.store = store

    def shortest_path(self, source: str, target: str) -> Optional[PathResult]:
        """
        Label-setting search from *source*; stops once *target* is settled.

        Returns None when *target* is unreachable. Among equal-cost paths the
        one found first wins (heap entries are ordered by push sequence).
        """
        if source not in self.store or target not in self.store:
            raise UnknownWordError(source, target)

        dist: Dict[str, float] = {w: math.inf for w in self.store.nodes()}
        prev: Dict[str, str] = {}
        dist[source] = 0
        seq = itertools.count()
        heap: List[Tuple[float, int, str]] = [(0, next(seq), source)]
        settled = set()

        while heap:
            d, _, u = heapq.heappop(heap)
            if u in settled:
                continue
            settled.add(u)
            if u == target:
                break
            for v, w in self.store.successors(u).items():
                alt = d + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(heap, (alt, next(seq), v))

        if math.isinf(dist[target]):
            return None
        path = _walk_back(prev, source, target)
        if path is None:
            return None
        return PathResult(source=source, target=target, path=path, length=int(dist[target]))


def _walk_back(prev: Dict[str, str], source: str, target: str) -> Optional[List[str]]:
    path = [target]
    at = target
    while at != source:
        at = prev.get(at)
        if at is None or len(path) > len(prev) + 1:
            return None
        path.append(at)
    path.reverse()
    return path


def format_path(result: PathResult) -> str:
    return f"Path: {' → '.join(result.path)} (Length: {result.length})"
