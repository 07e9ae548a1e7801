"""Bridge-word lookup: words ``c`` with edges ``a -> c`` and ``c -> b``."""

from __future__ import annotations

from typing import FrozenSet, Iterable, List

from .graph_build import GraphStore, UnknownWordError


class BridgeWordEngine:
    def __init__(self, store: GraphStore):
        self.store = store

    def bridge_words(self, a: str, b: str) -> FrozenSet[str]:
        """
        One-hop intermediates from *a* to *b*.

        Raises UnknownWordError if either word is not in the graph; an empty
        set means both words exist but nothing connects them in one hop.
        """
        if a not in self.store or b not in self.store:
            raise UnknownWordError(a, b)
        return frozenset(
            c for c in self.store.successors(a) if self.store.weight(c, b) is not None
        )


def format_word_list(words: Iterable[str]) -> str:
    """``x``, ``x and y``, ``x, y and z`` over the sorted words."""
    items: List[str] = sorted(words)
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + " and " + items[-1]
