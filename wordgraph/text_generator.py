"""Rewrite input text by splicing a bridge word between adjacent known words."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .bridge_words import BridgeWordEngine
from .tokenizer import tokenize

_LOG = logging.getLogger(__name__)


class TextGenerator:
    def __init__(self, bridges: BridgeWordEngine, rng: Optional[random.Random] = None):
        self.bridges = bridges
        self.rng = rng or random.Random()

    def rewrite(self, text: str) -> str:
        """
        Tokenize *text* and insert one randomly chosen bridge word between
        each adjacent pair that has any. Punctuation is not reconstructed.
        """
        words = tokenize(text)
        if len(words) < 2:
            return text

        store = self.bridges.store
        out: List[str] = [words[0]]
        inserted = 0
        for cur, nxt in zip(words, words[1:]):
            if cur in store and nxt in store:
                candidates = sorted(self.bridges.bridge_words(cur, nxt))
                if candidates:
                    out.append(self.rng.choice(candidates))
                    inserted += 1
            out.append(nxt)
        _LOG.debug("rewrite: %d tokens, %d bridge words inserted", len(words), inserted)
        return " ".join(out)
