"""Word tokenizer shared by graph construction and text rewriting.

Only ASCII letters count as word characters; everything else separates
words. Tokens are lowercased.
"""

from __future__ import annotations

import re
from typing import List

_NON_LETTER = re.compile(r"[^A-Za-z]+")


def tokenize(text: str) -> List[str]:
    """Return the lowercase alphabetic tokens of *text* in order."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    return _NON_LETTER.sub(" ", text).lower().split()
