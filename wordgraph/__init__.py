"""
Word-adjacency graph analysis.

Exports:
- GraphStore, UnknownWordError: one-shot graph build and the unknown-word error
- TextGraphAnalyzer: session object answering bridge-word, rewrite, path,
  PageRank and random-walk queries
- AnalyzerConfig: tunables, loadable from .env / environment
"""

from .config import AnalyzerConfig
from .graph_build import GraphStore, UnknownWordError
from .analyzer import TextGraphAnalyzer
from .tokenizer import tokenize

__all__ = ["AnalyzerConfig", "GraphStore", "UnknownWordError", "TextGraphAnalyzer", "tokenize"]
