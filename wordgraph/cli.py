"""wordgraph.cli

Command-line front end: build the graph from a text file, then either run the
requested one-shot queries or drop into the interactive menu.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, List, Optional

from .analyzer import TextGraphAnalyzer
from .config import AnalyzerConfig

MENU = """
=== Function ===
1. Show graph
2. Bridge words
3. Generate text
4. Shortest path
5. PageRank
6. Random walk
0. Exit"""


def _setup_logger(*, log_level: str, log_file: Optional[str], console: bool = True) -> logging.Logger:
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger("wordgraph")
    logger.setLevel(level)
    logger.propagate = False  # root gets the same handlers below

    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    handlers: list[logging.Handler] = []

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        ch.setLevel(level)
        handlers.append(ch)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        handlers.append(fh)

    for h in handlers:
        logger.addHandler(h)

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)

    logging.getLogger("matplotlib").setLevel(max(level, logging.WARNING))

    return logger


def _two_words(raw: str) -> Optional[List[str]]:
    words = raw.lower().split()
    return words[:2] if len(words) >= 2 else None


def run_menu(
    analyzer: TextGraphAnalyzer,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    export_dir: Optional[str] = None,
) -> None:
    """Interactive loop. Ends on choice 0 or end of input."""
    while True:
        write(MENU)
        try:
            choice = read("Enter choice: ").strip()
            if choice == "0":
                return
            if choice == "1":
                write(analyzer.describe_graph())
                for fmt, path in analyzer.export_graph(export_dir).items():
                    write(f"Wrote {fmt} to: {path}")
            elif choice == "2":
                words = _two_words(read("Enter two words: "))
                write(analyzer.query_bridge_words(*words) if words else "Please enter two words.")
            elif choice == "3":
                write("New text: " + analyzer.rewrite(read("Enter text: ")))
            elif choice == "4":
                words = _two_words(read("Enter two words: "))
                write(analyzer.calc_shortest_path(*words) if words else "Please enter two words.")
            elif choice == "5":
                write(analyzer.describe_page_rank(read("Enter word: ")))
            elif choice == "6":
                write("Random walk: " + analyzer.random_walk())
            else:
                write("Invalid choice")
        except EOFError:
            return


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Build a word-adjacency graph from a text file and query it."
    )
    ap.add_argument("text", nargs="?", default=None,
                    help="Path to the source text (default: WORDGRAPH_TEXT_PATH or ./test/Easy Test.txt).")
    ap.add_argument("--bridge", nargs=2, metavar=("WORD1", "WORD2"), help="Query bridge words.")
    ap.add_argument("--generate", metavar="TEXT", help="Rewrite TEXT with bridge words inserted.")
    ap.add_argument("--path", nargs=2, metavar=("WORD1", "WORD2"), help="Shortest path between two words.")
    ap.add_argument("--pagerank", metavar="WORD", help="PageRank score of WORD.")
    ap.add_argument("--walk", action="store_true", help="Run one random walk.")
    ap.add_argument("--show", action="store_true", help="Print the graph and write exports.")
    ap.add_argument("--export-dir", default=None, help="Directory for graph exports.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for random choices.")
    ap.add_argument("--env-file", default=None, help="Optional .env file to load.")
    ap.add_argument("--log-level", default=None, help="Logging level (default from config: INFO).")
    ap.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = AnalyzerConfig.from_env(args.env_file)
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.export_dir:
        config = replace(config, export_dir=args.export_dir)
    logger = _setup_logger(log_level=args.log_level or config.log_level, log_file=args.log_file)

    text_path = args.text or config.text_path
    try:
        analyzer = TextGraphAnalyzer.from_file(text_path, config=config)
    except OSError as e:
        print(f"[error] Failed to read {text_path}: {e}", file=sys.stderr)
        return 2
    logger.info("Graph ready: %d words, %d edges", len(analyzer.store), analyzer.store.number_of_edges())

    one_shot = any([args.bridge, args.generate is not None, args.path, args.pagerank, args.walk, args.show])
    if not one_shot:
        run_menu(analyzer, export_dir=config.export_dir)
        return 0

    if args.show:
        print(analyzer.describe_graph())
        for fmt, path in analyzer.export_graph(config.export_dir).items():
            print(f"Wrote {fmt} to: {path}")
    if args.bridge:
        print(analyzer.query_bridge_words(*args.bridge))
    if args.generate is not None:
        print("New text: " + analyzer.rewrite(args.generate))
    if args.path:
        print(analyzer.calc_shortest_path(*args.path))
    if args.pagerank:
        print(analyzer.describe_page_rank(args.pagerank))
    if args.walk:
        print("Random walk: " + analyzer.random_walk())
    return 0


if __name__ == "__main__":
    sys.exit(main())
