# wordgraph/graph_build.py
"""
Word-adjacency graph store and its display/export helpers.

Public API
----------
GraphStore.from_tokens(tokens) / .from_text(text) / .from_file(path) -> GraphStore
UnknownWordError(words)                     raised by queries on absent words
describe_graph(store) -> str
to_payload(store, pagerank=None, source_name=...) -> WordGraphPayload
write_payload(store, out_json, pagerank=None) -> str
export_graphml / export_gexf / export_xml(store, path, pagerank=None) -> str
export_pyvis(store, path, pagerank=None, physics=True) -> str
export_png(store, path, pagerank=None) -> str

Acceptance notes
----------------
• Every token of the source becomes a node, even when it has no out-edges.
• Edge weight = number of times the ordered pair occurs consecutively (>= 1).
• Built once; accessors hand out copies, so the store stays immutable.
• Exporters only consume nodes() and (source, target, weight) triples.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx

from ._perf import timed
from .schemas import WordEdge, WordGraphPayload, WordNode
from .tokenizer import tokenize

# Optional dependency; only needed for export_pyvis
try:
    from pyvis.network import Network
    _HAS_PYVIS = True
except Exception:
    _HAS_PYVIS = False

_LOG = logging.getLogger(__name__)

EMPTY_GRAPH_MESSAGE = "Graph is empty."

# ---- Errors ------------------------------------------------------------------

class UnknownWordError(LookupError):
    """A query named a word that never occurred in the source text."""

    def __init__(self, *words: str):
        self.words: Tuple[str, ...] = tuple(words)
        super().__init__(f"No {' or '.join(self.words)} in the graph!")

# ---- Store -------------------------------------------------------------------

class GraphStore:
    """
    Weighted directed word graph plus the reverse (predecessor) index.

    Nodes are words in order of first appearance; edges carry an integer
    ``weight`` attribute. The reverse index keeps one predecessor entry per
    co-occurrence event, so it may repeat words.
    """

    def __init__(self, G: nx.DiGraph, reverse_index: Dict[str, List[str]]):
        self._G = G
        self._reverse = reverse_index

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "GraphStore":
        tokens = list(tokens)
        with timed(_LOG, "graph.build", tokens=len(tokens)):
            G = nx.DiGraph()
            reverse: Dict[str, List[str]] = {}
            for w in tokens:
                if w and w not in G:
                    G.add_node(w)
            for cur, nxt in zip(tokens, tokens[1:]):
                if not cur or not nxt:
                    continue
                if G.has_edge(cur, nxt):
                    G[cur][nxt]["weight"] += 1
                else:
                    G.add_edge(cur, nxt, weight=1)
                reverse.setdefault(nxt, []).append(cur)
        _LOG.info("Built word graph: %d nodes, %d edges", G.number_of_nodes(), G.number_of_edges())
        return cls(G, reverse)

    @classmethod
    def from_text(cls, text: str) -> "GraphStore":
        return cls.from_tokens(tokenize(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "GraphStore":
        """Read *path* fully and build the graph. OSError propagates to the caller."""
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        _LOG.info("Loaded %s (%d chars)", path, len(text))
        return cls.from_text(text)

    # --- Read API ---

    def __contains__(self, word: object) -> bool:
        return word in self._G

    def __len__(self) -> int:
        return self._G.number_of_nodes()

    def has_word(self, word: str) -> bool:
        return word in self._G

    def is_empty(self) -> bool:
        return self._G.number_of_nodes() == 0

    def nodes(self) -> List[str]:
        return list(self._G.nodes)

    def edges(self) -> List[Tuple[str, str, int]]:
        """(source, target, weight) triples."""
        return [(u, v, int(d["weight"])) for u, v, d in self._G.edges(data=True)]

    def number_of_edges(self) -> int:
        return self._G.number_of_edges()

    def successors(self, word: str) -> Dict[str, int]:
        """Successor -> weight; empty for sinks and unknown words."""
        if word not in self._G:
            return {}
        return {v: int(d["weight"]) for v, d in self._G[word].items()}

    def predecessors(self, word: str) -> List[str]:
        """Reverse-index entries for *word*, one per co-occurrence."""
        return list(self._reverse.get(word, []))

    def weight(self, source: str, target: str) -> Optional[int]:
        data = self._G.get_edge_data(source, target)
        return None if data is None else int(data["weight"])

    def out_degree(self, word: str) -> int:
        return self._G.out_degree(word) if word in self._G else 0

    def to_networkx(self) -> nx.DiGraph:
        return self._G.copy()

# ---- Text listing ------------------------------------------------------------

def describe_graph(store: GraphStore) -> str:
    """One line per node: ``src → dst(w) dst2(w2)``; sinks list no targets."""
    if store.is_empty():
        return EMPTY_GRAPH_MESSAGE
    lines = []
    for src in store.nodes():
        outs = " ".join(f"{dst}({w})" for dst, w in store.successors(src).items())
        lines.append(f"{src} → {outs}".rstrip())
    return "\n".join(lines)

# ---- Payload -----------------------------------------------------------------

def to_payload(
    store: GraphStore,
    pagerank: Optional[Dict[str, float]] = None,
    *,
    source_name: str = "unknown",
) -> WordGraphPayload:
    G = store.to_networkx()
    nodes = [
        WordNode(
            id=n,
            out_degree=G.out_degree(n),
            in_degree=G.in_degree(n),
            pagerank=None if pagerank is None else float(pagerank.get(n, 0.0)),
        )
        for n in G.nodes
    ]
    edges = [WordEdge(source=u, target=v, weight=w) for u, v, w in store.edges()]
    return WordGraphPayload(
        source_name=source_name,
        nodes=nodes,
        edges=edges,
        meta={"num_nodes": str(len(nodes)), "num_edges": str(len(edges))},
    )

def write_payload(
    store: GraphStore,
    out_json: Union[str, Path],
    pagerank: Optional[Dict[str, float]] = None,
    *,
    source_name: str = "unknown",
) -> str:
    """Write the frontend-friendly JSON payload and return its path."""
    payload = to_payload(store, pagerank, source_name=source_name)
    out = Path(out_json)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload.model_dump(), ensure_ascii=False, indent=2), encoding="utf-8")
    return str(out)

# ---- XML export --------------------------------------------------------------

def _annotated(store: GraphStore, pagerank: Optional[Dict[str, float]]) -> nx.DiGraph:
    H = store.to_networkx()
    for n in H.nodes:
        H.nodes[n]["label"] = n
        if pagerank is not None:
            H.nodes[n]["pagerank"] = float(pagerank.get(n, 0.0))
    return H

def export_graphml(
    store: GraphStore, path: Union[str, Path], pagerank: Optional[Dict[str, float]] = None
) -> str:
    """Export to GraphML (.graphml). Edge weights are kept as an int attribute."""
    P = str(Path(path).absolute())
    nx.write_graphml(_annotated(store, pagerank), P)
    return P

def export_gexf(
    store: GraphStore, path: Union[str, Path], pagerank: Optional[Dict[str, float]] = None
) -> str:
    """Export to GEXF (.gexf)."""
    P = str(Path(path).absolute())
    nx.write_gexf(_annotated(store, pagerank), P)
    return P

def export_xml(
    store: GraphStore, path: Union[str, Path], pagerank: Optional[Dict[str, float]] = None
) -> str:
    """
    Convenience: chooses GraphML or GEXF based on file extension.
    Use '.graphml' for GraphML or '.gexf' for GEXF.
    """
    path = Path(path)
    if path.suffix.lower() == ".gexf":
        return export_gexf(store, path, pagerank=pagerank)
    # default to GraphML
    return export_graphml(store, path, pagerank=pagerank)

# ---- PyVis export ------------------------------------------------------------

def _node_size(score: Optional[float], n_nodes: int) -> float:
    # scale around the uniform score so the average word is ~18px
    if score is None or n_nodes == 0:
        return 18.0
    return max(10.0, min(48.0, 18.0 * score * n_nodes))

def export_pyvis(
    store: GraphStore,
    path: Union[str, Path],
    pagerank: Optional[Dict[str, float]] = None,
    *,
    physics: bool = True,
) -> str:
    """
    Export an interactive HTML graph using pyvis/vis.js.
    Edge labels show co-occurrence weights; node size follows PageRank when given.
    """
    if not _HAS_PYVIS:
        raise RuntimeError("pyvis is not installed. `pip install pyvis`")

    path = str(Path(path).absolute())
    net = Network(height="820px", width="100%", directed=True, notebook=False)
    n_nodes = len(store)

    for word in store.nodes():
        score = None if pagerank is None else pagerank.get(word, 0.0)
        title = word if score is None else f"<b>{word}</b><br>PageRank {score:.4f}"
        net.add_node(word, label=word, title=title, color="#005375", shape="dot",
                     size=_node_size(score, n_nodes))

    for u, v, w in store.edges():
        net.add_edge(u, v, label=str(w), value=w, arrows="to", color="#777777")

    net.set_options(f"""
    {{
      "physics": {{
        "enabled": {str(physics).lower()},
        "solver": "forceAtlas2Based",
        "forceAtlas2Based": {{
          "gravitationalConstant": -35,
          "centralGravity": 0.015,
          "springLength": 180,
          "springConstant": 0.08,
          "damping": 0.45,
          "avoidOverlap": 0.6
        }},
        "stabilization": {{ "enabled": true, "iterations": 250 }},
        "minVelocity": 0.1
      }},
      "interaction": {{ "hover": true, "navigationButtons": true }}
    }}
    """)

    net.write_html(path, open_browser=False, notebook=False)
    return path

# ---- PNG export --------------------------------------------------------------

def export_png(
    store: GraphStore,
    path: Union[str, Path],
    pagerank: Optional[Dict[str, float]] = None,
    *,
    seed: int = 7,
) -> str:
    """Render a static PNG with matplotlib (Agg). Layout is spring-based and seeded."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    G = store.to_networkx()
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    pos = nx.spring_layout(G, seed=seed)
    n_nodes = G.number_of_nodes()
    sizes = [
        _node_size(None if pagerank is None else pagerank.get(n, 0.0), n_nodes) * 30
        for n in G.nodes
    ]

    fig, ax = plt.subplots(figsize=(12, 9))
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color="#005375", node_size=sizes)
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=9, font_color="#222222",
                            verticalalignment="bottom")
    nx.draw_networkx_edges(G, pos, ax=ax, edge_color="#777777", arrows=True, arrowsize=12)
    nx.draw_networkx_edge_labels(G, pos, ax=ax, font_size=8,
                                 edge_labels={(u, v): w for u, v, w in store.edges()})
    ax.set_axis_off()
    fig.tight_layout()
    fig.savefig(str(p), dpi=160)
    plt.close(fig)
    return str(p)

def export_all(
    store: GraphStore,
    out_dir: Union[str, Path],
    pagerank: Optional[Dict[str, float]] = None,
    *,
    formats: Iterable[str] = ("graphml", "json", "html", "png"),
    source_name: str = "unknown",
) -> Dict[str, str]:
    """
    Write the requested formats into *out_dir* as ``graph.<ext>``.
    Returns {format: path}. An empty graph writes nothing.
    """
    if store.is_empty():
        _LOG.warning("Export skipped: %s", EMPTY_GRAPH_MESSAGE)
        return {}
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: Dict[str, str] = {}
    for fmt in formats:
        fmt = fmt.lower()
        if fmt in ("graphml", "gexf"):
            written[fmt] = export_xml(store, out / f"graph.{fmt}", pagerank=pagerank)
        elif fmt == "json":
            written[fmt] = write_payload(store, out / "graph.json", pagerank, source_name=source_name)
        elif fmt == "html":
            written[fmt] = export_pyvis(store, out / "graph.html", pagerank=pagerank)
        elif fmt == "png":
            written[fmt] = export_png(store, out / "graph.png", pagerank=pagerank)
        else:
            raise ValueError(f"Unknown export format '{fmt}'")
        _LOG.info("Wrote %s export to %s", fmt, written[fmt])
    return written
