"""Runtime settings for the word-graph analyzer.

Defaults live on the dataclass; ``AnalyzerConfig.from_env`` layers a ``.env``
file and ``WORDGRAPH_*`` environment variables on top.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

ENV_PREFIX = "WORDGRAPH_"


@dataclass
class AnalyzerConfig:
    # PageRank power iteration
    damping_factor: float = 0.85
    max_iterations: int = 100
    convergence_threshold: float = 1e-4
    # Random-walk trace file; None disables the write
    walk_trace_path: Optional[str] = "random_walk.txt"
    # Source text used when the CLI gets no path
    text_path: str = "./test/Easy Test.txt"
    # Where graph exports (xml/html/png/json) go
    export_dir: str = "graph_out"
    # Seed for bridge-word choice and walks; None means nondeterministic
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not (0.0 <= self.damping_factor <= 1.0):
            raise ValueError(f"damping_factor must be in [0,1], got {self.damping_factor}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.convergence_threshold <= 0.0:
            raise ValueError(f"convergence_threshold must be > 0, got {self.convergence_threshold}")

    @classmethod
    def from_env(
        cls,
        env_file: Optional[Union[str, Path]] = None,
        *,
        override: bool = False,
    ) -> "AnalyzerConfig":
        """
        Build a config from the environment.

        Loads ``env_file`` (or ``./.env`` when omitted) without overriding
        already-exported variables unless ``override=True``.
        """
        load_dotenv(env_file if env_file is not None else Path.cwd() / ".env", override=override)

        def _get(name: str) -> Optional[str]:
            return os.environ.get(ENV_PREFIX + name)

        kwargs = {}
        if _get("DAMPING") is not None:
            kwargs["damping_factor"] = float(_get("DAMPING"))
        if _get("MAX_ITER") is not None:
            kwargs["max_iterations"] = int(_get("MAX_ITER"))
        if _get("THRESHOLD") is not None:
            kwargs["convergence_threshold"] = float(_get("THRESHOLD"))
        trace = _get("WALK_TRACE")
        if trace is not None:
            kwargs["walk_trace_path"] = trace or None
        if _get("TEXT_PATH"):
            kwargs["text_path"] = _get("TEXT_PATH")
        if _get("EXPORT_DIR"):
            kwargs["export_dir"] = _get("EXPORT_DIR")
        if _get("SEED"):
            kwargs["seed"] = int(_get("SEED"))
        if _get("LOG_LEVEL"):
            kwargs["log_level"] = _get("LOG_LEVEL")
        return cls(**kwargs)
