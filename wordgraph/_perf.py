from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Optional


def _perf_ms() -> float:
    return time.perf_counter() * 1000.0


def _fmt_kv(fields: Dict[str, Any]) -> str:
    if not fields:
        return ""
    # keep logs readable; don't dump whole corpora
    parts = []
    for k in sorted(fields.keys()):
        s = str(fields[k])
        if len(s) > 200:
            s = s[:200] + "…"
        parts.append(f"{k}={s}")
    return " | " + " ".join(parts)


@contextmanager
def timed(
    logger,
    name: str,
    *,
    warn_ms: Optional[float] = None,
    **fields: Any,
):
    """Log ``name.start`` / ``name.end`` around a block, with elapsed ``dt_ms``.

    The end record is emitted at WARNING when the block took at least
    ``warn_ms`` milliseconds, otherwise at INFO like the start record.
    """
    t0 = _perf_ms()
    logger.info(f"{name}.start{_fmt_kv(fields)}")
    try:
        yield
    finally:
        dt = _perf_ms() - t0
        out = dict(fields)
        out["dt_ms"] = int(dt)
        msg = f"{name}.end{_fmt_kv(out)}"
        if warn_ms is not None and dt >= warn_ms:
            logger.warning(msg)
        else:
            logger.info(msg)
