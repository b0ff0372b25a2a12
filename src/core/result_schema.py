from __future__ import annotations

import time
from typing import Any, Dict, Iterable, List

from src.core.grouping import group_occurrences
from src.core.models import Occurrence

SCHEMA_VERSION = 1


def dump_results(
    *,
    occurrences: Iterable[Occurrence],
    path: str = "",
    exclude: str = "",
    generated_at: float | None = None,
) -> Dict[str, Any]:
    grouping = group_occurrences(occurrences or [])
    results_map: Dict[str, List[Dict[str, Any]]] = {}
    for file_path, occs in grouping.items():
        results_map[file_path] = [{"line": int(o.line), "column": int(o.column), "text": o.text} for o in occs]
    return {
        "version": SCHEMA_VERSION,
        "meta": {
            "path": str(path or ""),
            "exclude": str(exclude or ""),
            "files": len(results_map),
            "occurrences": sum(len(v) for v in results_map.values()),
            "generated_at": float(generated_at if generated_at is not None else time.time()),
        },
        "results": results_map,
    }


def load_results(payload: Any) -> List[Occurrence]:
    """
    Read occurrences back from a dump.

    Also accepts the scanner's raw flat list of ``{filePath, line, column, text}``.
    """
    if isinstance(payload, list):
        return [Occurrence.from_dict(item) for item in payload]
    if not isinstance(payload, dict):
        raise ValueError("results payload must be an object or a list")

    raw_results = payload.get("results")
    if not isinstance(raw_results, dict):
        raise ValueError("results payload has no 'results' object")

    out: List[Occurrence] = []
    for file_path, items in raw_results.items():
        for item in items or []:
            if not isinstance(item, dict):
                raise ValueError(f"bad occurrence entry for {file_path!r}")
            out.append(
                Occurrence(
                    file_path=str(file_path),
                    line=int(item.get("line") or 0),
                    column=int(item.get("column") or 0),
                    text=str(item.get("text") or ""),
                )
            )
    return out
