from __future__ import annotations

import csv
import json
import logging
from typing import Iterable

from src.core.models import Occurrence
from src.core.result_schema import dump_results

logger = logging.getLogger(__name__)

CSV_HEADER = ["file_path", "line", "column", "text"]


def export_occurrences_csv(*, occurrences: Iterable[Occurrence], out_path: str) -> int:
    """Write one row per occurrence. Returns the number of rows written."""
    rows = 0
    # utf-8-sig so Excel opens Chinese text correctly.
    with open(out_path, "w", encoding="utf-8-sig", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for occ in occurrences or []:
            writer.writerow([occ.file_path, int(occ.line), int(occ.column), occ.text])
            rows += 1
    logger.info("Exported %d occurrences to %s", rows, out_path)
    return rows


def export_occurrences_json(
    *,
    occurrences: Iterable[Occurrence],
    out_path: str,
    path: str = "",
    exclude: str = "",
) -> int:
    payload = dump_results(occurrences=list(occurrences or []), path=path, exclude=exclude)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    count = int(payload["meta"]["occurrences"])
    logger.info("Exported %d occurrences to %s", count, out_path)
    return count
