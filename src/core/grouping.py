from __future__ import annotations

from typing import Dict, Iterable, List

from src.core.models import Occurrence

Grouping = Dict[str, List[Occurrence]]


def group_occurrences(occurrences: Iterable[Occurrence]) -> Grouping:
    """Partition occurrences by file path.

    Keys come out in first-seen order and each list keeps the input order,
    so this is a stable partition rather than a sort.
    """
    groups: Grouping = {}
    for occ in occurrences or ():
        groups.setdefault(occ.file_path, []).append(occ)
    return groups
