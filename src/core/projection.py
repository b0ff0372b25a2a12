from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

from src.core.expansion import ExpansionState
from src.core.models import Occurrence


@dataclass(frozen=True)
class FileGroupView:
    file_path: str
    occurrence_count: int
    expanded: bool
    # None while collapsed; renderers only get rows they are going to show.
    occurrences: Optional[Tuple[Occurrence, ...]] = None


def project(grouping: Mapping[str, Sequence[Occurrence]], expansion: ExpansionState) -> List[FileGroupView]:
    views: List[FileGroupView] = []
    for path, occs in (grouping or {}).items():
        expanded = expansion.is_expanded(path)
        views.append(
            FileGroupView(
                file_path=path,
                occurrence_count=len(occs),
                expanded=expanded,
                occurrences=tuple(occs) if expanded else None,
            )
        )
    return views
