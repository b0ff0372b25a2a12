from __future__ import annotations

import os
from typing import Optional, Sequence

from src.core.models import Occurrence
from src.core.projection import FileGroupView
from src.utils.i18n import strings


class ResultsController:
    """Pure text helpers for rendering projected result groups."""

    @staticmethod
    def totals(views: Sequence[FileGroupView]) -> tuple[int, int]:
        files = len(views or [])
        occurrences = sum(int(v.occurrence_count) for v in views or [])
        return files, occurrences

    def summary_text(self, views: Sequence[FileGroupView]) -> str:
        files, occurrences = self.totals(views)
        if not files:
            return ""
        return strings.tr("lbl_summary").format(files=files, occurrences=occurrences)

    @staticmethod
    def display_path(file_path: str, root: Optional[str] = None) -> str:
        """Path relative to the scan root when it lives under it, else unchanged."""
        path = str(file_path or "")
        if not root:
            return path
        try:
            rel = os.path.relpath(path, root)
        except ValueError:
            # Different drives on Windows.
            return path
        if rel == os.curdir or rel.startswith(os.pardir):
            return path
        return rel

    def group_label(self, view: FileGroupView, root: Optional[str] = None) -> str:
        count = strings.tr("lbl_group_count").format(count=view.occurrence_count)
        return f"{self.display_path(view.file_path, root)}  ({count})"

    @staticmethod
    def location_label(occ: Occurrence) -> str:
        return f"{occ.line}:{occ.column}"
