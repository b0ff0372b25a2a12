from __future__ import annotations

from typing import Dict, Iterable


class ExpansionState:
    """Per-file expanded flags. A path that was never set reads as collapsed."""

    def __init__(self):
        self._expanded: Dict[str, bool] = {}

    def toggle(self, file_path: str) -> bool:
        value = not self._expanded.get(file_path, False)
        self._expanded[file_path] = value
        return value

    def expand_all(self, file_paths: Iterable[str]) -> None:
        for path in file_paths or ():
            self._expanded[path] = True

    def collapse_all(self) -> None:
        self._expanded.clear()

    reset = collapse_all

    def is_expanded(self, file_path: str) -> bool:
        return bool(self._expanded.get(file_path, False))

    def snapshot(self) -> Dict[str, bool]:
        return dict(self._expanded)

    def __contains__(self, file_path) -> bool:
        return file_path in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)

    def __repr__(self) -> str:
        return f"ExpansionState({self._expanded!r})"
