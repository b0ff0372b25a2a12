from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Occurrence:
    """One span of Chinese text located in a source file.

    ``line`` and ``column`` are 1-based; ``column`` counts characters, not bytes.
    ``file_path`` is kept exactly as the scanner reported it.
    """

    file_path: str
    line: int
    column: int
    text: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Occurrence":
        if not isinstance(data, Mapping):
            raise ValueError("occurrence must be an object")
        path = data.get("filePath", data.get("file_path"))
        if path is None:
            raise ValueError("occurrence is missing filePath")
        return cls(
            file_path=str(path),
            line=int(data.get("line") or 0),
            column=int(data.get("column") or 0),
            text=str(data.get("text") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filePath": self.file_path,
            "line": int(self.line),
            "column": int(self.column),
            "text": self.text,
        }

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"
