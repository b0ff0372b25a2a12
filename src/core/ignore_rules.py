from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

import pathspec

logger = logging.getLogger(__name__)

GITIGNORE_NAME = ".gitignore"
ALWAYS_SKIPPED_DIRS = frozenset({".git"})


def parse_exclude_patterns(text: str) -> List[str]:
    """Split the raw exclusion text on commas, dropping blanks."""
    return [p.strip() for p in str(text or "").split(",") if p.strip()]


def _to_posix(rel_path: str) -> str:
    return rel_path.replace(os.sep, "/") if os.sep != "/" else rel_path


class IgnoreRules:
    """
    Decide which paths a scan skips.

    User exclusions are gitignore-style patterns relative to the scan root and
    always win. ``.gitignore`` files are honoured at every level; a deeper file
    overrides a shallower one and the last matching pattern decides, as in git.
    """

    def __init__(self, root: str, exclude: str = ""):
        self.root = os.path.abspath(root)
        self.exclude_patterns = parse_exclude_patterns(exclude)
        self._exclude_spec = pathspec.PathSpec.from_lines("gitwildmatch", self.exclude_patterns)
        self._gitignores: Dict[str, Optional[pathspec.PathSpec]] = {}

    def _relative(self, path: str, base: str) -> str:
        return _to_posix(os.path.relpath(os.path.abspath(path), base))

    def load_directory(self, dir_path: str) -> Optional[pathspec.PathSpec]:
        key = os.path.abspath(dir_path)
        if key in self._gitignores:
            return self._gitignores[key]

        spec = None
        ignore_file = os.path.join(key, GITIGNORE_NAME)
        if os.path.isfile(ignore_file):
            try:
                with open(ignore_file, "r", encoding="utf-8") as f:
                    spec = pathspec.PathSpec.from_lines("gitwildmatch", f)
            except (OSError, UnicodeDecodeError):
                logger.warning("Could not read %s", ignore_file, exc_info=True)
        self._gitignores[key] = spec
        return spec

    def is_excluded(self, path: str, is_dir: bool = False) -> bool:
        if not self.exclude_patterns:
            return False
        rel = self._relative(path, self.root)
        if is_dir:
            rel += "/"
        return self._exclude_spec.match_file(rel)

    def is_gitignored(self, path: str, is_dir: bool = False) -> bool:
        abs_path = os.path.abspath(path)
        parent = os.path.dirname(abs_path)

        # Ancestor directories from the scan root down to the path's parent.
        chain: List[str] = []
        current = parent
        while True:
            chain.append(current)
            if current == self.root:
                break
            up = os.path.dirname(current)
            if up == current:
                # Path is outside the root; only its own directory counts.
                chain = [parent]
                break
            current = up
        chain.reverse()

        decision = None
        for base in chain:
            spec = self.load_directory(base)
            if spec is None:
                continue
            rel = self._relative(abs_path, base)
            if is_dir:
                rel += "/"
            for pattern in spec.patterns:
                if pattern.include is None:
                    continue
                if pattern.match_file(rel) is not None:
                    decision = pattern.include
        return bool(decision)

    def should_skip(self, path: str, is_dir: bool = False) -> bool:
        if is_dir and os.path.basename(path) in ALWAYS_SKIPPED_DIRS:
            return True
        return self.is_excluded(path, is_dir) or self.is_gitignored(path, is_dir)
