from PySide6.QtCore import QThread, Signal, QMutex, QMutexLocker
import logging
import os
import time

from src.core.chinese_text import ParseError, find_chinese_text
from src.core.errors import ScanError
from src.core.ignore_rules import IgnoreRules
from src.core.models import Occurrence
from src.utils.i18n import strings

# Debug logging flags (disabled by default in packaged apps)
DEBUG_SCAN = os.environ.get("CHINESE_SCANNER_DEBUG_SCAN", "").lower() in ("1", "true", "yes")

logger = logging.getLogger(__name__)

# extension -> Tree-sitter dialect
SOURCE_EXTENSIONS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}


def _scandir_recursive(path, rules):
    """Sorted, non-following os.scandir walk that prunes ignored entries."""
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        if DEBUG_SCAN:
            logger.warning("[scan] Scandir error: %s", e)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = (not is_dir) and entry.is_file(follow_symlinks=False)
        except OSError:
            continue

        if rules.should_skip(entry.path, is_dir=is_dir):
            if DEBUG_SCAN:
                logger.debug("[scan] Skipping %s", entry.path)
            continue

        if is_dir:
            yield from _scandir_recursive(entry.path, rules)
        elif is_file:
            ext = os.path.splitext(entry.name)[1].lower()
            if ext in SOURCE_EXTENSIONS:
                yield entry.path


def scan_file(file_path, dialect="javascript"):
    """Occurrences in one source file; unreadable or unparsable files yield nothing."""
    try:
        with open(file_path, "r", encoding="utf-8-sig") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        if DEBUG_SCAN:
            logger.debug("[scan] Cannot read %s: %s", file_path, e)
        return []

    try:
        matches = find_chinese_text(source, dialect=dialect)
    except ParseError as e:
        logger.info("[scan] Skipping %s: %s", file_path, e)
        return []

    return [Occurrence(file_path=str(file_path), line=m.line, column=m.column, text=m.text) for m in matches]


def scan_directory(path, exclude="", progress=None):
    """
    Scan a directory tree for Chinese text in JS/TS sources.

    ``exclude`` is the raw comma-separated pattern text. ``progress`` is called
    as ``progress(files_scanned, current_path)`` after each file.
    Raises ScanError when ``path`` is not a directory.
    """
    if not path or not os.path.isdir(path):
        raise ScanError(f"Path is not a directory: {path}")

    rules = IgnoreRules(path, exclude)
    results = []
    file_count = 0
    for file_path in _scandir_recursive(path, rules):
        ext = os.path.splitext(file_path)[1].lower()
        results.extend(scan_file(file_path, dialect=SOURCE_EXTENSIONS[ext]))
        file_count += 1
        if progress is not None:
            progress(file_count, file_path)

    logger.debug("Scanned %d files under %s: %d matches", file_count, path, len(results))
    return results


class ScanWorker(QThread):
    progress_updated = Signal(int, str)  # files scanned, status text
    scan_finished = Signal(object)  # list[Occurrence]
    scan_failed = Signal(str)  # error message

    def __init__(self, path, exclude="", request_id=0):
        super().__init__()
        self.path = path
        self.exclude = exclude or ""
        self.request_id = request_id

        # Progress throttling
        self._last_progress_update_time = 0
        self._progress_update_interval = 0.1  # 100ms
        self._progress_mutex = QMutex()
        self.files_scanned = 0

    def _emit_progress(self, value, message, force=False):
        """Thread-safe and throttled progress emission."""
        current_time = time.time()
        with QMutexLocker(self._progress_mutex):
            if force or (current_time - self._last_progress_update_time >= self._progress_update_interval):
                self.progress_updated.emit(value, message)
                self._last_progress_update_time = current_time

    def _on_file_scanned(self, count, _file_path):
        self.files_scanned = count
        self._emit_progress(count, strings.tr("status_scanning").format(count=count))

    def run(self):
        try:
            start_time = time.time()
            self._emit_progress(0, strings.tr("status_scanning").format(count=0), force=True)
            results = scan_directory(self.path, self.exclude, progress=self._on_file_scanned)
            logger.info(
                "[scan] %s: %d matches (%.2fs)",
                self.path,
                len(results),
                time.time() - start_time,
            )
            self._emit_progress(self.files_scanned, strings.tr("status_done"), force=True)
            self.scan_finished.emit(results)
        except ScanError as e:
            logger.warning("[scan] %s", e)
            self.scan_failed.emit(str(e))
        except Exception as e:
            logger.exception("[scan] Scan of %s failed", self.path)
            self.scan_failed.emit(str(e))
