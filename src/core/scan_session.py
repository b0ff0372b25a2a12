from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from src.core.errors import PickerError, ValidationError
from src.core.expansion import ExpansionState
from src.core.grouping import Grouping, group_occurrences
from src.core.models import Occurrence
from src.core.projection import FileGroupView, project
from src.utils.i18n import strings

logger = logging.getLogger(__name__)


class ScanStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class ScanSession:
    """
    State of the current scan.

    The controller never edits a published session field by field; every
    transition installs a new instance, so a reader holding a session always
    sees status, results, grouping and expansion from the same transition.
    The expansion store is the one part mutated in place (toggle/expand/collapse).
    """

    scan_path: str = ""
    exclude_patterns: str = ""
    status: ScanStatus = ScanStatus.IDLE
    results: Tuple[Occurrence, ...] = ()
    error_message: Optional[str] = None
    grouping: Grouping = field(default_factory=dict)
    expansion: ExpansionState = field(default_factory=ExpansionState)

    @property
    def is_running(self) -> bool:
        return self.status is ScanStatus.RUNNING


@dataclass(frozen=True)
class ScanRequest:
    request_id: int
    path: str
    exclude: str


SuccessCallback = Callable[[int, Sequence[Occurrence]], None]
FailureCallback = Callable[[int, str], None]


class ScanLauncher(Protocol):
    def launch(self, request: ScanRequest, on_success: SuccessCallback, on_failure: FailureCallback) -> None: ...


class ScanSessionController(QObject):
    """
    Owns the scan lifecycle: Idle -> Running -> Succeeded/Failed.

    Only one scan may be in flight. ``session_changed`` is emitted after every
    state-affecting call; renderers rebuild from ``projection()`` on it.
    """

    session_changed = Signal(object)  # ScanSession
    error_raised = Signal(str)  # validation / picker messages

    def __init__(self, launcher: ScanLauncher, *, scan_path: str = "", exclude_patterns: str = "", parent=None):
        super().__init__(parent)
        self._launcher = launcher
        self._session = ScanSession(scan_path=str(scan_path or ""), exclude_patterns=str(exclude_patterns or ""))
        self._pending: Optional[ScanRequest] = None
        self._last_request_id = 0
        self.last_error: Optional[str] = None

    @property
    def session(self) -> ScanSession:
        return self._session

    @property
    def status(self) -> ScanStatus:
        return self._session.status

    @property
    def pending_request(self) -> Optional[ScanRequest]:
        return self._pending

    def display_error(self) -> Optional[str]:
        if self.last_error:
            return self.last_error
        if self._session.status is ScanStatus.FAILED:
            return self._session.error_message
        return None

    # --- inputs ---

    def set_scan_path(self, path: str) -> None:
        path = str(path or "")
        if path == self._session.scan_path:
            return
        if path.strip():
            # Drop a stale validation or picker message.
            self.last_error = None
        self._install(replace(self._session, scan_path=path))

    def set_exclude_patterns(self, text: str) -> None:
        text = str(text or "")
        if text == self._session.exclude_patterns:
            return
        self._install(replace(self._session, exclude_patterns=text))

    def select_directory(self, picker: Callable[[str], Optional[str]]) -> Optional[str]:
        """Ask ``picker`` for a directory; nothing selected leaves the scan path alone."""
        try:
            selected = picker(self._session.scan_path)
        except Exception as e:
            logger.warning("Directory picker failed", exc_info=True)
            err = PickerError(strings.tr("err_picker_failed"))
            err.__cause__ = e
            self._report_error(str(err))
            return None

        if not selected:
            return None
        selected = str(selected)
        self.set_scan_path(selected)
        return selected

    # --- lifecycle ---

    def start_scan(self) -> bool:
        current = self._session
        if current.is_running:
            logger.warning(
                "Scan request %s still running; ignoring new trigger",
                self._pending.request_id if self._pending else "?",
            )
            return False

        try:
            self._validate(current)
        except ValidationError as e:
            self._report_error(str(e))
            return False

        self._last_request_id += 1
        request = ScanRequest(
            request_id=self._last_request_id,
            path=current.scan_path.strip(),
            exclude=current.exclude_patterns,
        )
        self._pending = request
        self.last_error = None
        self._install(
            ScanSession(
                scan_path=current.scan_path,
                exclude_patterns=current.exclude_patterns,
                status=ScanStatus.RUNNING,
            )
        )
        logger.info("Scan %s started: path=%s exclude=%r", request.request_id, request.path, request.exclude)

        try:
            self._launcher.launch(request, self._on_scan_succeeded, self._on_scan_failed)
        except Exception as e:
            logger.exception("Failed to launch scan %s", request.request_id)
            self._on_scan_failed(request.request_id, str(e))
        return True

    def _validate(self, session: ScanSession) -> None:
        if not session.scan_path.strip():
            raise ValidationError(strings.tr("err_no_directory"))

    def _accepts(self, request_id: int) -> bool:
        if not self._session.is_running or self._pending is None:
            logger.warning("Dropping scan result %s: no scan in flight", request_id)
            return False
        if request_id != self._pending.request_id:
            logger.warning("Dropping stale scan result %s (expected %s)", request_id, self._pending.request_id)
            return False
        return True

    def _on_scan_succeeded(self, request_id: int, occurrences: Sequence[Occurrence]) -> None:
        if not self._accepts(request_id):
            return
        results = tuple(occurrences or ())
        grouping = group_occurrences(results)
        expansion = ExpansionState()
        expansion.expand_all(grouping.keys())

        current = self._session
        self._pending = None
        self._install(
            ScanSession(
                scan_path=current.scan_path,
                exclude_patterns=current.exclude_patterns,
                status=ScanStatus.SUCCEEDED,
                results=results,
                grouping=grouping,
                expansion=expansion,
            )
        )
        logger.info("Scan %s finished: %d matches in %d files", request_id, len(results), len(grouping))

    def _on_scan_failed(self, request_id: int, message: str) -> None:
        if not self._accepts(request_id):
            return
        current = self._session
        self._pending = None
        self._install(
            ScanSession(
                scan_path=current.scan_path,
                exclude_patterns=current.exclude_patterns,
                status=ScanStatus.FAILED,
                error_message=strings.tr("err_scan_failed").format(message),
            )
        )
        logger.warning("Scan %s failed: %s", request_id, message)

    # --- presentation ---

    def toggle(self, file_path: str) -> bool:
        value = self._session.expansion.toggle(file_path)
        self._notify()
        return value

    def expand_all(self) -> None:
        self._session.expansion.expand_all(self._session.grouping.keys())
        self._notify()

    def collapse_all(self) -> None:
        self._session.expansion.collapse_all()
        self._notify()

    def is_expanded(self, file_path: str) -> bool:
        return self._session.expansion.is_expanded(file_path)

    def projection(self) -> List[FileGroupView]:
        return project(self._session.grouping, self._session.expansion)

    # --- internals ---

    def _install(self, session: ScanSession) -> None:
        self._session = session
        self._notify()

    def _notify(self) -> None:
        self.session_changed.emit(self._session)

    def _report_error(self, message: str) -> None:
        self.last_error = message
        self.error_raised.emit(message)
