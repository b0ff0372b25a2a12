from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal, Slot

from src.core.scan_session import FailureCallback, ScanRequest, SuccessCallback
from src.core.scanner import ScanWorker

logger = logging.getLogger(__name__)


class ScanController(QObject):
    """
    Runs scan requests on a ScanWorker thread.

    Worker signals are bound to slots on this object, which lives on the main
    thread, so the session callbacks always run there (queued connections).
    """

    progress_updated = Signal(int, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._worker: Optional[ScanWorker] = None
        self._request: Optional[ScanRequest] = None
        self._on_success: Optional[SuccessCallback] = None
        self._on_failure: Optional[FailureCallback] = None

    @property
    def is_busy(self) -> bool:
        return self._worker is not None

    def build_worker(self, request: ScanRequest) -> ScanWorker:
        return ScanWorker(request.path, request.exclude, request_id=request.request_id)

    def wire_signals(
        self,
        worker: ScanWorker,
        *,
        on_progress: Callable,
        on_finished: Callable,
        on_failed: Callable,
    ) -> None:
        worker.progress_updated.connect(on_progress)
        worker.scan_finished.connect(on_finished)
        worker.scan_failed.connect(on_failed)

    def launch(self, request: ScanRequest, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        if self.is_busy:
            raise RuntimeError(f"scan {self._request.request_id if self._request else '?'} is still running")

        worker = self.build_worker(request)
        self.wire_signals(
            worker,
            on_progress=self._on_worker_progress,
            on_finished=self._on_worker_finished,
            on_failed=self._on_worker_failed,
        )
        worker.finished.connect(worker.deleteLater)

        self._worker = worker
        self._request = request
        self._on_success = on_success
        self._on_failure = on_failure
        worker.start()

    def wait(self, msecs: int = -1) -> bool:
        worker = self._worker
        if worker is None:
            return True
        return worker.wait() if msecs < 0 else worker.wait(msecs)

    def _take(self):
        request, on_success, on_failure = self._request, self._on_success, self._on_failure
        self._worker = None
        self._request = None
        self._on_success = None
        self._on_failure = None
        return request, on_success, on_failure

    @Slot(int, str)
    def _on_worker_progress(self, value: int, message: str) -> None:
        self.progress_updated.emit(value, message)

    @Slot(object)
    def _on_worker_finished(self, results) -> None:
        request, on_success, _ = self._take()
        if request is None or on_success is None:
            logger.warning("Scan worker finished without an active request")
            return
        on_success(request.request_id, list(results or []))

    @Slot(str)
    def _on_worker_failed(self, message: str) -> None:
        request, _, on_failure = self._take()
        if request is None or on_failure is None:
            logger.warning("Scan worker failed without an active request: %s", message)
            return
        on_failure(request.request_id, str(message))
