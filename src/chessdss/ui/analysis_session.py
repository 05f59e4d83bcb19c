"""Background position analysis orchestration for the UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from chessdss.analysis import AnalysisClient, PositionReport
from chessdss.errors import AnalysisError

_LOGGER = logging.getLogger(__name__)


class _AnalysisCommandBus(QObject):
    analyze_requested = pyqtSignal(int, str)


class _AnalysisWorker(QObject):
    finished = pyqtSignal(int, object)  # request_id, report
    failed = pyqtSignal(int, str)  # request_id, message

    __slots__ = ("_client",)

    def __init__(self, client: AnalysisClient) -> None:
        super().__init__()
        self._client = client

    @pyqtSlot(int, str)
    def analyze(self, request_id: int, fen: str) -> None:
        if not fen:
            self.failed.emit(request_id, "Invalid FEN for analysis")
            return
        try:
            report = self._client.evaluate(fen)
        except AnalysisError as exc:
            self.failed.emit(request_id, str(exc))
            return
        except Exception as exc:
            _LOGGER.exception("Unexpected analysis failure")
            self.failed.emit(request_id, str(exc))
            return
        self.finished.emit(request_id, report)


class AnalysisSession:
    """Runs :class:`AnalysisClient` requests on a worker thread.

    At most one request is live. Its result reaches the callbacks only
    while it is still the newest request and the match it was issued for
    has not been restarted.
    """

    __slots__ = (
        "__weakref__",
        "_on_finished",
        "_on_failed",
        "_current_session",
        "_command_bus",
        "_thread",
        "_worker",
        "_running",
        "_closing",
        "_pending",
        "_request_counter",
    )

    def __init__(
        self,
        *,
        client: AnalysisClient,
        on_finished: Callable[[PositionReport], None],
        on_failed: Callable[[str], None],
        current_session: Callable[[], int] = lambda: 0,
        parent: QObject | None = None,
    ) -> None:
        self._on_finished = on_finished
        self._on_failed = on_failed
        self._current_session = current_session

        self._command_bus = _AnalysisCommandBus(parent)
        self._thread = QThread(parent)
        self._worker = _AnalysisWorker(client)
        self._running = False
        self._closing = False
        self._pending: tuple[int, int] | None = None  # request id, session id
        self._request_counter = 0

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    # ── Lifecycle ────────────────────────────────────────────────────────

    def setup(self) -> None:
        if self._running:
            return
        self._closing = False
        self._worker.moveToThread(self._thread)
        self._command_bus.analyze_requested.connect(self._worker.analyze)
        self._worker.finished.connect(self._deliver_report)
        self._worker.failed.connect(self._deliver_failure)
        self._thread.start()
        self._running = True

    def shutdown(self) -> None:
        """Discard the live request and join the worker thread."""
        if not self._running:
            return
        self._closing = True
        self._pending = None
        self._thread.quit()
        self._thread.wait(2000)
        self._running = False

    # ── Requests ─────────────────────────────────────────────────────────

    def start_analysis(self, fen: str) -> bool:
        """Queue *fen*, superseding whatever request is still live."""
        if not fen:
            return False
        self.setup()
        if self._closing:
            return False

        self._request_counter += 1
        self._pending = (self._request_counter, self._current_session())
        self._command_bus.analyze_requested.emit(self._request_counter, fen)
        return True

    def cancel_analysis(self) -> None:
        """Forget the live request.

        The HTTP call itself keeps running; its answer is dropped on arrival.
        """
        self._pending = None

    def _claim(self, request_id: int) -> bool:
        """Clear and return True if *request_id* is the live request."""
        pending = self._pending
        if self._closing or pending is None or pending[0] != request_id:
            return False
        self._pending = None
        if pending[1] != self._current_session():
            _LOGGER.debug("Dropping analysis %d from an old session", request_id)
            return False
        return True

    def _deliver_report(self, request_id: int, report: object) -> None:
        if not self._claim(request_id):
            return
        if isinstance(report, PositionReport):
            self._on_finished(report)
        else:
            self._on_failed("Analysis worker produced invalid report")

    def _deliver_failure(self, request_id: int, message: str) -> None:
        if self._claim(request_id):
            self._on_failed(message)
