"""Background move requests orchestrated for the UI thread."""

from __future__ import annotations

import base64
import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

from boardshot.client import DEFAULT_TIMEOUT_S, MovesApiClient, MovesApiError
from boardshot.core.moves import MoveResult
from boardshot.ui.i18n import t
from boardshot.ui.intake import SelectedFile

_LOGGER = logging.getLogger(__name__)

ClientFactory = Callable[[str, float], MovesApiClient]

# Superseded requests keep running until the server answers; leave room for
# several of them so the newest one never queues behind an older call.
_MAX_CONCURRENT_REQUESTS = 8


def encode_image(file: SelectedFile) -> tuple[str, str]:
    """Read *file* fully and return ``(base64_text, mime_type)``.

    Raises ``OSError`` if the file cannot be read or is empty.
    """
    data = file.read_bytes()
    if not data:
        raise OSError(f"{file.name} is empty")
    return base64.b64encode(data).decode("ascii"), file.mime_type


def _default_client(server_url: str, timeout_s: float) -> MovesApiClient:
    return MovesApiClient(server_url, timeout_s=timeout_s)


class _MoveRequestSignals(QObject):
    """Lives on the UI thread; tasks emit through it from pool threads."""

    finished = pyqtSignal(int, object)  # request_id, MoveResult
    failed = pyqtSignal(int, str)  # request_id, message
    unreadable = pyqtSignal(int)  # request_id


class _MoveRequestTask(QRunnable):
    """Encodes one file and posts it; one task per submission."""

    def __init__(
        self,
        request_id: int,
        file: SelectedFile,
        server_url: str,
        timeout_s: float,
        client_factory: ClientFactory,
        signals: _MoveRequestSignals,
    ) -> None:
        super().__init__()
        self._request_id = request_id
        self._file = file
        self._server_url = server_url
        self._timeout_s = timeout_s
        self._client_factory = client_factory
        self._signals = signals

    def run(self) -> None:
        request_id = self._request_id
        try:
            image_base64, mime_type = encode_image(self._file)
        except OSError as exc:
            _LOGGER.warning("Could not read %s: %s", self._file.name, exc)
            self._signals.unreadable.emit(request_id)
            return

        _LOGGER.info(
            "Sending request %d (%s, %d base64 chars)",
            request_id,
            mime_type,
            len(image_base64),
        )
        client = self._client_factory(self._server_url, self._timeout_s)
        try:
            result = client.fetch_moves(image_base64, mime_type)
        except MovesApiError as exc:
            self._signals.failed.emit(request_id, str(exc))
            return
        except Exception as exc:
            _LOGGER.exception("Move request %d crashed", request_id)
            self._signals.failed.emit(request_id, str(exc))
            return
        finally:
            client.close()
        self._signals.finished.emit(request_id, result)


class MoveRequestSession:
    """Runs move requests on a thread pool and reports the newest one.

    Every submission gets a fresh, increasing request id and its own task,
    so a newer selection starts at once even while older calls are still
    waiting on the server. Completions for any id but the pending one are
    stale and dropped.
    """

    __slots__ = (
        "__weakref__",
        "_on_finished",
        "_on_failed",
        "_client_factory",
        "_signals",
        "_pool",
        "_server_url",
        "_timeout_s",
        "_is_started",
        "_is_shutting_down",
        "_pending_request_id",
        "_next_request_id",
    )

    def __init__(
        self,
        *,
        on_finished: Callable[[MoveResult], None],
        on_failed: Callable[[str], None],
        server_url: str,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        client_factory: ClientFactory = _default_client,
        parent: QObject | None = None,
    ) -> None:
        self._on_finished = on_finished
        self._on_failed = on_failed
        self._client_factory = client_factory
        self._server_url = server_url
        self._timeout_s = timeout_s

        self._signals = _MoveRequestSignals(parent)
        self._pool = QThreadPool(parent)
        self._pool.setMaxThreadCount(_MAX_CONCURRENT_REQUESTS)
        self._is_started = False
        self._is_shutting_down = False
        self._pending_request_id: int | None = None
        self._next_request_id = 0

    @property
    def is_pending(self) -> bool:
        return self._pending_request_id is not None

    def setup(self) -> None:
        """Connect task signals back to the UI thread."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._signals.finished.connect(self._on_task_finished)
        self._signals.failed.connect(self._on_task_failed)
        self._signals.unreadable.connect(self._on_task_unreadable)
        self._is_started = True

    def shutdown(self) -> None:
        """Forget pending work and wait briefly for running tasks."""
        self._is_shutting_down = True
        self.cancel()
        self._pool.clear()
        self._pool.waitForDone(2000)
        if not self._is_started:
            return
        self._signals.finished.disconnect(self._on_task_finished)
        self._signals.failed.disconnect(self._on_task_failed)
        self._signals.unreadable.disconnect(self._on_task_unreadable)
        self._is_started = False

    def set_server(self, server_url: str, timeout_s: float) -> None:
        """Update the endpoint and timeout for subsequent requests."""
        self._server_url = server_url
        self._timeout_s = timeout_s

    def submit(self, file: SelectedFile) -> int | None:
        """Start a request for *file* and return its id.

        Reading and encoding happen on the pool thread. An unreadable file
        is reported through ``on_failed`` without any network call.
        """
        if self._is_shutting_down:
            return None

        self.cancel()
        self._next_request_id += 1
        request_id = self._next_request_id
        self._pending_request_id = request_id
        _LOGGER.debug("Queueing request %d for %s", request_id, file.name)
        self._pool.start(
            _MoveRequestTask(
                request_id,
                file,
                self._server_url,
                float(self._timeout_s),
                self._client_factory,
                self._signals,
            )
        )
        return request_id

    def cancel(self) -> None:
        """Make any in-flight request stale.

        The HTTP call itself is not interrupted; its result is ignored.
        """
        self._pending_request_id = None

    def _take_pending(self, request_id: int, what: str) -> bool:
        if self._is_shutting_down:
            return False
        if request_id != self._pending_request_id:
            _LOGGER.debug("Dropping stale %s for request %d", what, request_id)
            return False
        self._pending_request_id = None
        return True

    def _on_task_finished(self, request_id: int, result_obj: object) -> None:
        if not self._take_pending(request_id, "result"):
            return
        if not isinstance(result_obj, MoveResult):
            self._on_failed(t().error_request.format(msg="invalid result"))
            return
        self._on_finished(result_obj)

    def _on_task_failed(self, request_id: int, message: str) -> None:
        if not self._take_pending(request_id, "failure"):
            return
        _LOGGER.warning("Request %d failed: %s", request_id, message)
        self._on_failed(t().error_request.format(msg=message))

    def _on_task_unreadable(self, request_id: int) -> None:
        if not self._take_pending(request_id, "read failure"):
            return
        self._on_failed(t().error_read)
