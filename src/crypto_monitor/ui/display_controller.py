"""Display controller for the ticker screen."""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional, Protocol

from crypto_monitor.domain.views import ControllerState, FetchOutcome, TickerDisplay
from crypto_monitor.services import TickerService
from crypto_monitor.ui.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class TickerScreen(Protocol):
    """The widgets the controller drives."""

    def show_loading(self) -> None:
        ...

    def hide_loading(self) -> None:
        ...

    def render(self, display: TickerDisplay) -> None:
        ...


class DisplayController:
    """
    Idle/Loading state machine behind the Refresh action.

    Each refresh runs one fetch on the executor and resolves on the UI thread
    through the dispatcher. Refreshes are not de-duplicated: overlapping
    fetches each resolve, and the last one to finish is what stays on screen.
    """

    def __init__(
        self,
        service: TickerService,
        screen: TickerScreen,
        dispatcher: Dispatcher,
        executor: Optional[Executor] = None,
    ):
        self._service = service
        self._screen = screen
        self._dispatcher = dispatcher
        self._executor = executor or ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="ticker-fetch"
        )
        self._state = ControllerState.IDLE

    @property
    def state(self) -> ControllerState:
        return self._state

    def refresh(self) -> Future:
        """Start a fetch. Must be called on the UI thread."""
        self._state = ControllerState.LOADING
        self._screen.show_loading()
        return self._executor.submit(self._fetch)

    def shutdown(self) -> None:
        """
        Stop accepting refreshes; in-flight fetches finish unobserved.

        Worker threads are not daemons, so the interpreter waits for an
        in-flight GET at exit. With no request_timeout_seconds configured
        that wait is bounded only by the transport.
        """
        self._executor.shutdown(wait=False, cancel_futures=True)

    def _fetch(self) -> None:
        # Worker thread
        outcome = self._service.fetch_outcome()
        self._dispatcher.post(lambda: self._resolve(outcome))

    def _resolve(self, outcome: FetchOutcome) -> None:
        # UI thread
        self._screen.hide_loading()
        self._state = ControllerState.IDLE
        display = self._service.resolve(outcome)
        self._screen.render(display)
