"""Hand-off of worker results to the Tk main loop."""

import logging
import queue
from typing import TYPE_CHECKING, Callable, Optional, Protocol

if TYPE_CHECKING:
    import tkinter as tk

logger = logging.getLogger(__name__)


class Dispatcher(Protocol):
    """Something that runs callbacks on the interactive thread."""

    def post(self, callback: Callable[[], None]) -> None:
        """Queue a callback; safe to call from any thread."""
        ...


class TkDispatcher:
    """
    Queue drained by `root.after` polling.

    Worker threads only ever call `post`; callbacks run on the thread that
    owns the Tk root.
    """

    def __init__(self, root: "tk.Misc", poll_interval_ms: int = 50):
        self._root = root
        self._poll_interval_ms = poll_interval_ms
        self._queue: "queue.Queue[Callable[[], None]]" = queue.Queue()
        self._after_id: Optional[str] = None

    def post(self, callback: Callable[[], None]) -> None:
        self._queue.put(callback)

    def start(self) -> None:
        """Begin polling the queue."""
        if self._after_id is None:
            self._poll()

    def stop(self) -> None:
        """Stop polling; queued callbacks are dropped."""
        if self._after_id is not None:
            self._root.after_cancel(self._after_id)
            self._after_id = None

    def drain(self) -> int:
        """Run every queued callback. Returns how many ran."""
        count = 0
        while True:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                return count
            try:
                callback()
            except Exception:
                logger.exception("UI callback failed")
            count += 1

    def _poll(self) -> None:
        self.drain()
        self._after_id = self._root.after(self._poll_interval_ms, self._poll)
