"""Main application window: the ticker screen."""

import tkinter as tk
from collections import deque
from tkinter import ttk
from typing import Optional

from crypto_monitor.domain.views import Notification, TickerDisplay

SHORT_NOTIFICATION_MS = 2000
LONG_NOTIFICATION_MS = 3500


class MainWindow:
    """
    Single screen with asset label, price, timestamp and a Refresh button.

    Notifications appear one at a time in a bar at the bottom and clear
    themselves.
    """

    def __init__(self, root: tk.Tk):
        """
        Initialize main window.

        Args:
            root: Tkinter root window
        """
        self.root = root
        self.on_refresh = None

        self._pending: deque[Notification] = deque()
        self._notification_after_id: Optional[str] = None

        # Create main frame
        self.main_frame = ttk.Frame(root, padding="20")
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        self._create_ticker_panel()
        self._create_controls()
        self._create_notification_bar()

    def _create_ticker_panel(self) -> None:
        """Create the asset, price and date labels."""
        panel = ttk.Frame(self.main_frame)
        panel.pack(fill=tk.BOTH, expand=True)

        self.crypto_label = ttk.Label(panel, text="", style='Heading.TLabel')
        self.crypto_label.pack(pady=(10, 5))

        self.value_label = ttk.Label(panel, text="--", style='Price.TLabel')
        self.value_label.pack(pady=5)

        self.date_label = ttk.Label(panel, text="", style='Info.TLabel')
        self.date_label.pack(pady=(5, 10))

    def _create_controls(self) -> None:
        """Create the progress bar and Refresh button."""
        controls = ttk.Frame(self.main_frame)
        controls.pack(fill=tk.X)

        self.progress_bar = ttk.Progressbar(controls, mode='indeterminate', length=200)

        self.refresh_button = ttk.Button(controls, text="Refresh", command=self._on_refresh)
        self.refresh_button.pack(side=tk.BOTTOM, pady=(10, 0))

    def _create_notification_bar(self) -> None:
        self.notification_label = ttk.Label(self.main_frame, text="", style='Error.TLabel')
        self.notification_label.pack(fill=tk.X, pady=(10, 0))

    def _on_refresh(self) -> None:
        if self.on_refresh:
            self.on_refresh()

    # TickerScreen

    def show_loading(self) -> None:
        self.progress_bar.pack(side=tk.TOP, pady=(0, 5))
        self.progress_bar.start(10)

    def hide_loading(self) -> None:
        self.progress_bar.stop()
        self.progress_bar.pack_forget()

    def render(self, display: TickerDisplay) -> None:
        """Apply a display; regions with no text keep their content."""
        if display.crypto_label is not None:
            self.crypto_label.config(text=display.crypto_label)
        if display.price_text is not None:
            self.value_label.config(text=display.price_text)
        if display.date_text is not None:
            self.date_label.config(text=display.date_text)

        for notification in display.notifications:
            self.notify(notification)

    def notify(self, notification: Notification) -> None:
        """Queue a transient notification."""
        self._pending.append(notification)
        if self._notification_after_id is None:
            self._show_next_notification()

    def _show_next_notification(self) -> None:
        if not self._pending:
            self.notification_label.config(text="")
            self._notification_after_id = None
            return

        notification = self._pending.popleft()
        self.notification_label.config(text=notification.message)
        duration = LONG_NOTIFICATION_MS if notification.long else SHORT_NOTIFICATION_MS
        self._notification_after_id = self.root.after(duration, self._show_next_notification)
