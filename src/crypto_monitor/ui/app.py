"""Desktop application main class."""

import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional

from crypto_monitor.app_context import AppContext, get_app_context
from crypto_monitor.config.settings import get_settings
from crypto_monitor.ui.dispatcher import TkDispatcher
from crypto_monitor.ui.display_controller import DisplayController
from crypto_monitor.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


class DesktopApp:
    """
    Main desktop application class.

    Manages the Tkinter root window, application context, and lifecycle.
    """

    def __init__(self):
        """Initialize the desktop application."""
        self.root: Optional[tk.Tk] = None
        self.context: Optional[AppContext] = None
        self.main_window: Optional[MainWindow] = None
        self.dispatcher: Optional[TkDispatcher] = None
        self.controller: Optional[DisplayController] = None

    def run(self) -> None:
        """Start the desktop application."""
        settings = get_settings()

        # Create root window
        self.root = tk.Tk()
        self.root.title(settings.app_name)
        self.root.geometry("420x320")
        self.root.minsize(360, 260)

        try:
            # macOS app icon
            self.root.createcommand('tk::mac::ReopenApplication', self._on_reopen)
        except tk.TclError:
            pass

        self._configure_style()

        # Initialize application context
        self.context = get_app_context()
        self.context.initialize()

        # Create main window and wire the Refresh action
        self.main_window = MainWindow(self.root)
        self.dispatcher = TkDispatcher(self.root)
        self.controller = DisplayController(
            service=self.context.ticker,
            screen=self.main_window,
            dispatcher=self.dispatcher,
        )
        self.main_window.on_refresh = self._on_refresh

        self._create_menu_bar()
        self.root.bind_all("<Control-r>", lambda event: self._on_refresh())
        try:
            self.root.bind_all("<Command-r>", lambda event: self._on_refresh())
        except tk.TclError:
            pass

        # Handle window close
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self.dispatcher.start()

        # Start event loop
        self.root.mainloop()

    def _configure_style(self) -> None:
        """Configure ttk styles for consistent appearance."""
        style = ttk.Style()

        # Try to use a native-looking theme
        available_themes = style.theme_names()
        if 'aqua' in available_themes:  # macOS
            style.theme_use('aqua')
        elif 'clam' in available_themes:
            style.theme_use('clam')

        style.configure('Heading.TLabel', font=('Helvetica', 14, 'bold'))
        style.configure('Price.TLabel', font=('Helvetica', 28, 'bold'))
        style.configure('Info.TLabel', font=('Helvetica', 10))
        style.configure('Error.TLabel', foreground='red')

    def _create_menu_bar(self) -> None:
        """Create the application menu bar."""
        menubar = tk.Menu(self.root)
        self.root.config(menu=menubar)

        # File menu
        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="File", menu=file_menu)
        file_menu.add_command(label="Quit", command=self._on_close, accelerator="Cmd+Q")

        # Edit menu
        edit_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Edit", menu=edit_menu)
        edit_menu.add_command(label="Refresh", command=self._on_refresh, accelerator="Cmd+R")

        # Help menu
        help_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="About", command=self._on_about)

        try:
            self.root.createcommand('tk::mac::Quit', self._on_close)
        except tk.TclError:
            pass

    def _on_refresh(self) -> None:
        """Fetch the current ticker."""
        if self.controller:
            self.controller.refresh()

    def _on_about(self) -> None:
        """Show about dialog."""
        settings = get_settings()
        messagebox.showinfo(
            "About",
            f"{settings.app_name}\n"
            f"Version {settings.app_version}\n\n"
            f"Current Bitcoin price from Mercado Bitcoin.\n\n"
            f"Data directory:\n{self.context.data_dir}"
        )

    def _on_reopen(self) -> None:
        """Handle macOS dock click to reopen."""
        if self.root:
            self.root.deiconify()

    def _on_close(self) -> None:
        """Handle application close."""
        logger.info("Shutting down")
        if self.controller:
            self.controller.shutdown()
        if self.dispatcher:
            self.dispatcher.stop()
        if self.context:
            self.context.close()
        if self.root:
            self.root.destroy()
