"""Entrypoint for the packaged app. PyInstaller runs this; it starts the desktop UI."""

# Import directly so the frozen bundle resolves the package without -m.
from crypto_monitor.main_desktop import main


if __name__ == "__main__":
    main()
