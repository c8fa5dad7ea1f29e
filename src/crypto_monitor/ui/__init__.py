"""Desktop UI package using Tkinter + ttk.

Tk widgets live in `app` and `main_window`; `dispatcher` and
`display_controller` import without a Tk installation.
"""
