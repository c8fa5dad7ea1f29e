"""Crypto Monitor - single-screen Bitcoin price desktop application."""

__version__ = "0.1.0"
