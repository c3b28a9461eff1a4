"""Command-line interface for playing and simulating games."""

from .main import app, main

__all__ = ["app", "main"]
