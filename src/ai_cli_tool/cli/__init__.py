"""
CLI interface package for AI CLI Tool.

This package contains the Typer application and its command handlers.
"""

__all__ = ["app"]
