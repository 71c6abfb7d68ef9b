"""
Configuration package for AI CLI Tool.

This package contains the application settings and the credential store
that persists the API key between invocations.
"""

__all__ = ["settings", "credentials"]
