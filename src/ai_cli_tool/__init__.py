"""
AI CLI Tool - summarize, translate and analyze text from the command line.

This package forwards text to an OpenAI-compatible chat-completions API
and prints the model's answer for a small set of fixed tasks.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "ai-cli-tool"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
