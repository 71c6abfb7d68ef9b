"""
Credential storage for AI CLI Tool.

The API key is persisted as a single-field JSON document so that the
summarize, translate and sentiment-analysis commands can pick it up
without asking for it again.
"""

from pathlib import Path
from typing import Optional
import logging

import commentjson
from lark.exceptions import LarkError

from ..core.client.errors import CredentialFileError

logger = logging.getLogger(__name__)

API_KEY_FIELD = "apiKey"

# commentjson reports syntax errors from its lark grammar or from the json module
PARSE_ERRORS = (ValueError, LarkError, commentjson.JSONLibraryException)


class CredentialStore:
    """Reads and writes the API key file."""

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Location of the credential file
        """
        self.path = Path(path)

    @property
    def exists(self) -> bool:
        """Check whether the credential file is present."""
        return self.path.is_file()

    def load(self) -> Optional[str]:
        """Load the saved API key.

        Returns:
            The API key, or None when no key has been saved

        Raises:
            CredentialFileError: If the file exists but is not a valid credential document
        """
        if not self.exists:
            logger.debug(f"No credential file at {self.path}")
            return None

        try:
            content = self.path.read_text(encoding="utf-8")
            data = commentjson.loads(content)
        except PARSE_ERRORS as e:
            error_msg = f"Invalid JSON in {self.path}: {e}"
            logger.debug(error_msg)
            raise CredentialFileError(error_msg, path=self.path, original_error=e) from e

        if not isinstance(data, dict):
            raise CredentialFileError(
                f"Invalid credential file {self.path}: expected a JSON object",
                path=self.path
            )

        api_key = data.get(API_KEY_FIELD)
        if api_key is None or api_key == "":
            return None
        if not isinstance(api_key, str):
            raise CredentialFileError(
                f"Invalid credential file {self.path}: '{API_KEY_FIELD}' must be a string",
                path=self.path
            )
        return api_key

    def save(self, api_key: str) -> Path:
        """Save the API key, replacing any previous one.

        Args:
            api_key: Key to store

        Returns:
            Path of the written file
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            commentjson.dump({API_KEY_FIELD: api_key}, f, indent=2, ensure_ascii=False)
            f.write("\n")

        logger.info(f"Saved API key to {self.path}")
        return self.path
