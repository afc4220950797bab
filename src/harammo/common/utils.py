"""
HarAmmo Common Utilities

HAR loading, request modelling and file helpers shared by the converter
and the CLI.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional

from .errors import InvalidArchiveError, ParseError

logger = logging.getLogger("harammo.loader")

DEFAULT_HTTP_VERSION = "HTTP/1.1"


def normalize_path(file_path: str) -> Path:
    """Resolve a user supplied path against the current working directory."""
    return Path(file_path).expanduser().resolve()


def file_exists(file_path: Optional[str]) -> bool:
    """Return True if file_path names an existing file or directory."""
    if not file_path:
        return False
    return normalize_path(file_path).exists()


@dataclass
class HarRequest:
    """The request half of one recorded HAR entry."""

    method: str
    url: str
    http_version: str = DEFAULT_HTTP_VERSION
    headers: List[Dict[str, str]] = field(default_factory=list)
    post_text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HarRequest':
        """Create HarRequest from a HAR ``request`` object."""
        post_data = data.get('postData') or {}
        return cls(
            method=data['method'],
            url=data['url'],
            http_version=data.get('httpVersion') or DEFAULT_HTTP_VERSION,
            headers=list(data.get('headers') or []),
            post_text=post_data.get('text')
        )


class ArchiveLoader:
    """
    Loader for HAR archive files.

    A usable archive is a JSON object of the form
    ``{"log": {"entries": [...]}}`` with at least one entry.

    Example:
        loader = ArchiveLoader("session.har")
        entries = loader.load()

        for entry in entries:
            print(entry['request']['url'])
    """

    def __init__(self, file_path: str):
        """
        Initialize archive loader.

        Args:
            file_path: Path to the HAR file, relative paths are resolved
                against the current working directory
        """
        self.file_path = normalize_path(file_path)

    def load(self) -> List[Dict[str, Any]]:
        """
        Load the recorded entries from the HAR file.

        Returns:
            List of HAR entry dictionaries, in archive order

        Raises:
            ParseError: If the file is not valid JSON
            InvalidArchiveError: If the document has no non-empty log.entries list
        """
        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                har = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Can't parse HAR file - {e}") from e

        entries = None
        if isinstance(har, dict) and isinstance(har.get('log'), dict):
            entries = har['log'].get('entries')

        if not isinstance(entries, list) or not entries:
            raise InvalidArchiveError("Invalid HAR file.")

        logger.info(f"Loaded {len(entries)} entries from {self.file_path}")
        return entries
