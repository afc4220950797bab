"""
Filtering logic for HarAmmo.

Resolves the target host and drops HAR entries whose request host or
path does not match the configured regular expressions.
"""

import logging
import re
from typing import List, Dict, Any, Optional

from ..common import URLParts
from .config import ConverterConfig

logger = logging.getLogger("harammo.filters")


def resolve_host(host_argument: Optional[str], config: ConverterConfig,
                 entries: List[Dict[str, Any]]) -> str:
    """
    Determine the host used for filtering.

    Precedence: explicit argument, then config ``host``, then the
    hostname of the first entry's request URL. ``entries`` must not be
    empty when neither of the first two is set.
    """
    if host_argument:
        return host_argument
    if config.host:
        return config.host
    return URLParts.hostname(entries[0]['request']['url'])


class EntryFilter:
    """
    Decides which HAR entries are converted.

    Supports:
    - Host regex, searched in the request hostname
    - Path regex, searched in the request path and query string

    A filter that is disabled lets every entry through.
    """

    def __init__(self, config: ConverterConfig, host: str):
        """
        Initialize the filter.

        Args:
            config: Effective configuration
            host: Resolved host, used as a regex when host filtering is enabled
        """
        self.host_pattern = None
        self.path_pattern = None

        if config.host_filter_enabled:
            self.host_pattern = re.compile(host)
        if config.path_filter_enabled:
            self.path_pattern = re.compile(config.path_filter_regexp)

    def matches(self, url: str) -> bool:
        """
        Check one request URL against the enabled filters.

        Args:
            url: The full request URL

        Returns:
            True if the entry should be kept
        """
        if self.host_pattern and not self.host_pattern.search(URLParts.hostname(url)):
            logger.debug(f"[SKIP] {url} (host does not match {self.host_pattern.pattern})")
            return False

        if self.path_pattern and not self.path_pattern.search(URLParts.request_target(url)):
            logger.debug(f"[SKIP] {url} (path does not match {self.path_pattern.pattern})")
            return False

        logger.debug(f"[KEEP] {url}")
        return True

    def apply(self, entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Return a new list with the matching entries, in input order."""
        kept = [
            entry for entry in entries
            if entry.get('request') and self.matches(entry['request']['url'])
        ]
        logger.info(f"Kept {len(kept)} of {len(entries)} entries")
        return kept
