"""
HarAmmo URL Utilities

URL decomposition helpers used for filtering and request-line building.
"""

from urllib.parse import urlsplit
from typing import Optional


class URLParts:
    """Splits recorded request URLs into the pieces the converter needs."""

    @staticmethod
    def hostname(url: str) -> Optional[str]:
        """Lower-cased hostname without port, or None if the URL has none."""
        return urlsplit(url).hostname

    @staticmethod
    def pathname(url: str) -> str:
        """
        Path component only, without query or fragment.

        Args:
            url: Absolute or relative URL

        Returns:
            The path, or "/" when the URL has no path
        """
        return urlsplit(url).path or '/'

    @staticmethod
    def request_target(url: str) -> str:
        """
        Origin-form request target: path plus query string.

        Scheme, host and fragment are dropped. "http://a.com?x=1"
        becomes "/?x=1".
        """
        parsed = urlsplit(url)
        target = parsed.path or '/'
        if parsed.query:
            target += '?' + parsed.query
        return target
