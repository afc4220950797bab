"""
Request block building for HarAmmo.

Turns one recorded HAR request into a size-prefixed raw HTTP request:

    <size>[ <tag>]
    <METHOD> <target> <version>
    <headers>

    <body>

"""

from typing import List, Dict, Optional

from ..common import HarRequest, URLParts
from .config import ConverterConfig


def merge_headers(original: List[Dict[str, str]],
                  custom: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """
    Merge custom headers into a recorded header list.

    Originals keep their order. A custom header replaces the first
    original with the same name in place; custom headers that replaced
    nothing are appended in configured order. Neither input is modified.

    Example:
        merge_headers([{'name': 'A', 'value': '1'}, {'name': 'B', 'value': '2'}],
                      [{'name': 'B', 'value': '9'}, {'name': 'C', 'value': '3'}])
        # -> A: 1, B: 9, C: 3
    """
    consumed = set()
    merged = []

    for header in original:
        match = next(
            (i for i, item in enumerate(custom)
             if i not in consumed and item['name'] == header['name']),
            None
        )
        if match is None:
            merged.append(header)
        else:
            merged.append(custom[match])
            consumed.add(match)

    merged.extend(item for i, item in enumerate(custom) if i not in consumed)
    return merged


# Default for RequestBuilder.build: no cookie variant pass is active
NO_VARIANT = object()


def byte_length(text: str) -> int:
    return len(text.encode('utf-8'))


class RequestBuilder:
    """
    Builds output blocks for a fixed configuration.

    Cookie and Content-Length header names are compared case-insensitively,
    so archives recorded over HTTP/2 (lower-case names) get the same cookie
    policy and never carry a recorded content-length next to the computed one.
    """

    def __init__(self, config: ConverterConfig):
        self.config = config

    def build(self, request: HarRequest, cookie=NO_VARIANT) -> str:
        """
        Build one size-prefixed request block.

        Args:
            request: Recorded request
            cookie: Active cookie variant, when customCookies is a list.
                Any element value is used as is, None included

        Returns:
            The complete block, size line included
        """
        lines = [f"{request.method} {URLParts.request_target(request.url)} {request.http_version}\n"]
        body = ''

        if request.method == 'POST':
            if request.post_text:
                lines.append(f"Content-Length: {byte_length(request.post_text)}\n")
                body = request.post_text
            else:
                lines.append("Content-Length: 0\n")

        headers = request.headers
        if self.config.custom_headers:
            headers = merge_headers(headers, self.config.custom_headers)

        for header in headers:
            line = self._header_line(header, cookie)
            if line is not None:
                lines.append(line)

        lines.append('\n')
        lines.append(body)
        lines.append('\n\n')

        block = ''.join(lines)

        tag = ''
        if self.config.auto_tag:
            tag = ' ' + URLParts.pathname(request.url)

        return f"{byte_length(block)}{tag}\n{block}"

    def _header_line(self, header: Dict[str, str], cookie) -> Optional[str]:
        """Render one header, or None when it must be left out."""
        name = header['name']
        lowered = name.lower()

        if lowered == 'cookie':
            if self.config.custom_cookies:
                value = self.config.custom_cookies if cookie is NO_VARIANT else cookie
                return f"{name}: {value}\n"
            if self.config.clear_cookies:
                return None
            return f"{name}: {header['value']}\n"

        # Recomputed from the body for POST requests
        if lowered == 'content-length':
            return None

        return f"{name}: {header['value']}\n"
