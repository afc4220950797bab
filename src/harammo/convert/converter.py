"""
HarAmmo Converter

Runs the whole HAR to ammo pipeline:

    check params -> load HAR -> merge config -> resolve host
    -> filter entries -> prepare output -> build blocks -> deliver

Every step runs to completion before the next one starts. The first
error stops the run; blocks already appended to the output file stay.
"""

import logging
from dataclasses import dataclass
from typing import List, Dict, Any, Optional

from ..common import (
    ArchiveLoader,
    HarAmmoError,
    HarRequest,
    MissingConfigFileError,
    MissingInputFileError,
    file_exists
)
from .builder import NO_VARIANT, RequestBuilder
from .config import ConverterConfig, DEFAULT_CONFIG, load_config
from .filters import EntryFilter, resolve_host
from .sink import ResultCallback, make_sink

logger = logging.getLogger("harammo.convert")


@dataclass
class ConvertOptions:
    """Invocation parameters, usually filled in from the command line."""

    input: str
    config: Optional[str] = None
    host: Optional[str] = None
    output: Optional[str] = None


class HarConverter:
    """
    Convert one HAR file into raw request blocks.

    Example:
        converter = HarConverter(ConvertOptions(input='session.har', output='ammo.txt'))
        count = converter.run(FileSink('ammo.txt'))
    """

    def __init__(self, options: ConvertOptions, default_config: Optional[Dict[str, Any]] = None):
        self.options = options
        self.default_config = DEFAULT_CONFIG if default_config is None else default_config
        self.config: Optional[ConverterConfig] = None
        self.entries: List[Dict[str, Any]] = []
        self.host: Optional[str] = None

    def check_params(self) -> None:
        """
        Raises:
            MissingInputFileError: If the input file does not exist
            MissingConfigFileError: If a config file was given but does not exist
        """
        if not file_exists(self.options.input):
            raise MissingInputFileError(self.options.input)
        if self.options.config and not file_exists(self.options.config):
            raise MissingConfigFileError(self.options.config)

    def prepare(self) -> List[Dict[str, Any]]:
        """
        Load, configure and filter.

        Returns:
            The filtered entries, in archive order
        """
        self.check_params()
        self.entries = ArchiveLoader(self.options.input).load()
        self.config = load_config(self.default_config, self.options.config)
        self.host = resolve_host(self.options.host, self.config, self.entries)
        logger.info(f"Target host: {self.host}")

        self.entries = EntryFilter(self.config, self.host).apply(self.entries)
        return self.entries

    def passes(self) -> list:
        """Cookie value for every output pass, NO_VARIANT for a single plain pass."""
        variants = self.config.cookie_variants()
        if variants is None:
            return [NO_VARIANT]
        if not variants:
            logger.warning("customCookies is an empty list, no requests will be written")
        return variants

    def build_blocks(self):
        """Yield every output block in generation order."""
        builder = RequestBuilder(self.config)
        for cookie in self.passes():
            for entry in self.entries:
                yield builder.build(HarRequest.from_dict(entry['request']), cookie=cookie)

    def run(self, sink) -> int:
        """
        Execute the pipeline and feed every block to the sink.

        Args:
            sink: CallbackSink or FileSink

        Returns:
            Number of blocks delivered

        Raises:
            HarAmmoError: On the first failure
        """
        self.prepare()
        sink.prepare()

        count = 0
        for block in self.build_blocks():
            sink.deliver(block)
            count += 1

        logger.info(f"Wrote {count} requests")
        return count


def convert(options: ConvertOptions, default_config: Optional[Dict[str, Any]],
            callback: ResultCallback) -> None:
    """
    Callback-style entry point.

    The callback is called with ``(error)`` on failure. On success it is
    called once per block: ``(None, block)`` without an output file,
    ``(None)`` after each append with one. There is no final signal.
    """
    converter = HarConverter(options, default_config)
    sink = make_sink(options.output, callback)
    try:
        converter.run(sink)
    except HarAmmoError as e:
        logger.error(str(e))
        callback(e)
