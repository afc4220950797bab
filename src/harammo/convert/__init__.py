"""
HarAmmo Conversion

HAR to raw HTTP request conversion: configuration, filtering, request
building and output.
"""

from .config import ConverterConfig, DEFAULT_CONFIG, load_config, merge_config, parse_config_file
from .filters import EntryFilter, resolve_host
from .builder import RequestBuilder, merge_headers
from .sink import CallbackSink, FileSink, make_sink
from .converter import ConvertOptions, HarConverter, convert

__all__ = [
    'ConverterConfig',
    'DEFAULT_CONFIG',
    'load_config',
    'merge_config',
    'parse_config_file',
    'EntryFilter',
    'resolve_host',
    'RequestBuilder',
    'merge_headers',
    'CallbackSink',
    'FileSink',
    'make_sink',
    'ConvertOptions',
    'HarConverter',
    'convert'
]
