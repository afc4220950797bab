"""
HarAmmo Common Utilities

Shared loaders, URL helpers and errors used across HarAmmo modules.
"""

from .errors import (
    HarAmmoError,
    MissingInputFileError,
    MissingConfigFileError,
    ParseError,
    InvalidArchiveError
)
from .utils import ArchiveLoader, HarRequest, normalize_path, file_exists
from .url_utils import URLParts

__all__ = [
    'HarAmmoError',
    'MissingInputFileError',
    'MissingConfigFileError',
    'ParseError',
    'InvalidArchiveError',
    'ArchiveLoader',
    'HarRequest',
    'normalize_path',
    'file_exists',
    'URLParts'
]
