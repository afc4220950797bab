"""
HarAmmo Converter Configuration

Default options, user config file loading (JSON or YAML) and the
shallow merge that produces the effective configuration.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Union

import yaml

from ..common import ParseError, normalize_path

logger = logging.getLogger("harammo.config")

# Keys keep the camelCase spelling used in config files
DEFAULT_CONFIG: Dict[str, Any] = {
    'host': None,
    'pathFilterRegexp': None,
    'customCookies': None,
    'clearCookies': False,
    'customHeaders': [],
    'autoTag': False,
}


@dataclass
class ConverterConfig:
    """Effective configuration for one conversion run."""

    host: Union[str, bool, None] = None
    path_filter_regexp: Union[str, bool, None] = None
    custom_cookies: Union[str, List[str], None] = None
    clear_cookies: bool = False
    custom_headers: List[Dict[str, str]] = field(default_factory=list)
    auto_tag: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConverterConfig':
        """Create ConverterConfig from a config mapping."""
        unknown = set(data) - set(DEFAULT_CONFIG)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        return cls(
            host=data.get('host'),
            path_filter_regexp=data.get('pathFilterRegexp'),
            custom_cookies=data.get('customCookies'),
            clear_cookies=bool(data.get('clearCookies', False)),
            custom_headers=list(data.get('customHeaders') or []),
            auto_tag=bool(data.get('autoTag', False))
        )

    @property
    def host_filter_enabled(self) -> bool:
        """Host filtering is off only for an explicit false (bool or string)."""
        return not (self.host is False or self.host == 'false')

    @property
    def path_filter_enabled(self) -> bool:
        return bool(self.path_filter_regexp)

    def cookie_variants(self) -> Optional[List[str]]:
        """
        Cookie values driving one output pass each.

        Returns:
            The customCookies list, or None when customCookies is not a list
        """
        if isinstance(self.custom_cookies, list):
            return list(self.custom_cookies)
        return None


def parse_config_file(config_path: str) -> Dict[str, Any]:
    """
    Parse a JSON or YAML config document.

    Args:
        config_path: Path to the config file

    Returns:
        Mapping of config keys, empty for an empty document

    Raises:
        ParseError: If the content is not valid or not a mapping
    """
    path = normalize_path(config_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ParseError(f"Can't parse config file - {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(
            f"Can't parse config file - expected a mapping in {path}, "
            f"got {type(data).__name__}"
        )
    return data


def merge_config(defaults: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Shallow merge, keys present in overrides win. Inputs are not modified."""
    merged = dict(defaults)
    if overrides:
        merged.update(overrides)
    return merged


def load_config(defaults: Optional[Dict[str, Any]] = None,
                override_path: Optional[str] = None) -> ConverterConfig:
    """
    Build the effective configuration.

    Args:
        defaults: Caller supplied defaults (DEFAULT_CONFIG if None)
        override_path: Optional user config file merged over the defaults

    Returns:
        ConverterConfig for the run
    """
    defaults = DEFAULT_CONFIG if defaults is None else defaults

    if not override_path:
        return ConverterConfig.from_dict(defaults)

    overrides = parse_config_file(override_path)
    logger.debug(f"Config overrides from {override_path}: {sorted(overrides)}")
    return ConverterConfig.from_dict(merge_config(defaults, overrides))
