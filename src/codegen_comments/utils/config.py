import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from ..exceptions import ConfigurationError
from .date_format import JavaDateFormat

logger = logging.getLogger(__name__)


class PropertyRegistry:
    """Property keys understood by the comment generator"""

    COMMENT_GENERATOR_SUPPRESS_DATE = "suppressDate"
    COMMENT_GENERATOR_SUPPRESS_ALL_COMMENTS = "suppressAllComments"
    COMMENT_GENERATOR_DATE_FORMAT = "dateFormat"


# Section of a YAML config file holding comment generator properties
CONFIG_SECTION = "comment_generator"

ENV_OVERRIDES = {
    "CODEGEN_COMMENTS_SUPPRESS_DATE": PropertyRegistry.COMMENT_GENERATOR_SUPPRESS_DATE,
    "CODEGEN_COMMENTS_SUPPRESS_ALL_COMMENTS": PropertyRegistry.COMMENT_GENERATOR_SUPPRESS_ALL_COMMENTS,
    "CODEGEN_COMMENTS_DATE_FORMAT": PropertyRegistry.COMMENT_GENERATOR_DATE_FORMAT,
}

TRUE_VALUES = {"true", "yes", "y", "1"}

_KEY_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_key(key: str) -> str:
    """'suppress date', 'suppress_date' and 'suppressDate' all map to 'suppressdate'"""
    return _KEY_SEPARATORS.sub("", key).lower()


def is_true(value: Optional[str]) -> bool:
    """Lenient boolean parse; anything unrecognised is False"""
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def string_has_value(value: Optional[str]) -> bool:
    return value is not None and len(value.strip()) > 0


def get_property(properties: Mapping[str, str], key: str) -> Optional[str]:
    """Look up a property regardless of how its key is spelled"""
    wanted = normalize_key(key)
    for name, value in properties.items():
        if normalize_key(name) == wanted:
            return value
    return None


def merge_properties(current: Mapping[str, str], updates: Mapping[str, str]) -> Dict[str, str]:
    """
    Merge updates over current without touching either.

    A key in updates replaces any existing key spelled differently but
    normalizing to the same name, so the last write wins.
    """
    merged = dict(current)
    for key, value in updates.items():
        wanted = normalize_key(key)
        for existing in [name for name in merged if normalize_key(name) == wanted]:
            del merged[existing]
        merged[key] = value
    return merged


@dataclass(frozen=True)
class AnnotatorConfig:
    """Settings derived from the merged comment generator properties"""

    suppress_all_comments: bool = False
    suppress_date: bool = False
    date_format: Optional[JavaDateFormat] = None

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> 'AnnotatorConfig':
        """
        Derive settings from a property mapping.

        Raises:
            ConfigurationError: if the date format pattern does not compile
        """
        date_format = None
        pattern = get_property(properties, PropertyRegistry.COMMENT_GENERATOR_DATE_FORMAT)
        if string_has_value(pattern):
            try:
                date_format = JavaDateFormat(pattern)
            except ConfigurationError as e:
                raise ConfigurationError(
                    e.message,
                    key=PropertyRegistry.COMMENT_GENERATOR_DATE_FORMAT,
                    value=pattern,
                ) from e

        return cls(
            suppress_all_comments=is_true(
                get_property(properties, PropertyRegistry.COMMENT_GENERATOR_SUPPRESS_ALL_COMMENTS)
            ),
            suppress_date=is_true(
                get_property(properties, PropertyRegistry.COMMENT_GENERATOR_SUPPRESS_DATE)
            ),
            date_format=date_format,
        )


def load_properties(config_path: Optional[Path] = None,
                    environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Collect comment generator properties from a YAML file and the environment.

    The file may hold the properties under a ``comment_generator`` section or
    at the top level. Environment variables win over the file. Values are
    turned into strings the way the generator expects them.
    """
    properties: Dict[str, str] = {}

    if config_path is not None and config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Couldn't load config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

        section = data.get(CONFIG_SECTION, data)
        if not isinstance(section, dict):
            raise ConfigurationError(f"'{CONFIG_SECTION}' in {config_path} must be a mapping")

        for key, value in section.items():
            if value is None:
                continue
            properties[str(key)] = _stringify(value)
        logger.debug(f"Loaded {len(properties)} properties from {config_path}")

    env = os.environ if environ is None else environ
    overrides = {
        key: env[variable]
        for variable, key in ENV_OVERRIDES.items()
        if variable in env
    }
    if overrides:
        logger.debug(f"Environment overrides: {sorted(overrides)}")

    return merge_properties(properties, overrides)


def _stringify(value) -> str:
    # YAML turns `true` into a bool; the generator wants "true"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
