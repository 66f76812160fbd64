"""
Validation for HexaURL identifiers.

Checks that a short slug uses an allowed character set, follows the
configured delimiter rules, and fits the encoded byte size.
"""

from .core.errors import ConfigError, HexaUrlError, HexaUrlErrorCode
from .core.rules import (
    Composition,
    Config,
    DelimiterRules,
    create_allowed_delimiter_rules,
    create_config,
    create_delimiter_rules,
)
from .core.validation import (
    DEFAULT_BYTE_SIZE,
    calc_str_len,
    effective_max_length,
    get_validation_error,
    is_encoding_safe,
    is_valid,
    validate,
)

__all__ = [
    "validate",
    "is_valid",
    "get_validation_error",
    "is_encoding_safe",
    "calc_str_len",
    "effective_max_length",
    "DEFAULT_BYTE_SIZE",
    "Config",
    "Composition",
    "DelimiterRules",
    "create_config",
    "create_delimiter_rules",
    "create_allowed_delimiter_rules",
    "HexaUrlError",
    "HexaUrlErrorCode",
    "ConfigError",
]
