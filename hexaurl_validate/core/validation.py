"""HexaURL validation.

Checks run in a fixed order and stop at the first failure:

1. Config vs byte size (InvalidConfig)
2. Minimum length (StringTooShort)
3. Maximum length (StringTooLong)
4. Character composition (InvalidCharacter)
5. Delimiter rules, in order: leading/trailing hyphen, leading/trailing
   underscore, consecutive hyphens, consecutive underscores, adjacent
   hyphen and underscore

Lengths are measured in characters. Encoded HexaURLs pack 6 bits per
character, so ``n`` bytes hold at most ``n * 4 // 3`` characters.

Usage:
    from hexaurl_validate.core.validation import validate, is_encoding_safe

    # Raises HexaUrlError on the first violated rule
    validate("my-slug")

    # Cheap pre-check: length and ASCII only
    if not is_encoding_safe(slug, byte_size=8):
        return None
"""

from collections.abc import Callable

from hexaurl_validate.core.errors import (
    HexaUrlError,
    HexaUrlErrorCode,
    delimiter_error,
    invalid_character,
    invalid_config,
    string_too_long,
    string_too_short,
)
from hexaurl_validate.core.logging import get_logger
from hexaurl_validate.core.rules import Config, DelimiterRules

DEFAULT_BYTE_SIZE = 16

logger = get_logger(__name__)

_DEFAULT_CONFIG = Config()


def calc_str_len(n: int) -> int:
    """Calculate the maximum decoded string length for ``n`` encoded bytes.

    Args:
        n: Encoded size in bytes.

    Returns:
        Number of characters that fit, rounded down.

    Raises:
        ValueError: If ``n`` is negative.

    Example:
        >>> calc_str_len(16)
        21
    """
    if n < 0:
        raise ValueError(f"byte size cannot be negative: {n}")
    return n * 4 // 3


def effective_max_length(config: Config, byte_size: int = DEFAULT_BYTE_SIZE) -> int:
    """Get the tighter of ``config.max_length`` and the byte size limit."""
    byte_limit = calc_str_len(byte_size)
    if config.max_length is None:
        return byte_limit
    return min(config.max_length, byte_limit)


# (flag on DelimiterRules, error code, violation test), in check order
_DELIMITER_CHECKS: list[tuple[str, HexaUrlErrorCode, Callable[[str], bool]]] = [
    (
        "allow_leading_trailing_hyphens",
        HexaUrlErrorCode.LEADING_TRAILING_HYPHEN,
        lambda s: s.startswith("-") or s.endswith("-"),
    ),
    (
        "allow_leading_trailing_underscores",
        HexaUrlErrorCode.LEADING_TRAILING_UNDERSCORE,
        lambda s: s.startswith("_") or s.endswith("_"),
    ),
    (
        "allow_consecutive_hyphens",
        HexaUrlErrorCode.CONSECUTIVE_HYPHENS,
        lambda s: "--" in s,
    ),
    (
        "allow_consecutive_underscores",
        HexaUrlErrorCode.CONSECUTIVE_UNDERSCORES,
        lambda s: "__" in s,
    ),
    (
        "allow_adjacent_hyphen_underscore",
        HexaUrlErrorCode.ADJACENT_HYPHEN_UNDERSCORE,
        lambda s: "-_" in s or "_-" in s,
    ),
]


def _check_delimiters(value: str, rules: DelimiterRules) -> HexaUrlError | None:
    for flag, code, violates in _DELIMITER_CHECKS:
        if not getattr(rules, flag) and violates(value):
            return delimiter_error(code)
    return None


def get_validation_error(
    value: str,
    config: Config | None = None,
    byte_size: int = DEFAULT_BYTE_SIZE,
) -> HexaUrlError | None:
    """Find the first rule a string violates.

    Args:
        value: The candidate HexaURL.
        config: Validation rules. Defaults to ``Config()``.
        byte_size: Target encoded size in bytes.

    Returns:
        The error for the first violated rule, or None if valid.
    """
    if config is None:
        config = _DEFAULT_CONFIG

    max_length = effective_max_length(config, byte_size)
    min_length = config.min_length

    if min_length is not None and max_length < min_length:
        return invalid_config(min_length, max_length, byte_size)

    length = len(value)
    if min_length is not None and length < min_length:
        return string_too_short(min_length)

    if length > max_length:
        return string_too_long(max_length)

    if not config.composition.pattern.fullmatch(value):
        return invalid_character()

    return _check_delimiters(value, config.effective_delimiter)


def validate(
    value: str,
    config: Config | None = None,
    byte_size: int = DEFAULT_BYTE_SIZE,
) -> None:
    """Validate a HexaURL string.

    Args:
        value: The candidate HexaURL.
        config: Validation rules. Defaults to ``Config()``: at least 3
            characters, letters, digits and hyphens, strict delimiter rules.
        byte_size: Target encoded size in bytes (default 16, up to 21 characters).

    Raises:
        HexaUrlError: For the first violated rule.
        ValueError: If ``byte_size`` is negative.
    """
    error = get_validation_error(value, config, byte_size)
    if error is not None:
        logger.debug(
            "HexaURL rejected: %s",
            error.code.value,
            extra={"error_code": error.code.value, "input": value, "byte_size": byte_size},
        )
        raise error


def is_valid(
    value: str,
    config: Config | None = None,
    byte_size: int = DEFAULT_BYTE_SIZE,
) -> bool:
    """Check whether a string passes ``validate`` without raising."""
    return get_validation_error(value, config, byte_size) is None


def is_encoding_safe(value: str, byte_size: int = DEFAULT_BYTE_SIZE) -> bool:
    """Check whether a string is safe to hand to the HexaURL encoder.

    Only length and the ASCII range are checked; composition and delimiter
    rules are not. Anything this rejects, ``validate`` rejects too.

    Args:
        value: The candidate string.
        byte_size: Target encoded size in bytes.

    Returns:
        True if the string fits in ``byte_size`` bytes and is pure ASCII.
    """
    return len(value) <= calc_str_len(byte_size) and value.isascii()
