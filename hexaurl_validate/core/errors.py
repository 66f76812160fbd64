"""Error types for HexaURL validation.

Every validation failure is reported as a ``HexaUrlError`` carrying one code
from ``HexaUrlErrorCode``. Configuration objects that contradict themselves
fail earlier, at construction, with ``ConfigError``.

Usage:
    from hexaurl_validate.core.errors import HexaUrlError, HexaUrlErrorCode

    try:
        validate(slug)
    except HexaUrlError as e:
        if e.code == HexaUrlErrorCode.STRING_TOO_SHORT:
            ...
"""

from enum import Enum
from typing import Any


class HexaUrlErrorCode(str, Enum):
    """Codes identifying the specific validation failure."""

    STRING_TOO_LONG = "StringTooLong"
    STRING_TOO_SHORT = "StringTooShort"

    # Reserved for byte-level checks done by the encoder
    BYTES_TOO_LONG = "BytesTooLong"
    BYTES_TOO_SHORT = "BytesTooShort"

    INVALID_CHARACTER = "InvalidCharacter"
    INVALID_CONFIG = "InvalidConfig"

    # Reserved for the encoder
    INVALID_LENGTH = "InvalidLength"

    # Delimiter rules
    LEADING_TRAILING_HYPHEN = "LeadingTrailingHyphen"
    LEADING_TRAILING_UNDERSCORE = "LeadingTrailingUnderscore"
    CONSECUTIVE_HYPHENS = "ConsecutiveHyphens"
    CONSECUTIVE_UNDERSCORES = "ConsecutiveUnderscores"
    ADJACENT_HYPHEN_UNDERSCORE = "AdjacentHyphenUnderscore"


class HexaUrlError(ValueError):
    """Exception raised when a string is not a valid HexaURL."""

    def __init__(self, message: str, code: HexaUrlErrorCode):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for logs and API responses.

        Returns:
            Dict with the error code value and message.
        """
        return {"code": self.code.value, "message": self.message}

    def __repr__(self) -> str:
        return f"HexaUrlError(code={self.code.value!r}, message={self.message!r})"


class ConfigError(ValueError):
    """Exception raised when a Config is internally inconsistent."""


def string_too_short(min_length: int) -> HexaUrlError:
    return HexaUrlError(
        f"String is too short: minimum length is {min_length} characters",
        HexaUrlErrorCode.STRING_TOO_SHORT,
    )


def string_too_long(max_length: int) -> HexaUrlError:
    return HexaUrlError(
        f"String is too long: maximum length is {max_length} characters",
        HexaUrlErrorCode.STRING_TOO_LONG,
    )


def invalid_character() -> HexaUrlError:
    return HexaUrlError(
        "Invalid character in this type of HexaURL",
        HexaUrlErrorCode.INVALID_CHARACTER,
    )


def invalid_config(min_length: int, max_length: int, byte_size: int) -> HexaUrlError:
    return HexaUrlError(
        f"Invalid configuration: maximum length {max_length} is less than "
        f"minimum length {min_length} for {byte_size} bytes",
        HexaUrlErrorCode.INVALID_CONFIG,
    )


# Delimiter rule messages, keyed by code
DELIMITER_MESSAGES: dict[HexaUrlErrorCode, str] = {
    HexaUrlErrorCode.LEADING_TRAILING_HYPHEN: "Hyphens cannot start or end this type of HexaURL",
    HexaUrlErrorCode.LEADING_TRAILING_UNDERSCORE: (
        "Underscores cannot start or end this type of HexaURL"
    ),
    HexaUrlErrorCode.CONSECUTIVE_HYPHENS: "This type of HexaURL cannot include consecutive hyphens",
    HexaUrlErrorCode.CONSECUTIVE_UNDERSCORES: (
        "This type of HexaURL cannot include consecutive underscores"
    ),
    HexaUrlErrorCode.ADJACENT_HYPHEN_UNDERSCORE: (
        "This type of HexaURL cannot include adjacent hyphens and underscores"
    ),
}


def delimiter_error(code: HexaUrlErrorCode) -> HexaUrlError:
    return HexaUrlError(DELIMITER_MESSAGES[code], code)
