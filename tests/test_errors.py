"""Tests for HexaURL error types.

These tests verify:
1. The error code set is complete and stable
2. HexaUrlError attributes and serialization
3. ConfigError is distinct from HexaUrlError
"""

import pytest

from hexaurl_validate.core.errors import (
    DELIMITER_MESSAGES,
    ConfigError,
    HexaUrlError,
    HexaUrlErrorCode,
    delimiter_error,
    invalid_character,
    invalid_config,
    string_too_long,
    string_too_short,
)


class TestHexaUrlErrorCode:
    """Tests for the error code enum."""

    def test_all_codes_present(self):
        """Test that the full set of codes is defined."""
        assert {code.value for code in HexaUrlErrorCode} == {
            "StringTooLong",
            "StringTooShort",
            "BytesTooLong",
            "BytesTooShort",
            "InvalidCharacter",
            "InvalidConfig",
            "InvalidLength",
            "LeadingTrailingHyphen",
            "LeadingTrailingUnderscore",
            "ConsecutiveHyphens",
            "ConsecutiveUnderscores",
            "AdjacentHyphenUnderscore",
        }

    def test_codes_are_strings(self):
        """Test that codes compare equal to their string values."""
        assert HexaUrlErrorCode.STRING_TOO_LONG == "StringTooLong"
        assert HexaUrlErrorCode("InvalidCharacter") is HexaUrlErrorCode.INVALID_CHARACTER

    def test_every_delimiter_code_has_message(self):
        """Test that each delimiter code maps to a message."""
        assert set(DELIMITER_MESSAGES) == {
            HexaUrlErrorCode.LEADING_TRAILING_HYPHEN,
            HexaUrlErrorCode.LEADING_TRAILING_UNDERSCORE,
            HexaUrlErrorCode.CONSECUTIVE_HYPHENS,
            HexaUrlErrorCode.CONSECUTIVE_UNDERSCORES,
            HexaUrlErrorCode.ADJACENT_HYPHEN_UNDERSCORE,
        }


class TestHexaUrlError:
    """Tests for HexaUrlError exception."""

    def test_error_attributes(self):
        """Test that error has correct attributes."""
        error = HexaUrlError("bad", HexaUrlErrorCode.INVALID_CHARACTER)
        assert error.message == "bad"
        assert error.code == HexaUrlErrorCode.INVALID_CHARACTER
        assert str(error) == "bad"

    def test_inherits_from_value_error(self):
        """Test that HexaUrlError is a ValueError."""
        assert isinstance(invalid_character(), ValueError)

    def test_to_dict(self):
        """Test serialization for logs and responses."""
        assert string_too_short(3).to_dict() == {
            "code": "StringTooShort",
            "message": "String is too short: minimum length is 3 characters",
        }

    def test_repr_includes_code(self):
        """Test that repr shows the code value."""
        assert "StringTooLong" in repr(string_too_long(21))


class TestErrorMessages:
    """Tests for the message of each error."""

    def test_string_too_long_message(self):
        assert str(string_too_long(10)) == "String is too long: maximum length is 10 characters"

    def test_invalid_character_message(self):
        assert "Invalid character" in str(invalid_character())

    def test_invalid_config_message(self):
        error = invalid_config(min_length=12, max_length=10, byte_size=8)
        assert error.code == HexaUrlErrorCode.INVALID_CONFIG
        assert "12" in error.message
        assert "8 bytes" in error.message

    def test_delimiter_messages(self):
        error = delimiter_error(HexaUrlErrorCode.CONSECUTIVE_HYPHENS)
        assert error.code == HexaUrlErrorCode.CONSECUTIVE_HYPHENS
        assert "consecutive hyphens" in error.message

        error = delimiter_error(HexaUrlErrorCode.LEADING_TRAILING_HYPHEN)
        assert error.message.startswith("Hyphens cannot start or end")

    def test_non_delimiter_code_rejected(self):
        """Test that delimiter_error only accepts delimiter codes."""
        with pytest.raises(KeyError):
            delimiter_error(HexaUrlErrorCode.STRING_TOO_LONG)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_inherits_from_value_error(self):
        assert issubclass(ConfigError, ValueError)

    def test_distinct_from_hexaurl_error(self):
        """Construction failures can be told apart from validation failures."""
        assert not issubclass(ConfigError, HexaUrlError)
        assert not issubclass(HexaUrlError, ConfigError)
