"""Validation rules: character composition, delimiter rules and Config.

A Config is built once and shared across any number of ``validate`` calls.
All types here are immutable.

Compositions:
- alphanumeric: letters and digits
- alphanumeric_hyphen: letters, digits and ``-`` (default)
- alphanumeric_underscore: letters, digits and ``_``
- alphanumeric_hyphen_underscore: letters, digits, ``-`` and ``_``

Usage:
    from hexaurl_validate.core.rules import Composition, create_config

    config = create_config(
        min_length=5,
        composition=Composition.ALPHANUMERIC_HYPHEN_UNDERSCORE,
        delimiter={"allow_consecutive_underscores": True},
    )
"""

import dataclasses
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hexaurl_validate.core.errors import ConfigError

DEFAULT_MIN_LENGTH = 3


class Composition(str, Enum):
    """Characters allowed in a HexaURL besides ASCII letters and digits."""

    ALPHANUMERIC = "alphanumeric"
    ALPHANUMERIC_HYPHEN = "alphanumeric_hyphen"
    ALPHANUMERIC_UNDERSCORE = "alphanumeric_underscore"
    ALPHANUMERIC_HYPHEN_UNDERSCORE = "alphanumeric_hyphen_underscore"

    @property
    def allowed_delimiters(self) -> frozenset[str]:
        """Delimiter characters permitted by this composition."""
        return _ALLOWED_DELIMITERS[self]

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled pattern matching one or more allowed characters."""
        return _PATTERNS[self]


_ALLOWED_DELIMITERS: dict[Composition, frozenset[str]] = {
    Composition.ALPHANUMERIC: frozenset(),
    Composition.ALPHANUMERIC_HYPHEN: frozenset("-"),
    Composition.ALPHANUMERIC_UNDERSCORE: frozenset("_"),
    Composition.ALPHANUMERIC_HYPHEN_UNDERSCORE: frozenset("-_"),
}

# ASCII only; re's \w and str.isalnum() would accept non-ASCII letters
_PATTERNS: dict[Composition, re.Pattern[str]] = {
    Composition.ALPHANUMERIC: re.compile(r"[0-9A-Za-z]+"),
    Composition.ALPHANUMERIC_HYPHEN: re.compile(r"[0-9A-Za-z\-]+"),
    Composition.ALPHANUMERIC_UNDERSCORE: re.compile(r"[0-9A-Za-z_]+"),
    Composition.ALPHANUMERIC_HYPHEN_UNDERSCORE: re.compile(r"[0-9A-Za-z\-_]+"),
}


@dataclass(frozen=True)
class DelimiterRules:
    """Rules for where hyphens and underscores may appear.

    Each flag permits exactly one pattern. All flags default to False,
    the strictest rule set.
    """

    allow_leading_trailing_hyphens: bool = False
    allow_leading_trailing_underscores: bool = False
    allow_consecutive_hyphens: bool = False  # "--"
    allow_consecutive_underscores: bool = False  # "__"
    allow_adjacent_hyphen_underscore: bool = False  # "-_" or "_-"

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, bool):
                raise ConfigError(f"{field.name} must be a bool, got {value!r}")

    @classmethod
    def strict(cls) -> "DelimiterRules":
        """Rules with every flag disabled."""
        return cls()

    @classmethod
    def allow_all(cls) -> "DelimiterRules":
        """Rules with every flag enabled."""
        return cls(**{field.name: True for field in dataclasses.fields(cls)})


def create_delimiter_rules(**overrides: bool) -> DelimiterRules:
    """Create delimiter rules, merging overrides onto the strict defaults.

    Args:
        **overrides: Flag values to change, e.g. ``allow_consecutive_hyphens=True``.

    Returns:
        A new DelimiterRules instance.

    Raises:
        TypeError: If an override names an unknown flag.
        ConfigError: If a flag value is not a bool.
    """
    return DelimiterRules(**overrides)


def create_allowed_delimiter_rules() -> DelimiterRules:
    """Create delimiter rules with all options enabled."""
    return DelimiterRules.allow_all()


@dataclass(frozen=True)
class Config:
    """Configuration for HexaURL validation.

    Attributes:
        min_length: Minimum number of characters, or None for no minimum.
        max_length: Maximum number of characters, or None to rely on the
            byte size alone.
        composition: Allowed character set.
        delimiter: Delimiter rules. None means the strict defaults apply.
    """

    min_length: int | None = DEFAULT_MIN_LENGTH
    max_length: int | None = None
    composition: Composition = Composition.ALPHANUMERIC_HYPHEN
    delimiter: DelimiterRules | None = None

    def __post_init__(self) -> None:
        for name in ("min_length", "max_length"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer or None, got {value!r}")
            if value < 0:
                raise ConfigError(f"{name} cannot be negative: {value}")

        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ConfigError("Minimum length cannot be greater than maximum length")

        # Accept the plain string value, e.g. from a settings file
        if not isinstance(self.composition, Composition):
            try:
                composition = Composition(self.composition)
            except ValueError as e:
                raise ConfigError(f"Unknown composition: {self.composition!r}") from e
            object.__setattr__(self, "composition", composition)

    @classmethod
    def create(cls, **options: Any) -> "Config":
        """Create a Config from partial options merged onto the defaults.

        Omitted options keep their defaults. An explicit None for
        ``min_length`` or ``max_length`` removes that bound. ``delimiter``
        may be a DelimiterRules or a mapping of flag overrides.

        Raises:
            ConfigError: If the resulting Config is inconsistent.
            TypeError: If an unknown option is given.
        """
        delimiter = options.get("delimiter")
        if isinstance(delimiter, Mapping):
            options["delimiter"] = create_delimiter_rules(**delimiter)
        return cls(**options)

    @classmethod
    def minimal(cls) -> "Config":
        """Create the most permissive Config.

        No length bounds besides the byte size, every delimiter character
        allowed anywhere.
        """
        return cls(
            min_length=None,
            max_length=None,
            composition=Composition.ALPHANUMERIC_HYPHEN_UNDERSCORE,
            delimiter=DelimiterRules.allow_all(),
        )

    @property
    def effective_delimiter(self) -> DelimiterRules:
        """Delimiter rules applied at validation time."""
        return self.delimiter if self.delimiter is not None else DelimiterRules.strict()

    def with_overrides(self, **changes: Any) -> "Config":
        """Return a copy with the given fields replaced.

        The copy is validated like a freshly constructed Config.
        """
        delimiter = changes.get("delimiter")
        if isinstance(delimiter, Mapping):
            changes["delimiter"] = dataclasses.replace(self.effective_delimiter, **delimiter)
        return dataclasses.replace(self, **changes)


def create_config(**options: Any) -> Config:
    """Create a new Config with the provided options.

    See ``Config.create`` for the accepted options.
    """
    return Config.create(**options)
