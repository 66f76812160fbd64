"""HexaURL validation for Pydantic models.

Attach ``hexaurl()`` to a ``str`` field with ``Annotated``. Valid strings
pass through unchanged, so other validators and transformations can be
chained before or after it.

Example:
    from typing import Annotated

    from pydantic import AfterValidator, BaseModel, StringConstraints

    from hexaurl_validate import create_config
    from hexaurl_validate.schema import HexaUrlStr, hexaurl

    class Link(BaseModel):
        slug: HexaUrlStr

    class ShortLink(BaseModel):
        # Must end with a digit, then fit in 8 bytes (up to 10 characters)
        slug: Annotated[
            str,
            StringConstraints(pattern=r"[0-9]$"),
            hexaurl(create_config(min_length=5), byte_size=8),
            AfterValidator(lambda s: f"https://example.com/{s}"),
        ]
"""

from typing import Annotated

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

from hexaurl_validate.core.errors import HexaUrlError
from hexaurl_validate.core.logging import get_logger
from hexaurl_validate.core.rules import Config
from hexaurl_validate.core.validation import DEFAULT_BYTE_SIZE, validate

logger = get_logger(__name__)

HEXAURL_ERROR_TYPE = "hexaurl"
HEXAURL_UNKNOWN_ERROR_TYPE = "hexaurl_unknown"


def validate_hexaurl(
    value: str,
    config: Config | None = None,
    byte_size: int = DEFAULT_BYTE_SIZE,
) -> str:
    """Validate a value and return it unchanged, for use as a Pydantic validator.

    Raises:
        PydanticCustomError: ``hexaurl`` for rule violations, with ``code``
            and ``message`` in the error context; ``hexaurl_unknown`` for
            any unexpected failure.
    """
    try:
        validate(value, config, byte_size)
    except HexaUrlError as e:
        raise PydanticCustomError(
            HEXAURL_ERROR_TYPE,
            "{message} (code: {code})",
            {"message": e.message, "code": e.code.value},
        ) from e
    except Exception as e:
        logger.exception("Unexpected error during HexaURL validation")
        raise PydanticCustomError(
            HEXAURL_UNKNOWN_ERROR_TYPE,
            "Unknown error during HexaURL validation",
        ) from e
    return value


def hexaurl(
    config: Config | None = None,
    byte_size: int = DEFAULT_BYTE_SIZE,
) -> AfterValidator:
    """Create a Pydantic validator enforcing HexaURL rules.

    Args:
        config: Validation rules. Defaults to ``Config()``.
        byte_size: Target encoded size in bytes (default 16, up to 21 characters).

    Returns:
        An AfterValidator to place in ``Annotated[str, ...]``.
    """
    if config is None:
        config = Config()
    return AfterValidator(lambda value: validate_hexaurl(value, config, byte_size))


HexaUrlStr = Annotated[str, hexaurl()]
