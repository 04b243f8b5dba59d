"""Shared type definitions for SDK models.

Large protocol integers (sqrt prices, token amounts, liquidity) travel as
decimal strings so no JSON consumer can lose precision on them.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from beluga.constants import I128_MAX, U128_MAX
from beluga.math.units import to_decimal


def _validate_integer_string(value: Any, type_name: str, maximum: int) -> str:
    """Validate a non-negative integer given as int or decimal string.

    Args:
        value: Value to validate
        type_name: Name used in error messages
        maximum: Largest allowed value

    Returns:
        The value as a decimal string

    Raises:
        ValueError: If value is not an integer in [0, maximum]
    """
    if isinstance(value, bool):
        raise ValueError(f"{type_name} must be string or int, got bool")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"{type_name} must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"{type_name} must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"{type_name} cannot be negative: {value}")
    if int_value > maximum:
        raise ValueError(f"{type_name} overflow: {value} > {maximum}")

    return str(int_value)


def validate_u128(value: Any) -> str:
    """Validate an unsigned 128-bit integer (int or decimal string)."""
    return _validate_integer_string(value, "U128", U128_MAX)


def validate_i128_amount(value: Any) -> str:
    """Validate a non-negative i128 token amount (int or decimal string)."""
    return _validate_integer_string(value, "I128", I128_MAX)


# Unsigned 128-bit integer as decimal string (sqrt prices, liquidity)
U128 = Annotated[
    str,
    BeforeValidator(validate_u128),
    Field(description="Unsigned 128-bit integer as decimal string"),
]

# Non-negative i128 token amount in stroops as decimal string
Amount = Annotated[
    str,
    BeforeValidator(validate_i128_amount),
    Field(description="Token amount in stroops as decimal string"),
]

# Stellar account (G...) or contract (C...) strkey
STELLAR_ADDRESS_PATTERN = r"^[GC][A-Z2-7]{55}$"
StellarAddress = Annotated[str, Field(pattern=STELLAR_ADDRESS_PATTERN)]

# Token identifier: contract address or asset code, opaque to the SDK
TokenId = Annotated[str, Field(min_length=1)]

# Human-entered number, normalized to Decimal (floats via their repr)
HumanNumber = Annotated[Decimal, BeforeValidator(to_decimal)]

__all__ = [
    "validate_u128",
    "validate_i128_amount",
    "STELLAR_ADDRESS_PATTERN",
    "U128",
    "Amount",
    "StellarAddress",
    "TokenId",
    "HumanNumber",
]
