from typing import (
    Any,
)

from eth_utils import (
    is_hex,
    is_hex_address,
    remove_0x_prefix,
)

from legacy_tx.constants import (
    ADDRESS_SIZE,
    EMPTY_ADDRESS,
)
from legacy_tx.exceptions import (
    InvalidFormatError,
    MissingFieldError,
)


def validate_is_present(value: Any, title: str = "Value") -> None:
    if value is None:
        raise MissingFieldError(title)


def validate_is_hex(value: Any, title: str = "Value") -> None:
    if not isinstance(value, str) or not value or not is_hex(value):
        raise InvalidFormatError(
            title, value, f"{title} must be a hex string. Got: {value!r}"
        )


def validate_is_hex_bytes(value: Any, title: str = "Value") -> None:
    validate_is_hex(value, title=title)
    if len(remove_0x_prefix(value)) % 2:
        raise InvalidFormatError(
            title,
            value,
            f"{title} must have an even number of hex digits. Got: {value!r}",
        )


def validate_uint(value: Any, title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidFormatError(
            title, value, f"{title} must be an integer. Got: {type(value)}"
        )
    if value < 0:
        raise InvalidFormatError(
            title, value, f"{title} cannot be negative. Got: {value}"
        )


def validate_quantity(value: Any, title: str = "Value") -> None:
    validate_is_present(value, title=title)
    validate_is_hex(value, title=title)


def validate_canonical_address(value: Any, title: str = "Value") -> None:
    if not isinstance(value, bytes) or not len(value) == ADDRESS_SIZE:
        raise InvalidFormatError(
            title, value, f"{title} {value!r} is not a valid canonical address"
        )


def validate_address(value: Any, title: str = "to") -> None:
    """
    Accept a 20-byte hex address or the empty address ``"0x"``.
    """
    if value == EMPTY_ADDRESS:
        return
    if not is_hex_address(value):
        raise InvalidFormatError(
            title, value, f"Invalid address. {title} must be 20 bytes. Got: {value!r}"
        )


def validate_recipient(value: Any, title: str = "to") -> None:
    validate_is_present(value, title=title)
    validate_address(value, title=title)
    if value == EMPTY_ADDRESS:
        raise MissingFieldError(title)
