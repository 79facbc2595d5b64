from typing import (
    Any,
    Optional,
)

from eth_typing import (
    HexStr,
)
from eth_utils import (
    add_0x_prefix,
    encode_hex,
    to_hex,
)

from legacy_tx.constants import (
    EMPTY_ADDRESS,
)
from legacy_tx.validation import (
    validate_address,
    validate_canonical_address,
    validate_is_hex,
    validate_is_hex_bytes,
    validate_is_present,
    validate_uint,
)


def normalize_quantity(value: Any, title: str) -> HexStr:
    """
    Return an unsigned integer given as an int or as hex text in its
    ``0x``-prefixed hex form.
    """
    validate_is_present(value, title=title)
    if isinstance(value, str):
        validate_is_hex(value, title=title)
        return HexStr(add_0x_prefix(HexStr(value)))

    validate_uint(value, title=title)
    return HexStr(to_hex(value))


def normalize_optional_quantity(value: Any, title: str) -> Optional[HexStr]:
    if value is None:
        return None
    return normalize_quantity(value, title)


def normalize_address(value: Any, title: str = "to") -> HexStr:
    validate_is_present(value, title=title)
    if isinstance(value, bytes):
        if value == b"":
            return EMPTY_ADDRESS
        validate_canonical_address(value, title=title)
        return HexStr(encode_hex(value))

    validate_address(value, title=title)
    return HexStr(add_0x_prefix(value))


def normalize_input(value: Any, title: str = "input") -> HexStr:
    """
    Return call data as lower-cased, ``0x``-prefixed hex text.
    """
    validate_is_present(value, title=title)
    if isinstance(value, bytes):
        return HexStr(encode_hex(value))

    validate_is_hex_bytes(value, title=title)
    return HexStr(add_0x_prefix(HexStr(value.lower())))
