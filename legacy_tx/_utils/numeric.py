from typing import (
    Union,
)

from eth_typing import (
    HexStr,
)
from eth_utils import (
    decode_hex,
    int_to_big_endian,
    remove_0x_prefix,
)


def hex_to_int(value: str) -> int:
    """
    Convert hex text to an integer. ``"0x"`` and ``"0x00"`` are both zero.
    """
    unprefixed = remove_0x_prefix(HexStr(value))
    if not unprefixed:
        return 0
    return int(unprefixed, 16)


def int_to_minimal_bytes(value: int) -> bytes:
    # zero is the empty byte string, as rlp's big_endian_int serializes it
    if value == 0:
        return b""
    return int_to_big_endian(value)


def to_minimal_bytes(value: Union[int, bytes, str]) -> bytes:
    """
    Convert an int, a byte string or hex text into its minimal big-endian byte
    representation, with leading zero bytes stripped.
    """
    if isinstance(value, bytes):
        return value.lstrip(b"\x00")
    elif isinstance(value, str):
        unprefixed = remove_0x_prefix(HexStr(value))
        if len(unprefixed) % 2:
            unprefixed = "0" + unprefixed
        return decode_hex(unprefixed).lstrip(b"\x00")
    else:
        return int_to_minimal_bytes(value)
