from typing import (
    NewType,
    Sequence,
    Tuple,
    Union,
)

from eth_typing import (
    HexStr,
)

# integers may be given as ints or as (optionally 0x-prefixed) hex text
IntOrHex = Union[int, str, HexStr]

VRS = NewType("VRS", Tuple[int, int, int])

RawSignature = Sequence[Union[int, bytes, str]]
