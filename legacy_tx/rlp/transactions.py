import rlp
from rlp.sedes import (
    big_endian_int,
    binary,
)

from .sedes import (
    address,
)

LEGACY_PAYLOAD_FIELDS = [
    ("nonce", big_endian_int),
    ("gas_price", big_endian_int),
    ("gas", big_endian_int),
    ("to", address),
    ("value", big_endian_int),
    ("data", binary),
]


class LegacyUnsignedPayload(rlp.Serializable):
    """
    The pre-EIP-155 message for signing: the six transaction fields and
    nothing else.
    """

    fields = LEGACY_PAYLOAD_FIELDS


class LegacySigningPayload(rlp.Serializable):
    """
    The EIP-155 message for signing. The chain id is committed here, followed
    by two zero placeholders standing in for ``r`` and ``s``.
    """

    fields = LEGACY_PAYLOAD_FIELDS + [
        ("chain_id", big_endian_int),
        ("r_placeholder", big_endian_int),
        ("s_placeholder", big_endian_int),
    ]


class LegacySignedPayload(rlp.Serializable):
    """
    The final signed form: ``[nonce, gas_price, gas, to, value, data, v, r, s]``.
    """

    fields = LEGACY_PAYLOAD_FIELDS + [
        ("v", big_endian_int),
        ("r", big_endian_int),
        ("s", big_endian_int),
    ]
