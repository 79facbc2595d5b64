from typing import (
    TYPE_CHECKING,
    Optional,
)

from eth_keys import (
    datatypes,
    keys,
)
from eth_keys.exceptions import (
    BadSignature,
)
from eth_typing import (
    ChecksumAddress,
)
from eth_utils import (
    ValidationError,
)

from legacy_tx._utils.numeric import (
    hex_to_int,
)
from legacy_tx.constants import (
    EIP155_CHAIN_ID_OFFSET,
    V_OFFSET,
)
from legacy_tx.exceptions import (
    MissingFieldError,
)
from legacy_tx.signature import (
    SignatureData,
)

if TYPE_CHECKING:
    from legacy_tx.transactions.legacy import LegacyTransaction  # noqa: F401


def is_eip_155_signature(v: int) -> bool:
    return v >= EIP155_CHAIN_ID_OFFSET


def extract_chain_id(v: int) -> Optional[int]:
    if not is_eip_155_signature(v):
        return None
    return (v - EIP155_CHAIN_ID_OFFSET) // 2


def extract_y_parity(v: int) -> int:
    if is_eip_155_signature(v):
        return (v - EIP155_CHAIN_ID_OFFSET) % 2
    elif v in (V_OFFSET, V_OFFSET + 1):
        return v - V_OFFSET
    else:
        raise ValidationError(f"Unsupported signature v value: {v}")


def create_transaction_signature(
    transaction: "LegacyTransaction",
    private_key: datatypes.PrivateKey,
) -> SignatureData:
    message = transaction.encode_for_signing()
    signature = private_key.sign_msg(message)

    canonical_v, r, s = signature.vrs
    chain_id = hex_to_int(transaction.chain_id)
    v = canonical_v + chain_id * 2 + EIP155_CHAIN_ID_OFFSET

    return SignatureData.from_vrs(v, r, s)


def extract_transaction_sender(transaction: "LegacyTransaction") -> ChecksumAddress:
    if transaction.signature is None:
        raise MissingFieldError(
            "signatures", "Cannot recover the sender of an unsigned transaction"
        )

    v, r, s = transaction.signature.vrs
    y_parity = extract_y_parity(v)
    message = transaction.get_message_for_signing()
    try:
        signature = keys.Signature(vrs=(y_parity, r, s))
        public_key = signature.recover_public_key_from_msg(message)
    except BadSignature as e:
        raise ValidationError(f"Bad Signature: {str(e)}")

    return public_key.to_checksum_address()
