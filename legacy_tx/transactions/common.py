from typing import (
    Any,
    NamedTuple,
    Optional,
)

from eth_typing import (
    HexStr,
)

from legacy_tx._utils.normalization import (
    normalize_optional_quantity,
)
from legacy_tx.validation import (
    validate_quantity,
)


class CommonFields(NamedTuple):
    """
    The fields every transaction kind shares. Each is ``0x``-prefixed hex text,
    or ``None`` while unset.
    """

    nonce: Optional[HexStr] = None
    gas_price: Optional[HexStr] = None
    gas: Optional[HexStr] = None
    chain_id: Optional[HexStr] = None

    @classmethod
    def create(
        cls,
        *,
        nonce: Any = None,
        gas_price: Any = None,
        gas: Any = None,
        chain_id: Any = None,
    ) -> "CommonFields":
        return cls(
            nonce=normalize_optional_quantity(nonce, "nonce"),
            gas_price=normalize_optional_quantity(gas_price, "gas_price"),
            gas=normalize_optional_quantity(gas, "gas"),
            chain_id=normalize_optional_quantity(chain_id, "chain_id"),
        )


def validate_common_fields(fields: CommonFields, for_signing: bool) -> None:
    validate_quantity(fields.gas, title="gas")
    validate_quantity(fields.gas_price, title="gas_price")
    validate_quantity(fields.nonce, title="nonce")
    if for_signing:
        validate_quantity(fields.chain_id, title="chain_id")
