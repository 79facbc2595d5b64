from typing import (
    Any,
    Optional,
)

from eth_typing import (
    HexStr,
)

from legacy_tx._utils.normalization import (
    normalize_address,
    normalize_input,
    normalize_quantity,
)
from legacy_tx.constants import (
    EMPTY_INPUT,
)
from legacy_tx.exceptions import (
    MissingFieldError,
)
from legacy_tx.signature import (
    SignaturePolicy,
)
from legacy_tx.transactions.legacy import (
    LegacyTransaction,
    SignatureInput,
)
from legacy_tx.transactions.result import (
    TransactionResult,
)
from legacy_tx.typing import (
    IntOrHex,
)


class unset:
    """
    Sentinel for a field that was never set, as opposed to one explicitly set
    to zero or to the empty value.
    """


class LegacyTransactionBuilder:
    """
    Collects the fields of a :class:`LegacyTransaction` one at a time.

    Each setter validates the format of its own field immediately. Whether the
    required fields were set at all is only checked by :meth:`build` (which
    raises) and :meth:`finalize` (which returns a :class:`TransactionResult`).
    """

    def __init__(self) -> None:
        self._to: Any = unset
        self._value: Any = unset
        self._input: HexStr = EMPTY_INPUT
        self._nonce: Optional[HexStr] = None
        self._gas: Optional[HexStr] = None
        self._gas_price: Optional[HexStr] = None
        self._chain_id: Optional[HexStr] = None
        self._signatures: SignatureInput = ()
        self._signature_policy: Optional[SignaturePolicy] = None

    def set_to(self, to: Any) -> "LegacyTransactionBuilder":
        self._to = normalize_address(to)
        return self

    def set_value(self, value: IntOrHex) -> "LegacyTransactionBuilder":
        self._value = normalize_quantity(value, "value")
        return self

    def set_input(self, input: Any) -> "LegacyTransactionBuilder":
        self._input = normalize_input(input)
        return self

    def set_nonce(self, nonce: IntOrHex) -> "LegacyTransactionBuilder":
        self._nonce = normalize_quantity(nonce, "nonce")
        return self

    def set_gas(self, gas: IntOrHex) -> "LegacyTransactionBuilder":
        self._gas = normalize_quantity(gas, "gas")
        return self

    def set_gas_price(self, gas_price: IntOrHex) -> "LegacyTransactionBuilder":
        self._gas_price = normalize_quantity(gas_price, "gas_price")
        return self

    def set_chain_id(self, chain_id: IntOrHex) -> "LegacyTransactionBuilder":
        self._chain_id = normalize_quantity(chain_id, "chain_id")
        return self

    def set_signatures(self, signatures: SignatureInput) -> "LegacyTransactionBuilder":
        self._signatures = signatures
        return self

    def set_signature_policy(
        self, signature_policy: SignaturePolicy
    ) -> "LegacyTransactionBuilder":
        self._signature_policy = signature_policy
        return self

    def build(self) -> LegacyTransaction:
        if self._to is unset:
            raise MissingFieldError("to")
        if self._value is unset:
            raise MissingFieldError("value")

        return LegacyTransaction(
            to=self._to,
            value=self._value,
            input=self._input,
            nonce=self._nonce,
            gas=self._gas,
            gas_price=self._gas_price,
            chain_id=self._chain_id,
            signatures=self._signatures,
            signature_policy=self._signature_policy,
        )

    def finalize(self) -> TransactionResult:
        return TransactionResult.capture(self.build)
