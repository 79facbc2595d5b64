from typing import (
    Any,
    Dict,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from cached_property import (
    cached_property,
)
from eth_keys.datatypes import (
    PrivateKey,
)
from eth_typing import (
    ChecksumAddress,
    Hash32,
    HexStr,
)
from eth_utils import (
    ValidationError,
    decode_hex,
    encode_hex,
    get_extended_debug_logger,
    keccak,
)
from eth_utils.toolz import (
    merge,
)
import rlp

from legacy_tx._utils.comparison import (
    diff_transaction_fields,
    format_diff,
)
from legacy_tx._utils.normalization import (
    normalize_address,
    normalize_input,
    normalize_quantity,
)
from legacy_tx._utils.numeric import (
    hex_to_int,
)
from legacy_tx._utils.transactions import (
    create_transaction_signature,
    extract_chain_id,
    extract_transaction_sender,
    is_eip_155_signature,
)
from legacy_tx.abc import (
    EncodableAPI,
    SignableAPI,
)
from legacy_tx.constants import (
    EMPTY_INPUT,
    LEGACY_TRANSACTION_TYPE,
)
from legacy_tx.exceptions import (
    DecodeError,
    LegacyTransactionError,
    MissingFieldError,
    SignatureCardinalityError,
)
from legacy_tx.rlp.transactions import (
    LegacySignedPayload,
    LegacySigningPayload,
    LegacyUnsignedPayload,
)
from legacy_tx.signature import (
    SignatureData,
    SignaturePolicy,
    SignatureSlot,
    get_default_signature_policy,
    is_empty_signature,
    to_signature_data,
)
from legacy_tx.transactions.common import (
    CommonFields,
    validate_common_fields,
)
from legacy_tx.transactions.result import (
    TransactionResult,
)
from legacy_tx.typing import (
    IntOrHex,
    RawSignature,
)
from legacy_tx.validation import (
    validate_quantity,
    validate_recipient,
)

SignatureInput = Union[SignatureData, Sequence[Union[SignatureData, RawSignature]]]


class LegacyTransaction(SignableAPI, EncodableAPI):
    """
    A legacy transaction: a value transfer or contract call identified by
    field order alone, carrying at most one signature.

    The recipient ``to`` and the ``value`` are required. The common fields
    (nonce, gas price, gas and chain id) may be left unset at construction;
    they are checked by :meth:`validate_optional_values` before encoding.
    """

    logger = get_extended_debug_logger("legacy_tx.transactions.LegacyTransaction")

    transaction_type = LEGACY_TRANSACTION_TYPE

    def __init__(
        self,
        *,
        to: Any,
        value: Any,
        input: Any = EMPTY_INPUT,
        nonce: Optional[IntOrHex] = None,
        gas: Optional[IntOrHex] = None,
        gas_price: Optional[IntOrHex] = None,
        chain_id: Optional[IntOrHex] = None,
        signatures: SignatureInput = (),
        signature_policy: SignaturePolicy = None,
    ) -> None:
        self._to = normalize_address(to)
        validate_recipient(self._to)
        self._value = normalize_quantity(value, "value")
        self._input = normalize_input(input)
        self._common = CommonFields.create(
            nonce=nonce,
            gas_price=gas_price,
            gas=gas,
            chain_id=chain_id,
        )

        if signature_policy is None:
            signature_policy = get_default_signature_policy()
        self._signature_slot = SignatureSlot(signature_policy, self.transaction_type)

        if len(signatures):
            self.append_signatures(signatures)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} to={self._to} value={self._value} "
            f"nonce={self.nonce} signed={self.signature is not None}>"
        )

    #
    # Fields
    #
    @property
    def to(self) -> HexStr:
        return self._to

    @property
    def value(self) -> HexStr:
        return self._value

    @property
    def input(self) -> HexStr:
        return self._input

    @cached_property
    def data(self) -> bytes:
        return decode_hex(self._input)

    @property
    def common_fields(self) -> CommonFields:
        return self._common

    @property
    def nonce(self) -> Optional[HexStr]:
        return self._common.nonce

    @property
    def gas_price(self) -> Optional[HexStr]:
        return self._common.gas_price

    @property
    def gas(self) -> Optional[HexStr]:
        return self._common.gas

    @property
    def chain_id(self) -> Optional[HexStr]:
        return self._common.chain_id

    @property
    def signature_policy(self) -> SignaturePolicy:
        return self._signature_slot.policy

    @property
    def signatures(self) -> Tuple[SignatureData, ...]:
        return self._signature_slot.as_tuple()

    @property
    def signature(self) -> Optional[SignatureData]:
        return self._signature_slot.signature

    def copy(self, **overrides: Any) -> "LegacyTransaction":
        """
        Return a new transaction with the given fields replaced.
        """
        current = {
            "to": self._to,
            "value": self._value,
            "input": self._input,
            "nonce": self.nonce,
            "gas": self.gas,
            "gas_price": self.gas_price,
            "chain_id": self.chain_id,
            "signatures": self.signatures,
            "signature_policy": self.signature_policy,
        }
        unknown_fields = set(overrides).difference(current)
        if unknown_fields:
            raise TypeError(
                f"Unknown {self.__class__.__name__} fields: "
                f"{', '.join(sorted(unknown_fields))}"
            )
        return type(self)(**merge(current, overrides))

    #
    # Signatures
    #
    def append_signatures(self, signatures: SignatureInput) -> None:
        if isinstance(signatures, SignatureData):
            candidates: Tuple[SignatureData, ...] = (signatures,)
        else:
            candidates = tuple(to_signature_data(item) for item in signatures)

        self._signature_slot.check_available()
        if len(candidates) != 1:
            raise SignatureCardinalityError(
                f"Signatures are too long. {self.transaction_type} must include "
                f"exactly one signature, got {len(candidates)}."
            )

        replaced = self._signature_slot.fill(candidates[0])
        if replaced is None:
            self.logger.debug("Appended signature to %s", self)
        else:
            self.logger.debug("Replaced empty signature of %s", self)

    def get_message_for_signing(self) -> bytes:
        signature = self.signature
        if signature is None or is_empty_signature(signature):
            return self.encode_for_signing()

        v = signature.vrs[0]
        if not is_eip_155_signature(v):
            self.validate_optional_values(for_signing=False)
            return rlp.encode(LegacyUnsignedPayload(**self._payload_fields()))

        signed_chain_id = extract_chain_id(v)
        if self.chain_id is not None and hex_to_int(self.chain_id) != signed_chain_id:
            raise ValidationError(
                f"Signature was made for chain {signed_chain_id}, but the "
                f"transaction is for chain {hex_to_int(self.chain_id)}"
            )
        self.validate_optional_values(for_signing=False)
        return self._encode_signing_payload(signed_chain_id)

    def sign(self, private_key: PrivateKey) -> SignatureData:
        self._signature_slot.check_available()
        signature = create_transaction_signature(self, private_key)
        self.append_signatures(signature)
        return signature

    def get_sender(self) -> ChecksumAddress:
        return extract_transaction_sender(self)

    def combine_signed_raw_transactions(
        self, raw_transactions: Sequence[Union[bytes, str]]
    ) -> HexStr:
        """
        Fill the signature slot from signed copies of this transaction and
        return the resulting raw transaction.

        Every raw transaction must match this one on all fields but the
        signature.
        """
        collected: List[SignatureData] = []
        for raw_transaction in raw_transactions:
            decoded = self.decode(raw_transaction, signature_policy=self.signature_policy)
            if not self.compare_fields(decoded, check_signature=False):
                raise ValidationError(
                    "Transactions containing different information cannot be combined."
                )
            signature = decoded.signature
            if is_empty_signature(signature):
                continue
            elif signature in self.signatures or signature in collected:
                continue
            collected.append(signature)

        if collected:
            self.append_signatures(collected)
        return self.raw_transaction

    #
    # Validation
    #
    def validate_optional_values(self, for_signing: bool = False) -> None:
        validate_recipient(self._to)
        validate_quantity(self._value, title="value")
        validate_common_fields(self._common, for_signing)

    #
    # Encoding
    #
    def _payload_fields(self) -> Dict[str, Any]:
        return {
            "nonce": hex_to_int(self.nonce),
            "gas_price": hex_to_int(self.gas_price),
            "gas": hex_to_int(self.gas),
            "to": decode_hex(self._to),
            "value": hex_to_int(self._value),
            "data": self.data,
        }

    def _encode_signing_payload(self, chain_id: int) -> bytes:
        payload = LegacySigningPayload(
            chain_id=chain_id,
            r_placeholder=0,
            s_placeholder=0,
            **self._payload_fields(),
        )
        return rlp.encode(payload)

    def encode_for_signing(self) -> bytes:
        self.validate_optional_values(for_signing=True)
        encoded = self._encode_signing_payload(hex_to_int(self.chain_id))
        self.logger.debug2("Signing payload of %s: %s", self, encode_hex(encoded))
        return encoded

    def encode(self) -> bytes:
        self.validate_optional_values(for_signing=False)
        if self.signature is None:
            raise MissingFieldError(
                "signatures",
                f"{self.transaction_type} must be signed before it is RLP-encoded",
            )

        v, r, s = self.signature.vrs
        payload = LegacySignedPayload(v=v, r=r, s=s, **self._payload_fields())
        encoded = rlp.encode(payload)
        self.logger.debug2("Signed encoding of %s: %s", self, encode_hex(encoded))
        return encoded

    @property
    def rlp_encoding_for_signature(self) -> HexStr:
        return HexStr(encode_hex(self.encode_for_signing()))

    @property
    def raw_transaction(self) -> HexStr:
        return HexStr(encode_hex(self.encode()))

    @property
    def signing_hash(self) -> Hash32:
        return Hash32(keccak(self.encode_for_signing()))

    @property
    def transaction_hash(self) -> HexStr:
        return HexStr(encode_hex(keccak(self.encode())))

    #
    # Decoding
    #
    @classmethod
    def decode(
        cls,
        encoded: Union[bytes, str],
        signature_policy: SignaturePolicy = None,
    ) -> "LegacyTransaction":
        # TxHashRLP = encode([nonce, gas_price, gas, to, value, input, v, r, s])
        if signature_policy is None:
            signature_policy = get_default_signature_policy()

        try:
            if isinstance(encoded, str):
                encoded = decode_hex(encoded)
            payload = rlp.decode(encoded, sedes=LegacySignedPayload)
            transaction = cls(
                to=encode_hex(payload.to),
                value=payload.value,
                input=encode_hex(payload.data),
                nonce=payload.nonce,
                gas=payload.gas,
                gas_price=payload.gas_price,
                chain_id=extract_chain_id(payload.v),
                signature_policy=signature_policy,
            )
            transaction.append_signatures(
                SignatureData.from_vrs(payload.v, payload.r, payload.s)
            )
        except (
            rlp.exceptions.RLPException,
            TypeError,
            ValueError,
            LegacyTransactionError,
        ) as err:
            raise DecodeError(
                f"There is an error while decoding {cls.transaction_type}: {err}"
            ) from err

        cls.logger.debug2("Decoded %s", transaction)
        return transaction

    @classmethod
    def try_decode(
        cls,
        encoded: Union[bytes, str],
        signature_policy: SignaturePolicy = None,
    ) -> TransactionResult:
        return TransactionResult.capture(
            cls.decode, encoded, signature_policy=signature_policy
        )

    #
    # Comparison
    #
    def compare_fields(self, other: Any, check_signature: bool = True) -> bool:
        if not isinstance(other, LegacyTransaction):
            return False

        diff = diff_transaction_fields(self, other, check_signature=check_signature)
        if diff:
            if self.logger.show_debug2:
                self.logger.debug2(format_diff(diff, repr(self), repr(other)))
            return False
        return True
