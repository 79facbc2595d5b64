from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    Any,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from eth_keys.datatypes import (
    PrivateKey,
)
from eth_typing import (
    ChecksumAddress,
)

from legacy_tx.signature import (
    SignatureData,
)
from legacy_tx.typing import (
    RawSignature,
)

TEncodable = TypeVar("TEncodable", bound="EncodableAPI")


class SignableAPI(ABC):
    """
    A class to define how signatures are attached to a transaction and how
    the signer is recovered from them.
    """

    @property
    @abstractmethod
    def signatures(self) -> Tuple[SignatureData, ...]:
        """
        Return the signatures attached so far.
        """
        ...

    @abstractmethod
    def append_signatures(
        self,
        signatures: Union[SignatureData, Sequence[Union[SignatureData, RawSignature]]],
    ) -> None:
        """
        Attach a single signature, or a list holding exactly one signature.

        Raise :class:`~legacy_tx.exceptions.SignatureConflictError` if a
        signature that may not be replaced is already present, and
        :class:`~legacy_tx.exceptions.SignatureCardinalityError` if a list of
        any length other than one is given.
        """
        ...

    @abstractmethod
    def get_message_for_signing(self) -> bytes:
        """
        Return the bytes that are hashed and signed to produce a signature.
        """
        ...

    @abstractmethod
    def sign(self, private_key: PrivateKey) -> SignatureData:
        """
        Sign the transaction with ``private_key`` and attach the signature.
        """
        ...

    @abstractmethod
    def get_sender(self) -> ChecksumAddress:
        """
        Recover the address that produced the attached signature.
        """
        ...


class EncodableAPI(ABC):
    """
    A class to define the canonical byte encodings of a transaction.
    """

    @abstractmethod
    def validate_optional_values(self, for_signing: bool = False) -> None:
        """
        Check that every field required for encoding is present and
        well-formed. The chain id is only required when ``for_signing`` is set.
        """
        ...

    @abstractmethod
    def encode_for_signing(self) -> bytes:
        """
        Return the RLP-encoded payload that is signed.
        """
        ...

    @abstractmethod
    def encode(self) -> bytes:
        """
        Return the RLP-encoded signed transaction.
        """
        ...

    @classmethod
    @abstractmethod
    def decode(
        cls: Type[TEncodable], encoded: Union[bytes, str], **kwargs: Any
    ) -> TEncodable:
        """
        Decode the signed form produced by :meth:`encode`.
        """
        ...

    @abstractmethod
    def compare_fields(self, other: Any, check_signature: bool = True) -> bool:
        """
        Return whether ``other`` holds the same field values. Never raises.
        """
        ...
