import enum
from typing import (
    Any,
    NamedTuple,
    Optional,
    Tuple,
    Union,
)

from eth_utils import (
    big_endian_to_int,
    encode_hex,
)

from legacy_tx._utils.env import (
    env_enum,
)
from legacy_tx._utils.numeric import (
    to_minimal_bytes,
)
from legacy_tx.constants import (
    EMPTY_SIGNATURE_VRS,
)
from legacy_tx.exceptions import (
    InvalidFormatError,
    SignatureConflictError,
)
from legacy_tx.typing import (
    VRS,
)
from legacy_tx.validation import (
    validate_is_hex,
    validate_uint,
)

SIGNATURE_POLICY_ENV_VAR = "LEGACY_TX_SIGNATURE_POLICY"


def _normalize_component(value: Union[int, bytes, str], title: str) -> bytes:
    if isinstance(value, str):
        validate_is_hex(value, title=title)
    elif not isinstance(value, bytes):
        validate_uint(value, title=title)
    return to_minimal_bytes(value)


class SignatureData(NamedTuple):
    """
    An ECDSA signature attached to a transaction: the recovery id ``v`` and the
    two curve points ``r`` and ``s``, each held as minimal big-endian bytes.
    """

    v: bytes
    r: bytes
    s: bytes

    @classmethod
    def from_vrs(
        cls,
        v: Union[int, bytes, str],
        r: Union[int, bytes, str],
        s: Union[int, bytes, str],
    ) -> "SignatureData":
        return cls(
            v=_normalize_component(v, "v"),
            r=_normalize_component(r, "r"),
            s=_normalize_component(s, "s"),
        )

    @property
    def vrs(self) -> VRS:
        return VRS(
            (
                big_endian_to_int(self.v),
                big_endian_to_int(self.r),
                big_endian_to_int(self.s),
            )
        )

    def to_hex(self) -> Tuple[str, str, str]:
        return (encode_hex(self.v), encode_hex(self.r), encode_hex(self.s))


EMPTY_SIGNATURE = SignatureData.from_vrs(*EMPTY_SIGNATURE_VRS)


def is_empty_signature(signature: SignatureData) -> bool:
    return signature.vrs == EMPTY_SIGNATURE_VRS


def to_signature_data(value: Any) -> SignatureData:
    if isinstance(value, SignatureData):
        return value
    elif isinstance(value, (list, tuple)) and len(value) == 3:
        return SignatureData.from_vrs(*value)
    else:
        raise InvalidFormatError(
            "signatures",
            value,
            f"A signature must be a SignatureData or a (v, r, s) triple. Got: {value!r}",
        )


class SignaturePolicy(enum.Enum):
    """
    Decides whether a present placeholder signature blocks a later append.
    """

    # a sentinel-empty signature is a placeholder and may be replaced
    REPLACE_EMPTY = "replace-empty"
    # any present signature, sentinel or not, blocks the append
    REJECT = "reject"

    def allows_replacing(self, current: SignatureData) -> bool:
        return self is SignaturePolicy.REPLACE_EMPTY and is_empty_signature(current)


def get_default_signature_policy() -> SignaturePolicy:
    return env_enum(
        SIGNATURE_POLICY_ENV_VAR,
        SignaturePolicy,
        default=SignaturePolicy.REPLACE_EMPTY,
    )


class SignatureSlot:
    """
    Storage for the single signature a legacy transaction may carry.
    """

    def __init__(self, policy: SignaturePolicy, owner: str) -> None:
        self.policy = policy
        self._owner = owner
        self._signature: Optional[SignatureData] = None

    @property
    def signature(self) -> Optional[SignatureData]:
        return self._signature

    def as_tuple(self) -> Tuple[SignatureData, ...]:
        if self._signature is None:
            return ()
        return (self._signature,)

    def check_available(self) -> None:
        if self._signature is None:
            return
        elif self.policy.allows_replacing(self._signature):
            return
        raise SignatureConflictError(
            f"Signatures already defined. {self._owner} cannot include more "
            "than one signature."
        )

    def fill(self, signature: SignatureData) -> Optional[SignatureData]:
        """
        Store ``signature`` and return the placeholder it replaced, if any.
        """
        self.check_available()
        previous = self._signature
        self._signature = signature
        return previous
