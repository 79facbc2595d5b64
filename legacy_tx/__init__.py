from importlib.metadata import (
    version as __version,
)

from legacy_tx.exceptions import (
    DecodeError,
    ErrorKind,
    InvalidFormatError,
    LegacyTransactionError,
    MissingFieldError,
    SignatureCardinalityError,
    SignatureConflictError,
)
from legacy_tx.signature import (
    EMPTY_SIGNATURE,
    SignatureData,
    SignaturePolicy,
)
from legacy_tx.transactions import (
    CommonFields,
    LegacyTransaction,
    LegacyTransactionBuilder,
    TransactionResult,
)

__version__ = __version("py-legacy-tx")
