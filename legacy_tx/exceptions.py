import enum
from typing import (
    Any,
    Optional,
)

from eth_utils import (
    ValidationError,
)


class ErrorKind(enum.Enum):
    MISSING_FIELD = "missing-field"
    INVALID_FORMAT = "invalid-format"
    SIGNATURE_CONFLICT = "signature-conflict"
    SIGNATURE_CARDINALITY = "signature-cardinality"
    DECODE_FAILURE = "decode-failure"


class LegacyTransactionError(ValidationError):
    """
    Base class for all errors raised while building, validating, signing or
    decoding a legacy transaction.

    Every subclass carries an :class:`ErrorKind` so callers can dispatch on
    ``error.kind`` instead of on the exception class.
    """

    kind: ErrorKind


class MissingFieldError(LegacyTransactionError):
    """
    Raised when a required field was never set.
    """

    kind = ErrorKind.MISSING_FIELD

    def __init__(self, field_name: str, message: str = None) -> None:
        if message is None:
            message = f"{field_name} is missing"
        super().__init__(message)
        self.field_name = field_name


class InvalidFormatError(LegacyTransactionError):
    """
    Raised when a field is set to something that is not well-formed hex, or to
    an address that is not exactly 20 bytes.
    """

    kind = ErrorKind.INVALID_FORMAT

    def __init__(self, field_name: str, value: Any, message: str = None) -> None:
        if message is None:
            message = f"Invalid {field_name}. Got: {value!r}"
        super().__init__(message)
        self.field_name = field_name
        self.value = value


class SignatureConflictError(LegacyTransactionError):
    """
    Raised when appending a signature to a transaction that already carries a
    real one.
    """

    kind = ErrorKind.SIGNATURE_CONFLICT


class SignatureCardinalityError(LegacyTransactionError):
    """
    Raised when appending a list of signatures whose length is not exactly one.
    """

    kind = ErrorKind.SIGNATURE_CARDINALITY


class DecodeError(LegacyTransactionError):
    """
    Raised when a byte string cannot be decoded into a legacy transaction.
    The originating error is chained as ``__cause__``.
    """

    kind = ErrorKind.DECODE_FAILURE

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__
