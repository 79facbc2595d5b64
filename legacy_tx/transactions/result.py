from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    NamedTuple,
    Optional,
)

from legacy_tx.exceptions import (
    ErrorKind,
    LegacyTransactionError,
)

if TYPE_CHECKING:
    from legacy_tx.transactions.legacy import LegacyTransaction  # noqa: F401


class TransactionResult(NamedTuple):
    """
    Either a transaction or the error that prevented producing one.
    """

    transaction: Optional["LegacyTransaction"]
    error: Optional[LegacyTransactionError]

    @classmethod
    def capture(
        cls, producer: Callable[..., "LegacyTransaction"], *args: Any, **kwargs: Any
    ) -> "TransactionResult":
        try:
            transaction = producer(*args, **kwargs)
        except LegacyTransactionError as err:
            return cls(transaction=None, error=err)
        else:
            return cls(transaction=transaction, error=None)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        if self.error is None:
            return None
        return self.error.kind

    def unwrap(self) -> "LegacyTransaction":
        if self.error is not None:
            raise self.error
        return self.transaction
