from .builder import (
    LegacyTransactionBuilder,
)
from .common import (
    CommonFields,
)
from .legacy import (
    LegacyTransaction,
)
from .result import (
    TransactionResult,
)
