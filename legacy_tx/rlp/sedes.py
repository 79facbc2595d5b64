from rlp.sedes import (
    Binary,
)

from legacy_tx.constants import (
    ADDRESS_SIZE,
)

address = Binary.fixed_length(ADDRESS_SIZE, allow_empty=True)
