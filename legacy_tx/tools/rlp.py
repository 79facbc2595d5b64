from eth_utils import (
    ValidationError,
    replace_exceptions,
)

from legacy_tx._utils.comparison import (
    validate_transactions_equal,
)

assert_transactions_eq = replace_exceptions(
    {
        ValidationError: AssertionError,
    }
)(validate_transactions_equal(obj_a_name="expected", obj_b_name="actual"))
