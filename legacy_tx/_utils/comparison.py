from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    Optional,
    Tuple,
)

from eth_utils import (
    ValidationError,
    to_tuple,
)
from eth_utils.toolz import (
    curry,
)

from legacy_tx._utils.numeric import (
    hex_to_int,
)

if TYPE_CHECKING:
    from legacy_tx.transactions.common import CommonFields  # noqa: F401
    from legacy_tx.transactions.legacy import LegacyTransaction  # noqa: F401


def _as_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    return hex_to_int(value)


def diff_common_fields(
    left: "CommonFields", right: "CommonFields"
) -> Iterable[Tuple[str, Any, Any]]:
    """
    Yield ``(field_name, left_value, right_value)`` for every common field whose
    numeric value differs. The chain id is not compared: the signed encoding
    does not transmit it, so a decoded transaction only carries the one implied
    by its signature.
    """
    for field_name in ("nonce", "gas_price", "gas"):
        left_value = _as_int(getattr(left, field_name))
        right_value = _as_int(getattr(right, field_name))
        if left_value != right_value:
            yield (field_name, left_value, right_value)


@to_tuple
def diff_transaction_fields(
    left: "LegacyTransaction",
    right: "LegacyTransaction",
    check_signature: bool = True,
) -> Iterable[Tuple[str, Any, Any]]:
    yield from diff_common_fields(left.common_fields, right.common_fields)

    if left.to.lower() != right.to.lower():
        yield ("to", left.to, right.to)

    left_value = hex_to_int(left.value)
    right_value = hex_to_int(right.value)
    if left_value != right_value:
        yield ("value", left_value, right_value)

    if left.input != right.input:
        yield ("input", left.input, right.input)

    if check_signature and left.signatures != right.signatures:
        yield ("signatures", left.signatures, right.signatures)


def humanize_diff(
    diff: Iterable[Tuple[str, Any, Any]], obj_a_name: str, obj_b_name: str
) -> Iterable[str]:
    longest_obj_name = max(len(obj_a_name), len(obj_b_name))

    for field_name, a_val, b_val in diff:
        if isinstance(a_val, int) and isinstance(b_val, int):
            element_diff = b_val - a_val
            if element_diff > 0:
                element_diff_display = f" (+{element_diff})"
            else:
                element_diff_display = f" ({element_diff})"
        else:
            element_diff_display = ""

        yield (
            f"{field_name}:\n"
            f"    ({obj_a_name.ljust(longest_obj_name, ' ')}) : {a_val}\n"
            f"    ({obj_b_name.ljust(longest_obj_name, ' ')}) : {b_val}{element_diff_display}"  # noqa: E501
        )


def format_diff(
    diff: Tuple[Tuple[str, Any, Any], ...], obj_a_name: str, obj_b_name: str
) -> str:
    err_fields = "\n - ".join(humanize_diff(diff, obj_a_name, obj_b_name))
    return (
        f"Mismatch between {obj_a_name} and {obj_b_name} "
        f"on {len(diff)} fields:\n - {err_fields}"
    )


@curry
def validate_transactions_equal(
    obj_a: "LegacyTransaction",
    obj_b: "LegacyTransaction",
    obj_a_name: str = None,
    obj_b_name: str = None,
) -> None:
    if obj_a_name is None:
        obj_a_name = obj_a.__class__.__name__ + "_a"
    if obj_b_name is None:
        obj_b_name = obj_b.__class__.__name__ + "_b"

    if type(obj_a) is not type(obj_b):
        raise ValidationError(
            f"{obj_a_name} ({type(obj_a).__name__}) and "
            f"{obj_b_name} ({type(obj_b).__name__}) are different transaction kinds"
        )

    diff = diff_transaction_fields(obj_a, obj_b)
    if len(diff) == 0:
        return

    raise ValidationError(format_diff(diff, obj_a_name, obj_b_name))
