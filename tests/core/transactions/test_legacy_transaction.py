import pytest

from legacy_tx import (
    CommonFields,
    ErrorKind,
    InvalidFormatError,
    LegacyTransaction,
    MissingFieldError,
)

RECIPIENT = "0x7b65b75d204abed71587c9e519a89277766ee1d0"


def test_legacy_transaction_fields():
    transaction = LegacyTransaction(
        to=RECIPIENT,
        value=10,
        input="0xABCD",
        nonce="0x1",
        gas=21000,
        gas_price="3b9aca00",
        chain_id=1,
    )

    assert transaction.to == RECIPIENT
    assert transaction.value == "0xa"
    assert transaction.input == "0xabcd"
    assert transaction.data == b"\xab\xcd"
    assert transaction.nonce == "0x1"
    assert transaction.gas == "0x5208"
    assert transaction.gas_price == "0x3b9aca00"
    assert transaction.chain_id == "0x1"
    assert transaction.common_fields == CommonFields(
        nonce="0x1", gas_price="0x3b9aca00", gas="0x5208", chain_id="0x1"
    )
    assert transaction.signatures == ()
    assert transaction.signature is None


def test_legacy_transaction_defaults():
    transaction = LegacyTransaction(to=RECIPIENT, value=0)

    assert transaction.value == "0x0"
    assert transaction.input == "0x"
    assert transaction.data == b""
    assert transaction.common_fields == CommonFields()


def test_canonical_address_is_accepted():
    transaction = LegacyTransaction(to=b"\xf0" * 20, value=0)
    assert transaction.to == "0x" + "f0" * 20


@pytest.mark.parametrize(
    "kwargs, field_name",
    (
        ({"to": None, "value": 0}, "to"),
        ({"to": "0x", "value": 0}, "to"),
        ({"to": b"", "value": 0}, "to"),
        ({"to": RECIPIENT, "value": None}, "value"),
        ({"to": RECIPIENT, "value": 0, "input": None}, "input"),
    ),
)
def test_legacy_transaction_missing_fields(kwargs, field_name):
    with pytest.raises(MissingFieldError) as excinfo:
        LegacyTransaction(**kwargs)

    assert excinfo.value.field_name == field_name
    assert excinfo.value.kind is ErrorKind.MISSING_FIELD


@pytest.mark.parametrize(
    "kwargs, field_name",
    (
        ({"to": "0x" + "ab" * 19, "value": 0}, "to"),
        ({"to": "0x" + "ab" * 21, "value": 0}, "to"),
        ({"to": "0x7b65b75d204abed71587c9e519a89277766ee1d", "value": 0}, "to"),
        ({"to": "0x" + "zz" * 20, "value": 0}, "to"),
        ({"to": b"\xf0" * 19, "value": 0}, "to"),
        ({"to": RECIPIENT, "value": "0xzz"}, "value"),
        ({"to": RECIPIENT, "value": ""}, "value"),
        ({"to": RECIPIENT, "value": -1}, "value"),
        ({"to": RECIPIENT, "value": True}, "value"),
        ({"to": RECIPIENT, "value": 1.5}, "value"),
        ({"to": RECIPIENT, "value": 0, "input": "0x123"}, "input"),
        ({"to": RECIPIENT, "value": 0, "input": "0xgg"}, "input"),
        ({"to": RECIPIENT, "value": 0, "nonce": "nonce"}, "nonce"),
        ({"to": RECIPIENT, "value": 0, "gas": -21000}, "gas"),
        ({"to": RECIPIENT, "value": 0, "gas_price": "0x-1"}, "gas_price"),
        ({"to": RECIPIENT, "value": 0, "chain_id": b"\x01"}, "chain_id"),
    ),
)
def test_legacy_transaction_invalid_formats(kwargs, field_name):
    with pytest.raises(InvalidFormatError) as excinfo:
        LegacyTransaction(**kwargs)

    assert excinfo.value.field_name == field_name
    assert excinfo.value.kind is ErrorKind.INVALID_FORMAT


@pytest.mark.parametrize(
    "missing, for_signing",
    (
        ("gas", False),
        ("gas_price", False),
        ("nonce", False),
        ("chain_id", True),
    ),
)
def test_validate_optional_values_reports_missing_field(missing, for_signing):
    fields = {"nonce": 0, "gas": 21000, "gas_price": 1, "chain_id": 1}
    fields.pop(missing)
    transaction = LegacyTransaction(to=RECIPIENT, value=0, **fields)

    with pytest.raises(MissingFieldError) as excinfo:
        transaction.validate_optional_values(for_signing=for_signing)
    assert excinfo.value.field_name == missing


def test_validate_optional_values_reports_first_missing_field():
    transaction = LegacyTransaction(to=RECIPIENT, value=0)

    with pytest.raises(MissingFieldError) as excinfo:
        transaction.validate_optional_values(for_signing=True)
    assert excinfo.value.field_name == "gas"


def test_chain_id_is_only_required_for_signing():
    transaction = LegacyTransaction(
        to=RECIPIENT, value=0, nonce=0, gas=21000, gas_price=1
    )

    transaction.validate_optional_values(for_signing=False)
    with pytest.raises(MissingFieldError):
        transaction.validate_optional_values(for_signing=True)
    with pytest.raises(MissingFieldError):
        transaction.encode_for_signing()


def test_copy_overrides_fields(transaction, signature):
    transaction.append_signatures(signature)
    copied = transaction.copy(value=1, nonce=7)

    assert copied is not transaction
    assert copied.value == "0x1"
    assert copied.nonce == "0x7"
    assert copied.to == transaction.to
    assert copied.signatures == transaction.signatures
    assert transaction.value == "0x0de0b6b3a7640000"


def test_copy_can_drop_signature(transaction, signature):
    transaction.append_signatures(signature)
    copied = transaction.copy(signatures=())

    assert copied.signatures == ()
    assert transaction.signatures == (signature,)


def test_copy_rejects_unknown_fields(transaction):
    with pytest.raises(TypeError):
        transaction.copy(data=b"")
