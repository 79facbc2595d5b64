from eth_keys import (
    keys,
)
from eth_utils import (
    setup_DEBUG2_logging,
)
import pytest

from legacy_tx import (
    LegacyTransactionBuilder,
    SignatureData,
    SignaturePolicy,
)

#
#  Setup DEBUG2 level logging.
#
setup_DEBUG2_logging()


RECIPIENT = "0x7b65b75d204abed71587c9e519a89277766ee1d0"


@pytest.fixture
def recipient():
    return RECIPIENT


@pytest.fixture
def private_key():
    return keys.PrivateKey(b"\x01" * 32)


@pytest.fixture
def other_private_key():
    return keys.PrivateKey(b"\x02" * 32)


@pytest.fixture
def signature():
    return SignatureData.from_vrs(
        0x25,
        0xB2A5A15550EC298DC7DDDDE3774429ED75F864C82CAEB5EE24399649AD731BE9,
        0x29DA1014D16F2011B3307F7BBE1035B6E699A4204FC416C763DEF6CEFD976567,
    )


@pytest.fixture
def builder(recipient):
    return (
        LegacyTransactionBuilder()
        .set_to(recipient)
        .set_value("0x0de0b6b3a7640000")
        .set_input("0x")
        .set_nonce("0x0")
        .set_gas("0x186a0")
        .set_gas_price("0x5d21dba00")
        .set_chain_id("0x1")
    )


@pytest.fixture
def transaction(builder):
    return builder.build()


@pytest.fixture(params=list(SignaturePolicy))
def signature_policy(request):
    return request.param
