from eth_typing import (
    HexStr,
)

LEGACY_TRANSACTION_TYPE = "TxTypeLegacyTransaction"

#
# Field defaults
#
# An address of "0x" means the recipient has not been set yet. It is accepted
# while a transaction is being assembled, but never by a built transaction.
EMPTY_ADDRESS = HexStr("0x")
EMPTY_INPUT = HexStr("0x")
ADDRESS_SIZE = 20

#
# Signatures
#
# Add this offset to y_parity to get "v" for pre-EIP-155 signatures
V_OFFSET = 27
EIP155_CHAIN_ID_OFFSET = 35

# v=1, r=0, s=0 is the placeholder for "no real signature yet"
EMPTY_SIGNATURE_VRS = (1, 0, 0)
