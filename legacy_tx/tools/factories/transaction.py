from eth_utils.toolz import curry

from legacy_tx.transactions import (
    LegacyTransaction,
)


@curry
def new_legacy_transaction(
        to,
        value=0,
        data=b'',
        nonce=0,
        gas=21000,
        gas_price=10,
        chain_id=1,
        private_key=None,
        signature_policy=None):
    """
    Create and return a legacy transaction sending value to <to>.

    If a private key is given the transaction is signed with it.
    """
    tx = LegacyTransaction(
        to=to,
        value=value,
        input=data,
        nonce=nonce,
        gas=gas,
        gas_price=gas_price,
        chain_id=chain_id,
        signature_policy=signature_policy,
    )
    if private_key is not None:
        tx.sign(private_key)
    return tx
