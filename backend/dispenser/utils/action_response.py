"""
Assembly of the Solana Action POST response.
"""
import base64
import logging
from typing import Sequence

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from ..models.action import ActionPostResponse
from .solana_error import SignerMismatchError
from .transaction import UnsignedTransaction

logger = logging.getLogger(__name__)


def _join_keys(keys) -> str:
    return ", ".join(str(k) for k in keys)


def build_post_response(
    transaction: UnsignedTransaction,
    server_signers: Sequence[Keypair],
    wallet_signers: Sequence[Pubkey],
    message: str,
) -> ActionPostResponse:
    """
    Sign what the server holds and serialize the rest for the wallet.

    The declared signers (keys the server signs with plus keys the wallet is
    expected to sign with) must be exactly the transaction's required signers,
    and the fee payer must be one the server signs for. Signature slots of
    wallet signers are left empty.

    Args:
        transaction: Assembled message and blockhash
        server_signers: Keypairs held for this request only
        wallet_signers: Keys the client wallet still has to sign for
        message: Human readable message shown by the wallet

    Returns:
        ActionPostResponse: Base64 wire transaction and message

    Raises:
        SignerMismatchError: If declared and required signers differ
    """
    server_keys = [kp.pubkey() for kp in server_signers]
    declared = server_keys + list(wallet_signers)
    required = transaction.required_signers

    if len(set(declared)) != len(declared):
        raise SignerMismatchError(f"Signer declared more than once: {_join_keys(declared)}")
    if set(declared) != set(required):
        raise SignerMismatchError(
            f"Declared signers [{_join_keys(declared)}] do not match required signers [{_join_keys(required)}]"
        )
    if transaction.fee_payer not in server_keys:
        raise SignerMismatchError(f"Fee payer {transaction.fee_payer} is not signed by the server")

    tx = Transaction.new_unsigned(transaction.message)
    tx.partial_sign(list(server_signers), transaction.recent_blockhash)
    encoded = base64.b64encode(bytes(tx)).decode("utf-8")

    logger.debug(f"Serialized transaction ({len(encoded)} chars), awaiting wallet signers: {_join_keys(wallet_signers)}")
    return ActionPostResponse(transaction=encoded, message=message)
