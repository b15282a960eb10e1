"""
Transaction assembly for mint claims.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.hash import Hash
from solders.instruction import Instruction
from solders.message import Message
from solders.pubkey import Pubkey

from .solana_error import UpstreamUnavailableError

logger = logging.getLogger(__name__)

BLOCKHASH_ERRORS = (
    SolanaRpcException,
    RPCException,
    httpx.HTTPError,
    asyncio.TimeoutError,
    OSError,
)


@dataclass(frozen=True)
class UnsignedTransaction:
    """
    Compiled legacy message bound to a recent blockhash.

    The blockhash expires after ``last_valid_block_height``, so the
    transaction is only good for one claim.
    """
    instructions: List[Instruction]
    fee_payer: Pubkey
    recent_blockhash: Hash
    last_valid_block_height: int
    message: Message

    @property
    def required_signers(self) -> List[Pubkey]:
        """Accounts that must sign, fee payer first."""
        count = self.message.header.num_required_signatures
        return list(self.message.account_keys[:count])


async def fetch_latest_blockhash(client: AsyncClient) -> Tuple[Hash, int]:
    """
    Fetch the latest blockhash and its last valid block height.

    Raises:
        UpstreamUnavailableError: If the RPC node can't be reached or errors
    """
    try:
        resp = await client.get_latest_blockhash()
    except BLOCKHASH_ERRORS as e:
        logger.error(f"Failed to fetch latest blockhash: {str(e)}")
        raise UpstreamUnavailableError(f"Unable to fetch latest blockhash: {str(e)}") from e
    return resp.value.blockhash, resp.value.last_valid_block_height


async def assemble_transaction(
    instructions: Sequence[Instruction],
    fee_payer: Pubkey,
    client: AsyncClient,
) -> UnsignedTransaction:
    """
    Put the instructions into a message paid for by ``fee_payer``.

    Instructions keep their order. The blockhash is fetched last, after every
    instruction has been built, and is never reused between requests.

    Args:
        instructions: Instructions in execution order
        fee_payer: Account charged for the transaction
        client: Shared RPC client

    Returns:
        UnsignedTransaction: Message ready for signing

    Raises:
        UpstreamUnavailableError: If the blockhash fetch fails
    """
    instructions = list(instructions)
    blockhash, last_valid_block_height = await fetch_latest_blockhash(client)
    message = Message.new_with_blockhash(instructions, fee_payer, blockhash)
    logger.info(f"Bound transaction to blockhash {blockhash} (valid until block {last_valid_block_height})")

    return UnsignedTransaction(
        instructions=instructions,
        fee_payer=fee_payer,
        recent_blockhash=blockhash,
        last_valid_block_height=last_valid_block_height,
        message=message,
    )
