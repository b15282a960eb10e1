"""
Mint dispenser handler.

Turns an action request into a partially signed claim transaction:
recipient validation, mint instructions, reference tagging, blockhash
binding and response assembly.
"""
import logging
from typing import Optional

from solana.rpc.async_api import AsyncClient

from ...config import CLAIM_MESSAGE, DispenserConfig
from ...models.action import ActionGetResponse, ActionLinks, ActionPostResponse, LinkedAction
from ..action_response import build_post_response
from ..address import parse_pubkey, validate_recipient
from ..metadata_instructions import build_create_nft_instructions
from ..metrics import track_build_time
from ..reference import inject_reference
from ..signers import EphemeralSigners, KeypairProvider
from ..solana_error import InvalidInputError, MissingFieldError
from ..token_utils import PROGRAM_ACCOUNTS
from ..transaction import assemble_transaction

logger = logging.getLogger(__name__)


class MintDispenserHandler:
    """
    Handles the mint dispenser action for one request.

    The RPC client is shared between requests and only used for reads,
    every key is generated per request.
    """

    def __init__(self, config: DispenserConfig, client: AsyncClient, keypair_provider: KeypairProvider):
        self.config = config
        self.client = client
        self.keypair_provider = keypair_provider

    def describe(self, to: Optional[str]) -> ActionGetResponse:
        """
        Build the action metadata for preview UIs.

        Raises:
            InvalidInputError: If ``to`` is present but not a public key
        """
        recipient = validate_recipient(to, self.config.default_recipient)
        presentation = self.config.presentation
        href = f"{self.config.action_url}?to={recipient}"

        return ActionGetResponse(
            title=presentation.title,
            icon=presentation.icon,
            description=presentation.description,
            links=ActionLinks(actions=[LinkedAction(label=presentation.label, href=href)]),
        )

    @track_build_time
    async def create_claim(self, to: Optional[str], account: Optional[str]) -> ActionPostResponse:
        """
        Build the claim transaction minting one NFT to ``to``.

        Args:
            to: Recipient address from the query string
            account: Wallet requesting the transaction, from the body

        Returns:
            ActionPostResponse: Transaction signed by the fee payer and mint

        Raises:
            DispenserError: Any validation, upstream or consistency failure
        """
        recipient = validate_recipient(to, self.config.default_recipient)
        if recipient in PROGRAM_ACCOUNTS:
            raise InvalidInputError("to")
        if not account:
            raise MissingFieldError("account")
        requester = parse_pubkey(account, "account")
        logger.info(f"Claim requested by {requester} for recipient {recipient}")

        signers = EphemeralSigners.generate(self.keypair_provider)
        fee_payer = signers.fee_payer.pubkey()
        mint = signers.mint.pubkey()
        logger.info(f"Generated fee payer {fee_payer}, mint {mint}, reference {signers.reference}")

        instructions = build_create_nft_instructions(mint, fee_payer, self.config.nft, recipient)
        instructions = inject_reference(instructions, recipient, signers.reference)

        unsigned = await assemble_transaction(instructions, fee_payer, self.client)

        return build_post_response(
            unsigned,
            server_signers=[signers.mint, signers.fee_payer],
            wallet_signers=[recipient],
            message=CLAIM_MESSAGE,
        )
