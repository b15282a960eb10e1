"""
Metaplex Token Metadata instructions for minting a single NFT.

Builds the same pair of instructions that ``createNft`` emits: ``CreateV1``
registers the mint, metadata and master edition accounts, ``MintV1`` mints
exactly one token into the owner's associated token account. Account order
is the one the Token Metadata program expects and must be kept as is.
"""
import logging
from typing import List

from borsh_construct import Bool, CStruct, Option, String, U8, U16, U64, Vec
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..models.nft_metadata import NftMetadataDescriptor
from .token_utils import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
    TOKEN_METADATA_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    get_associated_token_address,
    get_master_edition_address,
    get_metadata_address,
)

logger = logging.getLogger(__name__)

CREATE_DISCRIMINATOR = 42
MINT_DISCRIMINATOR = 43
V1 = 0

TOKEN_STANDARD_NON_FUNGIBLE = 0
PRINT_SUPPLY_ZERO = 0

PUBKEY = U8[32]

CREATOR_LAYOUT = CStruct(
    "address" / PUBKEY,
    "verified" / Bool,
    "share" / U8,
)

COLLECTION_LAYOUT = CStruct(
    "verified" / Bool,
    "key" / PUBKEY,
)

USES_LAYOUT = CStruct(
    "use_method" / U8,
    "remaining" / U64,
    "total" / U64,
)

COLLECTION_DETAILS_LAYOUT = CStruct(
    "kind" / U8,
    "size" / U64,
)

CREATE_V1_LAYOUT = CStruct(
    "discriminator" / U8,
    "create_v1_discriminator" / U8,
    "name" / String,
    "symbol" / String,
    "uri" / String,
    "seller_fee_basis_points" / U16,
    "creators" / Option(Vec(CREATOR_LAYOUT)),
    "primary_sale_happened" / Bool,
    "is_mutable" / Bool,
    "token_standard" / U8,
    "collection" / Option(COLLECTION_LAYOUT),
    "uses" / Option(USES_LAYOUT),
    "collection_details" / Option(COLLECTION_DETAILS_LAYOUT),
    "rule_set" / Option(PUBKEY),
    "decimals" / Option(U8),
    # Zero and Unlimited carry no payload, Limited is never used here
    "print_supply" / Option(U8),
)

MINT_V1_LAYOUT = CStruct(
    "discriminator" / U8,
    "mint_v1_discriminator" / U8,
    "amount" / U64,
    # Only programmable assets carry authorization data
    "authorization_data" / Option(Vec(U8)),
)


def _meta(pubkey: Pubkey, is_signer: bool = False, is_writable: bool = False) -> AccountMeta:
    return AccountMeta(pubkey=pubkey, is_signer=is_signer, is_writable=is_writable)


def _unused() -> AccountMeta:
    # Absent optional accounts are passed as the program id itself
    return _meta(TOKEN_METADATA_PROGRAM_ID)


def create_v1_instruction(
    mint: Pubkey,
    authority: Pubkey,
    payer: Pubkey,
    metadata: NftMetadataDescriptor,
) -> Instruction:
    """
    Build the ``CreateV1`` instruction for a non-fungible asset.

    ``authority`` is used as mint authority, update authority and sole
    verified creator.
    """
    data = CREATE_V1_LAYOUT.build({
        "discriminator": CREATE_DISCRIMINATOR,
        "create_v1_discriminator": V1,
        "name": metadata.name,
        "symbol": metadata.symbol,
        "uri": metadata.uri,
        "seller_fee_basis_points": metadata.seller_fee_basis_points,
        "creators": [{
            "address": list(bytes(authority)),
            "verified": True,
            "share": 100,
        }],
        "primary_sale_happened": False,
        "is_mutable": True,
        "token_standard": TOKEN_STANDARD_NON_FUNGIBLE,
        "collection": None,
        "uses": None,
        "collection_details": None,
        "rule_set": None,
        "decimals": 0,
        "print_supply": PRINT_SUPPLY_ZERO,
    })

    accounts = [
        _meta(get_metadata_address(mint), is_writable=True),
        _meta(get_master_edition_address(mint), is_writable=True),
        _meta(mint, is_signer=True, is_writable=True),
        _meta(authority, is_signer=True),
        _meta(payer, is_signer=True, is_writable=True),
        _meta(authority, is_signer=True),  # update authority
        _meta(SYSTEM_PROGRAM_ID),
        _meta(SYSVAR_INSTRUCTIONS_ID),
        _meta(TOKEN_PROGRAM_ID),
    ]
    return Instruction(TOKEN_METADATA_PROGRAM_ID, data, accounts)


def mint_v1_instruction(
    mint: Pubkey,
    authority: Pubkey,
    payer: Pubkey,
    token_owner: Pubkey,
    amount: int = 1,
) -> Instruction:
    """Build the ``MintV1`` instruction minting ``amount`` tokens to ``token_owner``."""
    data = MINT_V1_LAYOUT.build({
        "discriminator": MINT_DISCRIMINATOR,
        "mint_v1_discriminator": V1,
        "amount": amount,
        "authorization_data": None,
    })

    accounts = [
        _meta(get_associated_token_address(token_owner, mint), is_writable=True),
        _meta(token_owner),
        _meta(get_metadata_address(mint)),
        _meta(get_master_edition_address(mint)),
        _unused(),  # token record
        _meta(mint, is_writable=True),
        _meta(authority, is_signer=True),
        _unused(),  # delegate record
        _meta(payer, is_signer=True, is_writable=True),
        _meta(SYSTEM_PROGRAM_ID),
        _meta(SYSVAR_INSTRUCTIONS_ID),
        _meta(TOKEN_PROGRAM_ID),
        _meta(ASSOCIATED_TOKEN_PROGRAM_ID),
        _unused(),  # authorization rules program
        _unused(),  # authorization rules
    ]
    return Instruction(TOKEN_METADATA_PROGRAM_ID, data, accounts)


def build_create_nft_instructions(
    mint: Pubkey,
    authority: Pubkey,
    metadata: NftMetadataDescriptor,
    token_owner: Pubkey,
) -> List[Instruction]:
    """
    Build the ordered instructions creating an NFT and minting it to an owner.

    Args:
        mint: Address of the new mint, must sign the transaction
        authority: Mint authority and payer of the account rent
        metadata: Descriptor written to the metadata account
        token_owner: Wallet receiving the single token

    Returns:
        List[Instruction]: ``[CreateV1, MintV1]``

    Raises:
        InvalidMetadataError: If the descriptor is malformed
    """
    metadata.validate()

    instructions = [
        create_v1_instruction(mint, authority, authority, metadata),
        mint_v1_instruction(mint, authority, authority, token_owner),
    ]
    logger.debug(f"Built {len(instructions)} mint instructions for mint {mint} to owner {token_owner}")
    return instructions
