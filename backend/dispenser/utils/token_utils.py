from solders.pubkey import Pubkey

from ..config import Constants

TOKEN_PROGRAM_ID = Pubkey.from_string(Constants.TOKEN_PROGRAM_ID)
ASSOCIATED_TOKEN_PROGRAM_ID = Pubkey.from_string(Constants.ASSOCIATED_TOKEN_PROGRAM_ID)
TOKEN_METADATA_PROGRAM_ID = Pubkey.from_string(Constants.TOKEN_METADATA_PROGRAM_ID)
SYSTEM_PROGRAM_ID = Pubkey.from_string(Constants.SYSTEM_PROGRAM_ID)
SYSVAR_INSTRUCTIONS_ID = Pubkey.from_string(Constants.SYSVAR_INSTRUCTIONS_ID)


def get_associated_token_address(owner: Pubkey, mint: Pubkey) -> Pubkey:
    """
    Derive the Associated Token Account address for a given owner and mint

    Args:
        owner (Pubkey): Owner's public key
        mint (Pubkey): Token mint address

    Returns:
        Pubkey: Associated Token Account address
    """
    seeds = [
        bytes(owner),
        bytes(TOKEN_PROGRAM_ID),
        bytes(mint)
    ]
    pda, _ = Pubkey.find_program_address(seeds, ASSOCIATED_TOKEN_PROGRAM_ID)
    return pda


def get_metadata_address(mint: Pubkey) -> Pubkey:
    """
    Derive the Token Metadata account for a mint

    Args:
        mint (Pubkey): Token mint address

    Returns:
        Pubkey: Metadata account address
    """
    seeds = [
        b"metadata",
        bytes(TOKEN_METADATA_PROGRAM_ID),
        bytes(mint)
    ]
    pda, _ = Pubkey.find_program_address(seeds, TOKEN_METADATA_PROGRAM_ID)
    return pda


def get_master_edition_address(mint: Pubkey) -> Pubkey:
    """Derive the master edition account for a mint."""
    seeds = [
        b"metadata",
        bytes(TOKEN_METADATA_PROGRAM_ID),
        bytes(mint),
        b"edition"
    ]
    pda, _ = Pubkey.find_program_address(seeds, TOKEN_METADATA_PROGRAM_ID)
    return pda


# Accounts the mint instructions already reference, never valid NFT owners
PROGRAM_ACCOUNTS = frozenset([
    TOKEN_PROGRAM_ID,
    ASSOCIATED_TOKEN_PROGRAM_ID,
    TOKEN_METADATA_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_INSTRUCTIONS_ID,
])
