"""
Configuration module for the dispenser backend.
Contains environment variables and other configuration settings.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from .models.nft_metadata import NftFile, NftMetadataDescriptor
from .utils.address import parse_pubkey
from .utils.solana_error import ConfigurationError, InvalidInputError

# Load environment variables
load_dotenv()

# RPC Configuration
DEFAULT_RPC_URL = "https://api.devnet.solana.com"
DEFAULT_COMMITMENT = "confirmed"

# Server Configuration
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# Solana Actions
ACTION_PATH = "/api/actions/mint-nft-dispenser"
ACTION_VERSION = "2.1.3"
DEVNET_BLOCKCHAIN_ID = "solana:EtWTRABZaYq6iMfeYKouRu166VU2xqa1"
CLAIM_MESSAGE = "Claim Success"

# NFT defaults
DEFAULT_NFT_IMAGE = "https://example.com/image.png"


class Constants:
    """
    Program ids used when building mint instructions.
    """
    TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
    ASSOCIATED_TOKEN_PROGRAM_ID = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
    TOKEN_METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
    SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
    SYSVAR_INSTRUCTIONS_ID = "Sysvar1nstructions1111111111111111111111111"


@dataclass(frozen=True)
class ActionPresentation:
    title: str
    icon: str
    description: str
    label: str


@dataclass(frozen=True)
class DispenserConfig:
    """
    Settings for one dispenser process.

    Built once at startup and handed to routes through a dependency, so
    tests can swap in deterministic values.
    """
    rpc_url: str
    commitment: str
    host: str
    port: int
    base_url: str
    default_recipient: Pubkey
    nft: NftMetadataDescriptor
    presentation: ActionPresentation
    action_version: str = ACTION_VERSION
    blockchain_id: str = DEVNET_BLOCKCHAIN_ID

    @property
    def action_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{ACTION_PATH}"

    @classmethod
    def from_env(cls) -> "DispenserConfig":
        """
        Read the configuration from environment variables.

        Raises:
            ConfigurationError: If a configured value is malformed
        """
        port = _int_env("PORT", DEFAULT_PORT)
        image = os.getenv("NFT_IMAGE", DEFAULT_NFT_IMAGE)

        nft = NftMetadataDescriptor(
            name=os.getenv("NFT_NAME", "My NFT Dispenser"),
            symbol=os.getenv("NFT_SYMBOL", "ACT"),
            uri=os.getenv("NFT_URI", image),
            description=os.getenv("NFT_DESCRIPTION", "This is a sample NFT dispenser"),
            image=image,
            external_url=os.getenv("NFT_EXTERNAL_URL", "https://example.com"),
            seller_fee_basis_points=_int_env("NFT_ROYALTY_BPS", 0),
            files=(NftFile(uri=image, type="image/png"),),
        )

        return cls(
            rpc_url=os.getenv("SOLANA_RPC_URL", DEFAULT_RPC_URL),
            commitment=os.getenv("SOLANA_COMMITMENT", DEFAULT_COMMITMENT),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=port,
            base_url=os.getenv("BASE_URL", f"http://localhost:{port}"),
            default_recipient=_default_recipient(os.getenv("DEFAULT_RECIPIENT")),
            nft=nft,
            presentation=ActionPresentation(
                title=os.getenv("ACTION_TITLE", "Mint NFT Dispenser"),
                icon=os.getenv("ACTION_ICON", "https://solana-actions.vercel.app/solana_devs.jpg"),
                description=os.getenv("ACTION_DESCRIPTION", "Claim an NFT straight into your Solana wallet"),
                label=os.getenv("ACTION_LABEL", "Mint NFT"),
            ),
            action_version=os.getenv("ACTION_VERSION", ACTION_VERSION),
            blockchain_id=os.getenv("ACTION_BLOCKCHAIN_ID", DEVNET_BLOCKCHAIN_ID),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}", field=name) from None


def _default_recipient(raw: Optional[str]) -> Pubkey:
    # Unset means a throwaway key generated for this process
    if not raw:
        return Keypair().pubkey()
    try:
        return parse_pubkey(raw, "DEFAULT_RECIPIENT")
    except InvalidInputError:
        raise ConfigurationError(
            "DEFAULT_RECIPIENT is not a valid public key", field="DEFAULT_RECIPIENT"
        ) from None
