"""
Solana dependencies module.
Provides shared instances of Solana-related services.
"""
from typing import Optional

from fastapi import Depends
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment

from ..config import DispenserConfig
from ..utils.handlers import MintDispenserHandler
from ..utils.logging_config import setup_logging
from ..utils.signers import KeypairProvider, RandomKeypairProvider

# Configure logging
logger = setup_logging(__name__)

# Global instances
_config: Optional[DispenserConfig] = None
_rpc_client: Optional[AsyncClient] = None


def get_config() -> DispenserConfig:
    """
    Get or create the process configuration.
    The default recipient is generated once here when not configured.
    """
    global _config

    if _config is None:
        _config = DispenserConfig.from_env()
        logger.info(f"Loaded configuration for RPC {_config.rpc_url}, default recipient {_config.default_recipient}")

    return _config


async def open_rpc_client(config: DispenserConfig) -> AsyncClient:
    """Create the RPC client shared by all requests."""
    global _rpc_client

    if _rpc_client is None:
        _rpc_client = AsyncClient(config.rpc_url, commitment=Commitment(config.commitment))
        logger.info(f"Created shared RPC client for {config.rpc_url}")

    return _rpc_client


async def close_rpc_client() -> None:
    global _rpc_client

    if _rpc_client is not None:
        await _rpc_client.close()
        _rpc_client = None
        logger.info("Closed shared RPC client")


async def get_rpc_client(config: DispenserConfig = Depends(get_config)) -> AsyncClient:
    return await open_rpc_client(config)


def get_keypair_provider() -> KeypairProvider:
    return RandomKeypairProvider()


def get_dispenser_handler(
    config: DispenserConfig = Depends(get_config),
    client: AsyncClient = Depends(get_rpc_client),
    keypair_provider: KeypairProvider = Depends(get_keypair_provider),
) -> MintDispenserHandler:
    return MintDispenserHandler(config, client, keypair_provider)
