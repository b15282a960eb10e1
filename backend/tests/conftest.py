"""
Pytest configuration file for the dispenser tests.
"""

import os
import sys
import tempfile
from typing import List
from unittest.mock import AsyncMock, MagicMock

# Add the backend directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("DISPENSER_LOG_DIR", tempfile.mkdtemp(prefix="dispenser-logs-"))

import pytest
from solana.rpc.async_api import AsyncClient
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from dispenser.config import ActionPresentation, DispenserConfig
from dispenser.models.nft_metadata import NftFile, NftMetadataDescriptor

DEFAULT_RECIPIENT = "11111111111111111111111111111112"


class RecordingKeypairProvider:
    """Keypair provider remembering every keypair it handed out"""

    def __init__(self):
        self.generated: List[Keypair] = []

    def generate(self) -> Keypair:
        keypair = Keypair()
        self.generated.append(keypair)
        return keypair


# Register the asyncio marker
def pytest_configure(config):
    config.addinivalue_line("markers", "asyncio: mark test as running with asyncio")


@pytest.fixture
def nft_metadata() -> NftMetadataDescriptor:
    return NftMetadataDescriptor(
        name="My NFT Dispenser",
        symbol="ACT",
        uri="https://example.com/image.png",
        description="This is a sample NFT dispenser",
        image="https://example.com/image.png",
        external_url="https://example.com",
        seller_fee_basis_points=500,
        files=(NftFile(uri="https://example.com/image.png", type="image/png"),),
    )


@pytest.fixture
def dispenser_config(nft_metadata) -> DispenserConfig:
    return DispenserConfig(
        rpc_url="http://localhost:8899",
        commitment="confirmed",
        host="127.0.0.1",
        port=8080,
        base_url="http://localhost:8080",
        default_recipient=Pubkey.from_string(DEFAULT_RECIPIENT),
        nft=nft_metadata,
        presentation=ActionPresentation(
            title="Mint NFT Dispenser",
            icon="https://example.com/icon.png",
            description="Claim an NFT",
            label="Mint NFT",
        ),
    )


@pytest.fixture
def recipient() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def blockhash() -> Hash:
    return Hash.new_unique()


@pytest.fixture
def mock_rpc_client(blockhash) -> AsyncMock:
    """RPC client answering getLatestBlockhash without touching the network"""
    client = AsyncMock(spec=AsyncClient)
    response = MagicMock()
    response.value.blockhash = blockhash
    response.value.last_valid_block_height = 1_000
    client.get_latest_blockhash.return_value = response
    return client


@pytest.fixture
def keypair_provider() -> RecordingKeypairProvider:
    return RecordingKeypairProvider()
