"""
Tests for the Token Metadata mint instruction builder
"""

import dataclasses

import pytest
from solders.keypair import Keypair

from dispenser.models.nft_metadata import NftAttribute, NftFile
from dispenser.utils.metadata_instructions import (
    CREATE_V1_LAYOUT,
    MINT_V1_LAYOUT,
    build_create_nft_instructions,
)
from dispenser.utils.solana_error import InvalidMetadataError
from dispenser.utils.token_utils import (
    TOKEN_METADATA_PROGRAM_ID,
    get_associated_token_address,
    get_master_edition_address,
    get_metadata_address,
)


@pytest.fixture
def keys():
    return Keypair().pubkey(), Keypair().pubkey()


def test_builds_create_then_mint(nft_metadata, recipient, keys):
    """CreateV1 comes first, MintV1 second, both for Token Metadata"""
    mint, authority = keys
    create_ix, mint_ix = build_create_nft_instructions(mint, authority, nft_metadata, recipient)

    assert create_ix.program_id == TOKEN_METADATA_PROGRAM_ID
    assert mint_ix.program_id == TOKEN_METADATA_PROGRAM_ID
    assert bytes(create_ix.data)[:2] == bytes([42, 0])
    assert bytes(mint_ix.data)[:2] == bytes([43, 0])


def test_create_instruction_data(nft_metadata, recipient, keys):
    mint, authority = keys
    create_ix, _ = build_create_nft_instructions(mint, authority, nft_metadata, recipient)

    parsed = CREATE_V1_LAYOUT.parse(bytes(create_ix.data))
    assert parsed.name == "My NFT Dispenser"
    assert parsed.symbol == "ACT"
    assert parsed.uri == "https://example.com/image.png"
    assert parsed.seller_fee_basis_points == 500
    assert parsed.is_mutable is True
    assert parsed.decimals == 0
    assert len(parsed.creators) == 1
    assert bytes(parsed.creators[0].address) == bytes(authority)
    assert parsed.creators[0].share == 100


def test_create_instruction_accounts(nft_metadata, recipient, keys):
    mint, authority = keys
    create_ix, _ = build_create_nft_instructions(mint, authority, nft_metadata, recipient)
    accounts = create_ix.accounts

    assert accounts[0].pubkey == get_metadata_address(mint)
    assert accounts[1].pubkey == get_master_edition_address(mint)
    assert accounts[2].pubkey == mint
    assert accounts[2].is_signer and accounts[2].is_writable
    assert accounts[3].pubkey == authority and accounts[3].is_signer
    assert accounts[4].pubkey == authority and accounts[4].is_writable
    assert all(meta.pubkey != recipient for meta in accounts)


def test_mint_instruction_targets_owner(nft_metadata, recipient, keys):
    """Exactly one token goes to the owner's associated token account"""
    mint, authority = keys
    _, mint_ix = build_create_nft_instructions(mint, authority, nft_metadata, recipient)
    accounts = mint_ix.accounts

    assert MINT_V1_LAYOUT.parse(bytes(mint_ix.data)).amount == 1
    assert accounts[0].pubkey == get_associated_token_address(recipient, mint)
    assert accounts[0].is_writable
    assert accounts[1].pubkey == recipient
    assert not accounts[1].is_signer and not accounts[1].is_writable
    assert accounts[3].pubkey == get_master_edition_address(mint)
    assert not accounts[3].is_writable
    assert accounts[5].pubkey == mint
    assert len(accounts) == 15


@pytest.mark.parametrize("royalty", [-1, 10_001, 1_000_000])
def test_royalty_out_of_range(nft_metadata, recipient, keys, royalty):
    metadata = dataclasses.replace(nft_metadata, seller_fee_basis_points=royalty)

    with pytest.raises(InvalidMetadataError) as exc_info:
        build_create_nft_instructions(*keys, metadata, recipient)

    assert exc_info.value.field == "seller_fee_basis_points"


@pytest.mark.parametrize("royalty", [0, 10_000])
def test_royalty_bounds_accepted(nft_metadata, recipient, keys, royalty):
    metadata = dataclasses.replace(nft_metadata, seller_fee_basis_points=royalty)
    create_ix, _ = build_create_nft_instructions(*keys, metadata, recipient)

    assert CREATE_V1_LAYOUT.parse(bytes(create_ix.data)).seller_fee_basis_points == royalty


def test_royalty_must_be_integer(nft_metadata, recipient, keys):
    for royalty in (5.5, "dispenser.royalty", True):
        metadata = dataclasses.replace(nft_metadata, seller_fee_basis_points=royalty)
        with pytest.raises(InvalidMetadataError):
            build_create_nft_instructions(*keys, metadata, recipient)


@pytest.mark.parametrize("changes,field", [
    ({"name": ""}, "name"),
    ({"name": "   "}, "name"),
    ({"name": "x" * 33}, "name"),
    ({"symbol": "TOOLONGSYMBOL"}, "symbol"),
    ({"uri": "not a uri"}, "uri"),
    ({"uri": "ftp://example.com/meta.json"}, "uri"),
    ({"uri": "https://example.com/" + "a" * 200}, "uri"),
    ({"external_url": "example.com"}, "external_url"),
    ({"image": "ipfs://bafy/image.png"}, "image"),
    ({"attributes": (NftAttribute(trait_type="rarity", value=""),)}, "attributes"),
    ({"attributes": (NftAttribute(trait_type="rarity", value=None),)}, "attributes"),
    ({"attributes": (NftAttribute(trait_type="", value="gold"),)}, "attributes"),
    ({"files": (NftFile(uri="file:///tmp/image.png", type="image/png"),)}, "files"),
])
def test_malformed_descriptor(nft_metadata, recipient, keys, changes, field):
    metadata = dataclasses.replace(nft_metadata, **changes)

    with pytest.raises(InvalidMetadataError) as exc_info:
        build_create_nft_instructions(*keys, metadata, recipient)

    assert exc_info.value.field == field


def test_attribute_values_accepted(nft_metadata, recipient, keys):
    """Zero is a real attribute value, only missing values are rejected"""
    metadata = dataclasses.replace(
        nft_metadata,
        attributes=(NftAttribute(trait_type="level", value=0), NftAttribute(trait_type="rarity", value="gold")),
    )

    assert len(build_create_nft_instructions(*keys, metadata, recipient)) == 2
