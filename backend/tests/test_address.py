"""
Tests for recipient address validation
"""

import os

import pytest
from base58 import b58encode
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from dispenser.utils.address import parse_pubkey, validate_recipient
from dispenser.utils.solana_error import InvalidInputError

DEFAULT = Pubkey.from_string("11111111111111111111111111111112")


def test_valid_addresses_round_trip():
    """Valid base58 keys come back unchanged"""
    for _ in range(20):
        address = b58encode(os.urandom(32)).decode('utf-8')
        assert str(validate_recipient(address, DEFAULT)) == address

    address = str(Keypair().pubkey())
    assert str(validate_recipient(address, DEFAULT)) == address


@pytest.mark.parametrize("value", [
    "not-a-key",
    "too_short",
    "!" * 32,
    "1" * 45,
    "0OIl" * 8,
    b58encode(os.urandom(31)).decode('utf-8'),
    b58encode(os.urandom(33)).decode('utf-8'),
    str(Keypair().pubkey()) + " ",
    " " + str(Keypair().pubkey()),
    "ключ",
])
def test_malformed_addresses_rejected(value):
    """Malformed strings fail with InvalidInputError naming the field"""
    with pytest.raises(InvalidInputError) as exc_info:
        validate_recipient(value, DEFAULT)

    assert exc_info.value.field == "to"
    assert "to" in str(exc_info.value)


def test_absent_address_uses_default():
    assert validate_recipient(None, DEFAULT) == DEFAULT
    assert validate_recipient("", DEFAULT) == DEFAULT


def test_parse_pubkey_reports_field():
    with pytest.raises(InvalidInputError) as exc_info:
        parse_pubkey("nope", "account")

    assert exc_info.value.field == "account"
    assert "account" in exc_info.value.message
