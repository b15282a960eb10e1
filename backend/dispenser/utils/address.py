"""
Recipient address validation.
"""
from typing import Optional

import base58
from solders.pubkey import Pubkey

from .solana_error import InvalidInputError

PUBKEY_LENGTH = 32


def parse_pubkey(value: str, field: str) -> Pubkey:
    """
    Strictly decode a base58 public key.

    Args:
        value: Base58 encoded address
        field: Request field the value came from, reported on failure

    Returns:
        Pubkey: Decoded public key

    Raises:
        InvalidInputError: If the value is not a 32 byte base58 key
    """
    # b58decode tolerates trailing whitespace, we don't
    if not value or value != value.strip():
        raise InvalidInputError(field)
    try:
        raw = base58.b58decode(value)
    except ValueError:
        raise InvalidInputError(field) from None
    if len(raw) != PUBKEY_LENGTH:
        raise InvalidInputError(field)
    return Pubkey(raw)


def validate_recipient(value: Optional[str], default: Pubkey, field: str = "to") -> Pubkey:
    """
    Resolve the recipient of a mint from raw query input.

    Absent or empty input resolves to the process-wide default recipient,
    which is only meant for previews. Present input is never coerced.
    """
    if not value:
        return default
    return parse_pubkey(value, field)
