"""
Per-request key generation.
"""
from dataclasses import dataclass
from typing import Protocol

from solders.keypair import Keypair
from solders.pubkey import Pubkey


class KeypairProvider(Protocol):
    """Anything that can hand out a fresh keypair."""

    def generate(self) -> Keypair:
        ...


class RandomKeypairProvider:
    """Generates keypairs from the operating system's randomness."""

    def generate(self) -> Keypair:
        return Keypair()


@dataclass(frozen=True)
class EphemeralSigners:
    """
    Keys owned by a single mint request.

    ``fee_payer`` pays for and authorizes the mint, ``mint`` becomes the new
    asset's address and ``reference`` only tags the transaction, its secret
    half is dropped immediately.
    """
    fee_payer: Keypair
    mint: Keypair
    reference: Pubkey

    @classmethod
    def generate(cls, provider: KeypairProvider) -> "EphemeralSigners":
        return cls(
            fee_payer=provider.generate(),
            mint=provider.generate(),
            reference=provider.generate().pubkey(),
        )
