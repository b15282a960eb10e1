"""
Reference key injection for off-chain correlation of claims.
"""
from typing import List, Sequence

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey


def inject_reference(
    instructions: Sequence[Instruction],
    recipient: Pubkey,
    reference: Pubkey,
) -> List[Instruction]:
    """
    Tag every instruction that touches the recipient with a reference key.

    Matching instructions get two accounts appended, in order: the reference
    key (read-only, non-signer) and the recipient again as a writable signer,
    so the wallet has to authorize the claim. An indexer can then find the
    confirmed transaction by watching the reference key. Existing accounts are
    never reordered or removed and the input instructions are left untouched.

    Must be applied exactly once per request.

    Args:
        instructions: Instructions to tag, in transaction order
        recipient: Wallet the NFT is minted to
        reference: Fresh public key unique to this request

    Returns:
        List[Instruction]: New instruction list in the same order
    """
    tagged = []
    for ix in instructions:
        accounts = ix.accounts
        if any(meta.pubkey == recipient for meta in accounts):
            accounts = accounts + [
                AccountMeta(pubkey=reference, is_signer=False, is_writable=False),
                AccountMeta(pubkey=recipient, is_signer=True, is_writable=True),
            ]
            ix = Instruction(ix.program_id, ix.data, accounts)
        tagged.append(ix)
    return tagged
