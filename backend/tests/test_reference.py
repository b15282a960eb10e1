"""
Tests for reference key injection
"""

from solders.instruction import AccountMeta, Instruction
from solders.keypair import Keypair

from dispenser.utils.metadata_instructions import build_create_nft_instructions
from dispenser.utils.reference import inject_reference


def _pubkey():
    return Keypair().pubkey()


def test_appends_reference_and_signer(nft_metadata, recipient):
    """Only the instruction touching the recipient is tagged"""
    reference = _pubkey()
    instructions = build_create_nft_instructions(_pubkey(), _pubkey(), nft_metadata, recipient)

    tagged = inject_reference(instructions, recipient, reference)

    assert len(tagged) == len(instructions)
    assert tagged[0] == instructions[0]

    original = instructions[1].accounts
    accounts = tagged[1].accounts
    assert accounts[:len(original)] == original
    assert len(accounts) == len(original) + 2

    reference_meta, recipient_meta = accounts[-2:]
    assert reference_meta.pubkey == reference
    assert not reference_meta.is_signer and not reference_meta.is_writable
    assert recipient_meta.pubkey == recipient
    assert recipient_meta.is_signer and recipient_meta.is_writable
    assert tagged[1].data == instructions[1].data
    assert tagged[1].program_id == instructions[1].program_id


def test_exactly_one_signing_recipient_instruction(nft_metadata, recipient):
    reference = _pubkey()
    instructions = build_create_nft_instructions(_pubkey(), _pubkey(), nft_metadata, recipient)
    tagged = inject_reference(instructions, recipient, reference)

    signing = [
        ix for ix in tagged
        if any(m.pubkey == recipient and m.is_signer and m.is_writable for m in ix.accounts)
    ]
    assert len(signing) == 1
    assert any(m.pubkey == reference for m in signing[0].accounts)
    assert reference != recipient


def test_input_not_mutated(recipient):
    program = _pubkey()
    ix = Instruction(program, b"\x01", [AccountMeta(recipient, False, True)])

    tagged = inject_reference([ix], recipient, _pubkey())

    assert len(ix.accounts) == 1
    assert len(tagged[0].accounts) == 3


def test_untouched_when_recipient_absent(recipient):
    program = _pubkey()
    instructions = [
        Instruction(program, b"", [AccountMeta(_pubkey(), True, True)]),
        Instruction(program, b"\x02", []),
    ]

    assert inject_reference(instructions, recipient, _pubkey()) == instructions
