"""
NFT dispenser Solana Action backend.
"""
