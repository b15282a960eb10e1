"""
Data models for the dispenser backend.
"""
from .nft_metadata import NftAttribute, NftFile, NftMetadataDescriptor

__all__ = ['NftAttribute', 'NftFile', 'NftMetadataDescriptor']
