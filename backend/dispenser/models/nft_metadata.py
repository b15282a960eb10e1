"""
NFT metadata descriptor used to build mint instructions.
"""
from dataclasses import dataclass, field
from typing import Tuple, Union
from urllib.parse import urlparse

from ..utils.solana_error import InvalidMetadataError

# Token Metadata program limits
MAX_NAME_LENGTH = 32
MAX_SYMBOL_LENGTH = 10
MAX_URI_LENGTH = 200
MAX_BASIS_POINTS = 10_000


@dataclass(frozen=True)
class NftAttribute:
    trait_type: str
    value: Union[str, int, float]


@dataclass(frozen=True)
class NftFile:
    uri: str
    type: str


@dataclass(frozen=True)
class NftMetadataDescriptor:
    """
    Description of the NFT handed out by the dispenser.

    ``uri`` is written on chain and points at the off-chain JSON document.
    ``seller_fee_basis_points`` is the royalty, 100 basis points being 1%.
    """
    name: str
    symbol: str
    uri: str
    description: str = ""
    image: str = ""
    external_url: str = ""
    seller_fee_basis_points: int = 0
    category: str = "image"
    attributes: Tuple[NftAttribute, ...] = field(default_factory=tuple)
    files: Tuple[NftFile, ...] = field(default_factory=tuple)

    def validate(self) -> None:
        """
        Check every field against the on-chain limits.

        Raises:
            InvalidMetadataError: On the first malformed field
        """
        if not self.name or not self.name.strip():
            raise InvalidMetadataError("name", "must not be empty")
        if len(self.name.encode("utf-8")) > MAX_NAME_LENGTH:
            raise InvalidMetadataError("name", f"longer than {MAX_NAME_LENGTH} bytes")
        if len(self.symbol.encode("utf-8")) > MAX_SYMBOL_LENGTH:
            raise InvalidMetadataError("symbol", f"longer than {MAX_SYMBOL_LENGTH} bytes")

        if not _is_http_url(self.uri):
            raise InvalidMetadataError("uri", "must be an http(s) URL")
        if len(self.uri.encode("utf-8")) > MAX_URI_LENGTH:
            raise InvalidMetadataError("uri", f"longer than {MAX_URI_LENGTH} bytes")

        for name in ("image", "external_url"):
            value = getattr(self, name)
            if value and not _is_http_url(value):
                raise InvalidMetadataError(name, "must be an http(s) URL")

        royalty = self.seller_fee_basis_points
        if isinstance(royalty, bool) or not isinstance(royalty, int):
            raise InvalidMetadataError("seller_fee_basis_points", "must be an integer")
        if not 0 <= royalty <= MAX_BASIS_POINTS:
            raise InvalidMetadataError(
                "seller_fee_basis_points",
                f"must be between 0 and {MAX_BASIS_POINTS}"
            )

        for attribute in self.attributes:
            if not attribute.trait_type:
                raise InvalidMetadataError("attributes", "trait_type is required")
            if attribute.value is None or attribute.value == "":
                raise InvalidMetadataError("attributes", "value is required")
        for nft_file in self.files:
            if not _is_http_url(nft_file.uri):
                raise InvalidMetadataError("files", "file uri must be an http(s) URL")


def _is_http_url(value: str) -> bool:
    if not isinstance(value, str):
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
