"""
Custom error types for the mint dispenser.
"""
from typing import Optional


class DispenserError(Exception):
    """Base class for dispenser errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidInputError(DispenserError):
    """Raised when a request parameter does not decode to a public key."""

    def __init__(self, field: str):
        super().__init__(f"Invalid input query parameter: {field}", field=field)


class MissingFieldError(DispenserError):
    """Raised when a required body field is absent."""

    def __init__(self, field: str):
        super().__init__(f'Invalid "{field}" provided', field=field)


class InvalidMetadataError(DispenserError):
    """Raised when the NFT metadata descriptor is malformed."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid NFT metadata field '{field}': {reason}", field=field)


class UpstreamUnavailableError(DispenserError):
    """Raised when the latest blockhash cannot be fetched."""
    pass


class SignerMismatchError(DispenserError):
    """Raised when declared signers disagree with the transaction's required signers."""
    pass


class ConfigurationError(DispenserError):
    """Raised when process configuration is invalid."""
    pass


# Public exports
__all__ = [
    'DispenserError',
    'InvalidInputError',
    'MissingFieldError',
    'InvalidMetadataError',
    'UpstreamUnavailableError',
    'SignerMismatchError',
    'ConfigurationError'
]
