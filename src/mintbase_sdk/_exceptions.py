"""Custom exceptions for mintbase-sdk."""

from enum import Enum
from typing import Any


class ValidationErrorCode(str, Enum):
    """Machine-readable reasons a mint intent is rejected."""

    CONTRACT_ADDRESS = "CONTRACT_ADDRESS"
    NO_REFERENCE = "NO_REFERENCE"
    NO_MEDIA = "NO_MEDIA"
    MAX_SPLITS = "MAX_SPLITS"
    SPLITS = "SPLITS"
    MAX_AMOUNT = "MAX_AMOUNT"
    MIN_AMOUNT = "MIN_AMOUNT"
    INVALID_ROYALTY_PERCENTAGE = "INVALID_ROYALTY_PERCENTAGE"
    SPLITS_PERCENTAGE = "SPLITS_PERCENTAGE"


ERROR_MESSAGES: dict[ValidationErrorCode, str] = {
    ValidationErrorCode.CONTRACT_ADDRESS: "You must configure a default contract address or pass one explicitly",
    ValidationErrorCode.NO_REFERENCE: "Please provide a metadata reference or set no_reference=True",
    ValidationErrorCode.NO_MEDIA: "Please provide metadata media or set no_media=True",
    ValidationErrorCode.MAX_SPLITS: "Splits can have at most 50 entries",
    ValidationErrorCode.SPLITS: "Splits need at least 2 entries",
    ValidationErrorCode.MAX_AMOUNT: "You can mint at most 125 tokens per call",
    ValidationErrorCode.MIN_AMOUNT: "You must mint at least 1 token",
    ValidationErrorCode.INVALID_ROYALTY_PERCENTAGE: "Royalty percentage must be between 0 and 0.5",
    ValidationErrorCode.SPLITS_PERCENTAGE: "Split percentages must add up to exactly 1 (100%)",
}


class MintbaseError(Exception):
    """Base exception for mintbase-sdk."""


class ConfigurationError(MintbaseError):
    """Invalid configuration (unknown network, bad RPC URL, etc.)."""


class NetworkNotSupportedError(ConfigurationError):
    """Unsupported NEAR network."""

    def __init__(self, network: str) -> None:
        super().__init__(f"Network {network!r} is not supported")
        self.network = network


class ValidationError(MintbaseError):
    """Mint intent violates a structural rule. Raised before any network call."""

    def __init__(self, code: ValidationErrorCode, message: str | None = None) -> None:
        super().__init__(message or ERROR_MESSAGES[code])
        self.code = code


class RpcError(MintbaseError):
    """The RPC node answered with an error payload."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"RPC error: {error}")
        self.error = error


class MalformedResponseError(MintbaseError):
    """The RPC response does not have the expected shape."""

    def __init__(self, response: Any) -> None:
        super().__init__(f"Malformed response: {response}")
        self.response = response
