from __future__ import annotations

from typing import Optional


class TransferAPIError(Exception):
    """Base class for errors rendered as ``{"message": ...}`` responses."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequestError(TransferAPIError):
    """Raised when a required transfer field is missing."""

    status_code = 400
    default_message = "Missing required fields: fromUserId, toUserId, amount"


class InvalidAmountError(TransferAPIError):
    status_code = 400
    default_message = "Amount must be greater than 0"


class SameAccountError(TransferAPIError):
    status_code = 400
    default_message = "Cannot transfer to same account"


class InvalidIdentifierError(TransferAPIError):
    """Raised when an account id is not a well-formed store identifier."""

    status_code = 400
    default_message = "Invalid user ID format"


class InsufficientFundsError(TransferAPIError):
    """Raised when a transfer would drop the sender's balance below zero."""

    status_code = 400
    default_message = "Insufficient balance"


class AccountNotFoundError(TransferAPIError):
    """Raised when an account id is missing from the store."""

    status_code = 404
    default_message = "User not found"


class ConcurrentModificationError(TransferAPIError):
    """Raised when an account kept changing under a transfer until retries ran out."""

    status_code = 409
    default_message = "Account was modified concurrently, please retry"


class TransferDeadlineExceededError(TransferAPIError):
    status_code = 503
    default_message = "Transfer deadline exceeded"


class StoreFailureError(TransferAPIError):
    """Wraps an unclassified store error; ``detail`` carries the store's message."""

    status_code = 500
    default_message = "Store failure"

    def __init__(self, message: Optional[str] = None, detail: str = "") -> None:
        super().__init__(message)
        self.detail = detail


class AuthenticationError(TransferAPIError):
    status_code = 401
    default_message = "Authorization header missing or incorrect"
