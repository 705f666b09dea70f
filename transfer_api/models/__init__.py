from .db import Account as AccountModel
from .schemas import (
    AccountListResponse,
    AccountResponse,
    MessageResponse,
    SeedResponse,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "AccountListResponse",
    "AccountResponse",
    "MessageResponse",
    "SeedResponse",
    "TransferRequest",
    "TransferResponse",
    "AccountModel",
]
