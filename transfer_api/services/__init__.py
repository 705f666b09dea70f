from .repository import AccountRepository
from .transfers import TransferService

__all__ = ["AccountRepository", "TransferService"]
