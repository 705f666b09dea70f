from fastapi import Depends
from sqlmodel import Session

from ..services import AccountRepository, TransferService
from .config import get_settings
from .db import get_session

def get_transfer_service(session: Session = Depends(get_session)) -> TransferService:
    repository = AccountRepository(session)
    return TransferService(session, repository, get_settings())
