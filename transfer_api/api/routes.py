from typing import Optional

from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_transfer_service
from ..models import (
    AccountListResponse,
    AccountResponse,
    MessageResponse,
    SeedResponse,
    TransferRequest,
    TransferResponse,
)
from ..services import TransferService


router = APIRouter(tags=["users"])

@router.post("/create-users", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
def create_users(
    service: TransferService = Depends(get_transfer_service),
) -> SeedResponse:
    return SeedResponse(message="Users created", users=service.seed_accounts())

@router.get("/users", response_model=AccountListResponse)
def list_users(
    service: TransferService = Depends(get_transfer_service),
) -> AccountListResponse:
    return AccountListResponse(users=service.list_accounts())

@router.get("/users/{user_id}", response_model=AccountResponse)
def get_user(
    user_id: str,
    service: TransferService = Depends(get_transfer_service),
) -> AccountResponse:
    return service.get_account(user_id)

@router.delete("/users", response_model=MessageResponse)
def delete_users(
    service: TransferService = Depends(get_transfer_service),
) -> MessageResponse:
    service.delete_all_accounts()
    return MessageResponse(message="All users deleted")

transfer_router = APIRouter(tags=["transfers"])

@transfer_router.post("/transfer", response_model=TransferResponse)
def create_transfer(
    payload: Optional[TransferRequest] = None,
    service: TransferService = Depends(get_transfer_service),
) -> TransferResponse:
    # A missing body is reported like one with every field missing.
    return service.transfer(payload if payload is not None else TransferRequest())

__all__ = ["router", "transfer_router"]
