from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

class AccountResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    balance: Union[int, float]
    revision: int = Field(default=0, alias="__v")

class AccountListResponse(BaseModel):
    users: list[AccountResponse]

class SeedResponse(BaseModel):
    message: str
    users: list[AccountResponse]

class TransferRequest(BaseModel):
    """Raw transfer body; presence and business rules are checked by the service."""

    from_user_id: Optional[str] = Field(default=None, alias="fromUserId")
    to_user_id: Optional[str] = Field(default=None, alias="toUserId")
    amount: Optional[Decimal] = None

    model_config = ConfigDict(populate_by_name=True)

class TransferResponse(BaseModel):
    message: str
    sender_balance: Union[int, float] = Field(..., alias="senderBalance")
    receiver_balance: Union[int, float] = Field(..., alias="receiverBalance")

    model_config = ConfigDict(populate_by_name=True)

class MessageResponse(BaseModel):
    message: str
