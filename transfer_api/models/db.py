from __future__ import annotations
from uuid import UUID, uuid4
from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

class Account(SQLModel, table=True):
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_account_balance_non_negative"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    name: str
    balance: int = Field(default=0, ge=0, description="Balance in minor units (cents)")
    revision: int = Field(default=0, ge=0)
