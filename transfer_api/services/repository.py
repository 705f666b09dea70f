from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, update
from sqlmodel import Session, select

from ..models import AccountModel


class AccountRepository:
    """Thin data access layer around the SQLModel session.

    Nothing here commits; transaction boundaries belong to the service.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def add_account(self, name: str, balance: int) -> AccountModel:
        account = AccountModel(name=name, balance=balance)
        self.session.add(account)
        self.session.flush()
        self.session.refresh(account)
        return account

    def get_account(self, account_id: UUID) -> Optional[AccountModel]:
        return self.session.get(AccountModel, account_id, populate_existing=True)

    def list_accounts(self) -> list[AccountModel]:
        return list(self.session.exec(select(AccountModel)))

    def count_accounts(self) -> int:
        return self.session.exec(select(func.count()).select_from(AccountModel)).one()

    def delete_all(self) -> int:
        result = self.session.exec(
            delete(AccountModel).execution_options(synchronize_session=False)
        )
        self.session.expunge_all()
        return result.rowcount

    def update_balance(
        self,
        account_id: UUID,
        *,
        expected_revision: int,
        new_balance: int,
    ) -> bool:
        """Write ``new_balance`` only if the row is still at ``expected_revision``.

        Returns False when another writer got there first.
        """
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .where(AccountModel.revision == expected_revision)
            .values(balance=new_balance, revision=expected_revision + 1)
            .execution_options(synchronize_session=False)
        )
        result = self.session.exec(stmt)
        return result.rowcount == 1
