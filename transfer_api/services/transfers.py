from __future__ import annotations

import logging
import time
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core.config import Settings, get_settings
from ..core.errors import (
    AccountNotFoundError,
    ConcurrentModificationError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidIdentifierError,
    InvalidRequestError,
    SameAccountError,
    StoreFailureError,
    TransferDeadlineExceededError,
)
from ..core.money import format_amount, to_major_units, to_minor_units
from ..models import AccountModel, AccountResponse, TransferRequest, TransferResponse
from .repository import AccountRepository


logger = logging.getLogger(__name__)

SEED_ACCOUNTS: tuple[tuple[str, int], ...] = (
    ("Alice", 1000_00),
    ("Bob", 500_00),
)


class _Conflict(Exception):
    """A guarded balance write lost a race; the attempt must be retried."""


class TransferService:
    def __init__(
        self,
        session: Session,
        repository: Optional[AccountRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.session = session
        self.repository = repository or AccountRepository(session)
        self.settings = settings or get_settings()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _parse_id(self, raw_id: str) -> UUID:
        try:
            return UUID(raw_id)
        except (TypeError, ValueError) as exc:
            raise InvalidIdentifierError() from exc

    def _get_account(self, account_id: UUID, missing_message: str) -> AccountModel:
        account = self.repository.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(missing_message)
        return account

    def _account_to_response(self, account: AccountModel) -> AccountResponse:
        return AccountResponse(
            id=str(account.id),
            name=account.name,
            balance=to_major_units(account.balance),
            revision=account.revision,
        )

    def _store_failure(self, message: str, exc: SQLAlchemyError) -> StoreFailureError:
        self.session.rollback()
        logger.exception("store.failure", extra={"operation": message})
        return StoreFailureError(message, str(exc))

    def _validate_transfer(self, payload: TransferRequest) -> tuple[UUID, UUID, Decimal, int]:
        if not payload.from_user_id or not payload.to_user_id or payload.amount is None:
            raise InvalidRequestError()
        if payload.amount <= 0:
            raise InvalidAmountError()
        amount_cents = to_minor_units(payload.amount)
        # Compare parsed ids; one UUID has several spellings.
        from_id = self._parse_id(payload.from_user_id)
        to_id = self._parse_id(payload.to_user_id)
        if from_id == to_id:
            raise SameAccountError()
        return from_id, to_id, payload.amount, amount_cents

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def seed_accounts(self) -> list[AccountResponse]:
        try:
            self.repository.delete_all()
            accounts = [
                self.repository.add_account(name, balance)
                for name, balance in SEED_ACCOUNTS
            ]
            responses = [self._account_to_response(account) for account in accounts]
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._store_failure("Error creating users", exc) from exc
        logger.info("accounts.seeded", extra={"count": len(responses)})
        return responses

    def seed_if_empty(self) -> bool:
        try:
            if self.repository.count_accounts() > 0:
                return False
        except SQLAlchemyError as exc:
            raise self._store_failure("Error creating users", exc) from exc
        self.seed_accounts()
        return True

    def list_accounts(self) -> list[AccountResponse]:
        try:
            accounts = self.repository.list_accounts()
        except SQLAlchemyError as exc:
            raise self._store_failure("Error fetching users", exc) from exc
        return [self._account_to_response(account) for account in accounts]

    def get_account(self, account_id: str) -> AccountResponse:
        try:
            account = self._get_account(self._parse_id(account_id), "User not found")
        except SQLAlchemyError as exc:
            raise self._store_failure("Error fetching user", exc) from exc
        return self._account_to_response(account)

    def delete_all_accounts(self) -> int:
        try:
            deleted = self.repository.delete_all()
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._store_failure("Error deleting users", exc) from exc
        logger.info("accounts.deleted", extra={"count": deleted})
        return deleted

    def transfer(self, payload: TransferRequest) -> TransferResponse:
        from_id, to_id, amount, amount_cents = self._validate_transfer(payload)

        deadline = time.monotonic() + self.settings.transfer_deadline_seconds
        attempts = 0
        while True:
            if time.monotonic() >= deadline:
                raise TransferDeadlineExceededError()
            attempts += 1
            try:
                return self._attempt_transfer(from_id, to_id, amount, amount_cents)
            except _Conflict:
                self.session.rollback()
                logger.warning(
                    "account.transfer.conflict",
                    extra={
                        "from_user_id": str(from_id),
                        "to_user_id": str(to_id),
                        "attempt": attempts,
                    },
                )
            except SQLAlchemyError as exc:
                raise self._store_failure("Transfer failed", exc) from exc
            except Exception:
                self.session.rollback()
                raise

            if attempts > self.settings.transfer_max_retries:
                raise ConcurrentModificationError()

    def _attempt_transfer(
        self,
        from_id: UUID,
        to_id: UUID,
        amount: Decimal,
        amount_cents: int,
    ) -> TransferResponse:
        sender = self._get_account(from_id, "Sender account not found")
        receiver = self._get_account(to_id, "Receiver account not found")

        if sender.balance < amount_cents:
            raise InsufficientFundsError()

        sender_name, receiver_name = sender.name, receiver.name
        sender_balance = sender.balance - amount_cents
        receiver_balance = receiver.balance + amount_cents

        # Both writes are guarded by the revision read above and commit together.
        if not self.repository.update_balance(
            sender.id, expected_revision=sender.revision, new_balance=sender_balance
        ):
            raise _Conflict()
        if not self.repository.update_balance(
            receiver.id, expected_revision=receiver.revision, new_balance=receiver_balance
        ):
            raise _Conflict()
        self.session.commit()

        logger.info(
            "account.transfer",
            extra={
                "from_user_id": str(from_id),
                "to_user_id": str(to_id),
                "amount": amount_cents,
            },
        )
        return TransferResponse(
            message=f"Transferred ${format_amount(amount)} from {sender_name} to {receiver_name}",
            sender_balance=to_major_units(sender_balance),
            receiver_balance=to_major_units(receiver_balance),
        )
