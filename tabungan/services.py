"""Business rules for registering account holders and moving money."""

from __future__ import annotations

import logging
import re

from .errors import InsufficientBalanceError, NasabahAlreadyExistError
from .models import CheckByNikOrPhoneNumber, CreateNasabah
from .repository import NasabahRepository, NasabahTransactionRepository

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int64(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid account number {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"account number {text!r} is out of range")
    return value


class RegisterService:
    """Registers new account holders."""

    def __init__(self, nasabah_repository: NasabahRepository) -> None:
        self.nasabah_repository = nasabah_repository

    def register(self, payload: CreateNasabah) -> str:
        """Create the account holder and return its account number.

        Raises NasabahAlreadyExistError when the NIK or phone number is taken.
        """
        check = CheckByNikOrPhoneNumber(nik=payload.nik, phone_number=payload.phone_number)
        if self.nasabah_repository.exists(check):
            raise NasabahAlreadyExistError()
        return self.nasabah_repository.create(payload)


class TransactionService:
    """Balance queries, deposits and withdrawals."""

    def __init__(
        self,
        transaction_repository: NasabahTransactionRepository,
        nasabah_repository: NasabahRepository,
    ) -> None:
        self.transaction_repository = transaction_repository
        self.nasabah_repository = nasabah_repository

    def check_saldo(self, rekening_number: str) -> int:
        """Return the balance of the account."""
        number = _parse_int64(rekening_number)
        return self.nasabah_repository.get_by_rekening_number(number).total_money

    def deposit(self, rekening_number: str, amount: int) -> int:
        """Deposit ``amount`` and return the new balance."""
        number = _parse_int64(rekening_number)
        self.nasabah_repository.get_by_rekening_number(number)
        return self.transaction_repository.deposit(rekening_number, amount)

    def withdraw(self, rekening_number: str, amount: int) -> int:
        """Withdraw ``amount`` and return the new balance.

        Raises InsufficientBalanceError when the balance would go negative.
        """
        number = _parse_int64(rekening_number)
        nasabah = self.nasabah_repository.get_by_rekening_number(number)
        if nasabah.total_money - amount < 0:
            raise InsufficientBalanceError()
        return self.transaction_repository.withdraw(rekening_number, amount)