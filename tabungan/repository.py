"""Storage of account holders and their balance movements."""

from __future__ import annotations

import logging
import sqlite3
import uuid
from typing import Any

from .errors import NasabahNotFoundError
from .models import CheckByNikOrPhoneNumber, CreateNasabah, Nasabah

logger = logging.getLogger(__name__)

_SELECT_NASABAH = (
    "SELECT id, name, nik, phone_number, rekening_number, total_money FROM nasabah"
)
_INSERT_HISTORY = (
    "INSERT INTO history_transaction_nasabah "
    "(nasabah_id, transaction_type, amount, description) VALUES (?, ?, ?, ?)"
)


def _to_nasabah(row: tuple[Any, ...] | None) -> Nasabah:
    if row is None:
        raise NasabahNotFoundError()
    nasabah_id, name, nik, phone_number, rekening_number, total_money = row
    return Nasabah(
        id=uuid.UUID(str(nasabah_id)),
        name=name,
        nik=nik,
        phone_number=phone_number,
        rekening_number=int(rekening_number),
        total_money=int(total_money),
    )


class NasabahRepository:
    """Reads and creates account holder records."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self.db = db

    def create(self, payload: CreateNasabah) -> str:
        """Insert a new account holder and return the assigned account number."""
        with self.db:
            cursor = self.db.execute(
                "INSERT INTO nasabah (id, name, nik, phone_number) VALUES (?, ?, ?, ?)",
                (str(uuid.uuid4()), payload.name, payload.nik, payload.phone_number),
            )
            row = self.db.execute(
                "SELECT rekening_number FROM nasabah WHERE rowid = ?", (cursor.lastrowid,)
            ).fetchone()
        return str(row[0])

    def get_by_id(self, nasabah_id: str) -> Nasabah:
        """Return the account holder with the given UUID, or raise NasabahNotFoundError."""
        row = self.db.execute(f"{_SELECT_NASABAH} WHERE id = ?", (str(nasabah_id),)).fetchone()
        return _to_nasabah(row)

    def get_by_rekening_number(self, rekening_number: int) -> Nasabah:
        """Return the account holder owning ``rekening_number``, or raise NasabahNotFoundError."""
        row = self.db.execute(
            f"{_SELECT_NASABAH} WHERE rekening_number = ?", (rekening_number,)
        ).fetchone()
        return _to_nasabah(row)

    def exists(self, payload: CheckByNikOrPhoneNumber) -> bool:
        """Return whether an account holder has the given NIK or phone number."""
        row = self.db.execute(
            "SELECT EXISTS (SELECT 1 FROM nasabah WHERE nik = ? OR phone_number = ?)",
            (payload.nik, payload.phone_number),
        ).fetchone()
        return bool(row[0])


class NasabahTransactionRepository:
    """Applies deposits and withdrawals and records them in the history table."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self.db = db

    def _apply(self, rekening_number: str, delta: int, kind: str, amount: int, description: str) -> int:
        with self.db:
            cursor = self.db.execute(
                "UPDATE nasabah SET total_money = total_money + ? WHERE rekening_number = ?",
                (delta, rekening_number),
            )
            if cursor.rowcount == 0:
                raise NasabahNotFoundError()
            nasabah_id, saldo = self.db.execute(
                "SELECT id, total_money FROM nasabah WHERE rekening_number = ?",
                (rekening_number,),
            ).fetchone()
            self.db.execute(_INSERT_HISTORY, (nasabah_id, kind, amount, description))
        logger.debug("%s of %d on account %s", kind, amount, rekening_number)
        return int(saldo)

    def deposit(self, rekening_number: str, amount: int) -> int:
        """Add ``amount`` to the account and return the new balance."""
        return self._apply(rekening_number, amount, "deposit", amount, "Deposit money")

    def withdraw(self, rekening_number: str, amount: int) -> int:
        """Subtract ``amount`` from the account and return the new balance."""
        return self._apply(rekening_number, -amount, "withdraw", amount, "Withdraw money")