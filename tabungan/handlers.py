"""HTTP handlers for registration, balance queries, deposits and withdrawals."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from .errors import (
    InsufficientBalanceError,
    InvalidRequestError,
    NasabahAlreadyExistError,
    NasabahNotFoundError,
)
from .models import CreateNasabah, GetSaldoParameter, TransactionPayload, ValidationError
from .services import RegisterService, TransactionService

logger = logging.getLogger(__name__)

_INVALID_REQUEST = "Request tidak valid"
_INVALID_ACCOUNT = "Nomor rekening tidak valid"
_UNKNOWN_ACCOUNT = "Nomor rekening tidak dikenali"
_AMOUNT_NOT_POSITIVE = "Nominal harus lebih besar dari 0"
_INVALID_AMOUNT = "Nominal tidak valid"
_INSUFFICIENT = "Saldo tidak mencukupi"
_INTERNAL = "Terjadi kesalahan internal"
_SERVER_FAULT = "Terjadi kesalahan pada server"
_ALREADY_REGISTERED = "NIK atau nomor handphone sudah terdaftar"


class _Rejected(Exception):
    """A request refused before it reaches the services."""

    def __init__(self, remark: str) -> None:
        super().__init__(remark)
        self.remark = remark


def _reply(body: dict[str, Any], status: int):
    return jsonify(body), status


def _remark(remark: str, status: int):
    return _reply({"remark": remark}, status)


def _transaction_payload() -> TransactionPayload:
    """Bind and validate a deposit or withdrawal body, raising _Rejected on failure."""
    try:
        payload = TransactionPayload.from_json(request.get_data())
    except InvalidRequestError as exc:
        logger.warning("Handler: Error binding request: %s", exc)
        raise _Rejected(_INVALID_REQUEST) from exc

    try:
        payload.validate()
    except ValidationError as exc:
        logger.warning("Handler: Error binding request: %s", exc)
        for error in exc.errors:
            if error.field == "nasabah_id":
                raise _Rejected(_INVALID_ACCOUNT) from exc
            if error.field == "amount":
                if error.tag == "gt":
                    raise _Rejected(_AMOUNT_NOT_POSITIVE) from exc
                raise _Rejected(_INVALID_AMOUNT) from exc
        raise _Rejected(_INVALID_REQUEST) from exc
    return payload


class NasabahHandler:
    """Request handlers of the account holder endpoints."""

    def __init__(
        self,
        register_service: RegisterService,
        transaction_service: TransactionService,
    ) -> None:
        self.register_service = register_service
        self.transaction_service = transaction_service

    def create_nasabah(self):
        """Register a new account holder from the JSON body."""
        try:
            payload = CreateNasabah.from_json(request.get_data())
            payload.validate()
        except (InvalidRequestError, ValidationError) as exc:
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_INVALID_REQUEST, 400)

        try:
            rekening_number = self.register_service.register(payload)
        except NasabahAlreadyExistError as exc:
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_ALREADY_REGISTERED, 409)
        except Exception as exc:  # noqa: BLE001 - every other failure is a server fault
            logger.warning("Handler: Internal server error: %s", exc)
            return _remark(_SERVER_FAULT, 500)

        return _reply({"rekening_number": rekening_number}, 200)

    def get_saldo(self, no_rekening: str):
        """Return the balance of the account named in the path."""
        param = GetSaldoParameter(rekening_number=no_rekening)
        try:
            param.validate()
        except ValidationError as exc:
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_INVALID_ACCOUNT, 400)

        try:
            saldo = self.transaction_service.check_saldo(param.rekening_number)
        except NasabahNotFoundError as exc:
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_UNKNOWN_ACCOUNT, 400)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_INTERNAL, 500)

        return _reply({"saldo": saldo}, 200)

    def deposit(self):
        """Deposit money into an account and return the new balance."""
        try:
            payload = _transaction_payload()
        except _Rejected as rejected:
            return _remark(rejected.remark, 400)

        try:
            saldo = self.transaction_service.deposit(payload.nasabah_id, payload.amount)
        except NasabahNotFoundError as exc:
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_UNKNOWN_ACCOUNT, 400)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_INTERNAL, 500)

        return _reply({"saldo": saldo}, 200)

    def withdraw(self):
        """Withdraw money from an account and return the new balance."""
        try:
            payload = _transaction_payload()
        except _Rejected as rejected:
            return _remark(rejected.remark, 400)

        try:
            saldo = self.transaction_service.withdraw(payload.nasabah_id, payload.amount)
        except NasabahNotFoundError as exc:
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_UNKNOWN_ACCOUNT, 400)
        except InsufficientBalanceError as exc:
            logger.warning("Handler: Error binding request: %s", exc)
            return _remark(_INSUFFICIENT, 400)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Handler: Internal Server Error: %s", exc)
            return _remark(_INTERNAL, 500)

        return _reply({"saldo": saldo}, 200)

    def register_routes(self, app: Flask) -> None:
        """Attach the account holder endpoints to ``app``."""
        app.add_url_rule("/daftar", "daftar", self.create_nasabah, methods=["POST"])
        app.add_url_rule("/saldo/<no_rekening>", "saldo", self.get_saldo, methods=["GET"])
        app.add_url_rule("/tabung", "tabung", self.deposit, methods=["POST"])
        app.add_url_rule("/tarik", "tarik", self.withdraw, methods=["POST"])