"""Domain errors raised by the banking services."""

from __future__ import annotations


class BankError(Exception):
    """Base class of all domain errors."""

    default_message = "Bank error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidRequestError(BankError):
    default_message = "Invalid request"


class InternalServerError(BankError):
    default_message = "Internal server error"


class UnauthorizedError(BankError):
    default_message = "Unauthorized"


class ForbiddenError(BankError):
    default_message = "Forbidden"


class InsufficientBalanceError(BankError):
    default_message = "Insufficient balance"


class NasabahNotFoundError(BankError):
    default_message = "Nasabah not found"


class NasabahAlreadyExistError(BankError):
    default_message = "Nasabah already exist"