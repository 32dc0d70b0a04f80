"""Account holder records, request payloads and their validation rules."""

from __future__ import annotations

import json
import re
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidRequestError

_NUMERIC = re.compile(r"^[-+]?[0-9]+(?:\.[0-9]+)?$")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class FieldError:
    """One failed rule: the attribute name and the rule tag that failed."""

    field: str
    tag: str

    def __str__(self) -> str:
        return f"field {self.field!r} failed on the {self.tag!r} rule"


class ValidationError(Exception):
    """Raised when a payload breaks one or more validation rules."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(error) for error in self.errors))


def _passes(tag: str, value: Any) -> bool:
    if tag == "required":
        return value != "" and value != 0
    if tag == "gt":
        return len(value) > 0 if isinstance(value, str) else value > 0
    if tag == "numeric":
        return isinstance(value, int) or bool(_NUMERIC.match(value))
    raise ValueError(f"unknown validation rule {tag!r}")


def _coerce(value: Any, kind: type, key: str) -> Any:
    if kind is str:
        if not isinstance(value, str):
            raise InvalidRequestError(f"field {key!r} must be a string")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(f"field {key!r} must be an integer")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidRequestError(f"field {key!r} is out of range")
    return value


def _bind(cls, data: Any):
    """Build a payload of class ``cls`` from JSON text or a decoded mapping.

    Unknown keys are ignored, missing keys and nulls keep the zero value,
    and key names match case-insensitively.
    """
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8", errors="replace")
    if isinstance(data, str):
        if not data.strip():
            return cls()
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise InvalidRequestError("request body is not valid JSON") from exc
    if not isinstance(data, Mapping):
        raise InvalidRequestError("request body must be a JSON object")

    exact = {key: (attr, kind) for attr, key, kind in cls._JSON}
    folded = {key.casefold(): (attr, kind) for attr, key, kind in cls._JSON}
    values: dict[str, Any] = {}
    for key, value in data.items():
        target = exact.get(key) or folded.get(str(key).casefold())
        if target is None or value is None:
            continue
        attr, kind = target
        values[attr] = _coerce(value, kind, str(key))
    return cls(**values)


def _check(payload: Any) -> None:
    """Raise ValidationError listing the first failed rule of each field."""
    errors = []
    for attr, tags in payload._RULES:
        value = getattr(payload, attr)
        failed = next((tag for tag in tags if not _passes(tag, value)), None)
        if failed is not None:
            errors.append(FieldError(attr, failed))
    if errors:
        raise ValidationError(errors)


class _Payload:
    """Shared JSON binding and rule checking for request payloads."""

    _JSON: tuple[tuple[str, str, type], ...] = ()
    _RULES: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @classmethod
    def from_json(cls, data: Any):
        """Build a payload from a JSON document or an already decoded mapping."""
        return _bind(cls, data)

    def validate(self) -> None:
        """Raise ValidationError listing the first failed rule of each field."""
        _check(self)


@dataclass
class Nasabah:
    """An account holder as stored in the database."""

    id: uuid.UUID = uuid.UUID(int=0)
    rekening_number: int = 0
    name: str = ""
    nik: str = ""
    phone_number: str = ""
    total_money: int = 0
    created_at: int = 0
    updated_at: int = 0
    deleted_at: int = 0

    def table_name(self) -> str:
        return "nasabah"


@dataclass
class CreateNasabah(_Payload):
    """Registration request of a new account holder."""

    name: str = ""
    nik: str = ""
    phone_number: str = ""

    _JSON = (("name", "nama", str), ("nik", "nik", str), ("phone_number", "no_hp", str))
    _RULES = (
        ("name", ("required",)),
        ("nik", ("required", "gt")),
        ("phone_number", ("required", "numeric")),
    )

    @classmethod
    def from_json(cls, data: Any) -> CreateNasabah:
        """Build a registration request from JSON text or a decoded mapping."""
        return _bind(cls, data)

    def validate(self) -> None:
        """Raise ValidationError if the request breaks a rule."""
        _check(self)


@dataclass
class TransactionPayload(_Payload):
    """Deposit or withdrawal request."""

    nasabah_id: str = ""
    amount: int = 0

    _JSON = (("nasabah_id", "no_rekening", str), ("amount", "nominal", int))
    _RULES = (
        ("nasabah_id", ("required", "numeric")),
        ("amount", ("required", "gt")),
    )

    @classmethod
    def from_json(cls, data: Any) -> TransactionPayload:
        """Build a transaction request from JSON text or a decoded mapping."""
        return _bind(cls, data)

    def validate(self) -> None:
        """Raise ValidationError if the request breaks a rule."""
        _check(self)


@dataclass
class CheckByNikOrPhoneNumber(_Payload):
    """Lookup of an account holder by NIK or phone number."""

    nik: str = ""
    phone_number: str = ""

    _JSON = (("nik", "nik", str), ("phone_number", "phone_number", str))
    _RULES = (
        ("nik", ("required", "gt")),
        ("phone_number", ("required", "numeric")),
    )

    def validate(self) -> None:
        """Raise ValidationError if the lookup breaks a rule."""
        _check(self)


@dataclass
class GetSaldoParameter(_Payload):
    """Path parameter of a balance request."""

    rekening_number: str = ""

    _JSON = (("rekening_number", "no_rekening", str),)
    _RULES = (("rekening_number", ("required", "numeric")),)

    def validate(self) -> None:
        """Raise ValidationError if the parameter breaks a rule."""
        _check(self)