"""Password hashing, strength checks and random password generation."""

from __future__ import annotations

import os
import re
import secrets
import unicodedata

import bcrypt

_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*()_+"
_UPPERCASE = re.compile(r"[A-Z]")
_SYMBOL = re.compile(r"[!@#~$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]+")
_MIN_COST = 4
_MAX_COST = 31
_DEFAULT_COST = 10
_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash ``password`` with bcrypt using the cost from ``BCRYPT_SALT`` (default 10).

    Costs below the minimum fall back to the default; a non-integer cost,
    a cost above 31, or a password over 72 bytes raises ValueError.
    """
    cost = int(os.environ.get("BCRYPT_SALT") or str(_DEFAULT_COST))
    if cost < _MIN_COST:
        cost = _DEFAULT_COST
    if cost > _MAX_COST:
        raise ValueError(f"bcrypt cost {cost} is outside the allowed range")
    raw = password.encode("utf-8")
    if len(raw) > _MAX_BYTES:
        raise ValueError("password length exceeds 72 bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=cost)).decode("ascii")


def compare_passwords(hashed: str, plain: bytes | str) -> bool:
    """Return whether ``plain`` matches the bcrypt hash ``hashed``."""
    if isinstance(plain, str):
        plain = plain.encode("utf-8")
    try:
        return bcrypt.checkpw(plain, hashed.encode("utf-8"))
    except ValueError:
        return False


def is_valid_password(password: str) -> bool:
    """At least 8 bytes long with an ASCII capital letter and a symbol."""
    if len(password.encode("utf-8")) < 8:
        return False
    return bool(_UPPERCASE.search(password)) and bool(_SYMBOL.search(password))


def generate_random_password(length: int) -> str:
    """Random string of ``length`` characters from letters, digits and symbols."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(secrets.choice(_CHARSET) for _ in range(length))


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in "\x1c\x1d\x1e\x1f"


def _is_upper(ch: str) -> bool:
    return unicodedata.category(ch) in ("Lu", "Lt")


def _is_lower(ch: str) -> bool:
    return unicodedata.category(ch) == "Ll"


def _is_special(ch: str) -> bool:
    return _is_space(ch) or unicodedata.category(ch)[0] in "SPM"


_CLASSES = (
    ("upper case", _is_upper),
    ("lower case", _is_lower),
    ("special", _is_special),
)


def valid_password(text: str) -> None:
    """Raise ValueError unless ``text`` has an upper case, lower case and special character."""
    for name, belongs in _CLASSES:
        if not any(belongs(ch) for ch in text):
            raise ValueError(f"password must have at least one {name} character")