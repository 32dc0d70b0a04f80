"""Application settings read from the environment and an optional .env file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Config:
    """Runtime settings of the service."""

    public_host: str = "localhost"
    app_env: str = "development"
    app_debug: str = "true"
    api_port: str = "8090"
    db_username: str = "postgres"
    db_port: str = "5432"
    db_password: str = ""
    db_host: str = "localhost"
    db_name: str = ""
    jwt_secret: str = "secret"
    jwt_expire: int = 3600 * 2
    bcrypt_salt: str = "10"
    s3_region: str = ""
    s3_id: str = ""
    s3_secret_key: str = ""
    s3_bucket_name: str = ""
    app_url: str = "http://localhost:8089"


_STRING_SETTINGS = (
    ("public_host", "PUBLIC_HOST"),
    ("app_env", "APP_ENV"),
    ("app_debug", "APP_DEBUG"),
    ("api_port", "API_PORT"),
    ("db_username", "DB_USERNAME"),
    ("db_port", "DB_PORT"),
    ("db_password", "DB_PASSWORD"),
    ("db_host", "DB_HOST"),
    ("db_name", "DB_NAME"),
    ("jwt_secret", "JWT_SECRET"),
    ("bcrypt_salt", "BCRYPT_SALT"),
    ("s3_region", "S3_REGION"),
    ("s3_id", "S3_ID"),
    ("s3_secret_key", "S3_SECRET_KEY"),
    ("s3_bucket_name", "S3_BUCKET_NAME"),
    ("app_url", "APP_URL"),
)


def get_env(key: str, default: str) -> str:
    """Return the environment variable ``key``, or ``default`` when it is unset."""
    return os.environ.get(key, default)


def get_env_int(key: str, default: int) -> int:
    """Return ``key`` as a base-10 integer, ``default`` when unset, 0 when malformed.

    Values beyond the 64-bit range are clamped to its limits.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    if not _INTEGER.fullmatch(value):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(value)))


def load_config() -> Config:
    """Load ``.env`` from the working directory if present and build a Config.

    Variables already set in the environment take precedence over the file.
    """
    env_file = Path(".env")
    if env_file.is_file():
        load_dotenv(env_file)
    else:
        print(
            "[WARNING] .env file not found or could not be loaded. "
            "Proceeding with system environment variables."
        )

    defaults = Config()
    values = {attr: get_env(key, getattr(defaults, attr)) for attr, key in _STRING_SETTINGS}
    values["jwt_expire"] = get_env_int("JWT_EXPIRE", defaults.jwt_expire)
    return Config(**values)