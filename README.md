# tabungan

Building blocks for a small savings-account service: customers (*nasabah*)
register, check their balance (*saldo*), deposit money (*tabung*) and
withdraw money (*tarik*). Every deposit and withdrawal is recorded in a
transaction history table within the same database transaction as the
balance update.

The package stores its data in SQLite and exposes its HTTP endpoints as
Flask handlers that you attach to your own Flask application.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What the package does not do

- There is no server command and no ready-made application object. You
  create the Flask application, attach the handlers and run it yourself (see
  below).
- There is no `/health` endpoint and no custom JSON reply for unknown routes;
  only the four account endpoints are provided.
- No database schema ships with the package. The tables must be created by
  your own SQL migration scripts (see *Preparing the database*).

## Configuration

`tabungan.config.load_config()` returns a frozen `Config`. It loads a `.env`
file from the working directory if there is one (variables already set in the
environment win); when the file is missing it prints a warning and uses the
process environment as is.

| Variable         | `Config` field    | Default                 |
|------------------|-------------------|-------------------------|
| `PUBLIC_HOST`    | `public_host`     | `localhost`             |
| `APP_ENV`        | `app_env`         | `development`           |
| `APP_DEBUG`      | `app_debug`       | `true`                  |
| `API_PORT`       | `api_port`        | `8090`                  |
| `DB_USERNAME`    | `db_username`     | `postgres`              |
| `DB_PORT`        | `db_port`         | `5432`                  |
| `DB_PASSWORD`    | `db_password`     | *(empty)*               |
| `DB_HOST`        | `db_host`         | `localhost`             |
| `DB_NAME`        | `db_name`         | *(empty)*               |
| `JWT_SECRET`     | `jwt_secret`      | `secret`                |
| `JWT_EXPIRE`     | `jwt_expire`      | `7200`                  |
| `BCRYPT_SALT`    | `bcrypt_salt`     | `10`                    |
| `S3_REGION`      | `s3_region`       | *(empty)*               |
| `S3_ID`          | `s3_id`           | *(empty)*               |
| `S3_SECRET_KEY`  | `s3_secret_key`   | *(empty)*               |
| `S3_BUCKET_NAME` | `s3_bucket_name`  | *(empty)*               |
| `APP_URL`        | `app_url`         | `http://localhost:8089` |

`JWT_EXPIRE` is read as a base-10 integer; a malformed value gives `0`.
The helpers `get_env(key, default)` and `get_env_int(key, default)` are
available on their own.

Of the database settings, only `DB_NAME` is used: `tabungan.database.connect_db(config)`
opens the SQLite file it names, or a private in-memory database when it is
empty, and raises `ConnectionError` if the database cannot be opened or does
not answer.

## Preparing the database

`tabungan-migrate` reads SQL files from `scripts/database/migration`
relative to the working directory. Files ending in `.up.sql` are applied in
name order; files ending in `.down.sql` are run in reverse name order.

```
tabungan-migrate up
tabungan-migrate down
```

The command exits with status 0 on success and 1 on failure. From Python,
`tabungan.migration.migrate_up(db, directory)` and
`migrate_down(db, directory)` do the same for any directory and return the
names of the scripts they ran.

The repositories expect a `nasabah` table with the columns `id` (UUID text),
`name`, `nik`, `phone_number`, `rekening_number` (assigned by the database on
insert) and `total_money` (starting at zero), and a
`history_transaction_nasabah` table with `nasabah_id`, `transaction_type`,
`amount` and `description`. One schema that fits, as `001_init.up.sql`:

```sql
CREATE TABLE nasabah (
    rekening_number INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    nik TEXT NOT NULL UNIQUE,
    phone_number TEXT NOT NULL UNIQUE,
    total_money INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE history_transaction_nasabah (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nasabah_id TEXT NOT NULL REFERENCES nasabah(id),
    transaction_type TEXT NOT NULL,
    amount INTEGER NOT NULL,
    description TEXT
);
```

## Running the endpoints

```python
from flask import Flask

from tabungan.config import load_config
from tabungan.database import connect_db
from tabungan.handlers import NasabahHandler
from tabungan.repository import NasabahRepository, NasabahTransactionRepository
from tabungan.services import RegisterService, TransactionService

config = load_config()
db = connect_db(config)

nasabah_repository = NasabahRepository(db)
handler = NasabahHandler(
    RegisterService(nasabah_repository),
    TransactionService(NasabahTransactionRepository(db), nasabah_repository),
)

app = Flask(__name__)
handler.register_routes(app)
app.run(port=int(config.api_port))
```

## HTTP API

All bodies are JSON. Errors come back as `{"remark": "..."}`.

### `POST /daftar` — register a customer

```json
{"nama": "Budi", "nik": "12345", "no_hp": "0800"}
```

All three fields are required and `no_hp` must be numeric; otherwise the
answer is `400` with `"Request tidak valid"`. On success the new account
number comes back as a string:

```json
{"rekening_number": "1"}
```

If the NIK or phone number is already registered the answer is `409` with
`"NIK atau nomor handphone sudah terdaftar"`.

### `GET /saldo/<no_rekening>` — balance

```json
{"saldo": 0}
```

A non-numeric account number gives `400` with `"Nomor rekening tidak valid"`;
an unknown one gives `400` with `"Nomor rekening tidak dikenali"`.

### `POST /tabung` — deposit

```json
{"no_rekening": "1", "nominal": 50000}
```

Returns the new balance as `{"saldo": ...}`. A missing or non-numeric
`no_rekening` gives `"Nomor rekening tidak valid"`, a missing or zero
`nominal` gives `"Nominal tidak valid"`, a negative one
`"Nominal harus lebih besar dari 0"`, all with status `400`.

### `POST /tarik` — withdraw

Same body and checks as a deposit. A withdrawal larger than the current
balance gives `400` with `"Saldo tidak mencukupi"`.

## Using the pieces as a library

- `tabungan.models` — `CreateNasabah`, `TransactionPayload`,
  `CheckByNikOrPhoneNumber` and `GetSaldoParameter` with `validate()`, which
  raises `ValidationError` listing one `FieldError(field, tag)` per failed
  field; `CreateNasabah.from_json` and `TransactionPayload.from_json` accept
  JSON text, bytes or a mapping.
- `tabungan.services` — `RegisterService.register(payload)` and
  `TransactionService.check_saldo`, `deposit` and `withdraw`.
- `tabungan.errors` — `BankError` and its subclasses, such as
  `InsufficientBalanceError`, `NasabahAlreadyExistError` and
  `NasabahNotFoundError`.
- `tabungan.passwords` — `hash_password` (bcrypt, cost from `BCRYPT_SALT`),
  `compare_passwords`, `is_valid_password`, `valid_password` and
  `generate_random_password`.
- `tabungan.common` — small helpers such as `str_pad_left`,
  `arr_to_str_delimiter`, `first_saturday`, `calculate_end_date`, `get_uuid`
  and `get_slug`.