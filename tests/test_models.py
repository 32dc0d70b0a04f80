import json
import uuid

import pytest

from tabungan.errors import InvalidRequestError
from tabungan.models import (
    CheckByNikOrPhoneNumber,
    CreateNasabah,
    FieldError,
    GetSaldoParameter,
    Nasabah,
    TransactionPayload,
    ValidationError,
)


def test_nasabah_table_name():
    assert Nasabah().table_name() == "nasabah"


def test_nasabah_zero_values():
    holder = Nasabah()
    assert holder.id == uuid.UUID(int=0)
    assert holder.total_money == 0


def test_create_nasabah_from_mapping_and_validate():
    payload = CreateNasabah.from_json({"nama": "Budi", "nik": "3201", "no_hp": "0812"})
    payload.validate()
    assert (payload.name, payload.nik, payload.phone_number) == ("Budi", "3201", "0812")


def test_create_nasabah_from_json_text_ignores_unknown_keys():
    body = json.dumps({"nama": "Sari", "nik": "77", "no_hp": "555", "extra": 1})
    payload = CreateNasabah.from_json(body)
    assert payload == CreateNasabah(name="Sari", nik="77", phone_number="555")


def test_keys_match_case_insensitively():
    payload = CreateNasabah.from_json({"NAMA": "Sari"})
    assert payload.name == "Sari"


def test_empty_body_gives_zero_payload():
    assert TransactionPayload.from_json(b"") == TransactionPayload()


def test_null_keeps_zero_value():
    assert TransactionPayload.from_json({"nominal": None}).amount == 0


def test_missing_fields_fail_required():
    payload = CreateNasabah.from_json({})
    with pytest.raises(ValidationError) as info:
        payload.validate()
    assert info.value.errors == [
        FieldError("name", "required"),
        FieldError("nik", "required"),
        FieldError("phone_number", "required"),
    ]


def test_phone_number_must_be_numeric():
    payload = CreateNasabah(name="Budi", nik="1", phone_number="08ab")
    with pytest.raises(ValidationError) as info:
        payload.validate()
    assert info.value.errors == [FieldError("phone_number", "numeric")]


@pytest.mark.parametrize("body", ["{not json", "[1, 2]", 5, None])
def test_malformed_body_is_invalid_request(body):
    with pytest.raises(InvalidRequestError):
        TransactionPayload.from_json(body)


@pytest.mark.parametrize("amount", ["10", 1.5, True])
def test_amount_must_be_integer(amount):
    with pytest.raises(InvalidRequestError):
        TransactionPayload.from_json({"no_rekening": "1", "nominal": amount})


def test_amount_out_of_int64_range():
    with pytest.raises(InvalidRequestError):
        TransactionPayload.from_json({"nominal": 2**63})


def test_rekening_must_be_string():
    with pytest.raises(InvalidRequestError):
        TransactionPayload.from_json({"no_rekening": 100})


def test_zero_amount_fails_required():
    payload = TransactionPayload.from_json({"no_rekening": "100", "nominal": 0})
    with pytest.raises(ValidationError) as info:
        payload.validate()
    assert info.value.errors == [FieldError("amount", "required")]


def test_negative_amount_fails_gt():
    payload = TransactionPayload.from_json({"no_rekening": "100", "nominal": -5})
    with pytest.raises(ValidationError) as info:
        payload.validate()
    assert info.value.errors == [FieldError("amount", "gt")]


def test_transaction_payload_valid():
    payload = TransactionPayload.from_json({"no_rekening": "100", "nominal": 50})
    payload.validate()
    assert (payload.nasabah_id, payload.amount) == ("100", 50)


def test_non_numeric_rekening_fails():
    payload = TransactionPayload(nasabah_id="12a", amount=3)
    with pytest.raises(ValidationError) as info:
        payload.validate()
    assert info.value.errors == [FieldError("nasabah_id", "numeric")]


@pytest.mark.parametrize("value", ["123", "-12", "+1.5"])
def test_saldo_parameter_numeric_forms_accepted(value):
    param = GetSaldoParameter(rekening_number=value)
    param.validate()
    assert param.rekening_number == value


@pytest.mark.parametrize("value, tag", [("", "required"), ("1.", "numeric"), ("x1", "numeric")])
def test_saldo_parameter_rejected(value, tag):
    with pytest.raises(ValidationError) as info:
        GetSaldoParameter(rekening_number=value).validate()
    assert info.value.errors == [FieldError("rekening_number", tag)]


def test_check_by_nik_or_phone():
    check = CheckByNikOrPhoneNumber(nik="", phone_number="12")
    with pytest.raises(ValidationError) as info:
        check.validate()
    assert [error.field for error in info.value.errors] == ["nik"]
    assert "nik" in str(info.value)