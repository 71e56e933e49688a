"""Tests for the office field rules."""

import pytest

from offices.domain.policies.office_rules import (
    ADDRESS_MAX_LENGTH,
    check_active_flag,
    check_address,
    check_office_fields,
    check_phone_number,
)

# ─── Address ─────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "address",
    [
        "Main St 1",
        "O'Brien Ave. 12-B, Floor 3",
        "A" * ADDRESS_MAX_LENGTH,
        "Pushkina str, 10",
    ],
)
def test_valid_address(address):
    assert check_address(address) == []


@pytest.mark.parametrize("address", [None, "", "   "])
def test_address_required(address):
    errors = check_address(address)
    assert len(errors) == 1
    assert errors[0].field == "address"
    assert errors[0].message == "The Address is a required field"


def test_address_too_long():
    errors = check_address("A" * (ADDRESS_MAX_LENGTH + 1))
    assert [e.message for e in errors] == ["The address cannot exceed 100 characters"]


@pytest.mark.parametrize("address", ["Main St #1", "Main St 1!", "Улица 1", "a/b"])
def test_address_bad_characters(address):
    errors = check_address(address)
    assert len(errors) == 1
    assert errors[0].message.startswith("Invalid address format")


def test_address_too_long_and_bad_characters_reports_both():
    errors = check_address("#" * (ADDRESS_MAX_LENGTH + 1))
    assert len(errors) == 2


# ─── Phone ───────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "phone",
    [
        "+375 25-710-33-51",
        "+1 555-123-4567",
        "555-123-4567",
        "(555) 123-4567",
        "+44 20 1234 5678",
        "5551234567",
    ],
)
def test_valid_phone_numbers(phone):
    assert check_phone_number(phone) == []


@pytest.mark.parametrize("phone", [None, "", "  "])
def test_phone_required(phone):
    errors = check_phone_number(phone)
    assert [e.message for e in errors] == ["Registry phone number is required"]


@pytest.mark.parametrize("phone", ["abc", "555-123-4567x", "++1 555", "555--123"])
def test_invalid_phone_numbers(phone):
    errors = check_phone_number(phone)
    assert len(errors) == 1
    assert errors[0].field == "registryPhoneNumber"
    assert errors[0].message.startswith("Invalid phone number format")
    assert "+44 20 1234 5678" in errors[0].message


# ─── Active flag ─────────────────────────────────────────────────────


@pytest.mark.parametrize("flag", [True, False])
def test_active_flag_bool(flag):
    assert check_active_flag(flag) == []


def test_active_flag_missing():
    assert [e.message for e in check_active_flag(None)] == ["IsActive must not be null"]


@pytest.mark.parametrize("flag", ["true", 1, 0])
def test_active_flag_not_bool(flag):
    errors = check_active_flag(flag)
    assert errors[0].message == "Invalid IsActive value. It must be either true or false."


# ─── Combined ────────────────────────────────────────────────────────


def test_check_office_fields_valid():
    assert check_office_fields("Main St 1", "+1 555-123-4567", True) == []


def test_check_office_fields_collects_all():
    errors = check_office_fields("", "nope", None)
    assert [e.field for e in errors] == ["address", "registryPhoneNumber", "isActive"]
