"""OfficeRules — field rules an office must satisfy before it is persisted."""

from __future__ import annotations

import re

from offices.domain.exceptions import FieldError

ADDRESS_MAX_LENGTH = 100

ADDRESS_PATTERN = re.compile(r"[A-Za-z0-9'.\-\s,]+")

# Accepts e.g. "+375 25-710-33-51", "+1 555-123-4567", "555-123-4567",
# "(555) 123-4567" and "+44 20 1234 5678".
PHONE_PATTERN = re.compile(
    r"^\+?(\d{1,3}\s?)?(\(?\d{1,4}\)?[\s-]?)?(\d{1,4}[\s-]?)?(\d{1,4}[\s-]?)?(\d{1,9})$"
)

PHONE_FORMATS_HINT = (
    "'+375 25-710-33-51', '+1 555-123-4567', '555-123-4567', "
    "'(555) 123-4567', '+44 20 1234 5678'"
)


def check_address(address: str | None) -> list[FieldError]:
    if not address or not address.strip():
        return [FieldError("address", "The Address is a required field")]

    errors = []
    if len(address) > ADDRESS_MAX_LENGTH:
        errors.append(
            FieldError("address", f"The address cannot exceed {ADDRESS_MAX_LENGTH} characters")
        )
    if not ADDRESS_PATTERN.fullmatch(address):
        errors.append(
            FieldError(
                "address",
                "Invalid address format. Alphanumeric characters, spaces, commas, "
                "hyphens, and periods are allowed.",
            )
        )
    return errors


def check_phone_number(phone: str | None) -> list[FieldError]:
    if not phone or not phone.strip():
        return [FieldError("registryPhoneNumber", "Registry phone number is required")]

    if not PHONE_PATTERN.match(phone):
        return [
            FieldError(
                "registryPhoneNumber",
                f"Invalid phone number format. follow this formats: {PHONE_FORMATS_HINT}",
            )
        ]
    return []


def check_active_flag(is_active: object) -> list[FieldError]:
    if is_active is None:
        return [FieldError("isActive", "IsActive must not be null")]
    if not isinstance(is_active, bool):
        return [
            FieldError(
                "isActive",
                "Invalid IsActive value. It must be either true or false.",
            )
        ]
    return []


def check_office_fields(
    address: str | None,
    registry_phone_number: str | None,
    is_active: object,
) -> list[FieldError]:
    """Run every field rule and collect all failures.

    Returns:
        An empty list when the fields are valid.
    """
    return [
        *check_address(address),
        *check_phone_number(registry_phone_number),
        *check_active_flag(is_active),
    ]
