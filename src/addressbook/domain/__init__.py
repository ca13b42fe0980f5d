"""Domain layer: Contact, its builder, field policy and errors. No dependencies on outer layers."""

from addressbook.domain.entities import (
    CONTACT_FIELDS,
    DELIMITER,
    Contact,
    ContactBuilder,
    apply_if_present,
    check_field_value,
)
from addressbook.domain.errors import (
    AddressBookError,
    ContactFileError,
    ContactIndexError,
    ContactParseError,
    ContactValidationError,
)

__all__ = [
    "AddressBookError",
    "CONTACT_FIELDS",
    "Contact",
    "ContactBuilder",
    "ContactFileError",
    "ContactIndexError",
    "ContactParseError",
    "ContactValidationError",
    "DELIMITER",
    "apply_if_present",
    "check_field_value",
]
