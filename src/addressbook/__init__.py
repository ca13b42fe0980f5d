"""
Address book core: clean-architecture layout.

- domain: Contact, ContactBuilder, field policy and errors. No outer dependencies.
- application: AddressBook aggregate, AddressBookService use cases, ports, DTOs.
- infrastructure: adapters (DelimitedTextContactStore, phone normalization).
"""

from addressbook.application import (
    AddressBook,
    AddressBookService,
    ContactAdded,
    ContactCardData,
    ContactNotFound,
    ContactRemoved,
    ContactStore,
    ContactUpdated,
    IndexOutOfRange,
    Invalid,
    Loaded,
    ParseFailed,
    Saved,
    StorageFailed,
)
from addressbook.domain import (
    AddressBookError,
    Contact,
    ContactBuilder,
    ContactFileError,
    ContactIndexError,
    ContactParseError,
    ContactValidationError,
)
from addressbook.infrastructure import DelimitedTextContactStore

__all__ = [
    "AddressBook",
    "AddressBookError",
    "AddressBookService",
    "Contact",
    "ContactAdded",
    "ContactBuilder",
    "ContactCardData",
    "ContactFileError",
    "ContactIndexError",
    "ContactNotFound",
    "ContactParseError",
    "ContactRemoved",
    "ContactStore",
    "ContactUpdated",
    "ContactValidationError",
    "DelimitedTextContactStore",
    "IndexOutOfRange",
    "Invalid",
    "Loaded",
    "ParseFailed",
    "Saved",
    "StorageFailed",
]
