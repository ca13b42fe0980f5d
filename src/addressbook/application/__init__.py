"""Application layer: AddressBook aggregate, use cases, ports and DTOs. Depends only on domain."""

from addressbook.application.address_book import SEPARATOR_LINE, AddressBook
from addressbook.application.address_book_service import AddressBookService
from addressbook.application.dto import (
    ContactAdded,
    ContactCardData,
    ContactNotFound,
    ContactRemoved,
    ContactUpdated,
    IndexOutOfRange,
    Invalid,
    Loaded,
    ParseFailed,
    Saved,
    StorageFailed,
)
from addressbook.application.ports import ContactStore

__all__ = [
    "AddressBook",
    "AddressBookService",
    "ContactAdded",
    "ContactCardData",
    "ContactNotFound",
    "ContactRemoved",
    "ContactStore",
    "ContactUpdated",
    "IndexOutOfRange",
    "Invalid",
    "Loaded",
    "ParseFailed",
    "SEPARATOR_LINE",
    "Saved",
    "StorageFailed",
]
