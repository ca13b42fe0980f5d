"""Address book use cases with explicit results instead of exceptions."""

import logging
import os
from collections.abc import Callable

from addressbook.application.address_book import AddressBook
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
from addressbook.application.ports import StrPath
from addressbook.domain import (
    Contact,
    ContactFileError,
    ContactIndexError,
    ContactParseError,
    ContactValidationError,
)

logger = logging.getLogger(__name__)

_NO_PATH = "No path given and no default contacts file configured."


class AddressBookService:
    """Add, remove, search, save and load contacts. Failures come back as result objects."""

    def __init__(
        self,
        book: AddressBook,
        *,
        default_path: StrPath | None = None,
        phone_key: Callable[[str], str] | None = None,
    ) -> None:
        self._book = book
        self._default_path = default_path
        self._phone_key = phone_key or str.strip

    @property
    def book(self) -> AddressBook:
        return self._book

    def _resolve_path(self, path: StrPath | None) -> str | None:
        chosen = path if path is not None else self._default_path
        return os.fspath(chosen) if chosen is not None else None

    def add_contact(self, card: ContactCardData) -> ContactAdded | Invalid:
        try:
            contact = card.to_contact()
        except ContactValidationError as e:
            return Invalid(reason=str(e))
        self._book.add(contact)
        return ContactAdded(index=len(self._book) - 1, contact=contact)

    def insert_contact(
        self, index: int, card: ContactCardData
    ) -> ContactAdded | IndexOutOfRange | Invalid:
        try:
            contact = card.to_contact()
            self._book.insert(index, contact)
        except ContactValidationError as e:
            return Invalid(reason=str(e))
        except ContactIndexError as e:
            return IndexOutOfRange(index=e.index, size=e.size)
        return ContactAdded(index=index, contact=contact)

    def update_contact(
        self, index: int, card: ContactCardData
    ) -> ContactUpdated | IndexOutOfRange | Invalid:
        """Apply the non-blank values of card to the contact at index."""
        changes = {
            name: value for name, value in vars(card).items() if value is not None
        }
        try:
            contact = self._book.update(index, **changes)
        except ContactValidationError as e:
            return Invalid(reason=str(e))
        except ContactIndexError as e:
            return IndexOutOfRange(index=e.index, size=e.size)
        return ContactUpdated(index=index, contact=contact)

    def remove_contact(self, contact: Contact) -> ContactRemoved | ContactNotFound:
        if self._book.remove(contact):
            return ContactRemoved(contact=contact)
        return ContactNotFound(contact=contact)

    def remove_at(self, index: int) -> ContactRemoved | IndexOutOfRange:
        try:
            contact = self._book.pop(index)
        except ContactIndexError as e:
            return IndexOutOfRange(index=e.index, size=e.size)
        return ContactRemoved(contact=contact)

    def list_contacts(self) -> list[Contact]:
        return self._book.contacts

    def search_contacts(self, keyword: str) -> list[Contact]:
        """Return contacts with keyword in any field (case-insensitive, partial)."""
        return self._book.search(keyword)

    def find_by_phone(self, number: str) -> list[Contact]:
        """Return contacts whose phone number is the same number as the given one.
        Numbers are compared through the configured phone key (E.164 when wired by the factory).
        """
        if not number or not number.strip():
            return []
        wanted = self._phone_key(number)
        return [
            contact
            for contact in self._book
            if contact.phone_number and self._phone_key(contact.phone_number) == wanted
        ]

    def save(self, path: StrPath | None = None) -> Saved | StorageFailed:
        target = self._resolve_path(path)
        if target is None:
            return StorageFailed(path="", reason=_NO_PATH)
        try:
            self._book.save_as_file(target)
        except ContactFileError as e:
            logger.warning("Saving contacts failed: %s", e)
            return StorageFailed(path=target, reason=str(e))
        logger.info("Saved %d contact(s) to %s", len(self._book), target)
        return Saved(path=target, count=len(self._book))

    def load(self, path: StrPath | None = None) -> Loaded | StorageFailed | ParseFailed:
        """Replace the book with the file's contacts. On failure the book is unchanged."""
        source = self._resolve_path(path)
        if source is None:
            return StorageFailed(path="", reason=_NO_PATH)
        try:
            self._book.read_from_file(source)
        except ContactFileError as e:
            logger.warning("Loading contacts failed: %s", e)
            return StorageFailed(path=source, reason=str(e))
        except ContactParseError as e:
            logger.warning("Contacts file %s is malformed: %s", source, e)
            return ParseFailed(path=source, line_number=e.line_number, reason=str(e))
        logger.info("Loaded %d contact(s) from %s", len(self._book), source)
        return Loaded(path=source, count=len(self._book))
