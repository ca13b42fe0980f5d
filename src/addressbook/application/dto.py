"""Input DTO and result types for address book operations."""

from dataclasses import dataclass

from addressbook.domain import Contact, ContactBuilder


@dataclass(frozen=True)
class ContactCardData:
    """Raw field values for a contact, as entered by a caller. None means not given."""

    name: str | None = None
    address_street: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    phone_number: str | None = None
    email: str | None = None
    note: str | None = None

    def to_contact(self) -> Contact:
        return (
            ContactBuilder(self.name)
            .address_street(self.address_street)
            .address_city(self.address_city)
            .address_state(self.address_state)
            .address_zip(self.address_zip)
            .phone_number(self.phone_number)
            .email(self.email)
            .note(self.note)
            .build()
        )


# --- add / insert / update results ---


@dataclass(frozen=True)
class ContactAdded:
    """Contact was stored at the given position."""

    index: int
    contact: Contact


@dataclass(frozen=True)
class ContactUpdated:
    """Contact at index was replaced with the updated copy."""

    index: int
    contact: Contact


@dataclass(frozen=True)
class Invalid:
    """Card data was rejected (e.g. a value that cannot be persisted)."""

    reason: str


@dataclass(frozen=True)
class IndexOutOfRange:
    """Positional operation with an index outside the book."""

    index: int
    size: int


# --- remove results ---


@dataclass(frozen=True)
class ContactRemoved:
    contact: Contact


@dataclass(frozen=True)
class ContactNotFound:
    """No contact equal to the given one is in the book."""

    contact: Contact


# --- save / load results ---


@dataclass(frozen=True)
class Saved:
    path: str
    count: int


@dataclass(frozen=True)
class Loaded:
    path: str
    count: int


@dataclass(frozen=True)
class StorageFailed:
    """The contacts file could not be opened, read or written."""

    path: str
    reason: str


@dataclass(frozen=True)
class ParseFailed:
    """A line of the contacts file is malformed. The book was left unchanged."""

    path: str
    line_number: int
    reason: str
