"""AddressBook aggregate: an ordered list of contacts with search and file persistence."""

from collections.abc import Iterator

from addressbook.application.ports import ContactStore, StrPath
from addressbook.domain import Contact, ContactIndexError

SEPARATOR_LINE = "-" * 32 + "\n"


class AddressBook:
    """Ordered, index-addressable contacts. Duplicates are allowed.
    The list is the only state; search and save scan it linearly.
    """

    def __init__(self, store: ContactStore) -> None:
        self._store = store
        self._contacts: list[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))

    @property
    def contacts(self) -> list[Contact]:
        return list(self._contacts)

    def _check_index(self, index: int, upper: int) -> None:
        if index < 0 or index > upper:
            raise ContactIndexError(index, len(self._contacts))

    def add(self, contact: Contact) -> bool:
        """Append contact to the end. Always returns True."""
        self._contacts.append(contact)
        return True

    def insert(self, index: int, contact: Contact) -> None:
        """Insert at index, shifting later contacts right. index == len(book) appends."""
        self._check_index(index, len(self._contacts))
        self._contacts.insert(index, contact)

    def get(self, index: int) -> Contact:
        self._check_index(index, len(self._contacts) - 1)
        return self._contacts[index]

    def update(self, index: int, **changes: str | None) -> Contact:
        """Replace the contact at index with a copy carrying changes. Blank values are ignored."""
        updated = self.get(index).updated(**changes)
        self._contacts[index] = updated
        return updated

    def remove(self, contact: Contact) -> bool:
        """Remove the first contact equal to contact. Returns False if none matched."""
        try:
            self._contacts.remove(contact)
        except ValueError:
            return False
        return True

    def pop(self, index: int) -> Contact:
        """Remove and return the contact at index."""
        self._check_index(index, len(self._contacts) - 1)
        return self._contacts.pop(index)

    def clear(self) -> None:
        self._contacts.clear()

    def search(self, keyword: str) -> list[Contact]:
        """Return contacts with keyword in any field (case-insensitive, partial), in book order.
        An empty keyword matches every contact.
        """
        needle = (keyword or "").casefold()
        return [
            contact
            for contact in self._contacts
            if any(needle in value.casefold() for value in contact.as_tuple())
        ]

    def save_as_file(self, path: StrPath) -> None:
        """Write all contacts to path, overwriting it."""
        self._store.save(path, self._contacts)

    def read_from_file(self, path: StrPath) -> None:
        """Replace the contents with the contacts stored at path.
        The whole file is parsed first; on error the book is unchanged.
        """
        loaded = self._store.load(path)
        self._contacts = loaded

    def __str__(self):
        return "".join(f"{contact}{SEPARATOR_LINE}" for contact in self._contacts)
