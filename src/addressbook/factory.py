"""Wires settings, the text file store and phone matching into an AddressBookService."""

from addressbook.application import AddressBook, AddressBookService
from addressbook.config import Settings, load_settings
from addressbook.infrastructure import DelimitedTextContactStore, PhoneMatcher


def create_service(settings: Settings | None = None) -> AddressBookService:
    """Return a service over an empty book, saving to and loading from settings.data_file."""
    if settings is None:
        settings = load_settings()
    store = DelimitedTextContactStore(encoding=settings.encoding)
    return AddressBookService(
        AddressBook(store),
        default_path=settings.data_file,
        phone_key=PhoneMatcher(settings.phone_region).key,
    )
