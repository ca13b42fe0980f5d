"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Iterable
from os import PathLike
from typing import Protocol

from addressbook.domain import Contact

StrPath = str | PathLike[str]


class ContactStore(Protocol):
    """Reads and writes a whole list of contacts at a filesystem path."""

    def save(self, path: StrPath, contacts: Iterable[Contact]) -> None:
        """Write every contact, replacing any existing file at path."""
        ...

    def load(self, path: StrPath) -> list[Contact]:
        """Return all contacts stored at path, in file order."""
        ...
