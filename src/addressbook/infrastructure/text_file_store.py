"""Plain-text contact store: one contact per line, fields joined by ",,,".

Line layout (field order fixed, trailing delimiter after the note):
    name,,,street,,,city,,,state,,,zip,,,phone,,,email,,,note,,,
Lines that are blank after trimming are skipped on read and never written.
"""

import os
from collections.abc import Iterable

from addressbook.application.ports import StrPath
from addressbook.domain import (
    CONTACT_FIELDS,
    DELIMITER,
    Contact,
    ContactBuilder,
    ContactFileError,
    ContactParseError,
    ContactValidationError,
)


def format_line(contact: Contact) -> str:
    """Serialize one contact, without the line terminator."""
    return "".join(value + DELIMITER for value in contact.as_tuple())


def parse_line(line: str, line_number: int = 1) -> Contact:
    """Parse one stored line. Tokens past the eighth (the trailing one) are ignored."""
    tokens = line.split(DELIMITER)
    if len(tokens) < len(CONTACT_FIELDS):
        raise ContactParseError(line_number, line, len(tokens))
    name, street, city, state, zip_code, phone, email, note = tokens[: len(CONTACT_FIELDS)]
    try:
        return (
            ContactBuilder(name)
            .address_street(street)
            .address_city(city)
            .address_state(state)
            .address_zip(zip_code)
            .phone_number(phone)
            .email(email)
            .note(note)
            .build()
        )
    except ContactValidationError as e:
        raise ContactParseError(
            line_number,
            line,
            len(tokens),
            reason=f"invalid value for {e.field_name!r}: {e.reason}",
        ) from e


class DelimitedTextContactStore:
    """Reads and writes the ",,," text format. File handles are always closed."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def save(self, path: StrPath, contacts: Iterable[Contact]) -> None:
        path = os.fspath(path)
        try:
            with open(path, "w", encoding=self._encoding, newline="\n") as f:
                for contact in contacts:
                    f.write(format_line(contact) + "\n")
        except OSError as e:
            raise ContactFileError(path, e) from e

    def load(self, path: StrPath) -> list[Contact]:
        path = os.fspath(path)
        contacts: list[Contact] = []
        line_number = 0
        try:
            with open(path, encoding=self._encoding) as f:
                for line_number, raw in enumerate(f, start=1):
                    line = raw.rstrip("\r\n")
                    if not line.strip():
                        continue
                    contacts.append(parse_line(line, line_number))
        except UnicodeDecodeError as e:
            # Text is decoded in chunks: this is the first line not yet read, not the exact one.
            raise ContactParseError(
                line_number + 1,
                "",
                reason=f"not valid {self._encoding} text ({e.reason})",
            ) from e
        except OSError as e:
            raise ContactFileError(path, e) from e
        return contacts
