"""Error taxonomy for the address book. Raised by domain and application code."""


class AddressBookError(Exception):
    """Base class for every address book error."""


class ContactValidationError(AddressBookError, ValueError):
    """A field value would corrupt the persisted text format."""

    def __init__(self, field_name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {field_name!r}: {reason}.")
        self.field_name = field_name
        self.value = value
        self.reason = reason


class ContactIndexError(AddressBookError, IndexError):
    """Positional insert or remove with an index outside the book."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} out of range for address book of size {size}.")
        self.index = index
        self.size = size


class ContactParseError(AddressBookError, ValueError):
    """A persisted line cannot be turned into a contact."""

    def __init__(
        self,
        line_number: int,
        line: str,
        token_count: int | None = None,
        reason: str | None = None,
    ) -> None:
        if reason is None:
            reason = f"expected 8 fields, found {token_count}"
        super().__init__(f"Line {line_number}: {reason}.")
        self.line_number = line_number
        self.line = line
        self.token_count = token_count
        self.reason = reason


class ContactFileError(AddressBookError, OSError):
    """The contacts file could not be opened, read or written."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Cannot access contacts file {path!r}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause
