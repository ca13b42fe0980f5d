"""Domain entities: Contact and its ContactBuilder."""

from dataclasses import dataclass, fields, replace

from addressbook.domain.errors import ContactValidationError

# Persisted field separator. Field values may not contain it.
DELIMITER = ",,,"

CONTACT_FIELDS = (
    "name",
    "address_street",
    "address_city",
    "address_state",
    "address_zip",
    "phone_number",
    "email",
    "note",
)

_LABELS = (
    "Name",
    "Street Address",
    "Address City",
    "Address State",
    "Address ZIP",
    "Phone Number",
    "Email",
    "Note",
)


def apply_if_present(current: str, value: str | None) -> str:
    """Return value if it is a non-blank string, otherwise keep current.

    Every way of setting a Contact field goes through this policy, so a None or
    all-whitespace input never overwrites what is already there.
    """
    if value is None or not str(value).strip():
        return current
    return value


def check_field_value(field_name: str, value: str) -> None:
    """Raise ContactValidationError if value cannot be stored on one line."""
    if "\n" in value or "\r" in value:
        raise ContactValidationError(field_name, value, "line breaks are not allowed")
    if DELIMITER in value:
        raise ContactValidationError(
            field_name, value, f"the sequence {DELIMITER!r} is not allowed"
        )
    # A comma at either edge would merge with the neighbouring delimiter.
    if value.startswith(",") or value.endswith(","):
        raise ContactValidationError(
            field_name, value, "a leading or trailing comma is not allowed"
        )


@dataclass(frozen=True, eq=False)
class Contact:
    """
    One address book entry: a name plus seven optional fields.
    Immutable once created; equality ignores letter case.
    """

    name: str = ""
    address_street: str = ""
    address_city: str = ""
    address_state: str = ""
    address_zip: str = ""
    phone_number: str = ""
    email: str = ""
    note: str = ""

    def __post_init__(self):
        for field_name in CONTACT_FIELDS:
            value = apply_if_present("", getattr(self, field_name))
            check_field_value(field_name, value)
            object.__setattr__(self, field_name, value)

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(getattr(self, f) for f in CONTACT_FIELDS)

    def _key(self) -> tuple[str, ...]:
        return tuple(v.casefold() for v in self.as_tuple())

    def __eq__(self, other):
        if not isinstance(other, Contact):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def updated(self, **changes: str | None) -> "Contact":
        """Return a copy with the given fields changed. None or blank values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown contact field(s): {', '.join(sorted(unknown))}")
        applied = {
            name: apply_if_present(getattr(self, name), value)
            for name, value in changes.items()
        }
        return replace(self, **applied)

    def __str__(self):
        return "".join(
            f"{label}: {value}\n" for label, value in zip(_LABELS, self.as_tuple())
        )


class ContactBuilder:
    """Fluent construction of a Contact. Each build() returns an independent snapshot."""

    def __init__(self, name: str | None) -> None:
        self._values = dict.fromkeys(CONTACT_FIELDS, "")
        self._set("name", name)

    def _set(self, field_name: str, value: str | None) -> "ContactBuilder":
        self._values[field_name] = apply_if_present(self._values[field_name], value)
        return self

    def address_street(self, value: str | None) -> "ContactBuilder":
        return self._set("address_street", value)

    def address_city(self, value: str | None) -> "ContactBuilder":
        return self._set("address_city", value)

    def address_state(self, value: str | None) -> "ContactBuilder":
        return self._set("address_state", value)

    def address_zip(self, value: str | None) -> "ContactBuilder":
        return self._set("address_zip", value)

    def phone_number(self, value: str | None) -> "ContactBuilder":
        return self._set("phone_number", value)

    def email(self, value: str | None) -> "ContactBuilder":
        return self._set("email", value)

    def note(self, value: str | None) -> "ContactBuilder":
        return self._set("note", value)

    def build(self) -> Contact:
        return Contact(**self._values)

