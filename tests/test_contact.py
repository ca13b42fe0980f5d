"""Unit tests for Contact, ContactBuilder and the field policy."""

import dataclasses

import pytest

from addressbook.domain import (
    CONTACT_FIELDS,
    Contact,
    ContactBuilder,
    ContactValidationError,
    apply_if_present,
)


def _full_builder(name: str = "Mike") -> ContactBuilder:
    return (
        ContactBuilder(name)
        .address_street("123 Main St")
        .address_city("Springfield")
        .address_state("IL")
        .address_zip("62701")
        .phone_number("+1 202 555 1234")
        .email("mike@example.com")
        .note("Met at the conference")
    )


def test_apply_if_present_keeps_current_for_none_and_blank() -> None:
    assert apply_if_present("old", None) == "old"
    assert apply_if_present("old", "") == "old"
    assert apply_if_present("old", "  \t ") == "old"
    assert apply_if_present("old", "new") == "new"


def test_apply_if_present_does_not_trim() -> None:
    assert apply_if_present("", " Mike ") == " Mike "


def test_builder_sets_all_fields() -> None:
    contact = _full_builder().build()
    assert contact.name == "Mike"
    assert contact.address_street == "123 Main St"
    assert contact.address_city == "Springfield"
    assert contact.address_state == "IL"
    assert contact.address_zip == "62701"
    assert contact.phone_number == "+1 202 555 1234"
    assert contact.email == "mike@example.com"
    assert contact.note == "Met at the conference"


def test_builder_optional_fields_default_to_empty_string() -> None:
    contact = ContactBuilder("Mike").build()
    assert contact.as_tuple() == ("Mike", "", "", "", "", "", "", "")


def test_builder_ignores_none_and_blank_values() -> None:
    contact = (
        ContactBuilder("Mike")
        .email("mike@example.com")
        .email(None)
        .email("   ")
        .note("")
        .build()
    )
    assert contact.email == "mike@example.com"
    assert contact.note == ""


@pytest.mark.parametrize("name", [None, "", "   "])
def test_builder_without_usable_name_builds_contact_with_empty_name(name) -> None:
    """A missing name is not an error: the contact is built with name == ""."""
    contact = ContactBuilder(name).address_city("Boston").build()
    assert contact.name == ""
    assert contact.address_city == "Boston"


def test_build_returns_independent_snapshots() -> None:
    builder = ContactBuilder("Mike")
    first = builder.build()
    builder.email("mike@example.com")
    second = builder.build()
    assert first.email == ""
    assert second.email == "mike@example.com"
    assert first is not second


def test_contact_constructor_turns_none_and_blank_into_empty() -> None:
    contact = Contact(name="Ann", email=None, note="   ")
    assert contact.email == ""
    assert contact.note == ""


def test_contact_is_immutable() -> None:
    contact = Contact(name="Ann")
    with pytest.raises(dataclasses.FrozenInstanceError):
        contact.name = "Bob"


def test_equality_ignores_case_and_hash_matches() -> None:
    lower = _full_builder("mike").build()
    upper = (
        ContactBuilder("MIKE")
        .address_street("123 MAIN ST")
        .address_city("springfield")
        .address_state("il")
        .address_zip("62701")
        .phone_number("+1 202 555 1234")
        .email("MIKE@EXAMPLE.COM")
        .note("met at the CONFERENCE")
        .build()
    )
    assert lower == upper
    assert hash(lower) == hash(upper)
    assert len({lower, upper}) == 1


def test_equality_compares_every_field() -> None:
    base = _full_builder().build()
    for field_name in CONTACT_FIELDS:
        other = base.updated(**{field_name: "something else"})
        assert base != other, field_name


def test_equality_with_other_types_is_false() -> None:
    contact = Contact(name="Ann")
    assert contact != "Ann"
    assert contact != None  # noqa: E711
    assert contact.__eq__(("Ann",) + ("",) * 7) is NotImplemented


def test_str_renders_labelled_lines_in_field_order() -> None:
    contact = Contact(name="Mike", address_street="123 Main St")
    assert str(contact) == (
        "Name: Mike\n"
        "Street Address: 123 Main St\n"
        "Address City: \n"
        "Address State: \n"
        "Address ZIP: \n"
        "Phone Number: \n"
        "Email: \n"
        "Note: \n"
    )


def test_updated_applies_changes_and_ignores_blank() -> None:
    contact = Contact(name="Ann", email="ann@example.com")
    changed = contact.updated(email="ann@work.example", note="   ", phone_number=None)
    assert changed.email == "ann@work.example"
    assert changed.note == ""
    assert changed.phone_number == ""
    assert contact.email == "ann@example.com"


def test_updated_with_blank_name_keeps_name() -> None:
    contact = Contact(name="Ann")
    assert contact.updated(name=" ").name == "Ann"


def test_updated_rejects_unknown_field() -> None:
    with pytest.raises(TypeError):
        Contact(name="Ann").updated(nickname="Annie")


@pytest.mark.parametrize(
    "value",
    ["line\nbreak", "carriage\rreturn", "a,,,b", ",leading", "trailing,"],
)
def test_values_that_would_corrupt_the_file_are_rejected(value) -> None:
    with pytest.raises(ContactValidationError) as exc_info:
        ContactBuilder("Ann").note(value).build()
    assert exc_info.value.field_name == "note"
    with pytest.raises(ContactValidationError):
        Contact(name="Ann").updated(address_city=value)


def test_inner_commas_are_allowed() -> None:
    contact = Contact(name="Smith, Jr.", note="a,,b")
    assert contact.name == "Smith, Jr."
    assert contact.note == "a,,b"


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Contact(name="bad\nname")
