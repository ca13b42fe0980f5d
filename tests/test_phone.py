"""Tests for PhoneMatcher: E.164 keys and matching contacts by number."""

from addressbook.domain import Contact
from addressbook.infrastructure import PhoneMatcher


def test_to_e164_with_country_code():
    matcher = PhoneMatcher()
    assert matcher.to_e164("+39 312 345 6789") == "+393123456789"
    assert matcher.to_e164("+1 202-555-1234") == "+12025551234"


def test_to_e164_without_country_code_uses_default_region():
    assert PhoneMatcher("US").to_e164("(202) 555 1234") == "+12025551234"
    assert PhoneMatcher("IT").to_e164("312 345 6789") == "+393123456789"


def test_to_e164_invalid_returns_none():
    matcher = PhoneMatcher()
    assert matcher.to_e164(None) is None
    assert matcher.to_e164("") is None
    assert matcher.to_e164("   ") is None
    assert matcher.to_e164("abc") is None
    assert matcher.to_e164("+1") is None
    assert PhoneMatcher("US").to_e164("123") is None


def test_key_prefers_e164():
    assert PhoneMatcher().key("+1 (202) 555-1234") == PhoneMatcher("US").key("202.555.1234")


def test_key_falls_back_to_stripped_text():
    matcher = PhoneMatcher()
    assert matcher.key("  ext. 42 ") == "ext. 42"
    assert matcher.key("202 555 1234") == "202 555 1234"


def test_matches_contact_by_number():
    matcher = PhoneMatcher("US")
    alice = Contact(name="Alice", phone_number="+1 202-555-1234")
    assert matcher.matches(alice, "(202) 555-1234")
    assert not matcher.matches(alice, "(202) 555-9999")
    assert not matcher.matches(alice, "  ")
    assert not matcher.matches(Contact(name="Bob"), "(202) 555-1234")
