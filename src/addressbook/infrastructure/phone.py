"""Matching contacts by phone number regardless of how the number was typed."""

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

from addressbook.domain import Contact


class PhoneMatcher:
    """Reduces phone numbers to a comparable key.

    Numbers that libphonenumber accepts become E.164 ("+12025551234"); anything
    else (extensions, partial numbers) is compared as stripped text.
    default_region is only used for numbers written without a country code.
    """

    def __init__(self, default_region: str | None = None) -> None:
        self.default_region = default_region

    def to_e164(self, raw: str | None) -> str | None:
        text = (raw or "").strip()
        if not text:
            return None
        try:
            number = phonenumbers.parse(text, self.default_region)
        except NumberParseException:
            return None
        if not phonenumbers.is_valid_number(number):
            return None
        return phonenumbers.format_number(number, PhoneNumberFormat.E164)

    def key(self, raw: str) -> str:
        return self.to_e164(raw) or (raw or "").strip()

    def matches(self, contact: Contact, raw: str) -> bool:
        if not contact.phone_number or not (raw or "").strip():
            return False
        return self.key(contact.phone_number) == self.key(raw)
