"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.phone import PhoneMatcher
from addressbook.infrastructure.text_file_store import (
    DelimitedTextContactStore,
    format_line,
    parse_line,
)

__all__ = [
    "DelimitedTextContactStore",
    "PhoneMatcher",
    "format_line",
    "parse_line",
]
