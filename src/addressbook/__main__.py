"""
Print the configured address book, optionally filtered by a keyword.
Run: python -m addressbook [keyword] (file from ADDRESSBOOK_FILE or .env).
"""
import logging
import sys

from addressbook.application import SEPARATOR_LINE, Loaded
from addressbook.config import configure_logging, load_settings
from addressbook.factory import create_service

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = load_settings()
    configure_logging(settings.log_level)
    service = create_service(settings)

    result = service.load()
    if not isinstance(result, Loaded):
        logger.error("Cannot open address book: %s", result.reason)
        return 1

    keyword = " ".join(args)
    matches = service.search_contacts(keyword)
    for contact in matches:
        sys.stdout.write(f"{contact}{SEPARATOR_LINE}")
    logger.info("%d of %d contact(s) shown", len(matches), result.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
