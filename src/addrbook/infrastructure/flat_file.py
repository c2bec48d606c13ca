"""Flat-file persistence for the address book.

Format (UTF-8, one record per line, no escaping):

    <count>
    <id>,<name>,<phone>,<email>
    ...

Names and phones never contain commas. Emails may, so the email field is
the rest of the line after the third comma. Fields must not contain
newlines. A bad count line aborts the load; a bad record line is skipped
and reported.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from addrbook.application.dto import (
    FileUnavailable,
    Loaded,
    MalformedHeader,
    MalformedRecord,
    Saved,
)
from addrbook.application.ports import ContactStore
from addrbook.domain import Contact

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 4


def format_record(contact: Contact) -> str:
    return DELIMITER.join(
        (str(contact.id), contact.name, contact.phone, contact.email)
    )


def parse_record(line: str) -> Contact | None:
    """Parse one record line, or return None if it is not id,name,phone,email."""
    parts = line.rstrip("\r").split(DELIMITER, FIELD_COUNT - 1)
    if len(parts) != FIELD_COUNT:
        return None
    raw_id, name, phone, email = parts
    contact_id = parse_decimal(raw_id)
    if contact_id is None or contact_id < 1 or not name or not phone or not email:
        return None
    return Contact(id=contact_id, name=name, phone=phone, email=email)


def parse_decimal(text: str) -> int | None:
    """Plain ASCII digits only; no sign, underscores or other numerals."""
    text = text.strip()
    if not text or not text.isascii() or not text.isdigit():
        return None
    return int(text)


def parse_header(line: str) -> int | None:
    return parse_decimal(line)


class FlatFileCodec:
    """Saves and loads the whole store as a count line followed by record lines."""

    def save(self, contacts: Iterable[Contact], path: Path) -> Saved | FileUnavailable:
        """Write all contacts in order. The file is replaced only after a complete write."""
        path = Path(path)
        records = list(contacts)
        lines = [str(len(records))]
        lines.extend(format_record(c) for c in records)
        tmp = path.with_name(path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                f.write("\n".join(lines) + "\n")
            os.replace(tmp, path)
        except (OSError, UnicodeEncodeError) as exc:
            logger.warning("Could not save contacts to %s: %s", path, exc)
            tmp.unlink(missing_ok=True)
            return FileUnavailable(path=path, reason=str(exc))
        logger.info("Saved %d contact(s) to %s", len(records), path)
        return Saved(path=path, count=len(records))

    def load(
        self, store: ContactStore, path: Path
    ) -> Loaded | FileUnavailable | MalformedHeader:
        """Append the records in path to store, in file order.

        Contents are not re-validated. Reads at most as many record lines as
        the count line announces; lines that are missing or unparseable are
        skipped and returned in Loaded.skipped.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not open %s: %s", path, exc)
            return FileUnavailable(path=path, reason=str(exc))

        lines = text.split("\n")
        header = lines[0].rstrip("\r")
        count = parse_header(header)
        if count is None:
            logger.warning("Unreadable contact count in %s: %r", path, header)
            return MalformedHeader(path=path, line=header)

        parsed: list[Contact] = []
        skipped: list[MalformedRecord] = []
        for index in range(1, count + 1):
            line = lines[index] if index < len(lines) else ""
            contact = parse_record(line)
            if contact is None:
                logger.warning("Skipping unreadable record on line %d of %s", index + 1, path)
                skipped.append(MalformedRecord(line_number=index + 1, text=line))
                continue
            parsed.append(contact)

        for contact in parsed:
            store.add_loaded(contact)
        logger.info(
            "Loaded %d contact(s) from %s (%d skipped)", len(parsed), path, len(skipped)
        )
        return Loaded(path=path, count=len(parsed), skipped=tuple(skipped))
