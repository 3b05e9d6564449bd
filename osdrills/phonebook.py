"""A plain-text phone book: append records and look up phone numbers."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

PHONEBOOK = "phonebook.txt"


def add_record(path: str | os.PathLike, words: Sequence[str]) -> None:
    """Append the words, space separated, as one line. The file must already exist."""
    if not words:
        raise ValueError("missing arguments")
    fd = os.open(path, os.O_WRONLY | os.O_APPEND)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(" ".join(words) + "\n")


def find_phone(path: str | os.PathLike, name: str) -> list[str]:
    """Return the phone field, spaces removed, of every line containing ``name``."""
    text = Path(path).read_text(encoding="utf-8")
    results = []
    for line in text.splitlines():
        if name not in line:
            continue
        fields = line.split(",")
        phone = fields[1] if len(fields) > 1 else line
        results.append(phone.replace(" ", ""))
    return results


def main_add(argv: list[str] | None = None) -> int:
    """Append the command-line arguments as a record to phonebook.txt."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Error: missing arguments")
        return 1
    try:
        add_record(PHONEBOOK, args)
    except OSError as error:
        print(f"open: {error.strerror}", file=sys.stderr)
        return 1
    return 0


def main_find(argv: list[str] | None = None) -> int:
    """Print the phone numbers in phonebook.txt for the given name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: invalid arguments")
        print("Usage: findPhone <name>")
        return 1
    try:
        phones = find_phone(PHONEBOOK, args[0])
    except OSError as error:
        print(f"{PHONEBOOK}: {error.strerror}", file=sys.stderr)
        return 1
    for phone in phones:
        print(phone)
    return 0