"""Search a contact list by a T9 key sequence."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

MAX_LINE = 100

_KEYS = ("abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_LETTER_TO_DIGIT = {
    letter: str(digit)
    for digit, letters in enumerate(_KEYS, start=2)
    for letter in letters + letters.upper()
}
_QUERY_CHARS = frozenset(" 0123456789")


@dataclass(frozen=True)
class Contact:
    """A contact: a name and a phone number."""

    name: str
    number: str

    def __str__(self) -> str:
        return f"{self.name}, {self.number}"


def _digit_for(char: str) -> str:
    if char in _LETTER_TO_DIGIT:
        return _LETTER_TO_DIGIT[char]
    if "0" <= char <= "9":
        return char
    if char == "+":
        return "0"
    return " "


def to_digits(text: str) -> str:
    """Map text to keypad digits: letters to their key, '+' to 0, others to space."""
    return "".join(_digit_for(char) for char in text)


def read_contacts(stream: TextIO | Iterable[str]) -> Iterator[Contact]:
    """Yield contacts from alternating name and number lines.

    Blank lines are skipped and every line is cut to MAX_LINE characters.
    """
    lines = (line.rstrip("\r\n").lstrip() for line in stream)
    meaningful = iter([line[:MAX_LINE] for line in lines if line.strip()])
    for name in meaningful:
        yield Contact(name, next(meaningful, ""))


def search(contacts: Iterable[Contact], query: str) -> Iterator[Contact]:
    """Yield the contacts whose name or number contains the key sequence."""
    return (contact for contact in contacts if query in to_digits(str(contact)))


def main(argv: Sequence[str] | None = None) -> int:
    """Print contacts from standard input, filtered by an optional query."""
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) > 1:
        print("Enter only 1 argument!", file=sys.stderr)
        return 1
    if args and not set(args[0]) <= _QUERY_CHARS:
        print("Enter only numbers in the argument!", file=sys.stderr)
        return 1

    contacts = read_contacts(sys.stdin)

    if not args:
        for contact in contacts:
            print(contact)
        return 0

    found = False
    for contact in search(contacts, args[0]):
        print(contact)
        found = True
    if not found:
        print("Not found")
    return 0


if __name__ == "__main__":
    sys.exit(main())