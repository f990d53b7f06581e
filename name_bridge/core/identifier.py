"""Identifier value type: a base name plus an optional numeric suffix.

"Chair" has no suffix (number 0); "Chair_5" is base "Chair" with number 5.
A trailing block only counts as a suffix when it is made of digits without a
leading zero and something precedes the separator, so "Chair_05", "Chair_0"
and "_5" are plain bases.
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_SEPARATOR = "_"


def split_suffix(name: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, int]:
    """Split name into (base, number). number is 0 when there is no suffix."""
    text = str(name or "")
    if not separator:
        return text, 0
    head, sep, tail = text.rpartition(separator)
    if not sep or not head or not tail:
        return text, 0
    if not (tail.isascii() and tail.isdigit()) or tail[0] == "0":
        return text, 0
    return head, int(tail)


def format_identifier(base: str, number: int, separator: str = DEFAULT_SEPARATOR) -> str:
    if number <= 0:
        return base
    return f"{base}{separator}{number}"


@dataclass(frozen=True)
class Identifier:
    """Immutable identifier token."""

    base: str
    number: int = 0
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def parse(cls, name: str, separator: str = DEFAULT_SEPARATOR) -> "Identifier":
        base, number = split_suffix(name, separator)
        return cls(base=base, number=number, separator=separator)

    @property
    def text(self) -> str:
        return format_identifier(self.base, self.number, self.separator)

    def with_number(self, number: int) -> "Identifier":
        return Identifier(base=self.base, number=max(0, int(number)), separator=self.separator)

    def next(self) -> "Identifier":
        """Return the identifier with the suffix increased by one."""
        return self.with_number(self.number + 1)

    def __str__(self) -> str:
        return self.text


__all__ = [
    "DEFAULT_SEPARATOR",
    "Identifier",
    "split_suffix",
    "format_identifier",
]
