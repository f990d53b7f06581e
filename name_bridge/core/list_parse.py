"""Parser for bracketed list strings sent by external tools, e.g. "[a,b,c]"."""

from __future__ import annotations

from typing import List


def parse_list(text: str) -> List[str]:
    """Split a "[name1,name2,...]" string into its entries.

    The first and last characters are dropped as brackets. Entries are split
    on "," and kept verbatim, including empty ones ("[a,,b]" -> ["a", "", "b"]).
    """
    raw = str(text or "")
    if len(raw) < 2:
        return []
    inner = raw[1:-1]
    if not inner:
        return []
    return inner.split(",")


def describe_length_mismatch(name_count: int, target_count: int) -> str:
    """Describe what a list/target count mismatch leaves out; "" when they match."""
    if name_count > target_count:
        extra = name_count - target_count
        return f"List has {name_count} name(s) for {target_count} object(s); the last {extra} name(s) are ignored"
    if name_count < target_count:
        extra = target_count - name_count
        return f"List has {name_count} name(s) for {target_count} object(s); the last {extra} object(s) keep their names"
    return ""


__all__ = ["parse_list", "describe_length_mismatch"]
