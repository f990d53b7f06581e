"""Parser for tagged transform text: "T=(x y z) R=(x y z) S=(x y z)".

Each of the T (translation), R (rotation, degrees) and S (scale) blocks is
optional; absent blocks parse to None so callers leave that channel alone.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Optional, Tuple


Triple = Tuple[float, float, float]

_BLOCK_RE = {
    "translation": re.compile(r"T=\(([^)]*)\)"),
    "rotation": re.compile(r"R=\(([^)]*)\)"),
    "scale": re.compile(r"S=\(([^)]*)\)"),
}


@dataclass(frozen=True)
class TransformText:
    translation: Optional[Triple] = None
    rotation: Optional[Triple] = None
    scale: Optional[Triple] = None

    @property
    def is_empty(self) -> bool:
        return self.translation is None and self.rotation is None and self.scale is None


def _parse_triple(tag: str, body: str) -> Triple:
    parts = body.split()
    if len(parts) != 3:
        raise ValueError(f"{tag} block needs three space-delimited numbers, got '{body}'")
    try:
        x, y, z = (float(p) for p in parts)
    except ValueError as ex:
        raise ValueError(f"{tag} block has a non-numeric value: '{body}'") from ex
    return (x, y, z)


def parse_transform_text(text: str) -> TransformText:
    """Extract the T/R/S triples from text. Raises ValueError on malformed blocks."""
    raw = str(text or "")
    values = {}
    for field, pattern in _BLOCK_RE.items():
        match = pattern.search(raw)
        if match is None:
            continue
        values[field] = _parse_triple(field, match.group(1))
    return TransformText(**values)


__all__ = ["Triple", "TransformText", "parse_transform_text"]
