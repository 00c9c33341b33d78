"""Normalization helpers.

Centralizes tolerant parsing of chain-supplied parameters.  Decoded call
parameters arrive as ``int``, decimal strings, ``0x`` hex strings or
bigint-like objects depending on the upstream ABI decoder.
"""

from __future__ import annotations

import math
from typing import Any


def safe_int(value: Any) -> int | None:
    """Coerce *value* to ``int`` without losing precision on uint256 amounts."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, (str, bytes)):
        try:
            text = value.decode() if isinstance(value, bytes) else value
        except UnicodeDecodeError:
            return None
        text = text.strip().rstrip("n")  # JS bigint literal suffix
        if not text or text == "--":
            return None
        try:
            if text.lower().startswith(("0x", "-0x")):
                return int(text, 16)
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return None
        if math.isnan(parsed) or math.isinf(parsed):
            return None
        return int(parsed)
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def require_int(value: Any, default: int = 0) -> int:
    """Like :func:`safe_int` but a present, unparseable value is an error.

    ``None`` maps to *default*.  Raises :class:`ValueError` otherwise, so
    model validators reject malformed ids instead of zeroing them.
    """
    if value is None:
        return default
    parsed = safe_int(value)
    if parsed is None:
        raise ValueError(f"not an integer: {value!r}")
    return parsed


def int_list(value: Any) -> list[int]:
    """Coerce a sequence of int-like values; any unparseable entry is an error."""
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        raise ValueError(f"expected a sequence of integers, got {value!r}")
    items: list[int] = []
    for position, item in enumerate(value):
        parsed = safe_int(item)
        if parsed is None:
            raise ValueError(f"entry {position} is not an integer: {item!r}")
        items.append(parsed)
    return items
