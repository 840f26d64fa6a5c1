"""Decimal text rendering of currency and numeric column values."""

from __future__ import annotations

__all__ = ["money_to_string", "numeric_to_string"]

_MONEY_BYTES = 8
_MONEY_SCALE = 4
_MONEY_DIGITS = 20

_NUMERIC_BYTES = 16
_NUMERIC_DIGITS = 40


def _format_digits(magnitude: int, width: int, scale: int, negative: bool) -> str:
    """Render ``magnitude`` as a fixed-width decimal with ``scale`` fraction digits.

    Digits above ``width`` are dropped. Leading zeros are stripped, but at
    least ``scale + 1`` digits are always kept.
    """
    if scale < 0:
        raise ValueError(f"scale must not be negative: {scale}")
    digits = str(magnitude % 10**width).rjust(width, "0")
    significant = len(digits.lstrip("0"))
    keep = min(width, max(significant, scale + 1))
    text = digits[width - keep:]
    if 0 < scale <= keep:
        text = f"{text[:keep - scale]}.{text[keep - scale:]}"
    return f"-{text}" if negative else text


def money_to_string(data: bytes) -> str:
    """Render an 8-byte little-endian currency value with four decimal places."""
    raw = bytes(data)
    if len(raw) < _MONEY_BYTES:
        raise ValueError(f"currency value needs {_MONEY_BYTES} bytes, got {len(raw)}")
    value = int.from_bytes(raw[:_MONEY_BYTES], "little", signed=True)
    return _format_digits(abs(value), _MONEY_DIGITS, _MONEY_SCALE, value < 0)


def numeric_to_string(data: bytes, scale: int, prec: int) -> str:
    """Render a 17-byte numeric value: a sign byte followed by four 32-bit words.

    The words are stored most significant first, each word little-endian.
    The number of fraction digits is taken from ``prec``; ``scale`` is
    accepted for symmetry with the column metadata.
    """
    raw = bytes(data)
    needed = _NUMERIC_BYTES + 1
    if len(raw) < needed:
        raise ValueError(f"numeric value needs {needed} bytes, got {len(raw)}")
    negative = bool(raw[0] & 0x80)
    body = raw[1:needed]
    magnitude = sum(
        int.from_bytes(body[12 - 4 * word:16 - 4 * word], "little") << (32 * word)
        for word in range(4)
    )
    return _format_digits(magnitude, _NUMERIC_DIGITS, prec, negative)