"""Whole-file reading and writing, and small scanners over text buffers."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple


class DecNum(NamedTuple):
    """A scanned integer, ten to the power of its digit count, and characters consumed."""

    value: int
    digits: int
    consumed: int


class FloatNum(NamedTuple):
    """A scanned decimal number and the characters consumed."""

    value: float
    consumed: int


def load(filename: str | Path) -> bytes:
    """Read a whole file as bytes."""
    with open(filename, "rb") as stream:
        return stream.read()


def save(filename: str | Path, data: bytes | str) -> None:
    """Write bytes, or text encoded as UTF-8, replacing the file."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    with open(filename, "wb") as stream:
        stream.write(data)


def find_string(text: str, find: str, last: int | None = None) -> int:
    """Number of characters before ``find``, stopping at index ``last`` or the end."""
    limit = len(text) if last is None else min(last, len(text))
    index = text.find(find, 0, limit)
    return limit if index < 0 else index


def skip_space(text: str, last: int | None = None) -> int:
    """Number of leading blanks and control characters, stopping at NUL or ``last``."""
    limit = len(text) if last is None else min(last, len(text))
    count = 0
    for ch in text[:limit]:
        if ch == "\0" or ch > " ":
            break
        count += 1
    return count


def get_string(text: str, find: str = ",", max_size: int | None = None) -> tuple[str, int]:
    """The text up to ``find`` (or ``max_size`` characters) and its length."""
    length = find_string(text, find, max_size)
    return text[:length], length


def _scan_digits(text: str, pos: int) -> tuple[int, int, int]:
    number = 0
    digits = 1
    while pos < len(text) and "0" <= text[pos] <= "9":
        number = number * 10 + (ord(text[pos]) - ord("0"))
        digits *= 10
        pos += 1
    return number, digits, pos


def _scan_sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] == "-":
        return -1, pos + 1
    if pos < len(text) and text[pos] == "+":
        return 1, pos + 1
    return 1, pos


def get_dec_num(text: str) -> DecNum:
    """Scan an optionally signed decimal integer after leading blanks."""
    pos = skip_space(text)
    sign, pos = _scan_sign(text, pos)
    number, digits, pos = _scan_digits(text, pos)
    return DecNum(number * sign, digits, pos)


def get_float_num(text: str) -> FloatNum:
    """Scan an optionally signed decimal number with an optional fraction."""
    pos = skip_space(text)
    sign, pos = _scan_sign(text, pos)
    number, _, pos = _scan_digits(text, pos)
    fraction = 0
    digits = 1
    if pos < len(text) and text[pos] == ".":
        pos += 1
        scanned = get_dec_num(text[pos:])
        fraction, digits = scanned.value, scanned.digits
        pos += scanned.consumed
    return FloatNum((number + fraction / digits) * sign, pos)