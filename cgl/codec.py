"""Base64 encoding and a lenient base64 decoder."""

from __future__ import annotations

import base64
import itertools
from functools import reduce
from typing import Iterator, List, Union

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}


def base64_encode(data: Union[bytes, bytearray, memoryview]) -> str:
    """Encode bytes as padded base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def _sextets(encoded: str) -> Iterator[int]:
    """Yield sextet values up to the first padding or non-alphabet character."""
    return itertools.takewhile(
        lambda value: value is not None, map(_INDEX.get, encoded)
    )


def _decode_group(group: List[int]) -> bytes:
    padded = group + [0] * (4 - len(group))
    number = reduce(lambda acc, value: (acc << 6) | value, padded, 0)
    return number.to_bytes(3, "big")[: len(group) - 1]


def base64_decode(encoded: Union[str, bytes]) -> bytes:
    """Decode base64 text.

    Decoding stops quietly at the first ``=`` or at any character outside
    the base64 alphabet; a trailing group of a single character yields
    nothing.
    """
    if isinstance(encoded, (bytes, bytearray)):
        encoded = bytes(encoded).decode("latin-1")
    values = _sextets(encoded)
    groups = iter(lambda: list(itertools.islice(values, 4)), [])
    return b"".join(_decode_group(group) for group in groups)