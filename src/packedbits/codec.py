"""
Encoders and decoders for the two external representations of a bit vector.

* The textual form is a string of ``"0"`` and ``"1"`` characters, index 0 first. Decoding is
  lenient by default: any character other than ``"0"`` is a set bit.
* The structured form is a JSON array of booleans, index 0 first.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import orjson

from packedbits.exc import DecodeError
from packedbits.utils import LoggerWithTrace

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)

_BIT_CHARACTERS = frozenset("01")


def encode_bit_string(bits: Iterable[bool]) -> str:
    """
    Encodes a sequence of booleans into a bit string.
    """

    return "".join("1" if bit else "0" for bit in bits)


def decode_bit_string(text: str, *, strict: bool = False) -> Iterator[bool]:
    """
    Decodes a bit string into a lazy sequence of booleans.

    :param text: The bit string to decode.
    :param strict: If True, reject characters other than ``"0"`` and ``"1"``.
    """

    if not isinstance(text, str):
        raise DecodeError(f"expected a bit string, got {type(text).__name__}")

    if strict:
        invalid = set(text) - _BIT_CHARACTERS
        if invalid:
            logger.debug(f"Rejecting bit string with {len(invalid)} invalid character(s)")
            raise DecodeError(f"invalid characters in bit string: {''.join(sorted(invalid))!r}")

    return (char != "0" for char in text)


def encode_json(bits: Iterable[bool]) -> str:
    """
    Encodes a sequence of booleans into a JSON array.
    """

    return orjson.dumps([bool(bit) for bit in bits]).decode("utf-8")


def decode_json(text: str | bytes) -> list[Any]:
    """
    Decodes a JSON array. The items are returned as-is, callers decide how to interpret them.
    """

    try:
        decoded = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        logger.debug(f"Rejecting malformed JSON: {e}")
        raise DecodeError(f"invalid JSON: {e}") from e

    if not isinstance(decoded, list):
        raise DecodeError(f"expected a JSON array, got {type(decoded).__name__}")

    return decoded
