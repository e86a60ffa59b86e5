"""
Byte-level helpers shared by :class:`~packedbits.bitvector.BitVector`.

Bits are stored least-significant-bit first: bit ``i`` of a vector lives in byte ``i // 8`` at
position ``i % 8``.
"""

from __future__ import annotations

from array import array
from collections.abc import Iterable

BITS_PER_BYTE = 8

#: Index of the lowest set bit for every byte value. Zero has no set bit and maps to -1.
LOWEST_SET_BIT = array("b", [-1] + [(b & -b).bit_length() - 1 for b in range(1, 256)])

#: Number of set bits for every byte value.
POPCOUNT = array("B", [bin(b).count("1") for b in range(256)])


def byte_length(size: int) -> int:
    """
    Returns the number of bytes needed to hold ``size`` bits.
    """

    return (size + BITS_PER_BYTE - 1) // BITS_PER_BYTE


def padding_mask(size: int) -> int:
    """
    Returns the mask of the bits of the final byte that are inside the logical size.

    For sizes that are a multiple of eight the final byte has no padding and the mask is ``0xFF``.
    """

    remainder = size % BITS_PER_BYTE
    if remainder == 0:
        return 0xFF

    return (1 << remainder) - 1


def pack_bits(values: Iterable[bool]) -> tuple[int, bytearray]:
    """
    Packs a stream of booleans into bytes, LSB first.

    :param values: The booleans to pack. Consumed exactly once.
    :return: A tuple of (number of bits packed, packed buffer).
    """

    data = bytearray()
    current = 0
    offset = 0

    for offset, value in enumerate(values, start=1):
        if value:
            current |= 1 << ((offset - 1) % BITS_PER_BYTE)

        if offset % BITS_PER_BYTE == 0:
            data.append(current)
            current = 0

    # flush the partial last byte
    if offset % BITS_PER_BYTE != 0:
        data.append(current)

    return offset, data
