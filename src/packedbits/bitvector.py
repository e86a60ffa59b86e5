from __future__ import annotations

import operator
from collections.abc import Callable, Generator, Iterable
from typing import Any, NoReturn, Self

import attr
from typing_extensions import override

from packedbits import codec
from packedbits.exc import OutOfRangeError, SizeMismatchError, UnsupportedOperationError
from packedbits.iterator import BitIterator
from packedbits.utils import LoggerWithTrace
from packedbits.utils.bits import (
    BITS_PER_BYTE,
    LOWEST_SET_BIT,
    POPCOUNT,
    byte_length,
    pack_bits,
    padding_mask,
)

__all__ = ("BitVector",)

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)

_COMPLEMENT_TABLE = bytes(~b & 0xFF for b in range(256))


def _check_int(value: Any, what: str) -> None:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}")


@attr.s(slots=True, eq=False, repr=False)
class BitVector:
    """
    A fixed-size, ordered sequence of booleans packed eight to a byte.

    Bit ``i`` lives in byte ``i // 8`` at position ``i % 8``. The size is fixed when the vector is
    created; indices can be read and written but never added or removed.

    Vectors are created through the named constructors (:meth:`from_size`,
    :meth:`from_iterable`, :meth:`from_bit_string`, :meth:`from_json`). They are not thread-safe.
    """

    _size: int = attr.ib(alias="size")
    # always copied, the vector owns its buffer
    _data: bytearray = attr.ib(alias="data", converter=bytearray)

    @_data.validator
    def _check_data(self, attribute: attr.Attribute[bytearray], value: bytearray) -> None:
        expected = byte_length(self._size)
        if len(value) != expected:
            raise ValueError(f"{self._size} bits need {expected} bytes, got {len(value)}")

        if value and value[-1] & ~padding_mask(self._size) & 0xFF:
            raise ValueError(f"padding bits past index {self._size - 1} must be clear")

    ## CONSTRUCTION ##

    @classmethod
    def from_size(cls, size: int) -> BitVector:
        """
        Creates a new vector of ``size`` bits, all of them unset.
        """

        _check_int(size, "size")
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")

        logger.trace(f"Allocating {size} bits ({byte_length(size)} bytes)")
        return cls(size=size, data=bytearray(byte_length(size)))

    @classmethod
    def from_iterable(
        cls, values: Iterable[Any], *, key: Callable[[Any], bool] = bool
    ) -> BitVector:
        """
        Creates a new vector from an iterable of values. The size of the vector is the number of
        values; each value becomes a bit according to ``key``.

        :param values: The values to pack. Consumed exactly once.
        :param key: The truthiness rule applied to every value. Defaults to :class:`bool`.
        """

        size, data = pack_bits(key(value) for value in values)
        logger.trace(f"Packed {size} bits into {len(data)} bytes")
        return cls(size=size, data=data)

    @classmethod
    def from_bit_string(cls, text: str, *, strict: bool = False) -> BitVector:
        """
        Creates a new vector from a bit string such as ``"10010"``.

        Any character other than ``"0"`` is a set bit, unless ``strict`` is passed, in which case
        characters other than ``"0"`` and ``"1"`` raise :class:`.DecodeError`.
        """

        size, data = pack_bits(codec.decode_bit_string(text, strict=strict))
        logger.trace(f"Packed {size}-character bit string into {len(data)} bytes")
        return cls(size=size, data=data)

    @classmethod
    def from_json(cls, text: str | bytes) -> BitVector:
        """
        Creates a new vector from a JSON array, such as ``[true, false, true]``.

        :raise DecodeError: If ``text`` is not valid JSON or does not hold an array.
        """

        return cls.from_iterable(codec.decode_json(text))

    def copy(self) -> BitVector:
        """
        Returns an independent copy of this vector, with its own buffer.
        """

        return BitVector(size=self._size, data=bytearray(self._data))

    def __copy__(self) -> BitVector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> BitVector:
        return self.copy()

    @property
    def size(self) -> int:
        """
        The number of bits in this vector.
        """

        return self._size

    @property
    def buffer(self) -> bytes:
        """
        A read-only copy of the packed buffer. Always ``ceil(size / 8)`` bytes long.
        """

        return bytes(self._data)

    def _check_index(self, index: int) -> None:
        _check_int(index, "bit vector indices")
        if index < 0 or index >= self._size:
            raise OutOfRangeError(index, self._size)

    def has_index(self, index: Any) -> bool:
        """
        Returns True if ``index`` is a valid index into this vector. Never raises.
        """

        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < self._size
        )

    def get(self, index: int) -> bool:
        """
        Gets the value of the bit at ``index``.

        :raise OutOfRangeError: If ``index`` is negative or not less than the size.
        """

        self._check_index(index)
        return (self._data[index // BITS_PER_BYTE] & (1 << index % BITS_PER_BYTE)) != 0

    def set(self, index: int, value: Any) -> Self:
        """
        Sets the bit at ``index`` to the truthiness of ``value``.

        :raise OutOfRangeError: If ``index`` is negative or not less than the size.
        :return: This vector, for chaining.
        """

        self._check_index(index)
        byte_index = index // BITS_PER_BYTE
        mask = 1 << index % BITS_PER_BYTE

        if value:
            self._data[byte_index] |= mask
        else:
            self._data[byte_index] &= ~mask & 0xFF

        return self

    def unset(self, index: int) -> NoReturn:
        """
        Always fails: indices cannot be removed from a fixed-size vector.
        """

        raise UnsupportedOperationError(f"Removing index {index}")

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __delitem__(self, index: int) -> NoReturn:
        self.unset(index)

    def length(self) -> int:
        """
        Returns the number of bits in this vector.
        """

        return self._size

    def count(self) -> int:
        """
        Returns the number of addressable bits in this vector. This is the size, not the number
        of set bits; see :meth:`popcount` for that.
        """

        return self._size

    def __len__(self) -> int:
        return self._size

    def popcount(self) -> int:
        """
        Returns the number of set bits.
        """

        # padding bits are always zero, so they never contribute
        return sum(POPCOUNT[byte] for byte in self._data)

    ## BULK OPERATORS ##

    def _check_operand(self, other: BitVector) -> None:
        if not isinstance(other, BitVector):
            raise TypeError(f"Expected a BitVector, got {type(other).__name__}")

        if other._size != self._size:
            raise SizeMismatchError(self._size, other._size)

    def _apply(self, op: Callable[[int, int], int], other: BitVector) -> Self:
        self._check_operand(other)
        self._data[:] = bytes(map(op, self._data, other._data))
        logger.trace(f"Applied {op.__name__} across {len(self._data)} bytes")
        return self

    def apply_complement(self) -> Self:
        """
        Flips every bit of this vector in place.

        :return: This vector, for chaining.
        """

        data = self._data
        data[:] = data.translate(_COMPLEMENT_TABLE)

        # keep the padding of the final byte clear
        if data:
            data[-1] &= padding_mask(self._size)

        logger.trace(f"Applied complement across {len(data)} bytes")
        return self

    def apply_or(self, other: BitVector) -> Self:
        """
        ORs ``other`` into this vector in place.

        :raise SizeMismatchError: If the vectors are of differing sizes.
        :return: This vector, for chaining.
        """

        return self._apply(operator.or_, other)

    def apply_and(self, other: BitVector) -> Self:
        """
        ANDs ``other`` into this vector in place.

        :raise SizeMismatchError: If the vectors are of differing sizes.
        :return: This vector, for chaining.
        """

        return self._apply(operator.and_, other)

    def apply_xor(self, other: BitVector) -> Self:
        """
        XORs ``other`` into this vector in place.

        :raise SizeMismatchError: If the vectors are of differing sizes.
        :return: This vector, for chaining.
        """

        return self._apply(operator.xor, other)

    def __invert__(self) -> BitVector:
        return self.copy().apply_complement()

    def __and__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.copy().apply_and(other)

    def __or__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.copy().apply_or(other)

    def __xor__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.copy().apply_xor(other)

    def __iand__(self, other: object) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.apply_and(other)

    def __ior__(self, other: object) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.apply_or(other)

    def __ixor__(self, other: object) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.apply_xor(other)

    ## SCANNING ##

    def next_set_bit(self, from_index: int = 0) -> int | None:
        """
        Finds the first set bit at or after ``from_index``.

        Whole zero bytes are skipped without testing their bits individually.

        :param from_index: Where to start scanning. May be equal to the size, in which case
                           nothing is found.
        :raise OutOfRangeError: If ``from_index`` is negative or greater than the size.
        :return: The index of the set bit, or None if there is none.
        """

        _check_int(from_index, "from_index")
        if from_index < 0 or from_index > self._size:
            raise OutOfRangeError(from_index, self._size, inclusive=True)

        data = self._data
        byte_index, bit_offset = divmod(from_index, BITS_PER_BYTE)
        if byte_index >= len(data):
            return None

        # drop the bits of the first byte that come before the start
        current = data[byte_index] & (0xFF << bit_offset) & 0xFF

        while current == 0:
            byte_index += 1
            if byte_index >= len(data):
                return None

            current = data[byte_index]

        found = byte_index * BITS_PER_BYTE + LOWEST_SET_BIT[current]
        if found >= self._size:
            return None

        return found

    def iter_set_bits(self) -> Generator[int, None, None]:
        """
        Yields the index of every set bit, in ascending order.
        """

        index = self.next_set_bit(0)
        while index is not None:
            yield index
            index = self.next_set_bit(index + 1)

    def iterate(self) -> BitIterator:
        """
        Returns a new iterator of ``(index, value)`` pairs over this vector.
        """

        return BitIterator(vector=self)

    def __iter__(self) -> BitIterator:
        return self.iterate()

    def to_serializable_array(self) -> list[bool]:
        """
        Returns the bits of this vector as a list of booleans.
        """

        return [value for _, value in self.iterate()]

    def to_bit_string(self) -> str:
        """
        Returns the bits of this vector as a string of ``"0"`` and ``"1"`` characters.
        """

        return codec.encode_bit_string(value for _, value in self.iterate())

    def to_json(self) -> str:
        """
        Returns the bits of this vector as a JSON array of booleans.
        """

        return codec.encode_json(value for _, value in self.iterate())

    @override
    def __str__(self) -> str:
        return self.to_bit_string()

    @override
    def __repr__(self) -> str:
        return f"<BitVector size={self._size} bits={self.to_bit_string()}>"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented

        # padding is always clear, so comparing buffers compares the observable bits
        return self._size == other._size and self._data == other._data

    __hash__ = None  # type: ignore[assignment]
