from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import attr
from typing_extensions import override

if TYPE_CHECKING:
    from packedbits.bitvector import BitVector


@attr.s(slots=True, eq=False)
class BitIterator(Iterator[tuple[int, bool]]):
    """
    Iterates over a :class:`.BitVector`, producing ``(index, value)`` pairs in ascending order.

    Values are read at the moment they are produced, so writes made to the vector during
    iteration are visible to the positions not yet reached.
    """

    _vector: BitVector = attr.ib(alias="vector")  # explicit alias makes mypy/pyright/etc happy

    #: The index of the next pair to produce.
    _cursor: int = attr.ib(default=0, init=False)

    @property
    def position(self) -> int:
        """
        The index of the next pair this iterator will produce.
        """

        return self._cursor

    @override
    def __next__(self) -> tuple[int, bool]:
        index = self._cursor
        if index >= len(self._vector):
            raise StopIteration

        value = self._vector.get(index)
        self._cursor = index + 1
        return index, value

    def __length_hint__(self) -> int:
        return len(self._vector) - self._cursor
