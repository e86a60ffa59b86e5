import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from packedbits import BitVector, OutOfRangeError
from tests import TEST_ITERATIONS, bit_lists


def _naive_next_set_bit(values: list[bool], start: int) -> int | None:
    for index in range(start, len(values)):
        if values[index]:
            return index

    return None


def test_skips_within_and_across_bytes():
    """
    Tests a scan that starts mid-byte and finds its bit in the next byte.
    """

    bits = BitVector.from_bit_string("1100000000000010")
    assert bits.next_set_bit(4) == 14
    assert bits.next_set_bit(0) == 0
    assert bits.next_set_bit(1) == 1
    assert bits.next_set_bit(2) == 14
    assert bits.next_set_bit(15) is None


@pytest.mark.parametrize("padding", range(0, 28))
def test_padded_scan(padding: int):
    """
    Tests scanning past runs of zeroes of every length up to several bytes.
    """

    bits = BitVector.from_bit_string("10" + "0" * padding + "100")
    assert bits.next_set_bit(2) == padding + 2


@pytest.mark.parametrize("padding", range(0, 28))
def test_padded_scan_single_prefix(padding: int):
    """
    Tests the same scan with the leading set bit immediately before the start.
    """

    bits = BitVector.from_bit_string("1" + "0" * padding + "100")
    expected = padding + 1 if padding >= 1 else None
    assert bits.next_set_bit(2) == expected


def test_scan_from_size_finds_nothing():
    """
    Tests that scanning from exactly the size is allowed and finds nothing.
    """

    for text in ("", "1", "11111111", "111111111", "0000000001"):
        bits = BitVector.from_bit_string(text)
        assert bits.next_set_bit(len(bits)) is None


def test_scan_ignores_padding():
    """
    Tests that a full final byte with a short size never reports padding bits.
    """

    bits = BitVector.from_size(5).apply_complement()
    bits[4] = False
    assert bits.next_set_bit(4) is None
    assert bits.next_set_bit(3) == 3


def test_scan_all_zero():
    """
    Tests a scan over a long run of zero bytes.
    """

    bits = BitVector.from_size(1000)
    assert bits.next_set_bit() is None

    bits[999] = True
    assert bits.next_set_bit() == 999
    assert bits.next_set_bit(999) == 999


@pytest.mark.parametrize("start", [-1, 6, 100])
def test_scan_out_of_range(start: int):
    """
    Tests that scans may only start inside [0, size].
    """

    bits = BitVector.from_bit_string("00001")

    with pytest.raises(OutOfRangeError) as e:
        bits.next_set_bit(start)

    assert e.value.index == start


def test_iter_set_bits():
    """
    Tests listing every set index.
    """

    bits = BitVector.from_bit_string("0110000010000001")
    assert list(bits.iter_set_bits()) == [1, 2, 8, 15]
    assert list(BitVector.from_size(20).iter_set_bits()) == []


@settings(deadline=None, max_examples=TEST_ITERATIONS)
@given(values=bit_lists, data=st.data())
def test_matches_naive_scan(values: list[bool], data: st.DataObject):
    """
    Tests the byte-skipping scan against a bit-by-bit one.
    """

    bits = BitVector.from_iterable(values)
    start = data.draw(st.integers(min_value=0, max_value=len(values)))
    assert bits.next_set_bit(start) == _naive_next_set_bit(values, start)


@settings(deadline=None, max_examples=TEST_ITERATIONS)
@given(values=bit_lists)
def test_iter_set_bits_matches_values(values: list[bool]):
    """
    Tests that the set indices are exactly the true positions.
    """

    bits = BitVector.from_iterable(values)
    assert list(bits.iter_set_bits()) == [i for i, v in enumerate(values) if v]
