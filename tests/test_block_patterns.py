import pytest

from nist_sts.bitvec import BitVec
from nist_sts.block_patterns import access_bits, pattern_counts, validate_block_length

EXAMPLE = BitVec("0011011101")


@pytest.mark.parametrize("block_length", [2, 3, 16, 64])
def test_validate_accepts_range(block_length):
    assert validate_block_length(block_length) == block_length


@pytest.mark.parametrize("block_length", [0, 1, 65, 255])
def test_validate_rejects_out_of_range(block_length):
    with pytest.raises(ValueError):
        validate_block_length(block_length)


def test_access_bits_without_wrap():
    assert access_bits(EXAMPLE, 0, 3) == 0b001
    assert access_bits(EXAMPLE, 2, 4) == 0b1101


def test_access_bits_wraps_around():
    assert access_bits(EXAMPLE, 8, 3) == 0b010
    assert access_bits(EXAMPLE, 9, 2) == 0b10


def test_access_bits_across_many_bytes():
    data = BitVec(bytes(range(256)))
    assert access_bits(data, 8, 8) == 1
    assert access_bits(data, 8 * 255, 16) == (255 << 8) | 0


def test_access_bits_bad_start_raises():
    with pytest.raises(IndexError):
        access_bits(EXAMPLE, 10, 3)


def test_access_bits_bad_length_raises():
    with pytest.raises(ValueError):
        access_bits(EXAMPLE, 0, 65)


def test_pattern_counts_nist_example_m3():
    assert pattern_counts(EXAMPLE, 3) == [0, 1, 1, 2, 1, 2, 2, 0]


def test_pattern_counts_nist_example_m2():
    assert pattern_counts(EXAMPLE, 2) == [1, 3, 3, 3]


def test_pattern_counts_nist_example_m1():
    assert pattern_counts(EXAMPLE, 1) == [4, 6]


def test_pattern_counts_zero_length():
    assert pattern_counts(EXAMPLE, 0) == [10]


@pytest.mark.parametrize("block_length", [1, 2, 3, 5, 8])
def test_pattern_counts_agree_with_access_bits(block_length):
    data = BitVec(bytes([0x3C, 0xA5, 0x0F, 0x91]))
    counts = pattern_counts(data, block_length)
    assert sum(counts) == len(data)
    expected = [0] * (1 << block_length)
    for start in range(len(data)):
        expected[access_bits(data, start, block_length)] += 1
    assert counts == expected


def test_pattern_counts_block_longer_than_data():
    data = BitVec("10")
    counts = pattern_counts(data, 3)
    assert counts[0b101] == 1
    assert counts[0b010] == 1
    assert sum(counts) == 2


def test_pattern_counts_empty_data():
    assert pattern_counts(BitVec(""), 2) == [0, 0, 0, 0]


def test_pattern_counts_negative_raises():
    with pytest.raises(ValueError):
        pattern_counts(EXAMPLE, -1)