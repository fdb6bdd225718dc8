import pytest

from nist_sts.bitvec import BitVec


def _as_str(bitvec):
    return "".join("1" if bit else "0" for bit in bitvec)


def test_from_bool():
    input_data = [True, False, True, True, False, True, False, True, False, True]
    bitvec = BitVec(input_data)
    assert len(bitvec) == len(input_data)
    assert _as_str(bitvec) == "1011010101"


def test_from_ascii_string():
    bitvec = BitVec("1011010101")
    assert len(bitvec) == 10
    assert _as_str(bitvec) == "1011010101"


def test_from_ascii_string_invalid():
    with pytest.raises(ValueError):
        BitVec("10110b10101")


def test_from_ascii_string_lossy():
    bitvec = BitVec("101a101100b101010o100", lossy=True)
    assert len(bitvec) == 18
    assert _as_str(bitvec) == "101101100101010100"


@pytest.mark.parametrize(
    ("length", "expected"),
    [(14, "10110110010101"), (22, "101101100101010100")],
)
def test_from_ascii_string_lossy_with_max_len(length, expected):
    bitvec = BitVec("101a101100b101010o100", lossy=True, max_length=length)
    assert len(bitvec) == min(length, 18)
    assert _as_str(bitvec) == expected


@pytest.mark.parametrize(
    ("length", "expected"),
    [(13, "1011011001010"), (22, "101101100101010100")],
)
def test_lossy_with_other_max_len(length, expected):
    bitvec = BitVec("101a101100b101010o100", lossy=True, max_length=length)
    assert len(bitvec) == min(length, 18)
    assert _as_str(bitvec) == expected


def test_strict_string_with_max_length():
    bitvec = BitVec("1011010101", max_length=4)
    assert _as_str(bitvec) == "1011"


def test_crop_more_than_one_byte():
    bitvec = BitVec("10110101101101011011010101")
    assert len(bitvec) == 26
    assert _as_str(bitvec) == "10110101101101011011010101"

    cropped = bitvec.crop(11)
    assert len(cropped) == 11
    assert _as_str(cropped) == "10110101101"
    assert len(bitvec) == 26


def test_crop_less_than_one_byte():
    bitvec = BitVec("1011010101")
    cropped = bitvec.crop(9)
    assert len(cropped) == 9
    assert _as_str(cropped) == "101101010"


def test_crop_beyond_length_keeps_data():
    bitvec = BitVec("1011010101")
    assert bitvec.crop(100) == bitvec


def test_crop_negative_raises():
    with pytest.raises(ValueError):
        BitVec("101").crop(-1)


def test_from_bytes_reads_most_significant_bit_first():
    bitvec = BitVec(bytes([0b10110101, 0b00000001]))
    assert len(bitvec) == 16
    assert _as_str(bitvec) == "1011010100000001"


def test_from_byte_list_matches_bytes():
    assert BitVec([0b10110101, 255]) == BitVec(bytes([0b10110101, 255]))


def test_from_bytes_with_max_length():
    bitvec = BitVec(b"\xf0\x0f", max_length=6)
    assert _as_str(bitvec) == "111100"


def test_byte_out_of_range_raises():
    with pytest.raises(TypeError):
        BitVec([1, 256])


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        BitVec(3.5)


def test_negative_max_length_raises():
    with pytest.raises(ValueError):
        BitVec("0101", max_length=-1)


def test_indexing_and_slicing():
    bitvec = BitVec("1001")
    assert bitvec[0] is True
    assert bitvec[1] is False
    assert bitvec[-1] is True
    assert bitvec[1:3] == BitVec("00")
    with pytest.raises(IndexError):
        bitvec[4]


def test_str():
    assert str(BitVec("1011010101")) == "BitVec(length=10)"


def test_is_immutable():
    bitvec = BitVec("10")
    with pytest.raises(AttributeError):
        bitvec.extra = 1
    assert _as_str(bitvec) == "10"