import pytest

from algokit.bits import hamming_weight, reverse_bits


def test_reverse_bits_example():
    assert reverse_bits(43261596) == 964176192


def test_reverse_lowest_bit():
    assert reverse_bits(1) == 0x80000000


def test_reverse_zero_and_all_ones():
    assert reverse_bits(0) == 0
    assert reverse_bits(0xFFFFFFFF) == 0xFFFFFFFF


@pytest.mark.parametrize("n", [1, 2, 3, 43261596, 0xDEADBEEF, 0x80000000, 12345])
def test_reverse_twice_round_trip(n):
    assert reverse_bits(reverse_bits(n)) == n


@pytest.mark.parametrize("n", [5, 0xF0F0, 123456789])
def test_reverse_matches_binary_string(n):
    assert reverse_bits(n) == int(format(n, "032b")[::-1], 2)


@pytest.mark.parametrize("n", [-1, 2**32])
def test_reverse_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        reverse_bits(n)


def test_hamming_weight_example():
    assert hamming_weight(11) == 3


@pytest.mark.parametrize("n", [0, 1, 128, 2147483645, 0xFFFF, 2**40 + 7])
def test_hamming_weight_counts_ones(n):
    assert hamming_weight(n) == bin(n).count("1")


@pytest.mark.parametrize("n", [-1, -128])
def test_hamming_weight_of_negative_is_zero(n):
    assert hamming_weight(n) == 0


@pytest.mark.parametrize("n", [7, 43261596, 0xABCDEF01])
def test_reversal_preserves_weight(n):
    assert hamming_weight(reverse_bits(n)) == hamming_weight(n)