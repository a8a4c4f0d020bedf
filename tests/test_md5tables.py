import pytest

from ktoolkit.md5tables import BLOCK_SIZE, padding


def test_padding_of_empty_message_is_one_block():
    trailer = padding(0)
    assert len(trailer) == BLOCK_SIZE
    assert trailer[0] == 0x80
    assert trailer[1:] == bytes(BLOCK_SIZE - 1)


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 119, 120, 1000])
def test_padding_completes_a_block(length):
    trailer = padding(length)
    assert (length + len(trailer)) % BLOCK_SIZE == 0
    assert trailer[0] == 0x80
    assert 9 <= len(trailer) <= BLOCK_SIZE + 8


@pytest.mark.parametrize("length", [3, 56, 200])
def test_padding_ends_with_bit_length(length):
    trailer = padding(length)
    assert int.from_bytes(trailer[-8:], "little") == length * 8


def test_padding_at_boundary_needs_extra_block():
    assert len(padding(55)) < len(padding(56))


def test_padding_rejects_negative_length():
    with pytest.raises(ValueError):
        padding(-1)