import pytest

from igscene.pixels import (
    dword_aligned,
    luminance,
    swap_red_blue,
    to_grayscale,
    unalign,
    vertical_flip,
)

SAMPLE = bytes(range(3 * 5 * 3))  # 5 pixels wide, 3 rows
WIDTH, HEIGHT = 5, 3


def test_dword_aligned_single_pixel_row_padded_to_four():
    data, stride = dword_aligned(bytes([10, 20, 30]), 1, 1)
    assert stride == 4
    assert data == bytes([10, 20, 30, 0])


def test_dword_aligned_stride_is_multiple_of_four():
    for width in range(1, 10):
        data, stride = dword_aligned(bytes(width * 3 * 2), width, 2)
        assert stride % 4 == 0
        assert width * 3 <= stride < width * 3 + 4
        assert len(data) == stride * 2


def test_dword_aligned_round_trip():
    aligned, stride = dword_aligned(SAMPLE, WIDTH, HEIGHT)
    assert unalign(aligned, WIDTH, stride, HEIGHT) == SAMPLE


def test_unalign_rejects_narrow_stride():
    with pytest.raises(ValueError):
        unalign(SAMPLE, WIDTH, WIDTH * 3 - 1, HEIGHT)


def test_short_buffer_rejected():
    with pytest.raises(ValueError):
        swap_red_blue(bytes(5), 2, 1)


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        luminance(SAMPLE, -1, HEIGHT)


def test_vertical_flip_swaps_rows():
    data = bytes([1, 2, 3, 4, 5, 6])
    assert vertical_flip(data, 3, 2) == bytes([4, 5, 6, 1, 2, 3])


def test_vertical_flip_twice_is_identity():
    once = vertical_flip(SAMPLE, WIDTH * 3, HEIGHT)
    assert once != SAMPLE
    assert vertical_flip(once, WIDTH * 3, HEIGHT) == SAMPLE


def test_vertical_flip_keeps_middle_row():
    flipped = vertical_flip(SAMPLE, WIDTH * 3, HEIGHT)
    row = WIDTH * 3
    assert flipped[row : 2 * row] == SAMPLE[row : 2 * row]


def test_swap_red_blue_single_pixel():
    assert swap_red_blue(bytes([1, 2, 3]), 1, 1) == bytes([3, 2, 1])


def test_swap_red_blue_twice_is_identity():
    assert swap_red_blue(swap_red_blue(SAMPLE, WIDTH, HEIGHT), WIDTH, HEIGHT) == SAMPLE


def test_luminance_black_and_red():
    assert luminance(bytes([0, 0, 0, 200, 0, 0]), 2, 1) == bytes([0, 59])


def test_luminance_length():
    assert len(luminance(SAMPLE, WIDTH, HEIGHT)) == WIDTH * HEIGHT


def test_grayscale_channels_equal_luminance():
    gray = to_grayscale(SAMPLE, WIDTH, HEIGHT)
    lum = luminance(SAMPLE, WIDTH, HEIGHT)
    assert len(gray) == len(SAMPLE)
    for i, value in enumerate(lum):
        assert gray[3 * i : 3 * i + 3] == bytes([value, value, value])


def test_grayscale_does_not_modify_input():
    original = bytes(SAMPLE)
    to_grayscale(SAMPLE, WIDTH, HEIGHT)
    assert SAMPLE == original


def test_grayscale_is_idempotent_on_black():
    black = bytes(12)
    assert to_grayscale(black, 2, 2) == black