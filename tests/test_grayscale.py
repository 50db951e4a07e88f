import pytest

from bmpgray.bmp import Bitmap, FileHeader, InfoHeader, read_bitmap, write_bitmap
from bmpgray.grayscale import gray_value, grayscale_bitmap, grayscale_pixels, main


def _pixels(width, height, bpp):
    return bytes((i * 37 + 11) % 256 for i in range(width * bpp * height))


def _triples(data, bpp):
    return [tuple(data[i:i + 3]) for i in range(0, len(data), bpp)]


def test_gray_value_black():
    assert gray_value(0, 0, 0) == 0


def test_gray_value_pure_red():
    assert gray_value(0, 0, 255) == 76


def test_gray_value_is_truncated_weighted_sum():
    assert gray_value(255, 0, 0) == int(0.114 * 255)


def test_channels_equal_after_conversion_24bit():
    data = _pixels(4, 3, 3)
    out = grayscale_pixels(data, 4, 3, 24)
    assert len(out) == len(data)
    for b, g, r in _triples(out, 3):
        assert b == g == r


def test_pixel_values_match_gray_value():
    data = _pixels(2, 2, 3)
    out = grayscale_pixels(data, 2, 2, 24)
    for (b, g, r), (gray, _, _) in zip(_triples(data, 3), _triples(out, 3)):
        assert gray == gray_value(b, g, r)


def test_alpha_untouched_32bit():
    data = _pixels(3, 2, 4)
    out = grayscale_pixels(data, 3, 2, 32)
    assert out[3::4] == data[3::4]
    for b, g, r in _triples(out, 4):
        assert b == g == r


def test_input_not_modified():
    data = bytearray(_pixels(2, 1, 3))
    copy = bytes(data)
    grayscale_pixels(data, 2, 1, 24)
    assert bytes(data) == copy


def test_negative_height_uses_absolute_rows():
    data = _pixels(2, 2, 3)
    assert grayscale_pixels(data, 2, -2, 24) == grayscale_pixels(data, 2, 2, 24)


def test_low_bit_count_rejected():
    with pytest.raises(ValueError):
        grayscale_pixels(bytes(8), 2, 2, 16)


def test_short_data_rejected():
    with pytest.raises(ValueError):
        grayscale_pixels(bytes(5), 2, 2, 24)


def _bitmap():
    pixels = bytearray(_pixels(3, 2, 3))
    fh = FileHeader(file_size=54 + len(pixels), offset_data=54)
    ih = InfoHeader(size=40, width=3, height=2, bit_count=24)
    return Bitmap(fh, ih, pixels)


def test_grayscale_bitmap_keeps_headers():
    bmp = _bitmap()
    result = grayscale_bitmap(bmp)
    assert result.file_header == bmp.file_header
    assert result.info_header == bmp.info_header
    assert result.pixels == grayscale_pixels(bmp.pixels, 3, 2, 24)


def test_main_writes_grayscale(tmp_path, capsys):
    src = tmp_path / "in.bmp"
    dst = tmp_path / "out.bmp"
    write_bitmap(_bitmap(), src)
    assert main([str(src), str(dst)]) == 0
    out = read_bitmap(dst)
    for b, g, r in _triples(out.pixels, 3):
        assert b == g == r
    printed = capsys.readouterr().out
    assert "Grayscale conversion took" in printed
    assert printed.rstrip().endswith("Finished")


def test_main_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "none.bmp"), str(tmp_path / "out.bmp")]) == 1
    assert "Cannot open file." in capsys.readouterr().err