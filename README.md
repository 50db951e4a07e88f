# bmpgray

Converts uncompressed BMP images to grayscale using the luminance formula

    gray = 0.299 * red + 0.587 * green + 0.114 * blue

The result is truncated to an integer. Every pixel's blue, green and red
bytes are replaced by that gray value; a fourth (alpha) byte in 32-bit
images is left as it is. The file header and info header are written out
unchanged, followed directly by the converted pixel rows.

Only uncompressed images with at least 24 bits per pixel are handled.

## Installation

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Command line

    bmpgray-grayscale [INPUT] [OUTPUT]

reads `INPUT` (default `Images/PIA.bmp`, relative to the current
directory), writes the grayscale result to `OUTPUT` (default
`Images/Grayscaled.bmp`), and prints how long the conversion took in
milliseconds, then `Finished`. If the input cannot be opened it prints
`Cannot open file.` to standard error and exits with status 1.

    bmpgray-pairsum [--count N]

builds the numbers 0 through N-1 (N defaults to 300000 and must be a
non-negative even number), sums them, then sums them again in adjacent
pairs, and prints both totals as `TOTAL----------TOTAL` together with the
time the pairing step took in microseconds.

## Library use

```python
from bmpgray.bmp import read_bitmap, write_bitmap
from bmpgray.grayscale import grayscale_bitmap, gray_value

bitmap = read_bitmap("photo.bmp")
write_bitmap(grayscale_bitmap(bitmap), "photo-gray.bmp")

gray_value(0, 0, 255)  # gray level of a pure red pixel
```

Lower-level pieces:

- `bmpgray.bmp.parse_file_header(data)` and
  `bmpgray.bmp.parse_info_header(data)` decode the 14-byte file header
  and the 40-byte info header into `FileHeader` and `InfoHeader`, raising
  `ValueError` if `data` is too short; each header has `to_bytes()` to
  encode it again.
- `bmpgray.bmp.read_bitmap(path)` reads both headers and the pixel rows
  found at the header's data offset; if the file ends early the missing
  pixel bytes are filled with zeros.
- `bmpgray.bmp.Bitmap` holds both headers and the pixel bytes, with
  `width`, `rows`, `bit_count`, `row_stride` and `image_size` properties;
  `Bitmap.to_bytes()` gives the headers followed by the pixel bytes, and
  `bmpgray.bmp.write_bitmap(bitmap, path)` writes that to a file.
- `bmpgray.bmp.row_stride(width, bit_count)` gives the bytes per row,
  rounded up to a whole byte.
- `bmpgray.grayscale.grayscale_pixels(data, width, height, bit_count)`
  returns a converted copy of raw pixel rows; it raises `ValueError` for
  fewer than 24 bits per pixel or too little data.
- `bmpgray.pairsum.pair_sums(values)` returns the sums of adjacent pairs
  and raises `ValueError` for an odd number of values.

## Limitations

- Compressed, palette-based and 1/4/8/16-bit images are not supported.
- Rows are taken as `(width * bit_count + 7) // 8` bytes, without the
  4-byte row padding that BMP files usually carry, so widths whose rows
  need padding are not converted correctly.
- Anything between the info header and the pixel data (such as a colour
  table or an extended header) is not copied; the pixel data is written
  straight after the two headers while the data offset in the file header
  is kept as it was.
- No other image formats are read or written.