"""Grayscale conversion of 24- and 32-bit BMP images."""

from __future__ import annotations

import argparse
import dataclasses
import sys
import time

from .bmp import Bitmap, read_bitmap, row_stride, write_bitmap

DEFAULT_INPUT = "Images/PIA.bmp"
DEFAULT_OUTPUT = "Images/Grayscaled.bmp"


def gray_value(blue: int, green: int, red: int) -> int:
    """Luma of one pixel, truncated to an integer."""
    return int(0.299 * red + 0.587 * green + 0.114 * blue)


def grayscale_pixels(data: bytes, width: int, height: int, bit_count: int) -> bytearray:
    """Return a copy of BGR(A) pixel rows with each pixel's colour channels set to its gray value."""
    bpp = bit_count // 8
    if bpp < 3:
        raise ValueError(f"unsupported bit count {bit_count}; need at least 24")
    stride = row_stride(width, bit_count)
    rows = abs(height)
    if len(data) < stride * rows:
        raise ValueError(f"pixel data has {len(data)} bytes, expected {stride * rows}")
    out = bytearray(data)
    span = width * bpp
    for start in range(0, stride * rows, stride):
        end = start + span
        grays = bytes(
            gray_value(b, g, r)
            for b, g, r in zip(out[start:end:bpp], out[start + 1:end:bpp], out[start + 2:end:bpp])
        )
        for channel in range(3):
            out[start + channel:end:bpp] = grays
    return out


def grayscale_bitmap(bitmap: Bitmap) -> Bitmap:
    """Return a new bitmap with grayscaled pixels and the same headers."""
    pixels = grayscale_pixels(bitmap.pixels, bitmap.width, bitmap.info_header.height, bitmap.bit_count)
    return dataclasses.replace(bitmap, pixels=pixels)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert a BMP image to grayscale.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        bitmap = read_bitmap(args.input)
    except OSError:
        print("Cannot open file.", file=sys.stderr)
        return 1

    start = time.perf_counter()
    result = grayscale_bitmap(bitmap)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    print(f"Grayscale conversion took {elapsed_ms} ms")

    write_bitmap(result, args.output)
    print("Finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())