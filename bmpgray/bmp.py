"""Reading and writing uncompressed BMP images."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import ClassVar

BMP_SIGNATURE = 0x4D42


@dataclass
class FileHeader:
    """The 14-byte BMP file header."""

    file_type: int = BMP_SIGNATURE
    file_size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    offset_data: int = 0

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<HIHHI")

    def to_bytes(self) -> bytes:
        return self.FORMAT.pack(
            self.file_type,
            self.file_size,
            self.reserved1,
            self.reserved2,
            self.offset_data,
        )


@dataclass
class InfoHeader:
    """The 40-byte BMP info header."""

    size: int = 0
    width: int = 0
    height: int = 0
    planes: int = 1
    bit_count: int = 0
    compression: int = 0
    size_image: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    colors_important: int = 0

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<IiiHHIIiiII")

    def to_bytes(self) -> bytes:
        return self.FORMAT.pack(
            self.size,
            self.width,
            self.height,
            self.planes,
            self.bit_count,
            self.compression,
            self.size_image,
            self.x_pixels_per_meter,
            self.y_pixels_per_meter,
            self.colors_used,
            self.colors_important,
        )


def _unpack(fmt: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < fmt.size:
        raise ValueError(f"{what} needs {fmt.size} bytes, got {len(data)}")
    return fmt.unpack_from(data)


def parse_file_header(data: bytes) -> FileHeader:
    """Decode a file header from the first 14 bytes of ``data``."""
    return FileHeader(*_unpack(FileHeader.FORMAT, data, "file header"))


def parse_info_header(data: bytes) -> InfoHeader:
    """Decode an info header from the first 40 bytes of ``data``."""
    return InfoHeader(*_unpack(InfoHeader.FORMAT, data, "info header"))


@dataclass
class Bitmap:
    """Headers plus the raw pixel rows of a BMP image."""

    file_header: FileHeader
    info_header: InfoHeader
    pixels: bytearray = field(default_factory=bytearray)

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def rows(self) -> int:
        return abs(self.info_header.height)

    @property
    def bit_count(self) -> int:
        return self.info_header.bit_count

    @property
    def row_stride(self) -> int:
        return row_stride(self.width, self.bit_count)

    @property
    def image_size(self) -> int:
        return self.row_stride * self.rows

    def to_bytes(self) -> bytes:
        """Both headers followed directly by the pixel data."""
        return self.file_header.to_bytes() + self.info_header.to_bytes() + bytes(self.pixels)


def row_stride(width: int, bit_count: int) -> int:
    """Bytes per pixel row, rounded up to a whole byte."""
    return (width * bit_count + 7) // 8


def read_bitmap(path: str | os.PathLike[str]) -> Bitmap:
    """Read a BMP file; missing pixel bytes are filled with zeros."""
    with open(path, "rb") as stream:
        file_header = parse_file_header(stream.read(FileHeader.FORMAT.size))
        info_header = parse_info_header(stream.read(InfoHeader.FORMAT.size))
        stream.seek(file_header.offset_data)
        size = row_stride(info_header.width, info_header.bit_count) * abs(info_header.height)
        pixels = bytearray(stream.read(size))
    pixels.extend(bytes(size - len(pixels)))
    return Bitmap(file_header, info_header, pixels)


def write_bitmap(bitmap: Bitmap, path: str | os.PathLike[str]) -> None:
    """Write ``bitmap`` to ``path``."""
    with open(path, "wb") as stream:
        stream.write(bitmap.to_bytes())