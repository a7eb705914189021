"""
Pure Python PNG writer - zero external dependencies.

Uses only Python standard library (zlib for compression).
"""

import struct
import zlib
from typing import Sequence, Tuple

# PNG color types by channel count
COLOR_TYPES = {3: 2, 4: 6}

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


class PNGImage:
    """
    8-bit RGB or RGBA image buffer that serializes to PNG.
    """

    def __init__(self, width: int, height: int, channels: int = 4,
                 fill: Sequence[int] = None):
        """
        Initialize image buffer.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            channels: 3 for RGB, 4 for RGBA
            fill: Initial pixel value (defaults to all zero)

        Raises:
            ValueError: If dimensions or channel count are invalid
        """
        if width < 1 or height < 1:
            raise ValueError(f"Invalid image size {width}x{height}")
        if channels not in COLOR_TYPES:
            raise ValueError(f"channels must be 3 or 4, got {channels}")
        self.width = width
        self.height = height
        self.channels = channels
        pixel = tuple(fill) if fill is not None else (0,) * channels
        if len(pixel) != channels:
            raise ValueError(f"fill must have {channels} components")
        self.pixels = [[pixel for _ in range(width)] for _ in range(height)]

    def set_pixel(self, x: int, y: int, color: Sequence[int]):
        """Set a single pixel; out-of-bounds writes are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y][x] = tuple(max(0, min(255, int(c))) for c in color)

    def get_pixel(self, x: int, y: int) -> Tuple[int, ...]:
        """Get pixel at position (zeros outside the image)."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.pixels[y][x]
        return (0,) * self.channels

    def to_bytes(self) -> bytes:
        """
        Encode the image as a PNG file.

        Returns:
            Complete PNG byte string
        """
        def make_chunk(chunk_type: bytes, data: bytes) -> bytes:
            """Create a PNG chunk with CRC."""
            chunk = chunk_type + data
            crc = zlib.crc32(chunk) & 0xffffffff
            return struct.pack('>I', len(data)) + chunk + struct.pack('>I', crc)

        # Width, Height, Bit depth (8), Color type, Compression, Filter, Interlace
        ihdr_data = struct.pack('>IIBBBBB', self.width, self.height, 8,
                                COLOR_TYPES[self.channels], 0, 0, 0)
        ihdr = make_chunk(b'IHDR', ihdr_data)

        raw_data = bytearray()
        for row in self.pixels:
            raw_data.append(0)  # Filter type: None
            for pixel in row:
                raw_data.extend(pixel)

        idat = make_chunk(b'IDAT', zlib.compress(bytes(raw_data), 9))
        iend = make_chunk(b'IEND', b'')

        return PNG_SIGNATURE + ihdr + idat + iend

    def save(self, filename: str):
        """Save image as PNG file."""
        with open(filename, 'wb') as f:
            f.write(self.to_bytes())
