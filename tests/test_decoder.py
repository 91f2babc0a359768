import io
import os
import tempfile
import unittest

from wbmpview.codec import (
    Color,
    DecodeSettings,
    HeaderOverflow,
    IOFailure,
    OutOfRangeAccess,
    TruncatedPixelData,
    UnexpectedEndOfInput,
    decode,
    decode_bytes,
    decode_config,
    decode_config_file,
    decode_file,
    encode_multibyte_int,
)


def build_wbmp(width, height, data, type_field=0, fixed_header=0):
    return (
        encode_multibyte_int(type_field)
        + bytes([fixed_header])
        + encode_multibyte_int(width)
        + encode_multibyte_int(height)
        + bytes(data)
    )


class _RawSource(io.RawIOBase):
    """Unbuffered, unseekable byte source."""

    def __init__(self, data, fail_after=False):
        self._data = data
        self._pos = 0
        self._fail_after = fail_after

    def readable(self):
        return True

    def readinto(self, buffer):
        if self._pos >= len(self._data) and self._fail_after:
            raise OSError("device went away")
        n = min(len(buffer), len(self._data) - self._pos)
        buffer[:n] = self._data[self._pos : self._pos + n]
        self._pos += n
        return n


class TestDecode(unittest.TestCase):
    def test_full_decode(self):
        image = decode_bytes(build_wbmp(9, 2, [0x80, 0x80, 0x00, 0x00]))
        self.assertEqual(image.size, (9, 2))
        self.assertEqual(image.header.header_size, 4)
        self.assertEqual(image.data, b"\x80\x80\x00\x00")
        self.assertEqual(image.color_at(8, 0), Color.WHITE)
        self.assertEqual(image.color_at(8, 1), Color.BLACK)

    def test_reads_all_remaining_bytes(self):
        payload = bytes(range(256)) * 40
        image = decode(io.BytesIO(build_wbmp(8, len(payload), payload)), DecodeSettings(buffer_size=16))
        self.assertEqual(image.data, payload)

    def test_caller_stream_left_open(self):
        stream = io.BytesIO(build_wbmp(1, 1, [0x80]))
        decode(stream)
        self.assertFalse(stream.closed)

    def test_unbuffered_source(self):
        image = decode(_RawSource(build_wbmp(1, 1, [0x80])))
        self.assertEqual(image.color_at(0, 0), Color.WHITE)

    def test_truncated_header(self):
        with self.assertRaises(UnexpectedEndOfInput):
            decode(io.BytesIO(b"\x00\x00"))

    def test_read_error_is_io_failure(self):
        with self.assertRaises(IOFailure) as ctx:
            decode(_RawSource(build_wbmp(8, 1, []), fail_after=True))
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_short_pixel_data_lenient(self):
        image = decode_bytes(build_wbmp(8, 2, [0xFF]))
        self.assertEqual(image.color_at(0, 0), Color.WHITE)
        with self.assertRaises(OutOfRangeAccess):
            image.color_at(0, 1)

    def test_short_pixel_data_strict(self):
        with self.assertRaises(TruncatedPixelData) as ctx:
            decode_bytes(build_wbmp(8, 2, [0xFF]), DecodeSettings(strict=True))
        self.assertEqual((ctx.exception.expected, ctx.exception.actual), (2, 1))

    def test_strict_accepts_trailing_bytes(self):
        image = decode_bytes(build_wbmp(8, 1, [0xFF, 0x00]), DecodeSettings(strict=True))
        self.assertEqual(image.trailing_bytes, 1)

    def test_zero_buffer_size_rejected(self):
        with self.assertRaises(ValueError):
            DecodeSettings(buffer_size=0)
        with self.assertRaises(ValueError):
            DecodeSettings(max_int_bits=0)

    def test_small_buffer_reads_everything(self):
        stream = io.BufferedReader(io.BytesIO(build_wbmp(9, 1, [0xFF, 0x00])))
        image = decode(stream, DecodeSettings(buffer_size=1))
        self.assertEqual(image.data, b"\xff\x00")

    def test_integer_bound_from_settings(self):
        with self.assertRaises(HeaderOverflow):
            decode_bytes(build_wbmp(256, 1, []), DecodeSettings(max_int_bits=8))

    def test_decode_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "image.wbmp")
            with open(path, "wb") as handle:
                handle.write(build_wbmp(3, 1, [0xA0]))
            image = decode_file(path)
            self.assertEqual(image.row(0), [Color.WHITE, Color.BLACK, Color.WHITE])
            self.assertEqual(decode_config_file(path).size, (3, 1))


class TestDecodeConfig(unittest.TestCase):
    def test_dimensions_only(self):
        pixels = bytes([0x55] * 40)
        stream = io.BytesIO(build_wbmp(10, 20, pixels))
        config = decode_config(stream)
        self.assertEqual(config.size, (10, 20))
        self.assertEqual(config.color_model, "1")
        self.assertEqual(stream.tell(), 4)
        self.assertEqual(stream.read(), pixels)

    def test_buffered_stream_position(self):
        stream = io.BufferedReader(io.BytesIO(build_wbmp(10, 20, [0x55] * 40)))
        self.assertEqual(decode_config(stream).size, (10, 20))
        self.assertEqual(stream.tell(), 4)

    def test_unseekable_source_not_over_read(self):
        source = _RawSource(build_wbmp(300, 2, [0x01, 0x02]))
        self.assertEqual(decode_config(source).size, (300, 2))
        self.assertEqual(source.read(), b"\x01\x02")

    def test_truncated_header(self):
        with self.assertRaises(UnexpectedEndOfInput):
            decode_config(io.BytesIO(b"\x00\x00"))
        with self.assertRaises(UnexpectedEndOfInput):
            decode_config(_RawSource(b"\x00\x00"))


if __name__ == "__main__":
    unittest.main()
