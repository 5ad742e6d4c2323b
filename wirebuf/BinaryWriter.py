"""
Request buffer for Kafka-style wire messages.

Primitive encoders append big-endian integers, strings and byte arrays to a
single `bytearray`. `withLengthPrefix` and `withCrc32Prefix` reserve a 4-byte
placeholder, run a nested writer against the same buffer and then patch the
placeholder with the size or CRC-32 of whatever the writer appended.
"""

from __future__ import annotations

from typing import Callable
from zlib import crc32

from wirebuf.config import Config
from wirebuf.logger import Logger

PLACEHOLDER_SIZE = 4


class EncodingError(ValueError):
    """Raised when a value does not fit the width it is written with."""

    pass


def write_value(chunk: bytearray, value: int):
    for i in range(chunk.__len__()):
        chunk[chunk.__len__() - 1 - i] = value & 0xFF
        value = value >> 8
    pass


def check_signed(size: int, value: int):
    bits = size * 8
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if value < low or value > high:
        raise EncodingError(f"int{bits} out of range [{low}, {high}]: {value}")
    pass


def as_bytes(value: str | bytes | bytearray) -> bytes | bytearray:
    if isinstance(value, str):
        return value.encode()
    return value


class RequestBuffer:
    """
    Builds the binary body of a single request.

    Nested writers passed to the combinators take no arguments and write to
    this same instance, so blocks may be nested to any depth.
    """

    def writeInt(self, size: int, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        check_signed(size, value)
        chunk = bytearray(size)
        write_value(chunk, value)
        self.data += chunk
        pass

    def writePlaceholder(self, size: int):
        offset = self.data.__len__()
        self.data += bytearray(size)

        def write(value: int):
            chunk = bytearray(size)
            write_value(chunk, value)
            self.data[offset : offset + size] = chunk

        return offset, write

    def appendBytes(self, data: bytes | bytearray):
        self.data += data
        pass

    def writeInt8(self, value: int):
        self.writeInt(1, value)

    def writeInt16(self, value: int):
        self.writeInt(2, value)

    def writeInt32(self, value: int):
        self.writeInt(4, value)

    def writeInt64(self, value: int):
        self.writeInt(8, value)

    def writeString(self, value: str | bytes | bytearray | None):
        if value is None:
            self.writeInt16(-1)
            return

        raw = as_bytes(value)
        if raw.__len__() > 0x7FFF:
            raise EncodingError(f"string of {raw.__len__()} bytes does not fit an int16 length")
        self.writeInt16(raw.__len__())
        self.appendBytes(raw)

    def writeBytes(self, value: bytes | bytearray | None):
        if value is None:
            self.writeInt32(-1)
            return

        if value.__len__() > 0x7FFFFFFF:
            raise EncodingError(f"bytes of length {value.__len__()} do not fit an int32 length")
        self.writeInt32(value.__len__())
        self.appendBytes(value)

    def withLengthPrefix(self, writer: Callable[[], None]):
        """Prefix everything `writer` appends with its byte count as an int32."""

        offset, patch = self.writePlaceholder(PLACEHOLDER_SIZE)
        start = offset + PLACEHOLDER_SIZE
        writer()

        size = self.data.__len__() - start
        check_signed(PLACEHOLDER_SIZE, size)
        patch(size)
        if Config.TRACE:
            Logger.debug(f"[LEN] offset={offset} size={size}")
        pass

    def withCrc32Prefix(self, writer: Callable[[], None]):
        """Prefix everything `writer` appends with its CRC-32 as a uint32."""

        offset, patch = self.writePlaceholder(PLACEHOLDER_SIZE)
        start = offset + PLACEHOLDER_SIZE
        writer()

        checksum = crc32(self.data[start:])
        patch(checksum)
        if Config.TRACE:
            Logger.debug(f"[CRC] offset={offset} crc32={checksum:#010x} over {self.data.__len__() - start} bytes")
        pass

    def finalize(self) -> bytes:
        return bytes(self.data)

    def __bytes__(self) -> bytes:
        return self.finalize()

    def __len__(self) -> int:
        return self.data.__len__()

    def __init__(self) -> None:
        self.data = bytearray()
        pass
