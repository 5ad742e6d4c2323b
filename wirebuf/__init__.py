"""
Binary request buffer for Kafka-style wire protocols.

`RequestBuffer` appends big-endian primitives, length-prefixed strings and
byte arrays, and patches size or CRC-32 prefixes over nested blocks once their
contents are written.
"""

from wirebuf.BinaryWriter import EncodingError, RequestBuffer

__all__ = ["EncodingError", "RequestBuffer"]
