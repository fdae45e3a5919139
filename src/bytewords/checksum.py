"""
CRC-32 checksum appended to every bytewords encoding.
"""

import zlib

CHECKSUM_LENGTH = 4


def checksum(data: bytes) -> bytes:
    """Computes the CRC-32 (IEEE 802.3 polynomial) of the given data, serialized as 4 bytes in big-endian order."""
    return zlib.crc32(data).to_bytes(CHECKSUM_LENGTH, "big")
