"""
Bytewords encoding and decoding.
Every encoding carries a trailing CRC-32 checksum of the payload, which is verified when decoding.
"""

import logging

from .checksum import CHECKSUM_LENGTH, checksum
from .errors import ChecksumMismatchError, InvalidWordError, TooShortError
from .types import Style, style_parameters
from .wordlist import index_for_token, minimal_word_for_index, word_for_index

logger = logging.getLogger(__name__)

# One payload byte plus the checksum.
MIN_DECODED_LENGTH = CHECKSUM_LENGTH + 1

EMPTY_PAYLOAD_CHECKSUM = checksum(b"")


def encoded_length(style: Style, payload_length: int) -> int:
    """Returns the exact number of characters `encode` produces for a payload of the given length."""
    if payload_length < 0:
        raise ValueError(f"Invalid payload length {payload_length}.")
    separator, word_length = style_parameters(style)
    num_words = payload_length + CHECKSUM_LENGTH
    return num_words * (word_length + len(separator)) - len(separator)


def encode(style: Style, payload: bytes) -> str:
    """Converts a payload into bytewords of the given style, the payload's checksum is appended."""
    separator, word_length = style_parameters(style)
    checksummed_payload = bytes(payload) + checksum(payload)

    if word_length == 2:
        words = map(minimal_word_for_index, checksummed_payload)
    else:
        words = map(word_for_index, checksummed_payload)
    encoded = separator.join(words)

    logger.debug(f"Encoded {len(checksummed_payload) - CHECKSUM_LENGTH} byte(s) as {style} bytewords.")
    assert len(encoded) == encoded_length(style, len(checksummed_payload) - CHECKSUM_LENGTH)
    return encoded


def decode(style: Style, text: str) -> bytes:
    """Converts bytewords of the given style back into the payload.
    Raises an InvalidWordError for unknown words or trailing garbage, a TooShortError if less than 5 bytes are
    decoded and a ChecksumMismatchError if the embedded checksum does not match the payload.
    """
    separator, word_length = style_parameters(style)

    buffer = bytearray()
    position = 0
    while len(text) - position >= word_length:
        buffer.append(index_for_token(text[position : position + word_length]))
        position += word_length
        if separator and text.startswith(separator, position):
            position += len(separator)

    if position != len(text):
        logger.debug(f"Decoding failed, {len(text) - position} trailing character(s) do not form a word.")
        raise InvalidWordError(text[position:])

    if len(buffer) < MIN_DECODED_LENGTH:
        # Exactly the checksum of nothing is the encoding of an empty payload.
        if bytes(buffer) == EMPTY_PAYLOAD_CHECKSUM:
            return b""
        raise TooShortError(len(buffer))

    payload = bytes(buffer[:-CHECKSUM_LENGTH])
    expected = bytes(buffer[-CHECKSUM_LENGTH:])
    actual = checksum(payload)
    if actual != expected:
        logger.debug(f"Decoding failed, checksum {actual.hex()} does not match {expected.hex()}.")
        raise ChecksumMismatchError(expected, actual)

    logger.debug(f"Decoded {len(payload)} byte(s) from {style} bytewords.")
    return payload
