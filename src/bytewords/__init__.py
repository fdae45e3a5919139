"""
Bytewords: encode binary data as short, pronounceable words protected by a CRC-32 checksum.
See https://github.com/BlockchainCommons/Research/blob/master/papers/bcr-2020-012-bytewords.md
"""

from .checksum import checksum
from .codec import decode, encode, encoded_length
from .errors import ChecksumMismatchError, DecodeError, InvalidWordError, TooShortError
from .types import STYLES, Style
from .wordlist import WORDLIST, index_for_token, minimal_word_for_index, word_for_index

__all__ = [
    "STYLES",
    "WORDLIST",
    "ChecksumMismatchError",
    "DecodeError",
    "InvalidWordError",
    "Style",
    "TooShortError",
    "checksum",
    "decode",
    "encode",
    "encoded_length",
    "index_for_token",
    "minimal_word_for_index",
    "word_for_index",
]
