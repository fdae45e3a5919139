"""Tests for bytewords encoding and decoding."""

import string

from concurrent.futures import ThreadPoolExecutor

import pytest

from bytewords.codec import decode, encode, encoded_length
from bytewords.errors import ChecksumMismatchError, DecodeError, InvalidWordError, TooShortError

STYLES = ["standard", "uri", "minimal"]

PAYLOADS = [
    b"",
    b"\x00",
    b"\x00\x01\x02\x80\xff",
    bytes(range(256)),
    bytes.fromhex("d9012ea2018c5820c7e8e1f7f6a1b3d9e3d3f5c7a1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6e7f8"),
]


class TestEncode:
    def test_single_zero_byte(self):
        assert encode("standard", b"\x00") == "able tied also webs lung"

    def test_known_vector(self):
        data = b"\x00\x01\x02\x80\xff"
        assert encode("standard", data) == "able acid also lava zero jade need echo taxi"
        assert encode("uri", data) == "able-acid-also-lava-zero-jade-need-echo-taxi"
        assert encode("minimal", data) == "aeadaolazojendeoti"

    def test_reordered_words(self):
        assert encode("standard", b"\xff") == "zero zero able able able"
        assert encode("standard", b"\x85") == "list glow taxi monk cusp"

    def test_empty_payload(self):
        encoded = encode("standard", b"")
        assert encoded == "able able able able"
        assert len(encoded.split(" ")) == 4

    def test_accepts_bytearray(self):
        assert encode("uri", bytearray(b"\x00")) == "able-tied-also-webs-lung"

    @pytest.mark.parametrize("style", STYLES)
    def test_deterministic(self, style):
        data = bytes(range(100))
        assert encode(style, data) == encode(style, data)

    @pytest.mark.parametrize("length", [0, 1, 16, 100])
    def test_output_length(self, length):
        data = bytes(length)
        assert len(encode("standard", data)) == 5 * (length + 4) - 1
        assert len(encode("uri", data)) == 5 * (length + 4) - 1
        assert len(encode("minimal", data)) == 2 * (length + 4)

    def test_invalid_style(self):
        with pytest.raises(ValueError, match="Invalid style"):
            encode("compact", b"\x00")  # type: ignore[arg-type]


class TestEncodedLength:
    @pytest.mark.parametrize("style", STYLES)
    def test_matches_encode(self, style):
        for length in (0, 1, 7, 64):
            assert encoded_length(style, length) == len(encode(style, bytes(length)))

    def test_negative_length(self):
        with pytest.raises(ValueError):
            encoded_length("standard", -1)


class TestDecode:
    @pytest.mark.parametrize("style", STYLES)
    @pytest.mark.parametrize("payload", PAYLOADS)
    def test_roundtrip(self, style, payload):
        assert decode(style, encode(style, payload)) == payload

    def test_cross_style_equivalence(self):
        data = bytes(range(0, 256, 3))
        assert decode("minimal", encode("minimal", data)) == decode("standard", encode("standard", data)) == data

    @pytest.mark.parametrize("style", STYLES)
    def test_case_insensitive(self, style):
        data = b"\x00\x01\x02\x80\xff"
        assert decode(style, encode(style, data).upper()) == data

    def test_returns_bytes(self):
        assert isinstance(decode("standard", "able tied also webs lung"), bytes)

    def test_reordered_words(self):
        assert decode("standard", "zero zero able able able") == b"\xff"
        assert decode("uri", "list-glow-taxi-monk-cusp") == b"\x85"
        assert decode("minimal", "zozoaeaeae") == b"\xff"

    def test_empty_payload(self):
        assert decode("standard", "able able able able") == b""
        assert decode("minimal", "aeaeaeae") == b""

    def test_missing_separator_is_tolerated(self):
        assert decode("standard", "abletied also webslung") == b"\x00"

    def test_wrong_separator(self):
        with pytest.raises(InvalidWordError):
            decode("uri", "able tied also webs lung")

    def test_unknown_word(self):
        with pytest.raises(InvalidWordError) as excinfo:
            decode("standard", "able tied also webs lunk")
        assert excinfo.value.token == "lunk"

    @pytest.mark.parametrize(
        "style,text",
        [
            ("standard", "able tied also webs lung x"),
            ("standard", "able tied also webs lun"),
            ("standard", "able tied also webs lung  "),
            ("uri", "able-tied-also-webs-lung-ab"),
            ("minimal", "aetdaowslga"),
        ],
    )
    def test_trailing_characters(self, style, text):
        with pytest.raises(InvalidWordError):
            decode(style, text)

    def test_trailing_separator(self):
        assert decode("standard", "able tied also webs lung ") == b"\x00"

    @pytest.mark.parametrize("text", ["", "able", "able acid", "able acid also apex", "able able able"])
    def test_too_short(self, text):
        with pytest.raises(TooShortError):
            decode("standard", text)

    def test_too_short_minimal(self):
        with pytest.raises(TooShortError) as excinfo:
            decode("minimal", "aeadao")
        assert excinfo.value.length == 3

    def test_checksum_mismatch(self):
        with pytest.raises(ChecksumMismatchError) as excinfo:
            decode("standard", "acid tied also webs lung")
        assert excinfo.value.expected == b"\xd2\x02\xef\x8d"

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decode("standard", "not bytewords")

    def test_invalid_style(self):
        with pytest.raises(ValueError, match="Invalid style"):
            decode("compact", "able tied also webs lung")  # type: ignore[arg-type]


class TestTamperDetection:
    @pytest.mark.parametrize("style", ["standard", "uri"])
    def test_single_character_changes_are_detected(self, style):
        encoded = encode(style, b"\x00\x01\x02\x80\xff")
        replacements = string.ascii_lowercase + string.digits + " -"
        for position, original in enumerate(encoded):
            for char in replacements:
                if char == original.lower():
                    continue
                tampered = encoded[:position] + char + encoded[position + 1 :]
                with pytest.raises((InvalidWordError, ChecksumMismatchError)):
                    decode(style, tampered)

    def test_swapped_words_are_detected(self):
        with pytest.raises(ChecksumMismatchError):
            decode("standard", "acid able also lava zero jade need echo taxi")


class TestConcurrency:
    def test_parallel_roundtrips(self):
        payloads = [bytes([i]) * i for i in range(64)]

        def roundtrip(payload: bytes) -> bytes:
            return decode("uri", encode("uri", payload))

        with ThreadPoolExecutor(max_workers=8) as executor:
            assert list(executor.map(roundtrip, payloads)) == payloads

    def test_decode_error_base_class(self):
        for exc in (InvalidWordError, TooShortError, ChecksumMismatchError):
            assert issubclass(exc, DecodeError)
