"""Тесты percent-encoding"""

import pytest

from obs_presign.signing.encoding import (
    EncodedLengthExceeded,
    percent_decode,
    percent_encode,
)


class TestPercentEncode:
    def test_unreserved_chars_not_encoded(self) -> None:
        assert percent_encode("abcXYZ019-_.~") == "abcXYZ019-_.~"

    def test_space_encoded_as_percent20(self) -> None:
        assert percent_encode("hello world") == "hello%20world"

    def test_slash_encoded_by_default(self) -> None:
        assert percent_encode("text/plain") == "text%2Fplain"

    def test_slash_preserved_when_requested(self) -> None:
        assert percent_encode("dir/sub/file.txt", preserve_slash=True) == "dir/sub/file.txt"

    def test_base64_characters_encoded(self) -> None:
        assert percent_encode("ab+/c=") == "ab%2B%2Fc%3D"

    def test_non_ascii_encoded_as_utf8_bytes_uppercase(self) -> None:
        assert percent_encode("é") == "%C3%A9"

    def test_bytes_input(self) -> None:
        assert percent_encode(b"\xff\x00a") == "%FF%00a"

    def test_lone_surrogate_not_encodable(self) -> None:
        with pytest.raises(UnicodeEncodeError):
            percent_encode("a\ud800b")

    def test_empty_value(self) -> None:
        assert percent_encode("") == ""

    def test_max_size_exact_fit(self) -> None:
        assert percent_encode("a b", max_size=5) == "a%20b"

    def test_max_size_exceeded(self) -> None:
        with pytest.raises(EncodedLengthExceeded) as exc_info:
            percent_encode("a b", max_size=4)
        assert exc_info.value.encoded_length == 5
        assert exc_info.value.max_size == 4


class TestPercentDecode:
    @pytest.mark.parametrize(
        "value",
        ["test-object.txt", "dir/файл с пробелом.txt", "a+b=c&d", "text/plain"],
    )
    def test_decode_restores_original_bytes(self, value: str) -> None:
        assert percent_decode(percent_encode(value)) == value.encode("utf-8")
        assert (
            percent_decode(percent_encode(value, preserve_slash=True))
            == value.encode("utf-8")
        )
