"""Tests for input normalization."""

import io

import pytest

from kasiski.core.exceptions import InputError
from kasiski.services.preprocessing.normalizer import TextNormalizer


class TestTextNormalizer:
    """Test suite for the text normalizer."""

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_strips_non_letters_and_case(self, normalizer):
        result = normalizer.normalize("Hello, World! 42\n")

        assert result.text == "HELLOWORLD"
        assert result.codes == (7, 4, 11, 11, 14, 22, 14, 17, 11, 3)
        assert result.removed == 7
        assert len(result) == 10

    def test_non_ascii_letters_dropped(self, normalizer):
        assert normalizer.normalize("ação é boa").text == "AOBOA"

    def test_read_text_stream(self, normalizer):
        stream = io.StringIO("abc " * 1000)
        result = normalizer.read_stream(stream)

        assert result.text == "ABC" * 1000
        assert result.removed == 1000

    def test_read_binary_stream(self, normalizer):
        stream = io.BytesIO(b"Lxfo pvef\xff\x00 rnhr\n")
        assert normalizer.read_stream(stream).text == "LXFOPVEFRNHR"

    def test_empty_input(self, normalizer):
        with pytest.raises(InputError, match="no alphabetic"):
            normalizer.normalize("123 !?")

    def test_too_short_input(self, normalizer):
        with pytest.raises(InputError) as exc_info:
            normalizer.read_stream(io.StringIO("a b"))
        assert exc_info.value.details["length"] == 2

    def test_unreadable_stream(self, normalizer):
        class BrokenStream:
            def read(self, size):
                raise OSError("device gone")

        with pytest.raises(InputError, match="could not read"):
            normalizer.read_stream(BrokenStream())
