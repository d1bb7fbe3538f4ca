"""Tests for the command-line entry points."""

import io
import sys

import pytest

from kasiski.cli import encode_main, kasiski_main, vigenere_main
from kasiski.services.engines.polyalphabetic.vigenere import VigenereEngine


def feed_stdin(monkeypatch, data: str | bytes) -> None:
    if isinstance(data, str):
        data = data.encode("utf-8")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


class TestKasiskiCommand:
    """Test suite for the kasiski command."""

    def test_prints_recovered_key(self, monkeypatch, capsys, english_plaintext):
        feed_stdin(monkeypatch, VigenereEngine().encrypt(english_plaintext, "lemon"))

        assert kasiski_main([]) == 0

        out = capsys.readouterr().out
        key = out.strip()
        assert out.endswith("\n")
        assert key.islower()
        assert len(key) % 5 == 0

    def test_portuguese_flag(self, monkeypatch, capsys, english_plaintext):
        feed_stdin(monkeypatch, VigenereEngine().encrypt(english_plaintext, "lemon"))

        assert kasiski_main(["-p"]) == 0
        assert capsys.readouterr().out.strip().isalpha()

    def test_empty_input(self, monkeypatch, capsys):
        feed_stdin(monkeypatch, "12345\n")

        assert kasiski_main(["-e"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "kasiski: no alphabetic characters in input"

    @pytest.mark.parametrize("argv", [["-e", "-p"], ["extra"], ["-x"]])
    def test_usage_errors(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            kasiski_main(argv)
        assert exc_info.value.code == 2


class TestVigenereCommand:
    """Test suite for the vigenere command."""

    def test_encrypt(self, monkeypatch, capsysbinary):
        feed_stdin(monkeypatch, "Hello, world!\n")

        assert vigenere_main(["key"]) == 0
        assert capsysbinary.readouterr().out == b"Rijvs, uyvjn!\n"

    def test_decrypt(self, monkeypatch, capsysbinary):
        feed_stdin(monkeypatch, "Rijvs, uyvjn!\n")

        assert vigenere_main(["-d", "key"]) == 0
        assert capsysbinary.readouterr().out == b"Hello, world!\n"

    def test_non_utf8_bytes_pass_through(self, monkeypatch, capsysbinary):
        feed_stdin(monkeypatch, b"Caf\xe9 au lait\n")

        assert vigenere_main(["key"]) == 0
        assert capsysbinary.readouterr().out == b"Med\xe9 ky jkmr\n"

    def test_non_utf8_bytes_decrypt(self, monkeypatch, capsysbinary):
        feed_stdin(monkeypatch, b"Med\xe9 ky jkmr\n")

        assert vigenere_main(["-d", "key"]) == 0
        assert capsysbinary.readouterr().out == b"Caf\xe9 au lait\n"

    def test_missing_key(self):
        with pytest.raises(SystemExit):
            vigenere_main([])


class TestEncodeCommand:
    """Test suite for the encode command."""

    def test_arguments(self, capsys):
        assert encode_main(["Hello, world!", "key"]) == 0
        assert capsys.readouterr().out == "Rijvs, uyvjn!\n"

    def test_prompts_for_missing_key(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "key")

        assert encode_main(["Hello, world!"]) == 0
        assert capsys.readouterr().out == "Rijvs, uyvjn!\n"

    def test_prompts_for_everything(self, monkeypatch, capsys):
        answers = iter(["ATTACKATDAWN", "LEMON"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

        assert encode_main([]) == 0
        assert capsys.readouterr().out == "LXFOPVEFRNHR\n"

    def test_invalid_key(self, capsys):
        assert encode_main(["Hello", "k3y"]) == 1
        assert capsys.readouterr().err.startswith("encode: ")

    def test_whitespace_in_key(self, capsys):
        assert encode_main(["Hello", " key "]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("encode: ")
