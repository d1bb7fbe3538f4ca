"""
Command-line entry points.

    kasiski [-e | -p] [-v]    guess the key of ciphertext read from stdin
    vigenere [-d | -e] key    shift stdin to stdout with a repeating key
    encode [message] [key]    encode a message, prompting for what is missing
"""

import argparse
import logging
import sys
from typing import Iterator, Sequence

from kasiski.core.config import get_settings
from kasiski.core.exceptions import CryptanalysisError
from kasiski.models.schemas import Language
from kasiski.services.engines.polyalphabetic.vigenere import VigenereEngine
from kasiski.services.pipeline.examiner import KasiskiExaminer

CHUNK_SIZE = 1024


def _configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(name)s: %(levelname)s: %(message)s",
    )


def _fail(prog: str, message: str) -> int:
    print(f"{prog}: {message}", file=sys.stderr)
    return 1


def _read_chunks(stream) -> Iterator[bytes]:
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


def build_kasiski_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kasiski",
        description="Guess the key of repeating-key ciphertext read from standard input.",
    )
    lang = parser.add_mutually_exclusive_group()
    lang.add_argument(
        "-e", dest="language", action="store_const", const=Language.ENGLISH,
        help="use English letter frequencies (default)",
    )
    lang.add_argument(
        "-p", dest="language", action="store_const", const=Language.PORTUGUESE,
        help="use Portuguese letter frequencies",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log analysis steps to stderr")
    return parser


def kasiski_main(argv: Sequence[str] | None = None) -> int:
    args = build_kasiski_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        examiner = KasiskiExaminer(language=args.language)
        report = examiner.examine_stream(sys.stdin.buffer)
    except CryptanalysisError as e:
        return _fail("kasiski", e.message)

    print(report.key)
    return 0


def build_vigenere_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vigenere",
        description="Encrypt or decrypt standard input with a repeating key.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-d", dest="direction", action="store_const", const=-1, help="decrypt")
    mode.add_argument("-e", dest="direction", action="store_const", const=1, help="encrypt (default)")
    parser.add_argument("key")
    parser.set_defaults(direction=1)
    return parser


def vigenere_main(argv: Sequence[str] | None = None) -> int:
    args = build_vigenere_parser().parse_args(argv)
    _configure_logging()

    # Bytes pass through as latin-1 so non-ASCII input is copied unchanged
    chunks = (chunk.decode("latin-1") for chunk in _read_chunks(sys.stdin.buffer))
    engine = VigenereEngine()
    try:
        for chunk in engine.transform_stream(chunks, args.key, args.direction):
            sys.stdout.buffer.write(chunk.encode("latin-1"))
        sys.stdout.buffer.flush()
    except OSError:
        return _fail("vigenere", "could not perform I/O")
    return 0


def encode_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="encode",
        description="Encode a message with the Vigenère cipher, preserving case and punctuation.",
    )
    parser.add_argument("message", nargs="?")
    parser.add_argument("key", nargs="?")
    args = parser.parse_args(argv)
    _configure_logging()

    message = args.message
    if message is None:
        message = input("Enter the text to encode: ")
    key = args.key
    if key is None:
        key = input("Enter the key: ")

    try:
        print(VigenereEngine().encrypt(message, key))
    except CryptanalysisError as e:
        return _fail("encode", e.message)
    return 0


def kasiski() -> None:
    sys.exit(kasiski_main())


def vigenere() -> None:
    sys.exit(vigenere_main())


def encode() -> None:
    sys.exit(encode_main())


if __name__ == "__main__":
    kasiski()
