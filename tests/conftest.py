from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def english_plaintext() -> str:
    """Long natural English text (over 6000 letters)."""
    return (DATA_DIR / "declaration.txt").read_text(encoding="utf-8")
