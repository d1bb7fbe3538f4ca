"""Tests for per-coset frequency recovery."""

import pytest

from kasiski.core.exceptions import EmptyCosetError
from kasiski.services.analysis.frequencies import (
    ENGLISH_FREQ,
    PORTUGUESE_FREQ,
    get_frequency_table,
    sum_of_squares,
)
from kasiski.services.analysis.recovery import FrequencyRecoverer
from kasiski.services.engines.polyalphabetic.vigenere import VigenereEngine
from kasiski.services.preprocessing.normalizer import TextNormalizer


class TestFrequencyTables:
    """Test suite for reference distributions."""

    @pytest.mark.parametrize("table", [ENGLISH_FREQ, PORTUGUESE_FREQ])
    def test_tables_are_distributions(self, table):
        assert len(table) == 26
        assert sum(table) == pytest.approx(1.0, abs=0.02)
        assert all(f > 0 for f in table)

    def test_lookup_by_name(self):
        assert get_frequency_table("english") is ENGLISH_FREQ
        assert get_frequency_table("portuguese") is PORTUGUESE_FREQ

    def test_unknown_language(self):
        with pytest.raises(ValueError):
            get_frequency_table("klingon")

    def test_sum_of_squares(self):
        assert sum_of_squares([0.5, 0.5]) == pytest.approx(0.5)
        assert 0.06 < sum_of_squares(ENGLISH_FREQ) < 0.07


class TestFrequencyRecoverer:
    """Test suite for shift recovery."""

    @pytest.fixture
    def recoverer(self):
        return FrequencyRecoverer(ENGLISH_FREQ)

    @pytest.fixture
    def english_codes(self, english_plaintext):
        return TextNormalizer().normalize(english_plaintext).codes

    def test_reference_must_have_26_entries(self):
        with pytest.raises(ValueError):
            FrequencyRecoverer([0.5, 0.5])

    def test_coset_frequencies(self, recoverer):
        freq = recoverer.coset_frequencies([0, 0, 1, 25])

        assert freq[0] == pytest.approx(0.5)
        assert freq[1] == pytest.approx(0.25)
        assert freq[25] == pytest.approx(0.25)
        assert sum(freq) == pytest.approx(1.0)

    def test_reference_profile_gives_shift_zero(self, recoverer):
        shift, corr, distance = recoverer.best_shift(list(ENGLISH_FREQ))

        assert shift == 0
        assert corr == pytest.approx(recoverer.target)
        assert distance == pytest.approx(0.0)

    def test_rotated_profile_gives_its_shift(self, recoverer):
        rotated = [ENGLISH_FREQ[(k - 7) % 26] for k in range(26)]
        shift, _, _ = recoverer.best_shift(rotated)
        assert shift == 7

    def test_ties_go_to_smallest_shift(self, recoverer):
        uniform = [1 / 26] * 26
        shift, _, _ = recoverer.best_shift(uniform)
        assert shift == 0

    def test_recover_caesar_shift(self, recoverer, english_codes):
        shifted = [(code + 19) % 26 for code in english_codes]
        cosets = recoverer.recover(shifted, 1)

        assert len(cosets) == 1
        assert cosets[0].shift == 19
        assert cosets[0].letter == "t"
        assert cosets[0].length == len(english_codes)
        assert cosets[0].chi_squared is not None

    def test_recover_known_key_length(self, recoverer, english_plaintext):
        ciphertext = VigenereEngine().encrypt(english_plaintext, "lemon")
        codes = TextNormalizer().normalize(ciphertext).codes

        cosets = recoverer.recover(codes, 5)

        assert "".join(coset.letter for coset in cosets) == "lemon"
        assert [coset.index for coset in cosets] == [0, 1, 2, 3, 4]

    def test_chi_squared_lower_for_true_shift(self, recoverer, english_codes):
        true_fit = recoverer._chi_squared(english_codes, 0)
        wrong_fit = recoverer._chi_squared(english_codes, 13)
        assert true_fit < wrong_fit

    def test_empty_coset(self, recoverer):
        with pytest.raises(EmptyCosetError) as exc_info:
            recoverer.recover([0, 1, 2], 5)
        assert exc_info.value.details == {"index": 3, "key_length": 5, "text_length": 3}
