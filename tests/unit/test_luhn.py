"""
Unit tests for the Luhn checksum.
"""

import random

import pytest

from swessn.luhn import luhn_checksum, luhn_control_digit, luhn_sum


class TestLuhnSum:
    """Tests for the weighted digit sum."""

    def test_known_sum(self):
        """Test sum of a known personnummer."""
        # 800101-329: 7+0+0+1+0+1+6+2+9
        assert luhn_sum("800101329") == 26

    def test_all_zeros(self):
        """Test sum of all zeros."""
        assert luhn_sum("000000000") == 0

    def test_doubled_values_above_nine_reduced(self):
        """Doubling 9 gives 18, reduced to 9."""
        assert luhn_sum("9") == 9
        assert luhn_sum("5") == 1

    def test_odd_positions_not_doubled(self):
        """Second digit is kept as is."""
        assert luhn_sum("09") == 9

    def test_rejects_non_digits(self):
        """Test rejection of letters."""
        with pytest.raises(ValueError):
            luhn_sum("80010A329")

    def test_rejects_unicode_digits(self):
        """Only ASCII digits are accepted."""
        with pytest.raises(ValueError):
            luhn_sum("٣")


class TestLuhnChecksum:
    """Tests for checksum over date and serial parts."""

    def test_matches_digit_string(self):
        """Parts are zero padded into YYMMDDSSS."""
        assert luhn_checksum(9, 3, 14, 660) == luhn_sum("090314660")

    def test_coordination_day_used_as_written(self):
        """Day 61 is summed as 61, not 1."""
        assert luhn_checksum(80, 1, 61, 329) == luhn_sum("800161329")
        assert luhn_checksum(80, 1, 61, 329) != luhn_checksum(80, 1, 1, 329)

    def test_out_of_range_parts_rejected(self):
        """Parts that would not fit their digit group raise."""
        with pytest.raises(ValueError):
            luhn_checksum(100, 1, 1, 1)
        with pytest.raises(ValueError):
            luhn_checksum(80, 1, 1, 1000)
        with pytest.raises(ValueError):
            luhn_checksum(80, -1, 1, 1)


class TestLuhnControlDigit:
    """Tests for control digit reduction."""

    def test_known_control_digits(self):
        """Test with known valid numbers."""
        # 800101-3294
        assert luhn_control_digit(luhn_checksum(80, 1, 1, 329)) == 4
        # 090314-6603
        assert luhn_control_digit(luhn_checksum(9, 3, 14, 660)) == 3
        # 556703-7485 (organisationsnummer)
        assert luhn_control_digit(luhn_checksum(55, 67, 3, 748)) == 5

    def test_ten_maps_to_zero(self):
        """A sum divisible by ten gives control digit 0."""
        assert luhn_control_digit(30) == 0
        assert luhn_control_digit(0) == 0

    def test_always_single_digit(self):
        """Control digit is always 0-9 for sampled inputs."""
        rng = random.Random(42)
        for _ in range(500):
            checksum = luhn_checksum(
                rng.randint(0, 99),
                rng.randint(1, 12),
                rng.randint(1, 31),
                rng.randint(0, 999),
            )
            assert 0 <= luhn_control_digit(checksum) <= 9
