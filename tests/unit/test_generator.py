"""
Unit tests for personnummer generation (test utility).
"""

import random
from datetime import date, timedelta

import pytest

from swessn.config import settings
from swessn.generator import GENDER_DIGITS, generate_person, generate_random_person
from swessn.personnummer import Gender, is_valid_person


class TestGeneratePerson:
    """Tests for generation from date and gender."""

    def test_generate_valid(self, rng):
        """Test that generated personnummer is valid."""
        person = generate_person(date(1985, 6, 15), Gender.MALE, rng)
        assert person.valid()
        assert is_valid_person(person.format())

    def test_generate_correct_date(self, rng):
        """Test that generated personnummer has correct date."""
        birth = date(1990, 3, 25)
        person = generate_person(birth, Gender.FEMALE, rng)
        assert person.birth_date == birth
        assert person.century == 1900
        assert person.year == 90

    def test_generate_correct_gender(self, rng):
        """Serial parity matches the requested gender."""
        for gender in [Gender.MALE, Gender.FEMALE]:
            for _ in range(50):
                person = generate_person(date(1995, 1, 1), gender, rng)
                assert person.gender == gender
                assert person.serial % 10 in GENDER_DIGITS[gender]

    def test_gender_as_string(self, rng):
        """'M' and 'f' are accepted."""
        assert generate_person(date(1995, 1, 1), "M", rng).is_male
        assert generate_person(date(1995, 1, 1), "f", rng).is_female

    def test_invalid_gender_raises(self):
        """Unknown gender is rejected."""
        with pytest.raises(ValueError):
            generate_person(date(1995, 1, 1), "x")
        with pytest.raises(ValueError):
            generate_person(date(1995, 1, 1), 1)

    def test_year_without_century_raises(self):
        """Years below 100 cannot be represented."""
        with pytest.raises(ValueError):
            generate_person(date(99, 1, 1), Gender.MALE)

    def test_serial_prefix_range(self, rng):
        """First two serial digits are 00-98."""
        for _ in range(500):
            person = generate_person(date(2000, 1, 1), Gender.FEMALE, rng)
            assert 0 <= person.serial // 10 <= 98

    def test_century_boundary(self, rng):
        """Year 2000 keeps century 2000 with year 00."""
        person = generate_person(date(2000, 2, 29), Gender.MALE, rng)
        assert person.century == 2000
        assert person.year == 0
        assert person.format().startswith("20000229-")
        assert person.valid()

    def test_many_dates_valid(self, rng):
        """Generated numbers are valid across a range of dates."""
        d = date(1890, 1, 1)
        while d < date(2030, 1, 1):
            gender = rng.choice([Gender.MALE, Gender.FEMALE])
            person = generate_person(d, gender, rng)
            assert person.valid(), person
            assert person.birth_date == d
            d += timedelta(days=97)

    def test_seeded_source_deterministic(self):
        """Same seed gives the same number."""
        a = generate_person(date(1985, 6, 15), Gender.MALE, random.Random(5))
        b = generate_person(date(1985, 6, 15), Gender.MALE, random.Random(5))
        assert a == b


class TestGenerateRandomPerson:
    """Tests for fully random generation."""

    def test_generate_valid(self, rng):
        """Random persons are valid and inside the window."""
        for _ in range(200):
            person = generate_random_person(rng)
            assert person.valid()
            assert settings.generator_min_date <= person.birth_date <= settings.generator_max_date

    def test_both_genders_drawn(self, rng):
        """Both genders appear over many draws."""
        genders = {generate_random_person(rng).gender for _ in range(100)}
        assert genders == {Gender.MALE, Gender.FEMALE}

    def test_without_source(self):
        """A random source is created when none is passed."""
        assert generate_random_person().valid()
