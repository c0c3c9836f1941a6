"""
Zodiac (astrological) sign from a birth date.

Signs are looked up in a literal table of inclusive (month, day) ranges.
See https://en.wikipedia.org/wiki/Astrological_sign#Dates_table
"""

from datetime import date
from enum import Enum


class Zodiac(str, Enum):
    """The twelve zodiac signs."""

    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


# (first day, last day, sign), both ends inclusive, as (month, day)
ZODIAC_RANGES = [
    ((1, 1), (1, 19), Zodiac.CAPRICORN),
    ((1, 20), (2, 18), Zodiac.AQUARIUS),
    ((2, 19), (3, 20), Zodiac.PISCES),
    ((3, 21), (4, 19), Zodiac.ARIES),
    ((4, 20), (5, 20), Zodiac.TAURUS),
    ((5, 21), (6, 20), Zodiac.GEMINI),
    ((6, 21), (7, 22), Zodiac.CANCER),
    ((7, 23), (8, 22), Zodiac.LEO),
    ((8, 23), (9, 22), Zodiac.VIRGO),
    ((9, 23), (10, 22), Zodiac.LIBRA),
    ((10, 23), (11, 21), Zodiac.SCORPIO),
    ((11, 22), (12, 21), Zodiac.SAGITTARIUS),
    ((12, 22), (12, 31), Zodiac.CAPRICORN),
]


def zodiac_from_date(d: date) -> Zodiac:
    """Return the zodiac sign for the month and day of a date."""
    key = (d.month, d.day)
    for first, last, sign in ZODIAC_RANGES:
        if first <= key <= last:
            return sign
    raise AssertionError(f"No zodiac range covers {d.isoformat()}")
