"""
Swedish personnummer (personal identity number) validation and parsing.

Format: YYMMDD-SSSK or YYYYMMDD-SSSK
- First 6/8 digits: birth date
- SSS: serial number (last digit odd for male, even for female)
- K: Luhn control digit

Coordination numbers (samordningsnummer) add 60 to the day.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from swessn.counties import COUNTY_CUTOFF_YEAR, County, county_from_serial
from swessn.parser import (
    DateError,
    Divider,
    ParsedNumber,
    SwessnError,
    parse,
    parse_int,
)
from swessn.zodiac import Zodiac, zodiac_from_date

logger = logging.getLogger(__name__)

# https://www.skatteverket.se/samordningsnummer
COORDINATION_DAY_OFFSET = 60


class Gender(str, Enum):
    """
    Gender category encoded in the serial.

    This is a convention of the numbering scheme, read from the parity of
    the last serial digit. It says nothing beyond what was registered.
    """

    MALE = "M"
    FEMALE = "F"


def gender_from_serial(serial: int) -> Gender:
    """Odd last digit is male, even is female."""
    if serial % 10 % 2 == 0:
        return Gender.FEMALE
    return Gender.MALE


def resolve_century(parsed: ParsedNumber, today: Optional[date] = None) -> int:
    """
    Resolve the century of a number given without one.

    If no century is given, calculate it with the following rules:
    * If the date has passed this century
      - divider '-' -> this century
      - divider '+' -> last century
    * If the date has NOT passed this century
      - divider '-' -> last century
      - divider '+' -> the century before the last

    Args:
        parsed: The parsed number
        today: Reference date (default: date.today())

    Returns:
        The century as a multiple of 100

    Raises:
        DateError: If the digits do not form a date in the current century
    """
    if parsed.century != 0:
        return parsed.century

    today = today or date.today()
    year = today.year // 100 * 100 + parsed.year

    try:
        candidate = date(year, parsed.month, parsed.day % COORDINATION_DAY_OFFSET)
    except ValueError as e:
        raise DateError(
            f"Invalid birth date {parsed.year:02d}{parsed.month:02d}{parsed.day:02d}: {e}"
        ) from e

    # A birth date in the future means the previous century was meant
    if candidate > today:
        year -= 100

    if parsed.divider == Divider.PLUS:
        year -= 100

    century = year // 100 * 100
    logger.debug(
        f"Resolved century {century} for {parsed.year:02d}{parsed.month:02d}{parsed.day:02d}"
    )
    return century


def derive_date(parsed: ParsedNumber, century: int) -> date:
    """
    Build the birth date, removing any coordination offset from the day.

    Raises:
        DateError: If year, month and day are not a real calendar date
    """
    day = parsed.day
    if day > COORDINATION_DAY_OFFSET:
        day -= COORDINATION_DAY_OFFSET

    try:
        return date(century + parsed.year, parsed.month, day)
    except ValueError as e:
        raise DateError(
            f"Invalid birth date {century + parsed.year:04d}-{parsed.month:02d}-{day:02d}: {e}"
        ) from e


@dataclass(frozen=True)
class Person:
    """What can be told about a person from the personnummer."""

    parsed: ParsedNumber
    century: int
    birth_date: date
    is_coordination: bool
    gender: Gender
    county: County
    zodiac: Zodiac

    @classmethod
    def from_parsed(cls, parsed: ParsedNumber, today: Optional[date] = None) -> "Person":
        """
        Interpret a parsed number as a person.

        Use this to avoid parsing twice when a number should be tried both as
        a person and as an organization.

        Raises:
            DateError: If the number does not encode a real birth date
        """
        century = resolve_century(parsed, today)
        birth_date = derive_date(parsed, century)

        if century + parsed.year > COUNTY_CUTOFF_YEAR:
            county = County.UNKNOWN
        else:
            county = county_from_serial(parsed.serial)

        return cls(
            parsed=parsed,
            century=century,
            birth_date=birth_date,
            is_coordination=parsed.day > COORDINATION_DAY_OFFSET,
            gender=gender_from_serial(parsed.serial),
            county=county,
            zodiac=zodiac_from_date(birth_date),
        )

    @property
    def year(self) -> int:
        return self.parsed.year

    @property
    def month(self) -> int:
        return self.parsed.month

    @property
    def day(self) -> int:
        return self.parsed.day

    @property
    def serial(self) -> int:
        return self.parsed.serial

    @property
    def control_digit(self) -> int:
        return self.parsed.control_digit

    @property
    def divider(self) -> Divider:
        return self.parsed.divider

    @property
    def full_year(self) -> int:
        return self.century + self.parsed.year

    @property
    def birth_day(self) -> int:
        """Day of month without coordination offset."""
        return self.birth_date.day

    @property
    def is_male(self) -> bool:
        return self.gender == Gender.MALE

    @property
    def is_female(self) -> bool:
        return self.gender == Gender.FEMALE

    def valid(self) -> bool:
        """Check the Luhn control digit. The date is checked on construction."""
        return self.parsed.valid()

    def age(self, today: Optional[date] = None) -> int:
        """Age in completed years at the reference date."""
        today = today or date.today()
        birthday_passed = (today.month, today.day) >= (
            self.birth_date.month,
            self.birth_date.day,
        )
        return today.year - self.birth_date.year - (0 if birthday_passed else 1)

    def is_of_age(self, years: int, today: Optional[date] = None) -> bool:
        """Check that the person has reached the given age."""
        return self.age(today) >= years

    def format(self, long_format: bool = True, today: Optional[date] = None) -> str:
        """
        Format the personnummer.

        Args:
            long_format: YYYYMMDD-SSSK when True, YYMMDD-SSSK otherwise
            today: Reference date for the short format divider

        The short format uses '+' once the person is 100 or older. The day
        is kept as written, so coordination numbers keep their offset.
        """
        tail = f"{self.parsed.serial:03d}{self.parsed.control_digit}"
        if long_format:
            return f"{self.full_year:04d}{self.parsed.month:02d}{self.parsed.day:02d}-{tail}"

        today = today or date.today()
        divider = Divider.PLUS if self.age(today) >= 100 else Divider.MINUS
        return (
            f"{self.parsed.year:02d}{self.parsed.month:02d}{self.parsed.day:02d}"
            f"{divider.value}{tail}"
        )

    def __str__(self) -> str:
        return self.format()


def new_person(text: str, today: Optional[date] = None) -> Person:
    """
    Parse and interpret a personnummer.

    Raises:
        FormatError: If the text is not a well-formed number
        DateError: If the number does not encode a real birth date
    """
    return Person.from_parsed(parse(text), today)


def new_person_int(number: int, today: Optional[date] = None) -> Person:
    """Parse and interpret a personnummer given as an integer."""
    return Person.from_parsed(parse_int(number), today)


def is_valid_person(text: str, today: Optional[date] = None) -> bool:
    """Check if the text is a valid personnummer or coordination number."""
    try:
        return new_person(text, today).valid()
    except SwessnError:
        return False


def is_valid_person_int(number: int, today: Optional[date] = None) -> bool:
    """Check if the integer is a valid personnummer."""
    try:
        return new_person_int(number, today).valid()
    except SwessnError:
        return False
