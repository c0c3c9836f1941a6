"""
Generation of valid personnummer for test data.

Every generator takes an optional random.Random so that output can be made
deterministic. Without one, a fresh instance is created per call, seeded from
SWESSN_RANDOM_SEED when that is configured.
"""

import logging
import random
from datetime import date
from typing import Optional, Union

from swessn.config import settings
from swessn.luhn import luhn_checksum, luhn_control_digit
from swessn.parser import ParsedNumber
from swessn.personnummer import Gender, Person

logger = logging.getLogger(__name__)

# Last serial digit per gender
GENDER_DIGITS = {
    Gender.MALE: (1, 3, 5, 7, 9),
    Gender.FEMALE: (2, 4, 6, 8, 0),
}


def _random_source(rng: Optional[random.Random]) -> random.Random:
    return rng or random.Random(settings.random_seed)


def generate_person(
    birth_date: date,
    gender: Union[Gender, str],
    rng: Optional[random.Random] = None,
) -> Person:
    """
    Generate a valid personnummer for a birth date and gender.

    Args:
        birth_date: Date of birth
        gender: Gender.MALE / Gender.FEMALE, or 'M' / 'F'
        rng: Random source

    Returns:
        A Person with full century and a correct control digit

    Raises:
        ValueError: If gender is not recognized or the year has no century
    """
    try:
        gender = Gender(gender.upper() if isinstance(gender, str) else gender)
    except ValueError:
        raise ValueError(f"Invalid gender: {gender!r}") from None

    if birth_date.year < 100:
        raise ValueError(f"Birth year {birth_date.year} cannot carry a century")

    rng = _random_source(rng)
    serial = rng.randint(0, 98) * 10 + rng.choice(GENDER_DIGITS[gender])

    year = birth_date.year % 100
    control_digit = luhn_control_digit(
        luhn_checksum(year, birth_date.month, birth_date.day, serial)
    )

    parsed = ParsedNumber(
        century=birth_date.year // 100 * 100,
        year=year,
        month=birth_date.month,
        day=birth_date.day,
        serial=serial,
        control_digit=control_digit,
    )
    person = Person.from_parsed(parsed)
    logger.debug(f"Generated personnummer {person}")
    return person


def generate_random_person(rng: Optional[random.Random] = None) -> Person:
    """
    Generate a valid personnummer with random birth date and gender.

    The birth date is drawn uniformly from the configured window
    (1974-01-01 to 2013-12-31 by default).
    """
    rng = _random_source(rng)
    first = settings.generator_min_date.toordinal()
    last = settings.generator_max_date.toordinal()
    birth_date = date.fromordinal(rng.randint(first, last))
    gender = rng.choice([Gender.MALE, Gender.FEMALE])
    return generate_person(birth_date, gender, rng)
