"""
Swedish organisationsnummer (organization number) validation.

Format: NNNNNN-NNNN (10 digits), optionally prefixed with 16
- First digit: corporate form
- Digits 3-4: >= 20 (to distinguish from personnummer)
- Last digit: Luhn checksum
"""

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from swessn.config import settings
from swessn.luhn import luhn_checksum, luhn_control_digit
from swessn.parser import Divider, ParsedNumber, SwessnError, parse, parse_int

logger = logging.getLogger(__name__)

# The only century-like prefix an organisationsnummer may carry
ORGANIZATION_PREFIX = 1600


class CorporateForm(IntEnum):
    """
    Corporate form told by the first digit of the organisationsnummer.

    Not guaranteed to be correct according to Bolagsverket, which does not
    list all of these forms.
    See https://sv.wikipedia.org/wiki/Organisationsnummer
    """

    ESTATE = 1
    STATE_COUNTY_MUNICIPALITY = 2
    FOREIGN = 3
    UNKNOWN = 4
    LIMITED_COMPANY = 5
    SIMPLE_COMPANY = 6
    ECONOMIC_ASSOCIATION = 7
    NON_PROFIT_FOUNDATION = 8
    TRADING_PARTNERSHIP = 9

    @property
    def label(self) -> str:
        """Swedish name of the corporate form."""
        return CORPORATE_FORM_NAMES[self]


CORPORATE_FORM_NAMES = {
    CorporateForm.ESTATE: "Dödsbo",
    CorporateForm.STATE_COUNTY_MUNICIPALITY: "Stat, landsting, kommun, församling",
    CorporateForm.FOREIGN: "Utländska företag som bedriver näringsverksamhet eller äger fastigheter i Sverige",
    CorporateForm.UNKNOWN: "Okänt",
    CorporateForm.LIMITED_COMPANY: "Aktiebolag",
    CorporateForm.SIMPLE_COMPANY: "Enkelt bolag",
    CorporateForm.ECONOMIC_ASSOCIATION: "Ekonomisk förening, bostadsrättsförening",
    CorporateForm.NON_PROFIT_FOUNDATION: "Ideell förening och stiftelse",
    CorporateForm.TRADING_PARTNERSHIP: "Handelsbolag, kommanditbolag och enkelt bolag",
}


def corporate_form_from_year(year: int) -> CorporateForm:
    """Corporate form from the first digit (tens of the 'year' field)."""
    try:
        return CorporateForm(year // 10)
    except ValueError:
        return CorporateForm.UNKNOWN


@dataclass(frozen=True)
class Organization:
    """A parsed number read as an organisationsnummer."""

    parsed: ParsedNumber
    corporate_form: CorporateForm

    @classmethod
    def from_parsed(cls, parsed: ParsedNumber) -> "Organization":
        """Interpret a parsed number as an organization."""
        return cls(parsed=parsed, corporate_form=corporate_form_from_year(parsed.year))

    @property
    def group_number(self) -> int:
        """Digits 3-4, stored where a personnummer keeps the month."""
        return self.parsed.month

    @property
    def is_limited_company(self) -> bool:
        return self.corporate_form == CorporateForm.LIMITED_COMPANY

    def valid(self) -> bool:
        """
        Check structural rules and the Luhn control digit.

        - May only be prefixed with 16
        - Digits 3-4 must be >= 20
        - Never divided with '+'
        - Never starts with a leading 0
        """
        p = self.parsed
        if p.century not in (0, ORGANIZATION_PREFIX):
            return False
        if p.month < 20:
            return False
        if p.divider == Divider.PLUS:
            return False
        if p.year < 10:
            return False
        return p.valid()

    def format(self, separator: str = "-") -> str:
        """Format as NNNNNN-NNNN."""
        p = self.parsed
        return f"{p.year:02d}{p.month:02d}{p.day:02d}{separator}{p.serial:03d}{p.control_digit}"

    def format_with_prefix(self, separator: str = "-") -> str:
        """
        Format with 16 prefix as 16NNNNNN-NNNN.

        This is the format commonly used by the Swedish Tax Authority and banks.
        """
        return f"16{self.format(separator)}"

    def __str__(self) -> str:
        return self.format()


def new_organization(text: str) -> Organization:
    """
    Parse and interpret an organisationsnummer.

    Raises:
        FormatError: If the text is not a well-formed number
    """
    return Organization.from_parsed(parse(text))


def new_organization_int(number: int) -> Organization:
    """Parse and interpret an organisationsnummer given as an integer."""
    return Organization.from_parsed(parse_int(number))


def is_valid_organization(text: str) -> bool:
    """Check if the text is a valid organisationsnummer."""
    try:
        return new_organization(text).valid()
    except SwessnError:
        return False


def is_valid_organization_int(number: int) -> bool:
    """Check if the integer is a valid organisationsnummer."""
    try:
        return new_organization_int(number).valid()
    except SwessnError:
        return False


def generate_organization(
    corporate_form: CorporateForm = CorporateForm.LIMITED_COMPANY,
    group_number: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Organization:
    """
    Generate a valid organisationsnummer for testing purposes.

    Args:
        corporate_form: Corporate form, decides the first digit
        group_number: Digits 3-4 (20-99), random when omitted
        rng: Random source (default: new instance seeded from settings)

    Returns:
        A valid Organization
    """
    corporate_form = CorporateForm(corporate_form)
    rng = rng or random.Random(settings.random_seed)

    if group_number is None:
        group_number = rng.randint(20, 99)
    elif not 20 <= group_number <= 99:
        raise ValueError("Group number must be between 20 and 99")

    year = corporate_form * 10 + rng.randint(0, 9)
    day = rng.randint(0, 99)
    serial = rng.randint(0, 999)
    control_digit = luhn_control_digit(luhn_checksum(year, group_number, day, serial))

    parsed = ParsedNumber(
        century=0,
        year=year,
        month=group_number,
        day=day,
        serial=serial,
        control_digit=control_digit,
    )
    organization = Organization.from_parsed(parsed)
    logger.debug(f"Generated organisationsnummer {organization}")
    return organization
