"""
Lexical parsing of Swedish identity and organization numbers.

Format: [CC]YYMMDD[+-]SSS[K]
- CC: optional century (00 means "not given")
- YYMMDD: date digits (organization numbers reuse these positions)
- +/-: optional divider, '+' marks a person aged 100 or more
- SSS: serial number
- K: optional control digit, computed with Luhn when missing

The parser only checks the digit-group grammar. Whether the digits form a
valid person or organization is decided in the personnummer and
organisationsnummer modules.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from swessn.luhn import luhn_checksum, luhn_control_digit

logger = logging.getLogger(__name__)


class SwessnError(ValueError):
    """Base class for errors raised while reading an identity number."""

    pass


class FormatError(SwessnError):
    """Raised when input does not match the identity number grammar."""

    pass


class DateError(FormatError):
    """Raised when the digits do not form a real calendar date."""

    pass


class Divider(str, Enum):
    """Separator between the date and serial parts."""

    PLUS = "+"
    MINUS = "-"


NUMBER_PATTERN = re.compile(
    r"(?P<century>[0-9]{2})?"
    r"(?P<year>[0-9]{2})"
    r"(?P<month>[0-9]{2})"
    r"(?P<day>[0-9]{2})"
    r"(?P<divider>[-+])?"
    r"(?P<serial>[0-9]{3})"
    r"(?P<control>[0-9])?"
)


@dataclass(frozen=True)
class ParsedNumber:
    """
    Digit groups of a parsed number.

    Fields are named after date parts but hold organization-type digits when
    the number is read as an organisationsnummer.
    """

    century: int  # 0 when not given, else a multiple of 100
    year: int
    month: int
    day: int  # raw day, 61-91 for coordination numbers
    serial: int
    control_digit: int
    divider: Divider = Divider.MINUS
    control_digit_given: bool = True

    def luhn_checksum(self) -> int:
        """Luhn sum over YYMMDDSSS."""
        return luhn_checksum(self.year, self.month, self.day, self.serial)

    def luhn_control_digit(self) -> int:
        """Control digit the Luhn algorithm expects for these digits."""
        return luhn_control_digit(self.luhn_checksum())

    def valid(self) -> bool:
        """Check that the control digit matches the Luhn checksum."""
        return self.control_digit == self.luhn_control_digit()

    def valid_person(self) -> bool:
        """Check if the digits are valid read as a personnummer."""
        from swessn.personnummer import Person

        try:
            return Person.from_parsed(self).valid()
        except SwessnError:
            return False

    def valid_organization(self) -> bool:
        """Check if the digits are valid read as an organisationsnummer."""
        from swessn.organisationsnummer import Organization

        return Organization.from_parsed(self).valid()


def parse(text: str) -> ParsedNumber:
    """
    Parse a number into its digit groups.

    Accepts formats:
    - YYMMDDSSSK, YYMMDD-SSSK, YYMMDD+SSSK
    - YYYYMMDDSSSK, YYYYMMDD-SSSK, YYYYMMDD+SSSK
    - any of the above without the control digit K

    The control digit is not checked here. When it is missing it is computed,
    so the returned record is always Luhn-consistent in that case.

    Raises:
        FormatError: If the text does not match the grammar
    """
    match = NUMBER_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        logger.debug(f"Rejected malformed identity number {text!r}")
        raise FormatError(f"Invalid identity number format: {text!r}")

    century = int(match.group("century") or 0) * 100
    year = int(match.group("year"))
    month = int(match.group("month"))
    day = int(match.group("day"))
    serial = int(match.group("serial"))
    divider = Divider(match.group("divider") or Divider.MINUS.value)

    control = match.group("control")
    if control is None:
        control_digit = luhn_control_digit(luhn_checksum(year, month, day, serial))
    else:
        control_digit = int(control)

    return ParsedNumber(
        century=century,
        year=year,
        month=month,
        day=day,
        serial=serial,
        control_digit=control_digit,
        divider=divider,
        control_digit_given=control is not None,
    )


def parse_int(number: int) -> ParsedNumber:
    """
    Parse a number given as an integer.

    Leading zeros are lost in integer form, so the value is padded to ten
    digits before parsing (e.g. 903146603 -> "0903146603").
    """
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise FormatError(f"Invalid identity number: {number!r}")
    return parse(f"{number:010d}")
