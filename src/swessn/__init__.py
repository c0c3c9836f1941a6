"""
swessn - Swedish personnummer and organisationsnummer

Parses, validates and generates Swedish identity numbers:
- Personnummer and coordination numbers (samordningsnummer)
- Organisationsnummer
- Luhn (mod 10) checksum
- Birth date, gender, county and zodiac sign derived from the digits
"""

__version__ = "0.1.0"

from swessn.config import Settings, configure_logging, settings
from swessn.counties import County, county_from_serial
from swessn.generator import generate_person, generate_random_person
from swessn.luhn import luhn_checksum, luhn_control_digit, luhn_sum
from swessn.organisationsnummer import (
    CorporateForm,
    Organization,
    generate_organization,
    is_valid_organization,
    is_valid_organization_int,
    new_organization,
    new_organization_int,
)
from swessn.parser import (
    DateError,
    Divider,
    FormatError,
    ParsedNumber,
    SwessnError,
    parse,
    parse_int,
)
from swessn.personnummer import (
    Gender,
    Person,
    derive_date,
    gender_from_serial,
    is_valid_person,
    is_valid_person_int,
    new_person,
    new_person_int,
    resolve_century,
)
from swessn.zodiac import Zodiac, zodiac_from_date

__all__ = [
    # Parsing
    "parse",
    "parse_int",
    "ParsedNumber",
    "Divider",
    "SwessnError",
    "FormatError",
    "DateError",
    # Luhn
    "luhn_sum",
    "luhn_checksum",
    "luhn_control_digit",
    # Personnummer
    "Person",
    "Gender",
    "new_person",
    "new_person_int",
    "is_valid_person",
    "is_valid_person_int",
    "resolve_century",
    "derive_date",
    "gender_from_serial",
    "County",
    "county_from_serial",
    "Zodiac",
    "zodiac_from_date",
    # Organisationsnummer
    "Organization",
    "CorporateForm",
    "new_organization",
    "new_organization_int",
    "is_valid_organization",
    "is_valid_organization_int",
    "generate_organization",
    # Generator
    "generate_person",
    "generate_random_person",
    # Config
    "Settings",
    "settings",
    "configure_logging",
]
