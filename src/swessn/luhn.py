"""
Luhn (mod 10) checksum used by Swedish identity and organization numbers.

The checksum runs over the nine digits YYMMDDSSS:
1. Double every digit at an even (0-based) position
2. If doubling results in > 9, subtract 9
3. Sum all digits
4. Control digit is (10 - (sum % 10)) % 10
"""


def luhn_sum(digits: str) -> int:
    """
    Calculate the weighted Luhn sum of a digit string.

    Args:
        digits: ASCII digits only

    Returns:
        The sum before reduction to a control digit

    Raises:
        ValueError: If digits contains anything but 0-9
    """
    total = 0
    for i, char in enumerate(digits):
        if char not in "0123456789":
            raise ValueError(f"Invalid Luhn digit {char!r} in {digits!r}")
        d = int(char)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total


def luhn_checksum(year: int, month: int, day: int, serial: int) -> int:
    """
    Calculate the Luhn sum of the date and serial parts of a number.

    The day is used exactly as written, so a coordination number is summed
    with its +60 offset.
    """
    for name, value, upper in (
        ("year", year, 99),
        ("month", month, 99),
        ("day", day, 99),
        ("serial", serial, 999),
    ):
        if not 0 <= value <= upper:
            raise ValueError(f"{name} must be between 0 and {upper}, got {value}")

    return luhn_sum(f"{year:02d}{month:02d}{day:02d}{serial:03d}")


def luhn_control_digit(checksum: int) -> int:
    """Reduce a Luhn sum to its control digit (0-9)."""
    return (10 - (checksum % 10)) % 10
