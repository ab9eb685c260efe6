"""Card and UPI instrument validation utilities.

Every function here is total: input of the wrong type or shape yields
``False`` (or ``CardNetwork.UNKNOWN``) rather than an exception.
"""

import re
from datetime import date
from typing import Any

from app.domain.payment_method import CardNetwork

VPA_PATTERN = re.compile(r"^[A-Za-z0-9._-]+@[A-Za-z0-9]+$")
MAX_VPA_LENGTH = 255

MIN_CARD_LENGTH = 13
MAX_CARD_LENGTH = 19

# Largest amount the integer amount columns can hold, in minor units
MAX_AMOUNT = 2_147_483_647


def clean_card_number(number: Any) -> str:
    """Strip whitespace and dashes from a card number.

    Args:
        number: Card number as typed by the payer

    Returns:
        str: Cleaned number, or empty string for non-string input
    """
    if not isinstance(number, str):
        return ""
    return re.sub(r"[\s-]", "", number)


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _as_int(value: Any) -> int | None:
    """Coerce an int or a numeric string to int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _is_digits(value.strip()):
        return int(value.strip())
    return None


def validate_expiry(month: Any, year: Any, today: date | None = None) -> bool:
    """Check that a card has not expired.

    A card is valid through the last day of its expiry month.

    Args:
        month: Expiry month, 1-12
        year: Four-digit expiry year
        today: Reference date, defaults to the current date

    Returns:
        bool: True if (year, month) is the current month or later
    """
    month_value = _as_int(month)
    year_value = _as_int(year)
    if month_value is None or year_value is None:
        return False
    if not 1 <= month_value <= 12:
        return False

    today = today or date.today()
    return (year_value, month_value) >= (today.year, today.month)


def luhn_check(number: Any) -> bool:
    """Validate a card number with the Luhn checksum.

    Args:
        number: Card number, may contain spaces or dashes

    Returns:
        bool: True if the number is 13-19 digits and passes the checksum
    """
    cleaned = clean_card_number(number)
    if not _is_digits(cleaned) or not MIN_CARD_LENGTH <= len(cleaned) <= MAX_CARD_LENGTH:
        return False

    total = 0
    for index, char in enumerate(reversed(cleaned)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0


def detect_card_network(number: Any) -> CardNetwork:
    """Classify a card number by its IIN prefix.

    Args:
        number: Card number, may contain spaces or dashes

    Returns:
        CardNetwork: visa, mastercard, amex or unknown
    """
    cleaned = clean_card_number(number)
    if not _is_digits(cleaned):
        return CardNetwork.UNKNOWN

    if cleaned.startswith("4"):
        return CardNetwork.VISA

    if cleaned[:2] in ("34", "37"):
        return CardNetwork.AMEX

    if len(cleaned) >= 2 and 51 <= int(cleaned[:2]) <= 55:
        return CardNetwork.MASTERCARD

    if len(cleaned) >= 4 and 2221 <= int(cleaned[:4]) <= 2720:
        return CardNetwork.MASTERCARD

    return CardNetwork.UNKNOWN


def validate_vpa(vpa: Any) -> bool:
    """Validate a UPI Virtual Payment Address.

    Format: localpart@handle, where localpart allows letters, digits,
    dots, underscores and dashes, and handle is alphanumeric.

    Args:
        vpa: VPA to validate

    Returns:
        bool: True if valid VPA format
    """
    if not isinstance(vpa, str) or len(vpa) > MAX_VPA_LENGTH:
        return False
    return VPA_PATTERN.fullmatch(vpa) is not None


def mask_sensitive_data(data: str, visible_chars: int = 4) -> str:
    """Mask sensitive data showing only last few characters.

    Args:
        data: Sensitive data to mask
        visible_chars: Number of characters to show at end

    Returns:
        str: Masked string like '********7890'
    """
    if len(data) <= visible_chars:
        return "*" * len(data)

    masked_length = len(data) - visible_chars
    return "*" * masked_length + data[-visible_chars:]
