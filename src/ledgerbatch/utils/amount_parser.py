"""Amount parsing utilities."""

import math
import re
from decimal import Decimal

# Optional sign, digits with an optional fraction (or a bare fraction), optional exponent
_AMOUNT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_amount(amount_str: str) -> float:
    """Parse a transfer amount into a float.

    Accepts plain decimal notation such as "100", "100.50", "-3", ".5" and
    exponent notation such as "1e3". Thousands separators, currency symbols
    and non-finite values ("nan", "inf") are rejected.

    Args:
        amount_str: Amount string

    Returns:
        Parsed amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()
    if not _AMOUNT_PATTERN.fullmatch(amount_str):
        raise ValueError(f"Could not parse amount '{amount_str}'")

    amount = float(amount_str)
    if not math.isfinite(amount):
        raise ValueError(f"Amount '{amount_str}' is out of range")
    return amount


def format_amount(amount: float) -> str:
    """Render an amount the way the accounts and report files store it.

    Magnitudes in [1e-3, 1e7) use plain notation ("100.0", "0.25"); others
    use a one-digit mantissa and an exponent ("1.0E7", "1.5E-4"). Digits
    are the shortest that round-trip.
    """
    amount = float(amount)
    magnitude = abs(amount)
    if magnitude == 0 or 1e-3 <= magnitude < 1e7 or not math.isfinite(amount):
        return repr(amount)

    # repr holds the shortest round-tripping digits
    _, digits, exponent = Decimal(repr(magnitude)).as_tuple()
    scientific_exponent = len(digits) + exponent - 1
    text = "".join(str(d) for d in digits).rstrip("0")
    fraction = text[1:] or "0"
    sign = "-" if amount < 0 else ""
    return f"{sign}{text[0]}.{fraction}E{scientific_exponent}"
