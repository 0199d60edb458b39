"""
Integer-cent money helpers.

Prices are never turned into floats: "12.99" becomes 1299 cents and the
product with a quantity stays an int until it is formatted for output.
"""

from __future__ import annotations

import re

_PRICE_RE = re.compile(r"^([+-]?)(\d+)(?:\.(\d{1,2}))?$")
_QUANTITY_RE = re.compile(r"^[+-]?\d+$")


def parse_cents(text: str) -> int:
    """Parse a decimal price string ("1.99", "2.5", "3") into cents."""
    # The fraction is cents, not digits glued onto the units: "2.5" is 250
    # cents, and sub-cent prices such as "1.999" are refused.
    m = _PRICE_RE.match(text)
    if m is None:
        raise ValueError(f"invalid price {text!r}")
    sign, units, frac = m.groups()
    cents = int(units) * 100 + int((frac or "").ljust(2, "0"))
    return -cents if sign == "-" else cents


def parse_quantity(text: str) -> int:
    # int() alone would accept " 5 " and "1_000"
    if _QUANTITY_RE.match(text) is None:
        raise ValueError(f"invalid quantity {text!r}")
    return int(text)


def format_cents(cents: int) -> str:
    sign = "-" if cents < 0 else ""
    units, frac = divmod(abs(cents), 100)
    return f"{sign}{units}.{frac:02d}"
