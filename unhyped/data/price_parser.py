"""
Price text parsing.

Product pages expose prices as free text ("$14.99", "US$ 1,299.00",
"Price Not Available"). Only the first numeric token is used.
"""

import re
from typing import Optional

_PRICE_TOKEN = re.compile(r"[\d,]+\.?\d*")


def extract_numeric_price(text: Optional[str]) -> Optional[float]:
    """
    Extract the first numeric token of a price string.

    Thousands separators are stripped. Returns None when no digit is
    present (the token may be a lone comma, e.g. "Sale, now!").

    >>> extract_numeric_price("$1,299.00")
    1299.0
    >>> extract_numeric_price("Price Not Available") is None
    True
    """
    if not text:
        return None
    for match in _PRICE_TOKEN.finditer(text):
        token = match.group(0).replace(",", "")
        if not any(ch.isdigit() for ch in token):
            continue
        try:
            return float(token)
        except ValueError:
            continue
    return None
