"""
Path parameter helpers.

Numeric ids are parsed with JavaScript ``parseFloat`` rules: the
longest numeric prefix is used (``"12abc"`` is ``12``) and anything
without one becomes NaN.  A NaN id is bound as SQL ``NULL`` and
therefore matches no row, which surfaces as a 404 rather than a 400.
Ids echoed in messages are rendered with JavaScript number‑to‑string
rules, so ``1e-7`` stays ``1e-7`` and large integers keep their
shortest digits.
"""

import math
import re
from decimal import Decimal
from typing import Optional

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_numeric_id(raw: str) -> float:
    """Parse ``raw`` like JavaScript's ``parseFloat``."""
    match = _NUMERIC_PREFIX.match(raw.lstrip())
    if not match:
        return math.nan
    return float(match.group(0))


def format_numeric_id(value: float) -> str:
    """Render a parsed id for a response message (``1``, ``1.5``, ``1e-7``, ``NaN``)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_numeric_id(-value)

    # Shortest round‑trip digits, as ``repr`` picks them.
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = exponent + k

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return mantissa + "e" + ("+" if e > 0 else "-") + str(abs(e))


def bind_numeric_id(value: float) -> Optional[float]:
    """Return the value to bind for ``id = ?``; NaN becomes ``None``."""
    if math.isnan(value):
        return None
    return value
