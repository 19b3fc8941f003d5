# Formatter.py
"""Render numeric results as display text with apostrophe thousands separators.

    1234567      -> "1'234'567"
    -1234.5      -> "-1'234.5"
    1000000.123  -> "1'000'000.123"

Only raw numbers are formatted; display text is never fed back in.
"""

import sys
import math

from . import config_manager as config_manager

THOUSANDS_SEPARATOR = "'"


def group_digits(digits):
    """Insert a separator before every group of three digits, counted from the right."""
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    for b in range(head, len(digits), 3):
        groups.append(digits[b:b + 3])
    return THOUSANDS_SEPARATOR.join(groups)


def format_with_thousands(n):
    """Format an integer, e.g. -1234 -> "-1'234"."""
    n = int(n)
    # Python ints do not overflow, abs() is safe for -2**63 as well
    grouped = group_digits(str(abs(n)))
    if n < 0:
        return "-" + grouped
    return grouped


def format_number(n, fraction_digits=None):
    """Format a finite float.

    Whole numbers (fraction within machine epsilon) are grouped like integers.
    Otherwise the value is expanded to ``fraction_digits`` decimals (default
    MIN_FRACTION_DIGITS), trailing zeros are trimmed and only the integer part
    is grouped. Callers holding settings pass config_manager.fraction_digits().
    """
    if not math.isfinite(n):
        raise ValueError(f"cannot format non-finite value {n!r}")

    if abs(math.modf(n)[0]) < sys.float_info.epsilon:
        return format_with_thousands(round(n))

    if fraction_digits is None:
        fraction_digits = config_manager.MIN_FRACTION_DIGITS

    text = f"{n:.{fraction_digits}f}".rstrip("0").rstrip(".")

    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    integer_part, dot, fraction_part = text.partition(".")

    # "-0" after trimming (e.g. -1e-12) is plain zero
    if not fraction_part and integer_part == "0":
        sign = ""
    return sign + group_digits(integer_part) + dot + fraction_part
