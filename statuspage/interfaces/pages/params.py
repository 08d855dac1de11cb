"""
Query parameter parsing for status page requests.

``code`` is read leniently: surrounding whitespace, an optional sign and
the leading run of ASCII digits are used, anything after them is ignored
(``"404abc"`` is 404, ``"3.9"`` is 3). No leading digits means the
configured default. Digit runs of any length are accepted.
"""

import re

_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Digits converted per step; each step stays far below int()'s string limit.
_CHUNK_DIGITS = 18


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_status_code(raw: str | None, default: int) -> int:
    """Parse the ``code`` query parameter.

    Args:
        raw: Raw parameter value, or None when absent.
        default: Code to use when ``raw`` carries no integer.

    Returns:
        The parsed status code.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    sign, digits = match.groups()
    value = _digits_to_int(digits)
    return -value if sign == "-" else value
