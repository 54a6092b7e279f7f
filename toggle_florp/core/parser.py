"""Regex-based literal colour parser.

Pulls three 0-255 integers out of free-form text such as '12 34 56',
'12,34,56' or 'rgb(12, 34, 56)'. Every run of non-digit characters is a
separator, so signs and decimal points are not understood: '-12' reads as 12
and '1.5' reads as 1 and 5.

Numbers above 255 are dropped rather than rejected. A bare '123456789' is one
oversized token and is NOT split into bytes.
"""

import re

from toggle_florp.core.types import Color, ColourParseError

_NON_DIGIT = re.compile(r'[^0-9]')


def _parse_channel(token: str) -> int | None:
    # token is empty or ASCII digits only
    if not token:
        return None
    # Skip huge tokens before int() sees them (int() caps digit count)
    if len(token.lstrip('0')) > 3:
        return None
    value = int(token)
    if value > 255:
        return None
    return value


def parse_values(text: str) -> list[int]:
    """Return every 0-255 value found in text, in order."""
    sanitized = _NON_DIGIT.sub(' ', text.strip())
    values = []
    for token in sanitized.split(' '):
        value = _parse_channel(token)
        if value is not None:
            values.append(value)
    return values


def parse_colour(text: str) -> Color:
    """Parse the first three 0-255 values in text as (r, g, b).

    Raises ColourParseError carrying the stripped text when fewer than
    three values are found.
    """
    stripped = text.strip()
    values = parse_values(stripped)
    if len(values) < 3:
        raise ColourParseError(stripped)
    r, g, b = values[:3]
    return Color(r, g, b)
