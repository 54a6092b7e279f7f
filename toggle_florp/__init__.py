"""toggle_florp — stable RGB colours for chat identifiers."""

from toggle_florp.core.generators import hash_colour, random_colour
from toggle_florp.core.parser import parse_colour
from toggle_florp.core.resolver import DEFAULT_RANDOM_IDENTIFIERS, Resolution, resolve, resolve_with_source
from toggle_florp.core.types import Color, ColourParseError

__all__ = [
    'DEFAULT_RANDOM_IDENTIFIERS',
    'Color',
    'ColourParseError',
    'Resolution',
    'hash_colour',
    'parse_colour',
    'random_colour',
    'resolve',
    'resolve_with_source',
]
