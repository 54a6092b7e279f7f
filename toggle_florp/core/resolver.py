"""Message resolver — turn any chat message into exactly one colour.

Resolution order (first wins):
  1. Literal: the message holds three 0-255 values ('12 34 56').
  2. Random: the stripped, lowercased message is a trigger word ('r',
     'rand', 'random').
  3. Hash: a stable colour from the original message, untouched. Case and
     surrounding whitespace therefore change the colour.

Literal precedence means '1 2 3' is never hashed, and a trigger word is
only a trigger when it is not also a literal colour.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from toggle_florp.core.generators import hash_colour, random_colour
from toggle_florp.core.parser import parse_colour
from toggle_florp.core.types import Color, ColourParseError

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_IDENTIFIERS: tuple[str, ...] = ('r', 'rand', 'random')

SOURCE_LITERAL = 'literal'
SOURCE_RANDOM = 'random'
SOURCE_HASH = 'hash'


@dataclass(frozen=True)
class Resolution:
    """A resolved colour and the path that produced it."""

    message: str
    colour: Color
    source: str  # one of SOURCE_LITERAL, SOURCE_RANDOM, SOURCE_HASH


def is_random_trigger(message: str, random_identifiers: Iterable[str] = DEFAULT_RANDOM_IDENTIFIERS) -> bool:
    """True if message, stripped and lowercased, is exactly a trigger word."""
    return message.strip().lower() in {w.lower() for w in random_identifiers}


def resolve_with_source(
    message: str,
    random_identifiers: Iterable[str] = DEFAULT_RANDOM_IDENTIFIERS,
    rng: np.random.Generator | None = None,
) -> Resolution:
    try:
        colour = parse_colour(message)
    except ColourParseError as exc:
        logger.debug('%s, trying trigger words', exc)
    else:
        logger.debug('resolved %r as literal %s', message, colour.as_tuple())
        return Resolution(message=message, colour=colour, source=SOURCE_LITERAL)

    if is_random_trigger(message, random_identifiers):
        colour = random_colour(rng)
        logger.debug('resolved %r as random %s', message, colour.as_tuple())
        return Resolution(message=message, colour=colour, source=SOURCE_RANDOM)

    colour = hash_colour(message)
    logger.debug('resolved %r as hash %s', message, colour.as_tuple())
    return Resolution(message=message, colour=colour, source=SOURCE_HASH)


def resolve(
    message: str,
    random_identifiers: Iterable[str] = DEFAULT_RANDOM_IDENTIFIERS,
    rng: np.random.Generator | None = None,
) -> Color:
    """Resolve message to a colour. Never raises."""
    return resolve_with_source(message, random_identifiers, rng).colour
