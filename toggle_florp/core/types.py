"""Shared types for toggle-florp: Color, ColourParseError."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


class ColourParseError(ValueError):
    """Raised when a string does not hold three 0-255 values."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f'"{text}" is not parsable!')


def _check_channel(name: str, value: int) -> None:
    # bool is an int subclass, but True is not a channel value
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f'{name} must be an int, got {type(value).__name__}')
    if not 0 <= value <= 255:
        raise ValueError(f'{name} must be in 0..255, got {value}')


@dataclass(frozen=True)
class Color:
    """An RGB colour with three 8-bit channels.

    Usage:

        Color(12, 34, 56)
        Color.parse('rgb(12, 34, 56)')
        Color.from_message('alice')

        r, g, b = Color.from_hash('alice')
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_channel('r', self.r)
        _check_channel('g', self.g)
        _check_channel('b', self.b)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Read three literal channel values out of free-form text."""
        from toggle_florp.core.parser import parse_colour

        return parse_colour(text)

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> Color:
        """A uniformly random colour, drawn from rng or the shared generator."""
        from toggle_florp.core.generators import random_colour

        return random_colour(rng)

    @classmethod
    def from_hash(cls, text: str) -> Color:
        """A stable colour derived from the bytes of text."""
        from toggle_florp.core.generators import hash_colour

        return hash_colour(text)

    @classmethod
    def from_message(cls, text: str) -> Color:
        """Resolve a chat message to a colour. Never raises."""
        from toggle_florp.core.resolver import resolve

        return resolve(text)
