"""Tests for toggle_florp.core.types — Color value type and parse error."""

import dataclasses

import pytest
from toggle_florp.core.types import Color, ColourParseError


class TestColor:
    def test_accessors(self):
        c = Color(12, 34, 56)
        assert c.r == 12
        assert c.g == 34
        assert c.b == 56

    def test_unpacks(self):
        r, g, b = Color(1, 2, 3)
        assert (r, g, b) == (1, 2, 3)

    def test_as_tuple(self):
        assert Color(0, 128, 255).as_tuple() == (0, 128, 255)

    def test_equality_by_value(self):
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert Color(1, 2, 3) != Color(3, 2, 1)
        assert len({Color(1, 2, 3), Color(1, 2, 3)}) == 1

    def test_immutable(self):
        c = Color(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 9  # type: ignore[misc]

    def test_bounds_inclusive(self):
        Color(0, 0, 0)
        Color(255, 255, 255)

    @pytest.mark.parametrize('channels', [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_out_of_range_rejected(self, channels):
        with pytest.raises(ValueError):
            Color(*channels)

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            Color(1.5, 2, 3)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Color(True, 2, 3)


class TestColourParseError:
    def test_message_format(self):
        err = ColourParseError('hello')
        assert str(err) == '"hello" is not parsable!'
        assert err.text == 'hello'

    def test_is_value_error(self):
        assert issubclass(ColourParseError, ValueError)


class TestColorConstructors:
    def test_parse(self):
        assert Color.parse('12 34 56') == Color(12, 34, 56)

    def test_from_hash_matches_function(self):
        from toggle_florp.core.generators import hash_colour

        assert Color.from_hash('alice') == hash_colour('alice')

    def test_from_message_literal(self):
        assert Color.from_message('1 2 3') == Color(1, 2, 3)

    def test_random_with_rng(self):
        import numpy as np

        a = Color.random(np.random.default_rng(5))
        b = Color.random(np.random.default_rng(5))
        assert a == b
