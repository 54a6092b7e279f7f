"""Tests for toggle_florp.core.report — text and JSON output."""

import json

from toggle_florp.core.report import format_json, format_text
from toggle_florp.core.resolver import Resolution
from toggle_florp.core.types import Color


def _resolution() -> Resolution:
    return Resolution(message='12 34 56', colour=Color(12, 34, 56), source='literal')


class TestFormatText:
    def test_header_and_channels(self):
        assert format_text(_resolution()) == 'The color of the florp shall be:\n12 34 56'


class TestFormatJson:
    def test_fields(self):
        obj = json.loads(format_json(_resolution()))
        assert obj == {'message': '12 34 56', 'source': 'literal', 'r': 12, 'g': 34, 'b': 56}

    def test_swatch_path(self):
        obj = json.loads(format_json(_resolution(), swatch_path='out.png'))
        assert obj['swatch'] == 'out.png'
