"""Report builder — text and JSON output for toggle-florp results."""

import json
from typing import Any

from toggle_florp.core.resolver import Resolution

HEADER = 'The color of the florp shall be:'


def format_text(resolution: Resolution) -> str:
    """Format a resolution as the header line plus 'R G B'."""
    r, g, b = resolution.colour
    return f'{HEADER}\n{r} {g} {b}'


def format_json(resolution: Resolution, swatch_path: str | None = None) -> str:
    """Format a resolution as JSON."""
    r, g, b = resolution.colour
    obj: dict[str, Any] = {
        'message': resolution.message,
        'source': resolution.source,
        'r': r,
        'g': g,
        'b': b,
    }
    if swatch_path:
        obj['swatch'] = swatch_path
    return json.dumps(obj, indent=2)
