"""Report builder — text and JSON output for shade-finder results.

A row is a dict with an 'input' key plus either the match fields
('code', 'hex', 'rgb', 'distance') or an 'error' message.
"""

import json
from typing import Any

from shade_finder.core.types import Colour, MatchResult, ParseError


def match_row(text: str, colour: Colour, result: MatchResult) -> dict[str, Any]:
    return {
        'input': text,
        'rgb': list(colour.as_tuple()),
        'code': result.code,
        'hex': result.hex,
        'distance': round(result.distance, 1),
    }


def parse_row(text: str, colour: Colour) -> dict[str, Any]:
    return {'input': text, 'rgb': list(colour.as_tuple()), 'hex': colour.hex}


def error_row(text: str, err: ParseError) -> dict[str, Any]:
    return {'input': text, 'notation': err.notation, 'error': str(err)}


def format_text(rows: list[dict[str, Any]], palette_name: str | None = None) -> str:
    """Format rows as human-readable text, one line per input."""
    lines = []
    if palette_name:
        lines.append(f'shade-finder: palette {palette_name}')
        lines.append('')

    width = max((len(r['input']) for r in rows), default=0)
    for row in rows:
        label = row['input'].ljust(width)
        if 'error' in row:
            lines.append(f'{label}  ✗ {row["error"]}')
        elif 'code' in row:
            lines.append(f'{label}  → {row["code"]}  {row["hex"]}  Δ={row["distance"]}')
        else:
            r, g, b = row['rgb']
            lines.append(f'{label}  → rgb({r}, {g}, {b})  {row["hex"]}')

    failed = sum(1 for r in rows if 'error' in r)
    if failed:
        lines.append('')
        lines.append(f'FAIL {failed}/{len(rows)} inputs')
    return '\n'.join(lines)


def format_json(rows: list[dict[str, Any]], palette_name: str | None = None) -> str:
    """Format rows as JSON."""
    obj: dict[str, Any] = {}
    if palette_name:
        obj['palette'] = palette_name
    obj['results'] = rows

    failed = sum(1 for r in rows if 'error' in r)
    obj['summary'] = {
        'total': len(rows),
        'ok': len(rows) - failed,
        'failed': failed,
    }
    return json.dumps(obj, indent=2)
