"""shade-finder — find the closest reference-palette colour for any hex, rgb() or hsl() colour.

Usage: shade-finder <command> [args] [options]

Palettes are auto-discovered from shade_finder/palettes/.
Run `shade-finder help <palette>` to list every code in a palette.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, shade-finder looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from shade_finder import registry
from shade_finder.core.env import Settings, load_env
from shade_finder.core.notation import parse
from shade_finder.core.palette import Palette, find_closest_many, resolve
from shade_finder.core.report import error_row, format_json, format_text, match_row, parse_row
from shade_finder.core.types import Colour, ParseError


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        "  shade-finder match '#3b82f6'\n"
        "  shade-finder match 'rgb(255, 0, 0)' 'hsl(210, 40%, 96%)' --json\n"
        "  shade-finder match '#ff6347' --palette css\n"
        '  cat colours.txt | shade-finder match -\n'
        "  shade-finder parse '#abc'\n"
        '  shade-finder resolve blue-600 slate-50\n'
        '  shade-finder palettes\n'
        '  shade-finder help tailwind\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  SHADE_FINDER_PALETTE  default palette name (tailwind)\n'
        '  SHADE_FINDER_JSON     1/true/yes for JSON output by default\n'
    )
    parser = argparse.ArgumentParser(
        prog='shade-finder',
        description='Find the closest reference-palette colour for hex, rgb() or hsl() input.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('match', help='Closest palette entry for each colour')
    p.add_argument('colours', nargs='+', metavar='COLOUR', help="Colour strings, or '-' to read lines from stdin")
    p.add_argument('-p', '--palette', default=None, help='Palette name (default: $SHADE_FINDER_PALETTE or tailwind)')
    p.add_argument('-j', '--json', action='store_true', default=None, help='Output JSON instead of text')

    p = sub.add_parser('parse', help='Show the RGB value of each colour')
    p.add_argument('colours', nargs='+', metavar='COLOUR', help="Colour strings, or '-' to read lines from stdin")
    p.add_argument('-j', '--json', action='store_true', default=None, help='Output JSON instead of text')

    p = sub.add_parser('resolve', help='Canonical hex for palette codes')
    p.add_argument('codes', nargs='+', metavar='CODE', help='Palette codes, e.g. blue-600')
    p.add_argument('-p', '--palette', default=None, help='Palette name (default: $SHADE_FINDER_PALETTE or tailwind)')

    sub.add_parser('palettes', help='List available palettes')

    help_parser = sub.add_parser('help', help='List palettes, or every entry of one palette')
    help_parser.add_argument('name', nargs='?', help='Palette name')

    return parser


def _read_inputs(values: list[str]) -> list[str]:
    """Expand '-' into the non-blank lines of stdin."""
    inputs = []
    for value in values:
        if value == '-':
            inputs.extend(line.strip() for line in sys.stdin if line.strip())
        else:
            inputs.append(value)
    return inputs


def _get_palette(name: str) -> Palette:
    try:
        return registry.get(name)
    except KeyError as e:
        print(f'Error: {e.args[0]}', file=sys.stderr)
        sys.exit(1)


def _parse_all(inputs: list[str]) -> list[tuple[str, Colour | ParseError]]:
    parsed: list[tuple[str, Colour | ParseError]] = []
    for text in inputs:
        try:
            parsed.append((text, parse(text)))
        except ParseError as e:
            parsed.append((text, e))
    return parsed


def _run_match(args: argparse.Namespace, settings: Settings) -> int:
    palette = _get_palette(args.palette or settings.palette)
    parsed = _parse_all(_read_inputs(args.colours))

    colours = [c for _text, c in parsed if isinstance(c, Colour)]
    results = iter(find_closest_many(colours, palette))

    rows = []
    for text, value in parsed:
        if isinstance(value, Colour):
            rows.append(match_row(text, value, next(results)))
        else:
            rows.append(error_row(text, value))

    _emit(rows, palette.name, args.json if args.json is not None else settings.json)
    return 1 if any('error' in r for r in rows) else 0


def _run_parse(args: argparse.Namespace, settings: Settings) -> int:
    rows = []
    for text, value in _parse_all(_read_inputs(args.colours)):
        rows.append(parse_row(text, value) if isinstance(value, Colour) else error_row(text, value))

    _emit(rows, None, args.json if args.json is not None else settings.json)
    return 1 if any('error' in r for r in rows) else 0


def _run_resolve(args: argparse.Namespace, settings: Settings) -> int:
    palette = _get_palette(args.palette or settings.palette)
    status = 0
    for code in args.codes:
        hex_value = resolve(code, palette)
        if hex_value is None:
            print(f'Error: {code!r} is not in palette {palette.name}', file=sys.stderr)
            status = 1
        else:
            print(f'{code}  {hex_value}')
    return status


def _emit(rows: list[dict], palette_name: str | None, as_json: bool) -> None:
    if as_json:
        print(format_json(rows, palette_name))
    else:
        print(format_text(rows, palette_name))


def _print_palettes() -> None:
    print('Available palettes:\n')
    for name, palette in sorted(registry.all_palettes().items()):
        print(f'  {name:<10} {len(palette):>4} colours  {palette.help}')
    print('\nRun: shade-finder help <palette> for every code.')


def _print_help(name: str | None) -> None:
    """Print every entry of a palette, in palette order."""
    if name is None:
        _print_palettes()
        return

    palette = _get_palette(name)
    if palette.help:
        print(palette.help)
        print('')
    for entry in palette:
        r, g, b = entry.rgb.as_tuple()
        print(f'  {entry.code:<22} {entry.hex}  rgb({r}, {g}, {b})')


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'shade-finder: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    settings = Settings.from_env()

    if args.command == 'palettes':
        _print_palettes()
        return
    if args.command == 'help':
        _print_help(args.name)
        return

    if args.command == 'match':
        status = _run_match(args, settings)
    elif args.command == 'parse':
        status = _run_parse(args, settings)
    else:
        status = _run_resolve(args, settings)

    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
