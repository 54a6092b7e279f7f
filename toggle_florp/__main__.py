"""toggle-florp — Pick a stable display colour for a chat message or username.

Usage: toggle-florp [options] [WORD ...]

The words are joined with single spaces into one message. With no words the
message is 'random'. The message resolves to a colour by the first rule that
matches:
  1. three 0-255 numbers anywhere in it ('12 34 56', 'rgb(12,34,56)')
  2. a trigger word for a random colour ('r', 'rand', 'random')
  3. otherwise a stable hash of the message

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, toggle-florp looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys

import numpy as np

from toggle_florp.core.env import Settings, load_env
from toggle_florp.core.report import format_json, format_text
from toggle_florp.core.resolver import resolve_with_source
from toggle_florp.core.swatch import save_swatch

DEFAULT_MESSAGE = 'random'


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  toggle-florp alice\n'
        '  toggle-florp 12 34 56\n'
        "  toggle-florp 'rgb(12, 34, 56)' --json\n"
        '  toggle-florp random --seed 7\n'
        '  toggle-florp bob --swatch bob.png --size 128\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  FLORP_RANDOM_IDENTIFIERS  trigger words, e.g. "r rand random"\n'
        '  FLORP_SEED                seed for the random colour\n'
        '  FLORP_SWATCH_SIZE         default swatch size in pixels\n'
    )
    parser = argparse.ArgumentParser(
        prog='toggle-florp',
        description='Pick a stable display colour for a chat message or username.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('words', nargs='*', help='Message words (default: random)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument('-s', '--swatch', metavar='PATH', help='Also write a PNG swatch of the colour')
    parser.add_argument('--size', type=int, default=None, metavar='N', help='Swatch edge length in pixels')
    parser.add_argument('--seed', type=int, default=None, metavar='N', help='Seed for the random colour path')
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.WARNING, format='%(name)s: %(message)s')
    if verbose:
        logging.getLogger('toggle_florp').setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    # Load .env before settings; OS env vars always win
    load_env(env_file=args.env_file)
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    seed = args.seed if args.seed is not None else settings.seed
    size = args.size if args.size is not None else settings.swatch_size
    if size < 1:
        print(f'Error: --size must be positive, got {size}', file=sys.stderr)
        sys.exit(1)
    try:
        rng = np.random.default_rng(seed) if seed is not None else None
    except ValueError as exc:
        print(f'Error: invalid seed {seed}: {exc}', file=sys.stderr)
        sys.exit(1)

    message = ' '.join(args.words) if args.words else DEFAULT_MESSAGE
    resolution = resolve_with_source(message, settings.random_identifiers, rng)

    swatch_path = None
    if args.swatch:
        try:
            swatch_path = str(save_swatch(resolution.colour, args.swatch, size))
        except OSError as exc:
            print(f'Error: cannot write swatch {args.swatch}: {exc}', file=sys.stderr)
            sys.exit(1)

    if args.json:
        print(format_json(resolution, swatch_path=swatch_path))
    else:
        print(format_text(resolution))


if __name__ == '__main__':
    main()
