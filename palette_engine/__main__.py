"""palette-engine — Dominant colours and design-token palettes from images.

Usage: palette-engine <command> IMAGE [IMAGE ...] [options]

Commands are listed in palette_engine/commands/__init__.py.
Each command module's docstring is its documentation.
Run `palette-engine help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-engine looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
  PALETTE_BUCKET_SIZE, PALETTE_COUNT, PALETTE_MAX_WORKERS and
  PALETTE_TIMEOUT set defaults; command-line options win over them.
"""

import argparse
import os
import sys

from palette_engine import registry
from palette_engine.core.config import EngineConfig, load_env
from palette_engine.core.errors import ConfigurationError
from palette_engine.core.report import format_css, format_json, format_text
from palette_engine.core.types import Report


def _short_help(name: str, fallback: str) -> str:
    doc = registry.doc(name)
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  palette-engine extract hero.png\n'
        '  palette-engine extract shots/*.png --json --workers 8 --timeout 30\n'
        '  palette-engine tokens hero.png > tokens.css\n'
        '  palette-engine histogram hero.png --bucket-size 32\n'
        '  palette-engine help extract\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  PALETTE_BUCKET_SIZE  quantization cell size (default 16)\n'
        '  PALETTE_COUNT        dominant colours to keep (default 10)\n'
        '  PALETTE_MAX_WORKERS  concurrent image decodes (default 4)\n'
        '  PALETTE_TIMEOUT      seconds to wait for a batch (default: no limit)\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-engine',
        description='Dominant colours and design-token palettes from images.',
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

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('images', nargs='+', help='Image files (PNG, JPG, WebP, ...)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-b', '--bucket-size', type=int, default=None, metavar='N', help='Quantization cell size')
        p.add_argument('-n', '--count', type=int, default=None, metavar='K', help='Number of dominant colours')
        p.add_argument('-w', '--workers', type=int, default=None, metavar='N', help='Concurrent image decodes')
        p.add_argument(
            '-t',
            '--timeout',
            type=float,
            default=None,
            metavar='S',
            help='Give up on unfinished images after S seconds and merge what finished',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<12} {_short_help(name, cmd.help)}')
        print('\nRun: palette-engine help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.doc(topic)
    print(doc if doc else f'(No module docs for {topic!r})')


def _build_config(args: argparse.Namespace) -> EngineConfig:
    return EngineConfig.from_env(
        bucket_size=args.bucket_size,
        count=args.count,
        max_workers=args.workers,
        timeout=args.timeout,
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'palette-engine: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    missing = [p for p in args.images if not os.path.isfile(p)]
    if missing:
        for p in missing:
            print(f'Error: image not found: {p}', file=sys.stderr)
        sys.exit(1)

    try:
        args.config = _build_config(args)
    except ConfigurationError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    report = Report(command=args.command, bucket_size=args.config.bucket_size)
    registry.get(args.command).execute(args.images, report, args)

    if args.json:
        print(format_json(report))
    elif args.command == 'tokens' and report.result is not None:
        print(format_css(report.result))
    else:
        print(format_text(report))

    # Exit status after output so the default result is still visible
    if report.ok_count == 0:
        sys.exit(1)


if __name__ == '__main__':
    main()
