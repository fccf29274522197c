"""Emit the extracted palette as CSS custom properties.

Same extraction as `extract`; output is a :root block of --color-* design
tokens (primary, secondary, accent, background, surface, text,
text-secondary, success, warning, error, additional-N). With --json the
full report is printed instead.

Example:
    palette-engine tokens hero.png > tokens.css
"""

from palette_engine.commands.extract import extract_into
from palette_engine.core.types import Command, Report

command = Command(
    name='tokens',
    help='Palette as CSS custom properties (--color-primary, ...).',
)


@command.run
def run(paths: list[str], report: Report, args) -> None:
    extract_into(report, paths, args.config)
