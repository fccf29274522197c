"""CLI subcommands.

Each module defines a module-level `command` (a Command) and documents itself
in its docstring, which `palette-engine help <name>` prints. MODULES is the
one list the registry reads; a new command is added by importing it here.
"""

from palette_engine.commands import extract, histogram, tokens

MODULES = (extract, histogram, tokens)
