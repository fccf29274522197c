"""Name -> Command lookup for the CLI, built from palette_engine.commands.MODULES."""

from types import ModuleType

from palette_engine.commands import MODULES
from palette_engine.core.types import Command


def _modules_by_name() -> dict[str, ModuleType]:
    found = {}
    for module in MODULES:
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            found[cmd.name] = module
    return found


def all_commands() -> dict[str, Command]:
    return {name: module.command for name, module in _modules_by_name().items()}


def get(name: str) -> Command:
    commands = all_commands()
    if name not in commands:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}')
    return commands[name]


def doc(name: str) -> str:
    """Module docstring of a command, stripped. Empty when it has none."""
    return (_modules_by_name()[name].__doc__ or '').strip()
