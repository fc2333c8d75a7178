"""Lookup table of CLI commands.

A command is any module under mpd_palette.commands exposing a module-level
`command` (a Command instance). The table is built on first use and cached.
Frozen builds cannot list package contents, so the module names below are
used when pkgutil finds none.
"""

import importlib
import pkgutil

from mpd_palette.core.types import Command

_registry: dict[str, Command] = {}

_COMMAND_MODULES = ['distances', 'filter', 'score', 'select']


def _command_module_names() -> list[str]:
    import mpd_palette.commands as pkg

    names = [info.name for info in pkgutil.iter_modules(pkg.__path__) if not info.name.startswith('_')]
    return names or list(_COMMAND_MODULES)


def discover() -> dict[str, Command]:
    """Build (once) and return the name -> Command table."""
    if not _registry:
        for modname in _command_module_names():
            cmd = getattr(importlib.import_module(f'mpd_palette.commands.{modname}'), 'command', None)
            if isinstance(cmd, Command):
                _registry[cmd.name] = cmd
    return _registry


def get(name: str) -> Command:
    """Return the command called `name`; KeyError lists the valid names."""
    commands = discover()
    try:
        return commands[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
