"""Shared types for mpd-palette: Colour, Selection, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Colour:
    """A candidate colour, identified by the hex code it was supplied as."""

    hex: str  # original spelling, used as the identity
    rgb: tuple[int, int, int]
    saturation: float  # HLS saturation, 0..1
    lightness: float  # HLS lightness, 0..1
    lab: tuple[float, float, float]  # CIE LAB (D65)


@dataclass
class Selection:
    """Outcome of one selection run.

    `palettes` and `scores` line up; both are in draw order (the order in which
    each distinct palette was first sampled), not in score order.
    """

    candidates: list[str]
    ncolours: int
    nreps: int
    nreturn: int
    palettes: list[list[str]] = field(default_factory=list)
    scores: list[float] = field(default_factory=list)
    draw_indices: list[int] = field(default_factory=list)
    distinct: int = 0  # distinct MPD values among all draws
    truncated: bool = False  # True when fewer than nreturn distinct palettes existed

    def best(self) -> tuple[list[str], float]:
        """Return the highest scoring palette and its score."""
        i = max(range(len(self.scores)), key=lambda j: self.scores[j])
        return self.palettes[i], self.scores[i]


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='select', help='Pick the most distinct palette')

        @command.run
        def run(colours, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colours: list[str], report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(colours, report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    colours: list[str] = field(default_factory=list)
    source: str | None = None  # --file path, if colours came from a file
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def add(self, command_name: str, data: dict[str, Any]) -> None:
        """Add (or merge into) the result section for a command."""
        if command_name not in self.sections:
            self.sections[command_name] = {}
        self.sections[command_name].update(data)

    def warn(self, message: str) -> None:
        self.warnings.append(message)
