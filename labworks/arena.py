"""Turn-based arena: characters within reach kill each other by fixed rules."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from labworks.geometry import Point
from labworks.npc import CombatVisitor, Npc, create_npc, format_position
from labworks.npc_store import NpcFileStore
from labworks.observable import Observable, Observer

_MENU = (
    "\n"
    "Menu:\n"
    "1 - Print all characters\n"
    "2 - Battle\n"
    "3 - Add Npc\n"
    "4 - Save game to file\n"
    "5 - Load game from file\n"
    "0 - Exit\n"
    "Enter your selection: "
)


@dataclass(frozen=True)
class KillEvent:
    """``victim`` was killed by ``initiator``."""

    initiator: Npc
    victim: Npc


class KillReporter(Observer[KillEvent]):
    """Writes a line for every kill."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def handle(self, event: KillEvent) -> None:
        victim, initiator = event.victim, event.initiator
        print(
            f"{victim.type_name} '{victim.name}' was killed by "
            f"{initiator.type_name} '{initiator.name}'",
            file=self._out,
        )


class Arena(Observable[KillEvent]):
    """A set of characters that fight when :meth:`perform_combat` is called."""

    def __init__(self, characters: Iterable[Npc] | None = None) -> None:
        super().__init__()
        self._characters: list[Npc] = list(characters or ())

    def characters(self) -> list[Npc]:
        """The characters still in the arena, in order."""
        return list(self._characters)

    def add_npc(self, npc: Npc) -> None:
        """Put ``npc`` into the arena."""
        self._characters.append(npc)

    def perform_combat(self, distance: float) -> list[Npc]:
        """Let every character attack every other within ``distance``.

        Everyone attacks before the dead are removed, so two characters may
        kill each other. Returns the characters removed, in order of death.
        """
        killed: list[Npc] = []
        roster = self._characters
        for i, initiator in enumerate(roster):
            for j, victim in enumerate(roster):
                if i == j:
                    continue
                if (initiator.position - victim.position).length() > distance:
                    continue
                combat = CombatVisitor(victim)
                initiator.accept(combat)
                if combat.should_kill:
                    killed.append(victim)
                    self.notify_observers(KillEvent(initiator, victim))

        removed = []
        for npc in killed:
            position = next(
                (k for k, alive in enumerate(self._characters) if alive is npc), None
            )
            if position is not None:
                removed.append(self._characters.pop(position))
        return removed


def _print_characters(arena: Arena, out: TextIO) -> None:
    print("Characters", file=out)
    print("Type: Name (X Y)", file=out)
    for npc in arena.characters():
        print(f"{npc.type_name}: {npc.name} ({format_position(npc.position)})", file=out)


def _session(words: Iterator[str], out: TextIO) -> None:
    arena = Arena()
    reporter = KillReporter(out)
    arena.add_observer(reporter)

    while True:
        out.write(_MENU)
        raw = next(words, None)
        if raw is None:
            return
        try:
            selection = int(raw)
        except ValueError:
            return
        print(file=out)

        try:
            if selection == 0:
                return
            if selection == 1:
                _print_characters(arena, out)
            elif selection == 2:
                out.write("Enter distance: ")
                distance = float(next(words))
                arena.perform_combat(distance)
                _print_characters(arena, out)
            elif selection == 3:
                out.write("Enter type (Squirrel, Knight or SlaveTrader): ")
                type_name = next(words)
                out.write("Enter name (string): ")
                name = next(words)
                out.write("Enter position (int int) (eg. 1 1): ")
                x, y = float(next(words)), float(next(words))
                arena.add_npc(create_npc(type_name, name, Point(x, y)))
            elif selection == 4:
                out.write("Enter save file path: ")
                NpcFileStore(next(words)).save(arena.characters())
            elif selection == 5:
                out.write("Enter save file path: ")
                loaded = NpcFileStore(next(words)).load()
                arena = Arena(loaded)
                arena.add_observer(reporter)
        except StopIteration:
            return
        except (ValueError, OSError) as error:
            print(f"Error: {error}", file=out)


def _stdin_words() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the arena menu; input comes from ``argv`` or standard input."""
    words = iter(argv) if argv is not None else _stdin_words()
    _session(words, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())