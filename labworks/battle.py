"""Real-time battle: characters wander a map and fight when they meet."""

from __future__ import annotations

import queue
import random
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from contextlib import nullcontext
from dataclasses import dataclass, field
from itertools import combinations
from typing import ClassVar, TextIO

from labworks.geometry import Point
from labworks.npc import Knight, Npc, SlaveTrader, Squirrel
from labworks.observable import Observable, Observer


@dataclass(frozen=True)
class BattleEvent:
    """``victim`` lost a fight against ``initiator`` with the given rolls."""

    initiator: Npc
    victim: Npc
    attack_points: int
    defense_points: int
    output_lock: threading.Lock | None = field(default=None, compare=False, repr=False)


class BattleReporter(Observer[BattleEvent]):
    """Writes a line for every fight."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def handle(self, event: BattleEvent) -> None:
        with event.output_lock or nullcontext():
            self._out.write(
                f"Battle: {event.victim.name} is attacked by {event.initiator.name}"
                f"({event.attack_points} / {event.defense_points})\n"
            )


def _format(value: float) -> str:
    return format(value, "g")


class Battle(Observable[BattleEvent]):
    """Runs movement, fighting and map printing in parallel threads.

    Every ``tick`` seconds each living character moves randomly and pairs
    within reach are queued for a fight; the map is printed every two ticks.
    A fight rolls two dice: if the attack beats the defence the second
    character dies, otherwise the first one does.
    """

    MAP_WIDTH: ClassVar[int] = 100
    INITIAL_NPC_COUNT: ClassVar[int] = 50

    def __init__(
        self,
        characters: Iterable[Npc] | None = None,
        rng: random.Random | None = None,
        out: TextIO | None = None,
        start_delay: float = 3.0,
        tick: float = 0.5,
    ) -> None:
        super().__init__()
        self._characters: list[Npc] = list(characters or ())
        self._rng = rng if rng is not None else random.Random()
        self._out = out if out is not None else sys.stdout
        self._start_delay = start_delay
        self._tick = tick
        self._output_lock = threading.Lock()
        self._stopped = threading.Event()
        self._battles: queue.Queue[tuple[Npc, Npc]] = queue.Queue()

    def characters(self) -> list[Npc]:
        """All characters, living and dead, in order."""
        return list(self._characters)

    def render_map(self) -> str:
        """The map as text: one line per row, living characters by symbol."""
        width = self.MAP_WIDTH
        rows = [["."] * width for _ in range(width)]
        for npc in self._characters:
            if not npc.alive:
                continue
            x, y = int(npc.position.x), int(npc.position.y)
            if 0 <= x < width and 0 <= y < width:
                rows[y][x] = npc.type_symbol
        return "".join("".join(row) + "\n" for row in rows)

    def _write(self, text: str) -> None:
        with self._output_lock:
            self._out.write(text)

    def _print_map(self) -> None:
        self._write("\nMap:\n" + self.render_map())

    def _clamp(self, value: int) -> int:
        return max(0, min(value, self.MAP_WIDTH - 1))

    def _move_step(self) -> None:
        for npc in self._characters:
            if not npc.alive:
                continue
            reach = npc.move_distance
            x = self._clamp(int(npc.position.x) + self._rng.randint(-reach, reach))
            y = self._clamp(int(npc.position.y) + self._rng.randint(-reach, reach))
            npc.position = Point(x, y)

        for first, second in combinations(self._characters, 2):
            if not (first.alive and second.alive):
                continue
            distance = (first.position - second.position).length()
            if distance <= max(first.kill_distance, second.kill_distance):
                self._battles.put((first, second))

    def _move_loop(self) -> None:
        while not self._stopped.is_set():
            self._move_step()
            self._stopped.wait(self._tick)

    def _fight(self, first: Npc, second: Npc) -> None:
        if not (first.alive and second.alive):
            return
        attack = self._rng.randint(1, 6)
        defense = self._rng.randint(1, 6)
        if attack > defense:
            winner, loser = first, second
        else:
            winner, loser = second, first
        loser.die()
        self.notify_observers(
            BattleEvent(winner, loser, attack, defense, self._output_lock)
        )

    def _combat_loop(self) -> None:
        while not self._stopped.is_set():
            try:
                first, second = self._battles.get(timeout=self._tick)
            except queue.Empty:
                continue
            self._fight(first, second)

    def _print_loop(self) -> None:
        while not self._stopped.wait(self._tick * 2):
            self._print_map()

    def run(self, game_duration: float) -> list[Npc]:
        """Play for ``game_duration`` seconds, report and return the survivors."""
        self._stopped.clear()
        self._print_map()
        self._write(f"Game will start in {_format(self._start_delay)} seconds...\n")
        time.sleep(self._start_delay)

        workers = [
            threading.Thread(target=loop, daemon=True)
            for loop in (self._print_loop, self._move_loop, self._combat_loop)
        ]
        for worker in workers:
            worker.start()
        time.sleep(game_duration)
        self._stopped.set()
        for worker in workers:
            worker.join()

        survivors = [npc for npc in self._characters if npc.alive]
        lines = ["\nGame ended!\nSurvivors:\n"]
        lines.extend(
            f'{npc.type_name} "{npc.name}": '
            f"({_format(npc.position.x)},{_format(npc.position.y)})\n"
            for npc in survivors
        )
        lines.append(f"Survivors count: {len(survivors)}\n")
        self._write("".join(lines))
        return survivors

    @classmethod
    def generate(cls, rng: random.Random | None = None) -> Battle:
        """A battle with randomly placed characters of random kinds."""
        rng = rng if rng is not None else random.Random()
        kinds: tuple[tuple[type[Npc], str], ...] = (
            (Knight, "Knight_"),
            (Squirrel, "Squirrel_"),
            (SlaveTrader, "SlaveTrader_"),
        )
        characters = []
        for i in range(cls.INITIAL_NPC_COUNT):
            x = rng.randint(0, cls.MAP_WIDTH - 1)
            y = rng.randint(0, cls.MAP_WIDTH - 1)
            npc_class, prefix = kinds[rng.randint(0, len(kinds) - 1)]
            characters.append(npc_class(f"{prefix}{i}", Point(x, y)))
        return cls(characters, rng=rng)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a battle and run it; ``argv`` may give the duration in seconds."""
    duration = float(argv[0]) if argv else 30.0
    battle = Battle.generate()
    battle.add_observer(BattleReporter(sys.stdout))
    battle.run(duration)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())