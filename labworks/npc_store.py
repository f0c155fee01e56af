"""Saving characters to a text file and loading them back."""

from __future__ import annotations

import os
from collections.abc import Iterable
from itertools import islice
from pathlib import Path

from labworks.geometry import Point
from labworks.npc import Npc, create_npc, format_position

_RECORD_WORDS = 4


class NpcFileStore:
    """A text file holding a count line followed by one character per line.

    Each character line reads ``<type> <name> <x> <y>``.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> list[Npc]:
        """Read the characters stored in the file."""
        words = iter(self.path.read_text(encoding="utf-8").split())
        try:
            count = int(next(words))
        except StopIteration:
            raise ValueError("save file is empty") from None

        characters = []
        for _ in range(count):
            record = list(islice(words, _RECORD_WORDS))
            if len(record) < _RECORD_WORDS:
                raise ValueError("save file ends in the middle of a record")
            type_name, name, x, y = record
            characters.append(create_npc(type_name, name, Point(float(x), float(y))))
        return characters

    def save(self, characters: Iterable[Npc]) -> None:
        """Write ``characters`` to the file, replacing what it held."""
        roster = list(characters)
        lines = [str(len(roster))]
        lines.extend(
            f"{npc.type_name} {npc.name} {format_position(npc.position)}"
            for npc in roster
        )
        self.path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"