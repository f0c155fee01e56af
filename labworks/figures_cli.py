"""Interactive console for building a list of figures and measuring them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from labworks.dynamic_array import DynamicArray
from labworks.geometry import Figure, Hexagon, Octagon, Triangle

_MENU_BASIC = (
    "Commands:\n"
    "p - Print all figures\n"
    "a - Add new figure\n"
    "r - Remove figure\n"
    "s - Calculate size of a figure\n"
    "S - Calculate size of all figures\n"
    "g - Calculate center of a figure\n"
    "e - Exit\n"
    "Enter command: "
)

_MENU_DETAILED = _MENU_BASIC.replace(
    "p - Print all figures\n",
    "p - Print all figures (coordinates, center, size)\n",
)

_FIGURE_KINDS: dict[str, tuple[type[Figure], str]] = {
    "t": (Triangle, "Enter Triangle points' coordinates (eg. 0 0 1 0 0 1): "),
    "h": (
        Hexagon,
        "Enter Hexagon points' coordinates (eg. 0 0 1 -1 2 0 2 1 1 2 0 1): ",
    ),
    "o": (
        Octagon,
        "Enter Octagon points' coordinates (eg. 0 0 1 -1 2 -1 3 0 3 1 2 2 1 2 0 1): ",
    ),
}


def _format(value: float) -> str:
    return format(value, "g")


def _words(tokens: str | Iterable[str]) -> Iterator[str]:
    if isinstance(tokens, str):
        return iter(tokens.split())
    return iter(tokens)


def read_figure(tokens: str | Iterable[str], out: TextIO) -> Figure | None:
    """Ask for a figure type and its coordinates.

    Returns None when the type is unknown or missing. Raises ValueError when
    the coordinates cannot be read.
    """
    words = _words(tokens)
    out.write("Enter type of figure (t - triangle, h - hexagon, o - octagon): ")
    kind = next(words, None)
    out.write("\n")
    if kind not in _FIGURE_KINDS:
        return None
    figure_class, prompt = _FIGURE_KINDS[kind]
    figure = figure_class()
    out.write(prompt)
    figure.read(words)
    return figure


def _read_index(words: Iterator[str], count: int, out: TextIO) -> int | None:
    """Return a valid index, -1 when it is out of range, or None at end of input."""
    out.write("Enter index: ")
    raw = next(words, None)
    if raw is None:
        return None
    try:
        index = int(raw)
    except ValueError:
        index = -1
    if not 0 <= index < count:
        print("Index out of range", file=out)
        return -1
    return index


def run(
    tokens: str | Iterable[str], out: TextIO, detailed: bool = True
) -> DynamicArray[Figure]:
    """Run the command loop over ``tokens`` until ``e`` or the input ends.

    With ``detailed`` the listing also shows each figure's center and size.
    Returns the figures held when the loop stopped.
    """
    words = _words(tokens)
    figures: DynamicArray[Figure] = DynamicArray()
    menu = _MENU_DETAILED if detailed else _MENU_BASIC

    while True:
        out.write(menu)
        command = next(words, None)
        if command is None or command == "e":
            return figures

        if command == "p":
            print("All figures : {", file=out)
            for figure in figures:
                if detailed:
                    print(
                        f"\t{figure}: {{ center() = {figure.center()}, "
                        f"size() = {_format(figure.area())} }},",
                        file=out,
                    )
                else:
                    print(f"\t{figure},", file=out)
            print("}", file=out)
        elif command == "a":
            try:
                figure = read_figure(words, out)
            except ValueError:
                figure = None
            if figure is None:
                print("Not added!", file=out)
            else:
                figures.append(figure)
                print("Added!", file=out)
        elif command in ("r", "s", "g"):
            index = _read_index(words, len(figures), out)
            if index is None:
                return figures
            if index < 0:
                continue
            if command == "r":
                figures.remove_at(index)
                print("Removed", file=out)
            elif command == "s":
                print(f"Size: {_format(figures[index].area())}", file=out)
            else:
                print(f"Center: {figures[index].center()}", file=out)
        elif command == "S":
            total = sum(figure.area() for figure in figures)
            print(f"Size: {_format(total)}", file=out)


def _stdin_words() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the figures console; input comes from ``argv`` or standard input."""
    tokens: Iterable[str] = argv if argv is not None else _stdin_words()
    run(tokens, sys.stdout, detailed=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())