"""Points on a plane and closed polygons built from a fixed number of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import hypot
from typing import ClassVar, TextIO, Union

_VERTEX_LABELS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

Source = Union[str, TextIO, Iterable[str]]


def _format_number(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Point:
    """An immutable point with ``x`` and ``y`` coordinates."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Distance from the origin."""
        return hypot(self.x, self.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({_format_number(self.x)}; {_format_number(self.y)})"


def _tokens(source: Source) -> Iterator[str]:
    if isinstance(source, str):
        return iter(source.split())
    read = getattr(source, "read", None)
    if callable(read):
        return iter(read().split())
    return iter(source)


class Figure:
    """A polygon with a fixed number of vertices.

    Subclasses set ``points_count``; the vertices are kept in order.
    """

    points_count: ClassVar[int]

    __hash__ = None  # type: ignore[assignment]

    def __new__(cls, *args: object, **kwargs: object) -> Figure:
        if cls is Figure:
            raise TypeError("Figure cannot be instantiated directly")
        return super().__new__(cls)

    def _assign(self, points: Iterable[Point]) -> None:
        vertices = list(points)
        if not vertices:
            vertices = [Point() for _ in range(self.points_count)]
        if len(vertices) != self.points_count:
            raise ValueError("Passed points list has invalid length")
        if not all(isinstance(vertex, Point) for vertex in vertices):
            raise TypeError("every vertex must be a Point")
        self._points = vertices

    def points(self) -> list[Point]:
        """The vertices, in order."""
        return list(self._points)

    def area(self) -> float:
        """Area of the polygon by the shoelace formula; 0 below three vertices."""
        vertices = self._points
        if len(vertices) < 3:
            return 0.0
        doubled = sum(
            p1.x * p2.y - p2.x * p1.y
            for p1, p2 in zip(vertices, vertices[1:] + vertices[:1])
        )
        return abs(0.5 * doubled)

    def center(self) -> Point:
        """Mean of the vertices."""
        count = len(self._points)
        total = sum(self._points, Point())
        return Point(total.x / count, total.y / count)

    def read(self, source: Source) -> Figure:
        """Replace the vertices with coordinate pairs read from ``source``.

        ``source`` may be a string, a text stream or an iterable of tokens;
        from an iterator only as many tokens as needed are taken.
        """
        tokens = _tokens(source)
        vertices = []
        for _ in range(self.points_count):
            try:
                x_text, y_text = next(tokens), next(tokens)
            except StopIteration:
                raise ValueError("not enough coordinates to read the figure") from None
            vertices.append(Point(float(x_text), float(y_text)))
        self._points = vertices
        return self

    def __float__(self) -> float:
        return self.area()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Figure):
            return NotImplemented
        return self._points == other._points

    def __str__(self) -> str:
        parts = "; ".join(
            f"{label} = {vertex}" for label, vertex in zip(_VERTEX_LABELS, self._points)
        )
        return f"{type(self).__name__} {{{parts}}}"

    def __repr__(self) -> str:
        args = ", ".join(repr(vertex) for vertex in self._points)
        return f"{type(self).__name__}({args})"


class Triangle(Figure):
    """A polygon with three vertices; missing vertices sit at the origin."""

    points_count = 3

    def __init__(
        self, a: Point | None = None, b: Point | None = None, c: Point | None = None
    ) -> None:
        self._assign(vertex if vertex is not None else Point() for vertex in (a, b, c))


class Hexagon(Figure):
    """A polygon with six vertices; with none given all sit at the origin."""

    points_count = 6

    def __init__(self, *args: Point) -> None:
        self._assign(args)


class Octagon(Figure):
    """A polygon with eight vertices; with none given all sit at the origin."""

    points_count = 8

    def __init__(self, *args: Point) -> None:
        self._assign(args)