"""Characters of the arena games, their combat rules and factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from labworks.geometry import Point


def format_position(point: Point) -> str:
    """Coordinates separated by a space, as used in save files and listings."""
    return f"{format(point.x, 'g')} {format(point.y, 'g')}"


class Visitor(ABC):
    """Double dispatch over the kinds of characters."""

    @abstractmethod
    def visit_squirrel(self, squirrel: Squirrel) -> None:
        """Handle a squirrel."""

    @abstractmethod
    def visit_slave_trader(self, slave_trader: SlaveTrader) -> None:
        """Handle a slave trader."""

    @abstractmethod
    def visit_knight(self, knight: Knight) -> None:
        """Handle a knight."""


class CombatVisitor(Visitor):
    """Decides whether the visited attacker kills ``victim``.

    Squirrels and slave traders kill squirrels; knights kill slave traders.
    """

    def __init__(self, victim: Npc) -> None:
        self.victim = victim
        self.should_kill = False

    def visit_squirrel(self, squirrel: Squirrel) -> None:
        if isinstance(self.victim, Squirrel):
            self.should_kill = True

    def visit_slave_trader(self, slave_trader: SlaveTrader) -> None:
        if isinstance(self.victim, Squirrel):
            self.should_kill = True

    def visit_knight(self, knight: Knight) -> None:
        if isinstance(self.victim, SlaveTrader):
            self.should_kill = True


class Npc(ABC):
    """A named character standing at a position on the map."""

    type_name: ClassVar[str]
    type_symbol: ClassVar[str]
    move_distance: ClassVar[int]
    kill_distance: ClassVar[int]

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str, position: Point | None = None) -> None:
        self.name = name
        self.position = position if position is not None else Point()
        self.alive = True

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Dispatch to the ``visitor`` method for this kind of character."""

    def die(self) -> None:
        """Mark the character as dead."""
        self.alive = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Npc):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.name == other.name
            and self.position == other.position
            and self.alive == other.alive
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.position!r})"


class Squirrel(Npc):
    """A squirrel: short moves, short reach."""

    type_name = "Squirrel"
    type_symbol = "B"
    move_distance = 5
    kill_distance = 5

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_squirrel(self)


class SlaveTrader(Npc):
    """A slave trader: moderate moves and reach."""

    type_name = "SlaveTrader"
    type_symbol = "T"
    move_distance = 10
    kill_distance = 10

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_slave_trader(self)


class Knight(Npc):
    """A knight: long moves, moderate reach."""

    type_name = "Knight"
    type_symbol = "K"
    move_distance = 30
    kill_distance = 10

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_knight(self)


_NPC_TYPES: dict[str, type[Npc]] = {
    cls.type_name: cls for cls in (Squirrel, SlaveTrader, Knight)
}


def create_npc(type_name: str, name: str, position: Point | None = None) -> Npc:
    """Build a character of the kind named ``type_name``."""
    try:
        npc_class = _NPC_TYPES[type_name]
    except KeyError:
        raise ValueError("Unknown type of NPC passed") from None
    return npc_class(name, position)