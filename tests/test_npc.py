import pytest

from labworks.geometry import Point
from labworks.npc import (
    CombatVisitor,
    Knight,
    Npc,
    SlaveTrader,
    Squirrel,
    Visitor,
    create_npc,
    format_position,
)


class RecordingVisitor(Visitor):
    def __init__(self):
        self.visited = []

    def visit_squirrel(self, squirrel):
        self.visited.append(("squirrel", squirrel))

    def visit_slave_trader(self, slave_trader):
        self.visited.append(("slave_trader", slave_trader))

    def visit_knight(self, knight):
        self.visited.append(("knight", knight))


@pytest.mark.parametrize(
    "attacker_class, victim_class, kills",
    [
        (Squirrel, Squirrel, True),
        (Squirrel, SlaveTrader, False),
        (Squirrel, Knight, False),
        (SlaveTrader, Squirrel, True),
        (SlaveTrader, SlaveTrader, False),
        (SlaveTrader, Knight, False),
        (Knight, Squirrel, False),
        (Knight, SlaveTrader, True),
        (Knight, Knight, False),
    ],
)
def test_combat_rules(attacker_class, victim_class, kills):
    attacker = attacker_class("attacker", Point(0, 0))
    victim = victim_class("victim", Point(0, 1))
    visitor = CombatVisitor(victim)
    attacker.accept(visitor)
    assert visitor.should_kill is kills


@pytest.mark.parametrize(
    "npc_class, kind", [(Squirrel, "squirrel"), (SlaveTrader, "slave_trader"), (Knight, "knight")]
)
def test_accept_dispatches_to_matching_method(npc_class, kind):
    npc = npc_class("someone", Point(1, 1))
    visitor = RecordingVisitor()
    npc.accept(visitor)
    assert visitor.visited == [(kind, npc)]


@pytest.mark.parametrize("npc_class", [Squirrel, SlaveTrader, Knight])
def test_factory_builds_each_kind(npc_class):
    npc = create_npc(npc_class.type_name, "name_1", Point(3, 4))
    assert type(npc) is npc_class
    assert npc.name == "name_1"
    assert npc.position == Point(3, 4)
    assert npc.alive


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError, match="Unknown type of NPC passed"):
        create_npc("Dragon", "d", Point(0, 0))


def test_factory_type_names_match_source():
    assert [type(create_npc(name, "n")).__name__ for name in ("Squirrel", "SlaveTrader", "Knight")] == [
        "Squirrel",
        "SlaveTrader",
        "Knight",
    ]


def test_default_position_is_origin():
    assert Knight("k").position == Point()


def test_die_marks_dead():
    npc = Squirrel("s", Point(0, 0))
    npc.die()
    assert npc.alive is False


def test_equality_compares_kind_name_position_and_life():
    assert Squirrel("s", Point(1, 2)) == Squirrel("s", Point(1, 2))
    assert Squirrel("s", Point(1, 2)) != Squirrel("s", Point(1, 3))
    assert Squirrel("s", Point(1, 2)) != Squirrel("t", Point(1, 2))
    assert Squirrel("s", Point(1, 2)) != Knight("s", Point(1, 2))
    dead = Squirrel("s", Point(1, 2))
    dead.die()
    assert dead != Squirrel("s", Point(1, 2))


def test_format_position_integers():
    assert format_position(Point(1, 2)) == "1 2"


def test_format_position_fraction_and_negative():
    assert format_position(Point(1.5, -2)) == "1.5 -2"


def test_format_position_round_trips_through_split():
    point = Point(7.25, 0.5)
    x_text, y_text = format_position(point).split()
    assert Point(float(x_text), float(y_text)) == point


def test_npc_is_abstract():
    with pytest.raises(TypeError):
        Npc("n", Point(0, 0))


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()