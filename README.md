# labworks

A collection of small, self-contained programs and data structures:

- **palindrome**: checks whether a string reads the same backwards.
- **quaternary**: non-negative base-4 numbers with addition, subtraction and ordering.
- **geometry**: points and polygons (triangle, hexagon, octagon) with area, center and text input.
- **dynamic_array**: a growable array with explicit capacity and bounds-checked access.
- **figures_cli**: an interactive menu for building and measuring a collection of figures.
- **pooled_list**: a singly linked list whose nodes come from a reusing block pool.
- **observable**: a minimal observer/observable pair.
- **npc**, **npc_store**, **arena**: characters that fight each other by fixed rules, saved to and loaded from text files.
- **battle**: a timed, threaded simulation of characters wandering a 100×100 map and fighting with dice.

There are no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Palindromes

```python
from labworks.palindrome import is_palindrome

is_palindrome("abccba")   # True
is_palindrome("abca")     # False
is_palindrome("")         # True
```

### Base-4 numbers

`Quaternary` accepts `"0"` or a string of digits `0`–`3` without leading zeros;
anything else raises `ValueError`. Subtracting a larger number from a smaller
one also raises `ValueError`. `Quaternary.repeat(n, digit)` and
`Quaternary.from_digits(digits)` build numbers from digit characters.

```python
from labworks.quaternary import Quaternary

a = Quaternary("123")
b = Quaternary("22")

str(a + b)                         # "211"
a - b == Quaternary("101")         # True
Quaternary("11") > Quaternary("3") # True
str(Quaternary.repeat(3, "1"))     # "111"
```

### Geometry

`Point` is an immutable dataclass with `x` and `y`, supporting `+`, `-`,
negation and `length()`. `Triangle`, `Hexagon` and `Octagon` are `Figure`s
offering `points()`, `area()`, `center()`, `read(source)` and `float()`.

```python
from labworks.geometry import Point, Triangle, Hexagon

t = Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
t.area()      # 0.5
str(t)        # "Triangle {A = (0; 0); B = (1; 0); C = (0; 1)}"
float(t)      # same as t.area()

h = Hexagon()
h.read("0 0  1 0  2 0  2 1  1 1  0 1")
h.area()      # 2.0
h.center()    # Point(x=1.0, y=0.5)
```

`Hexagon` and `Octagon` take exactly six and eight points respectively (or none,
in which case every vertex starts at the origin); any other count raises
`ValueError`. `read` accepts a string, a text stream or an iterable of tokens.

### Containers

```python
from labworks.dynamic_array import DynamicArray
from labworks.pooled_list import BlockPool, PooledList

arr = DynamicArray([1, 2, 3])
arr.append(4)
arr.remove_at(0)
list(arr)          # [2, 3, 4]
arr.capacity()     # 4

pool = BlockPool()
items = PooledList(pool)
for value in (1, 2, 3):
    items.append(value)
items.remove_at(0)
items.append(4)
items.to_list()    # [2, 3, 4]
```

`BlockPool` hands out integer addresses and keeps track of used and released
blocks (`used_count()`, `free_count()`); it reuses released blocks but does not
manage real memory.

### Character arena

Squirrels kill squirrels, slave traders kill squirrels, knights kill slave traders.
A fight happens only between characters within the given distance.

```python
from labworks.geometry import Point
from labworks.npc import create_npc
from labworks.arena import Arena, KillReporter
from labworks.npc_store import NpcFileStore

arena = Arena([
    create_npc("Squirrel", "Squirrel_1", Point(1, 1)),
    create_npc("SlaveTrader", "SlaveTrader_1", Point(1, 2)),
])
arena.add_observer(KillReporter())   # prints a line for each kill
arena.perform_combat(1)
[npc.name for npc in arena.characters()]   # ["SlaveTrader_1"]

store = NpcFileStore("save.txt")
store.save(arena.characters())
store.load()
```

Save files are plain text: the number of characters on the first line, then one
line per character with its type, name and coordinates.

### Timed battle

```python
import random
from labworks.battle import Battle, BattleReporter

battle = Battle.generate(random.Random(1))
battle.add_observer(BattleReporter())
survivors = battle.run(5)   # seconds of play after a start delay
```

`Battle(characters, rng, out, start_delay, tick)` lets you choose the
characters, random generator, output stream, start delay and step length.
The map and results are printed as text only.

## Commands

Each command takes its input from its command-line arguments when any are
given, otherwise from standard input.

| Command                | What it does                                                       |
|------------------------|--------------------------------------------------------------------|
| `labworks-palindrome`  | Reads one word and says whether it is a palindrome.                |
| `labworks-quaternary`  | Reads two base-4 numbers and prints their sum, difference and comparisons. |
| `labworks-figures`     | Menu for adding, removing, printing and measuring figures.         |
| `labworks-pooled-list` | Builds a pooled list (of the arguments, or 1, 2, 3) and prints its elements. |
| `labworks-arena`       | Menu for adding characters, fighting, saving and loading.          |
| `labworks-battle`      | Generates 50 characters and runs the battle; an optional argument gives the duration in seconds (default 30). It reads nothing from standard input. |

Examples:

```
$ echo abba | labworks-palindrome
$ labworks-quaternary 123 22
$ labworks-battle 10
```