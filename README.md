# ledquest

Game rules and state for a small dungeon adventure whose world is an 8x8 grid
of lights. The player walks from room to room and picks up items: armour,
health potions, a key, a pickaxe, speed boots, a sword and the treasure.
Guards, patrols, sentries and bosses stand in the way. A door opens only with
the key, and breakable walls give way only to the pickaxe.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `ledquest.constants`: board size (`ARRAY_LENGTH = 8`), the limits on
  entities per room, timings in milliseconds, damage, points, potion healing,
  the speed-boots factor and the spawn square.
- `ledquest.point`: `Point`, a frozen grid coordinate supporting `+` with
  another `Point` and `*` with an integer, and `sgn(x)`, which returns -1, 0
  or 1.
- `ledquest.timer`: `Timer(delay, clock=...)`, a millisecond delay timer with
  `start()`, `time_is_up()`, `speed_up()` (halves the delay) and
  `slow_down()` (doubles it). The clock defaults to a monotonic clock and can
  be replaced, for example in tests.
- `ledquest.entity`: the `Entity` base class, with `move(board)`,
  `receive_move(mover)` and `attack(target)`, and the `MoveResult`,
  `MoveResultCode` and `MoveResultItem` types that describe what happens when
  something tries to step onto a square.
- `ledquest.obstacles`: `Door` (needs the key), `Item(item, position)` (gives
  up its item) and `Wall(position, breakable=False)` (blocks, or needs the
  pickaxe when breakable).
- `ledquest.movement`: the abstract `MovementStrategy` and
  `BouncingLinearMovementStrategy`. The bouncing strategy moves an entity in a
  straight line, turns it back at the board edge, and attacks and turns back
  at any occupant.
- `ledquest.enemies`: `Enemy` and its kinds. `Boss` steps towards the player
  and hits hard. `Guard` and `Patrol` bounce back and forth. `Sentry(position,
  attack_area_length)` stands still and strikes everything in a square around
  it; the area length must be odd and at most 8, or `ValueError` is raised.
  Each takes an optional `clock` for its timer.
- `ledquest.player`: `Player(clock=None)` and `joystick_offset(x, y)`. The
  function turns raw joystick readings (0-1023, centred near 512) into a step.
  The player moves with `move(board, offset)`, takes damage with
  `receive_attack(damage)` (reduced by armour, with a potion drunk
  automatically at zero health), and has `revive()`, `drink_health_potion()`,
  `use_speedboots()`, `remove_speedboots()` and `collect_item(item)`.
- `ledquest.board`: `Board`, `BoardCode`, `BoardState` and `BoardMemento`.
  The board holds the player and the room's entities, answers `entity_at` and
  `in_bounds`, takes entities with `add_entity` and `remove_entity`, runs
  every entity's turn with `move_entities()`, and gives the LED frame with
  `pattern()`, a list of rows indexed `[y][x]` holding 1 where something
  stands and 0 elsewhere.

## Example

```python
from ledquest.board import Board
from ledquest.enemies import Guard
from ledquest.obstacles import Wall
from ledquest.player import Player, joystick_offset
from ledquest.point import Point

player = Player()
board = Board(player)
board.add_entity(Wall(Point(0, 0)))
board.add_entity(Guard(Point(5, 1), Point(1, 0)))

offset = joystick_offset(300, 512)   # a low x reading gives Point(1, 0)
player.move(board, offset)           # moves once the player's timer is up
board.move_entities()

frame = board.pattern()              # 8 rows of 0/1 for the LED grid
```

Every moving piece waits for its own timer, so a game loop calls
`player.move` and `board.move_entities` repeatedly and redraws from
`pattern()`.

When the player steps off an edge of the grid, the board's `current` room
changes to its `left`, `right`, `up` or `down` neighbour, and the player comes
in on the opposite edge. `set_spawn()` returns to the starting room. The
board keeps a `BoardState` per room in `states`, and `BoardMemento` holds a
copy of one.

Game messages, such as picking up an item, being attacked or dying, are
written to standard output with `print`.

## What the package does not do

- It has no command and no game loop; a program using it has to drive the
  turns.
- It does not read a joystick or keyboard, or light a display. It only takes
  readings through `joystick_offset` and produces frames through
  `Board.pattern`.
- It holds no room layouts. Rooms start empty, and the entities of a room are
  placed with `add_entity`. Nothing fills a room from its `BoardState` when
  the board changes rooms.