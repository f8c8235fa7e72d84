"""The game board: entity placement, per-screen state and neighbouring screens."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, List, Optional, Tuple

from ledquest.constants import (
    ARRAY_LENGTH,
    MAX_NUM_BOSSES,
    MAX_NUM_DOORS,
    MAX_NUM_GUARDS,
    MAX_NUM_ITEMS,
    MAX_NUM_PATROLS,
    MAX_NUM_SENTRIES,
    MAX_NUM_WALLS,
)
from ledquest.entity import Entity
from ledquest.point import Point


class BoardCode(Enum):
    """Identifies one screen of the world."""

    NO_BOARD = auto()
    SPAWN_BOARD = auto()
    BOARD_ONE = auto()
    BOARD_TWO = auto()
    BOARD_THREE = auto()
    BOARD_FOUR = auto()
    BOARD_FIVE = auto()
    BOARD_SIX = auto()
    BOARD_SEVEN = auto()
    BOARD_EIGHT = auto()
    BOARD_NINE = auto()
    BOARD_TEN = auto()
    BOARD_ELEVEN = auto()


@dataclass
class BoardState:
    """Positions of the entities that live on one screen."""

    boss_positions: List[Point] = field(default_factory=list)
    door_positions: List[Point] = field(default_factory=list)
    guard_positions: List[Point] = field(default_factory=list)
    item_positions: List[Point] = field(default_factory=list)
    patrol_positions: List[Point] = field(default_factory=list)
    sentry_positions: List[Point] = field(default_factory=list)
    breakable_wall_count: int = 0
    wall_positions: List[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        limits = (
            ("bosses", self.boss_positions, MAX_NUM_BOSSES),
            ("doors", self.door_positions, MAX_NUM_DOORS),
            ("guards", self.guard_positions, MAX_NUM_GUARDS),
            ("items", self.item_positions, MAX_NUM_ITEMS),
            ("patrols", self.patrol_positions, MAX_NUM_PATROLS),
            ("sentries", self.sentry_positions, MAX_NUM_SENTRIES),
            ("walls", self.wall_positions, MAX_NUM_WALLS),
        )
        for name, positions, limit in limits:
            if len(positions) > limit:
                raise ValueError(f"Too many {name}: at most {limit} allowed")


class BoardMemento:
    """A snapshot of a board's state, kept between game loops."""

    __slots__ = ("_state",)

    def __init__(self, state: BoardState) -> None:
        self._state = copy.deepcopy(state)

    @property
    def state(self) -> BoardState:
        return self._state


class Board:
    """The screen the player is on, with its entities and neighbouring screens."""

    def __init__(
        self,
        player: Any,
        current: BoardCode = BoardCode.SPAWN_BOARD,
        left: BoardCode = BoardCode.NO_BOARD,
        up: BoardCode = BoardCode.NO_BOARD,
        down: BoardCode = BoardCode.NO_BOARD,
        right: BoardCode = BoardCode.NO_BOARD,
    ) -> None:
        if current is BoardCode.NO_BOARD:
            raise ValueError("Invalid board code")
        self.player = player
        self.current = current
        self.left = left
        self.up = up
        self.down = down
        self.right = right
        self.states: dict[BoardCode, BoardState] = {}
        self._entities: List[Entity] = []

    @property
    def state(self) -> BoardState:
        """The stored state of the current screen."""
        if self.current is BoardCode.NO_BOARD:
            raise ValueError("Invalid board code")
        return self.states.setdefault(self.current, BoardState())

    @property
    def entities(self) -> Tuple[Entity, ...]:
        """The entities on the board, not counting the player."""
        return tuple(self._entities)

    def move_entities(self) -> None:
        """Give every entity on the board its turn."""
        for entity in list(self._entities):
            if entity in self._entities:
                entity.move(self)

    def entity_at(self, position: Point) -> Optional[Entity]:
        """The entity, player included, standing on ``position``, if any."""
        if self.player is not None and self.player.position == position:
            return self.player
        return next((e for e in self._entities if e.position == position), None)

    def in_bounds(self, position: Point) -> bool:
        """Whether ``position`` lies on the board."""
        return 0 <= position.x < ARRAY_LENGTH and 0 <= position.y < ARRAY_LENGTH

    def add_entity(self, entity: Entity) -> None:
        """Place ``entity`` on its square, which must be free and on the board."""
        if not self.in_bounds(entity.position):
            raise ValueError(f"Position {entity.position} is off the board")
        if self.entity_at(entity.position) is not None:
            raise ValueError(f"Position {entity.position} is already occupied")
        self._entities.append(entity)

    def remove_entity(self, entity: Entity) -> None:
        """Take ``entity`` off the board."""
        try:
            self._entities.remove(entity)
        except ValueError:
            raise ValueError("Entity is not on the board") from None

    def pattern(self) -> List[List[int]]:
        """An LED pattern, indexed ``[y][x]``: 1 where something stands, else 0."""
        grid = [[0] * ARRAY_LENGTH for _ in range(ARRAY_LENGTH)]
        occupants = list(self._entities)
        if self.player is not None:
            occupants.append(self.player)
        for entity in occupants:
            if self.in_bounds(entity.position):
                grid[entity.position.y][entity.position.x] = 1
        return grid

    def set_left(self) -> None:
        self.current = self.left

    def set_right(self) -> None:
        self.current = self.right

    def set_up(self) -> None:
        self.current = self.up

    def set_down(self) -> None:
        self.current = self.down

    def set_spawn(self) -> None:
        self.current = BoardCode.SPAWN_BOARD