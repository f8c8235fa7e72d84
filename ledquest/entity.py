"""Base entity and the results returned when something tries to move into it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar

from ledquest.point import Point


class MoveResultCode(Enum):
    """What happens when an entity is moved into."""

    NO_MOVE = auto()
    ITEM = auto()
    NEEDS_KEY = auto()
    NEEDS_PICKAXE = auto()
    NEEDS_SWORD = auto()


class MoveResultItem(Enum):
    """The item yielded by a move; NO_ITEM unless the code is ITEM."""

    NO_ITEM = auto()
    ARMOR = auto()
    HEALTH_POTION = auto()
    KEY = auto()
    PICKAXE = auto()
    SPEEDBOOTS = auto()
    SWORD = auto()
    TREASURE = auto()


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move request against an entity."""

    code: MoveResultCode
    item: MoveResultItem = MoveResultItem.NO_ITEM


class Entity:
    """A non-floor element of the board."""

    movement: ClassVar[Any] = None
    attack_damage: ClassVar[int] = 0

    def __init__(self, position: Point = Point(0, 0)) -> None:
        self.position = position

    def move(self, board: Any) -> None:
        """Take one turn on the board using the entity's movement strategy.

        Entities without a strategy are static and stay where they are.
        """
        strategy = self.movement
        if strategy is not None:
            strategy.move(board, self)

    def receive_move(self, mover: Entity) -> MoveResult:
        """Respond to ``mover`` trying to step onto this entity."""
        return MoveResult(MoveResultCode.NO_MOVE, MoveResultItem.NO_ITEM)

    def attack(self, target: Entity) -> None:
        """Deal ``attack_damage`` to ``target`` if it can take damage.

        Entities that deal no damage, or targets that cannot be harmed,
        are left untouched.
        """
        receive = getattr(target, "receive_attack", None)
        if self.attack_damage > 0 and callable(receive):
            receive(self.attack_damage)