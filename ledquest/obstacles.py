"""Static board elements: doors, collectable items and walls."""

from __future__ import annotations

from ledquest.entity import Entity, MoveResult, MoveResultCode, MoveResultItem
from ledquest.point import Point


class Door(Entity):
    """The entrance to the treasure room; opens only with the key."""

    def receive_move(self, mover: Entity) -> MoveResult:
        return MoveResult(MoveResultCode.NEEDS_KEY, MoveResultItem.NO_ITEM)


class Item(Entity):
    """A collectable item lying on the board."""

    def __init__(self, item: MoveResultItem, position: Point = Point(0, 0)) -> None:
        super().__init__(position)
        self.item = item

    def receive_move(self, mover: Entity) -> MoveResult:
        return MoveResult(MoveResultCode.ITEM, self.item)


class Wall(Entity):
    """A wall; breakable walls give way to the pickaxe."""

    def __init__(self, position: Point = Point(0, 0), breakable: bool = False) -> None:
        super().__init__(position)
        self.breakable = breakable

    def receive_move(self, mover: Entity) -> MoveResult:
        if self.breakable:
            return MoveResult(MoveResultCode.NEEDS_PICKAXE, MoveResultItem.NO_ITEM)
        return super().receive_move(mover)