"""Movement algorithms shared by moving entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class MovementStrategy(ABC):
    """Encapsulates how an entity moves across the board."""

    @abstractmethod
    def move(self, board: Any, mover: Any) -> None:
        """Advance ``mover`` one step on ``board``."""


class BouncingLinearMovementStrategy(MovementStrategy):
    """Moves in a straight line, bouncing off board edges and other entities.

    The mover must provide ``position``, ``offset``, ``move_timer``,
    ``attack(target)`` and ``rebound()``; the board must provide
    ``in_bounds(point)`` and ``entity_at(point)``.
    """

    def move(self, board: Any, mover: Any) -> None:
        if not mover.move_timer.time_is_up():
            return

        if not board.in_bounds(mover.position + mover.offset):
            mover.rebound()

        dest = mover.position + mover.offset
        occupant = board.entity_at(dest)
        if occupant is not None:
            mover.attack(occupant)
            mover.rebound()
            dest = mover.position + mover.offset

        if board.in_bounds(dest):
            mover.position = dest

        mover.move_timer.start()