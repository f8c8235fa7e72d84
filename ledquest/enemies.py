"""Hostile entities: the boss, guards, patrols and sentries."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional

from ledquest.constants import (
    ARRAY_LENGTH,
    BOSS_DAMAGE,
    BOSS_DELAY,
    BOSS_POINTS,
    GUARD_DAMAGE,
    GUARD_DELAY,
    GUARD_POINTS,
    PATROL_DAMAGE,
    PATROL_DELAY,
    PATROL_POINTS,
    SENTRY_DAMAGE,
    SENTRY_DELAY,
    SENTRY_POINTS,
)
from ledquest.entity import Entity, MoveResult, MoveResultCode, MoveResultItem
from ledquest.movement import BouncingLinearMovementStrategy
from ledquest.point import Point, sgn
from ledquest.timer import Timer

Clock = Optional[Callable[[], float]]


def _make_timer(delay: int, clock: Clock) -> Timer:
    return Timer(delay) if clock is None else Timer(delay, clock)


def _damage(target: Entity, amount: int) -> bool:
    """Deal ``amount`` to ``target`` if it can be hurt; report whether it was."""
    receive_attack = getattr(target, "receive_attack", None)
    if receive_attack is None:
        return False
    receive_attack(amount)
    return True


class Enemy(Entity):
    """An entity the player can only get past by killing it with the sword."""

    kill_points: ClassVar[int] = 0
    name: ClassVar[str] = "Enemy"

    def receive_move(self, mover: Entity) -> MoveResult:
        return MoveResult(MoveResultCode.NEEDS_SWORD, MoveResultItem.NO_ITEM)


class Boss(Enemy):
    """Chases the player and deals heavy damage."""

    kill_points: ClassVar[int] = BOSS_POINTS
    name: ClassVar[str] = "Boss"

    def __init__(self, position: Point, clock: Clock = None) -> None:
        super().__init__(position)
        self.move_timer = _make_timer(BOSS_DELAY, clock)

    def move(self, board: Any) -> None:
        """Step one square towards the player, attacking whatever is in the way."""
        if not self.move_timer.time_is_up():
            return

        target = board.player.position
        offset = Point(sgn(target.x - self.position.x), sgn(target.y - self.position.y))
        if offset.x == 0 and offset.y == 0:
            return

        dest = self.position + offset
        occupant = board.entity_at(dest)
        if occupant is None:
            self.position = dest
        else:
            self.attack(occupant)
        self.move_timer.start()

    def attack(self, target: Entity) -> None:
        _damage(target, BOSS_DAMAGE)


class _Bouncer(Enemy):
    """An enemy moving in a straight line and bouncing off obstacles."""

    damage: ClassVar[int] = 0

    def __init__(self, position: Point, offset: Point, delay: int, clock: Clock) -> None:
        super().__init__(position)
        self.offset = offset
        self.move_timer = _make_timer(delay, clock)
        self._strategy = BouncingLinearMovementStrategy()

    def move(self, board: Any) -> None:
        self._strategy.move(board, self)

    def attack(self, target: Entity) -> None:
        if _damage(target, self.damage):
            print(
                f"{self.name} attacked you for {self.damage}! "
                f"You have {target.health} health left."
            )

    def rebound(self) -> None:
        """Reverse the direction of travel."""
        self.offset = self.offset * -1


class Guard(_Bouncer):
    """Paces back and forth in front of an entrance, across the corridor."""

    kill_points: ClassVar[int] = GUARD_POINTS
    name: ClassVar[str] = "Guard"
    damage: ClassVar[int] = GUARD_DAMAGE

    def __init__(self, position: Point, offset: Point, clock: Clock = None) -> None:
        super().__init__(position, offset, GUARD_DELAY, clock)

    def move(self, board: Any) -> None:
        """Turn at the board edge, attack and turn at an occupant, else advance."""
        super().move(board)

    def attack(self, target: Entity) -> None:
        super().attack(target)

    def rebound(self) -> None:
        super().rebound()


class Patrol(_Bouncer):
    """Wanders back and forth along a corridor."""

    kill_points: ClassVar[int] = PATROL_POINTS
    name: ClassVar[str] = "Patrol"
    damage: ClassVar[int] = PATROL_DAMAGE

    def __init__(self, position: Point, offset: Point, clock: Clock = None) -> None:
        super().__init__(position, offset, PATROL_DELAY, clock)

    def move(self, board: Any) -> None:
        """Advance along the corridor, bouncing off edges and occupants."""
        super().move(board)

    def attack(self, target: Entity) -> None:
        super().attack(target)

    def rebound(self) -> None:
        super().rebound()


class Sentry(Enemy):
    """A stationary enemy that periodically strikes everything in a square around it."""

    kill_points: ClassVar[int] = SENTRY_POINTS
    name: ClassVar[str] = "Sentry"

    def __init__(self, position: Point, attack_area_length: int, clock: Clock = None) -> None:
        if attack_area_length % 2 == 0:
            raise ValueError("Sentry attack area length must be an odd number")
        if attack_area_length < 0 or attack_area_length > ARRAY_LENGTH:
            raise ValueError(f"Sentry attack area length must be between 0 and {ARRAY_LENGTH}")
        super().__init__(position)
        self.attack_area_length = attack_area_length
        self.attack_timer = _make_timer(SENTRY_DELAY, clock)

    def move(self, board: Any) -> None:
        """Attack every entity inside the attack area once the timer allows."""
        if not self.attack_timer.time_is_up():
            return

        reach = (self.attack_area_length - 1) // 2
        for x in range(self.position.x - reach, self.position.x + reach + 1):
            for y in range(self.position.y - reach, self.position.y + reach + 1):
                square = Point(x, y)
                if not board.in_bounds(square):
                    continue
                occupant = board.entity_at(square)
                if occupant is not None:
                    self.attack(occupant)

    def attack(self, target: Entity) -> None:
        if _damage(target, SENTRY_DAMAGE):
            self.attack_timer.start()