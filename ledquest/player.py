"""The player character: joystick movement, combat, items and scoring."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ledquest.constants import (
    ARRAY_LENGTH,
    BREAKABLE_WALL_POINTS,
    DOOR_POINTS,
    HEALTH_POTION_HEALING,
    ITEM_POINTS,
    PLAYER_DELAY,
    PLAYER_INITIAL_HEALTH,
    SPAWN_X,
    SPAWN_Y,
    TREASURE_POINTS,
)
from ledquest.entity import Entity, MoveResultCode, MoveResultItem
from ledquest.point import Point
from ledquest.timer import Timer

_STILL = Point(0, 0)

_PICKUP_MESSAGES = {
    MoveResultItem.ARMOR: "You grabbed the armor!",
    MoveResultItem.HEALTH_POTION: "You grabbed a health potion!",
    MoveResultItem.KEY: "You grabbed the key!",
    MoveResultItem.PICKAXE: "You grabbed the pickaxe!",
    MoveResultItem.SPEEDBOOTS: (
        "You have picked up the speed boots! "
        "Enter U to put them on and again to take them off."
    ),
    MoveResultItem.SWORD: "You grabbed the sword!",
    MoveResultItem.TREASURE: "You grabbed the treasure!",
}


def joystick_offset(x: int, y: int) -> Point:
    """Translate raw joystick readings (0-1023, centred near 512) into a step."""
    dx = 0
    dy = 0
    if x < 500:
        dx = 1
    if x > 526:
        dx = -1
    if y < 500:
        dy = -1
    if y > 526:
        dy = 1
    return Point(dx, dy)


class Player(Entity):
    """The adventurer steered by the joystick."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(Point(SPAWN_X, SPAWN_Y))
        self.alive = True
        self.health = PLAYER_INITIAL_HEALTH
        self.points = 0
        self.treasure = False
        self.key = False
        self.sword = False
        self.pickaxe = False
        self.speedboots = False
        self.speedboots_on = False
        self.armor = 1
        self.health_potions = 0
        self.move_timer = Timer(PLAYER_DELAY) if clock is None else Timer(PLAYER_DELAY, clock)

    def move(self, board: Any, offset: Point = _STILL) -> None:
        """Step by ``offset``, changing board at an edge or interacting with an occupant."""
        if not self.move_timer.time_is_up():
            return

        dest = self.position + offset
        if not board.in_bounds(dest):
            if dest.x < 0:
                board.set_left()
                self.position = Point(ARRAY_LENGTH - 1, self.position.y)
            elif dest.x >= ARRAY_LENGTH:
                board.set_right()
                self.position = Point(0, self.position.y)
            elif dest.y < 0:
                board.set_up()
                self.position = Point(self.position.x, ARRAY_LENGTH - 1)
            else:
                board.set_down()
                self.position = Point(self.position.x, 0)
            return

        if offset == _STILL:
            return

        occupant = board.entity_at(dest)
        if occupant is None:
            self.position = dest
        else:
            self._interact(board, occupant, dest)
        self.move_timer.start()

    def _interact(self, board: Any, occupant: Entity, dest: Point) -> None:
        result = occupant.receive_move(self)
        code = result.code
        if code is MoveResultCode.ITEM:
            self.collect_item(result.item)
        elif code is MoveResultCode.NEEDS_KEY:
            if self.key:
                self._take(board, occupant, dest)
                self.points += DOOR_POINTS
                print(f"You opened the door! Go claim your treasure! +{DOOR_POINTS} points")
            else:
                print("You need the key!")
        elif code is MoveResultCode.NEEDS_PICKAXE:
            if self.pickaxe:
                self._take(board, occupant, dest)
                self.points += BREAKABLE_WALL_POINTS
                print(f"You broke a wall! +{BREAKABLE_WALL_POINTS} points")
            else:
                print("You need the pickaxe!")
        elif code is MoveResultCode.NEEDS_SWORD:
            if self.sword:
                gained = getattr(occupant, "kill_points", 0)
                name = getattr(occupant, "name", type(occupant).__name__)
                self.points += gained
                print(f"You killed a {name}! +{gained} points")
                self._take(board, occupant, dest)
            else:
                print("You cannot attack without the sword!")
        else:
            print("Oof!")

    def _take(self, board: Any, occupant: Entity, dest: Point) -> None:
        self.position = dest
        board.remove_entity(occupant)

    def receive_attack(self, damage: int) -> None:
        """Lose health, reduced by armor; a potion is drunk automatically at zero."""
        self.health -= damage // self.armor
        if self.health <= 0:
            if self.health_potions > 0:
                self.drink_health_potion()
            else:
                self.alive = False
                print("You died! Would you like to continue playing?")

    def revive(self) -> None:
        """Come back to life at full health on the spawn square."""
        self.alive = True
        self.health = PLAYER_INITIAL_HEALTH
        self.position = Point(SPAWN_X, SPAWN_Y)

    def drink_health_potion(self) -> None:
        """Drink one potion, if any are left."""
        if self.health_potions > 0:
            self.health += HEALTH_POTION_HEALING
            self.health_potions -= 1
        else:
            print("You do not have any health potions left.")

    def use_speedboots(self) -> None:
        """Put on the speed boots, doubling movement speed."""
        if not self.speedboots:
            print("You do not have the speed boots.")
        elif self.speedboots_on:
            print("You are already wearing your speed boots!")
        else:
            self.speedboots_on = True
            self.move_timer.speed_up()
            print("You have put on your speed boots. You are now moving twice as fast!")

    def remove_speedboots(self) -> None:
        """Take off the speed boots, returning to normal speed."""
        if not self.speedboots:
            print("You do not have the speed boots.")
        elif not self.speedboots_on:
            print("You are not wearing your speed boots!")
        else:
            self.speedboots_on = False
            self.move_timer.slow_down()
            print(
                "You have taken off your speed boots. "
                "You are now moving at your original speed."
            )

    def collect_item(self, item: MoveResultItem) -> None:
        """Pick up ``item`` and score for it."""
        if item not in _PICKUP_MESSAGES:
            raise ValueError("Invalid item type")

        gained = ITEM_POINTS
        if item is MoveResultItem.ARMOR:
            self.armor += 1
        elif item is MoveResultItem.HEALTH_POTION:
            self.health_potions += 1
        elif item is MoveResultItem.KEY:
            self.key = True
        elif item is MoveResultItem.PICKAXE:
            self.pickaxe = True
        elif item is MoveResultItem.SPEEDBOOTS:
            self.speedboots = True
            self.move_timer.speed_up()
        elif item is MoveResultItem.SWORD:
            self.sword = True
        elif item is MoveResultItem.TREASURE:
            self.treasure = True
            gained += TREASURE_POINTS

        self.points += gained
        print(f"{_PICKUP_MESSAGES[item]} +{gained} points")