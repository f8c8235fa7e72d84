import pytest

from ledquest.board import Board, BoardCode
from ledquest.constants import (
    ARRAY_LENGTH,
    DOOR_POINTS,
    GUARD_DAMAGE,
    GUARD_POINTS,
    HEALTH_POTION_HEALING,
    ITEM_POINTS,
    PLAYER_DELAY,
    PLAYER_INITIAL_HEALTH,
    SPAWN_X,
    SPAWN_Y,
    TREASURE_POINTS,
)
from ledquest.enemies import Guard
from ledquest.entity import MoveResultItem
from ledquest.obstacles import Door, Wall
from ledquest.player import Player, joystick_offset
from ledquest.point import Point


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def player(clock):
    p = Player(clock=clock)
    clock.now = 10_000
    return p


SPAWN = Point(SPAWN_X, SPAWN_Y)
RIGHT = Point(1, 0)


def test_joystick_centre_is_still():
    assert joystick_offset(512, 512) == Point(0, 0)


def test_joystick_extremes():
    assert joystick_offset(0, 1023) == Point(1, 1)
    assert joystick_offset(1023, 0) == Point(-1, -1)


def test_attack_reduces_health(player):
    player.receive_attack(GUARD_DAMAGE)
    assert player.health == PLAYER_INITIAL_HEALTH - GUARD_DAMAGE
    assert player.alive


def test_armor_divides_damage(player):
    player.collect_item(MoveResultItem.ARMOR)
    player.receive_attack(GUARD_DAMAGE)
    assert player.health == PLAYER_INITIAL_HEALTH - GUARD_DAMAGE // 2


def test_death_and_revive(player, capsys):
    player.position = Point(0, 0)
    player.receive_attack(PLAYER_INITIAL_HEALTH)
    assert not player.alive
    assert "You died!" in capsys.readouterr().out
    player.revive()
    assert player.alive
    assert player.health == PLAYER_INITIAL_HEALTH
    assert player.position == SPAWN


def test_potion_saves_from_death(player):
    player.collect_item(MoveResultItem.HEALTH_POTION)
    player.receive_attack(PLAYER_INITIAL_HEALTH)
    assert player.alive
    assert player.health == HEALTH_POTION_HEALING
    assert player.health_potions == 0


def test_drink_without_potion(player, capsys):
    player.drink_health_potion()
    assert player.health == PLAYER_INITIAL_HEALTH
    assert "no" in capsys.readouterr().out.lower()


def test_collect_treasure(player):
    player.collect_item(MoveResultItem.TREASURE)
    assert player.treasure
    assert player.points == ITEM_POINTS + TREASURE_POINTS


def test_collect_no_item_raises(player):
    with pytest.raises(ValueError):
        player.collect_item(MoveResultItem.NO_ITEM)
    assert player.points == 0


def test_speedboots_cycle(player):
    player.collect_item(MoveResultItem.SPEEDBOOTS)
    picked_up = player.move_timer.delay
    assert picked_up == PLAYER_DELAY // 2
    player.use_speedboots()
    assert player.speedboots_on
    assert player.move_timer.delay == picked_up // 2
    player.remove_speedboots()
    assert not player.speedboots_on
    assert player.move_timer.delay == picked_up


def test_speedboots_without_boots(player, capsys):
    player.use_speedboots()
    assert not player.speedboots_on
    assert player.move_timer.delay == PLAYER_DELAY
    assert "do not have the speed boots" in capsys.readouterr().out


def test_move_to_empty_square(player):
    board = Board(player)
    player.move(board, RIGHT)
    assert player.position == SPAWN + RIGHT


def test_move_waits_for_timer(clock):
    p = Player(clock=clock)
    board = Board(p)
    p.move(board, RIGHT)
    assert p.position == SPAWN


def test_door_needs_key(player, capsys):
    board = Board(player)
    door = Door(SPAWN + RIGHT)
    board.add_entity(door)
    player.move(board, RIGHT)
    assert player.position == SPAWN
    assert "You need the key!" in capsys.readouterr().out
    assert board.entity_at(SPAWN + RIGHT) is door


def test_door_opens_with_key(player, clock):
    board = Board(player)
    board.add_entity(Door(SPAWN + RIGHT))
    player.collect_item(MoveResultItem.KEY)
    player.move(board, RIGHT)
    assert player.position == SPAWN + RIGHT
    assert board.entities == ()
    assert player.points == ITEM_POINTS + DOOR_POINTS


def test_sword_kills_guard(player, clock):
    board = Board(player)
    guard = Guard(SPAWN + RIGHT, Point(0, 1), clock=clock)
    board.add_entity(guard)
    player.collect_item(MoveResultItem.SWORD)
    player.move(board, RIGHT)
    assert guard not in board.entities
    assert player.position == SPAWN + RIGHT
    assert player.points == ITEM_POINTS + GUARD_POINTS


def test_guard_blocks_without_sword(player, clock, capsys):
    board = Board(player)
    board.add_entity(Guard(SPAWN + RIGHT, Point(0, 1), clock=clock))
    player.move(board, RIGHT)
    assert player.position == SPAWN
    assert "without the sword" in capsys.readouterr().out


def test_wall_blocks(player, capsys):
    board = Board(player)
    board.add_entity(Wall(SPAWN + RIGHT))
    player.move(board, RIGHT)
    assert player.position == SPAWN
    assert "Oof!" in capsys.readouterr().out


def test_leaving_left_edge_changes_board(player):
    player.position = Point(0, SPAWN_Y)
    board = Board(player, left=BoardCode.BOARD_ONE)
    player.move(board, Point(-1, 0))
    assert board.current is BoardCode.BOARD_ONE
    assert player.position == Point(ARRAY_LENGTH - 1, SPAWN_Y)


def test_leaving_bottom_edge_changes_board(player):
    player.position = Point(SPAWN_X, ARRAY_LENGTH - 1)
    board = Board(player, down=BoardCode.BOARD_TWO)
    player.move(board, Point(0, 1))
    assert board.current is BoardCode.BOARD_TWO
    assert player.position == Point(SPAWN_X, 0)