from ledquest.entity import Entity, MoveResult, MoveResultCode, MoveResultItem
from ledquest.point import Point


def test_receive_move_blocks():
    result = Entity().receive_move(Entity())
    assert result == MoveResult(MoveResultCode.NO_MOVE, MoveResultItem.NO_ITEM)


def test_move_result_defaults_to_no_item():
    assert MoveResult(MoveResultCode.NEEDS_KEY).item is MoveResultItem.NO_ITEM


def test_move_leaves_position_unchanged():
    entity = Entity(Point(2, 5))
    entity.move(board=None)
    assert entity.position == Point(2, 5)


def test_attack_leaves_target_unchanged():
    target = Entity(Point(1, 1))
    Entity(Point(0, 1)).attack(target)
    assert target.position == Point(1, 1)


def test_default_position_is_origin():
    assert Entity().position == Point(0, 0)


def test_move_result_equality_by_value():
    a = MoveResult(MoveResultCode.ITEM, MoveResultItem.SWORD)
    b = MoveResult(MoveResultCode.ITEM, MoveResultItem.SWORD)
    assert a == b
    assert a != MoveResult(MoveResultCode.ITEM, MoveResultItem.KEY)