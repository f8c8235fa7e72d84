"""Game-wide constants: board size, entity limits, timings, damage and scoring."""

from typing import Final

ARRAY_LENGTH: Final = 8

MAX_NUM_BOSSES: Final = 2
MAX_NUM_DOORS: Final = 4
MAX_NUM_GUARDS: Final = 4
MAX_NUM_ITEMS: Final = 2
MAX_NUM_PATROLS: Final = 4
MAX_NUM_SENTRIES: Final = 2
MAX_NUM_WALLS: Final = 36

# Timings, in milliseconds.
PAUSE_DURATION: Final = 250
PLAYER_DELAY: Final = 300
GUARD_DELAY: Final = 150
PATROL_DELAY: Final = 450
BOSS_DELAY: Final = 350

ATTACK_DELAY: Final = 1500
SENTRY_DELAY: Final = 2000

# The player kills enemies outright; enemies only wear the player down.
PLAYER_INITIAL_HEALTH: Final = 20
GUARD_DAMAGE: Final = 4
PATROL_DAMAGE: Final = 2
SENTRY_DAMAGE: Final = 10
BOSS_DAMAGE: Final = 19

GUARD_POINTS: Final = 30
PATROL_POINTS: Final = 50
SENTRY_POINTS: Final = 100
BOSS_POINTS: Final = 200
ITEM_POINTS: Final = 10
BREAKABLE_WALL_POINTS: Final = 5
DOOR_POINTS: Final = 25
TREASURE_POINTS: Final = 1000

HEALTH_POTION_HEALING: Final = 10
SPEED_BOOTS_MULTIPLIER: Final = 2

SPAWN_X: Final = 3
SPAWN_Y: Final = 3