"""
Rival Regions Calculator - Balance Constants
=============================================
Central registry of all game-balance coefficients used by the formulas.
Changing any of these changes calculator output, so tests pin every value.
"""

from rr_calc.models import BuildingType, ResourceType

# ---------------------------------------------------------------------------
# Work productivity
# ---------------------------------------------------------------------------
# base = 0.2 * lvl^0.8 * (koef/10)^0.8 * factory^0.8 * (exp/10)^0.6

PRODUCTIVITY_SCALE = 0.2
LEVEL_EXPONENT = 0.8
RESOURCE_EXPONENT = 0.8
FACTORY_EXPONENT = 0.8
EXPERIENCE_EXPONENT = 0.6
RESOURCE_KOEF_DIVISOR = 10
WORK_EXP_DIVISOR = 10

RESOURCE_MULTIPLIERS = {
    ResourceType.STANDARD:     1,
    ResourceType.GOLD:         4,
    ResourceType.DIAMOND:      1 / 1000,
    ResourceType.LIQUEFACTION: 1 / 5,
    ResourceType.HE3LAB:       1 / 1000,
}

# Productivity -> withdrawn points conversion
WITHDRAW_DIVISOR = 40_000_000

# ---------------------------------------------------------------------------
# Building defense
# ---------------------------------------------------------------------------
# Airport and refill station are not in the table: only the higher of the
# two counts, once.

DEFENSE_PER_LEVEL = 50_000

BUILDING_WEIGHTS = {
    BuildingType.HOSPITAL:       1,
    BuildingType.MILITARY_BASE:  2,
    BuildingType.SCHOOL:         1,
    BuildingType.SEA_PORT:       1,
    BuildingType.MISSILE_SYSTEM: 1,
    BuildingType.POWER_PLANT:    1,
    BuildingType.SPACEPORT:      1,
}

REFUEL_PAIR = (BuildingType.AIRPORT, BuildingType.REFILL_STATION)

# ---------------------------------------------------------------------------
# Combat damage
# ---------------------------------------------------------------------------

MISSILE_DIFF_MIN = -300
MISSILE_DIFF_MAX = 9999
MISSILE_DIVISOR = 400

MILITARY_INDEX_DIVISOR = 20
SEA_PORT_DIVISOR = 400
AIRPORT_DIVISOR = 400
MILITARY_ACADEMY_DIVISOR = 177.7
STRENGTH_DIVISOR = 100
NATION_BONUS_FACTOR = 3
SECONDARY_STATS_DIVISOR = 200   # knowledge + endurance + level

# Pseudo-random spread: +/- 12.5% around the pre-jitter total
JITTER_SPREAD = 0.125
SEED_MODULUS = 1_000_000

# ---------------------------------------------------------------------------
# Shared percentage clamp (distance penalty, tax rate)
# ---------------------------------------------------------------------------

PERCENT_MIN = 0
PERCENT_MAX = 100
