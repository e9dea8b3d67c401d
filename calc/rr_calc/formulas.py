"""
Rival Regions Calculator - Formula Engine
==========================================
Work productivity, building defense, combat damage and net income.

Every function here is pure: records in, numbers out, no shared state.
Out-of-range inputs are only clamped where the game clamps them; anything
else flows through the arithmetic, so NaN and inf reach the caller as-is.
"""

import math

from rr_calc import constants as C
from rr_calc.models import (
    BuildingLevels, PlayerStats, Profile, Report, TaxInputs, WarInputs,
    WorkInputs, WorkOutput,
)


def clamp(n: float, lo: float, hi: float) -> float:
    if math.isnan(n):
        return n
    return max(lo, min(hi, n))


def _pow(base: float, exponent: float) -> float:
    # Negative base with a fractional exponent has no real value: NaN, not complex
    if base < 0:
        return math.nan
    return base ** exponent


# =============================================================================
# WORK / ECONOMY
# =============================================================================

def productivity(work: WorkInputs) -> WorkOutput:
    """
    Calculate productivity of one work session.

    Each of the four inputs follows a power law, so doubling any one of them
    less than doubles the output. Department of resources adds a linear
    percentage bonus, then the resource type scales the result.

    Returns:
        WorkOutput with productivity and the withdrawn points it converts to
    """
    base = (C.PRODUCTIVITY_SCALE
            * _pow(work.user_level, C.LEVEL_EXPONENT)
            * _pow(work.resource_koef / C.RESOURCE_KOEF_DIVISOR, C.RESOURCE_EXPONENT)
            * _pow(work.factory_level, C.FACTORY_EXPONENT)
            * _pow(work.work_exp / C.WORK_EXP_DIVISOR, C.EXPERIENCE_EXPONENT))

    dept_multiplier = 1 + work.dep_of_res / 100
    resource_multiplier = C.RESOURCE_MULTIPLIERS[work.resource_type]

    value = base * dept_multiplier * resource_multiplier
    return WorkOutput(productivity=value, withdrawn_points=value / C.WITHDRAW_DIVISOR)


def net_income(productivity: float, tax: TaxInputs) -> float:
    """Productivity left after the tax rate (clamped to 0-100%) is taken."""
    rate = clamp(tax.tax_rate, C.PERCENT_MIN, C.PERCENT_MAX)
    return productivity * (1 - rate / 100)


# =============================================================================
# BUILDINGS
# =============================================================================

def building_defense(buildings: BuildingLevels) -> float:
    total = sum(weight * buildings.level(b) for b, weight in C.BUILDING_WEIGHTS.items())
    # Airport and refill station give the same cover, so only the better one counts
    total += max(buildings.level(b) for b in C.REFUEL_PAIR)
    return total * C.DEFENSE_PER_LEVEL


# =============================================================================
# WAR
# =============================================================================

def damage_multiplier(stats: PlayerStats, war: WarInputs) -> float:
    """Dimensionless multiplier applied to troops alpha (1.0 = no bonuses)."""
    missile_term = clamp(war.missile_system_diff, C.MISSILE_DIFF_MIN, C.MISSILE_DIFF_MAX) / C.MISSILE_DIVISOR

    return (1
            + war.military_index / C.MILITARY_INDEX_DIVISOR
            + missile_term
            + war.sea_port / C.SEA_PORT_DIVISOR
            + war.airport / C.AIRPORT_DIVISOR
            + war.military_academy / C.MILITARY_ACADEMY_DIVISOR
            + stats.strength / C.STRENGTH_DIVISOR
            + stats.nation_bonus * C.NATION_BONUS_FACTOR
            + (stats.knowledge + stats.endurance + stats.level) / C.SECONDARY_STATS_DIVISOR)


def jitter_fraction(stats: PlayerStats, war: WarInputs) -> float:
    """
    Deterministic pseudo-random fraction in [0, 1].

    Seeded from the player's stats and troops alpha so the same inputs always
    land on the same point of the damage range. The remainder keeps the sign
    of the seed sum (fmod), matching the in-game calculator. A non-finite
    sum has no remainder, so the fraction is NaN.
    """
    seed_sum = stats.level + stats.strength + stats.knowledge + stats.endurance + war.troops_alpha
    if not math.isfinite(seed_sum):
        return math.nan
    seed = math.fmod(seed_sum, C.SEED_MODULUS)
    return (math.sin(seed) + 1) / 2


def combat_damage(stats: PlayerStats, war: WarInputs) -> float:
    """
    Calculate damage dealt by one attack.

    Args:
        stats: Attacker's level, STR/KNW/END and nation bonus.
        war: Region/military modifiers, troops alpha and the two toggles.

    Returns:
        Damage after distance penalty and optional +/-12.5% jitter
    """
    total = damage_multiplier(stats, war) * war.troops_alpha

    if war.apply_distance_penalty:
        pct = clamp(war.distance_penalty_pct, C.PERCENT_MIN, C.PERCENT_MAX)
        total *= 1 - pct / 100

    if war.randomness:
        delta = C.JITTER_SPREAD * total
        low, high = total - delta, total + delta
        total = low + jitter_fraction(stats, war) * (high - low)

    return total


# =============================================================================
# DASHBOARD
# =============================================================================

def evaluate(profile: Profile) -> Report:
    """Run all four formulas for a profile, feeding productivity into income."""
    work_out = productivity(profile.work)
    return Report(
        work=work_out,
        building_defense=building_defense(profile.buildings),
        combat_damage=combat_damage(profile.stats, profile.war),
        net_income=net_income(work_out.productivity, profile.tax),
    )
