"""
Rival Regions Calculator - Output Formatting
=============================================
Pretty-printing for calculator results.
"""

import math

from rr_calc.models import Profile, Report


def fmt_number(val: float) -> str:
    if math.isnan(val) or math.isinf(val):
        return str(val)
    if abs(val) >= 1000:
        return f"{val:,.0f}"
    return f"{val:.2f}"


def fmt_points(val: float) -> str:
    # Withdrawn points are tiny; keep significant digits instead of decimals
    return f"{val:.6g}"


def fmt_flag(val: bool) -> str:
    return "on" if val else "off"


def print_report(profile: Profile, report: Report):
    print()
    print("=" * 60)
    print(f"  RIVAL REGIONS CALCULATOR")
    print(f"  Profile: {profile.name}")
    print(f"  Region:  {profile.active_region} ({profile.citizenship})")
    print("=" * 60)

    print_profile(profile)
    print_work(profile, report)
    print_defense(report)
    print_war(profile, report)
    print_income(profile, report)
    print()


def print_profile(profile: Profile):
    s = profile.stats
    print()
    print("--- PROFILE ---")
    print(f" Level: {s.level}   STR: {s.strength}   KNW: {s.knowledge}   END: {s.endurance}")
    print(f" Nation bonus: {s.nation_bonus:.0%}")


def print_work(profile: Profile, report: Report):
    w = profile.work
    print()
    print("--- WORK ---")
    print(f" {'Resource':<20} {w.resource_type.value}")
    print(f" {'Factory level':<20} {w.factory_level}")
    print(f" {'Dept. of resources':<20} {w.dep_of_res}%")
    print(f" {'Productivity':<20} {fmt_number(report.work.productivity)}")
    print(f" {'Withdrawn points':<20} {fmt_points(report.work.withdrawn_points)}")


def print_defense(report: Report):
    print()
    print("--- BUILDINGS ---")
    print(f" {'Initial defense':<20} {fmt_number(report.building_defense)}")


def print_war(profile: Profile, report: Report):
    war = profile.war
    penalty = f"{war.distance_penalty_pct}%" if war.apply_distance_penalty else "off"
    print()
    print("--- WAR ---")
    print(f" {'Troops alpha':<20} {fmt_number(war.troops_alpha)}")
    print(f" {'Distance penalty':<20} {penalty}")
    print(f" {'Randomness':<20} {fmt_flag(war.randomness)}")
    print(f" {'Damage':<20} {fmt_number(report.combat_damage)}")


def print_income(profile: Profile, report: Report):
    print()
    print("--- INCOME ---")
    print(f" {'Tax rate':<20} {profile.tax.tax_rate}%")
    print(f" {'Net income':<20} {fmt_number(report.net_income)}")
