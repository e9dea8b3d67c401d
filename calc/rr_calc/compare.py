"""
Rival Regions Calculator - Comparison
======================================
Side-by-side profile comparison.
"""

import math
from typing import List

from rr_calc.formulas import evaluate
from rr_calc.format import fmt_number, fmt_points
from rr_calc.models import Profile

# (label, metric, formatter)
METRICS = [
    ("Productivity", lambda r: r.work.productivity, fmt_number),
    ("Withdrawn pts", lambda r: r.work.withdrawn_points, fmt_points),
    ("Defense", lambda r: r.building_defense, fmt_number),
    ("Damage", lambda r: r.combat_damage, fmt_number),
    ("Net income", lambda r: r.net_income, fmt_number),
]


def compare_and_print(profiles: List[Profile]):
    if not profiles:
        return

    reports = [evaluate(p) for p in profiles]
    names = [p.name for p in profiles]
    col_w = max(20, max(len(n) for n in names) + 2)

    print()
    print("=" * (16 + col_w * len(profiles)))
    print("  PROFILE COMPARISON")
    print("=" * (16 + col_w * len(profiles)))

    # Header
    print(f"{'':>16}", end="")
    for name in names:
        print(f"{name:>{col_w}}", end="")
    print()
    print(f"{'':>16}", end="")
    for _ in names:
        print(f"{'=' * (col_w - 2):>{col_w}}", end="")
    print()

    print(f" {'Region':<15}", end="")
    for p in profiles:
        print(f"{p.active_region:>{col_w}}", end="")
    print()

    for label, metric, fmt in METRICS:
        print(f" {label:<15}", end="")
        for r in reports:
            print(f"{fmt(metric(r)):>{col_w}}", end="")
        print()

    print(f"\nWINNER BY CATEGORY")
    for label, metric, fmt in METRICS:
        _print_winner(label, reports, names, metric, fmt)
    print()


def best_index(values: List[float]) -> int:
    """Index of the highest value, ignoring NaN; -1 if every value is NaN."""
    candidates = [i for i, v in enumerate(values) if not math.isnan(v)]
    if not candidates:
        return -1
    return max(candidates, key=lambda i: values[i])


def _print_winner(label, reports, names, metric_fn, fmt_fn):
    vals = [metric_fn(r) for r in reports]
    idx = best_index(vals)
    if idx < 0:
        return
    print(f" {label:<20} {names[idx]} ({fmt_fn(vals[idx])})")
