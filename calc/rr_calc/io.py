"""
Rival Regions Calculator - I/O
===============================
Load and save calculator profiles from YAML files.
"""

import json
import yaml
from dataclasses import asdict
from pathlib import Path
from rr_calc.models import (
    BuildingLevels, PlayerStats, Profile, Report, TaxInputs, WarInputs, WorkInputs,
)
from rr_calc.regions import find_region

# YAML section -> record type
SECTIONS = {
    "stats": PlayerStats,
    "work": WorkInputs,
    "buildings": BuildingLevels,
    "war": WarInputs,
    "tax": TaxInputs,
}


def profile_from_dict(data: dict, default_name: str = "Default") -> Profile:
    """Build a Profile from plain dict data; missing keys keep their defaults.

    Raises ValueError for a non-mapping document or section, and for a region
    that is not on the map.
    """
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a mapping, got {type(data).__name__}")
    sections = {}
    for key, cls in SECTIONS.items():
        section = data.get(key) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Section '{key}' must be a mapping, got {type(section).__name__}")
        sections[key] = cls(**{k: section[k] for k in section if k in cls.__dataclass_fields__})

    defaults = Profile()
    region_name = str(data.get("active_region", defaults.active_region))
    region = find_region(region_name)
    if region is None:
        raise ValueError(f"Unknown region: {region_name}")
    return Profile(
        name=data.get("name", default_name),
        active_region=region,
        citizenship=data.get("citizenship", defaults.citizenship),
        **sections,
    )


def profile_to_dict(profile: Profile) -> dict:
    data = {
        "name": profile.name,
        "active_region": profile.active_region,
        "citizenship": profile.citizenship,
    }
    for key in SECTIONS:
        data[key] = asdict(getattr(profile, key))
    data["work"]["resource_type"] = profile.work.resource_type.value
    return data


def report_to_dict(report: Report) -> dict:
    return {
        "productivity": report.work.productivity,
        "withdrawn_points": report.work.withdrawn_points,
        "building_defense": report.building_defense,
        "combat_damage": report.combat_damage,
        "net_income": report.net_income,
    }


def load_profile(filepath: str) -> Profile:
    with open(filepath, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return profile_from_dict(data, default_name=Path(filepath).stem)


def save_profile(profile: Profile, filepath: str):
    with open(filepath, "w", encoding="utf-8") as f:
        yaml.dump(profile_to_dict(profile), f, default_flow_style=False,
                  sort_keys=False, allow_unicode=True)


def export_report_json(profile: Profile, report: Report, filepath: str):
    """Export inputs and computed outputs as JSON for other tools."""
    data = {
        "profile": profile_to_dict(profile),
        "results": report_to_dict(report),
    }
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
