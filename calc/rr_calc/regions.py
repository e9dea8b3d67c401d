"""
Rival Regions Calculator - World Map
=====================================
The fixed set of regions offered by the map picker. No geodata; a region
is only a label carried on the profile.
"""

import unicodedata
from dataclasses import replace
from typing import Optional

from rr_calc.models import Profile

REGIONS = ("Ankara", "İstanbul", "Berlin", "Paris", "Tokyo", "New York")

DEFAULT_REGION = "Ankara"
DEFAULT_CITIZENSHIP = "TR"


def _fold(name: str) -> str:
    # Strip diacritics so "istanbul" typed on an ASCII keyboard matches "İstanbul"
    decomposed = unicodedata.normalize("NFKD", name.strip())
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def find_region(name: str) -> Optional[str]:
    """Return the canonical spelling of a region, or None if it isn't on the map."""
    wanted = _fold(name)
    for region in REGIONS:
        if _fold(region) == wanted:
            return region
    return None


def select_region(profile: Profile, name: str) -> Profile:
    region = find_region(name)
    if region is None:
        raise ValueError(f"Unknown region: {name}. Choose from: {', '.join(REGIONS)}")
    return replace(profile, active_region=region)
