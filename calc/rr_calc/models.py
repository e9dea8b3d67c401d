"""
Rival Regions Calculator - Data Models
=======================================
All input and output records for the formula engine.
"""

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ResourceType(Enum):
    STANDARD = "standard"
    GOLD = "gold"
    DIAMOND = "diamond"
    LIQUEFACTION = "liquefaction"
    HE3LAB = "he3lab"


class BuildingType(Enum):
    HOSPITAL = "hospital"
    MILITARY_BASE = "military_base"
    SCHOOL = "school"
    SEA_PORT = "sea_port"
    MISSILE_SYSTEM = "missile_system"
    POWER_PLANT = "power_plant"
    SPACEPORT = "spaceport"
    AIRPORT = "airport"
    REFILL_STATION = "refill_station"


# ---------------------------------------------------------------------------
# Player profile
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PlayerStats:
    level: int = 20
    strength: int = 50
    knowledge: int = 30
    endurance: int = 40
    nation_bonus: float = 0.05   # 0..1 fraction


# ---------------------------------------------------------------------------
# Work / economy
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WorkInputs:
    user_level: float = 20
    resource_koef: float = 80
    factory_level: float = 10
    work_exp: float = 50
    dep_of_res: float = 10       # percent, 0..100
    resource_type: ResourceType = ResourceType.STANDARD

    def __post_init__(self):
        # Accept the plain string form coming from YAML and form inputs
        if not isinstance(self.resource_type, ResourceType):
            object.__setattr__(self, "resource_type", ResourceType(self.resource_type))


@dataclass(frozen=True)
class WorkOutput:
    productivity: float
    withdrawn_points: float


# ---------------------------------------------------------------------------
# Buildings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildingLevels:
    hospital: int = 5
    military_base: int = 6
    school: int = 5
    sea_port: int = 4
    missile_system: int = 6
    power_plant: int = 7
    spaceport: int = 0
    airport: int = 6
    refill_station: int = 0

    def level(self, building: BuildingType) -> int:
        return getattr(self, building.value)


# ---------------------------------------------------------------------------
# War / tax
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WarInputs:
    military_index: float = 10
    missile_system_diff: float = -100   # clamped to [-300, 9999] by the engine
    sea_port: float = 4
    airport: float = 6
    military_academy: float = 5
    troops_alpha: float = 150000
    apply_distance_penalty: bool = True
    distance_penalty_pct: float = 15    # clamped to [0, 100] by the engine
    randomness: bool = True


@dataclass(frozen=True)
class TaxInputs:
    tax_rate: float = 15


# ---------------------------------------------------------------------------
# Dashboard state and results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Profile:
    """Everything the dashboard form holds for one player."""
    name: str = "Default"
    active_region: str = "Ankara"
    citizenship: str = "TR"
    stats: PlayerStats = field(default_factory=PlayerStats)
    work: WorkInputs = field(default_factory=WorkInputs)
    buildings: BuildingLevels = field(default_factory=BuildingLevels)
    war: WarInputs = field(default_factory=WarInputs)
    tax: TaxInputs = field(default_factory=TaxInputs)


@dataclass(frozen=True)
class Report:
    work: WorkOutput
    building_defense: float
    combat_damage: float
    net_income: float
