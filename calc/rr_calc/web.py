"""
Rival Regions Calculator - Web Frontend
========================================
FastAPI server serving the formula API + static files.

Usage:
    python -m rr_calc.web
    python cli.py web [--port 8080]
"""

import math
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from pydantic import BaseModel
import uvicorn
import yaml

from rr_calc.formulas import building_defense, combat_damage, evaluate, net_income, productivity
from rr_calc.io import load_profile, profile_to_dict, report_to_dict, save_profile
from rr_calc.models import (
    BuildingLevels, PlayerStats, Profile, ResourceType, TaxInputs, WarInputs, WorkInputs,
)
from rr_calc.regions import DEFAULT_CITIZENSHIP, DEFAULT_REGION, REGIONS, find_region

# Paths
STATIC_DIR = Path(__file__).parent / "static"
DATA_DIR = Path(__file__).parent.parent / "data"
PROFILES_DIR = DATA_DIR / "profiles"

app = FastAPI(title="Rival Regions Calculator")


# ---------------------------------------------------------------------------
# Pydantic models for request/response
# ---------------------------------------------------------------------------

class StatsIn(BaseModel):
    level: int = 20
    strength: int = 50
    knowledge: int = 30
    endurance: int = 40
    nation_bonus: float = 0.05


class WorkIn(BaseModel):
    user_level: float = 20
    resource_koef: float = 80
    factory_level: float = 10
    work_exp: float = 50
    dep_of_res: float = 10
    resource_type: ResourceType = ResourceType.STANDARD


class BuildingsIn(BaseModel):
    hospital: int = 5
    military_base: int = 6
    school: int = 5
    sea_port: int = 4
    missile_system: int = 6
    power_plant: int = 7
    spaceport: int = 0
    airport: int = 6
    refill_station: int = 0


class WarIn(BaseModel):
    military_index: float = 10
    missile_system_diff: float = -100
    sea_port: float = 4
    airport: float = 6
    military_academy: float = 5
    troops_alpha: float = 150000
    apply_distance_penalty: bool = True
    distance_penalty_pct: float = 15
    randomness: bool = True


class TaxIn(BaseModel):
    tax_rate: float = 15


class CombatRequest(BaseModel):
    stats: StatsIn = StatsIn()
    war: WarIn = WarIn()


class NetIncomeRequest(BaseModel):
    productivity: float
    tax: TaxIn = TaxIn()


class ProfileIn(BaseModel):
    name: str = "Default"
    active_region: str = DEFAULT_REGION
    citizenship: str = DEFAULT_CITIZENSHIP
    stats: StatsIn = StatsIn()
    work: WorkIn = WorkIn()
    buildings: BuildingsIn = BuildingsIn()
    war: WarIn = WarIn()
    tax: TaxIn = TaxIn()


class SaveRequest(BaseModel):
    profile: ProfileIn
    filename: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _profile_from_input(p_in: ProfileIn) -> Profile:
    """Convert Pydantic model to internal Profile."""
    region = find_region(p_in.active_region)
    if region is None:
        raise HTTPException(400, f"Unknown region: {p_in.active_region}")
    return Profile(
        name=p_in.name,
        active_region=region,
        citizenship=p_in.citizenship,
        stats=PlayerStats(**p_in.stats.model_dump()),
        work=WorkInputs(**p_in.work.model_dump()),
        buildings=BuildingLevels(**p_in.buildings.model_dump()),
        war=WarInputs(**p_in.war.model_dump()),
        tax=TaxInputs(**p_in.tax.model_dump()),
    )


def _json_number(val: float):
    # JSON has no NaN/inf; out-of-range inputs surface as null
    return val if math.isfinite(val) else None


def _json_safe(data):
    """Replace non-finite floats anywhere in a nested dict with null."""
    if isinstance(data, dict):
        return {k: _json_safe(v) for k, v in data.items()}
    if isinstance(data, float):
        return _json_number(data)
    return data


def _calculation(profile: Profile) -> dict:
    return _json_safe({
        "profile": profile_to_dict(profile),
        "results": report_to_dict(evaluate(profile)),
    })


# ---------------------------------------------------------------------------
# Formula endpoints
# ---------------------------------------------------------------------------

@app.post("/api/productivity")
def api_productivity(req: WorkIn):
    out = productivity(WorkInputs(**req.model_dump()))
    return {
        "productivity": _json_number(out.productivity),
        "withdrawn_points": _json_number(out.withdrawn_points),
    }


@app.post("/api/building-defense")
def api_building_defense(req: BuildingsIn):
    return {"building_defense": _json_number(building_defense(BuildingLevels(**req.model_dump())))}


@app.post("/api/combat-damage")
def api_combat_damage(req: CombatRequest):
    stats = PlayerStats(**req.stats.model_dump())
    war = WarInputs(**req.war.model_dump())
    return {"combat_damage": _json_number(combat_damage(stats, war))}


@app.post("/api/net-income")
def api_net_income(req: NetIncomeRequest):
    return {"net_income": _json_number(net_income(req.productivity, TaxInputs(**req.tax.model_dump())))}


@app.post("/api/calculate")
def api_calculate(req: ProfileIn):
    """Run all four formulas for a full profile."""
    return _calculation(_profile_from_input(req))


# ---------------------------------------------------------------------------
# Profiles & map
# ---------------------------------------------------------------------------

@app.get("/api/defaults")
def api_defaults():
    return profile_to_dict(Profile())


@app.get("/api/regions")
def api_regions():
    return {"regions": list(REGIONS), "default": DEFAULT_REGION}


@app.get("/api/profiles")
def api_profiles():
    """List saved YAML files."""
    files = []
    if PROFILES_DIR.exists():
        for f in sorted(PROFILES_DIR.glob("*.yaml")):
            files.append({"filename": f.name, "stem": f.stem})
    return {"profiles": files}


@app.get("/api/profiles/{filename}")
def api_profile_detail(filename: str):
    """Load a saved profile and calculate it."""
    filepath = PROFILES_DIR / filename
    if not filepath.exists():
        raise HTTPException(404, f"Profile not found: {filename}")
    try:
        profile = load_profile(str(filepath))
    except (ValueError, yaml.YAMLError) as e:
        raise HTTPException(400, f"Invalid profile {filename}: {e}")
    return _calculation(profile)


@app.post("/api/save")
def api_save(req: SaveRequest):
    """Save profile to YAML."""
    profile = _profile_from_input(req.profile)
    filename = Path(req.filename).name
    if not filename.endswith(".yaml"):
        filename += ".yaml"
    PROFILES_DIR.mkdir(parents=True, exist_ok=True)
    save_profile(profile, str(PROFILES_DIR / filename))
    return {"saved": filename}


# ---------------------------------------------------------------------------
# Static files & SPA fallback
# ---------------------------------------------------------------------------

@app.get("/")
def index():
    return FileResponse(STATIC_DIR / "index.html")


# Mount static after routes so API routes take priority
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def start_server(port: int = 8080):
    """Start the uvicorn server."""
    print(f"Starting Rival Regions Calculator at http://localhost:{port}")
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="info")


if __name__ == "__main__":
    start_server()
