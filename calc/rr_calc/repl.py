"""
Rival Regions Calculator - Interactive REPL
============================================
"""

import cmd
from dataclasses import fields, replace
from typing import Optional

from rr_calc.formulas import evaluate
from rr_calc.format import print_report
from rr_calc.io import SECTIONS, export_report_json, load_profile, save_profile
from rr_calc.models import Profile, ResourceType
from rr_calc.regions import REGIONS, select_region

TRUE_WORDS = ("true", "1", "yes", "on")
FALSE_WORDS = ("false", "0", "no", "off")


def parse_value(field_type, raw: str):
    """Coerce a typed-in string to a record field's type."""
    if field_type is bool:
        word = raw.lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise ValueError(f"Expected true/false, got: {raw}")
    if field_type is int:
        return int(raw)
    if field_type is float:
        return float(raw)
    return field_type(raw)


def set_field(profile: Profile, section: str, name: str, raw: str) -> Profile:
    """Return a copy of the profile with one section field replaced."""
    if section not in SECTIONS:
        raise ValueError(f"Unknown section: {section}. Use: {', '.join(SECTIONS)}")
    record = getattr(profile, section)
    types = {f.name: f.type for f in fields(record)}
    if name not in types:
        raise ValueError(f"Unknown field: {section}.{name}")
    record = replace(record, **{name: parse_value(types[name], raw)})
    return replace(profile, **{section: record})


class CalculatorREPL(cmd.Cmd):
    intro = (
        "\n"
        "================================================\n"
        "  Rival Regions Calculator - Interactive Mode\n"
        "================================================\n"
        "Type 'help' for commands. Type 'show' for the current profile.\n"
    )
    prompt = "rr> "

    def __init__(self, profile: Optional[Profile] = None):
        super().__init__()
        self.profile = profile or Profile()
        self.undo_stack = []
        self.redo_stack = []

    def _update(self, profile: Profile):
        # Records are immutable, so the stacks can hold them directly
        self.undo_stack.append(self.profile)
        self.redo_stack.clear()
        self.profile = profile

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def do_load(self, arg):
        """Load profile from YAML: load <filepath>"""
        if not arg:
            print("Usage: load <filepath>")
            return
        try:
            self._update(load_profile(arg.strip()))
            print(f"Loaded: {self.profile.name}")
        except Exception as e:
            print(f"Error: {e}")

    def do_save(self, arg):
        """Save profile to YAML: save <filepath>"""
        if not arg:
            print("Usage: save <filepath>")
            return
        try:
            save_profile(self.profile, arg.strip())
            print(f"Saved to {arg.strip()}")
        except Exception as e:
            print(f"Error: {e}")

    def do_export(self, arg):
        """Export inputs and results as JSON: export <filepath>"""
        if not arg:
            print("Usage: export <filepath>")
            return
        try:
            export_report_json(self.profile, evaluate(self.profile), arg.strip())
            print(f"Exported JSON to {arg.strip()}")
        except Exception as e:
            print(f"Error: {e}")

    def do_name(self, arg):
        """Set profile name: name <text>"""
        if arg:
            self._update(replace(self.profile, name=arg.strip()))
            print(f"Name: {self.profile.name}")

    def do_show(self, arg):
        """Show current inputs"""
        print(f"\nProfile: {self.profile.name}")
        print(f"Region: {self.profile.active_region}  Citizenship: {self.profile.citizenship}")
        for section in SECTIONS:
            record = getattr(self.profile, section)
            print(f"\n[{section}]")
            for f in fields(record):
                val = getattr(record, f.name)
                if isinstance(val, ResourceType):
                    val = val.value
                print(f"  {f.name:<24} {val}")
        print()

    def do_calc(self, arg):
        """Calculate all outputs for the current profile"""
        print_report(self.profile, evaluate(self.profile))

    def do_set(self, arg):
        """Set an input: set <section> <field> <value>
        Sections: stats, work, buildings, war, tax"""
        parts = arg.split()
        if len(parts) < 3:
            print("Usage: set <section> <field> <value>")
            return
        section, name, value = parts[0], parts[1], parts[2]
        try:
            self._update(set_field(self.profile, section, name, value))
        except ValueError as e:
            print(f"Error: {e}")
            return
        print(f"Set {section}.{name} = {value}")

    def do_resource(self, arg):
        """Set resource type: resource standard|gold|diamond|liquefaction|he3lab"""
        choices = "|".join(r.value for r in ResourceType)
        if not arg:
            print(f"Usage: resource {choices}")
            return
        try:
            self._update(set_field(self.profile, "work", "resource_type", arg.strip().lower()))
        except ValueError:
            print(f"Unknown resource: {arg.strip()}. Use: {choices}")
            return
        print(f"Resource: {self.profile.work.resource_type.value}")

    def do_region(self, arg):
        """Select active region: region <name>"""
        if not arg:
            print(f"Active region: {self.profile.active_region}")
            return
        try:
            self._update(select_region(self.profile, arg))
        except ValueError as e:
            print(f"Error: {e}")
            return
        print(f"Region: {self.profile.active_region}")

    def do_regions(self, arg):
        """List regions on the map"""
        for region in REGIONS:
            marker = "*" if region == self.profile.active_region else " "
            print(f" {marker} {region}")

    def do_citizenship(self, arg):
        """Set citizenship: citizenship <code>"""
        if arg:
            self._update(replace(self.profile, citizenship=arg.strip()))
        print(f"Citizenship: {self.profile.citizenship}")

    def do_reset(self, arg):
        """Reset every input to the defaults"""
        self._update(Profile())
        print("Reset to defaults.")

    def do_undo(self, arg):
        """Undo last change"""
        if self.undo_stack:
            self.redo_stack.append(self.profile)
            self.profile = self.undo_stack.pop()
            print("Undone.")
        else:
            print("Nothing to undo.")

    def do_redo(self, arg):
        """Redo last undone change"""
        if self.redo_stack:
            self.undo_stack.append(self.profile)
            self.profile = self.redo_stack.pop()
            print("Redone.")
        else:
            print("Nothing to redo.")

    def do_quit(self, arg):
        """Exit the REPL"""
        print("Bye!")
        return True

    do_exit = do_quit
    do_q = do_quit
