"""
Rival Regions Calculator - CLI Entry Point
===========================================
Usage:
    python cli.py calc <file> [--region Berlin] [--tax 10] [--no-random] [--export-json out.json]
    python cli.py compare <file1> <file2> [...]
    python cli.py interactive
    python cli.py init [--output data/profiles/default.yaml]
    python cli.py regions
    python cli.py web [--port 8080]
"""

import argparse
from dataclasses import replace
from pathlib import Path

from rr_calc.compare import compare_and_print
from rr_calc.format import print_report
from rr_calc.formulas import evaluate
from rr_calc.io import load_profile, save_profile
from rr_calc.models import Profile, TaxInputs
from rr_calc.regions import REGIONS, select_region

DEFAULT_PROFILE_PATH = Path(__file__).parent / "data" / "profiles" / "default.yaml"


def cmd_calc(args):
    profile = load_profile(args.file)
    print(f"[profile] {profile.name} ({args.file})")

    # CLI overrides replace single fields of the loaded profile
    if args.region:
        profile = select_region(profile, args.region)
        print(f"[region] {profile.active_region}")
    if args.tax is not None:
        profile = replace(profile, tax=TaxInputs(tax_rate=args.tax))
        print(f"[tax] {args.tax}%")
    if args.no_random:
        profile = replace(profile, war=replace(profile.war, randomness=False))
        print("[war] Randomness disabled")

    report = evaluate(profile)
    print_report(profile, report)

    if args.export_json:
        from rr_calc.io import export_report_json
        export_report_json(profile, report, args.export_json)
        print(f"\nExported JSON to {args.export_json}")


def cmd_compare(args):
    profiles = []
    for f in args.files:
        try:
            profiles.append(load_profile(f))
        except Exception as e:
            print(f"Error loading {f}: {e}")
    if profiles:
        compare_and_print(profiles)


def cmd_interactive(args):
    from rr_calc.repl import CalculatorREPL
    profile = load_profile(args.file) if args.file else None
    repl = CalculatorREPL(profile)
    repl.cmdloop()


def cmd_init(args):
    output_path = Path(args.output) if args.output else DEFAULT_PROFILE_PATH
    if output_path.exists() and not args.force:
        print(f"{output_path} already exists (use --force to overwrite)")
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    save_profile(Profile(), str(output_path))
    print(f"Saved default profile to {output_path}")


def cmd_regions(args):
    print(f"Available regions: {len(REGIONS)}")
    for region in REGIONS:
        print(f"  {region}")


def main():
    parser = argparse.ArgumentParser(
        description="Rival Regions Calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", help="Command to run")

    # calc
    p_calc = sub.add_parser("calc", aliases=["c"],
                            help="Calculate all outputs for a profile YAML")
    p_calc.add_argument("file", help="Path to profile YAML file")
    p_calc.add_argument("--region", "-r", default=None,
                        help="Override active region")
    p_calc.add_argument("--tax", "-t", type=float, default=None,
                        help="Override tax rate in percent")
    p_calc.add_argument("--no-random", action="store_true",
                        help="Disable the +/-12.5%% damage jitter")
    p_calc.add_argument("--export-json", default=None,
                        help="Export inputs and results as JSON")

    # compare
    p_cmp = sub.add_parser("compare", aliases=["cmp"],
                           help="Compare multiple profiles")
    p_cmp.add_argument("files", nargs="+", help="Profile YAML files")

    # interactive
    p_int = sub.add_parser("interactive", aliases=["repl", "i"],
                           help="Interactive REPL mode")
    p_int.add_argument("file", nargs="?", default=None,
                       help="Profile YAML to start from (default: built-in defaults)")

    # init
    p_init = sub.add_parser("init", help="Write the default profile to YAML")
    p_init.add_argument("--output", "-o", default=None,
                        help=f"Output path (default: {DEFAULT_PROFILE_PATH.name} in data/profiles)")
    p_init.add_argument("--force", "-f", action="store_true",
                        help="Overwrite an existing file")

    # regions
    sub.add_parser("regions", help="List regions on the map")

    # web
    p_web = sub.add_parser("web", aliases=["serve"],
                           help="Start the web frontend")
    p_web.add_argument("--port", type=int, default=8080,
                       help="Port to serve on (default: 8080)")

    args = parser.parse_args()

    if args.command in ("calc", "c"):
        cmd_calc(args)
    elif args.command in ("compare", "cmp"):
        cmd_compare(args)
    elif args.command in ("interactive", "repl", "i"):
        cmd_interactive(args)
    elif args.command == "init":
        cmd_init(args)
    elif args.command == "regions":
        cmd_regions(args)
    elif args.command in ("web", "serve"):
        from rr_calc.web import start_server
        start_server(port=args.port)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
