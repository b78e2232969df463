"""
Command-line comparison: same inputs as the web form, text output.

    co2-compare --ice-weight 1750 --bev-weight 1900 \
        --distances 0,20000,40000,60000,100000 --alpha-fuel 2.7 \
        --csv out.csv --chart out.png

Exit status: 0 on success, 2 on invalid input (argparse convention).

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import argparse
import json
import logging
import sys

from emissions.calculator import calculate
from emissions.chart import render_png
from emissions.errors import EmissionsError
from emissions.export import format_distance, format_fixed, write_csv
from emissions.parsing import FORM_FIELDS, parse_inputs
from emissions.report import summary

log = logging.getLogger(__name__)

DEFAULT_DISTANCES = "0,20000,40000,60000,100000"


def build_parser():
    ap = argparse.ArgumentParser(
        description="Compare cumulative lifecycle CO2 of an ICE and a BEV."
    )
    for name in FORM_FIELDS:
        kwargs = {"dest": name.replace("-", "_"), "default": None}
        if name == "distances":
            kwargs["default"] = DEFAULT_DISTANCES
            kwargs["help"] = "Comma-separated distances in km"
        elif name in ("ice-weight", "bev-weight"):
            kwargs["required"] = True
            kwargs["help"] = "Curb weight in kg"
        else:
            kwargs["help"] = "Leave out to use the default or estimate"
        ap.add_argument("--" + name, **kwargs)
    ap.add_argument("--csv", metavar="PATH", help="Write the table as CSV")
    ap.add_argument("--chart", metavar="PATH", help="Write the chart as PNG")
    ap.add_argument("--json", action="store_true",
                    help="Print the full result as JSON")
    ap.add_argument("--log-level", default="WARNING",
                    help="Logging level (default WARNING)")
    return ap


def format_table(result):
    """Plain-text table of the cumulative series."""
    header = "{:>12} {:>12} {:>12} {:>12} {:>9} {:>9} {:>12}".format(
        "distance", "E_ICE", "E_BEV", "delta", "k_ICE", "k_BEV", "PE_BEV")
    lines = [header]
    for row in result.series:
        lines.append("{:>12} {:>12} {:>12} {:>12} {:>9} {:>9} {:>12}".format(
            format_distance(row.distance),
            format_fixed(row.e_ice, 0),
            format_fixed(row.e_bev, 0),
            format_fixed(row.delta, 0),
            format_fixed(row.k_ice, 3),
            format_fixed(row.k_bev, 3),
            format_fixed(row.primary_energy_bev, 0),
        ))
    return "\n".join(lines)


def main(argv=None, out=None):
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    fields = {name: getattr(args, name.replace("-", "_")) for name in FORM_FIELDS}
    try:
        result = calculate(parse_inputs(fields))
    except EmissionsError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    info = summary(result)
    if args.json:
        payload = result.to_dict()
        payload.update(info)
        print(json.dumps(payload, indent=2), file=out)
    else:
        print("k_ICE: {:.3f} kgCO2e/km".format(result.k_ice), file=out)
        print("k_BEV: {:.3f} kgCO2e/km".format(result.k_bev), file=out)
        print("Manufacturing gap: {:.0f} kgCO2e".format(result.delta_manuf), file=out)
        print(info["break_even_message"], file=out)
        for line in info["derived_lines"]:
            print("  " + line, file=out)
        print(file=out)
        print(format_table(result), file=out)

    if args.csv:
        with open(args.csv, "w", newline="", encoding="utf-8") as f:
            write_csv(result.series, f)
        log.info("Wrote %s", args.csv)
    if args.chart:
        with open(args.chart, "wb") as f:
            f.write(render_png(result))
        log.info("Wrote %s", args.chart)
    return 0


if __name__ == "__main__":
    sys.exit(main())
