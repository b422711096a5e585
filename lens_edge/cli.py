import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from .catalog import FrameCatalog, demo_catalog
from .config import settings
from .constants import ALLOWANCE_RANGE, DESIGNS, MANUFACTURERS, SAFETY_MARGIN_RANGE
from .data import CT_DB
from .export import ReportHeader, display_table, export_ranking_csv
from .geometry import Prescription
from .logging_conf import configure_logging
from .materials import MATERIALS, get_material
from .ranking import EstimateInputs, compare_materials, recompute
from .utils import fmt_mm

logger = logging.getLogger(__name__)

def _read_text(parser, path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"Could not read {path}: {e}")

def _estimate_args() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    g = p.add_argument_group("prescription")
    g.add_argument("--sph-r", type=float, default=-8.0, help="Right sphere (D)")
    g.add_argument("--cyl-r", type=float, default=-1.5, help="Right cylinder (D)")
    g.add_argument("--pd-r", type=float, default=31.0, help="Right monocular PD (mm)")
    g.add_argument("--sph-l", type=float, default=-7.5, help="Left sphere (D)")
    g.add_argument("--cyl-l", type=float, default=-1.0, help="Left cylinder (D)")
    g.add_argument("--pd-l", type=float, default=31.0, help="Left monocular PD (mm)")
    g = p.add_argument_group("lens")
    g.add_argument("--maker", choices=MANUFACTURERS, default=settings.manufacturer)
    g.add_argument("--design", choices=DESIGNS, default=settings.design)
    g.add_argument("--material-r", choices=[m.key for m in MATERIALS], default=settings.material)
    g.add_argument("--material-l", choices=[m.key for m in MATERIALS], default=settings.material)
    g.add_argument("--margin", type=float, default=settings.safety_margin, help="Safety margin added to base CT (mm)")
    g.add_argument("--allowance", type=float, default=settings.allowance, help="Finishing allowance (mm)")
    return p

def _inputs(parser, args) -> EstimateInputs:
    if args.pd_r <= 0 or args.pd_l <= 0:
        parser.error("Monocular PD must be > 0 mm")
    lo, hi = SAFETY_MARGIN_RANGE
    if not lo <= args.margin <= hi:
        parser.error(f"Safety margin must be between {lo:.1f} and {hi:.1f} mm")
    lo, hi = ALLOWANCE_RANGE
    if not lo <= args.allowance <= hi:
        parser.error(f"Finishing allowance must be between {lo:.1f} and {hi:.1f} mm")
    return EstimateInputs(
        right=Prescription(args.sph_r, args.cyl_r, args.pd_r),
        left=Prescription(args.sph_l, args.cyl_l, args.pd_l),
        material_right=get_material(args.material_r),
        material_left=get_material(args.material_l),
        manufacturer=args.maker, design=args.design,
        safety_margin=args.margin, allowance=args.allowance,
        stock_only=getattr(args, "stock_only", False),
    )

def _cmd_import(parser, args):
    for path in args.files:
        result = FrameCatalog().import_text(_read_text(parser, path))
        print(f"[{path}]")
        print(result.summary())

def _cmd_rank(parser, args):
    catalog = demo_catalog() if (args.demo or not args.catalog) else FrameCatalog()
    for path in args.catalog or []:
        result = catalog.import_text(_read_text(parser, path))
        print(result.summary(), file=sys.stderr)
    inputs = _inputs(parser, args)
    ct_r, ct_l = inputs.min_center_thickness()
    rows = recompute(catalog, inputs)
    header = ReportHeader(args.maker, args.design, args.margin, store_name=args.store_name)
    print("\n".join(header.lines()))
    print(f"CT(R) = {fmt_mm(ct_r)} / CT(L) = {fmt_mm(ct_l)}")
    if not rows:
        print("No frames to rank.")
    else:
        with pd.option_context("display.max_rows", None, "display.width", 200):
            print(display_table(rows).to_string(index=False))
    if args.export:
        Path(args.export).write_bytes(export_ranking_csv(rows, header))
        logger.info("Wrote %d rows to %s", len(rows), args.export)

def _cmd_compare(parser, args):
    df = compare_materials(_inputs(parser, args))
    for col in ("ct", "edge_r", "edge_l", "worst"):
        df[col] = df[col].map(fmt_mm)
    print(df.to_string(index=False))

def _cmd_materials(parser, args):
    print(pd.DataFrame([{"key": m.key, "name": m.display_name, "index": m.refractive_index} for m in MATERIALS]).to_string(index=False))
    print()
    print(CT_DB.pivot_table(index=["manufacturer", "design"], columns="material", values="base_ct").to_string())

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lens-edge",
        description="Estimate lens edge thickness per frame and rank frames thinnest first."
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="cmd")
    p = sub.add_parser("import", help="Parse catalog files and print the import summary")
    p.add_argument("files", nargs="+")
    p = sub.add_parser("rank", parents=[_estimate_args()], help="Rank frames by worst-eye edge thickness")
    p.add_argument("--catalog", action="append", help="CSV/TSV frame catalog (repeatable)")
    p.add_argument("--demo", action="store_true", help="Include the demonstration frames")
    p.add_argument("--stock-only", action="store_true", help="Only frames with stock > 0")
    p.add_argument("--store-name", default=settings.store_name)
    p.add_argument("--export", help="Write the ranking as CSV to this path")
    sub.add_parser("compare", parents=[_estimate_args()], help="Compare materials on a representative frame")
    sub.add_parser("materials", help="List materials and the center thickness table")
    return parser

COMMANDS = {"import": _cmd_import, "rank": _cmd_rank, "compare": _cmd_compare, "materials": _cmd_materials}

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if args.cmd is None:
        parser.print_help()
        return 0
    COMMANDS[args.cmd](parser, args)
    return 0

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
