#!/usr/bin/env python3
"""Generate all reference-game diagrams and the markdown report."""

import argparse
import os

import matplotlib

matplotlib.use("Agg")

from refgames.figures import figure_gallery
from refgames.report import write_report
from refgames.taxonomy import GALLERIES, gallery_by_slug


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate reference-game diagrams and report.")
    parser.add_argument(
        "--out-dir",
        default="report",
        help="Output directory for figures and REPORT.md (default: report)",
    )
    parser.add_argument(
        "--asset",
        default=None,
        help="Optional schematic image embedded at the top of the report",
    )
    parser.add_argument(
        "--no-legend",
        action="store_true",
        help="Render every gallery without a legend",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="SLUG",
        choices=[gallery.slug for gallery in GALLERIES],
        help="Render only the named galleries (validate with the same --only)",
    )
    args = parser.parse_args()

    out_dir = os.path.abspath(args.out_dir)
    figure_dir = os.path.join(out_dir, "figures")
    os.makedirs(figure_dir, exist_ok=True)

    galleries = [gallery_by_slug(slug) for slug in args.only] if args.only else GALLERIES

    print("Generating gallery figures...")
    figure_paths = {}
    for gallery in galleries:
        figure_paths[gallery.slug] = figure_gallery(
            os.path.join(figure_dir, f"{gallery.slug}.pdf"),
            gallery.conditions,
            title=gallery.title,
            legend=gallery.legend and not args.no_legend,
        )

    print("Writing report...")
    report_path = write_report(out_dir, galleries, figure_paths, asset=args.asset)

    print(f"\nAll figures saved to {figure_dir}/")
    print(f"Report: {report_path}")
    print(f"  Galleries: {len(galleries)}")
    print(f"  Diagrams: {sum(len(g.conditions) for g in galleries)}")


if __name__ == "__main__":
    main()
