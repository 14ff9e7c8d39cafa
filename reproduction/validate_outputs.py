#!/usr/bin/env python3
"""Validation script for generated diagrams, report and label tables."""

import argparse
import os
import sys
from typing import List, Sequence

from refgames.model import (
    expand_incentives,
    expand_knowledge,
    validate_condition,
)
from refgames.network import make_network, network_for
from refgames.report import REPORT_NAME
from refgames.taxonomy import GALLERIES, Gallery, gallery_by_slug


class ValidationError(Exception):
    """Raised when validation check fails."""
    pass


def check_files_exist(out_dir: str, galleries: Sequence[Gallery] = GALLERIES) -> List[str]:
    """Check that every gallery PDF/PNG and the report exist."""
    expected_files = [REPORT_NAME]
    for gallery in galleries:
        expected_files.append(os.path.join("figures", f"{gallery.slug}.pdf"))
        expected_files.append(os.path.join("figures", f"{gallery.slug}.png"))

    missing = []
    for fname in expected_files:
        fpath = os.path.join(out_dir, fname)
        if not os.path.exists(fpath):
            missing.append(fname)

    if missing:
        raise ValidationError(f"Missing output files: {missing}")

    print(f"✓ All {len(expected_files)} output files exist")
    return expected_files


def check_report_sections(out_dir: str, galleries: Sequence[Gallery] = GALLERIES) -> None:
    """Verify the report embeds every gallery figure."""
    with open(os.path.join(out_dir, REPORT_NAME), encoding="utf-8") as handle:
        text = handle.read()

    for gallery in galleries:
        if f"## {gallery.title}" not in text:
            raise ValidationError(f"Report is missing section: {gallery.title}")
        if f"figures/{gallery.slug}.png" not in text:
            raise ValidationError(f"Report does not embed figure for: {gallery.slug}")

    print(f"✓ Report embeds all {len(galleries)} galleries")


def check_label_tables() -> None:
    """Verify the code-to-label mappings and their fallbacks."""
    knowledge = expand_knowledge("fpnx")
    if knowledge != ["full", "partial", "none", "none"]:
        raise ValidationError(f"Knowledge expansion mismatch: {knowledge}")

    incentives = expand_incentives("+-0?")
    if incentives != ["+", "-", "0", "0"]:
        raise ValidationError(f"Incentive expansion mismatch: {incentives}")

    print("✓ Label tables match (f/p/else -> full/partial/none, +/-/else -> +/-/0)")


def check_network_shapes() -> None:
    """Verify row and edge counts of the two fixed topologies."""
    dyad = make_network(2, ["full", "partial"], "+")
    if len(dyad) != 3 or dyad.edge_count != 1:
        raise ValidationError(f"Dyad table should have 3 rows / 1 edge, got {len(dyad)} / {dyad.edge_count}")

    triad = make_network(3, ["full", "partial", "none"], ["+", "-", "0"])
    if len(triad) != 6 or triad.edge_count != 3:
        raise ValidationError(f"Triad table should have 6 rows / 3 edges, got {len(triad)} / {triad.edge_count}")

    try:
        make_network(4, ["full"] * 4, ["+"] * 6)
    except ValueError:
        pass
    else:
        raise ValidationError("make_network accepted an unsupported player count")

    print("✓ Network tables have the expected shape")
    print(f"  - Dyad: {len(dyad)} rows, {dyad.edge_count} edge")
    print(f"  - Triad: {len(triad)} rows, {triad.edge_count} edges")


def check_gallery_conditions() -> None:
    """Verify every authored condition is well formed."""
    total = 0
    for gallery in GALLERIES:
        if not gallery.conditions:
            raise ValidationError(f"Gallery {gallery.slug} has no conditions")
        for condition in gallery.conditions:
            try:
                validate_condition(condition)
            except ValueError as e:
                raise ValidationError(f"{gallery.slug}: {e}")
            table = network_for(condition)
            if len(table.nodes) != condition.n_players:
                raise ValidationError(f"{gallery.slug}: node count mismatch for {condition.key}")
            total += 1

    print(f"✓ All {total} gallery conditions are valid")


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate generated reference-game outputs.")
    parser.add_argument(
        "--out-dir",
        default="report",
        help="Directory containing REPORT.md and figures/",
    )
    parser.add_argument(
        "--skip-files",
        action="store_true",
        help="Only run the table checks, not the output file checks",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="SLUG",
        choices=[gallery.slug for gallery in GALLERIES],
        help="Expect only the named galleries (match generate_figures.py --only)",
    )
    args = parser.parse_args()
    galleries = [gallery_by_slug(slug) for slug in args.only] if args.only else GALLERIES

    print("=" * 60)
    print("Reference Game Output Validation")
    print("=" * 60)
    print()

    try:
        # 1. Label tables
        check_label_tables()
        print()

        # 2. Fixed topologies
        check_network_shapes()
        print()

        # 3. Authored conditions
        check_gallery_conditions()
        print()

        if not args.skip_files:
            # 4. Generated files
            check_files_exist(args.out_dir, galleries)
            print()

            # 5. Report content
            check_report_sections(args.out_dir, galleries)
            print()

        print("=" * 60)
        print("✓ ALL VALIDATION CHECKS PASSED")
        print("=" * 60)
        return 0

    except ValidationError as e:
        print()
        print("=" * 60)
        print(f"✗ VALIDATION FAILED: {e}")
        print("=" * 60)
        return 1
    except Exception as e:
        print()
        print("=" * 60)
        print(f"✗ UNEXPECTED ERROR: {e}")
        print("=" * 60)
        import traceback
        traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
