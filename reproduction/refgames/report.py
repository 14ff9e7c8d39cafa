"""Markdown report assembly for the reference-game memo."""

import os
import shutil
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .taxonomy import GLOSSARY, INTRODUCTION, OPEN_QUESTIONS, Gallery

REPORT_NAME = "REPORT.md"


def _relative(path: Path, start: Path) -> str:
    return Path(os.path.relpath(path, start)).as_posix()


def copy_asset(asset: str, out_dir: Path) -> Path:
    """Copy the static image asset next to the report."""

    source = Path(asset)
    if not source.is_file():
        raise FileNotFoundError(f"Image asset not found: {source}")
    target = out_dir / source.name
    if source.resolve() != target.resolve():
        shutil.copyfile(source, target)
    return target


def write_report(
    out_dir: str,
    galleries: Sequence[Gallery],
    figure_paths: Mapping[str, Path],
    asset: Optional[str] = None,
) -> Path:
    """Write REPORT.md embedding one figure per gallery."""

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    out_path = out / REPORT_NAME

    lines: List[str] = []
    lines.append("# Reference Games: A Small Taxonomy")
    lines.append("")
    lines.append(INTRODUCTION.strip())
    lines.append("")
    if asset is not None:
        asset_path = copy_asset(asset, out)
        lines.append(f"![Reference game schematic]({_relative(asset_path, out)})")
        lines.append("")

    for gallery in galleries:
        lines.append(f"## {gallery.title}")
        lines.append("")
        lines.append(gallery.commentary)
        lines.append("")
        figure = figure_paths[gallery.slug]
        lines.append(f"![{gallery.title}]({_relative(Path(figure), out)})")
        lines.append("")
        lines.append("| Incentives | Knowledge | Reading |")
        lines.append("| --- | --- | --- |")
        for condition in gallery.conditions:
            lines.append(f"| `{condition.incentives}` | `{condition.knowledge}` | {condition.describe()} |")
        lines.append("")

    lines.append("## Glossary")
    lines.append("")
    for term, definition in GLOSSARY:
        lines.append(f"- **{term}**: {definition}")
    lines.append("")
    lines.append("## Open Questions")
    lines.append("")
    for question in OPEN_QUESTIONS:
        lines.append(f"- {question}")
    lines.append("")

    out_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return out_path
