"""Tests for the generation and validation command-line scripts."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import generate_figures
import validate_outputs
from refgames.report import REPORT_NAME
from refgames.taxonomy import gallery_by_slug


def test_generate_rejects_unknown_gallery(monkeypatch, tmp_path):
    monkeypatch.setattr(
        sys, "argv", ["generate_figures.py", "--out-dir", str(tmp_path), "--only", "no_such_gallery"]
    )
    with pytest.raises(SystemExit) as excinfo:
        generate_figures.main()
    assert excinfo.value.code == 2


def test_validate_accepts_subset_of_galleries(tmp_path):
    gallery = gallery_by_slug("triad_coalition")
    figures = tmp_path / "figures"
    figures.mkdir()
    (figures / "triad_coalition.pdf").write_bytes(b"")
    (figures / "triad_coalition.png").write_bytes(b"")
    (tmp_path / REPORT_NAME).write_text(
        f"## {gallery.title}\n\n![x](figures/triad_coalition.png)\n", encoding="utf-8"
    )

    files = validate_outputs.check_files_exist(str(tmp_path), [gallery])
    assert len(files) == 3
    validate_outputs.check_report_sections(str(tmp_path), [gallery])

    with pytest.raises(validate_outputs.ValidationError):
        validate_outputs.check_files_exist(str(tmp_path))


def test_validate_main_with_only(monkeypatch, tmp_path):
    gallery = gallery_by_slug("dyad_baselines")
    figures = tmp_path / "figures"
    figures.mkdir()
    (figures / "dyad_baselines.pdf").write_bytes(b"")
    (figures / "dyad_baselines.png").write_bytes(b"")
    (tmp_path / REPORT_NAME).write_text(
        f"## {gallery.title}\n\n![x](figures/dyad_baselines.png)\n", encoding="utf-8"
    )
    monkeypatch.setattr(
        sys, "argv", ["validate_outputs.py", "--out-dir", str(tmp_path), "--only", "dyad_baselines"]
    )
    assert validate_outputs.main() == 0
