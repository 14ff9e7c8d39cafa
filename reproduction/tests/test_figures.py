"""Tests for diagram rendering and the markdown report."""

import os
import sys

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.colors import to_rgba
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from refgames.figures import _save, build_gallery, figure_condition, figure_gallery, legend_handles, plot_network
from refgames.model import Condition, enumerate_conditions
from refgames.network import make_network
from refgames.plot_style import default_style
from refgames.report import REPORT_NAME, write_report
from refgames.taxonomy import GALLERIES, gallery_by_slug


# ── Plotting routine ───────────────────────────────────────


def test_plot_network_draws_nodes_and_edges():
    fig, ax = plt.subplots()
    table = make_network(3, ["full", "partial", "none"], "+-0")
    plot_network(ax, table, legend=True, title="triad")
    assert len(ax.patches) == 3
    assert len(ax.lines) == 3
    texts = [text.get_text() for text in ax.texts]
    assert sorted(texts) == ["+", "-", "0", "A", "B", "C"]
    assert ax.get_legend() is not None
    plt.close(fig)


def test_plot_network_without_legend():
    fig, ax = plt.subplots()
    plot_network(ax, make_network(2, ["full", "partial"], "+"), legend=False)
    assert ax.get_legend() is None
    plt.close(fig)


def test_legend_handles_cover_all_labels():
    labels = [handle.get_label() for handle in legend_handles()]
    assert len(labels) == 6
    assert "knowledge: partial" in labels


# ── Saved figures ──────────────────────────────────────────


def test_figure_condition_writes_pdf_and_png(tmp_path):
    png = figure_condition(str(tmp_path / "dyad.pdf"), Condition(2, "+", "fp"))
    assert png == tmp_path / "dyad.png"
    assert (tmp_path / "dyad.pdf").exists()
    assert png.exists()


def test_figure_gallery_mixed_sizes(tmp_path):
    conditions = enumerate_conditions([2, 3], ["+", "+-0"], ["fp", "fpn"])
    png = figure_gallery(str(tmp_path / "mixed.pdf"), conditions, title="Mixed", ncols=3, legend=False)
    assert png.exists()


def test_figure_gallery_rejects_empty(tmp_path):
    with pytest.raises(ValueError):
        figure_gallery(str(tmp_path / "empty.pdf"), [])


def test_node_colors_follow_knowledge():
    style = default_style()
    fig, ax = plt.subplots()
    plot_network(ax, make_network(3, ["full", "partial", "none"], "+++"), style=style, legend=False)
    faces = [patch.get_facecolor() for patch in ax.patches]
    expected = [to_rgba(style.knowledge_colors[label]) for label in ["full", "partial", "none"]]
    assert faces == expected
    plt.close(fig)


def test_edge_colors_and_dashes_follow_incentive():
    style = default_style()
    fig, ax = plt.subplots()
    plot_network(ax, make_network(3, ["full", "full", "full"], "+-0"), style=style, legend=False)
    assert [to_rgba(line.get_color()) for line in ax.lines] == [
        to_rgba(style.incentive_colors[label]) for label in ["+", "-", "0"]
    ]
    assert [line.get_linestyle() for line in ax.lines] == ["-", "-", "--"]
    plt.close(fig)


def test_gallery_figure_legend_toggle():
    conditions = enumerate_conditions(2, ["+", "-"], "fp")
    with_legend = build_gallery(conditions, legend=True)
    without_legend = build_gallery(conditions, legend=False)
    assert len(with_legend.legends) == 1
    assert len(without_legend.legends) == 0
    for ax in with_legend.axes:
        assert ax.get_legend() is None
    plt.close(with_legend)
    plt.close(without_legend)


def test_gallery_hides_unused_axes():
    conditions = enumerate_conditions(2, "+", ["ff", "fp", "fn", "pp"])
    fig = build_gallery(conditions, ncols=3)
    assert len(fig.axes) == 6
    assert [ax.get_visible() for ax in fig.axes] == [True] * 4 + [False] * 2
    plt.close(fig)


def test_save_closes_figure_when_savefig_fails(tmp_path, monkeypatch):
    fig, _ = plt.subplots()

    def broken_savefig(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(fig, "savefig", broken_savefig)
    with pytest.raises(RuntimeError):
        _save(fig, str(tmp_path / "broken.pdf"))
    assert not plt.fignum_exists(fig.number)


def test_default_style_instances_are_independent():
    style = default_style()
    style.knowledge_colors["full"] = "#000000"
    assert default_style().knowledge_colors["full"] == "#1e3a8a"


# ── Report ─────────────────────────────────────────────────


def test_taxonomy_galleries_are_valid():
    slugs = [gallery.slug for gallery in GALLERIES]
    assert len(slugs) == len(set(slugs))
    assert len(gallery_by_slug("dyad_overview").conditions) == 27
    with pytest.raises(KeyError):
        gallery_by_slug("missing")


def test_write_report_embeds_galleries(tmp_path):
    galleries = [gallery_by_slug("dyad_baselines"), gallery_by_slug("triad_coalition")]
    figure_paths = {
        gallery.slug: figure_gallery(str(tmp_path / "figures" / f"{gallery.slug}.pdf"), gallery.conditions)
        for gallery in galleries
    }
    path = write_report(str(tmp_path), galleries, figure_paths)
    assert path == tmp_path / REPORT_NAME
    text = path.read_text(encoding="utf-8")
    for gallery in galleries:
        assert f"## {gallery.title}" in text
        assert f"](figures/{gallery.slug}.png)" in text
    assert "| `+--` | `nnf` |" in text
    assert "## Glossary" in text


def test_write_report_copies_asset(tmp_path):
    asset = tmp_path / "assets" / "schematic.png"
    asset.parent.mkdir()
    asset.write_bytes(b"not really a png")
    out_dir = tmp_path / "out"
    gallery = gallery_by_slug("dyad_baselines")
    figure_paths = {gallery.slug: out_dir / "figures" / "dyad_baselines.png"}
    text = write_report(str(out_dir), [gallery], figure_paths, asset=str(asset)).read_text(encoding="utf-8")
    assert (out_dir / "schematic.png").read_bytes() == b"not really a png"
    assert "![Reference game schematic](schematic.png)" in text


def test_write_report_missing_asset(tmp_path):
    gallery = gallery_by_slug("dyad_baselines")
    with pytest.raises(FileNotFoundError):
        write_report(str(tmp_path), [gallery], {gallery.slug: tmp_path / "x.png"}, asset=str(tmp_path / "nope.png"))
