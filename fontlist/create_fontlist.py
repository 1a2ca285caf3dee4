#!/usr/bin/env python3
"""
fontlist – create_fontlist.py
=============================

Font selection list generator for the RetroTxt options page.

This module consumes ``font_info.json`` from The Ultimate Oldschool PC Font
Pack and writes two files:

- ``fonts.html``: the generated block of grouped font radio buttons,
- ``fonts.css``: the ``@font-face`` rules and size classes.

Design principles
-----------------
- **Build-time only**: runs once, never serves anything.
- **Deterministic**: same catalog → same output, apart from the timestamp
  written in the HTML begin/end markers.
- **All or nothing**: both outputs are rendered in memory and only written
  once rendering succeeded.
- **Soft skips**: variants and fonts without a ``.woff`` file are skipped and
  reported, never fatal.

Key entrypoints:
- `generate(...)` — load, render and write both files
- `main()` — CLI
"""

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from fontlist.errors import (
    DuplicateFontError,
    FontListError,
    OutputWriteError,
    RenderError,
)
from fontlist.font_info import (
    FontRecord,
    check_sections,
    check_unique_names,
    load_font_info,
)
from fontlist.render_css import FONT_EXTENSION, render_css
from fontlist.render_html import SECTIONS, render_html
from fontlist.text_rules import font_family, is_variant

# --- Configuration ---
#: Locations relative to the home directory of a RetroTxt checkout.
DEFAULT_DATA = Path("github/RetroTxt/ext/json/font_info.json")
DEFAULT_FONTS = Path("github/RetroTxt/ext/fonts")

FNAME_HTML = "fonts.html"
FNAME_CSS = "fonts.css"

#: RFC 822 with numeric zone, e.g. ``19 Oct 26 05:00 +0000``.
TIMESTAMP_FORMAT = "%d %b %y %H:%M %z"


@dataclass
class GenerationStats:
    """Counters of a generation run."""

    records: int = 0
    variants: int = 0
    radios: int = 0
    rules: int = 0
    missing_assets: list[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"{self.records} fonts in catalog, {self.variants} variants skipped, "
            f"{self.radios} radio buttons, {self.rules} CSS rules, "
            f"{len(self.missing_assets)} font files not found"
        )


# ============================================================
# Helpers
# ============================================================


def generation_timestamp() -> str:
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def woff_asset_check(font_dir: Path) -> Callable[[str], bool]:
    """Return a check telling whether ``<font_dir>/<family>.woff`` exists."""
    font_dir = Path(font_dir)

    def exists(family: str) -> bool:
        return (font_dir / f"{family}{FONT_EXTENSION}").exists()

    return exists


def check_family_collisions(records: list[FontRecord]) -> None:
    """
    Raise :class:`DuplicateFontError` if two non-variant records derive the
    same font-family identifier, as they would share one ``.woff`` file.
    """
    seen: dict[str, FontRecord] = {}
    for record in records:
        if is_variant(record.web_safe_name):
            continue
        family = font_family(record.base_name)
        first = seen.setdefault(family, record)
        if first is not record:
            raise DuplicateFontError(
                "font family",
                family,
                first.web_safe_name,
                record.web_safe_name,
            )


def save(text: str, path: Path) -> None:
    """Overwrite ``path`` with ``text``."""
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e


# ============================================================
# Pipeline
# ============================================================


def generate(
    data: Path,
    fonts: Path,
    html_path: Path = Path(FNAME_HTML),
    css_path: Path = Path(FNAME_CSS),
    now: str | None = None,
) -> GenerationStats:
    """
    Create the HTML and CSS files for the font selection page.

    Args:
        data: Path of the ``font_info.json`` catalog.
        fonts: Directory holding the ``.woff`` web fonts.
        html_path: Destination of the HTML block.
        css_path: Destination of the stylesheet.
        now: Timestamp for the HTML markers; the current UTC time if omitted.

    Returns:
        The counters of the run.

    Raises:
        FontListError: On any fatal error. Nothing is written unless both
            outputs rendered.
    """
    stats = GenerationStats()

    print("[1/3] Loading font info...")
    records = load_font_info(data)
    check_unique_names(records)
    check_family_collisions(records)
    stats.records = len(records)
    stats.variants = sum(1 for r in records if is_variant(r.web_safe_name))
    print(f"✓ Font info loaded: {data} ({len(records)} fonts)")

    for index in check_sections(records, [s.index for s in SECTIONS]):
        print(
            f"⚠️  Warning: no font at section index {index}; heading not emitted",
            file=sys.stderr,
        )

    print("[2/3] Rendering HTML and CSS...")
    if now is None:
        now = generation_timestamp()
    try:
        html = render_html(records, woff_asset_check(fonts), now, stats)
        css = render_css(records, stats)
    except (TypeError, ValueError, KeyError) as e:
        raise RenderError(f"render failed: {e}") from e

    families = {r.web_safe_name: font_family(r.base_name) for r in records}
    for name in stats.missing_assets:
        print(
            f"⚠️  Warning: font file not found: {families[name]} ({name})",
            file=sys.stderr,
        )

    print(f"[3/3] Writing {html_path} and {css_path}...")
    save(html, html_path)
    save(css, css_path)
    print("✓ Done! " + stats.summary())
    return stats


# ============================================================
# CLI
# ============================================================


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    home = Path.home()
    parser = argparse.ArgumentParser(
        description="Generate the RetroTxt font selection HTML and CSS.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "data",
        type=Path,
        nargs="?",
        default=home / DEFAULT_DATA,
        help="Input font_info.json",
    )
    parser.add_argument(
        "--fonts",
        type=Path,
        default=home / DEFAULT_FONTS,
        help="Directory of the .woff web fonts",
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=Path(FNAME_HTML),
        help="Output HTML file",
    )
    parser.add_argument(
        "--css",
        type=Path,
        default=Path(FNAME_CSS),
        help="Output CSS file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error status when any font file is missing",
    )
    args = parser.parse_args(argv)

    try:
        stats = generate(args.data, args.fonts, args.html, args.css)
    except FontListError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.strict and stats.missing_assets:
        print(
            f"❌ Error: {len(stats.missing_assets)} font files not found",
            file=sys.stderr,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
