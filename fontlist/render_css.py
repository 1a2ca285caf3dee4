"""
fontlist – render_css.py
========================

Stylesheet rendering: one ``@font-face`` declaration and one ``.font-<id>``
size class per catalog font.

Font files are referenced by URL relative to the stylesheet and are not
looked up on disk, so a font missing from the local build still gets its
rules.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from fontlist.font_info import FontRecord
from fontlist.text_rules import font_family, is_variant

if TYPE_CHECKING:
    from fontlist.create_fontlist import GenerationStats

#: Path of the ``.woff`` files relative to the stylesheet.
FONT_URL_PREFIX = "../fonts/"
FONT_EXTENSION = ".woff"


@dataclass(frozen=True)
class CSSRule:
    """Values of one font rule block."""

    id: str  # unique web-safe name of the font-family
    font_family: str  # font file stem
    size: str  # pixel value used for font-size and line-height

    @classmethod
    def from_record(cls, record: FontRecord) -> "CSSRule":
        return cls(
            id=record.web_safe_name,
            font_family=font_family(record.base_name),
            size=f"{record.pixel_size}px",
        )


def render_rule(rule: CSSRule) -> str:
    return (
        "@font-face {\n"
        f'  font-family: "{rule.id}";\n'
        f'  src: url("{FONT_URL_PREFIX}{rule.font_family}{FONT_EXTENSION}")'
        ' format("woff");\n'
        "  font-display: swap;\n"
        "}\n"
        f".font-{rule.id} {{\n"
        f"  font-family: {rule.id};\n"
        f"  font-size: {rule.size};\n"
        f"  line-height: {rule.size};\n"
        "}"
    )


def render_css(
    records: Iterable[FontRecord], stats: Optional["GenerationStats"] = None
) -> str:
    """Render the stylesheet for every non-variant record, in catalog order."""
    out: list[str] = []
    for record in records:
        if is_variant(record.web_safe_name):
            continue
        out.append(render_rule(CSSRule.from_record(record)) + "\n")
        if stats is not None:
            stats.rules += 1
    return "".join(out)
