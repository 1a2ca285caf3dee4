"""
fontlist – render_html.py
=========================

HTML rendering of the font selection list.

The catalog is walked once, in order. For each record the classifier decides
whether a section heading starts there and whether a new origin sub-header is
due; the renderer then emits the heading markup followed by one radio button
per font that has a ``.woff`` asset.

The markup targets the Bulma classes used by the RetroTxt options page and is
whitespace-sensitive: the generated block is replaced in place by downstream
tooling, located through its begin/end comment markers.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from fontlist.font_info import FontRecord
from fontlist.text_rules import font_family, format_title, format_usage, is_variant

if TYPE_CHECKING:
    from fontlist.create_fontlist import GenerationStats

# ============================================================
# Sections
# ============================================================


@dataclass(frozen=True)
class Section:
    """Top-level group heading starting at a fixed catalog index."""

    index: int
    title: str
    description: str


CP437_INFO = (
    '<p class="is-size-7">Fonts support the original IBM PC, 256 character'
    " encoding (codepage 437); <u>marked</u> fonts expands support to some"
    " 780 characters</p>"
)

#: Catalog index → section heading. Titles are HTML text.
SECTIONS: tuple[Section, ...] = (
    Section(0, "IBM PC &amp; family", CP437_INFO),
    Section(59, "MS-DOS compatibles", CP437_INFO),
    Section(130, "Video hardware", CP437_INFO),
    Section(184, "Semi-compatibles", CP437_INFO),
)

_SECTIONS_BY_INDEX = {section.index: section for section in SECTIONS}


def section_for(index: int) -> Optional[Section]:
    return _SECTIONS_BY_INDEX.get(index)


# ============================================================
# Classifier
# ============================================================


@dataclass(frozen=True)
class Header:
    """Origin sub-header, both fields already formatted."""

    origin: str
    usage: str


@dataclass(frozen=True)
class Placement:
    """Markup due before a record: an optional section and sub-header."""

    section: Optional[Section] = None
    header: Optional[Header] = None


def classify(record: FontRecord, last_origin: str) -> tuple[Placement, str]:
    """
    Decide which headings precede ``record``.

    Args:
        record: Current catalog record.
        last_origin: Raw origin text of the last emitted sub-header.

    Returns:
        The placement for the record and the updated ``last_origin``.
        Sub-headers are de-duplicated by adjacency only: a run of records
        sharing an origin text gets one sub-header, before its first record.
    """
    header = None
    if record.origin_text != last_origin:
        header = Header(
            origin=format_title(record.origin_text),
            usage=format_usage(record.usage_text),
        )
        last_origin = record.origin_text
    return Placement(section=section_for(record.index), header=header), last_origin


def classify_catalog(
    records: Iterable[FontRecord],
) -> Iterator[tuple[FontRecord, Placement]]:
    """Yield each non-variant record with its placement, in catalog order."""
    last_origin = ""
    for record in records:
        if is_variant(record.web_safe_name):
            continue
        placement, last_origin = classify(record, last_origin)
        yield record, placement


# ============================================================
# Markup builders
# ============================================================

HR = "<hr>"
H1_OPEN = '<div class="box mt-4"><h1 class="title is-size-3 has-text-dark mb-2">'
H1_CLOSE = "</h1></div>"

FONT_INFO_URL = "https://int10h.org/oldschool-pc-fonts/fontlist/font?"
INFO_ICON = (
    '<svg role="img" class="material-icons has-text-dark">'
    '<use xlink:href="../assets/svg/material-icons.svg#info"></use></svg>'
)

#: Form name shared by every radio input.
RADIO_NAME = "font"


@dataclass(frozen=True)
class Radio:
    """Values of one radio input element."""

    id: str  # web-safe name, used by JS and CSS
    font_family: str
    label_for: str  # label for and input id
    label: str
    underline: bool = False
    name: str = RADIO_NAME

    @classmethod
    def from_record(cls, record: FontRecord) -> "Radio":
        family = font_family(record.base_name)
        return cls(
            id=record.web_safe_name,
            font_family=family,
            label_for=family.lower(),
            label=record.base_name,
            underline=record.has_plus,
        )


def render_section(section: Section) -> str:
    return f"{HR}{H1_OPEN}{section.title}{H1_CLOSE}\n{section.description}"


def render_header(header: Header) -> str:
    """Return the ``<h2>`` origin heading, plus an ``<h3>`` usage line if any."""
    if not header.usage:
        return (
            '<h2 class="title has-text-dark is-size-6 mt-4 mb-2">'
            f"{header.origin}</h2>"
        )
    return (
        f'<h2 class="title has-text-dark is-size-6 mt-4">{header.origin}</h2>\n'
        f'<h3 class="subtitle has-text-dark is-size-7 mb-2">{header.usage}</h3>'
    )


def render_radio(radio: Radio) -> str:
    label = f"<u>{radio.label}</u>" if radio.underline else radio.label
    return (
        f'<a href="{FONT_INFO_URL}{radio.id}" target="_blank">\n'
        f"  {INFO_ICON}\n"
        "</a>\n"
        f'<label for="{radio.label_for}">\n'
        f'  <input type="radio" name="{radio.name}" id="{radio.label_for}"'
        f' value="{radio.id}"> {label}\n'
        "</label>"
    )


def begin_marker(now: str) -> str:
    return f"<!-- automatic generation begin ({now}) -->"


def end_marker(now: str) -> str:
    return f"<!-- automatic generation end ({now}) -->"


# ============================================================
# Renderer
# ============================================================


def render_html(
    records: Iterable[FontRecord],
    asset_exists: Callable[[str], bool],
    now: str,
    stats: Optional["GenerationStats"] = None,
) -> str:
    """
    Render the complete generated HTML block.

    Args:
        records: Catalog records in file order.
        asset_exists: Answers whether the ``.woff`` file of a font-family
            identifier is available. Fonts without one get no radio button
            but their headings are still emitted.
        now: Generation timestamp written in the begin/end markers.
        stats: Optional counters; the web-safe names of fonts skipped for a
            missing file are appended to ``stats.missing_assets``.

    Returns:
        The HTML text, each block terminated by a newline.
    """
    out = [begin_marker(now), "<div>"]
    for record, placement in classify_catalog(records):
        if placement.section is not None:
            out.append(render_section(placement.section))
        if placement.header is not None:
            out.append(render_header(placement.header))

        radio = Radio.from_record(record)
        if not asset_exists(radio.font_family):
            if stats is not None:
                stats.missing_assets.append(record.web_safe_name)
            continue

        out.append(render_radio(radio))
        if stats is not None:
            stats.radios += 1
    out.extend(["</div>", end_marker(now)])
    return "\n".join(out) + "\n"
