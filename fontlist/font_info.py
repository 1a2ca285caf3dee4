"""
fontlist – font_info.py
=======================

Load the ``font_info.json`` catalog of The Ultimate Oldschool PC Font Pack
into an ordered list of :class:`FontRecord`.

Design principles
-----------------
- **Order preserving**: records are returned in file order; section
  boundaries and sub-header grouping depend on it.
- **Structural only**: keys and JSON types are checked, values are not.
- **Fail fast**: a malformed document raises :class:`InventoryError`
  before anything is rendered.

Expected structure::

    {
        "font_info": [
            {
                "index": 0,
                "web_safe_name": "IBM_BIOS",
                "base_name": "IBM BIOS",
                "has_plus": true,
                "fon_woff_sz_px": 8,
                "infotxt_origins": "IBM PC, XT, AT ...",
                "infotxt_usage": "..."
            },
            ...
        ]
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fontlist.errors import DuplicateFontError, InventoryError

# ============================================================
# Field table
# ============================================================

#: JSON key → (attribute name, expected type, default).
#:
#: A default of ``None`` marks the key as required.
#:
FIELDS: dict[str, tuple[str, type, Any]] = {
    "index": ("index", int, None),
    "web_safe_name": ("web_safe_name", str, None),
    "base_name": ("base_name", str, None),
    "fon_woff_sz_px": ("pixel_size", int, None),
    "has_plus": ("has_plus", bool, False),
    "infotxt_origins": ("origin_text", str, ""),
    "infotxt_usage": ("usage_text", str, ""),
    "has_aspect": ("has_aspect", bool, False),
    "sq_aspect": ("sq_aspect", str, ""),
    "ac_aspect": ("ac_aspect", str, ""),
    "orig_w": ("orig_w", int, 0),
    "orig_h": ("orig_h", int, 0),
    "ttf_sz_px": ("ttf_size_px", int, 0),
    "ttf_sz_pt": ("ttf_size_pt", int, 0),
}


@dataclass(frozen=True)
class FontRecord:
    """One entry of the font catalog."""

    index: int
    web_safe_name: str
    base_name: str
    pixel_size: int
    has_plus: bool = False
    origin_text: str = ""
    usage_text: str = ""
    has_aspect: bool = False
    sq_aspect: str = ""
    ac_aspect: str = ""
    orig_w: int = 0
    orig_h: int = 0
    ttf_size_px: int = 0
    ttf_size_pt: int = 0


# ============================================================
# Parsing
# ============================================================


def _type_matches(value: Any, expected: type) -> bool:
    # bool is a subclass of int, JSON true/false is never a size
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def parse_record(entry: Any, position: int) -> FontRecord:
    """
    Build a :class:`FontRecord` from one ``font_info`` entry.

    Args:
        entry: Decoded JSON value of the entry.
        position: Position of the entry in the array, used in messages.

    Raises:
        InventoryError: The entry is not an object, a required key is
            missing or null, or a key holds a value of the wrong JSON type.
            A null optional key takes its default.
    """
    if not isinstance(entry, dict):
        raise InventoryError(
            None, f"font_info entry #{position} is not an object"
        )

    values: dict[str, Any] = {}
    for key, (attr, expected, default) in FIELDS.items():
        # null reads as absent
        if entry.get(key) is None:
            if default is None:
                raise InventoryError(
                    None, f"font_info entry #{position} is missing {key!r}"
                )
            values[attr] = default
            continue
        value = entry[key]
        if not _type_matches(value, expected):
            raise InventoryError(
                None,
                f"font_info entry #{position} key {key!r} "
                f"must be {expected.__name__}, got {type(value).__name__}",
            )
        values[attr] = value
    return FontRecord(**values)


def parse_font_info(data: Any) -> list[FontRecord]:
    """Return the records of an already decoded ``font_info.json`` document."""
    if not isinstance(data, dict):
        raise InventoryError(None, "root is not a JSON object")

    entries = data.get("font_info")
    if not isinstance(entries, list):
        raise InventoryError(None, "'font_info' field missing or not a list")

    return [parse_record(entry, pos) for pos, entry in enumerate(entries)]


def load_font_info(path: Path) -> list[FontRecord]:
    """
    Load and parse a ``font_info.json`` file.

    Returns:
        The catalog records in file order.

    Raises:
        InventoryError: The file cannot be read, is not valid JSON, or is
            structurally malformed. The message names the file.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InventoryError(path, str(e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InventoryError(path, f"not valid JSON: {e}") from e

    try:
        return parse_font_info(data)
    except InventoryError as e:
        raise InventoryError(path, e.reason) from e


# ============================================================
# Catalog checks
# ============================================================


def check_unique_names(records: list[FontRecord]) -> None:
    """Raise :class:`DuplicateFontError` if a ``web_safe_name`` repeats."""
    seen: dict[str, FontRecord] = {}
    for record in records:
        first = seen.setdefault(record.web_safe_name, record)
        if first is not record:
            raise DuplicateFontError(
                "web_safe_name",
                record.web_safe_name,
                first.base_name,
                record.base_name,
            )


def check_sections(records: list[FontRecord], boundaries: list[int]) -> list[int]:
    """
    Return the section boundary indexes that no record carries.

    A boundary missing from the catalog means its section heading would
    never be emitted.
    """
    present = {record.index for record in records}
    return [index for index in boundaries if index not in present]
