import json
from pathlib import Path

from fontlist.font_info import FontRecord


def make_entry(extra: dict | None = None) -> dict:
    """Return a minimal valid ``font_info`` entry as decoded JSON."""
    entry = {
        "index": 0,
        "web_safe_name": "Web_A",
        "base_name": "Alpha Font",
        "has_plus": False,
        "fon_woff_sz_px": 16,
        "infotxt_origins": "Origin One",
        "infotxt_usage": "",
    }
    if extra:
        entry.update(extra)
    return entry


def make_record(**kwargs) -> FontRecord:
    values = {
        "index": 0,
        "web_safe_name": "Web_A",
        "base_name": "Alpha Font",
        "pixel_size": 16,
        "origin_text": "Origin One",
    }
    values.update(kwargs)
    return FontRecord(**values)


def write_font_info(path: Path, entries: list[dict]) -> Path:
    """Write a ``font_info.json`` document holding ``entries``."""
    path.write_text(json.dumps({"font_info": entries}), encoding="utf-8")
    return path


def touch_woff(font_dir: Path, *families: str) -> None:
    font_dir.mkdir(parents=True, exist_ok=True)
    for family in families:
        (font_dir / f"{family}.woff").write_bytes(b"wOFF")
