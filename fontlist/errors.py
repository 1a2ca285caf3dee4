"""
fontlist – errors.py
====================

Exception types raised by the font list generator.

Every fatal condition derives from :class:`FontListError` so the CLI can
report it with a single handler and exit with a non-zero status.

Skipped records (variants, missing font files) are not errors: they are
counted in :class:`fontlist.create_fontlist.GenerationStats` and reported as
warnings.
"""

from pathlib import Path


class FontListError(Exception):
    """Base class for all fatal font list generation errors."""


class InventoryError(FontListError):
    """The font_info.json metadata is missing, unreadable or malformed."""

    def __init__(self, path: Path | str | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        if path is None:
            super().__init__(f"invalid font info: {reason}")
        else:
            super().__init__(f"invalid font info {str(path)!r}: {reason}")


class DuplicateFontError(InventoryError):
    """Two catalog entries map to the same identifier."""

    def __init__(self, kind: str, value: str, first: str, second: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(
            None,
            f"duplicate {kind} {value!r} shared by {first!r} and {second!r}",
        )


class RenderError(FontListError):
    """A record could not be turned into HTML or CSS."""


class OutputWriteError(FontListError):
    """A generated file could not be written to its destination."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        super().__init__(f"save {str(path)!r}: {reason}")
