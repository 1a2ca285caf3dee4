"""
fontlist – text_rules.py
========================

String rewrite rules turning catalog fields into display-ready text.

All functions are pure and deterministic. Matching is plain, case-sensitive
substring matching; the output is HTML markup around trusted catalog text, so
nothing is escaped here.
"""

import re

# ============================================================
# Configuration
# ============================================================

#: Namespace prefix of every derived font-family identifier.
FAMILY_PREFIX = "Web_"

#: Ordered (old, new) replacements applied to a font base name.
FAMILY_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    (" ", "_"),
    ("/", "-"),
    ("_re.", "_re"),
    ("_:", "_"),
    ("AT&T", "ATT"),
)

#: Identifier suffixes marking a secondary (stretched aspect) rendering.
VARIANT_SUFFIXES = ("-2x", "-2y")

SPAN_OPEN = '<span class="has-text-weight-normal">'
SPAN_CLOSE = "</span>"

#: Phrases de-emphasized in a title, first occurrence only.
DIMMED_PHRASES = (
    "Adapter Interface drivers for",
    "series video BIOS",
    "on-board video",
    "system font",
    "system-loaded font",
    "firmware and system",
)

#: Phrase dimmed from its first occurrence up to the end of the title.
MGA_PHRASE = "Multimode Graphics Adapter"

_CHAR_RE = re.compile(r"char(?!acter)(s?)")


# ============================================================
# Rules
# ============================================================


def font_family(base_name: str) -> str:
    """
    Return the font-family identifier derived from a font base name.

    The identifier is also the ``.woff`` filename stem, so it never contains
    spaces or slashes.

    Example::

        >>> font_family("Arial Italic")
        'Web_Arial_Italic'
    """
    s = base_name
    for old, new in FAMILY_REPLACEMENTS:
        s = s.replace(old, new)
    return FAMILY_PREFIX + s


def format_title(origin: str) -> str:
    """
    Return the sub-header markup for a font origin text.

    Rules, in order:

    1. A parenthetical aside is dimmed from the first ``(`` to the end of the
       text; failing that, ``Multimode Graphics Adapter`` is dimmed from its
       first occurrence to the end of the text.
    2. ``incl.`` is expanded to ``includes``.
    3. Each phrase of :data:`DIMMED_PHRASES` is wrapped in its own span.
    """
    s = origin
    if "(" in s:
        s = s.replace("(", SPAN_OPEN + "(", 1) + SPAN_CLOSE
    elif MGA_PHRASE in s:
        s = s.replace(MGA_PHRASE, SPAN_OPEN + MGA_PHRASE, 1) + SPAN_CLOSE
    s = s.replace("incl.", "includes")
    for phrase in DIMMED_PHRASES:
        s = s.replace(phrase, SPAN_OPEN + phrase + SPAN_CLOSE, 1)
    return s


def format_usage(usage: str) -> str:
    """
    Return the cleaned up usage text of a font.

    ``[?]`` markers are dropped, ``w/`` reads ``with``, and ``char``/``chars``
    are spelled out. The expansion is a single pass, so ``chars`` becomes
    ``characters`` and an existing ``character`` is left untouched.
    """
    s = usage.replace("[?]", "")
    s = s.replace("w/", "with ")
    return _CHAR_RE.sub(r"character\1", s)


def is_variant(name: str) -> bool:
    """Return True if the web-safe name is a ``-2x``/``-2y`` aspect variant."""
    if len(name) <= len(VARIANT_SUFFIXES[0]):
        return False
    return name[-3:] in VARIANT_SUFFIXES
