"""
Quotes API - SVG Quote Card Renderer
=====================================

What:  Turns a quote (text, author) into a complete SVG document.
How:   Three steps, all pure functions:
       1. wrap_text()    greedy word wrap with a fixed 12px-per-character metric
       2. escape_xml()   makes user text safe inside SVG text nodes
       3. render_quote_card()  lays out the wrapped lines, vertically centred,
                               and emits the themed SVG markup

Layout (all values in pixels):

    ┌──────────────────────────────────────────────┐
    │  "                                           │  decorative glyph at (50, 60)
    │                                              │
    │          line 0   ← start_y                  │
    │          line 1   ← start_y + 35             │
    │          ...                                 │
    │          ───────  ← start_y + block + 15     │  accent rule, 200px wide
    │          — Author ← start_y + block + 40     │
    └──────────────────────────────────────────────┘

    block   = len(lines) * 35
    start_y = (height - block - 60) / 2 + 40

There is no state here: the theme table is an immutable mapping built at
import time, so render_quote_card() can be called from any number of
concurrent requests.
"""

import math
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# ── Layout Constants ──────────────────────────────────────────────────────
CHAR_WIDTH = 12           # approximate glyph width at font-size 24
LINE_HEIGHT = 35
HORIZONTAL_MARGIN = 100   # wrap width = render width - margin
DECORATION_HEIGHT = 60    # reserved for the glyph and the author block
BASELINE_OFFSET = 40      # first baseline below the centred block's top
AUTHOR_OFFSET = 40
RULE_OFFSET = 15
RULE_HALF_WIDTH = 100

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 400
DEFAULT_THEME = "light"
# Dimensions are clamped to [-MAX_DIMENSION, MAX_DIMENSION]
MAX_DIMENSION = 100_000

FONT_FAMILY = "Georgia, serif"


@dataclass(frozen=True)
class Theme:
    """A named palette of four colors applied to a card."""
    background: str
    text_color: str
    author_color: str
    accent_color: str


THEMES: Mapping[str, Theme] = MappingProxyType({
    "light": Theme("#ffffff", "#2c3e50", "#7f8c8d", "#3498db"),
    "dark": Theme("#2c3e50", "#ecf0f1", "#95a5a6", "#3498db"),
    # References the <linearGradient id="gradient"> emitted in every card
    "gradient": Theme("url(#gradient)", "#ffffff", "#ecf0f1", "#ffffff"),
    "ocean": Theme("#006994", "#ffffff", "#e0f2f7", "#4fc3f7"),
    "sunset": Theme("#ff6b6b", "#ffffff", "#ffe66d", "#ffd93d"),
    "forest": Theme("#2d6a4f", "#ffffff", "#d8f3dc", "#95d5b2"),
    "purple": Theme("#6a4c93", "#ffffff", "#c9ada7", "#d4a5a5"),
})


def get_theme(name: str | None) -> Theme:
    """Look up a theme by name; unknown or empty names get the light theme."""
    return THEMES.get(name or DEFAULT_THEME, THEMES[DEFAULT_THEME])


# ══════════════════════════════════════════════════════════════════════════
# Render Options
# ══════════════════════════════════════════════════════════════════════════

_LEADING_INT = re.compile(r"^\s*([+-]?)0*(\d+)")
_MAX_DIGITS = len(str(MAX_DIMENSION))


def clamp_dimension(value: int) -> int:
    return max(-MAX_DIMENSION, min(MAX_DIMENSION, value))


def parse_dimension(value: str | int | float | None, default: int) -> int:
    """
    Coerce a query-string dimension to an integer.

    Takes the leading integer of the string ("1200px" → 1200, "12.7" → 12).
    Missing values, values with no leading digits, zero, NaN and infinities
    fall back to `default`. Anything beyond ±MAX_DIMENSION is clamped, so
    arbitrarily long digit strings are safe. Never raises.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        value = int(value)
    if isinstance(value, int):
        return clamp_dimension(value) or default

    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    sign, digits = match.groups()
    # Only short digit runs are converted; longer ones are out of range anyway
    number = MAX_DIMENSION if len(digits) > _MAX_DIGITS else int(digits)
    if sign == "-":
        number = -number
    return clamp_dimension(number) or default


@dataclass(frozen=True)
class RenderConfig:
    """Per-request render options, built from query parameters."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    theme: str = DEFAULT_THEME

    @classmethod
    def from_query(
        cls,
        width: str | int | None = None,
        height: str | int | None = None,
        theme: str | None = None,
    ) -> "RenderConfig":
        return cls(
            width=parse_dimension(width, DEFAULT_WIDTH),
            height=parse_dimension(height, DEFAULT_HEIGHT),
            theme=theme or DEFAULT_THEME,
        )


# ══════════════════════════════════════════════════════════════════════════
# Text Layout
# ══════════════════════════════════════════════════════════════════════════

def wrap_text(text: str, max_width: float) -> list[str]:
    """
    Greedy word wrap under a fixed per-character width.

    Words are split on single spaces, so a doubled space yields an empty
    word that is joined like any other (the line keeps both spaces). A word
    wider than max_width on its own is never broken; it gets a line to
    itself.

    Width is measured in code points: an emoji or other astral character
    counts as one character, the same as any letter.

    Returns:
        The wrapped lines; empty only when `text` is empty.
    """
    lines: list[str] = []
    current = ""

    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if len(candidate) * CHAR_WIDTH < max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)
    return lines


def escape_xml(text: str) -> str:
    """
    Escape the five XML special characters.

    `&` goes first so the entities introduced by the later replacements
    are not escaped again. Existing entities in the input are escaped too
    ("&amp;" → "&amp;amp;").
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def _num(value: float) -> str:
    """Shortest numeric form: 400.0 → "400", 192.5 → "192.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ══════════════════════════════════════════════════════════════════════════
# Card Rendering
# ══════════════════════════════════════════════════════════════════════════

def render_quote_card(
    text: str,
    author: str,
    config: RenderConfig | None = None,
) -> str:
    """
    Render one quote as a standalone SVG document.

    Args:
        text:    Quote text; wrapped to (width - 100) pixels.
        author:  Author name. Callers substitute "Unknown" for missing
                 authors before calling.
        config:  Dimensions and theme; defaults to 800x400 "light".

    Returns:
        The SVG document as a string, starting with the XML declaration.
        Every piece of user text passes through escape_xml(), so the output
        is well-formed for any input.
    """
    config = config or RenderConfig()
    width, height = clamp_dimension(config.width), clamp_dimension(config.height)
    colors = get_theme(config.theme)

    lines = wrap_text(text, width - HORIZONTAL_MARGIN)
    block_height = len(lines) * LINE_HEIGHT
    start_y = (height - block_height - DECORATION_HEIGHT) / 2 + BASELINE_OFFSET
    center_x = _num(width / 2)

    tspans = "\n    ".join(
        f'<tspan x="{center_x}" y="{_num(start_y + i * LINE_HEIGHT)}">{escape_xml(line)}</tspan>'
        for i, line in enumerate(lines)
    )
    author_y = _num(start_y + block_height + AUTHOR_OFFSET)
    rule_y = _num(start_y + block_height + RULE_OFFSET)

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="gradient" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:#667eea;stop-opacity:1" />
      <stop offset="100%" style="stop-color:#764ba2;stop-opacity:1" />
    </linearGradient>
  </defs>

  <!-- Background -->
  <rect width="{width}" height="{height}" fill="{colors.background}" rx="10"/>

  <!-- Decorative quote mark -->
  <text x="50" y="60" font-family="{FONT_FAMILY}" font-size="60" fill="{colors.accent_color}" opacity="0.3">"</text>

  <!-- Quote text -->
  <text font-family="{FONT_FAMILY}" font-size="24" fill="{colors.text_color}" text-anchor="middle">
    {tspans}
  </text>

  <!-- Author -->
  <text x="{center_x}" y="{author_y}" font-family="{FONT_FAMILY}" font-size="20" fill="{colors.author_color}" text-anchor="middle" font-style="italic">
    — {escape_xml(author)}
  </text>

  <!-- Decorative line -->
  <line x1="{_num(width / 2 - RULE_HALF_WIDTH)}" y1="{rule_y}" x2="{_num(width / 2 + RULE_HALF_WIDTH)}" y2="{rule_y}" stroke="{colors.accent_color}" stroke-width="2" opacity="0.5"/>
</svg>"""
