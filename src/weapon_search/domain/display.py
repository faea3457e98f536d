"""Static display tables and their fallback rules.

Every table is a read-only mapping. Lookups go through the functions below so
that the behaviour for unknown keys is explicit and covered by tests rather
than left to whatever ``dict.get`` default a caller happens to pick.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from types import MappingProxyType
from typing import Final

from weapon_search.domain.weapon import Element, Rarity


DEFAULT_ELEMENT_SYMBOL: Final = "○"
DEFAULT_BACKGROUND: Final = "#333"
DEFAULT_TEXT_COLOR: Final = "#FFFFFF"
DARK_TEXT_COLOR: Final = "#000000"
DARK_TEXT_DIVIDER: Final = "rgba(0,0,0,0.2)"
LIGHT_TEXT_DIVIDER: Final = "rgba(255,255,255,0.3)"
OTHER_PLUG_CATEGORY: Final = "other"

ELEMENT_SYMBOLS = MappingProxyType(
    {
        Element.KINETIC: "◆",
        Element.ARC: "⚡",
        Element.SOLAR: "☀",
        Element.VOID: "◉",
        Element.STASIS: "❄",
        Element.STRAND: "✦",
        Element.NONE: "○",
        Element.RAID: "⬡",
    }
)

RARITY_BACKGROUNDS = MappingProxyType(
    {
        Rarity.COMMON: "#FFFFFF",
        Rarity.UNCOMMON: "#1FAA3E",
        Rarity.RARE: "#4E84D4",
        Rarity.LEGENDARY: "#522F65",
        Rarity.EXOTIC: "#CEAE33",
    }
)

RARITY_TEXT_COLORS = MappingProxyType(
    {
        Rarity.COMMON: DARK_TEXT_COLOR,
        Rarity.UNCOMMON: "#FFFFFF",
        Rarity.RARE: "#FFFFFF",
        Rarity.LEGENDARY: "#FFFFFF",
        Rarity.EXOTIC: DARK_TEXT_COLOR,
    }
)

# Human-readable names for plugCategoryIdentifier values
PLUG_CATEGORY_DISPLAY_NAMES = MappingProxyType(
    {
        "barrels": "Barrels",
        "frames": "Frames",
        "magazines": "Magazines",
        "batteries": "Batteries",
        "bowstrings": "Bowstrings",
        "arrows": "Arrows",
        "blades": "Blades",
        "guards": "Guards",
        "grips": "Grips",
        "stocks": "Stocks",
        "scopes": "Scopes",
        "tubes": "Tubes",
        "hafts": "Hafts",
        "launchers": "Launchers",
        "intrinsics": "Intrinsic",
        "origins": "Origin Trait",
        "catalysts": "Catalyst",
        "enhancements.weapon": "Enhanced Perks",
        "enhancements.perks.first": "Perk 1",
        "enhancements.perks.second": "Perk 2",
    }
)

PLUG_CATEGORY_ORDER: Final[tuple[str, ...]] = (
    "intrinsics",
    "barrels",
    "bowstrings",
    "blades",
    "hafts",
    "tubes",
    "launchers",
    "scopes",
    "magazines",
    "batteries",
    "arrows",
    "guards",
    "grips",
    "stocks",
    "frames",
    "origins",
    "catalysts",
)

_PLUG_CATEGORY_RANK = MappingProxyType({identifier: rank for rank, identifier in enumerate(PLUG_CATEGORY_ORDER)})
_TITLE_SEPARATORS = re.compile(r"[._-]")


@dataclass(frozen=True, slots=True)
class RarityTheme:
    """Colour theme of a weapon card."""

    background: str
    text_color: str

    @property
    def divider_color(self) -> str:
        return DARK_TEXT_DIVIDER if self.text_color == DARK_TEXT_COLOR else LIGHT_TEXT_DIVIDER


def element_symbol(element: str | None) -> str:
    """Glyph for an element name; unknown elements get the neutral circle."""
    kind = Element.parse(element)
    if kind is None:
        return DEFAULT_ELEMENT_SYMBOL
    return ELEMENT_SYMBOLS[kind]


def rarity_theme(rarity: str | None) -> RarityTheme:
    """Card colours for a rarity name; unknown tiers get a dark grey card with white text."""
    tier = Rarity.parse(rarity)
    if tier is None:
        return RarityTheme(background=DEFAULT_BACKGROUND, text_color=DEFAULT_TEXT_COLOR)
    return RarityTheme(background=RARITY_BACKGROUNDS[tier], text_color=RARITY_TEXT_COLORS[tier])


def plug_category_title(identifier: str) -> str:
    """Readable subcategory title for a plug category identifier.

    Known identifiers use the fixed table. Anything else gets its first letter
    upper-cased and every ``.``, ``_`` or ``-`` replaced by a space.
    """
    known = PLUG_CATEGORY_DISPLAY_NAMES.get(identifier)
    if known is not None:
        return known
    return identifier[:1].upper() + _TITLE_SEPARATORS.sub(" ", identifier[1:])


def plug_category_rank(identifier: str) -> int:
    """Position of ``identifier`` in the display order; unlisted identifiers rank last."""
    return _PLUG_CATEGORY_RANK.get(identifier, len(PLUG_CATEGORY_ORDER))


def stat_bar_percentage(value: int, max_value: int = 100) -> float:
    """Fill percentage of a stat bar, clamped to ``[0, 100]``."""
    if max_value <= 0:
        return 0.0
    return min(max(value / max_value * 100, 0.0), 100.0)
