"""Domain layer - weapon value objects and static display tables.

No infrastructure dependencies: nothing here performs I/O or keeps state.
"""

from weapon_search.domain.display import (
    PLUG_CATEGORY_DISPLAY_NAMES,
    PLUG_CATEGORY_ORDER,
    RarityTheme,
    element_symbol,
    plug_category_rank,
    plug_category_title,
    rarity_theme,
    stat_bar_percentage,
)
from weapon_search.domain.weapon import (
    NO_DESCRIPTION,
    Element,
    Perk,
    PerkCategory,
    Rarity,
    SearchResponse,
    Weapon,
    WeaponStats,
)


__all__ = [
    "NO_DESCRIPTION",
    "PLUG_CATEGORY_DISPLAY_NAMES",
    "PLUG_CATEGORY_ORDER",
    "Element",
    "Perk",
    "PerkCategory",
    "Rarity",
    "RarityTheme",
    "SearchResponse",
    "Weapon",
    "WeaponStats",
    "element_symbol",
    "plug_category_rank",
    "plug_category_title",
    "rarity_theme",
    "stat_bar_percentage",
]
