"""Service layer: search coordination, perk classification and ornament state."""

from .debouncer import QueryDebouncer
from .ornament_selector import OrnamentMode, OrnamentSelector, OrnamentState
from .perk_classifier import (
    DisplayMode,
    PerkCategoryPlan,
    PerkEntry,
    PerkSubcategory,
    classify_perk_category,
    classify_perk_groups,
    classify_weapon,
    filter_displayable_perks,
)
from .suggestion_coordinator import SuggestionCoordinator, SuggestionState
from .weapon_card import StatBar, WeaponCard, build_weapon_card


__all__ = [
    "DisplayMode",
    "OrnamentMode",
    "OrnamentSelector",
    "OrnamentState",
    "PerkCategoryPlan",
    "PerkEntry",
    "PerkSubcategory",
    "QueryDebouncer",
    "StatBar",
    "SuggestionCoordinator",
    "SuggestionState",
    "WeaponCard",
    "build_weapon_card",
    "classify_perk_category",
    "classify_perk_groups",
    "classify_weapon",
    "filter_displayable_perks",
]
