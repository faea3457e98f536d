"""Presentation model of a selected weapon."""

from __future__ import annotations

from dataclasses import dataclass

from weapon_search.domain.display import RarityTheme, element_symbol, rarity_theme, stat_bar_percentage
from weapon_search.domain.weapon import Weapon
from weapon_search.services.ornament_selector import OrnamentSelector
from weapon_search.services.perk_classifier import PerkCategoryPlan, classify_weapon


DEFAULT_STAT_MAX = 100

# (label, WeaponStats attribute) in display order
STAT_BAR_FIELDS: tuple[tuple[str, str], ...] = (
    ("Impact", "impact"),
    ("Range", "range"),
    ("Stability", "stability"),
    ("Handling", "handling"),
    ("Reload", "reload_speed"),
)


@dataclass(frozen=True, slots=True)
class StatBar:
    label: str
    value: int
    percentage: float


@dataclass(frozen=True, slots=True)
class WeaponCard:
    name: str
    element: str
    element_symbol: str
    theme: RarityTheme
    icon: str
    rpm: int
    magazine: int
    stat_bars: tuple[StatBar, ...]
    perk_sections: tuple[PerkCategoryPlan, ...]

    @property
    def rpm_label(self) -> str:
        return f"{self.rpm} RPM"

    @property
    def magazine_label(self) -> str:
        return f"{self.magazine} Mag"

    @property
    def has_perks(self) -> bool:
        return bool(self.perk_sections)


def build_stat_bars(weapon: Weapon, max_value: int = DEFAULT_STAT_MAX) -> tuple[StatBar, ...]:
    bars = []
    for label, attribute in STAT_BAR_FIELDS:
        value = getattr(weapon.stats, attribute)
        bars.append(StatBar(label=label, value=value, percentage=stat_bar_percentage(value, max_value)))
    return tuple(bars)


def build_weapon_card(
    weapon: Weapon,
    ornaments: OrnamentSelector | None = None,
    *,
    stat_max_value: int = DEFAULT_STAT_MAX,
) -> WeaponCard:
    """Assemble everything needed to draw ``weapon``.

    When an ``OrnamentSelector`` is given it is first pointed at ``weapon``,
    which resets any preview left over from a different weapon, and then
    supplies the displayed icon and the selected cosmetic.
    """
    if ornaments is not None:
        ornaments.show_weapon(weapon)
        icon = ornaments.displayed_icon(weapon)
        resolver = ornaments.is_active
    else:
        icon = weapon.icon
        resolver = None

    return WeaponCard(
        name=weapon.name,
        element=weapon.element,
        element_symbol=element_symbol(weapon.element),
        theme=rarity_theme(weapon.rarity),
        icon=icon,
        rpm=weapon.stats.rpm,
        magazine=weapon.stats.magazine,
        stat_bars=build_stat_bars(weapon, stat_max_value),
        perk_sections=classify_weapon(weapon, resolver),
    )
