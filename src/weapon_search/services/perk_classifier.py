"""Turn a weapon's flat perk categories into display plans.

Pure functions: the same category and ornament state always yield an equal
plan. Three rendering modes are selected by the category label:

- ``WEAPON COSMETICS``: flat list, ornaments can be clicked to preview them.
- ``WEAPON PERKS``: perks grouped by plug category in a fixed socket order.
- anything else: flat list.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from weapon_search.domain.display import OTHER_PLUG_CATEGORY, plug_category_rank, plug_category_title
from weapon_search.domain.weapon import Perk, PerkCategory, Weapon


COSMETICS_CATEGORY = "WEAPON COSMETICS"
WEAPON_PERKS_CATEGORY = "WEAPON PERKS"

SHADER_PLUG_CATEGORY = "shader"
MASTERWORK_TRACKER_PLUG_CATEGORY = "v400.plugs.weapons.masterworks.trackers"
EXCLUDED_PLUG_CATEGORIES = frozenset({SHADER_PLUG_CATEGORY, MASTERWORK_TRACKER_PLUG_CATEGORY})

# Name fragments that mark a cosmetic as an ornament slot entry
ORNAMENT_MARKERS = ("ornament", "default")

OrnamentResolver = Callable[[Perk], bool]


class DisplayMode(str, Enum):
    COSMETICS = "cosmetics"
    WEAPON_PERKS = "weapon_perks"
    DEFAULT = "default"

    @classmethod
    def for_label(cls, label: str) -> DisplayMode:
        normalized = label.upper()
        if normalized == COSMETICS_CATEGORY:
            return cls.COSMETICS
        if normalized == WEAPON_PERKS_CATEGORY:
            return cls.WEAPON_PERKS
        return cls.DEFAULT


@dataclass(frozen=True, slots=True)
class PerkEntry:
    """One perk as it should be drawn, with its tooltip text."""

    perk: Perk
    clickable: bool = False
    selected: bool = False

    @property
    def tooltip_title(self) -> str:
        return self.perk.name

    @property
    def tooltip_description(self) -> str:
        return self.perk.description


@dataclass(frozen=True, slots=True)
class PerkSubcategory:
    identifier: str
    title: str
    entries: tuple[PerkEntry, ...]


@dataclass(frozen=True, slots=True)
class PerkCategoryPlan:
    """Rendering plan for one perk category.

    Flat modes fill ``entries``; weapon-perks mode fills ``subcategories``.
    """

    title: str
    mode: DisplayMode
    clickable: bool
    entries: tuple[PerkEntry, ...] = ()
    subcategories: tuple[PerkSubcategory, ...] = ()

    @property
    def show_click_hint(self) -> bool:
        return self.clickable

    @property
    def perks(self) -> tuple[Perk, ...]:
        """All perks of the plan in display order."""
        if self.subcategories:
            return tuple(entry.perk for sub in self.subcategories for entry in sub.entries)
        return tuple(entry.perk for entry in self.entries)


def _never_active(_perk: Perk) -> bool:
    return False


def is_displayable(perk: Perk) -> bool:
    return perk.plug_category_identifier not in EXCLUDED_PLUG_CATEGORIES


def filter_displayable_perks(perks: Iterable[Perk]) -> list[Perk]:
    """Drop shaders and masterwork trackers."""
    return [perk for perk in perks if is_displayable(perk)]


def is_ornament_named(perk: Perk) -> bool:
    return perk.name_contains(*ORNAMENT_MARKERS)


def group_perks_by_plug_category(perks: Iterable[Perk]) -> dict[str, list[Perk]]:
    """Group perks by plug category identifier, keeping first-seen key order.

    Perks without an identifier fall into the ``other`` bucket.
    """
    groups: dict[str, list[Perk]] = {}
    for perk in perks:
        groups.setdefault(perk.plug_category_identifier or OTHER_PLUG_CATEGORY, []).append(perk)
    return groups


def sort_plug_categories(identifiers: Iterable[str]) -> list[str]:
    """Order identifiers by the fixed socket order; unlisted ones keep encounter order at the end."""
    return sorted(identifiers, key=plug_category_rank)


def classify_perk_category(
    category: PerkCategory,
    *,
    is_exotic: bool,
    is_active_ornament: OrnamentResolver | None = None,
) -> PerkCategoryPlan | None:
    """Build the rendering plan for ``category``.

    Returns:
        The plan, or None when nothing is left after filtering and the
        category must not be rendered at all
    """
    perks = filter_displayable_perks(category.perks)
    if not perks:
        return None

    is_active = is_active_ornament or _never_active
    mode = DisplayMode.for_label(category.category)

    if mode is DisplayMode.WEAPON_PERKS:
        groups = group_perks_by_plug_category(perks)
        subcategories = tuple(
            PerkSubcategory(
                identifier=identifier,
                title=plug_category_title(identifier),
                entries=tuple(PerkEntry(perk) for perk in groups[identifier]),
            )
            for identifier in sort_plug_categories(groups)
        )
        return PerkCategoryPlan(
            title=category.category,
            mode=mode,
            clickable=False,
            subcategories=subcategories,
        )

    if mode is DisplayMode.COSMETICS:
        has_ornaments = any(is_ornament_named(perk) for perk in perks)
        clickable = is_exotic or has_ornaments
    else:
        clickable = False

    entries = tuple(_flat_entry(perk, mode, is_exotic, is_active) for perk in perks)
    return PerkCategoryPlan(title=category.category, mode=mode, clickable=clickable, entries=entries)


def _flat_entry(perk: Perk, mode: DisplayMode, is_exotic: bool, is_active: OrnamentResolver) -> PerkEntry:
    # Outside cosmetics only ornament/default-named perks are clickable, regardless of tier.
    if mode is DisplayMode.COSMETICS:
        clickable = is_exotic or is_ornament_named(perk)
    else:
        clickable = is_ornament_named(perk)
    return PerkEntry(perk=perk, clickable=clickable, selected=clickable and is_active(perk))


def classify_perk_groups(
    perk_groups: Sequence[PerkCategory],
    *,
    is_exotic: bool,
    is_active_ornament: OrnamentResolver | None = None,
) -> tuple[PerkCategoryPlan, ...]:
    """Plans for every category that still has perks after filtering."""
    plans = (
        classify_perk_category(category, is_exotic=is_exotic, is_active_ornament=is_active_ornament)
        for category in perk_groups
    )
    return tuple(plan for plan in plans if plan is not None)


def classify_weapon(weapon: Weapon, is_active_ornament: OrnamentResolver | None = None) -> tuple[PerkCategoryPlan, ...]:
    return classify_perk_groups(weapon.perk_groups, is_exotic=weapon.is_exotic, is_active_ornament=is_active_ornament)
