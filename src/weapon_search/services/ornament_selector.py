"""Ornament preview state for the displayed weapon."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

from weapon_search.domain.weapon import Perk, Weapon


logger = logging.getLogger(__name__)


class OrnamentMode(str, Enum):
    BASE = "base"
    OVERRIDDEN = "overridden"


@dataclass(frozen=True, slots=True)
class OrnamentState:
    mode: OrnamentMode
    icon: str | None = None

    @classmethod
    def base(cls) -> OrnamentState:
        return cls(mode=OrnamentMode.BASE)

    @classmethod
    def overridden(cls, icon: str) -> OrnamentState:
        return cls(mode=OrnamentMode.OVERRIDDEN, icon=icon)


class OrnamentSelector:
    """Track which ornament icon, if any, replaces the weapon's base icon.

    Clicking a perk named like "Default ..." restores the base icon. Clicking
    the active ornament again toggles it off. Showing a weapon with a different
    hash always resets to the base icon.
    """

    def __init__(self) -> None:
        self._state = OrnamentState.base()
        self._weapon_hash: int | None = None

    @property
    def state(self) -> OrnamentState:
        return self._state

    @property
    def selected_icon(self) -> str | None:
        return self._state.icon

    def show_weapon(self, weapon: Weapon) -> None:
        if weapon.hash != self._weapon_hash:
            self._weapon_hash = weapon.hash
            self._state = OrnamentState.base()

    def reset(self) -> None:
        self._state = OrnamentState.base()

    def click(self, perk: Perk) -> OrnamentState:
        if perk.name_contains("default"):
            self._state = OrnamentState.base()
        elif perk.icon:
            if self._state.icon == perk.icon:
                self._state = OrnamentState.base()
            else:
                self._state = OrnamentState.overridden(perk.icon)
        logger.debug("Ornament click on %r -> %s", perk.name, self._state.mode.value)
        return self._state

    def is_active(self, perk: Perk) -> bool:
        return self._state.icon is not None and perk.icon == self._state.icon

    def displayed_icon(self, weapon: Weapon) -> str:
        return self._state.icon or weapon.icon
