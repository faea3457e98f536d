"""Application shell tying the search box to the weapon card."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

import orjson

from weapon_search.adapters.weapon_api import WeaponSearchClient
from weapon_search.config import Settings
from weapon_search.domain.weapon import Perk, Weapon
from weapon_search.observability.logging import configure_logging
from weapon_search.observability.tracing import init_tracing
from weapon_search.services.ornament_selector import OrnamentSelector
from weapon_search.services.suggestion_coordinator import SearchFunction, SuggestionCoordinator, SuggestionState
from weapon_search.services.weapon_card import WeaponCard, build_weapon_card


logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Start typing to search for a weapon"


class WeaponSearchSession:
    """One search box, the currently selected weapon and its ornament preview."""

    def __init__(
        self,
        search: SearchFunction,
        settings: Settings | None = None,
        *,
        on_change: Callable[[SuggestionState], None] | None = None,
        client: WeaponSearchClient | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.coordinator = SuggestionCoordinator.from_settings(
            self.settings, search, self._on_weapon_selected, on_change=on_change
        )
        self.ornaments = OrnamentSelector()
        self.selected_weapon: Weapon | None = None
        self.show_debug = False
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> WeaponSearchSession:
        """Build a session backed by the HTTP lookup client.

        Also configures logging from ``log_level`` / ``log_json`` and initializes tracing.
        """
        settings = settings or Settings()
        configure_logging(settings.log_level, settings.log_json)
        init_tracing()
        client = WeaponSearchClient(settings)
        return cls(client.search, settings, client=client, **kwargs)

    async def __aenter__(self) -> WeaponSearchSession:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.coordinator.aclose()
        if self._client is not None:
            await self._client.aclose()

    @property
    def message(self) -> str | None:
        return EMPTY_MESSAGE if self.selected_weapon is None else None

    def card(self) -> WeaponCard | None:
        if self.selected_weapon is None:
            return None
        return build_weapon_card(self.selected_weapon, self.ornaments, stat_max_value=self.settings.stat_max_value)

    def click_perk(self, perk: Perk) -> WeaponCard | None:
        """Apply an ornament click and return the refreshed card.

        Only perks the current card marks as clickable change the preview;
        clicks on any other perk leave the card as it is.
        """
        card = self.card()
        if card is None:
            return None
        if not _is_clickable_on(card, perk):
            logger.debug("Ignoring click on non-clickable perk %r", perk.name)
            return card
        self.ornaments.click(perk)
        return self.card()

    def set_debug(self, enabled: bool) -> None:
        self.show_debug = enabled

    def debug_json(self) -> str | None:
        """Pretty-printed wire payload of the selected weapon, when debugging is on."""
        if not self.show_debug or self.selected_weapon is None:
            return None
        return orjson.dumps(self.selected_weapon.to_wire(), option=orjson.OPT_INDENT_2).decode("utf-8")

    def _on_weapon_selected(self, weapon: Weapon) -> None:
        logger.info("Selected weapon %s (%d)", weapon.name, weapon.hash)
        self.selected_weapon = weapon
        self.ornaments.show_weapon(weapon)


def _is_clickable_on(card: WeaponCard, perk: Perk) -> bool:
    for section in card.perk_sections:
        entries = section.entries + tuple(entry for sub in section.subcategories for entry in sub.entries)
        if any(entry.clickable and entry.perk == perk for entry in entries):
            return True
    return False
