"""Domain models for weapons and their perks.

Value objects are immutable (frozen) and mirror the payload returned by the
lookup service. Field names on the wire are camelCase; the Python attributes are
snake_case and both spellings are accepted on construction.

Unknown element or rarity values are kept verbatim on the weapon; callers that
need the enumerated form use ``Element.parse`` / ``Rarity.parse``, which return
``None`` for anything outside the known set.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


NO_DESCRIPTION = "No description available."


class Element(str, Enum):
    """Damage types a weapon can carry."""

    KINETIC = "Kinetic"
    ARC = "Arc"
    SOLAR = "Solar"
    VOID = "Void"
    STASIS = "Stasis"
    STRAND = "Strand"
    NONE = "None"
    RAID = "Raid"

    @classmethod
    def parse(cls, value: str | None) -> Element | None:
        try:
            return cls(value)
        except ValueError:
            return None


class Rarity(str, Enum):
    """Item tiers; the tier drives the card colour theme."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    LEGENDARY = "Legendary"
    EXOTIC = "Exotic"

    @classmethod
    def parse(cls, value: str | None) -> Rarity | None:
        try:
            return cls(value)
        except ValueError:
            return None


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the camelCase field names used by the lookup service."""
        return self.model_dump(mode="json", by_alias=True)


class WeaponStats(_WireModel):
    """Fixed stat block of a weapon."""

    impact: int = 0
    range: int = 0
    stability: int = 0
    handling: int = 0
    reload_speed: int = 0
    rpm: int = 0
    magazine: int = 0


class Perk(_WireModel):
    """A single plug that can sit in one of the weapon's sockets."""

    name: str
    description: str = NO_DESCRIPTION
    icon: str | None = None
    item_type_display_name: str = ""
    plug_category_identifier: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _default_description(cls, value: Any) -> Any:
        return value or NO_DESCRIPTION

    @field_validator("icon", mode="before")
    @classmethod
    def _blank_icon_is_missing(cls, value: Any) -> Any:
        return value or None

    @field_validator("item_type_display_name", "plug_category_identifier", mode="before")
    @classmethod
    def _none_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    def name_contains(self, *needles: str) -> bool:
        """Case-insensitive check whether the perk name contains any of ``needles``."""
        lowered = self.name.lower()
        return any(needle.lower() in lowered for needle in needles)


class PerkCategory(_WireModel):
    """A labelled group of perks as delivered by the lookup service."""

    category: str
    perks: tuple[Perk, ...] = Field(default_factory=tuple)

    @field_validator("perks", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return () if value is None else value


class Weapon(_WireModel):
    """Weapon value object; ``hash`` is the unique key."""

    hash: int
    name: str
    icon: str = ""
    element: str = Element.NONE.value
    rarity: str = ""
    stats: WeaponStats = Field(default_factory=WeaponStats)
    perk_groups: tuple[PerkCategory, ...] = Field(default_factory=tuple)

    @field_validator("perk_groups", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def element_kind(self) -> Element | None:
        return Element.parse(self.element)

    @property
    def rarity_tier(self) -> Rarity | None:
        return Rarity.parse(self.rarity)

    @property
    def is_exotic(self) -> bool:
        return self.rarity_tier is Rarity.EXOTIC


class SearchResponse(_WireModel):
    """Response of the lookup service: weapons in relevance order."""

    results: tuple[Weapon, ...] = Field(default_factory=tuple)
    count: int = 0

    @field_validator("results", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return () if value is None else value
