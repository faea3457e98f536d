"""Unit tests for the weapon value objects."""

from pydantic import ValidationError
import pytest

from tests.fixtures.weapons import make_perk, make_weapon
from weapon_search.domain.weapon import NO_DESCRIPTION, Element, Perk, PerkCategory, Rarity, SearchResponse, Weapon


class TestEnums:
    """Test element and rarity parsing."""

    def test_element_parse_known_value(self):
        """Test parsing a known element."""
        assert Element.parse("Stasis") is Element.STASIS

    def test_element_parse_unknown_value_returns_none(self):
        """Test parsing an unknown element."""
        assert Element.parse("Prismatic") is None
        assert Element.parse(None) is None

    def test_rarity_parse(self):
        """Test rarity parsing."""
        assert Rarity.parse("Exotic") is Rarity.EXOTIC
        assert Rarity.parse("Currency") is None


class TestPerk:
    """Test the perk model."""

    def test_wire_payload_uses_camel_case(self):
        """Test camelCase wire field names."""
        perk = Perk.model_validate(
            {
                "name": "Outlaw",
                "description": "Precision kills reload faster.",
                "icon": "/icons/outlaw.png",
                "itemTypeDisplayName": "Trait",
                "plugCategoryIdentifier": "frames",
            }
        )
        assert perk.item_type_display_name == "Trait"
        assert perk.plug_category_identifier == "frames"

    def test_missing_description_gets_placeholder(self):
        """Test the placeholder for a missing description."""
        assert Perk(name="Outlaw").description == NO_DESCRIPTION
        assert Perk.model_validate(make_perk("Outlaw", description="")).description == NO_DESCRIPTION

    def test_blank_icon_is_none(self):
        """Test that a blank icon becomes None."""
        assert Perk.model_validate({"name": "Outlaw", "icon": ""}).icon is None

    def test_null_identifier_is_blank(self):
        """Test that a null plug identifier becomes blank."""
        perk = Perk.model_validate({"name": "Outlaw", "plugCategoryIdentifier": None})
        assert perk.plug_category_identifier == ""

    def test_name_contains_is_case_insensitive(self):
        """Test case-insensitive name matching."""
        perk = Perk(name="Bank Transfer ORNAMENT")
        assert perk.name_contains("ornament")
        assert perk.name_contains("nothing", "bank")
        assert not perk.name_contains("default")

    def test_perk_is_immutable(self):
        """Test that perks are frozen."""
        perk = Perk(name="Outlaw")
        with pytest.raises(ValidationError):
            perk.name = "Rampage"


class TestWeapon:
    """Test the weapon model."""

    def test_parses_full_payload(self, exotic_weapon):
        """Test parsing a complete weapon payload."""
        assert exotic_weapon.hash == 1345867570
        assert exotic_weapon.is_exotic is True
        assert exotic_weapon.element_kind is Element.KINETIC
        assert exotic_weapon.stats.reload_speed == 48
        assert isinstance(exotic_weapon.perk_groups[0], PerkCategory)
        assert exotic_weapon.perk_groups[0].category == "WEAPON COSMETICS"

    def test_unknown_enums_are_kept_verbatim(self):
        """Test that unknown element and rarity values are kept."""
        weapon = make_weapon(element="Prismatic", rarity="Mythic")
        assert weapon.element == "Prismatic"
        assert weapon.element_kind is None
        assert weapon.rarity_tier is None
        assert weapon.is_exotic is False

    def test_null_perk_groups_become_empty(self):
        """Test that null perk groups become empty."""
        weapon = Weapon.model_validate(
            {"hash": 7, "name": "Khvostov", "icon": "", "element": "Kinetic", "rarity": "Exotic", "perkGroups": None}
        )
        assert weapon.perk_groups == ()

    def test_to_wire_round_trips_field_names(self, legendary_weapon):
        """Test wire serialization field names."""
        payload = legendary_weapon.to_wire()
        assert payload["stats"]["reloadSpeed"] == 48
        assert "perkGroups" in payload
        assert "reload_speed" not in payload["stats"]


class TestSearchResponse:
    """Test the search response model."""

    def test_defaults_to_empty(self):
        """Test the empty default response."""
        response = SearchResponse.model_validate({"results": None})
        assert response.results == ()
        assert response.count == 0

    def test_preserves_result_order(self):
        """Test that result order is preserved."""
        response = SearchResponse.model_validate(
            {"results": [make_weapon(hash=2, name="B").to_wire(), make_weapon(hash=1, name="A").to_wire()], "count": 2}
        )
        assert [weapon.name for weapon in response.results] == ["B", "A"]
