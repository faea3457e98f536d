"""Unit tests for the static display tables and their fallbacks."""

import pytest

from weapon_search.domain.display import (
    DEFAULT_BACKGROUND,
    DEFAULT_ELEMENT_SYMBOL,
    ELEMENT_SYMBOLS,
    PLUG_CATEGORY_DISPLAY_NAMES,
    PLUG_CATEGORY_ORDER,
    RarityTheme,
    element_symbol,
    plug_category_rank,
    plug_category_title,
    rarity_theme,
    stat_bar_percentage,
)


class TestElementSymbol:
    """Test element symbol lookup."""

    @pytest.mark.parametrize(
        ("element", "symbol"),
        [("Kinetic", "◆"), ("Arc", "⚡"), ("Solar", "☀"), ("Void", "◉"), ("Strand", "✦"), ("Raid", "⬡")],
    )
    def test_known_elements(self, element, symbol):
        """Test symbols of the known elements."""
        assert element_symbol(element) == symbol

    def test_unknown_element_falls_back(self):
        """Test the fallback symbol for unknown elements."""
        assert element_symbol("Prismatic") == DEFAULT_ELEMENT_SYMBOL
        assert element_symbol(None) == DEFAULT_ELEMENT_SYMBOL

    def test_tables_are_read_only(self):
        """Test that lookup tables cannot be modified."""
        with pytest.raises(TypeError):
            ELEMENT_SYMBOLS["Prismatic"] = "?"  # type: ignore[index]
        with pytest.raises(TypeError):
            PLUG_CATEGORY_DISPLAY_NAMES["widgets"] = "Widgets"  # type: ignore[index]


class TestRarityTheme:
    """Test rarity colour themes."""

    def test_exotic_uses_dark_text(self):
        """Test the exotic theme."""
        theme = rarity_theme("Exotic")
        assert theme == RarityTheme(background="#CEAE33", text_color="#000000")
        assert theme.divider_color == "rgba(0,0,0,0.2)"

    def test_legendary_uses_light_text(self):
        """Test the legendary theme."""
        theme = rarity_theme("Legendary")
        assert theme.background == "#522F65"
        assert theme.divider_color == "rgba(255,255,255,0.3)"

    def test_unknown_rarity_falls_back(self):
        """Test the fallback theme for unknown rarities."""
        theme = rarity_theme("Currency")
        assert theme.background == DEFAULT_BACKGROUND
        assert theme.text_color == "#FFFFFF"


class TestPlugCategoryTitle:
    """Test plug category titles."""

    def test_known_identifiers(self):
        """Test titles of listed identifiers."""
        assert plug_category_title("intrinsics") == "Intrinsic"
        assert plug_category_title("origins") == "Origin Trait"
        assert plug_category_title("enhancements.perks.first") == "Perk 1"

    def test_unknown_identifier_is_derived(self):
        """Test title derivation for unlisted identifiers."""
        assert plug_category_title("widgets") == "Widgets"
        assert plug_category_title("v400.weapon_mod-slot") == "V400 weapon mod slot"

    def test_empty_identifier(self):
        """Test the title of an empty identifier."""
        assert plug_category_title("") == ""


class TestPlugCategoryRank:
    """Test plug category ranking."""

    def test_listed_identifiers_follow_table_order(self):
        """Test that listed identifiers rank in table order."""
        assert plug_category_rank("intrinsics") == 0
        assert plug_category_rank("barrels") < plug_category_rank("magazines") < plug_category_rank("frames")

    def test_unlisted_identifier_ranks_after_all(self):
        """Test that unlisted identifiers rank last."""
        assert plug_category_rank("widgets") == len(PLUG_CATEGORY_ORDER)
        assert plug_category_rank("widgets") > plug_category_rank("catalysts")


class TestStatBarPercentage:
    """Test stat bar fill computation."""

    def test_scales_against_max(self):
        """Test scaling against the maximum."""
        assert stat_bar_percentage(50, 200) == 25.0

    def test_clamps_to_range(self):
        """Test clamping to the valid range."""
        assert stat_bar_percentage(140) == 100.0
        assert stat_bar_percentage(-5) == 0.0

    def test_non_positive_max(self):
        """Test a non-positive maximum."""
        assert stat_bar_percentage(10, 0) == 0.0
