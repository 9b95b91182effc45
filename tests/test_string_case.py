"""
Test the entity name conversions.

These cover the prefix normalization, the suffix based pluralization and the
camelCase / spaced lowercase conversions, including their known quirks.
"""

import pytest

from snippet_generator.utils.string_case import (
    camelcase,
    normalize_entity_name,
    pluralize,
    private_field_name,
    spaced_lowercase,
)


class TestNormalizeEntityName:
    """Tests for stripping the ``Ref_`` marker."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Ref_Product", "Product"),
            ("ref_Product", "Product"),
            ("REF_Country", "Country"),
            ("Product", "Product"),
            ("Ref_", ""),
            ("ProductRef_", "ProductRef_"),
            ("Refund", "Refund"),
            ("", ""),
        ],
    )
    def test_normalize(self, name: str, expected: str) -> None:
        """Test that only a leading marker is removed."""
        assert normalize_entity_name(name) == expected

    @pytest.mark.parametrize("name", ["Product", "CampaignAttribute", "Refund", "x"])
    def test_idempotent_without_marker(self, name: str) -> None:
        """Test that normalizing twice changes nothing when no marker is present."""
        assert normalize_entity_name(normalize_entity_name(name)) == normalize_entity_name(name)

    def test_only_one_marker_removed(self) -> None:
        """Test that a doubled marker is only stripped once."""
        assert normalize_entity_name("Ref_Ref_Product") == "Ref_Product"


class TestPluralize:
    """Tests for the suffix based pluralization rules."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Category", "Categories"),
            ("Product", "Products"),
            ("Campaign", "Campaigns"),
            ("Status", "Status"),
            ("Key", "Keies"),
            ("CampaignAttribute", "CampaignAttributes"),
            ("Courtesy", "Courtesys"),
            ("CATEGORY", "CATEGORies"),
            ("Address", "Address"),
            ("Box", "Boxs"),
        ],
    )
    def test_rule_table(self, name: str, expected: str) -> None:
        """Test the literal outputs of the three rules, quirks included."""
        assert pluralize(name) == expected

    def test_single_characters(self) -> None:
        """Test that single characters follow the same suffix logic."""
        assert pluralize("y") == "ies"
        assert pluralize("s") == "s"
        assert pluralize("A") == "As"

    def test_empty_name(self) -> None:
        """Test that the empty string still yields a defined result."""
        assert pluralize("") == "s"

    @pytest.mark.parametrize("name", ["a", "y", "s", "Sy", "Entry", "Glass", "Item"])
    def test_non_empty_result(self, name: str) -> None:
        """Test that non-empty names always pluralize to non-empty names."""
        assert pluralize(name)
        assert pluralize(name) == pluralize(name)


class TestCamelcase:
    """Tests for camelCase conversion."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("CampaignAttribute", "campaignAttribute"),
            ("A", "a"),
            ("", ""),
            ("Product", "product"),
            ("HTTPServer", "hTTPServer"),
            ("already", "already"),
        ],
    )
    def test_camelcase(self, name: str, expected: str) -> None:
        """Test that only the first character is lower-cased."""
        assert camelcase(name) == expected

    def test_length_preserved(self) -> None:
        """Test that the conversion never changes the length."""
        for name in ("CampaignAttribute", "X", "AbC"):
            assert len(camelcase(name)) == len(name)

    def test_none(self) -> None:
        """Test that ``None`` converts to an empty string."""
        assert camelcase(None) == ""


class TestSpacedLowercase:
    """Tests for spaced lowercase conversion."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("CampaignAttribute", "campaign attribute"),
            ("MyGreatClass", "my great class"),
            ("CampaignAttributes", "campaign attributes"),
            ("Product", "product"),
            ("HTTPServer", "httpserver"),
            ("XMLHttpRequest", "xmlhttp request"),
            ("Order2Item", "order2 item"),
            ("", ""),
        ],
    )
    def test_spaced_lowercase(self, name: str, expected: str) -> None:
        """Test that spaces are only inserted on lowercase/digit to uppercase transitions."""
        assert spaced_lowercase(name) == expected

    def test_word_characters_preserved(self) -> None:
        """Test that removing the spaces gives back the lower-cased input."""
        name = "CustomerOrderLine"
        assert spaced_lowercase(name).replace(" ", "") == name.lower()


def test_private_field_name() -> None:
    """Test the underscore prefixed field naming."""
    assert private_field_name("ProductRepository") == "_productRepository"
    assert private_field_name("") == ""
