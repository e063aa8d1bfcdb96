"""Tests for identifier derivation."""

import pytest

from .lib import to_camel_case


class TestToCamelCase:
    """Tests for to_camel_case."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "label,expected",
        [
            ("New dropdown", "newDropdown"),
            ("Enable Feature", "enableFeature"),
            ("Favorite Color", "favoriteColor"),
            ("New section-heading", "newSectionHeading"),
            ("first_name", "firstName"),
            ("  padded  label  ", "paddedLabel"),
            ("E-mail address (work)", "eMailAddressWork"),
            ("Address line 2", "addressLine2"),
            ("alreadyCamel", "alreadyCamel"),
        ],
    )
    def test_labels(self, label, expected):
        assert to_camel_case(label) == expected

    @pytest.mark.unit
    def test_empty(self):
        assert to_camel_case("") == ""

    @pytest.mark.unit
    def test_only_separators(self):
        assert to_camel_case("!!! ---") == ""

    @pytest.mark.unit
    def test_non_ascii_letters_are_separators(self):
        assert to_camel_case("café menu") == "cafMenu"
