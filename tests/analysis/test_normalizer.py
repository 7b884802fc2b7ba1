"""Tests for license name normalization."""
import pytest

from license_auditor.analysis.normalizer import (
    apply_alias,
    clean_license_name,
    extract_parenthetical,
    normalize_license_name,
    strip_trailing_decoration,
)
from license_auditor.analysis.policy import PolicyStore


class TestExtractParenthetical:
    """Tests for extract_parenthetical step."""

    def test_extracts_leading_group(self) -> None:
        """Test that a leading (...) group becomes the working value."""
        assert extract_parenthetical("(Apache-2.0) Apache Commons IO") == "Apache-2.0"

    def test_stops_at_first_closing_paren(self) -> None:
        """Test that extraction ends at the first closing parenthesis."""
        value = "(The MIT License) Project Lombok (org.projectlombok"
        assert extract_parenthetical(value) == "The MIT License"

    def test_no_leading_paren_returns_trimmed(self) -> None:
        """Test that strings without a leading group are only trimmed."""
        assert extract_parenthetical("  MIT License  ") == "MIT License"

    def test_empty_group(self) -> None:
        """Test that an empty or blank group yields an empty string."""
        assert extract_parenthetical("()") == ""
        assert extract_parenthetical("(   )") == ""


class TestStripTrailingDecoration:
    """Tests for strip_trailing_decoration step."""

    def test_strips_unclosed_fragment(self) -> None:
        """Test that a trailing unclosed (... fragment is removed."""
        assert strip_trailing_decoration("Apache License 2.0 (org.folio") == (
            "Apache License 2.0"
        )

    def test_strips_dash_suffix(self) -> None:
        """Test that a trailing ' - url' suffix is removed."""
        value = "Apache License 2.0 - https://www.apache.org/licenses"
        assert strip_trailing_decoration(value) == "Apache License 2.0"

    def test_strips_coordinate_parenthetical(self) -> None:
        """Test that a trailing (groupId:artifactId...) is removed."""
        value = "MIT (org.example:lib:1.0)"
        assert strip_trailing_decoration(value) == "MIT"

    def test_keeps_closed_non_coordinate_parenthetical(self) -> None:
        """Test that a closed parenthetical without coordinates is kept."""
        assert strip_trailing_decoration("The MIT License (MIT)") == (
            "The MIT License (MIT)"
        )

    def test_hyphenated_identifier_untouched(self) -> None:
        """Test that hyphens inside identifiers are not treated as suffixes."""
        assert strip_trailing_decoration("LGPL-2.1-or-later") == "LGPL-2.1-or-later"


class TestApplyAlias:
    """Tests for apply_alias step."""

    def test_known_alias_mapped(self) -> None:
        """Test that a known spelling maps to its canonical name."""
        assert apply_alias("Apache 2.0", {"Apache 2.0": "Apache-2.0"}) == "Apache-2.0"

    def test_unknown_passes_through(self) -> None:
        """Test that unknown names are returned unchanged."""
        assert apply_alias("Custom", {"Apache 2.0": "Apache-2.0"}) == "Custom"


class TestNormalizeLicenseName:
    """Tests for normalize_license_name."""

    def test_parenthetical_with_artifact(self, store: PolicyStore) -> None:
        """Test the Maven third-party report format."""
        assert normalize_license_name("(Apache-2.0) Apache Commons IO", store) == (
            "Apache-2.0"
        )

    def test_parenthetical_alias_and_coordinates(self, store: PolicyStore) -> None:
        """Test extraction, stripping and alias lookup together."""
        raw = "(The MIT License) Project Lombok (org.projectlombok"
        assert normalize_license_name(raw, store) == "MIT License"

    def test_alias_lookup(self, store: PolicyStore) -> None:
        """Test that aliases map to canonical names."""
        assert normalize_license_name("Apache 2.0", store) == "Apache-2.0"
        assert normalize_license_name("LGPL", store) == "LGPL-2.1"

    def test_unknown_license_cleaned(self, store: PolicyStore) -> None:
        """Test that unknown licenses are cleaned but not mapped."""
        assert normalize_license_name("(Custom License) some-artifact", store) == (
            "Custom License"
        )
        assert normalize_license_name("Some Unknown License", store) == (
            "Some Unknown License"
        )

    @pytest.mark.parametrize("raw", ["", "   ", "()", "(   )"])
    def test_blank_input_yields_empty(self, raw: str, store: PolicyStore) -> None:
        """Test that blank input never yields a stray parenthesis."""
        assert normalize_license_name(raw, store) == ""

    def test_canonical_names_are_fixed_points(self, store: PolicyStore) -> None:
        """Test that every alias target normalizes to itself."""
        for canonical in set(store.aliases.values()):
            assert normalize_license_name(canonical, store) == canonical

    def test_normalization_is_idempotent(self, store: PolicyStore) -> None:
        """Test that normalizing twice equals normalizing once."""
        raws = [
            "(Apache-2.0) Apache Commons IO (commons-io",
            "The MIT License",
            "Apache License 2.0 - https://www.apache.org/licenses",
            "(Custom License) some-artifact",
        ]
        for raw in raws:
            once = normalize_license_name(raw, store)
            assert normalize_license_name(once, store) == once

    def test_empty_store_still_cleans(self) -> None:
        """Test that cleaning works without any alias table."""
        assert normalize_license_name("(MIT) lib (org.x:y", PolicyStore()) == "MIT"


class TestCleanLicenseName:
    """Tests for clean_license_name."""

    def test_does_not_apply_aliases(self) -> None:
        """Test that clean_license_name stops before alias lookup."""
        assert clean_license_name("(The MIT License) Project Lombok") == (
            "The MIT License"
        )
