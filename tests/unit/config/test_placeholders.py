"""Unit tests for placeholder substitution."""

import pytest

from scanner_conf.core.placeholders import extract_placeholders, resolve_placeholders
from scanner_conf.exceptions import PlaceholderCycleError


class TestExtractPlaceholders:
    """Test extract_placeholders function."""

    def test_extracts_names(self):
        """Test that every ${...} name is found."""
        assert extract_placeholders("${sonar.projectKey}-${env.BRANCH}") == {
            "sonar.projectKey",
            "env.BRANCH",
        }

    def test_no_placeholders(self):
        """Test plain values."""
        assert extract_placeholders("plain {value}") == set()

    def test_hyphenated_name_is_not_a_placeholder(self):
        """Test that names are limited to word characters and dots."""
        assert extract_placeholders("${a-b}") == set()


class TestHyphenatedReference:
    """Test that a hyphenated reference is kept as literal text."""

    def test_left_literal(self):
        props = {"a-b": "value", "sonar.projectName": "${a-b}"}

        resolved = resolve_placeholders(props, {})

        assert resolved["sonar.projectName"] == "${a-b}"


class TestResolvePlaceholders:
    """Test resolve_placeholders function."""

    def test_property_reference(self):
        """Test substitution of another property."""
        props = {"sonar.projectKey": "demo", "sonar.projectName": "${sonar.projectKey}-app"}

        resolved = resolve_placeholders(props, {})

        assert resolved["sonar.projectName"] == "demo-app"

    def test_env_reference(self):
        """Test substitution of an environment variable."""
        props = {"sonar.branch.name": "${env.BRANCH}"}

        resolved = resolve_placeholders(props, {"BRANCH": "main"})

        assert resolved["sonar.branch.name"] == "main"

    def test_missing_references_become_empty(self):
        """Test that unknown keys and variables resolve to empty strings."""
        props = {"a": "x${missing}y${env.MISSING}z"}

        assert resolve_placeholders(props, {})["a"] == "xyz"

    def test_transitive_reference(self):
        """Test chained references."""
        props = {"a": "${b}", "b": "${c}!", "c": "value"}

        assert resolve_placeholders(props)["a"] == "value!"

    def test_keys_and_order_preserved(self):
        """Test that the result has the same keys in the same order."""
        props = {"z": "1", "a": "${z}", "m": "plain"}

        resolved = resolve_placeholders(props, {})

        assert list(resolved) == ["z", "a", "m"]
        assert resolved == {"z": "1", "a": "1", "m": "plain"}

    def test_input_not_mutated(self):
        """Test that the input bag is untouched."""
        props = {"a": "${b}", "b": "1"}

        resolve_placeholders(props, {})

        assert props == {"a": "${b}", "b": "1"}

    def test_self_reference_is_cycle(self):
        """Test that a key referring to itself fails."""
        with pytest.raises(PlaceholderCycleError, match="Found a cycle resolving key 'a'"):
            resolve_placeholders({"a": "${a}"}, {})

    def test_indirect_cycle(self):
        """Test that a reference loop through several keys fails."""
        with pytest.raises(PlaceholderCycleError):
            resolve_placeholders({"a": "${b}", "b": "${c}", "c": "${a}"}, {})
