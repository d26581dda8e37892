"""Unit tests for property bag merging."""

from scanner_conf.config.merging import merge_with_precedence


class TestMergeWithPrecedence:
    """Test merge_with_precedence function."""

    def test_later_source_wins(self):
        """Test that a key present in both sources takes the later value."""
        first = {"sonar.projectKey": "from-file", "sonar.sources": "src"}
        second = {"sonar.projectKey": "from-cli"}

        merged = merge_with_precedence(first, second)

        assert merged["sonar.projectKey"] == "from-cli"
        assert merged["sonar.sources"] == "src"

    def test_full_source_chain(self):
        """Test the five-layer order used by the facade."""
        global_props = {"k": "global", "only.global": "g"}
        project_props = {"k": "project", "only.project": "p"}
        system_props = {"k": "system"}
        env_props = {"k": "env"}
        cli_props = {"k": "cli"}

        merged = merge_with_precedence(
            global_props, project_props, system_props, env_props, cli_props
        )

        assert merged == {"k": "cli", "only.global": "g", "only.project": "p"}

    def test_inputs_not_mutated(self):
        """Test that source bags are left untouched."""
        first = {"a": "1"}
        second = {"a": "2", "b": "3"}

        merge_with_precedence(first, second)

        assert first == {"a": "1"}
        assert second == {"a": "2", "b": "3"}

    def test_first_insertion_order_kept(self):
        """Test that overwritten keys keep their first position."""
        merged = merge_with_precedence({"a": "1", "b": "2"}, {"c": "3", "a": "4"})

        assert list(merged) == ["a", "b", "c"]

    def test_none_and_empty_sources_skipped(self):
        """Test that missing layers are ignored."""
        assert merge_with_precedence(None, {}, {"a": "1"}, None) == {"a": "1"}

    def test_no_sources(self):
        """Test merging nothing."""
        assert merge_with_precedence() == {}
