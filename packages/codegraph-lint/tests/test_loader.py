"""
Tests for restriction schema validation and config loading.
"""

import pytest
from pydantic import ValidationError

from codegraph_lint import (
    ConfigLoadError,
    RestrictionEntry,
    SchemaValidationError,
    load_restrictions_yaml,
    parse_restrictions,
)


class TestRestrictionEntry:
    """Schema of a single entry"""

    def test_aliases(self):
        entry = RestrictionEntry.model_validate({"object": "foo", "property": "bar", "message": "m"})

        assert entry.object_name == "foo"
        assert entry.property_name == "bar"
        assert entry.message == "m"

    @pytest.mark.parametrize(
        "data",
        [
            {"object_name": "foo"},
            {"object": "foo", "property_name": "bar"},
        ],
    )
    def test_python_field_names_rejected(self, data):
        with pytest.raises(ValidationError):
            RestrictionEntry.model_validate(data)

    @pytest.mark.parametrize(
        "data",
        [
            {"object": "foo", "message": None},
            {"object": None, "property": "bar"},
            {"object": "foo", "property": None},
        ],
    )
    def test_null_values_rejected(self, data):
        with pytest.raises(ValidationError, match="must be a string"):
            RestrictionEntry.model_validate(data)

    def test_describe(self):
        assert RestrictionEntry(property="bar").describe() == "*.bar"
        assert RestrictionEntry(object="foo", property="bar").describe() == "foo.bar"

    def test_requires_object_or_property(self):
        with pytest.raises(ValidationError, match="at least one"):
            RestrictionEntry.model_validate({"message": "only a message"})

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            RestrictionEntry.model_validate({"object": "foo", "propery": "bar"})

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            RestrictionEntry.model_validate({"object": 1})

    def test_hashable_and_frozen(self):
        a = RestrictionEntry(object="foo", property="bar")
        b = RestrictionEntry(object="foo", property="bar")

        assert a == b
        assert len({a, b}) == 1
        with pytest.raises(ValidationError):
            a.message = "x"


class TestParseRestrictions:
    """Raw data -> entries"""

    def test_bare_list(self):
        entries = parse_restrictions([{"object": "foo"}, {"property": "bar"}])

        assert [e.describe() for e in entries] == ["foo.*", "*.bar"]

    def test_mapping_with_key(self):
        entries = parse_restrictions({"restricted_properties": [{"object": "foo", "property": "bar"}]})

        assert len(entries) == 1

    @pytest.mark.parametrize("data", [None, [], {"restricted_properties": None}])
    def test_empty(self, data):
        assert parse_restrictions(data) == []

    def test_missing_key(self):
        with pytest.raises(ConfigLoadError, match="restricted_properties"):
            parse_restrictions({"rules": []})

    def test_wrong_top_level_type(self):
        with pytest.raises(ConfigLoadError):
            parse_restrictions("foo.bar")

    def test_duplicates_rejected(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_restrictions([{"object": "foo", "property": "bar"}, {"property": "bar", "object": "foo"}])

        assert exc_info.value.code == "SCHEMA_VALIDATION_ERROR"
        assert exc_info.value.errors[0]["index"] == 1
        assert "Duplicate" in exc_info.value.errors[0]["error"]

    def test_same_pattern_different_message_is_unique(self):
        entries = parse_restrictions(
            [{"object": "foo", "property": "bar"}, {"object": "foo", "property": "bar", "message": "m"}]
        )

        assert len(entries) == 2

    def test_collects_all_errors(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_restrictions([{"message": "x"}, "not a mapping", {"object": "ok"}, {"bogus": 1}])

        assert [e["index"] for e in exc_info.value.errors] == [0, 1, 3]


class TestLoadRestrictionsYaml:
    """File loading"""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "restrictions.yaml"
        path.write_text(
            "restricted_properties:\n"
            "  - object: foo\n"
            "    property: bar\n"
            "    message: Use baz instead.\n"
            "  - property: __defineGetter__\n",
            encoding="utf-8",
        )

        entries = load_restrictions_yaml(path)

        assert [e.describe() for e in entries] == ["foo.bar", "*.__defineGetter__"]
        assert entries[0].message == "Use baz instead."

    def test_load_json(self, tmp_path):
        path = tmp_path / "restrictions.json"
        path.write_text('[{"object": "require", "property": "ensure"}]', encoding="utf-8")

        entries = load_restrictions_yaml(path)

        assert entries[0].describe() == "require.ensure"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_restrictions_yaml(tmp_path / "nope.yaml")

        assert exc_info.value.code == "CONFIG_LOAD_ERROR"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("restricted_properties: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_restrictions_yaml(path)
