"""
AccessMatcher and rule activation (no parsing involved).
"""

from codegraph_lint import (
    UNKNOWN_PROPERTY,
    AccessMatcher,
    AccessSite,
    NoRestrictedPropertiesRule,
    RestrictionEntry,
    RestrictionModel,
)
from codegraph_lint.rules import NOOP_LISTENER


def matcher_for(*entries: RestrictionEntry) -> AccessMatcher:
    return AccessMatcher(RestrictionModel.build(entries))


class TestMatchSite:
    def test_scoped_report(self):
        matcher = matcher_for(RestrictionEntry(object="foo", property="bar", message="Use baz instead."))

        reports = matcher.match_site(AccessSite(node="n", object_name="foo", property_names=("bar",)))

        assert len(reports) == 1
        report = reports[0]
        assert report.node == "n"
        assert report.message_id == "restrictedObjectProperty"
        assert report.data == {"objectName": "foo", "propertyName": "bar", "message": " Use baz instead."}

    def test_global_property_report_has_no_object(self):
        matcher = matcher_for(RestrictionEntry(property="bar"))

        reports = matcher.match_site(AccessSite(node=None, object_name="foo", property_names=("bar",)))

        assert reports[0].message_id == "restrictedProperty"
        assert reports[0].object_name is None
        assert "objectName" not in reports[0].data

    def test_empty_message_has_no_suffix(self):
        matcher = matcher_for(RestrictionEntry(object="foo", message=""))

        reports = matcher.match_site(AccessSite(node=None, object_name="foo", property_names=("x",)))

        assert reports[0].message == ""

    def test_unqueryable_sites(self):
        matcher = matcher_for(RestrictionEntry(object="foo"))

        assert matcher.match_site(AccessSite(node=None, object_name=None, property_names=("x",))) == []
        assert matcher.match_site(AccessSite(node=None, object_name="foo", property_names=())) == []
        assert matcher.match_site(AccessSite(node=None, object_name="foo", property_names=(UNKNOWN_PROPERTY,))) == []

    def test_unknown_never_collides_with_restricted_name(self):
        matcher = matcher_for(RestrictionEntry(property="UNKNOWN_PROPERTY"), RestrictionEntry(property="None"))

        site = AccessSite(node=None, object_name="foo", property_names=(UNKNOWN_PROPERTY,))

        assert matcher.match_site(site) == []


class TestRuleActivation:
    def test_no_entries_registers_nothing(self):
        listener = NoRestrictedPropertiesRule.create([])

        assert listener is NOOP_LISTENER
        assert listener.is_noop
        assert listener.visit(object()) == []

    def test_entries_register_access_node_types(self):
        listener = NoRestrictedPropertiesRule.create([RestrictionEntry(object="foo")])

        assert not listener.is_noop
        assert {"member_expression", "subscript_expression", "variable_declarator"} <= listener.node_types
        assert {"assignment_expression", "assignment_pattern"} <= listener.node_types

    def test_meta_messages(self):
        meta = NoRestrictedPropertiesRule.meta

        assert meta.rule_id == "no-restricted-properties"
        assert set(meta.messages) == {"restrictedObjectProperty", "restrictedProperty"}
