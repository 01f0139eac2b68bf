"""Unit tests for CheckEntry severity resolution and Rule evaluation."""

from operator import attrgetter
from types import SimpleNamespace

import pytest

from common_validation.core.severity import CascadeMode, Severity
from common_validation.errors import MissingArgumentError
from common_validation.rules.check import CheckEntry, resolve_severity
from common_validation.rules.rule import Rule


def _entry(**kwargs) -> CheckEntry:
    return CheckEntry(predicate=lambda _o, v: bool(v), message="must be truthy", **kwargs)


class TestResolveSeverity:
    def test_no_layer_uses_default(self) -> None:
        entry = _entry(severity=Severity.AT_OWN_RISK)
        entry.set_layer_severity("entity", Severity.NOT_RECOMMENDED)
        assert resolve_severity(entry, None) == Severity.AT_OWN_RISK

    def test_layer_override_applies(self) -> None:
        entry = _entry(severity=Severity.AT_OWN_RISK)
        entry.set_layer_severity("entity", Severity.NOT_RECOMMENDED)
        assert resolve_severity(entry, "entity") == Severity.NOT_RECOMMENDED

    def test_layer_names_are_case_insensitive(self) -> None:
        entry = _entry()
        entry.set_layer_severity("Entity", Severity.NOT_RECOMMENDED)
        assert resolve_severity(entry, "ENTITY") == Severity.NOT_RECOMMENDED

    def test_unknown_layer_falls_back(self) -> None:
        entry = _entry()
        entry.set_layer_severity("entity", Severity.NOT_RECOMMENDED)
        assert resolve_severity(entry, "api") == Severity.FORBIDDEN


class TestRule:
    def test_requires_property_name(self) -> None:
        with pytest.raises(MissingArgumentError):
            Rule("")

    def test_reads_value_through_accessor(self) -> None:
        rule = Rule("name", attrgetter("name"))
        rule.add_entry(_entry())
        failures = rule.validate(SimpleNamespace(name=""))
        assert len(failures) == 1
        assert failures[0].property_name == "name"
        assert failures[0].attempted_value == ""
        assert failures[0].error_message == "must be truthy"

    def test_entries_run_in_order_and_continue(self) -> None:
        rule = Rule("value")
        rule.append(lambda _o, v: v is not None, "first")
        rule.append(lambda _o, v: v == "x", "second")
        failures = rule.validate_value(None)
        assert [f.error_message for f in failures] == ["first", "second"]

    def test_stop_on_first_failure_emits_one(self) -> None:
        rule = Rule("value", cascade_mode=CascadeMode.STOP_ON_FIRST_FAILURE)
        rule.append(lambda _o, v: v is not None, "first")
        rule.append(lambda _o, v: v == "x", "second")
        assert [f.error_message for f in rule.validate_value(None)] == ["first"]

    def test_closed_gate_skips_entry(self) -> None:
        rule = Rule("value")
        rule.current_condition = lambda _o, v: v is not None
        rule.append(lambda _o, v: v == "x", "gated")
        assert rule.validate_value(None) == []
        assert len(rule.validate_value("y")) == 1

    def test_append_captures_current_condition(self) -> None:
        rule = Rule("value")
        rule.append(lambda _o, v: True, "ungated")
        rule.current_condition = lambda _o, v: False
        rule.append(lambda _o, v: True, "gated")
        assert rule.entry_at(0).condition is None
        assert rule.entry_at(1).condition is not None

    def test_matches_property_ignores_case(self) -> None:
        assert Rule("Email").matches_property("email")
        assert not Rule("Email").matches_property("name")

    def test_predicate_exceptions_propagate(self) -> None:
        rule = Rule("value")
        rule.append(lambda _o, v: 1 / 0, "boom")
        with pytest.raises(ZeroDivisionError):
            rule.validate_value("x")
