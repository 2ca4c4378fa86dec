"""Tests for usage auditing and the parent/child credit mechanism."""

import pytest

from optchain.options.auditor import UsageAuditor, check_usage
from optchain.options.binder import resolve_defaults
from optchain.options.builder import build_options, extend_options
from optchain.options.errors import UnusedOptionsError
from optchain.options.policy import AuditPolicy


def test_unresolved_build_reports_every_key_in_order():
    container = build_options([("zeta", 1), ("alpha", 2), ("mid", 3)], AuditPolicy.ERROR)

    with pytest.raises(UnusedOptionsError) as excinfo:
        check_usage(container)

    assert excinfo.value.keys == ["zeta", "alpha", "mid"]
    assert "'zeta', 'alpha', 'mid'" in str(excinfo.value)


def test_clean_audit_returns_nothing(auditor_log):
    container = build_options([("a", 1)], AuditPolicy.WARN)
    resolve_defaults(container, [("a", 0)])

    assert check_usage(container) == []
    assert auditor_log.records == []


def test_resolved_keys_never_reported():
    container = build_options([("a", 1), ("typo", 2)])
    resolve_defaults(container, [("a", 0)])

    with pytest.raises(UnusedOptionsError) as excinfo:
        check_usage(container)

    assert excinfo.value.keys == ["typo"]


@pytest.mark.parametrize(
    "policy, raises, warned",
    [
        (AuditPolicy.ERROR, True, False),
        (AuditPolicy.WARN, False, True),
        (AuditPolicy.NONE, False, False),
    ],
)
def test_policy_behaviour_for_same_unused_set(auditor_log, policy, raises, warned):
    container = build_options([("a", 1), ("b", 2), ("c", 3)], policy)
    resolve_defaults(container, [("b", 0)])

    if raises:
        with pytest.raises(UnusedOptionsError) as excinfo:
            check_usage(container)
        assert excinfo.value.keys == ["a", "c"]
    else:
        assert check_usage(container) == ["a", "c"]

    warnings = auditor_log.of_level("warning")
    if warned:
        assert len(warnings) == 1
        assert warnings[0][2]["keys"] == ["a", "c"]
    else:
        assert warnings == []


def test_check_none_is_noop():
    assert check_usage(None) == []


def test_extension_key_not_flagged_in_injecting_scope():
    container = build_options([("width", 80)])
    resolve_defaults(container, [("width", 40)])

    extend_options(container, [("depth", 3)])

    assert check_usage(container) == []


def test_descendant_resolution_clears_key_and_sibling_stays_exempt():
    container = build_options([])
    extend_options(container, [("depth", 3), ("color", "red")])
    assert check_usage(container) == []

    # Descendant scope resolves only one of the injected options
    bound = resolve_defaults(container, [("depth", 1)])
    assert bound == {"depth": 3}

    assert check_usage(container) == []
    assert container.unresolved_extension_keys() == ["color"]


def test_credit_from_child_satisfies_parent_audit():
    calls = []

    def child(options):
        bound = resolve_defaults(options, [("depth", 1)])
        calls.append(("child", bound))
        check_usage(options)

    def parent(options):
        bound = resolve_defaults(options, [("width", 80)])
        calls.append(("parent", bound))
        child(options)
        check_usage(options)

    options = build_options([("width", 120), ("depth", 4)])
    parent(options)

    assert calls == [("parent", {"width": 120}), ("child", {"depth": 4})]


def test_child_audit_blames_keys_nobody_has_read_yet():
    options = build_options([("width", 120), ("depth", 4)])

    resolve_defaults(options, [("depth", 1)])

    with pytest.raises(UnusedOptionsError) as excinfo:
        check_usage(options)
    assert excinfo.value.keys == ["width"]


def test_overridden_extension_value_still_credited():
    options = build_options([("depth", 4)])

    extend_options(options, [("depth", 9)])
    bound = resolve_defaults(options, [("depth", 1)])

    assert bound == {"depth": 9}
    assert check_usage(options) == []


def test_final_audit_ignores_unresolved_extensions_by_default():
    options = build_options([], flag_unresolved_extensions=False)
    extend_options(options, [("orphan", 1)])

    assert check_usage(options, final=True) == []


def test_final_audit_reports_unresolved_extensions_when_enabled():
    options = build_options([("a", 1), ("b", 2)], flag_unresolved_extensions=True)
    extend_options(options, [("orphan", 1)])
    resolve_defaults(options, [("a", 0)])

    # Non-final audits keep extension keys exempt
    with pytest.raises(UnusedOptionsError) as excinfo:
        check_usage(options)
    assert excinfo.value.keys == ["b"]

    with pytest.raises(UnusedOptionsError) as excinfo:
        check_usage(options, final=True)
    assert excinfo.value.keys == ["b", "orphan"]


def test_each_audit_reports_once(auditor_log):
    options = build_options([("a", 1)], AuditPolicy.WARN)
    auditor = UsageAuditor()

    auditor.check(options)
    auditor.check(options)

    assert len(auditor_log.of_level("warning")) == 2
