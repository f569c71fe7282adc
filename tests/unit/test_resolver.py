from __future__ import annotations

import logging

import pytest

from ovaldef.errors import UnresolvedReference
from ovaldef.index import Index
from ovaldef.model import Check, Criterion, Object, Objects, OvalDefinitions, RpminfoObject, RpminfoState, RpminfoTest, State, States
from ovaldef.model import Tests as TestsContainer
from ovaldef.resolver import Resolver
from ovaldef.walker import leaves


@pytest.fixture()
def simple(helpers):
    document = helpers.load_document("simple.xml")
    return document, Resolver(Index.build(document))


def test_resolve(simple):
    document, resolver = simple
    criterion = document.definition_items()[0].criteria.criterion[0]

    check = resolver.resolve(criterion)

    assert check.criterion is criterion
    assert check.test_id == "tst:1"
    assert check.check == Check.AT_LEAST_ONE
    assert check.package == "openssl"
    assert check.object_value.id == "obj:1"
    assert check.state.id == "ste:1"
    assert check.evr.operation == "less than"
    assert check.evr.value == "1:3.0.7-25.el9"
    assert check.version is None
    assert check.negate is False


def test_resolve_in_criterion_order(simple):
    document, resolver = simple
    criteria = document.definition_items()[0].criteria

    resolution = resolver.resolve_many(criteria.criterion)

    assert resolution.complete
    assert [(c.test.id, c.object_value.id, c.state.id) for c in resolution.checks] == [
        ("tst:1", "obj:1", "ste:1"),
        ("tst:2", "obj:2", "ste:2"),
    ]


def test_resolve_is_idempotent(simple):
    document, resolver = simple

    for criterion in leaves(document.definition_items()[0].criteria):
        first = resolver.resolve(criterion)
        second = resolver.resolve(criterion)
        assert first == second
        assert first.test is second.test
        assert first.object_value is second.object_value
        assert first.state is second.state


def test_missing_test(simple):
    _, resolver = simple

    with pytest.raises(UnresolvedReference) as excinfo:
        resolver.resolve(Criterion(test_ref="tst:99", comment="libcurl is earlier than 0:7.76.1-29"))

    assert excinfo.value.identifier == "tst:99"
    assert excinfo.value.kind == "test"
    assert excinfo.value.referrer == "criterion 'libcurl is earlier than 0:7.76.1-29'"
    assert "tst:99" in str(excinfo.value)


def test_missing_object(helpers):
    document = helpers.load_document("dangling.xml")
    resolver = Resolver(Index.build(document))

    with pytest.raises(UnresolvedReference) as excinfo:
        resolver.resolve(Criterion(test_ref="tst:3"))

    assert excinfo.value == UnresolvedReference("obj:404", "test tst:3", "object")


def test_missing_state():
    document = OvalDefinitions(
        tests=TestsContainer(rpminfo_test=[RpminfoTest(id="tst:1", object_value=Object(object_ref="obj:1"), state=None)]),
        objects=Objects(rpminfo_object=[RpminfoObject(id="obj:1", name="bash")]),
    )
    resolver = Resolver(Index.build(document))

    with pytest.raises(UnresolvedReference) as excinfo:
        resolver.resolve(Criterion(test_ref="tst:1"))

    assert excinfo.value.identifier is None
    assert excinfo.value.kind == "state"
    assert excinfo.value.referrer == "test tst:1"


def test_criterion_without_reference(simple):
    _, resolver = simple

    with pytest.raises(UnresolvedReference) as excinfo:
        resolver.resolve(Criterion())

    assert excinfo.value.identifier is None
    assert excinfo.value.kind == "test"


def test_resolve_many_collects_every_error(helpers):
    document = helpers.load_document("dangling.xml")
    resolver = Resolver(Index.build(document))
    criteria = document.definition_items()[0].criteria

    resolution = resolver.resolve_many(criteria.criterion)

    assert not resolution.complete
    # the sibling that does resolve is not affected
    assert [c.test_id for c in resolution.checks] == ["tst:1"]
    assert [(e.identifier, e.kind) for e in resolution.errors] == [("tst:99", "test"), ("obj:404", "object")]


def test_resolve_many_fail_fast(helpers):
    document = helpers.load_document("dangling.xml")
    resolver = Resolver(Index.build(document))
    criteria = document.definition_items()[0].criteria

    with pytest.raises(UnresolvedReference) as excinfo:
        resolver.resolve_many(criteria.criterion, fail_fast=True)

    assert excinfo.value.identifier == "tst:99"


def test_unknown_check_mode(caplog):
    document = OvalDefinitions(
        tests=TestsContainer(
            rpminfo_test=[
                RpminfoTest(id="tst:1", check="sometimes", object_value=Object(object_ref="obj:1"), state=State(state_ref="ste:1")),
            ],
        ),
        objects=Objects(rpminfo_object=[RpminfoObject(id="obj:1", name="bash")]),
        states=States(rpminfo_state=[RpminfoState(id="ste:1")]),
    )
    caplog.set_level(logging.DEBUG, logger="oval-resolver")

    check = Resolver(Index.build(document)).resolve(Criterion(test_ref="tst:1"))

    assert check.check is None
    assert any("unknown check mode 'sometimes'" in record.message for record in caplog.records)
