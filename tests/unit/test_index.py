from __future__ import annotations

import pytest

from ovaldef.errors import DuplicateIdentifier, MalformedDocument
from ovaldef.index import Index
from ovaldef.model import (
    Object,
    Objects,
    OvalDefinitions,
    RpminfoObject,
    RpminfoState,
    RpminfoTest,
    State,
    States,
    Tests as TestsContainer,
)


def _document(tests=(), objects=(), states=()) -> OvalDefinitions:
    return OvalDefinitions(
        tests=TestsContainer(rpminfo_test=list(tests)),
        objects=Objects(rpminfo_object=list(objects)),
        states=States(rpminfo_state=list(states)),
    )


def _test(identifier: str) -> RpminfoTest:
    return RpminfoTest(id=identifier, check="at least one", object_value=Object(object_ref="obj:1"), state=State(state_ref="ste:1"))


def test_build(helpers):
    index = Index.build(helpers.load_document("simple.xml"))

    assert list(index.tests) == ["tst:1", "tst:2"]
    assert list(index.objects) == ["obj:1", "obj:2"]
    assert list(index.states) == ["ste:1", "ste:2"]
    assert index.objects["obj:2"].name == "openssl-libs"


def test_empty_document(helpers):
    index = Index.build(helpers.load_document("empty.xml"))

    assert len(index.tests) == 0
    assert len(index.objects) == 0
    assert len(index.states) == 0


def test_missing_collections():
    index = Index.build(OvalDefinitions())

    assert dict(index.tests) == {}
    assert dict(index.objects) == {}
    assert dict(index.states) == {}


def test_read_only(helpers):
    index = Index.build(helpers.load_document("simple.xml"))

    with pytest.raises(TypeError):
        index.tests["tst:3"] = index.tests["tst:1"]  # type: ignore[index]


def test_duplicate_state(helpers):
    with pytest.raises(DuplicateIdentifier) as excinfo:
        Index.build(helpers.load_document("duplicate-state.xml"))

    assert excinfo.value.identifiers == ["ste:1"]
    assert excinfo.value.duplicates == [("states", "ste:1")]
    assert "ste:1" in str(excinfo.value)


def test_all_duplicates_reported():
    document = _document(
        tests=[_test("tst:1"), _test("tst:2"), _test("tst:1"), _test("tst:1")],
        objects=[RpminfoObject(id="obj:1", name="a"), RpminfoObject(id="obj:1", name="b")],
        states=[RpminfoState(id="ste:1")],
    )

    with pytest.raises(DuplicateIdentifier) as excinfo:
        Index.build(document)

    # each duplicated identifier is listed once per collection
    assert excinfo.value.duplicates == [("tests", "tst:1"), ("objects", "obj:1")]


def test_identifiers_are_namespaced_by_collection():
    document = _document(
        tests=[_test("shared:1")],
        objects=[RpminfoObject(id="shared:1", name="a")],
        states=[RpminfoState(id="shared:1")],
    )

    index = Index.build(document)

    assert set(index.tests) == set(index.objects) == set(index.states) == {"shared:1"}


def test_missing_identifier():
    document = _document(objects=[RpminfoObject(id="obj:1", name="a"), RpminfoObject(name="b")])

    with pytest.raises(MalformedDocument, match="entry 1 in objects has no id"):
        Index.build(document)
