from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol, TypeVar

from ovaldef.errors import DuplicateIdentifier, MalformedDocument

if TYPE_CHECKING:
    from ovaldef.model import OvalDefinitions, RpminfoObject, RpminfoState, RpminfoTest

logger = logging.getLogger("oval-index")


class _Identified(Protocol):
    id: str | None


T = TypeVar("T", bound=_Identified)


@dataclass(frozen=True)
class Index:
    """
    Identifier to entity lookups for the tests, objects and states of one document. Each collection
    is its own namespace: the same identifier may appear once in tests and once in states.
    """

    tests: Mapping[str, RpminfoTest]
    objects: Mapping[str, RpminfoObject]
    states: Mapping[str, RpminfoState]

    @classmethod
    def build(cls, document: OvalDefinitions) -> Index:
        duplicates: list[tuple[str, str]] = []

        tests = _by_id("tests", document.test_items(), duplicates)
        objects = _by_id("objects", document.object_items(), duplicates)
        states = _by_id("states", document.state_items(), duplicates)

        if duplicates:
            for collection, identifier in duplicates:
                logger.error(f"duplicate identifier {identifier!r} in {collection}")
            raise DuplicateIdentifier(duplicates)

        logger.debug(f"indexed {len(tests)} tests, {len(objects)} objects, {len(states)} states")
        return cls(
            tests=MappingProxyType(tests),
            objects=MappingProxyType(objects),
            states=MappingProxyType(states),
        )


def _by_id(collection: str, items: Iterable[T], duplicates: list[tuple[str, str]]) -> dict[str, T]:
    by_id: dict[str, T] = {}
    reported: set[str] = set()
    for position, item in enumerate(items):
        if not item.id:
            raise MalformedDocument(f"entry {position} in {collection} has no id")
        if item.id in by_id:
            # report each duplicated identifier once, no matter how many copies there are
            if item.id not in reported:
                duplicates.append((collection, item.id))
                reported.add(item.id)
            continue
        by_id[item.id] = item
    return by_id
