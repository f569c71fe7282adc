from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ovaldef.errors import UnresolvedReference
from ovaldef.model import Check

if TYPE_CHECKING:
    from ovaldef.index import Index
    from ovaldef.model import Criterion, EntityState, Evr, RpminfoObject, RpminfoState, RpminfoTest

logger = logging.getLogger("oval-resolver")


@dataclass(frozen=True)
class ResolvedCheck:
    """
    A criterion with its test, and the test's object and state, fully dereferenced. Reading it
    answers "which package, compared how, against what".
    """

    criterion: Criterion
    test: RpminfoTest
    object_value: RpminfoObject
    state: RpminfoState

    @property
    def test_id(self) -> str:
        return self.test.id or ""

    @property
    def check(self) -> Check | None:
        check = Check.parse(self.test.check)
        if check is None and self.test.check is not None:
            logger.debug(f"test {self.test.id} has unknown check mode {self.test.check!r}")
        return check

    @property
    def package(self) -> str | None:
        return self.object_value.name

    @property
    def evr(self) -> Evr | None:
        return self.state.evr

    @property
    def version(self) -> EntityState | None:
        return self.state.version_value

    @property
    def negate(self) -> bool:
        return bool(self.criterion.negate)


@dataclass
class Resolution:
    checks: list[ResolvedCheck] = field(default_factory=list)
    errors: list[UnresolvedReference] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.errors


def _criterion_label(criterion: Criterion) -> str:
    if criterion.comment:
        return f"criterion {criterion.comment!r}"
    return "criterion"


class Resolver:
    def __init__(self, index: Index):
        self.index = index

    def resolve(self, criterion: Criterion) -> ResolvedCheck:
        """
        Follow criterion -> test -> (object, state). Raises UnresolvedReference naming the first
        identifier along the chain that is not present in the index.
        """
        test = self.index.tests.get(criterion.test_ref) if criterion.test_ref else None
        if test is None:
            raise UnresolvedReference(criterion.test_ref, _criterion_label(criterion), "test")

        object_ref = test.object_value.object_ref if test.object_value else None
        obj = self.index.objects.get(object_ref) if object_ref else None
        if obj is None:
            raise UnresolvedReference(object_ref, f"test {test.id}", "object")

        state_ref = test.state.state_ref if test.state else None
        state = self.index.states.get(state_ref) if state_ref else None
        if state is None:
            raise UnresolvedReference(state_ref, f"test {test.id}", "state")

        return ResolvedCheck(criterion=criterion, test=test, object_value=obj, state=state)

    def resolve_many(self, criteria: Iterable[Criterion], fail_fast: bool = False) -> Resolution:
        """
        Resolve every criterion given. A broken reference only invalidates its own criterion: by default
        all failures are gathered so they can be reported together, with fail_fast the first one is raised.
        """
        resolution = Resolution()
        for criterion in criteria:
            try:
                resolution.checks.append(self.resolve(criterion))
            except UnresolvedReference as e:
                if fail_fast:
                    raise
                logger.debug(f"unable to resolve: {e}")
                resolution.errors.append(e)
        return resolution
