"""
Traversal of a definition's criteria tree.

walk() yields the tree depth-first in pre-order: every criteria node is produced before any of its
children, and children come out in document order. Leaves are resolved on the way, so the stream is
everything needed to render the tree or to evaluate it later (AND = all children hold, OR = at least one
holds, a leaf holds when an installed package satisfies the resolved object/state).

fold() and accept() reduce the same stream bottom-up through a Visitor for consumers that need one value per
tree.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar, Union

from ovaldef.errors import AmbiguousOperator, UnresolvedReference
from ovaldef.model import Criteria, Criterion, Operator

if TYPE_CHECKING:
    from ovaldef.resolver import ResolvedCheck, Resolver

logger = logging.getLogger("oval-walker")

R = TypeVar("R")


@dataclass(frozen=True)
class CriteriaNode:
    criteria: Criteria
    depth: int
    operator: Operator | None
    error: AmbiguousOperator | None = None

    @property
    def negate(self) -> bool:
        return bool(self.criteria.negate)

    @property
    def comment(self) -> str | None:
        return self.criteria.comment


@dataclass(frozen=True)
class CheckNode:
    criterion: Criterion
    depth: int
    check: ResolvedCheck | None
    error: UnresolvedReference | None = None

    @property
    def test_ref(self) -> str | None:
        return self.criterion.test_ref

    @property
    def resolved(self) -> bool:
        return self.check is not None


Node = Union[CriteriaNode, CheckNode]


def _criteria_node(criteria: Criteria, depth: int, location: str | None) -> CriteriaNode:
    try:
        return CriteriaNode(criteria=criteria, depth=depth, operator=Operator.parse(criteria.operator, location))
    except AmbiguousOperator as e:
        return CriteriaNode(criteria=criteria, depth=depth, operator=None, error=e)


def _check_node(criterion: Criterion, depth: int, resolver: Resolver) -> CheckNode:
    try:
        return CheckNode(criterion=criterion, depth=depth, check=resolver.resolve(criterion))
    except UnresolvedReference as e:
        return CheckNode(criterion=criterion, depth=depth, check=None, error=e)


def _preorder(criteria: Criteria) -> Iterator[tuple[Criteria | Criterion, int]]:
    # explicit stack, no recursion depth limit
    stack: list[tuple[Criteria | Criterion, int]] = [(criteria, 0)]
    while stack:
        item, depth = stack.pop()
        yield item, depth
        if isinstance(item, Criteria):
            children = item.criteria_or_criterion
            stack.extend((child, depth + 1) for child in reversed(children))  # type: ignore[misc]


def walk(criteria: Criteria, resolver: Resolver, location: str | None = None) -> Iterator[Node]:
    """
    Yield every node of the tree rooted at criteria in pre-order. Problems never stop the walk: a
    missing or unknown operator is attached to its CriteriaNode as an AmbiguousOperator and a dangling
    reference is attached to its CheckNode as an UnresolvedReference.
    """
    for item, depth in _preorder(criteria):
        if isinstance(item, Criteria):
            node: Node = _criteria_node(item, depth, location)
        else:
            node = _check_node(item, depth, resolver)
        label = node.operator if isinstance(node, CriteriaNode) else node.test_ref
        logger.trace(f"{'  ' * depth}{label}")  # type: ignore[attr-defined]
        yield node


def leaves(criteria: Criteria) -> Iterator[Criterion]:
    """
    Criterion leaves of the tree in the same order walk() visits them, without resolving anything
    """
    for item, _ in _preorder(criteria):
        if isinstance(item, Criterion):
            yield item


class Visitor(ABC, Generic[R]):
    @abstractmethod
    def visit_check(self, node: CheckNode) -> R:
        ...

    @abstractmethod
    def visit_criteria(self, node: CriteriaNode, results: list[R]) -> R:
        ...


@dataclass
class _Frame(Generic[R]):
    node: CriteriaNode
    results: list[R] = field(default_factory=list)


def fold(nodes: Iterable[Node], visitor: Visitor[R]) -> R:
    """
    Fold a pre-order node stream (as produced by walk()) bottom-up: visit_check for each leaf, then
    visit_criteria for each criteria node with the results of its children in document order. Returns
    the result for the root.
    """
    stack: list[_Frame[R]] = []

    def close_frame() -> R:
        frame = stack.pop()
        result = visitor.visit_criteria(frame.node, frame.results)
        if stack:
            stack[-1].results.append(result)
        return result

    result: R | None = None
    for node in nodes:
        while stack and stack[-1].node.depth >= node.depth:
            close_frame()
        if isinstance(node, CriteriaNode):
            stack.append(_Frame(node=node))
        else:
            stack[-1].results.append(visitor.visit_check(node))

    while stack:
        result = close_frame()

    return result  # type: ignore[return-value]


def accept(criteria: Criteria, resolver: Resolver, visitor: Visitor[R], location: str | None = None) -> R:
    return fold(walk(criteria, resolver, location), visitor)


class ExpressionVisitor(Visitor[str]):
    """
    Renders a tree as a single infix expression over test identifiers, e.g.
    "(oval:tst:1 AND (oval:tst:2 OR NOT oval:tst:3))". Unknown operators render as "?".
    """

    def visit_check(self, node: CheckNode) -> str:
        ref = node.test_ref or "?"
        if not node.resolved:
            ref = f"{ref}!"
        if node.criterion.negate:
            return f"NOT {ref}"
        return ref

    def visit_criteria(self, node: CriteriaNode, results: list[str]) -> str:
        operator = node.operator.value if node.operator else "?"
        expression = "(" + f" {operator} ".join(results) + ")"
        if node.negate:
            return f"NOT {expression}"
        return expression
