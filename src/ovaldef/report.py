from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import orjson

from ovaldef.errors import AmbiguousOperator, MissingCriteria, UnresolvedReference
from ovaldef.index import Index
from ovaldef.resolver import Resolver
from ovaldef.walker import CheckNode, CriteriaNode, ExpressionVisitor, Node, Visitor, fold, walk

if TYPE_CHECKING:
    from ovaldef.model import Definition, EntityState, Evr, OvalDefinitions, RpminfoObject, RpminfoState, RpminfoTest
    from ovaldef.resolver import ResolvedCheck

logger = logging.getLogger("oval-report")


@dataclass
class DefinitionReport:
    definition: Definition
    nodes: list[Node] = field(default_factory=list)
    errors: list[UnresolvedReference | AmbiguousOperator | MissingCriteria] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.definition.title

    @property
    def flagged(self) -> bool:
        return bool(self.errors)

    @property
    def checks(self) -> list[ResolvedCheck]:
        return [n.check for n in self.nodes if isinstance(n, CheckNode) and n.check is not None]

    @property
    def expression(self) -> str | None:
        if not self.nodes:
            return None
        return fold(self.nodes, ExpressionVisitor())


@dataclass
class Report:
    document: OvalDefinitions
    index: Index
    definitions: list[DefinitionReport] = field(default_factory=list)

    @property
    def flagged(self) -> list[DefinitionReport]:
        return [d for d in self.definitions if d.flagged]

    @property
    def ambiguous(self) -> list[AmbiguousOperator]:
        return [e for d in self.definitions for e in d.errors if isinstance(e, AmbiguousOperator)]


def _location(definition: Definition, position: int) -> str:
    if definition.id:
        return f"definition {definition.id}"
    if definition.title:
        return f"definition {definition.title!r}"
    return f"definition #{position}"


def build(document: OvalDefinitions, fail_fast: bool = False) -> Report:
    """
    Index the document and walk the criteria of every definition, collecting broken references,
    ambiguous operators and missing criteria per definition. Definitions with problems are kept and
    flagged. DuplicateIdentifier from indexing is raised before any definition is looked at; with
    fail_fast the first per definition problem is raised instead of collected.
    """
    index = Index.build(document)
    resolver = Resolver(index)
    report = Report(document=document, index=index)

    for position, definition in enumerate(document.definition_items()):
        location = _location(definition, position)
        entry = DefinitionReport(definition=definition)
        if definition.criteria is None:
            entry.errors = [MissingCriteria(location)]
        else:
            entry.nodes = list(walk(definition.criteria, resolver, location))
            entry.errors = [n.error for n in entry.nodes if n.error is not None]

        if entry.errors:
            if fail_fast:
                raise entry.errors[0]
            for error in entry.errors:
                logger.warning(f"{location}: {error}")

        report.definitions.append(entry)

    logger.info(f"resolved {len(report.definitions)} definitions ({len(report.flagged)} flagged)")
    return report


# text rendering


def _comparison(label: str, entity: Evr | EntityState | None) -> str | None:
    if entity is None:
        return None
    datatype = f" ({entity.datatype})" if entity.datatype else ""
    return f"{label}{datatype} {entity.operation or '?'} {entity.value}"


def _state_comparisons(state: RpminfoState) -> list[str]:
    candidates = [
        _comparison("evr", state.evr),
        _comparison("version", state.version_value),
        _comparison("arch", state.arch),
        _comparison("signature_keyid", state.signature_keyid),
    ]
    return [c for c in candidates if c]


def _render_node(node: Node) -> list[str]:
    indent = "  " * node.depth
    if isinstance(node, CriteriaNode):
        operator = node.operator.value if node.operator else "<ambiguous>"
        line = f"{indent}Criteria operator: {operator}"
        if node.negate:
            line += " (negated)"
        if node.comment:
            line += f" # {node.comment}"
        return [line]

    negate = "NOT " if node.criterion.negate else ""
    lines = [f"{indent}Criterion: {negate}{node.test_ref} {node.criterion.comment or ''}".rstrip()]
    if node.check is None:
        lines.append(f"{indent}  !! {node.error}")
        return lines

    check = node.check
    comparisons = ", ".join(_state_comparisons(check.state)) or "no comparison"
    lines.append(f"{indent}  -> package {check.package} [{check.test.check or '?'}] {comparisons}")
    return lines


def _render_test(test: RpminfoTest) -> str:
    return "\n".join(
        [
            f"Id: {test.id}",
            f"Version: {test.version or ''}",
            f"Comment: {test.comment or ''}",
            f"Check: {test.check or ''}",
            f"ObjectRef: {test.object_value.object_ref if test.object_value else ''}",
            f"StateRef: {test.state.state_ref if test.state else ''}",
        ],
    )


def _render_state(state: RpminfoState) -> str:
    comparisons = _state_comparisons(state) or ["no comparison"]
    return f"Id: {state.id} Version: {state.version or ''}\n" + "\n".join(comparisons)


def _render_object(obj: RpminfoObject) -> str:
    return f"Id: {obj.id} Version: {obj.version or ''} Name: {obj.name or ''}"


def _render_definition(entry: DefinitionReport) -> list[str]:
    definition = entry.definition
    metadata = definition.metadata

    lines = []
    if definition.id:
        lines.append(f"Definition: {definition.id} (class: {definition.class_value or '?'})")
    lines.append(f"Metadata:Title: {entry.title}")
    lines.append(f"Metadata:Description: {(metadata.description or '').strip() if metadata else ''}")
    if metadata:
        for reference in metadata.reference:
            lines.append(f"Reference:source: {reference.source or ''}")
            lines.append(f"Reference:url: {reference.ref_url or ''}")
        advisory = metadata.advisory
        if advisory:
            lines.append(
                f"Advisory from: {advisory.from_value or ''} of severity {advisory.severity or ''} "
                f"with rights {advisory.rights or ''}",
            )
            for cve in advisory.cve:
                lines.append(f"Advisory:CVE: {cve.value} {cve.href or ''}".rstrip())

    for node in entry.nodes:
        lines.extend(_render_node(node))

    if entry.flagged:
        lines.append(f"!! partially unresolved ({len(entry.errors)} problems):")
        lines.extend(f"   - {error}" for error in entry.errors)

    return lines


def render_text(report: Report, show_index: bool = True) -> str:
    lines: list[str] = []

    generator = report.document.generator
    if generator:
        lines.extend(
            [
                "++ Generator",
                f"Product name: {generator.product_name or ''}",
                f"Product version: {generator.product_version or ''}",
                f"Schema version: {generator.schema_version or ''}",
                f"Timestamp: {generator.timestamp or ''}",
                "",
            ],
        )

    for entry in report.definitions:
        lines.extend(_render_definition(entry))
        lines.append("")

    if show_index:
        lines.extend(f"Tests: {_render_test(t)}" for t in report.index.tests.values())
        lines.extend(f"States: {_render_state(s)}" for s in report.index.states.values())
        lines.extend(f"Objects: {_render_object(o)}" for o in report.index.objects.values())

    lines.append(f"{len(report.definitions)} definitions, {len(report.flagged)} flagged")
    return "\n".join(lines)


# json rendering


class _TreeVisitor(Visitor[dict[str, Any]]):
    def visit_check(self, node: CheckNode) -> dict[str, Any]:
        item: dict[str, Any] = {
            "test_ref": node.test_ref,
            "comment": node.criterion.comment,
            "negate": bool(node.criterion.negate),
            "resolved": node.resolved,
        }
        if node.check is not None:
            item["check"] = node.check.test.check
            item["package"] = node.check.package
            item["state"] = _strip_none(dataclasses.asdict(node.check.state))
        if node.error is not None:
            item["error"] = str(node.error)
        return item

    def visit_criteria(self, node: CriteriaNode, results: list[dict[str, Any]]) -> dict[str, Any]:
        item: dict[str, Any] = {
            "operator": node.operator.value if node.operator else None,
            "negate": node.negate,
            "children": results,
        }
        if node.comment:
            item["comment"] = node.comment
        if node.error is not None:
            item["error"] = str(node.error)
        return item


def _strip_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _strip_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_strip_none(v) for v in value]
    return value


def _definition_dict(entry: DefinitionReport) -> dict[str, Any]:
    metadata = entry.definition.metadata
    return {
        "id": entry.definition.id,
        "title": entry.title,
        "description": metadata.description if metadata else None,
        "references": [_strip_none(dataclasses.asdict(r)) for r in metadata.reference] if metadata else [],
        "advisory": _strip_none(dataclasses.asdict(metadata.advisory)) if metadata and metadata.advisory else None,
        "flagged": entry.flagged,
        "errors": [str(e) for e in entry.errors],
        "expression": entry.expression,
        "criteria": fold(entry.nodes, _TreeVisitor()) if entry.nodes else None,
    }


def render_json(report: Report) -> str:
    generator = report.document.generator
    payload = {
        "generator": _strip_none(dataclasses.asdict(generator)) if generator else None,
        "definitions": [_definition_dict(d) for d in report.definitions],
        "summary": {
            "definitions": len(report.definitions),
            "flagged": len(report.flagged),
            "tests": len(report.index.tests),
            "objects": len(report.index.objects),
            "states": len(report.index.states),
        },
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")
