from __future__ import annotations

from collections.abc import Iterable


class OvalError(Exception):
    """
    Base class for every problem found while loading or cross-referencing an OVAL document
    """


class MalformedDocument(OvalError):
    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class DuplicateIdentifier(OvalError):
    """
    Raised while indexing when one or more identifiers occur more than once within a single
    collection (tests, objects or states). Every duplicate in the document is reported at once.
    """

    def __init__(self, duplicates: Iterable[tuple[str, str]]):
        # (collection, identifier) pairs, in the order they were found
        self.duplicates = list(duplicates)
        listing = ", ".join(f"{identifier!r} in {collection}" for collection, identifier in self.duplicates)
        super().__init__(f"duplicate identifier: {listing}")

    @property
    def identifiers(self) -> list[str]:
        return [identifier for _, identifier in self.duplicates]


class UnresolvedReference(OvalError):
    def __init__(self, identifier: str | None, referrer: str | None, kind: str):
        # kind is the collection that was searched: "test", "object" or "state"
        self.identifier = identifier
        self.referrer = referrer
        self.kind = kind
        super().__init__(f"{referrer or '<unknown>'} references missing {kind} {identifier!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnresolvedReference):
            return NotImplemented
        return (self.identifier, self.referrer, self.kind) == (other.identifier, other.referrer, other.kind)

    def __hash__(self) -> int:
        return hash((self.identifier, self.referrer, self.kind))


class AmbiguousOperator(OvalError):
    """
    A criteria node declared no operator, or one that is not an OVAL operator (AND, ONE, OR, XOR).
    """

    def __init__(self, operator: str | None, location: str | None = None):
        self.operator = operator
        self.location = location
        where = f" in {location}" if location else ""
        if operator is None:
            super().__init__(f"criteria{where} has no operator")
        else:
            super().__init__(f"criteria{where} has unrecognized operator {operator!r}")


class MissingCriteria(OvalError):
    def __init__(self, location: str):
        self.location = location
        super().__init__(f"{location} has no criteria")
