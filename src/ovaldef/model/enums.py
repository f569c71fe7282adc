from __future__ import annotations

import enum

from ovaldef.errors import AmbiguousOperator


class Operator(str, enum.Enum):
    """
    see http://oval.mitre.org/language/version5.11/ovaldefinition/documentation/oval-common-schema.html#OperatorEnumeration
    """

    AND = "AND"
    ONE = "ONE"
    OR = "OR"
    XOR = "XOR"

    def __repr__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str | None, location: str | None = None) -> Operator:
        if raw is None or not raw.strip():
            raise AmbiguousOperator(None, location)
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise AmbiguousOperator(raw, location) from None


class Check(str, enum.Enum):
    """
    see http://oval.mitre.org/language/version5.11/ovaldefinition/documentation/oval-common-schema.html#CheckEnumeration
    """

    ALL = "all"
    AT_LEAST_ONE = "at least one"
    NONE_EXIST = "none exist"  # deprecated in 5.3 but still emitted by some producers
    NONE_SATISFY = "none satisfy"
    ONLY_ONE = "only one"

    def __repr__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str | None) -> Check | None:
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None
