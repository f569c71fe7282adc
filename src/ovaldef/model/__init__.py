from ovaldef.model.enums import Check, Operator
from ovaldef.model.schema import (
    OVAL_COMMON_NS,
    OVAL_DEFINITIONS_NS,
    OVAL_LINUX_NS,
    Advisory,
    AdvisoryCve,
    AdvisoryDate,
    Affected,
    AffectedCpeList,
    Bugzilla,
    Criteria,
    Criterion,
    Definition,
    Definitions,
    EntityState,
    Evr,
    Generator,
    Metadata,
    Object,
    Objects,
    OvalDefinitions,
    Reference,
    RpminfoObject,
    RpminfoState,
    RpminfoTest,
    State,
    States,
    Tests,
)

__all__ = [
    "OVAL_COMMON_NS",
    "OVAL_DEFINITIONS_NS",
    "OVAL_LINUX_NS",
    "Advisory",
    "AdvisoryCve",
    "AdvisoryDate",
    "Affected",
    "AffectedCpeList",
    "Bugzilla",
    "Check",
    "Criteria",
    "Criterion",
    "Definition",
    "Definitions",
    "EntityState",
    "Evr",
    "Generator",
    "Metadata",
    "Object",
    "Objects",
    "Operator",
    "OvalDefinitions",
    "Reference",
    "RpminfoObject",
    "RpminfoState",
    "RpminfoTest",
    "State",
    "States",
    "Tests",
]
