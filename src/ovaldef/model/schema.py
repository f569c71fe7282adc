"""
xsdata bindings for the subset of the OVAL 5 definitions schema that describes rpminfo based
vulnerability checks. Anything in a document that is not bound here (variables, signatures, notes,
filters, behaviors, tests/objects/states other than rpminfo) is skipped by the parser.

see http://oval.mitre.org/language/version5.11/ovaldefinition/documentation/oval-definitions-schema.html
and http://oval.mitre.org/language/version5.11/ovaldefinition/documentation/linux-definitions-schema.html
"""
from dataclasses import dataclass, field
from typing import ForwardRef, List, Optional

OVAL_DEFINITIONS_NS = "http://oval.mitre.org/XMLSchema/oval-definitions-5"
OVAL_COMMON_NS = "http://oval.mitre.org/XMLSchema/oval-common-5"
OVAL_LINUX_NS = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"


@dataclass
class Evr:
    class Meta:
        name = "evr"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"

    datatype: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    operation: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    value: str = field(
        default="",
    )


@dataclass
class EntityState:
    """
    A single rpminfo_state comparison other than evr (version, arch, signature_keyid)
    """

    class Meta:
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"

    datatype: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    operation: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    value: str = field(
        default="",
    )


@dataclass
class Object:
    class Meta:
        name = "object"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"

    object_ref: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
            "required": True,
        },
    )


@dataclass
class State:
    class Meta:
        name = "state"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"

    state_ref: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
            "required": True,
        },
    )


@dataclass
class RpminfoObject:
    class Meta:
        name = "rpminfo_object"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"

    id: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
            "required": True,
        },
    )
    version: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    comment: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    name: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
            "required": True,
        },
    )


@dataclass
class RpminfoState:
    class Meta:
        name = "rpminfo_state"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"

    id: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
            "required": True,
        },
    )
    version: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    comment: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    arch: Optional[EntityState] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )
    evr: Optional[Evr] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )
    signature_keyid: Optional[EntityState] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )
    version_value: Optional[EntityState] = field(
        default=None,
        metadata={
            "name": "version",
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )


@dataclass
class RpminfoTest:
    class Meta:
        name = "rpminfo_test"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux"

    check: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
            "required": True,
        },
    )
    check_existence: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    comment: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    id: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
            "required": True,
        },
    )
    state_operator: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    version: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    object_value: Optional[Object] = field(
        default=None,
        metadata={
            "name": "object",
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
            "required": True,
        },
    )
    state: Optional[State] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )


@dataclass
class Criterion:
    class Meta:
        name = "criterion"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    comment: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    negate: Optional[bool] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    test_ref: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
            "required": True,
        },
    )


@dataclass
class Criteria:
    class Meta:
        name = "criteria"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    comment: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    negate: Optional[bool] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    operator: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    # nested criteria and criterion leaves share one list so that document order survives
    criteria_or_criterion: List[object] = field(
        default_factory=list,
        metadata={
            "type": "Elements",
            "choices": (
                {
                    "name": "criteria",
                    "type": ForwardRef("Criteria"),
                    "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
                },
                {
                    "name": "criterion",
                    "type": Criterion,
                    "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
                },
            ),
        },
    )

    @property
    def criteria(self) -> List["Criteria"]:
        return [c for c in self.criteria_or_criterion if isinstance(c, Criteria)]

    @property
    def criterion(self) -> List[Criterion]:
        return [c for c in self.criteria_or_criterion if isinstance(c, Criterion)]


@dataclass
class Reference:
    class Meta:
        name = "reference"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    ref_id: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    ref_url: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    source: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )


@dataclass
class Affected:
    class Meta:
        name = "affected"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    family: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    platform: List[str] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )


@dataclass
class AdvisoryDate:
    date: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )


@dataclass
class AdvisoryCve:
    href: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    impact: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    value: str = field(
        default="",
    )


@dataclass
class Bugzilla:
    href: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    id: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    value: str = field(
        default="",
    )


@dataclass
class AffectedCpeList:
    cpe: List[str] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )


@dataclass
class Advisory:
    """
    Vendor advisory block (Red Hat style) carried inside the metadata xsd:any slot, e.g.

    <advisory from="secalert@redhat.com">
        <severity>Moderate</severity>
        <rights>Copyright 2015 Red Hat, Inc.</rights>
        <issued date="2015-06-29"/>
        <updated date="2015-06-29"/>
        <cve href="https://access.redhat.com/security/cve/CVE-2015-0252">CVE-2015-0252</cve>
        <bugzilla href="https://bugzilla.redhat.com/1199103" id="1199103">CVE-2015-0252 xerces-c: crashes on malformed input</bugzilla>
        <affected_cpe_list>
            <cpe>cpe:/o:redhat:enterprise_linux:7</cpe>
        </affected_cpe_list>
    </advisory>
    """  # noqa: E501

    class Meta:
        name = "advisory"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    from_value: Optional[str] = field(
        default=None,
        metadata={
            "name": "from",
            "type": "Attribute",
        },
    )
    severity: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    rights: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    issued: Optional[AdvisoryDate] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    updated: Optional[AdvisoryDate] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    cve: List[AdvisoryCve] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    bugzilla: List[Bugzilla] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    affected_cpe_list: Optional[AffectedCpeList] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )


@dataclass
class Metadata:
    class Meta:
        name = "metadata"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    title: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
            "required": True,
        },
    )
    affected: Optional[Affected] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    reference: List[Reference] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    description: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
            "required": True,
        },
    )
    advisory: Optional[Advisory] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )


@dataclass
class Definition:
    class Meta:
        name = "definition"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    class_value: Optional[str] = field(
        default=None,
        metadata={
            "name": "class",
            "type": "Attribute",
        },
    )
    id: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    version: Optional[str] = field(
        default=None,
        metadata={
            "type": "Attribute",
        },
    )
    metadata: Optional[Metadata] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
            "required": True,
        },
    )
    criteria: Optional[Criteria] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )

    @property
    def title(self) -> str:
        if self.metadata is None or not self.metadata.title:
            return ""
        return self.metadata.title


@dataclass
class Generator:
    class Meta:
        name = "generator"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    product_name: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-common-5",
        },
    )
    product_version: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-common-5",
        },
    )
    schema_version: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-common-5",
        },
    )
    timestamp: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-common-5",
        },
    )
    content_version: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-common-5",
        },
    )


@dataclass
class Definitions:
    class Meta:
        name = "definitions"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    definition: List[Definition] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )


@dataclass
class Tests:
    class Meta:
        name = "tests"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    rpminfo_test: List[RpminfoTest] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )


@dataclass
class Objects:
    class Meta:
        name = "objects"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    rpminfo_object: List[RpminfoObject] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )


@dataclass
class States:
    class Meta:
        name = "states"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    rpminfo_state: List[RpminfoState] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
        },
    )


@dataclass
class OvalDefinitions:
    class Meta:
        name = "oval_definitions"
        namespace = "http://oval.mitre.org/XMLSchema/oval-definitions-5"

    generator: Optional[Generator] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    definitions: Optional[Definitions] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    tests: Optional[Tests] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    objects: Optional[Objects] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )
    states: Optional[States] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
        },
    )

    # the collection containers are optional in a document, these always return a list

    def definition_items(self) -> List[Definition]:
        return self.definitions.definition if self.definitions else []

    def test_items(self) -> List[RpminfoTest]:
        return self.tests.rpminfo_test if self.tests else []

    def object_items(self) -> List[RpminfoObject]:
        return self.objects.rpminfo_object if self.objects else []

    def state_items(self) -> List[RpminfoState]:
        return self.states.rpminfo_state if self.states else []
