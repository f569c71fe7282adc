from __future__ import annotations

import gzip
import logging

from lxml import etree
from xsdata.exceptions import ParserError
from xsdata.formats.dataclass.parsers import XmlParser
from xsdata.formats.dataclass.parsers.config import ParserConfig

from ovaldef.errors import MalformedDocument
from ovaldef.model import OVAL_DEFINITIONS_NS, OvalDefinitions

logger = logging.getLogger("oval-parser")

ROOT_ELEMENT = "oval_definitions"


def _xml_parser() -> XmlParser:
    # unbound content is expected (signatures, variables, non-rpminfo tests...), skip it quietly
    parser_config = ParserConfig(
        fail_on_converter_warnings=False,
        fail_on_unknown_attributes=False,
        fail_on_unknown_properties=False,
    )
    return XmlParser(config=parser_config)


def _read_root(data: bytes, source: str | None) -> etree._Element:
    hardened = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=True,
    )
    try:
        # S320 disable explanation: entity resolution and network access are disabled above
        root = etree.fromstring(data, parser=hardened)  # noqa: S320
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedDocument(f"not well-formed XML: {e}", source) from e

    if root is None:
        raise MalformedDocument("document has no root element", source)

    qname = etree.QName(root)
    if qname.localname != ROOT_ELEMENT or qname.namespace != OVAL_DEFINITIONS_NS:
        raise MalformedDocument(
            f"expected root element {{{OVAL_DEFINITIONS_NS}}}{ROOT_ELEMENT}, found {root.tag}",
            source,
        )
    return root


def parse(data: bytes | str, source: str | None = None) -> OvalDefinitions:
    """
    Convert raw OVAL definitions markup into the document model.

    Tests, objects and states are kept exactly as declared; identifier references between them are
    left unresolved (see ovaldef.index and ovaldef.resolver). Order of definitions and of criteria
    children is preserved. Raises MalformedDocument when the input is not well-formed XML or is not
    an OVAL definitions document.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    root = _read_root(data, source)

    try:
        document = _xml_parser().from_bytes(etree.tostring(root), OvalDefinitions)
    except ParserError as e:
        raise MalformedDocument(str(e), source) from e

    logger.debug(
        f"parsed {source or 'document'}: {len(document.definition_items())} definitions, "
        f"{len(document.test_items())} tests, {len(document.object_items())} objects, "
        f"{len(document.state_items())} states",
    )
    return document


def parse_file(path: str) -> OvalDefinitions:
    """
    Read a local (optionally gzip compressed) OVAL file and parse it. OSError from opening or reading
    the file is propagated untouched.
    """
    logger.info(f"parsing {path}")

    opener = open
    if path.endswith(".gz"):
        opener = gzip.open  # type: ignore[assignment]

    with opener(path, "rb") as f:
        data = f.read()

    return parse(data, source=path)
