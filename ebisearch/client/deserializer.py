"""
XML Deserializer.

Turns an EBI Search XML response into nested mappings with xmltodict.
Attributes and child elements both become plain keys, element text that
sits next to attributes is stored under ``content``, and the root element
is stripped so callers index straight into its children:

    <result><entries><entry id="P1">...</entry></entries></result>
        → {"entries": {"entry": [{"id": "P1", ...}]}}

Repeatable elements:
    xmltodict collapses a single child into a scalar. Tags listed in the
    force-list set are always returned as lists, whatever their count.
    RESPONSE_REPEATABLE covers every repeatable element of the service's
    response documents and is the default for all methods; the narrower
    per-endpoint sets are kept for callers that want them.
"""

from collections.abc import Iterable
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from ebisearch.core.exceptions import ResponseParseError
from ebisearch.core.logging import debug_message, get_logger

logger = get_logger(__name__)

CONTENT_KEY = "content"

ENTRY_REPEATABLE = frozenset({"entry", "value", "field", "fieldURL", "viewURL"})
REFERENCE_REPEATABLE = ENTRY_REPEATABLE | {"reference"}
FACET_REPEATABLE = ENTRY_REPEATABLE | {"facet", "facetValue"}
DOMAIN_REPEATABLE = frozenset({"domain", "indexInfo", "fieldInfo", "option"})

RESPONSE_REPEATABLE = REFERENCE_REPEATABLE | FACET_REPEATABLE | DOMAIN_REPEATABLE


def parse_xml(text: str, force_list: Iterable[str] | None = None) -> dict[str, Any]:
    """
    Deserialize an XML document, returning the content of its root element.

    Args:
        text: XML document
        force_list: Tags that always deserialize to lists. Defaults to
            RESPONSE_REPEATABLE.

    Returns:
        Mapping of the root element's attributes and children. An empty
        root element yields an empty mapping.

    Raises:
        ResponseParseError: If the document is not well-formed XML
    """
    repeatable = RESPONSE_REPEATABLE if force_list is None else frozenset(force_list)

    try:
        document = xmltodict.parse(
            text,
            attr_prefix="",
            cdata_key=CONTENT_KEY,
            force_list=repeatable,
        )
    except ExpatError as e:
        raise ResponseParseError(f"Malformed XML response: {e}") from e

    if not document:
        raise ResponseParseError("Malformed XML response: no root element")

    root_tag, root = next(iter(document.items()))
    debug_message(logger, "parse_xml", f"root element: {root_tag}", 12)

    if isinstance(root, list):
        root = root[0]
    if root is None:
        return {}
    if not isinstance(root, dict):
        return {CONTENT_KEY: root}
    return root
