"""
Domain Schemas.

Domains form a tree. A domain with a <subdomains> element is an
InnerDomain; one without is a LeafDomain and carries the index
information and field descriptors of the searchable dataset.
"""

from typing import Any, Literal

from pydantic import Field

from ebisearch.schemas.base import XmlModel, require_mapping, text_of, unwrap


class IndexInfo(XmlModel):
    """One ``<indexInfo name="...">content</indexInfo>`` pair."""

    name: str
    content: str = ""

    @classmethod
    def from_xml(cls, node: Any) -> "IndexInfo":
        node = require_mapping(node, "indexInfo")
        return cls(name=node.get("name"), content=text_of(node))


class FieldOption(XmlModel):
    """One option of a field descriptor, e.g. searchable=true."""

    name: str = ""
    content: str = ""

    @classmethod
    def from_xml(cls, node: Any) -> "FieldOption":
        if isinstance(node, dict):
            return cls(name=node.get("name") or "", content=text_of(node))
        return cls(content=text_of(node))


class FieldInfo(XmlModel):
    """Field descriptor of a leaf domain."""

    id: str
    options: list[FieldOption] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "FieldInfo":
        node = require_mapping(node, "fieldInfo")
        return cls(
            id=node.get("id"),
            options=[FieldOption.from_xml(o) for o in unwrap(node.get("options"), "option")],
        )


class LeafDomain(XmlModel):
    """Domain without subdomains."""

    kind: Literal["leaf"] = "leaf"
    id: str
    name: str
    index_infos: list[IndexInfo] = Field(default_factory=list)
    field_infos: list[FieldInfo] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "LeafDomain":
        node = require_mapping(node, "domain")
        return cls(
            id=node.get("id"),
            name=node.get("name"),
            index_infos=[
                IndexInfo.from_xml(i) for i in unwrap(node.get("indexInfos"), "indexInfo")
            ],
            field_infos=[
                FieldInfo.from_xml(f) for f in unwrap(node.get("fieldInfos"), "fieldInfo")
            ],
        )


class InnerDomain(XmlModel):
    """Domain grouping other domains."""

    kind: Literal["inner"] = "inner"
    id: str
    name: str
    children: list["InnerDomain | LeafDomain"] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "InnerDomain":
        node = require_mapping(node, "domain")
        return cls(
            id=node.get("id"),
            name=node.get("name"),
            children=[build_domain(d) for d in unwrap(node.get("subdomains"), "domain")],
        )


InnerDomain.model_rebuild()

DomainNode = InnerDomain | LeafDomain


def build_domain(node: Any) -> DomainNode:
    """Build the DomainNode variant for one <domain> element, recursively."""
    node = require_mapping(node, "domain")
    if "subdomains" in node:
        return InnerDomain.from_xml(node)
    return LeafDomain.from_xml(node)


class DomainTree(XmlModel):
    """Top-level domains of a hierarchy or details response."""

    domains: list[InnerDomain | LeafDomain] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "DomainTree":
        node = require_mapping(node, "result")
        return cls(domains=[build_domain(d) for d in unwrap(node.get("domains"), "domain")])


class DomainRef(XmlModel):
    """Domain listed by a cross-reference query."""

    id: str
    name: str | None = None

    @classmethod
    def from_xml(cls, node: Any) -> "DomainRef":
        node = require_mapping(node, "domain")
        return cls(id=node.get("id"), name=node.get("name"))


class DomainList(XmlModel):
    """Domains referenced from a domain or an entry."""

    domains: list[DomainRef] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "DomainList":
        node = require_mapping(node, "result")
        return cls(domains=[DomainRef.from_xml(d) for d in unwrap(node.get("domains"), "domain")])
