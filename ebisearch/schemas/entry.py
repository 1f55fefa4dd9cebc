"""
Entry Schemas.

Search results, entry lookups and cross-reference lookups all return
<entries>; faceted searches add <facets>.
"""

from typing import Any

from pydantic import Field

from ebisearch.core.exceptions import ResponseFormatError
from ebisearch.schemas.base import XmlModel, require_mapping, text_of, unwrap


class EntryField(XmlModel):
    """A named field of an entry and its values."""

    id: str | None = None
    values: list[str] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "EntryField":
        node = require_mapping(node, "field")
        return cls(
            id=node.get("id"),
            values=[text_of(v) for v in unwrap(node.get("values"), "value")],
        )


class Entry(XmlModel):
    """One indexed record. ``references`` is filled by cross-reference queries."""

    id: str | None = None
    source: str | None = None
    fields: list[EntryField] = Field(default_factory=list)
    field_urls: list[str] = Field(default_factory=list)
    view_urls: list[str] = Field(default_factory=list)
    references: list["Entry"] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "Entry":
        node = require_mapping(node, "entry")
        return cls(
            id=node.get("id"),
            source=node.get("source"),
            fields=[EntryField.from_xml(f) for f in unwrap(node.get("fields"), "field")],
            field_urls=[text_of(u) for u in unwrap(node.get("fieldURLs"), "fieldURL")],
            view_urls=[text_of(u) for u in unwrap(node.get("viewURLs"), "viewURL")],
            references=[Entry.from_xml(r) for r in unwrap(node.get("references"), "reference")],
        )


Entry.model_rebuild()


class FacetValue(XmlModel):
    """One bucket of a facet."""

    label: str
    value: str
    count: str

    @classmethod
    def from_xml(cls, node: Any) -> "FacetValue":
        node = require_mapping(node, "facetValue")
        value = node.get("value")
        if isinstance(value, list):
            if not value:
                raise ResponseFormatError("Empty <value> list in <facetValue>")
            value = value[0]
        return cls(
            label=node.get("label"),
            value=text_of(value) if value is not None else None,
            count=node.get("count"),
        )


class Facet(XmlModel):
    """Count breakdown of the results for one field."""

    id: str
    label: str
    facet_values: list[FacetValue] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "Facet":
        node = require_mapping(node, "facet")
        return cls(
            id=node.get("id"),
            label=node.get("label"),
            facet_values=[
                FacetValue.from_xml(v) for v in unwrap(node.get("facetValues"), "facetValue")
            ],
        )


class ResultSet(XmlModel):
    """Entries of a response and, for faceted searches, its facets."""

    hit_count: int | None = None
    entries: list[Entry] = Field(default_factory=list)
    facets: list[Facet] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, node: Any) -> "ResultSet":
        node = require_mapping(node, "result")
        return cls(
            hit_count=node.get("hitCount"),
            entries=[Entry.from_xml(e) for e in unwrap(node.get("entries"), "entry")],
            facets=[Facet.from_xml(f) for f in unwrap(node.get("facets"), "facet")],
        )
