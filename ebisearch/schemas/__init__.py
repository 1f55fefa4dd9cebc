# Response schemas package
from ebisearch.schemas.domain import (
    DomainList,
    DomainNode,
    DomainRef,
    DomainTree,
    FieldInfo,
    FieldOption,
    IndexInfo,
    InnerDomain,
    LeafDomain,
    build_domain,
)
from ebisearch.schemas.entry import Entry, EntryField, Facet, FacetValue, ResultSet

__all__ = [
    "DomainList",
    "DomainNode",
    "DomainRef",
    "DomainTree",
    "Entry",
    "EntryField",
    "Facet",
    "FacetValue",
    "FieldInfo",
    "FieldOption",
    "IndexInfo",
    "InnerDomain",
    "LeafDomain",
    "ResultSet",
    "build_domain",
]
