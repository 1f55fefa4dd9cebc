"""
Response Printers.

Render response models as the plain-text lines written to stdout. Every
renderer yields lines without trailing newlines; the CLI echoes them one
by one, so output produced before a later failure stays on screen.
"""

from collections.abc import Iterable, Iterator

from ebisearch.schemas.domain import DomainList, DomainNode, DomainTree, InnerDomain, LeafDomain
from ebisearch.schemas.entry import Entry, Facet, ResultSet

FIELD_INFO_HEADER = "field_id\tsearchable\tretrievable\tsortable\tfacet"


def _hierarchy_lines(domain: DomainNode, indent: str) -> Iterator[str]:
    yield f"{indent}{domain.id}: {domain.name}"
    if isinstance(domain, InnerDomain):
        for child in domain.children:
            yield from _hierarchy_lines(child, indent + "\t")


def render_domain_hierarchy(tree: DomainTree) -> Iterator[str]:
    """``id: name`` per domain, one tab of indentation per level."""
    for domain in tree.domains:
        yield from _hierarchy_lines(domain, "")


def _details_lines(domain: DomainNode) -> Iterator[str]:
    yield f"{domain.name} ({domain.id})"
    if isinstance(domain, InnerDomain):
        for child in domain.children:
            yield from _details_lines(child)
    elif isinstance(domain, LeafDomain):
        for info in domain.index_infos:
            yield f"{info.name}: {info.content}"
        yield ""
        yield FIELD_INFO_HEADER
        for field_info in domain.field_infos:
            yield "\t".join([field_info.id, *(option.content for option in field_info.options)])
    yield ""


def render_domain_details(tree: DomainTree) -> Iterator[str]:
    """
    ``name (id)`` per domain, recursively.

    Leaf domains add their index information and a tab-separated table of
    field options.
    """
    for domain in tree.domains:
        yield from _details_lines(domain)


def render_entries(entries: Iterable[Entry]) -> Iterator[str]:
    """Field values, field URLs and view URLs of each entry, blank line between entries."""
    for entry in entries:
        for field in entry.fields:
            if field.values:
                yield from field.values
            else:
                yield ""
        yield from entry.field_urls
        yield from entry.view_urls
        yield ""


def render_facets(facets: Iterable[Facet]) -> Iterator[str]:
    for facet in facets:
        yield f"{facet.label} ({facet.id})"
        for facet_value in facet.facet_values:
            yield f"{facet_value.label} ({facet_value.value}) {facet_value.count}"
        yield ""


def render_results(results: ResultSet) -> Iterator[str]:
    return render_entries(results.entries)


def render_faceted_results(results: ResultSet) -> Iterator[str]:
    """Entries followed by the facets."""
    yield from render_entries(results.entries)
    yield from render_facets(results.facets)


def render_domain_ids(domains: DomainList) -> Iterator[str]:
    for domain in domains.domains:
        yield domain.id


def render_referenced_entries(results: ResultSet) -> Iterator[str]:
    """The referenced entries of every requested entry."""
    for entry in results.entries:
        yield from render_entries(entry.references)
