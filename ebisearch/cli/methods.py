"""
Method Registry.

Maps each command-line method name to its SearchService call and its
printer, and holds the usage text shown for missing or unknown methods.
"""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from ebisearch.cli import printers
from ebisearch.services.search import SearchService


@dataclass(frozen=True)
class SearchMethod:
    """A service call paired with the printer for its response."""

    name: str
    call: Callable[..., Any]
    render: Callable[[Any], Iterator[str]]


METHODS: dict[str, SearchMethod] = {
    method.name: method
    for method in (
        SearchMethod(
            "getDomainHierarchy",
            SearchService.get_domain_hierarchy,
            printers.render_domain_hierarchy,
        ),
        SearchMethod(
            "getDomainDetails",
            SearchService.get_domain_details,
            printers.render_domain_details,
        ),
        SearchMethod(
            "getResults",
            SearchService.get_results,
            printers.render_results,
        ),
        SearchMethod(
            "getFacetedResults",
            SearchService.get_faceted_results,
            printers.render_faceted_results,
        ),
        SearchMethod(
            "getEntries",
            SearchService.get_entries,
            printers.render_results,
        ),
        SearchMethod(
            "getDomainsReferencedInDomain",
            SearchService.get_domains_referenced_in_domain,
            printers.render_domain_ids,
        ),
        SearchMethod(
            "getDomainsReferencedInEntry",
            SearchService.get_domains_referenced_in_entry,
            printers.render_domain_ids,
        ),
        SearchMethod(
            "getReferencedEntries",
            SearchService.get_referenced_entries,
            printers.render_referenced_entries,
        ),
    )
}


def run_method(service: SearchService, name: str, args: Sequence[str]) -> Iterator[str]:
    """
    Call method ``name`` with positional ``args`` and render its response.

    Raises:
        KeyError: If the method is unknown
    """
    method = METHODS[name]
    return method.render(method.call(service, *args))


def usage_text(script_name: str) -> str:
    """Usage message listing every method and its arguments."""
    return f"""EB-eye
======

Usage:
  {script_name} <method> [arguments...] [--baseUrl <baseUrl>]
      [--quiet] [--verbose] [--debugLevel <level>]

A number of methods are available:

getDomainHierarchy
  Return the hierarchy of the domains available.

getDomainDetails [<domain>]
  Return the details of a particular domain.

getResults <domain> <query> [<fields> [<size> [<start> [<fieldurl> [<viewurl> [<sortfield> [<order>]]]]]]]
  Executes a query and returns a list of results.

getFacetedResults <domain> <query> [<fields> [<size> [<start> [<fieldurl> [<viewurl> [<sortfield> [<order> [<facetcount> [<facetfields>]]]]]]]]]
  Executes a query and returns a list of results including facets.

getEntries <domain> <entryids> [<fields> [<fieldurl> [<viewurl>]]]
  Search for entries in a domain and returns the values for some of the
  fields of these entries.

getDomainsReferencedInDomain <domain>
  Returns the list of domains with entries referenced in a particular domain.
  These domains are indexed in the EB-eye.

getDomainsReferencedInEntry <domain> <entryid>
  Returns the list of domains with entries referenced in a particular domain
  entry. These domains are indexed in the EB-eye.

getReferencedEntries <domain> <entryids> <referencedDomain> [<fields> [<size> [<start> [<fieldurl> [<viewurl>]]]]]
  Returns the list of referenced entry identifiers from a domain referenced
  in a particular domain entry.

Options:
  --baseUrl <url>       Service base URL
  --quiet               Decrease output level
  --verbose             Increase output level
  --debugLevel <level>  Debug output level (0 = off)
  --help                Show this message

Support/Feedback:

  http://www.ebi.ac.uk/support/
"""
