"""
Request Builders.

One URL builder per service method. Arguments are inserted into the path
and query string verbatim, without percent-encoding, and query parameters
are always emitted in the order the service documents them, including
empty ones.

Usage:
    from ebisearch.services.request_builders import build_request_url

    url = build_request_url(
        "getResults", "http://host/rest", ["uniprot", "brca1", "id,name"],
    )
    # http://host/rest/uniprot?query=brca1&fields=id,name&size=&start=
    #     &viewurl=&fieldurl=&sortfield=&order=&facetcount=0
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ebisearch.core.exceptions import UsageError
from ebisearch.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DOMAIN = "allebi"
DEFAULT_FACET_COUNT = "10"


@dataclass(frozen=True)
class MethodSignature:
    """Positional arguments of a method: required names, then optional (name, default)."""

    required: tuple[str, ...] = ()
    optional: tuple[tuple[str, str], ...] = ()

    @property
    def names(self) -> tuple[str, ...]:
        return self.required + tuple(name for name, _ in self.optional)

    def bind(self, method: str, args: Sequence[str]) -> dict[str, str]:
        """
        Map positional arguments to names, filling defaults for omitted ones.

        Raises:
            UsageError: If a required argument is missing
        """
        if len(args) < len(self.required):
            missing = ", ".join(self.required[len(args):])
            raise UsageError(f"{method}: missing argument(s): {missing}")
        if len(args) > len(self.names):
            logger.warning(
                "Ignoring extra arguments",
                method=method,
                extra_args=list(args[len(self.names):]),
            )
        bound = dict(zip(self.required, args))
        for index, (name, default) in enumerate(self.optional, start=len(self.required)):
            bound[name] = args[index] if index < len(args) else default
        return bound


def _query(*params: tuple[str, str]) -> str:
    return "?" + "&".join(f"{name}={value}" for name, value in params)


def domain_hierarchy_url(base_url: str) -> str:
    return base_url


def domain_details_url(base_url: str, domain: str = DEFAULT_DOMAIN) -> str:
    return f"{base_url}/{domain or DEFAULT_DOMAIN}"


def results_url(
    base_url: str,
    domain: str,
    query: str,
    fields: str = "",
    size: str = "",
    start: str = "",
    fieldurl: str = "",
    viewurl: str = "",
    sortfield: str = "",
    order: str = "",
) -> str:
    return f"{base_url}/{domain}" + _query(
        ("query", query),
        ("fields", fields),
        ("size", size),
        ("start", start),
        ("viewurl", viewurl),
        ("fieldurl", fieldurl),
        ("sortfield", sortfield),
        ("order", order),
        ("facetcount", "0"),
    )


def faceted_results_url(
    base_url: str,
    domain: str,
    query: str,
    fields: str = "",
    size: str = "",
    start: str = "",
    fieldurl: str = "",
    viewurl: str = "",
    sortfield: str = "",
    order: str = "",
    facetcount: str = DEFAULT_FACET_COUNT,
    facetfields: str = "",
) -> str:
    return f"{base_url}/{domain}" + _query(
        ("query", query),
        ("fields", fields),
        ("size", size),
        ("start", start),
        ("viewurl", viewurl),
        ("fieldurl", fieldurl),
        ("sortfield", sortfield),
        ("order", order),
        ("facetcount", facetcount),
        ("facetfields", facetfields),
    )


def entries_url(
    base_url: str,
    domain: str,
    entryid: str,
    fields: str = "",
    fieldurl: str = "",
    viewurl: str = "",
) -> str:
    return f"{base_url}/{domain}/entry/{entryid}" + _query(
        ("fields", fields),
        ("viewurl", viewurl),
        ("fieldurl", fieldurl),
    )


def domains_referenced_in_domain_url(base_url: str, domain: str) -> str:
    return f"{base_url}/{domain}/xref"


def domains_referenced_in_entry_url(base_url: str, domain: str, entryid: str) -> str:
    return f"{base_url}/{domain}/entry/{entryid}/xref/"


def referenced_entries_url(
    base_url: str,
    domain: str,
    entryids: str,
    referenced_domain: str,
    fields: str = "",
    size: str = "",
    start: str = "",
    fieldurl: str = "",
    viewurl: str = "",
) -> str:
    return f"{base_url}/{domain}/entry/{entryids}/xref/{referenced_domain}" + _query(
        ("fields", fields),
        ("start", start),
        ("size", size),
        ("fieldurl", fieldurl),
        ("viewurl", viewurl),
    )


_SEARCH_OPTIONAL = (
    ("fields", ""),
    ("size", ""),
    ("start", ""),
    ("fieldurl", ""),
    ("viewurl", ""),
    ("sortfield", ""),
    ("order", ""),
)

SIGNATURES: dict[str, MethodSignature] = {
    "getDomainHierarchy": MethodSignature(),
    "getDomainDetails": MethodSignature(optional=(("domain", DEFAULT_DOMAIN),)),
    "getResults": MethodSignature(
        required=("domain", "query"),
        optional=_SEARCH_OPTIONAL,
    ),
    "getFacetedResults": MethodSignature(
        required=("domain", "query"),
        optional=_SEARCH_OPTIONAL + (
            ("facetcount", DEFAULT_FACET_COUNT),
            ("facetfields", ""),
        ),
    ),
    "getEntries": MethodSignature(
        required=("domain", "entryid"),
        optional=(("fields", ""), ("fieldurl", ""), ("viewurl", "")),
    ),
    "getDomainsReferencedInDomain": MethodSignature(required=("domain",)),
    "getDomainsReferencedInEntry": MethodSignature(required=("domain", "entryid")),
    "getReferencedEntries": MethodSignature(
        required=("domain", "entryids", "referenced_domain"),
        optional=(
            ("fields", ""),
            ("size", ""),
            ("start", ""),
            ("fieldurl", ""),
            ("viewurl", ""),
        ),
    ),
}

BUILDERS: dict[str, Callable[..., str]] = {
    "getDomainHierarchy": domain_hierarchy_url,
    "getDomainDetails": domain_details_url,
    "getResults": results_url,
    "getFacetedResults": faceted_results_url,
    "getEntries": entries_url,
    "getDomainsReferencedInDomain": domains_referenced_in_domain_url,
    "getDomainsReferencedInEntry": domains_referenced_in_entry_url,
    "getReferencedEntries": referenced_entries_url,
}


def build_request_url(method: str, base_url: str, args: Sequence[str]) -> str:
    """
    Build the request URL of ``method`` from its positional arguments.

    Raises:
        KeyError: If the method is unknown
        UsageError: If a required argument is missing
    """
    signature = SIGNATURES[method]
    return BUILDERS[method](base_url, **signature.bind(method, args))
