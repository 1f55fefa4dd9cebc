"""
Search Service.

One method per EBI Search REST operation. Each builds the request URL,
performs the GET through the injected SearchClient, deserializes the XML
and returns a typed response model.

Usage:
    from ebisearch.services.search import SearchService

    with SearchClient(timeout=options.timeout) as client:
        service = SearchService(client, options)
        tree = service.get_domain_details("uniprot")
"""

from collections.abc import Sequence
from typing import Any

from ebisearch.client.deserializer import parse_xml
from ebisearch.client.transport import SearchClient
from ebisearch.core.config import ClientOptions
from ebisearch.core.logging import debug_message, get_logger
from ebisearch.schemas.domain import DomainList, DomainTree
from ebisearch.schemas.entry import ResultSet
from ebisearch.services.request_builders import build_request_url


class SearchService:
    """
    Access to the search service for one invocation.

    Provides:
    - URL construction against the configured base URL
    - Deserialization into DomainTree, DomainList or ResultSet
    - Debug logging per operation

    The client and options are passed in; the service holds no other state.
    """

    def __init__(self, client: SearchClient, options: ClientOptions) -> None:
        """
        Initialize the service.

        Args:
            client: Transport used for every request
            options: Base URL and verbosity of this invocation
        """
        self._client = client
        self._options = options
        self._logger = get_logger(self.__class__.__module__)

    def _fetch(self, method: str, args: Sequence[str]) -> Any:
        debug_message(self._logger, method, "Begin", 1)
        url = build_request_url(method, self._options.base_url, args)
        document = parse_xml(self._client.get_text(url))
        debug_message(self._logger, method, "End", 1)
        return document

    def get_domain_hierarchy(self, *args: str) -> DomainTree:
        """Hierarchy of all domains."""
        return DomainTree.parse(self._fetch("getDomainHierarchy", args))

    def get_domain_details(self, *args: str) -> DomainTree:
        """Details of a domain (default ``allebi``) and its subdomains."""
        return DomainTree.parse(self._fetch("getDomainDetails", args))

    def get_results(self, *args: str) -> ResultSet:
        """Search a domain."""
        return ResultSet.parse(self._fetch("getResults", args))

    def get_faceted_results(self, *args: str) -> ResultSet:
        """Search a domain, including facets."""
        return ResultSet.parse(self._fetch("getFacetedResults", args))

    def get_entries(self, *args: str) -> ResultSet:
        """Fetch entries by identifier."""
        return ResultSet.parse(self._fetch("getEntries", args))

    def get_domains_referenced_in_domain(self, *args: str) -> DomainList:
        """Domains with entries referenced from a domain."""
        return DomainList.parse(self._fetch("getDomainsReferencedInDomain", args))

    def get_domains_referenced_in_entry(self, *args: str) -> DomainList:
        """Domains with entries referenced from an entry."""
        return DomainList.parse(self._fetch("getDomainsReferencedInEntry", args))

    def get_referenced_entries(self, *args: str) -> ResultSet:
        """Entries of another domain referenced from the given entries."""
        return ResultSet.parse(self._fetch("getReferencedEntries", args))
