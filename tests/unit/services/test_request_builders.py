"""
Unit Tests for Request URL Construction.

Expected URLs are spelled out in full: parameter order, empty parameters
and the absence of percent-encoding are all part of the contract with the
service.
"""

import pytest

from ebisearch.core.exceptions import UsageError
from ebisearch.services.request_builders import (
    BUILDERS,
    DEFAULT_DOMAIN,
    SIGNATURES,
    MethodSignature,
    build_request_url,
)

BASE = "http://test/rest"


class TestMethodSignature:
    """Tests for positional argument binding."""

    @pytest.fixture
    def signature(self) -> MethodSignature:
        return MethodSignature(required=("domain",), optional=(("fields", ""), ("size", "10")))

    def test_names(self, signature):
        assert signature.names == ("domain", "fields", "size")

    def test_fills_defaults(self, signature):
        assert signature.bind("m", ["uniprot"]) == {
            "domain": "uniprot",
            "fields": "",
            "size": "10",
        }

    def test_positional_order(self, signature):
        assert signature.bind("m", ["uniprot", "id", "5"]) == {
            "domain": "uniprot",
            "fields": "id",
            "size": "5",
        }

    def test_missing_required_raises(self, signature):
        with pytest.raises(UsageError, match="domain"):
            signature.bind("getSomething", [])

    def test_extra_arguments_are_ignored(self, signature):
        bound = signature.bind("m", ["uniprot", "id", "5", "surplus"])
        assert "surplus" not in bound.values()


class TestRegistry:
    """Every method has a signature and a builder."""

    def test_same_methods(self):
        assert set(SIGNATURES) == set(BUILDERS)
        assert len(SIGNATURES) == 8

    def test_unknown_method_raises(self):
        with pytest.raises(KeyError):
            build_request_url("getEverything", BASE, [])


class TestDomainUrls:
    """Tests for domain listing URLs."""

    def test_domain_hierarchy(self):
        assert build_request_url("getDomainHierarchy", BASE, []) == BASE

    def test_domain_details_default(self):
        assert build_request_url("getDomainDetails", BASE, []) == f"{BASE}/{DEFAULT_DOMAIN}"

    def test_domain_details_empty_argument_uses_default(self):
        assert build_request_url("getDomainDetails", BASE, [""]) == f"{BASE}/allebi"

    def test_domain_details(self):
        assert build_request_url("getDomainDetails", BASE, ["uniprot"]) == f"{BASE}/uniprot"

    def test_domains_referenced_in_domain(self):
        url = build_request_url("getDomainsReferencedInDomain", BASE, ["uniprot"])
        assert url == f"{BASE}/uniprot/xref"

    def test_domains_referenced_in_entry(self):
        url = build_request_url("getDomainsReferencedInEntry", BASE, ["uniprot", "P38398"])
        assert url == f"{BASE}/uniprot/entry/P38398/xref/"


class TestSearchUrls:
    """Tests for search URLs."""

    def test_results_minimal(self):
        url = build_request_url("getResults", BASE, ["uniprot", "brca1"])
        assert url == (
            f"{BASE}/uniprot?query=brca1&fields=&size=&start="
            "&viewurl=&fieldurl=&sortfield=&order=&facetcount=0"
        )

    def test_results_full(self):
        url = build_request_url(
            "getResults",
            BASE,
            ["uniprot", "brca1", "id,name", "10", "0", "true", "false", "id", "descending"],
        )
        assert url == (
            f"{BASE}/uniprot?query=brca1&fields=id,name&size=10&start=0"
            "&viewurl=false&fieldurl=true&sortfield=id&order=descending&facetcount=0"
        )

    def test_query_is_not_encoded(self):
        url = build_request_url("getResults", BASE, ["uniprot", "brca1 AND human"])
        assert "?query=brca1 AND human&" in url

    def test_results_missing_query(self):
        with pytest.raises(UsageError, match="query"):
            build_request_url("getResults", BASE, ["uniprot"])

    def test_faceted_results_minimal(self):
        url = build_request_url("getFacetedResults", BASE, ["uniprot", "brca1"])
        assert url == (
            f"{BASE}/uniprot?query=brca1&fields=&size=&start="
            "&viewurl=&fieldurl=&sortfield=&order=&facetcount=10&facetfields="
        )

    def test_faceted_results_full(self):
        url = build_request_url(
            "getFacetedResults",
            BASE,
            [
                "uniprot", "brca1", "id", "10", "0", "true", "false",
                "id", "ascending", "5", "TAXONOMY",
            ],
        )
        assert url == (
            f"{BASE}/uniprot?query=brca1&fields=id&size=10&start=0"
            "&viewurl=false&fieldurl=true&sortfield=id&order=ascending"
            "&facetcount=5&facetfields=TAXONOMY"
        )


class TestEntryUrls:
    """Tests for entry and cross-reference URLs."""

    def test_entries_minimal(self):
        url = build_request_url("getEntries", BASE, ["uniprot", "P38398"])
        assert url == f"{BASE}/uniprot/entry/P38398?fields=&viewurl=&fieldurl="

    def test_entries_full(self):
        url = build_request_url(
            "getEntries", BASE, ["uniprot", "P38398,P12345", "id,name", "true", "false"],
        )
        assert url == f"{BASE}/uniprot/entry/P38398,P12345?fields=id,name&viewurl=false&fieldurl=true"

    def test_referenced_entries_minimal(self):
        url = build_request_url("getReferencedEntries", BASE, ["uniprot", "P38398", "interpro"])
        assert url == (
            f"{BASE}/uniprot/entry/P38398/xref/interpro"
            "?fields=&start=&size=&fieldurl=&viewurl="
        )

    def test_referenced_entries_full(self):
        url = build_request_url(
            "getReferencedEntries",
            BASE,
            ["uniprot", "P38398", "interpro", "id,name", "20", "5", "true", "false"],
        )
        assert url == (
            f"{BASE}/uniprot/entry/P38398/xref/interpro"
            "?fields=id,name&start=5&size=20&fieldurl=true&viewurl=false"
        )

    def test_referenced_entries_missing_domain(self):
        with pytest.raises(UsageError, match="referenced_domain"):
            build_request_url("getReferencedEntries", BASE, ["uniprot", "P38398"])
