"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Sample responses:
    The XML documents below follow the shape of real EBI Search REST
    responses, trimmed to the elements the client reads. Single children
    are used on purpose wherever a list is expected, so tests notice when
    an element is not forced into a list.
"""

import logging
from collections.abc import Callable, Generator
from types import SimpleNamespace

import httpx
import pytest

from ebisearch.client.transport import SearchClient
from ebisearch.core.config import ClientOptions, get_app_config, get_settings
from ebisearch.core.logging import setup_logging

TEST_BASE_URL = "http://test.ebi.ac.uk/ebisearch/ws/rest"


# =============================================================================
# Sample Responses
# =============================================================================


DOMAIN_HIERARCHY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<result>
  <domains>
    <domain id="allebi" name="All results">
      <subdomains>
        <domain id="genomes" name="Genomes">
          <subdomains>
            <domain id="ensembl" name="Ensembl"/>
          </subdomains>
        </domain>
        <domain id="uniprot" name="UniProtKB"/>
      </subdomains>
    </domain>
  </domains>
</result>
"""

DOMAIN_DETAILS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<result>
  <domains>
    <domain id="uniprot" name="UniProtKB">
      <indexInfos>
        <indexInfo name="entries">558898</indexInfo>
        <indexInfo name="lastUpdated">2014-01-08</indexInfo>
      </indexInfos>
      <fieldInfos>
        <fieldInfo id="id">
          <options>
            <option name="searchable">true</option>
            <option name="retrievable">true</option>
            <option name="sortable">false</option>
            <option name="facet">false</option>
          </options>
        </fieldInfo>
      </fieldInfos>
    </domain>
  </domains>
</result>
"""

RESULTS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<result>
  <hitCount>2</hitCount>
  <entries>
    <entry id="P38398" source="uniprot">
      <fields>
        <field id="id">
          <values>
            <value>BRCA1_HUMAN</value>
          </values>
        </field>
        <field id="description">
          <values/>
        </field>
      </fields>
      <fieldURLs>
        <fieldURL name="main">http://www.uniprot.org/uniprot/P38398</fieldURL>
      </fieldURLs>
      <viewURLs>
        <viewURL name="fasta">http://www.uniprot.org/uniprot/P38398.fasta</viewURL>
      </viewURLs>
    </entry>
    <entry id="P12345" source="uniprot">
      <fields>
        <field id="id">
          <values>
            <value>AATM_RABIT</value>
          </values>
        </field>
        <field id="description">
          <values>
            <value>Aspartate aminotransferase</value>
          </values>
        </field>
      </fields>
    </entry>
  </entries>
</result>
"""

SINGLE_ENTRY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<result>
  <hitCount>1</hitCount>
  <entries>
    <entry id="P38398" source="uniprot">
      <fields>
        <field id="name">
          <values>
            <value>BRCA1_HUMAN</value>
          </values>
        </field>
      </fields>
    </entry>
  </entries>
</result>
"""

FACETED_RESULTS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<result>
  <hitCount>1</hitCount>
  <entries>
    <entry id="P38398" source="uniprot">
      <fields>
        <field id="id">
          <values>
            <value>BRCA1_HUMAN</value>
          </values>
        </field>
      </fields>
    </entry>
  </entries>
  <facets>
    <facet id="TAXONOMY" label="Organisms">
      <total>1</total>
      <facetValues>
        <facetValue>
          <label>Homo sapiens</label>
          <value>9606</value>
          <count>40</count>
        </facetValue>
      </facetValues>
    </facet>
  </facets>
</result>
"""

DOMAIN_REFS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<result>
  <domains>
    <domain id="interpro" name="InterPro"/>
    <domain id="pdb" name="PDBe"/>
  </domains>
</result>
"""

REFERENCED_ENTRIES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<result>
  <entries>
    <entry id="P38398" source="uniprot">
      <references>
        <reference id="IPR011364" source="interpro">
          <fields>
            <field id="name">
              <values>
                <value>BRCA1</value>
              </values>
            </field>
          </fields>
        </reference>
      </references>
    </entry>
  </entries>
</result>
"""

NOT_FOUND_HTML = "<html><head><title>404</title></head><body><h1>Not Found</h1></body></html>"

INVALID_QUERY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<error>
  <description>Invalid query</description>
</error>
"""


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_config() -> Generator[None, None, None]:
    """Clear cached configuration so environment overrides are re-read."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _quiet_logging() -> Generator[None, None, None]:
    """
    Route logging through the project setup at WARNING.

    Handlers are removed afterwards; CliRunner swaps sys.stderr per
    invocation and a handler must not outlive the stream it writes to.
    """
    setup_logging(level="WARNING")
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)


# =============================================================================
# Client Fixtures
# =============================================================================


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def samples() -> SimpleNamespace:
    """
    Sample response bodies.

    Usage:
        def test_details(samples):
            document = parse_xml(samples.domain_details)
    """
    return SimpleNamespace(
        domain_hierarchy=DOMAIN_HIERARCHY_XML,
        domain_details=DOMAIN_DETAILS_XML,
        results=RESULTS_XML,
        single_entry=SINGLE_ENTRY_XML,
        faceted_results=FACETED_RESULTS_XML,
        domain_refs=DOMAIN_REFS_XML,
        referenced_entries=REFERENCED_ENTRIES_XML,
        not_found_html=NOT_FOUND_HTML,
        invalid_query_xml=INVALID_QUERY_XML,
    )


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL


@pytest.fixture
def client_options() -> ClientOptions:
    """Options pointing at a fake service."""
    return ClientOptions(base_url=TEST_BASE_URL, timeout=5.0)


@pytest.fixture
def make_client() -> Generator[Callable[[Handler], SearchClient], None, None]:
    """
    Factory for SearchClients backed by httpx.MockTransport.

    Usage:
        def test_get(make_client):
            client = make_client(lambda request: httpx.Response(200, text="<result/>"))
            assert client.get_text("http://x") == "<result/>"
    """
    created: list[SearchClient] = []

    def factory(handler: Handler) -> SearchClient:
        client = SearchClient(
            timeout=5.0,
            user_agent="EBI-Sample-Client/test",
            transport=httpx.MockTransport(handler),
        )
        created.append(client)
        return client

    yield factory

    for client in created:
        client.close()
