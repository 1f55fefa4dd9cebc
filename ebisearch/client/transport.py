"""
HTTP Transport for the EBI Search REST service.

Issues plain GET requests and hands back the decoded response text.
Every request carries an identifying User-Agent header; compressed
responses are advertised and decoded by httpx; proxy settings are taken
from the standard environment variables (HTTP_PROXY, HTTPS_PROXY,
NO_PROXY, ALL_PROXY).

An HTTP error status is fatal: the message shown to the user is built
from the status line plus the first <h1> (HTML error page) or
<description> (XML error document) found in the body.
"""

import platform
import re
import sys
from pathlib import Path
from typing import Any

import httpx

from ebisearch.core.config import get_app_config
from ebisearch.core.exceptions import ServiceError, TransportError
from ebisearch.core.logging import debug_message, get_logger, log_with_source

logger = get_logger(__name__)

_HTML_HEADING = re.compile(r"<h1>([^<]+)</h1>")
_XML_DESCRIPTION = re.compile(r"<description>([^<]+)</description>")


def build_user_agent(client_name: str | None = None, revision: int | None = None) -> str:
    """
    Build the User-Agent header value.

    Format: ``<client>/<revision> (<script>; <platform>) python-httpx/<version>``.
    Client name and revision default to the service section of
    application.yaml.
    """
    if client_name is None or revision is None:
        service = get_app_config().application.service
        client_name = client_name if client_name is not None else service.client_name
        revision = revision if revision is not None else service.revision
    script_name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "ebisearch"
    return (
        f"{client_name}/{revision} ({script_name}; {platform.system()}) "
        f"python-httpx/{httpx.__version__}"
    )


def extract_error_message(body: str) -> str:
    """Return the first <h1> text, else the first <description> text, else ''."""
    match = _HTML_HEADING.search(body) or _XML_DESCRIPTION.search(body)
    return match.group(1) if match else ""


def raise_for_error(response: httpx.Response) -> None:
    """
    Raise ServiceError if the response carries an HTTP error status.

    Raises:
        ServiceError: For any 4xx or 5xx status
    """
    if not response.is_error:
        return
    detail = extract_error_message(response.text)
    reason = response.reason_phrase
    raise ServiceError(
        f"http status: {response.status_code} {reason}  {detail}",
        status_code=response.status_code,
        reason=reason,
        detail=detail,
    )


class SearchClient:
    """
    HTTP client for the search service.

    Features:
    - Identifying User-Agent header
    - Transparent gzip/deflate decoding (br/zstd when installed)
    - Proxy configuration from the environment
    - Structured logging of requests/responses, gated by debug level

    One instance serves one CLI invocation:

        with SearchClient(timeout=30.0) as client:
            xml_text = client.get_text("http://.../uniprot")
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds.
            user_agent: User-Agent header. Built from application.yaml if None.
            transport: Alternative httpx transport, e.g. httpx.MockTransport in tests.
        """
        self.timeout = timeout
        self.user_agent = user_agent or build_user_agent()
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            debug_message(logger, "_get_client", "Creating HTTP client", 21)
            self._client = httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
                trust_env=True,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "SearchClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """
        Perform a GET request and check the status.

        Args:
            url: Fully formed request URL
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            ServiceError: On an HTTP error status
            TransportError: When no response was received
        """
        client = self._get_client()

        debug_message(logger, "get", f"URL: {url}", 11)

        try:
            response = client.get(url, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "Request failed",
                url=url,
                error=str(e),
            )
            raise TransportError(f"Request to {url} failed: {e}") from e

        debug_message(logger, "get", f"HTTP status: {response.status_code}", 11)
        debug_message(logger, "get", f"response length: {len(response.content)}", 11)
        debug_message(
            logger, "get", "request headers", 32,
            headers=dict(response.request.headers),
        )
        debug_message(
            logger, "get", "response headers", 32,
            headers=dict(response.headers),
        )

        raise_for_error(response)
        return response

    def get_text(self, url: str) -> str:
        """GET ``url`` and return the decoded body."""
        response = self.get(url)
        text = response.text
        debug_message(logger, "get_text", f"retVal: {text}", 12)
        return text
