"""
Thin PokéAPI v2 client. Issues one GET per lookup and hands back the raw
response text, without parsing or caching it.
"""

import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Optional
from urllib.parse import quote

import requests

from pokemon_tools.config import Settings
from pokemon_tools.models import ErrorKind, LookupResult, ToolKind, ToolRequest

logger = logging.getLogger(__name__)


class PokemonAPIClient:
    """
    Shared HTTP client for PokéAPI v2.

    Built once at startup and only read afterwards, so a single instance can
    serve concurrent tool calls. Every failure is returned as a LookupResult
    instead of being raised.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or Settings()
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": self.settings.user_agent,
            }
        )
        # Calls must not carry state from earlier responses (e.g. Set-Cookie)
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    def __enter__(self) -> "PokemonAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get_url(self, kind: ToolKind, identifier: str) -> str:
        # Encode everything, including "/", so the name stays one path segment
        return f"{self.settings.base_url}{kind.value}/{quote(identifier, safe='')}"

    def lookup(self, request: ToolRequest) -> LookupResult:
        """
        Fetches one resource and returns its body verbatim.

        Args:
            request: The tool kind and the name as given by the caller.

        Returns:
            LookupResult: The body on a 2xx response, otherwise the error kind
            (not_found for 404, http_error for other statuses, transport for
            everything else).
        """
        url = self._get_url(request.tool_kind, request.normalized_name)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
            if response.encoding is None:
                # JSON is UTF-8 unless the server says otherwise
                response.encoding = "utf-8"
            return LookupResult.success(response.text)
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            kind = ErrorKind.NOT_FOUND if status == 404 else ErrorKind.HTTP_ERROR
            logger.warning("%s lookup failed (%s, HTTP %s): %s", request.tool_kind, kind, status, url)
            return LookupResult.failure(kind, f"HTTP {status} for {url}")
        except requests.exceptions.RequestException as e:
            logger.warning("%s lookup failed (transport): %s: %s", request.tool_kind, url, e)
            return LookupResult.failure(ErrorKind.TRANSPORT, f"Request Error for {url}: {e}")
        except Exception as e:
            logger.warning("%s lookup failed (unexpected): %s: %s", request.tool_kind, url, e)
            return LookupResult.failure(ErrorKind.TRANSPORT, str(e))
