# =============================================================================
# core/clojars.py  -  Clojars repository client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers version questions about a Clojars artifact by fetching its
#   maven-metadata.xml from the repository host and scanning it.
#
# HOW A LOOKUP WORKS:
#   1. DependencyRef.metadata_path builds the path
#        metosin/reitit      -> /metosin/reitit/maven-metadata.xml
#        org.clojure/clojure -> /org/clojure/clojure/maven-metadata.xml
#   2. One GET against the repository host (no caching, no retries)
#   3. core/metadata.py extracts the values the lookup needs
#
# FAILURES:
#   HTTP 404                  -> DependencyNotFoundError
#   any other httpx.HTTPError -> ClojarsAPIError
#   no release/latest marker  -> MetadataError (propagates, see exceptions.py)
#
# LIFECYCLE:
#   ClojarsClient owns one httpx.AsyncClient for its lifetime.  Use it as an
#   async context manager; the HTTP client is opened on entry and closed on
#   exit.
# =============================================================================

import logging

import httpx

from core.config import Settings
from core.exceptions import ClojarsAPIError, DependencyNotFoundError
from core.metadata import extract_latest_version, extract_versions
from core.models import (
    DependencyRef,
    LatestVersionResult,
    VersionCheckResult,
    VersionHistoryResult,
)

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 10


class ClojarsClient:
    """Async client for the Clojars Maven repository."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or Settings()
        self._transport = transport
        self._headers = {"Accept": "application/json"}
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ClojarsClient":
        """Open the HTTP client."""
        kwargs = {}
        if self.settings.timeout_seconds is not None:
            kwargs["timeout"] = self.settings.timeout_seconds
        self.client = httpx.AsyncClient(
            headers=self._headers,
            follow_redirects=True,
            transport=self._transport,
            **kwargs,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client.  Safe to call more than once."""
        if self.client:
            await self.client.aclose()
            self.client = None

    def metadata_url(self, ref: DependencyRef) -> str:
        """Absolute URL of the artifact's maven-metadata.xml.

        Built as one string so that a path starting with "//" (a group that
        is empty or starts with ".") stays a path and is not read as a host.
        """
        return f"{self.settings.repo_url}{ref.metadata_path}"

    async def fetch_metadata(self, ref: DependencyRef) -> str:
        """GET the artifact's maven-metadata.xml and return the body text.

        Raises:
            DependencyNotFoundError: on a 404 response.
            ClojarsAPIError: on any other HTTP-layer failure.
        """
        if self.client is None:
            raise RuntimeError("ClojarsClient used outside of 'async with'")

        url = self.metadata_url(ref)
        logger.debug("GET %s", url)
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise DependencyNotFoundError(ref) from e
            # httpx appends a second line pointing at MDN docs.
            raise ClojarsAPIError(str(e).splitlines()[0]) from e
        except httpx.HTTPError as e:
            raise ClojarsAPIError(str(e)) from e
        return response.text

    async def get_latest_version(self, ref: DependencyRef) -> LatestVersionResult:
        """Latest released version of an artifact (<release>, else <latest>)."""
        body = await self.fetch_metadata(ref)
        return LatestVersionResult(
            dependency=ref.coordinate,
            latest_version=extract_latest_version(body),
        )

    async def check_version_exists(self, ref: DependencyRef, version: str) -> VersionCheckResult:
        """Whether `version` appears verbatim among the artifact's <version> tags."""
        body = await self.fetch_metadata(ref)
        return VersionCheckResult(
            dependency=ref.coordinate,
            version=version,
            exists=version in extract_versions(body),
        )

    async def get_version_history(
        self, ref: DependencyRef, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> VersionHistoryResult:
        """Most recent versions of an artifact, newest first.

        maven-metadata.xml lists versions oldest first, so the list is
        reversed before it is cut down to `limit` entries.
        """
        body = await self.fetch_metadata(ref)
        versions = extract_versions(body)
        return VersionHistoryResult(
            dependency=ref.coordinate,
            recent_versions=list(reversed(versions))[:limit],
            total_versions=len(versions),
        )
