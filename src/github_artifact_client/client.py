"""Artifact credentials for files hosted on GitHub.

Downloading a file takes two requests, both sent with the account's
request template:

1. ``GET <reference>?ref=<version>`` returns the file's metadata
2. ``GET <download_url>`` from that metadata returns the raw content

Example:
    ```python
    import httpx

    from github_artifact_client import Artifact, GitHubArtifactAccount, GitHubArtifactCredentials

    account = GitHubArtifactAccount(name="github-main", token_file="~/.config/github/token")

    async with httpx.AsyncClient() as client:
        credentials = GitHubArtifactCredentials(account, client)
        artifact = Artifact(
            reference="https://api.github.com/repos/owner/repo/contents/deploy.yml",
            version="main",
        )
        async with await credentials.download(artifact) as stream:
            content = await stream.aread()
    ```
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

import httpx

from github_artifact_client.artifacts import Artifact, ArtifactStream
from github_artifact_client.auth.credentials import AUTHORIZATION_HEADER, CredentialResolver
from github_artifact_client.config import GitHubArtifactAccount
from github_artifact_client.errors.exceptions import RetrievalError
from github_artifact_client.errors.handler import raise_for_empty_body, raise_for_status
from github_artifact_client.errors.models import ContentMetadata

logger = logging.getLogger(__name__)


class ArtifactCredentials(ABC):
    """Base class for account-bound artifact downloaders.

    Subclasses declare which artifact type tags they handle and how to
    download an artifact of that type.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the account these credentials belong to."""

    @abstractmethod
    def handles_type(self, type_tag: str) -> bool:
        """Whether these credentials can download artifacts of this type."""

    @abstractmethod
    async def download(self, artifact: Artifact) -> ArtifactStream:
        """Download an artifact and return its content as an open stream."""


class GitHubArtifactCredentials(ArtifactCredentials):
    """Download ``github/file`` artifacts with one account's credentials.

    Credentials are resolved once, at construction. The resulting headers
    are read-only and shared by every request, so one instance can serve
    concurrent downloads.

    Args:
        account: The account configuration.
        client: HTTP client used for all requests. Timeouts, retries and
            connection pooling are configured on it by the caller.
        resolver: Credential resolver (default: ``CredentialResolver()``).
        follow_redirects: Whether both requests follow redirects, e.g. the
            301 GitHub returns for a renamed repository (default: True).
            Authorization is dropped when a redirect leaves the origin.

    Raises:
        CredentialFileError: If the selected credential file cannot be read.
    """

    ARTIFACT_TYPE = "github/file"

    def __init__(
        self,
        account: GitHubArtifactAccount,
        client: httpx.AsyncClient,
        *,
        resolver: CredentialResolver | None = None,
        follow_redirects: bool = True,
    ) -> None:
        self._name = account.name
        self._client = client
        self._follow_redirects = follow_redirects
        self._headers = (resolver or CredentialResolver()).resolve_headers(account)

        if AUTHORIZATION_HEADER in self._headers:
            logger.info(f"Loaded credentials for GitHub artifact account {self._name}")
        else:
            logger.info(f"No credentials included with GitHub artifact account {self._name}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def headers(self) -> Mapping[str, str]:
        """The read-only request template shared by all requests."""
        return self._headers

    def handles_type(self, type_tag: str) -> bool:
        return type_tag == self.ARTIFACT_TYPE

    async def _send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        """Send a request, turning transport failures into RetrievalError."""
        logger.debug(f"Requesting {request.method} {request.url}")
        try:
            return await self._client.send(request, stream=stream, follow_redirects=self._follow_redirects)
        except httpx.HTTPError as e:
            raise RetrievalError(
                f"Request {request.method} {request.url} failed: {e}", url=str(request.url)
            ) from e

    def _build_request(self, url: str, ref: str | None = None) -> httpx.Request:
        try:
            request_url = httpx.URL(url)
            if ref:
                # Appended to any query the URL already carries
                request_url = request_url.copy_add_param("ref", ref)
            return self._client.build_request("GET", request_url, headers=dict(self._headers))
        except httpx.InvalidURL as e:
            raise RetrievalError(f"Invalid URL {url!r}: {e}", url=url) from e

    async def fetch_metadata(self, artifact: Artifact) -> ContentMetadata:
        """Fetch the metadata of the file an artifact refers to.

        Raises:
            RetrievalError: If the request fails or returns no body.
            MetadataParseError: If the body has no ``download_url``.
        """
        request = self._build_request(artifact.reference, ref=artifact.version)
        response = await self._send(request)

        raise_for_status(response)
        raise_for_empty_body(response)

        return ContentMetadata.from_response(response)

    async def open_download(self, download_url: str) -> ArtifactStream:
        """Open a streaming request for a file's raw content.

        Raises:
            RetrievalError: If the request fails. The failed response is
                closed before raising.
        """
        request = self._build_request(download_url)
        response = await self._send(request, stream=True)

        if not response.is_success:
            try:
                await response.aread()
            except httpx.HTTPError as e:
                raise RetrievalError(
                    f"HTTP {response.status_code} from {request.url}, body unreadable: {e}",
                    url=str(request.url),
                    status_code=response.status_code,
                    response=response,
                ) from e
            finally:
                await response.aclose()
            raise_for_status(response)

        return ArtifactStream(response)

    async def download(self, artifact: Artifact) -> ArtifactStream:
        """Download the raw content of a versioned file.

        The returned stream has not been read; the caller must close it.

        Raises:
            RetrievalError: If either request fails.
            MetadataParseError: If the metadata has no ``download_url``.
        """
        metadata = await self.fetch_metadata(artifact)
        stream = await self.open_download(metadata.download_url)

        logger.info(
            f"Downloaded from GitHub metadata URL {artifact.reference} (ref {artifact.version}) "
            f"download URL {metadata.download_url} for artifact {artifact.name or artifact.reference}"
        )
        return stream
