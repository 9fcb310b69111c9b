"""Structured exceptions for artifact retrieval errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from github_artifact_client.errors.models import GitHubErrorDetail


class ArtifactError(Exception):
    """Base exception for artifact retrieval errors."""

    pass


class RetrievalError(ArtifactError):
    """An HTTP call made while retrieving an artifact did not complete.

    Raised for transport failures (``status_code`` is None), non-success
    responses and responses without a body.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        detail: "GitHubErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.response = response
        self.detail = detail


class ClientError(RetrievalError):
    """4xx client errors."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests, or 403 with the rate limit exhausted."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(RetrievalError):
    """5xx server errors."""

    pass


class MetadataParseError(ArtifactError):
    """The metadata response is not a JSON object with a ``download_url``."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url
