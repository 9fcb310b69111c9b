"""Error handling for artifact retrieval."""

from github_artifact_client.errors.exceptions import (
    ArtifactError,
    ClientError,
    ForbiddenError,
    MetadataParseError,
    NotFoundError,
    RateLimitError,
    RetrievalError,
    ServerError,
    UnauthorizedError,
)
from github_artifact_client.errors.handler import raise_for_empty_body, raise_for_status
from github_artifact_client.errors.models import ContentMetadata, GitHubErrorDetail

__all__ = [
    "ArtifactError",
    "ClientError",
    "ContentMetadata",
    "ForbiddenError",
    "GitHubErrorDetail",
    "MetadataParseError",
    "NotFoundError",
    "RateLimitError",
    "RetrievalError",
    "ServerError",
    "UnauthorizedError",
    "raise_for_empty_body",
    "raise_for_status",
]
