"""Response body models for the GitHub contents API."""

import json
from dataclasses import dataclass
from typing import Any

import httpx

from github_artifact_client.errors.exceptions import MetadataParseError


def request_url(response: httpx.Response) -> str | None:
    """Return the URL of the request behind a response, if it has one."""
    try:
        return str(response.request.url)
    except RuntimeError:
        # Responses built by hand have no request attached
        return None


@dataclass(frozen=True)
class ContentMetadata:
    """File metadata returned by the contents endpoint.

    Only ``download_url`` is used; every other field is ignored.

    See: https://docs.github.com/en/rest/repos/contents
    """

    download_url: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ContentMetadata":
        """Parse content metadata from a metadata response.

        Raises:
            MetadataParseError: If the body is not a JSON object or the
                ``download_url`` field is missing, empty or not a string.
        """
        url = request_url(response)

        try:
            data = json.loads(response.content)
        except ValueError as e:
            raise MetadataParseError(f"Metadata response is not valid JSON: {e}", url=url) from e

        if not isinstance(data, dict):
            raise MetadataParseError(
                f"Metadata response is not a JSON object (got {type(data).__name__})", url=url
            )

        download_url = data.get("download_url")
        if not isinstance(download_url, str) or not download_url:
            # Directories and submodules have a null download_url
            raise MetadataParseError("Metadata response has no download_url", url=url)

        return cls(download_url=download_url)


@dataclass
class GitHubErrorDetail:
    """Error body returned by the GitHub API.

    GitHub errors carry a ``message`` and usually a ``documentation_url``;
    validation failures add an ``errors`` list.
    """

    message: str | None = None
    documentation_url: str | None = None
    errors: list[Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "GitHubErrorDetail | None":
        """Parse a GitHub error body from an HTTP response.

        Args:
            response: HTTP response object (its body must already be read)

        Returns:
            GitHubErrorDetail object or None if the body is not a GitHub error
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, type errors, or missing .json() method
            return None

        if not isinstance(data, dict) or "message" not in data:
            return None

        errors = data.get("errors")
        return cls(
            message=data.get("message"),
            documentation_url=data.get("documentation_url"),
            errors=errors if isinstance(errors, list) else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        lines = []

        if self.message:
            lines.append(self.message)

        if self.errors:
            lines.append("Errors:")
            for error in self.errors:
                lines.append(f"  - {error}")

        if self.documentation_url:
            lines.append(f"Documentation: {self.documentation_url}")

        return "\n".join(lines) if lines else "Unknown GitHub API error"
