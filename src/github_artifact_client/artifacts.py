"""Artifact descriptors and downloaded content streams."""

from collections.abc import AsyncIterator
from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class Artifact:
    """A reference to a specific versioned file.

    Attributes:
        reference: URL of the file's metadata endpoint, e.g.
            ``https://api.github.com/repos/owner/repo/contents/path/to/file``.
        version: Branch, tag or commit sent as the ``ref`` query parameter.
            When None or empty, the repository's default branch is used.
        type: Artifact type tag, e.g. ``github/file``.
        name: Optional display name, used in log messages.
    """

    reference: str
    version: str | None = None
    type: str | None = None
    name: str | None = None


class ArtifactStream:
    """The raw content of a downloaded artifact.

    Wraps an open streaming response. The caller owns it and must close it,
    preferably with ``async with``:

    Example:
        ```python
        async with await credentials.download(artifact) as stream:
            async for chunk in stream:
                sink.write(chunk)
        ```

    The stream is single-pass: its bytes can be iterated or read once.
    """

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def url(self) -> str:
        """URL the content was downloaded from."""
        return str(self._response.url)

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def is_closed(self) -> bool:
        return self._response.is_closed

    def aiter_bytes(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        """Iterate over the decoded content in chunks."""
        return self._response.aiter_bytes(chunk_size=chunk_size)

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.aiter_bytes()

    async def aread(self) -> bytes:
        """Read the whole remaining content into memory."""
        return await self._response.aread()

    async def aclose(self) -> None:
        """Close the underlying response and release its connection."""
        await self._response.aclose()

    async def __aenter__(self) -> "ArtifactStream":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<ArtifactStream [{self.status_code}] {self.url}>"
