"""Testing utilities for code that downloads GitHub artifacts.

``FakeContentsAPI`` is an ``httpx.MockTransport`` handler that serves file
metadata and raw content the way the GitHub contents API does, and records
every request it receives.

Example:
    ```python
    import httpx

    from github_artifact_client.testing import FakeContentsAPI


    async def test_downloads_deploy_manifest():
        api = FakeContentsAPI()
        reference = api.add_file("owner/repo", "deploy.yml", b"replicas: 3\n", ref="main")

        async with httpx.AsyncClient(transport=httpx.MockTransport(api)) as client:
            credentials = GitHubArtifactCredentials(account, client)
            stream = await credentials.download(Artifact(reference=reference, version="main"))
            assert await stream.aread() == b"replicas: 3\n"
    ```
"""

from typing import Any

import httpx

API_BASE_URL = "https://api.github.com"
RAW_BASE_URL = "https://raw.githubusercontent.com"

NOT_FOUND_BODY = {
    "message": "Not Found",
    "documentation_url": "https://docs.github.com/rest/repos/contents#get-repository-content",
}


class FakeContentsAPI:
    """In-memory stand-in for the GitHub contents API.

    Canned responses are stored as ``httpx.Response`` keyword arguments and
    a fresh response is built for every request.

    Attributes:
        requests: Every request received, in order.
    """

    def __init__(self, *, api_base_url: str = API_BASE_URL, raw_base_url: str = RAW_BASE_URL):
        self.api_base_url = api_base_url.rstrip("/")
        self.raw_base_url = raw_base_url.rstrip("/")
        self.requests: list[httpx.Request] = []
        self._metadata: dict[tuple[str, str | None], tuple[int, dict[str, Any]]] = {}
        self._content: dict[str, tuple[int, dict[str, Any]]] = {}

    def add_file(self, repo: str, path: str, content: bytes, *, ref: str | None = "main") -> str:
        """Serve a file at a ref; returns the metadata URL to use as reference."""
        reference = f"{self.api_base_url}/repos/{repo}/contents/{path}"
        download_url = f"{self.raw_base_url}/{repo}/{ref or 'HEAD'}/{path}"
        self.add_metadata(
            reference,
            json={
                "type": "file",
                "name": path.rsplit("/", 1)[-1],
                "path": path,
                "size": len(content),
                "download_url": download_url,
            },
            ref=ref,
        )
        self.add_content(download_url, content=content)
        return reference

    def add_metadata(
        self, reference: str, status_code: int = 200, *, ref: str | None = "main", **response_kwargs: Any
    ) -> None:
        """Serve a canned response for a metadata request at a ref."""
        self._metadata[(reference, ref)] = (status_code, response_kwargs)

    def add_content(self, download_url: str, status_code: int = 200, **response_kwargs: Any) -> None:
        """Serve a canned response for a download request."""
        self._content[download_url] = (status_code, response_kwargs)

    def requests_to(self, url_prefix: str) -> list[httpx.Request]:
        """Requests whose URL starts with the given prefix."""
        return [request for request in self.requests if str(request.url).startswith(url_prefix)]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        url = str(request.url)
        reference = url.split("?", 1)[0]
        ref = request.url.params.get("ref")

        if (reference, ref) in self._metadata:
            status_code, response_kwargs = self._metadata[(reference, ref)]
        elif url in self._content:
            status_code, response_kwargs = self._content[url]
        else:
            status_code, response_kwargs = 404, {"json": NOT_FOUND_BODY}

        return httpx.Response(status_code, **response_kwargs)


__all__ = ["API_BASE_URL", "NOT_FOUND_BODY", "RAW_BASE_URL", "FakeContentsAPI"]
