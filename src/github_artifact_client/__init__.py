"""GitHub Artifact Client - authenticated downloads of versioned files from GitHub.

This library provides:
- Credential resolution with a fixed precedence across token files,
  username/password files, inline tokens and inline username/password
- Two-step downloads through the GitHub contents API (metadata, then content)
- Structured retrieval errors mapped from HTTP status codes
- Testing utilities for faking the contents API

Example:
    ```python
    import httpx

    from github_artifact_client import Artifact, GitHubArtifactAccount, GitHubArtifactCredentials

    account = GitHubArtifactAccount.from_env("github-main")

    async with httpx.AsyncClient() as client:
        credentials = GitHubArtifactCredentials(account, client)
        async with await credentials.download(
            Artifact(reference="https://api.github.com/repos/o/r/contents/f", version="main")
        ) as stream:
            content = await stream.aread()
    ```
"""

from github_artifact_client.artifacts import Artifact, ArtifactStream
from github_artifact_client.client import ArtifactCredentials, GitHubArtifactCredentials
from github_artifact_client.config import GitHubArtifactAccount

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "ArtifactCredentials",
    "ArtifactStream",
    "GitHubArtifactAccount",
    "GitHubArtifactCredentials",
    "__version__",
]
