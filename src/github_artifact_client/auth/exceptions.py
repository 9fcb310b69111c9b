"""Custom exceptions for account configuration and credential resolution.

These errors are raised while an account is being turned into a request
template, which happens once at construction time. They never surface from
``download``.

Example:
    ```python
    from github_artifact_client.auth.exceptions import CredentialFileError

    try:
        credentials = GitHubArtifactCredentials(account, client)
    except CredentialFileError as e:
        print(f"Cannot read credential file {e.path}: {e}")
    ```
"""

from pathlib import Path


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class ConfigurationError(CredentialError):
    """Raised when an account configuration cannot be used.

    Example:
        ```python
        try:
            account = GitHubArtifactAccount.from_mapping({"token": "abc"})
        except ConfigurationError as e:
            print(f"Bad account configuration: {e}")
        ```
    """

    pass


class CredentialFileError(ConfigurationError):
    """Raised when a credential file cannot be read or holds no secret.

    Attributes:
        path: The expanded path of the credential file (if known).
    """

    def __init__(self, message: str, path: str | Path | None = None):
        """Initialize CredentialFileError.

        Args:
            message: Error message describing the read failure.
            path: Optional path of the offending file.
        """
        super().__init__(message)
        self.path = str(path) if path is not None else None
