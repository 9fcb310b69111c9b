"""Authentication components for GitHub artifact accounts.

This module provides:
- Credential source selection with a fixed precedence
  (token file → username/password file → token → username/password)
- File-based secrets with ~ and $VAR path expansion
- A read-only request template carrying at most one Authorization header

Example:
    ```python
    from github_artifact_client.auth import CredentialResolver

    resolver = CredentialResolver()
    headers = resolver.resolve_headers(account)
    ```
"""

from github_artifact_client.auth.credentials import (
    AUTHORIZATION_HEADER,
    AuthSource,
    BasicAuth,
    CredentialResolver,
    NoAuth,
    TokenAuth,
    TokenFileAuth,
    UsernamePasswordFileAuth,
    read_credential_file,
    select_auth_source,
)
from github_artifact_client.auth.exceptions import (
    ConfigurationError,
    CredentialError,
    CredentialFileError,
)

__all__ = [
    "AUTHORIZATION_HEADER",
    "AuthSource",
    "BasicAuth",
    "ConfigurationError",
    "CredentialError",
    "CredentialFileError",
    "CredentialResolver",
    "NoAuth",
    "TokenAuth",
    "TokenFileAuth",
    "UsernamePasswordFileAuth",
    "read_credential_file",
    "select_auth_source",
]
