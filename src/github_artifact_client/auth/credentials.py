"""Credential resolution for GitHub artifact accounts.

An account may configure several credential sources at once, but only one
of them is ever used. The sources are checked in a fixed order and the first
configured one wins:

1. Token file (``token_file``)
2. Username/password file (``username_password_file``)
3. Inline token (``token``)
4. Inline username and password (``username`` + ``password``)
5. Nothing configured: requests are sent unauthenticated

Each source is a variant of ``AuthSource``. ``select_auth_source`` picks the
variant and ``CredentialResolver`` renders it into the request template, a
read-only header mapping that is reused for every request of the account.

Example:
    ```python
    from github_artifact_client.auth import CredentialResolver

    headers = CredentialResolver().resolve_headers(account)
    # {"Authorization": "token ghp_..."} or {}
    ```

Security Considerations:
    - Credentials are never logged (masked with ***)
    - Only source information is logged (source kind, file path)
    - Newline characters are removed from file-based credentials
    - Unreadable or empty credential files raise CredentialFileError
"""

import base64
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from github_artifact_client.auth.exceptions import CredentialFileError

if TYPE_CHECKING:
    from github_artifact_client.config import GitHubArtifactAccount

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


def read_credential_file(file_path: str | Path) -> str:
    """Read a secret from a credential file.

    The path supports ``~`` and ``$VAR`` expansion. Newline characters are
    removed from the contents; any other characters are kept as-is.

    Args:
        file_path: Path to the file holding the secret.

    Returns:
        The file contents without newline characters.

    Raises:
        CredentialFileError: If the file cannot be read, or holds nothing
            once newlines are removed.
    """
    expanded_path = os.path.expanduser(os.path.expandvars(str(file_path)))
    path_obj = Path(expanded_path)

    try:
        content = path_obj.read_text()
    except FileNotFoundError:
        raise CredentialFileError(f"Credential file not found: {path_obj}", path=path_obj) from None
    except PermissionError:
        raise CredentialFileError(
            f"Permission denied reading credential file: {path_obj}", path=path_obj
        ) from None
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialFileError(f"Error reading credential file {path_obj}: {e}", path=path_obj) from e

    secret = content.replace("\r", "").replace("\n", "")
    if not secret:
        raise CredentialFileError(f"Credential file is empty: {path_obj}", path=path_obj)

    logger.debug(f"Read credential from file: {path_obj} (***)")
    return secret


def _basic(credential: str) -> str:
    return "Basic " + base64.b64encode(credential.encode("utf-8")).decode("ascii")


@dataclass(frozen=True)
class AuthSource:
    """Base class for the mutually exclusive credential sources."""

    description = "no credentials"

    def header_value(self) -> str | None:
        """Render the Authorization header value, or None for no header."""
        return None


@dataclass(frozen=True)
class TokenFileAuth(AuthSource):
    """Token read from a file, sent as ``token <secret>``."""

    path: str

    description = "token file"

    def header_value(self) -> str:
        return "token " + read_credential_file(self.path)


@dataclass(frozen=True)
class UsernamePasswordFileAuth(AuthSource):
    """``username:password`` read from a file, sent as HTTP Basic.

    The whole file content (without newlines) is encoded; its internal
    format is not checked.
    """

    path: str

    description = "username/password file"

    def header_value(self) -> str:
        return _basic(read_credential_file(self.path))


@dataclass(frozen=True, repr=False)
class TokenAuth(AuthSource):
    """Inline token, sent as ``token <secret>``."""

    token: str

    description = "token"

    def __repr__(self) -> str:
        return "TokenAuth(token=***)"

    def header_value(self) -> str:
        return "token " + self.token


@dataclass(frozen=True, repr=False)
class BasicAuth(AuthSource):
    """Inline username and password, sent as HTTP Basic."""

    username: str
    password: str

    description = "username/password"

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r}, password=***)"

    def header_value(self) -> str:
        return _basic(f"{self.username}:{self.password}")


@dataclass(frozen=True)
class NoAuth(AuthSource):
    """No credentials configured."""


def select_auth_source(account: "GitHubArtifactAccount") -> AuthSource:
    """Pick the single credential source an account uses.

    Resolution order (first match wins):
    1. ``token_file``
    2. ``username_password_file``
    3. ``token``
    4. ``username`` and ``password`` (both required)
    5. ``NoAuth``

    Selection does not touch the filesystem; files are read when the
    source is rendered.
    """
    if account.token_file:
        return TokenFileAuth(path=account.token_file)
    if account.username_password_file:
        return UsernamePasswordFileAuth(path=account.username_password_file)
    if account.token:
        return TokenAuth(token=account.token)
    if account.username and account.password:
        return BasicAuth(username=account.username, password=account.password)
    return NoAuth()


class CredentialResolver:
    """Turn an account configuration into a request template.

    Example:
        ```python
        resolver = CredentialResolver()
        headers = resolver.resolve_headers(account)
        request = client.build_request("GET", url, headers=headers)
        ```
    """

    def _mask_credential(self, value: str | None) -> str:
        """Mask a credential value for safe logging.

        Args:
            value: The credential value to mask.

        Returns:
            Masked string ("***") if value exists, "None" otherwise.
        """
        if value is None:
            return "None"
        return "***"

    def resolve_auth_header(self, account: "GitHubArtifactAccount") -> str | None:
        """Resolve the Authorization header value for an account.

        Returns:
            The header value, or None when no credentials are configured.

        Raises:
            CredentialFileError: If the selected credential file cannot be
                read or is empty.
        """
        source = select_auth_source(account)
        header = source.header_value()
        logger.debug(
            f"Resolved credentials for GitHub artifact account '{account.name}' "
            f"from {source.description}: {self._mask_credential(header)}"
        )
        return header

    def resolve_headers(self, account: "GitHubArtifactAccount") -> Mapping[str, str]:
        """Resolve the read-only default headers for an account.

        Returns:
            A mapping holding at most one ``Authorization`` header.

        Raises:
            CredentialFileError: If the selected credential file cannot be
                read or is empty.
        """
        header = self.resolve_auth_header(account)
        headers = {AUTHORIZATION_HEADER: header} if header is not None else {}
        return MappingProxyType(headers)
