"""Account configuration for GitHub artifact credentials.

An account carries up to four credential sources. They are alternatives:
only one of them is ever used, see ``github_artifact_client.auth``.

Accounts can be built three ways:
1. Directly, ``GitHubArtifactAccount(name="main", token="...")``
2. From a configuration mapping (snake_case or camelCase keys)
3. From environment variables, after loading a .env file (python-dotenv)

Example:
    ```python
    from github_artifact_client.config import GitHubArtifactAccount

    account = GitHubArtifactAccount.from_mapping(
        {"name": "github-main", "tokenFile": "~/.config/github/token"}
    )

    # GITHUB_ARTIFACT_TOKEN=... in the environment or .env
    account = GitHubArtifactAccount.from_env("github-main")
    ```
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from threading import Lock
from typing import Any

from dotenv import load_dotenv as _load_dotenv

from github_artifact_client.auth.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "GITHUB_ARTIFACT_"

# Configuration keys accepted by from_mapping, mapped to field names
_FIELD_ALIASES = {
    "name": "name",
    "username": "username",
    "password": "password",
    "username_password_file": "username_password_file",
    "usernamePasswordFile": "username_password_file",
    "token": "token",
    "token_file": "token_file",
    "tokenFile": "token_file",
}

# Environment variable suffixes read by from_env
_ENV_FIELDS = {
    "USERNAME": "username",
    "PASSWORD": "password",
    "USERNAME_PASSWORD_FILE": "username_password_file",
    "TOKEN": "token",
    "TOKEN_FILE": "token_file",
}

_dotenv_loaded_paths: set[str | None] = set()
_dotenv_lock = Lock()


def ensure_dotenv_loaded(dotenv_path: str | None = None) -> None:
    """Load a .env file once per process (thread-safe).

    Each distinct ``dotenv_path`` is loaded once; None stands for the
    default ``.env`` lookup. Existing variables are never overridden, so
    when several files set the same variable the first one loaded wins.

    Load failures are logged and otherwise ignored; the environment is
    used as-is in that case.
    """
    if dotenv_path in _dotenv_loaded_paths:
        return

    with _dotenv_lock:
        # Double-check pattern for thread safety
        if dotenv_path in _dotenv_loaded_paths:
            return

        try:
            _load_dotenv(dotenv_path=dotenv_path)
            logger.debug(f"Loaded .env file {dotenv_path or '(default)'} for account configuration")
        except Exception as e:
            logger.warning(f"Failed to load .env file {dotenv_path or '(default)'}: {e}")
        _dotenv_loaded_paths.add(dotenv_path)


def _blank_to_none(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value)
    return value if value else None


@dataclass(frozen=True)
class GitHubArtifactAccount:
    """A configured GitHub artifact account.

    Empty strings are normalized to None, so "configured" always means
    "present and non-empty".

    Attributes:
        name: Account name, used in log messages and by callers for lookup.
        username: Inline username (used together with password).
        password: Inline password (used together with username).
        username_password_file: Path to a file holding "username:password".
        token: Inline personal access token.
        token_file: Path to a file holding a personal access token.
    """

    name: str
    username: str | None = None
    password: str | None = None
    username_password_file: str | None = None
    token: str | None = None
    token_file: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not str(self.name).strip():
            raise ConfigurationError("GitHub artifact account requires a name")
        for field_name in _ENV_FIELDS.values():
            object.__setattr__(self, field_name, _blank_to_none(getattr(self, field_name)))

    def __repr__(self) -> str:
        # Secrets stay out of reprs and therefore out of logs
        return (
            f"GitHubArtifactAccount(name={self.name!r}, "
            f"username={self.username!r}, "
            f"password={'***' if self.password else None}, "
            f"username_password_file={self.username_password_file!r}, "
            f"token={'***' if self.token else None}, "
            f"token_file={self.token_file!r})"
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GitHubArtifactAccount":
        """Build an account from a configuration mapping.

        Accepts snake_case field names as well as the camelCase keys
        ``usernamePasswordFile`` and ``tokenFile``. Unknown keys are ignored.

        Raises:
            ConfigurationError: If the name is missing or blank.
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            field_name = _FIELD_ALIASES.get(key)
            if field_name is None:
                logger.debug(f"Ignoring unknown account configuration key '{key}'")
                continue
            kwargs[field_name] = value

        if "name" not in kwargs:
            raise ConfigurationError("GitHub artifact account requires a name")

        return cls(**kwargs)

    @classmethod
    def from_env(
        cls,
        name: str,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ) -> "GitHubArtifactAccount":
        """Build an account from environment variables.

        Reads ``<prefix>USERNAME``, ``<prefix>PASSWORD``,
        ``<prefix>USERNAME_PASSWORD_FILE``, ``<prefix>TOKEN`` and
        ``<prefix>TOKEN_FILE``.

        Args:
            name: Account name.
            prefix: Environment variable prefix.
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file before reading.
        """
        if load_dotenv:
            ensure_dotenv_loaded(dotenv_path)

        kwargs = {}
        for suffix, field_name in _ENV_FIELDS.items():
            env_var_name = f"{prefix}{suffix}"
            if env_var_name in os.environ:
                kwargs[field_name] = os.environ[env_var_name]
                logger.debug(f"Read account setting from environment variable '{env_var_name}'")

        return cls(name=name, **kwargs)
