"""Token provider that resolves the API token from several sources.

The client itself never reads the environment. This provider is opt-in: a
caller that wants environment or file based credentials builds one and wraps
it in ``DynamicTokenAuth``.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Token file (path given directly or via an environment variable)
4. Default value

Example:
    ```python
    from anamericano_client.auth import CredentialTokenProvider, DynamicTokenAuth

    provider = CredentialTokenProvider(
        env_var_name="ANAMERICANO_TOKEN",
        file_path="~/.config/anamericano/token",
    )
    client = PermissionClient(DynamicTokenAuth(provider))
    ```

Security Considerations:
    - Tokens are never logged (masked with ***)
    - Only source information is logged (env var name, file path, etc.)
    - File-based tokens have whitespace stripped
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from anamericano_client.auth.context import RequestContext
from anamericano_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialTokenProvider:
    """Resolve a bearer token from multiple sources with priority ordering.

    Every call to ``get_token`` re-resolves, so a rotated environment value
    or token file is picked up on the next attempt.

    Args:
        value: Explicit token (highest priority).
        env_var_name: Environment variable holding the token.
        file_path: File containing the token. Supports ~ and $VAR expansion.
        file_env_var_name: Environment variable holding the token file path,
            used when ``file_path`` is not given.
        default: Fallback token.
        dotenv_path: Path to .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a .env file at construction.
    """

    def __init__(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        file_path: str | Path | None = None,
        file_env_var_name: str | None = None,
        default: str | None = None,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        self._value = value
        self._env_var_name = env_var_name
        self._file_path = file_path
        self._file_env_var_name = file_env_var_name
        self._default = default

        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Ensure .env file is loaded (thread-safe, once)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for token resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Mark as attempted either way
            self._dotenv_loaded = True

    def get_token(self, context: RequestContext) -> str:
        """Return the resolved token.

        Raises:
            CredentialNotFoundError: If no source yields a token.
            CredentialFileError: If a configured token file cannot be read.
        """
        return self.resolve(required=True)

    def resolve(self, *, required: bool = False) -> str | None:
        """Resolve the token from the configured sources.

        Args:
            required: If True, raises CredentialNotFoundError when no
                source yields a token.

        Returns:
            Resolved token, or None if not found and not required.
        """
        result = None
        source = None

        if self._value is not None:
            result = self._value
            source = "explicit parameter"

        elif self._env_var_name and self._env_var_name in os.environ:
            result = os.environ[self._env_var_name]
            source = f"environment variable '{self._env_var_name}'"

        else:
            result = self._resolve_from_file()
            if result is not None:
                source = "token file"
            elif self._default is not None:
                result = self._default
                source = "default value"

        if result is not None:
            logger.debug(f"Resolved token from {source}: ***")

        if required and not result:
            error_msg = "Required token not found"
            if self._env_var_name:
                error_msg += f" (checked env var: {self._env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=self._env_var_name)

        return result

    def _resolve_from_file(self) -> str | None:
        path_to_use = None

        if self._file_path is not None:
            path_to_use = str(self._file_path)
        elif self._file_env_var_name:
            path_to_use = os.environ.get(self._file_env_var_name) or None

        if path_to_use is None:
            return None

        expanded_path = os.path.expanduser(os.path.expandvars(path_to_use))
        path_obj = Path(expanded_path)

        try:
            content = path_obj.read_text().strip()
            logger.debug(f"Resolved token from file: {path_obj} (***)")
            return content

        except FileNotFoundError:
            logger.debug(f"Token file not found: {path_obj}")
            return None

        except PermissionError:
            raise CredentialFileError(f"Permission denied reading token file: {path_obj}") from None

        except OSError as e:
            raise CredentialFileError(f"Error reading token file {path_obj}: {e}") from e
