"""Exceptions raised while stamping credentials onto a request.

Authentication failures are never retried: the executor surfaces them to the
caller on the attempt that produced them.

Example:
    ```python
    from anamericano_client.auth.exceptions import AuthError

    try:
        await client.check_permission(req)
    except AuthError:
        prompt_for_login()
    ```
"""

from anamericano_client.errors.exceptions import AnamericanoError


class AuthError(AnamericanoError):
    """Base exception for authentication errors.

    All authenticator-specific exceptions inherit from this class,
    making it easy to catch any credential-related failure.
    """

    pass


class EmptyTokenError(AuthError):
    """Raised when an authenticator resolves an empty token.

    Attributes:
        source: Where the token was expected to come from (if known).

    Example:
        ```python
        try:
            await BearerTokenAuth("").authenticate(request, RequestContext())
        except EmptyTokenError as e:
            print(f"No token from {e.source}")
        ```
    """

    def __init__(self, message: str, source: str | None = None):
        """Initialize EmptyTokenError.

        Args:
            message: Error message describing which token is empty.
            source: Optional description of the token source for reference.
        """
        super().__init__(message)
        self.source = source


class TokenProviderError(AuthError):
    """Raised when a token provider fails to produce a token.

    The provider's original exception is available as ``__cause__``.
    """

    pass


class MissingContextTokenError(AuthError):
    """Raised when a request context carries no usable token."""

    pass


class CredentialNotFoundError(AuthError):
    """Raised when ``CredentialTokenProvider`` finds no token in any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(AuthError):
    """Raised when a configured token file exists but cannot be read."""

    pass
