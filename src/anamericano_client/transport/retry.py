"""Retry policy for the permission request executor.

The policy decides two things for the executor: whether a failed attempt is
worth repeating, and how long to wait before the next one.

## Retry Decisions

| Failure | Retried | Why |
|---------|---------|-----|
| Transport error (connect, read, timeout, body decoding) | ✅ | Network faults are transient |
| 5xx server error | ✅ | Server-side transience |
| 429 Too Many Requests | ✅ | Rate limiting; the backoff absorbs it |
| Other 4xx | ❌ | Repeating an unchanged bad request cannot succeed |
| Authentication failure | ❌ | Credentials will not fix themselves |
| Malformed error body / undecodable success body | ❌ | Contract violation, not a transient fault |

## Backoff

Linear: attempt N (1-indexed retry) waits ``retry_delay * N`` seconds, so
the default sequence is 1, 2, 3 seconds. With ``respect_retry_after``, a
429 response's Retry-After value replaces the linear delay, capped at
``max_backoff``.

Example:
    ```python
    policy = RetryPolicy(max_retries=5, retry_delay=0.5)
    policy.backoff_delay(3)  # 1.5
    ```
"""

from dataclasses import dataclass

from anamericano_client.errors.exceptions import (
    AnamericanoError,
    APIError,
    RateLimitError,
    TransportError,
)


@dataclass(frozen=True)
class RetryPolicy:
    """Attempt budget and linear backoff schedule.

    Args:
        max_retries: Maximum number of retries after the first attempt (default: 3)
        retry_delay: Base delay in seconds, multiplied by the retry number (default: 1.0)
        respect_retry_after: Honor Retry-After on 429 responses (default: False)
        max_backoff: Cap in seconds for Retry-After delays (default: 60)
    """

    max_retries: int = 3
    retry_delay: float = 1.0
    respect_retry_after: bool = False
    max_backoff: float = 60.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must not be negative, got {self.max_retries}")
        if self.retry_delay < 0:
            raise ValueError(f"retry_delay must not be negative, got {self.retry_delay}")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    @staticmethod
    def is_retryable_status(status_code: int) -> bool:
        """Client errors are terminal except 429; everything else non-2xx is retried."""
        return not (400 <= status_code < 500 and status_code != 429)

    def is_retryable(self, error: AnamericanoError) -> bool:
        """Determine if the error recorded for an attempt warrants another one.

        Args:
            error: Exception produced by the attempt

        Returns:
            True if should retry, False otherwise
        """
        if isinstance(error, TransportError):
            return True
        if isinstance(error, APIError) and error.status_code is not None:
            return self.is_retryable_status(error.status_code)
        return False

    def backoff_delay(self, retry_number: int, last_error: AnamericanoError | None = None) -> float:
        """Calculate the delay before a retry.

        Args:
            retry_number: Current retry attempt (1-indexed)
            last_error: Error recorded on the previous attempt

        Returns:
            Delay in seconds
        """
        if (
            self.respect_retry_after
            and isinstance(last_error, RateLimitError)
            and last_error.retry_after is not None
        ):
            return min(last_error.retry_after, self.max_backoff)
        return self.retry_delay * retry_number
