"""Request execution for the permission client.

Modules:
    retry: Retry decisions and linear backoff schedule
    executor: Encode-once, authenticate, send, classify, retry loop

Example:
    ```python
    from anamericano_client.transport import RequestExecutor, RetryPolicy

    executor = RequestExecutor(
        http_client=httpx.AsyncClient(),
        base_url="https://accounts.ana.st",
        policy=RetryPolicy(max_retries=3),
        logger=NULL_LOGGER,
    )
    ```
"""

from anamericano_client.transport.executor import RequestExecutor, decode_body, encode_body
from anamericano_client.transport.retry import RetryPolicy

__all__ = ["RequestExecutor", "RetryPolicy", "decode_body", "encode_body"]
