"""A helper to create asynchronous HTTP client (via `httpx.AsyncClient`)
with common configurations.
"""

from httpx import AsyncClient, Limits, Timeout


def create_http_client(
    user_agent: str,
    max_connections: int = 16,
    request_timeout: float = 12.0,
    connect_timeout: float = 12.0,
    follow_redirects: bool = True,
) -> AsyncClient:
    """Create a new `httpx.AsyncClient` with common configurations.

    Args:
      - `user_agent` {str}: The User-Agent header sent with every request.
      - `max_connections` {int}: Max connections of the connection pool.
      - `request_timeout` {float}: The timeout (seconds) for handling a request to the host.
      - `connect_timeout` {float}: The timeout (seconds) for establishing a connection.
      - `follow_redirects` {bool}: Whether redirects are followed transparently.
    Returns:
      - {AsyncClient}: An async HTTP client.
    """
    return AsyncClient(
        headers={"User-Agent": user_agent},
        limits=Limits(max_connections=max_connections),
        timeout=Timeout(request_timeout, connect=connect_timeout),
        follow_redirects=follow_redirects,
    )
